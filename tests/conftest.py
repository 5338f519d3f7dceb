"""
Pytest configuration and shared fixtures for the Gatecoin client tests.

Provides a fixed clock, a mocked requests session and a factory for real
``requests.Response`` objects so that no test touches the network.
"""

import json
from unittest.mock import Mock

import pytest
import requests

from gatecoin.api.gatecoin_client import GatecoinClient

PUBLIC_KEY = "PUBLICKEY123"
SECRET_KEY = "s3cr3t-KEY"
API_URL = "https://api.gatecoin.com"
FIXED_TIME = 1500000000.123


def build_response(body=None, status_code=200, text=None):
    """Build a real requests.Response carrying a JSON (or raw text) body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = "OK" if status_code < 400 else "Error"
    response.url = API_URL
    content = text if text is not None else json.dumps(body)
    response._content = content.encode("utf-8")
    response.encoding = "utf-8"
    return response


@pytest.fixture
def make_response():
    """Provide the response factory."""
    return build_response


@pytest.fixture
def clock():
    """Provide a clock frozen at FIXED_TIME."""
    return Mock(return_value=FIXED_TIME)


@pytest.fixture
def session():
    """Provide a mocked requests session."""
    return Mock(spec=requests.Session)


@pytest.fixture
def client(session, clock):
    """Provide a client wired to the mocked session and frozen clock."""
    return GatecoinClient(PUBLIC_KEY, SECRET_KEY, session=session, clock=clock)
