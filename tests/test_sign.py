"""
Signer tests: canonical string construction, GET content-type blanking and
timestamp formatting.
"""

import base64
import hashlib
import hmac

import pytest

from gatecoin.api.gatecoin_sign import JSON_CONTENT_TYPE, request_timestamp, sign

SECRET = "s3cr3t-KEY"
URL = "https://api.gatecoin.com"
TIMESTAMP = "1500000000.123"


def _expected(message):
    digest = hmac.new(SECRET.encode(), message.encode(), hashlib.sha256).digest()
    return base64.b64encode(digest).decode()


class TestSign:
    """Test HMAC-SHA256 request signing."""

    def test_deterministic(self):
        """Same inputs always produce the same signature."""
        first = sign(SECRET, URL, TIMESTAMP, "POST", JSON_CONTENT_TYPE, "/Trade/Orders")
        second = sign(SECRET, URL, TIMESTAMP, "POST", JSON_CONTENT_TYPE, "/Trade/Orders")
        assert first == second

    def test_canonical_string_is_lowercased_concatenation(self):
        """Signed string is verb+url+path+content_type+timestamp, lower-cased, no separators."""
        signature = sign(SECRET, URL, TIMESTAMP, "POST", JSON_CONTENT_TYPE, "/Trade/Orders")
        message = "posthttps://api.gatecoin.com/trade/ordersapplication/json1500000000.123"
        assert signature == _expected(message)

    def test_get_ignores_content_type(self):
        """GET requests sign an empty content type whatever the caller passes."""
        with_type = sign(SECRET, URL, TIMESTAMP, "GET", JSON_CONTENT_TYPE, "/Balance/Balances")
        without_type = sign(SECRET, URL, TIMESTAMP, "GET", "", "/Balance/Balances")
        other_type = sign(SECRET, URL, TIMESTAMP, "GET", "text/plain", "/Balance/Balances")

        assert with_type == without_type == other_type
        assert with_type == _expected("gethttps://api.gatecoin.com/balance/balances1500000000.123")

    def test_delete_keeps_content_type(self):
        """Only GET blanks the content type."""
        with_type = sign(SECRET, URL, TIMESTAMP, "DELETE", JSON_CONTENT_TYPE, "/Trade/Orders/1")
        without_type = sign(SECRET, URL, TIMESTAMP, "DELETE", "", "/Trade/Orders/1")
        assert with_type != without_type

    def test_path_case_does_not_matter(self):
        """Path is lower-cased before signing."""
        upper = sign(SECRET, URL, TIMESTAMP, "DELETE", JSON_CONTENT_TYPE, "/Trade/Orders/BK11234")
        lower = sign(SECRET, URL, TIMESTAMP, "DELETE", JSON_CONTENT_TYPE, "/trade/orders/bk11234")
        assert upper == lower

    def test_timestamp_changes_signature(self):
        """The timestamp is part of the signed string."""
        first = sign(SECRET, URL, "1500000000.123", "GET", "", "/Balance/Balances")
        second = sign(SECRET, URL, "1500000000.124", "GET", "", "/Balance/Balances")
        assert first != second

    def test_single_line_base64(self):
        """Signature is one line of base64 encoding a 32-byte digest."""
        signature = sign(SECRET, URL, TIMESTAMP, "POST", JSON_CONTENT_TYPE, "/Trade/Orders")
        assert "\n" not in signature
        assert len(base64.b64decode(signature)) == 32


class TestRequestTimestamp:
    """Test timestamp formatting."""

    @pytest.mark.parametrize("now, expected", [
        (1500000000.1234, "1500000000.123"),
        (1500000000.0, "1500000000.000"),
        (1500000000.5, "1500000000.500"),
    ])
    def test_three_fractional_digits(self, now, expected):
        """Seconds since epoch with millisecond precision."""
        assert request_timestamp(lambda: now) == expected
