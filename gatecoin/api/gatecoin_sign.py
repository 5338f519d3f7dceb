"""
Gatecoin API 요청 서명.

서명 대상 문자열은 verb + base URL + path + content-type + timestamp 를 구분자 없이 이어 붙여
소문자로 만든 값이며, 여기에 시크릿 키로 HMAC-SHA256 을 적용해 base64 로 인코딩합니다.
GET 요청은 content-type 을 빈 문자열로 서명합니다. 쿼리 문자열과 요청 본문은 서명에 포함되지 않습니다.
"""
import base64
import hashlib
import hmac
import time
from typing import Callable

JSON_CONTENT_TYPE = "application/json"


def request_timestamp(clock: Callable[[], float] = time.time) -> str:
    """epoch(UTC) 기준 초 단위 타임스탬프를 소수점 3자리 문자열로 반환합니다."""
    return f"{clock():.3f}"


def sign(secret: str, url: str, timestamp: str, verb: str, content_type: str, path: str) -> str:
    """요청 서명(base64, 한 줄)을 계산합니다."""
    if verb == "GET":
        content_type = ""
    message = f"{verb}{url}{path}{content_type}{timestamp}".lower()
    digest = hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii").replace("\n", "")
