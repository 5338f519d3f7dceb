"""
Gatecoin 응답 판별.

API 는 비즈니스 오류를 HTTP 상태가 아니라 본문의 responseStatus.errorCode / responseStatus.message 로
알려줍니다. 응답마다 한 번 Ok(payload) 또는 Err(message, raw) 로 분류하고, 각 엔드포인트는 그 결과만 봅니다.
"""
from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Ok:
    payload: Any


@dataclass(frozen=True)
class Err:
    # responseStatus.message (없으면 None)
    message: Optional[Any]
    # message 가 없을 때 대신 보여줄 원본 (응답 본문 또는 responseStatus 객체)
    raw: Any

    @property
    def reason(self) -> str:
        """상태 메시지가 있으면 그 값을, 없으면 원본을 문자열로 반환합니다."""
        return str(self.message if self.message is not None else self.raw)


ApiResult = Union[Ok, Err]


def response_status(body: Any) -> Optional[dict]:
    """응답 본문의 responseStatus 객체. 없거나 객체가 아니면 None."""
    if not isinstance(body, dict):
        return None
    status = body.get("responseStatus")
    return status if isinstance(status, dict) else None


def check_status(body: Any) -> ApiResult:
    """responseStatus.errorCode 가 null/false 가 아니면 Err. responseStatus 가 아예 없으면 성공으로 봅니다."""
    status = response_status(body)
    # 0 과 "" 는 오류 코드로 취급
    if status is None or status.get("errorCode") is None or status.get("errorCode") is False:
        return Ok(body)
    return Err(status.get("message"), status)


def require_field(body: Any, field: str) -> ApiResult:
    """필수 필드가 있으면 Ok(필드 값), 없으면 Err(상태 메시지, 응답 본문)."""
    if isinstance(body, dict) and body.get(field) is not None:
        return Ok(body[field])
    status = response_status(body) or {}
    return Err(status.get("message"), body)
