"""
Gatecoin API용 HTTP 세션.
재시도는 하지 않습니다: 실패는 호출자에게 한 번 그대로 전달되고, 재시도 정책은 호출자가 정합니다.
타임아웃도 requests 기본값을 따릅니다.
"""
import requests
from requests.adapters import HTTPAdapter


def get_gatecoin_session() -> requests.Session:
    """Gatecoin API 호출용 Session (재시도 없음)."""
    session = requests.Session()
    adapter = HTTPAdapter(max_retries=0)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session
