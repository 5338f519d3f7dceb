import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://api.gatecoin.com"


def _parse_log_level(v) -> int:
    """"DEBUG" / "debug" / "10" / 10 모두 허용. 알 수 없는 값은 WARNING 으로 처리"""
    if isinstance(v, int):
        return v
    text = str(v).strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else logging.WARNING


class Settings(BaseSettings):
    # GatecoinClient.from_settings() 에서 사용. 직접 생성 시에는 읽지 않음
    GATECOIN_PUBLIC_KEY: str = ""
    GATECOIN_SECRET_KEY: str = ""
    GATECOIN_API_URL: str = DEFAULT_API_URL

    # 로깅: 라이브러리이므로 기본은 조용히 (WARNING, 콘솔 출력 없음)
    # 호스트 앱의 LOG_LEVEL 과 겹치지 않도록 GATECOIN_ 접두사 사용
    GATECOIN_LOG_LEVEL: int = logging.WARNING
    GATECOIN_LOG_TO_CONSOLE: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("GATECOIN_LOG_LEVEL", mode="before")
    @classmethod
    def _log_level(cls, v) -> int:
        return _parse_log_level(v)

    @property
    def has_credentials(self) -> bool:
        return bool(self.GATECOIN_PUBLIC_KEY.strip() and self.GATECOIN_SECRET_KEY.strip())


settings = Settings()
