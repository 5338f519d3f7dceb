import logging

from gatecoin.core.config import settings

# 로거 인스턴스 생성
logger = logging.getLogger("gatecoin")
logger.setLevel(settings.GATECOIN_LOG_LEVEL)
logger.addHandler(logging.NullHandler())

# 포매터 생성
formatter = logging.Formatter("[%(asctime)s][%(levelname)s] %(message)s")

# 스트림 핸들러 (콘솔 출력, GATECOIN_LOG_TO_CONSOLE 설정 시에만)
if settings.GATECOIN_LOG_TO_CONSOLE:
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
