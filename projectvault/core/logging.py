"""전역 로깅 설정"""

import logging
import sys

from projectvault.core.config import settings

DEV_LOG_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(request_id)s "
    "| %(name)s:%(lineno)d | %(message)s"
)
JSON_LOG_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
    '"request_id": "%(request_id)s", "logger": "%(name)s", '
    '"message": "%(message)s"}'
)


class ColoredFormatter(logging.Formatter):
    """컬러 로그 포맷터 (개발 환경용)"""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # 다른 핸들러와 레코드를 공유하므로 원본 levelname은 복구
        original = record.levelname
        color = self.COLORS.get(original, self.RESET)
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def _build_formatter() -> logging.Formatter:
    """환경별 포맷터 생성

    개발 환경은 컬러 + 상세 정보, 그 외 환경은 로그 수집용 JSON 한 줄 형식.
    """
    if settings.is_development:
        return ColoredFormatter(fmt=DEV_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    return logging.Formatter(fmt=JSON_LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")


def setup_logging() -> None:
    """애플리케이션 로깅 설정"""
    # middlewares 패키지가 이 모듈을 임포트하므로 지연 임포트
    from projectvault.core.middlewares.context import RequestIdFilter

    log_level = logging.DEBUG if settings.debug else logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter())
    handler.setLevel(log_level)
    handler.addFilter(RequestIdFilter())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # 외부 라이브러리 로그 레벨 조정
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.database_echo else logging.WARNING
    )
    logging.getLogger("asyncpg").setLevel(logging.WARNING)
    logging.getLogger("alembic").setLevel(logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """로거 인스턴스 반환

    Args:
        name: 로거 이름 (보통 __name__ 사용)

    Returns:
        logging.Logger: 설정된 로거 인스턴스

    Example::

        from projectvault.core.logging import get_logger
        logger = get_logger(__name__)
        logger.info("Recommendations computed")
    """
    return logging.getLogger(name)
