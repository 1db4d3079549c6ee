"""미들웨어 모듈"""

from projectvault.core.middlewares.context import (
    RequestIdFilter,
    get_request_id,
    set_request_id,
)
from projectvault.core.middlewares.logging import LoggingMiddleware

__all__ = [
    "LoggingMiddleware",
    "RequestIdFilter",
    "get_request_id",
    "set_request_id",
]
