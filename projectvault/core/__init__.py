"""Core 모듈"""

from projectvault.core.config import settings
from projectvault.core.database import Base, get_db
from projectvault.core.exceptions import (
    BadRequestException,
    BaseAPIException,
    ErrorCode,
    InternalServerException,
    NotFoundException,
    ServiceUnavailableException,
    StoreUnavailableError,
    UnauthorizedException,
)
from projectvault.core.logging import get_logger, setup_logging

__all__ = [
    "settings",
    "Base",
    "get_db",
    "ErrorCode",
    "BaseAPIException",
    "BadRequestException",
    "UnauthorizedException",
    "NotFoundException",
    "InternalServerException",
    "ServiceUnavailableException",
    "StoreUnavailableError",
    "get_logger",
    "setup_logging",
]
