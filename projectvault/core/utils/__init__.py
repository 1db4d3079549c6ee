"""유틸리티 모듈"""

from projectvault.core.utils.datetime import UTC, now_utc
from projectvault.core.utils.pagination import PageParams
from projectvault.core.utils.time import measure_time

__all__ = [
    "UTC",
    "now_utc",
    "PageParams",
    "measure_time",
]
