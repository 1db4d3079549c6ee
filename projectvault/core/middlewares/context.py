"""요청 ID 컨텍스트 관리

포털 백엔드가 넘겨준 ``X-Request-ID`` 를 요청 처리 동안 보관하고,
로그 레코드에 ``request_id`` 로 주입합니다.
"""

import contextvars
import logging
import uuid
from typing import Optional

# 요청 ID를 저장하는 컨텍스트 변수
request_id_ctx: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "request_id", default=None
)

# 요청 밖(기동, 마이그레이션 등)에서 남긴 로그의 request_id
NO_REQUEST_ID = "-"


def get_request_id() -> Optional[str]:
    """현재 요청 ID 반환"""
    return request_id_ctx.get()


def set_request_id(request_id: Optional[str] = None) -> str:
    """요청 ID 설정 (없거나 비어 있으면 새로 생성)"""
    if not request_id:
        request_id = uuid.uuid4().hex
    request_id_ctx.set(request_id)
    return request_id


class RequestIdFilter(logging.Filter):
    """로그 레코드에 현재 요청 ID 주입

    ``extra={"request_id": ...}`` 로 직접 넘긴 값이 있으면 그대로 둡니다.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = get_request_id() or NO_REQUEST_ID
        return True
