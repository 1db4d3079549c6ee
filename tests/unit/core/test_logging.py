"""로깅 / 요청 컨텍스트 단위 테스트"""

import logging

from projectvault.core.logging import DEV_LOG_FORMAT, ColoredFormatter
from projectvault.core.middlewares.context import (
    NO_REQUEST_ID,
    RequestIdFilter,
    get_request_id,
    request_id_ctx,
    set_request_id,
)


def _record(message: str = "stale") -> logging.LogRecord:
    return logging.LogRecord(
        "projectvault", logging.WARNING, __file__, 1, message, None, None
    )


class TestColoredFormatter:
    """ColoredFormatter 테스트"""

    def test_restores_levelname(self):
        """포맷 후 레코드의 levelname 은 원래 값으로 복구"""
        formatter = ColoredFormatter(fmt=DEV_LOG_FORMAT)
        record = _record()
        RequestIdFilter().filter(record)

        output = formatter.format(record)

        assert "\033[33m" in output
        assert "stale" in output
        assert record.levelname == "WARNING"


class TestRequestIdFilter:
    """RequestIdFilter 테스트"""

    def test_injects_current_request_id(self):
        token = request_id_ctx.set("portal-req-7")
        try:
            record = _record()
            assert RequestIdFilter().filter(record) is True
            assert record.request_id == "portal-req-7"
        finally:
            request_id_ctx.reset(token)

    def test_placeholder_outside_request(self):
        token = request_id_ctx.set(None)
        try:
            record = _record()
            RequestIdFilter().filter(record)
            assert record.request_id == NO_REQUEST_ID
        finally:
            request_id_ctx.reset(token)

    def test_keeps_explicit_request_id(self):
        """extra 로 넘긴 request_id 는 덮어쓰지 않음"""
        token = request_id_ctx.set("portal-req-7")
        try:
            record = _record()
            record.request_id = "batch-job"
            RequestIdFilter().filter(record)
            assert record.request_id == "batch-job"
        finally:
            request_id_ctx.reset(token)

    def test_formatted_line_contains_request_id(self):
        token = request_id_ctx.set("portal-req-9")
        try:
            record = _record()
            RequestIdFilter().filter(record)
            output = logging.Formatter(fmt=DEV_LOG_FORMAT).format(record)
            assert "| portal-req-9 |" in output
        finally:
            request_id_ctx.reset(token)


class TestRequestContext:
    """요청 ID 컨텍스트 테스트"""

    def test_keeps_given_request_id(self):
        token = request_id_ctx.set(None)
        try:
            assert set_request_id("portal-req-1") == "portal-req-1"
            assert get_request_id() == "portal-req-1"
        finally:
            request_id_ctx.reset(token)

    def test_generates_request_id_when_missing(self):
        token = request_id_ctx.set(None)
        try:
            request_id = set_request_id("")
            assert len(request_id) == 32
            assert get_request_id() == request_id
        finally:
            request_id_ctx.reset(token)
