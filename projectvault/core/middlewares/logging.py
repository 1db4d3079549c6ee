"""요청/응답 로깅 미들웨어"""

from typing import Callable, cast

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from projectvault.core.logging import get_logger
from projectvault.core.middlewares.context import set_request_id
from projectvault.core.utils.time import measure_time

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# 로깅 제외 경로
EXCLUDE_PATHS = {"/health", "/docs", "/redoc", "/openapi.json", "/favicon.ico"}


class LoggingMiddleware(BaseHTTPMiddleware):
    """요청/응답 로깅 및 처리 시간 측정 미들웨어"""

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        if request.url.path in EXCLUDE_PATHS:
            return cast(Response, await call_next(request))

        # 포털이 넘겨준 요청 ID를 이어 쓰고, 없으면 새로 생성
        request_id = set_request_id(request.headers.get(REQUEST_ID_HEADER))
        client = request.client.host if request.client else "unknown"

        logger.info(
            f"→ {request.method} {request.url.path} "
            f"| Client: {client}"
        )

        with measure_time() as timer:
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    f"✗ {request.method} {request.url.path} "
                    f"| Error: {e} | Time: {timer['elapsed_ms']:.2f}ms"
                )
                raise

        process_time = timer["elapsed_ms"]
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.2f}ms"

        ok = response.status_code < 400
        log_method = logger.info if ok else logger.warning
        log_method(
            f"{'✓' if ok else '✗'} {request.method} "
            f"{request.url.path} | Status: {response.status_code} "
            f"| Time: {process_time:.2f}ms"
        )

        return cast(Response, response)
