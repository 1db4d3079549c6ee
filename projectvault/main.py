"""ProjectVault 추천 서비스 진입점

``uvicorn projectvault.main:app`` 으로 실행합니다.
"""

from contextlib import asynccontextmanager
from typing import Any, Callable

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from projectvault.api.v1 import api_router as api_v1_router
from projectvault.core.config import settings
from projectvault.core.database import close_db
from projectvault.core.exceptions import (
    BaseAPIException,
    base_exception_handler,
    generic_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from projectvault.core.logging import get_logger, setup_logging
from projectvault.core.middlewares import LoggingMiddleware
from projectvault.core.migration import run_migrations_on_startup
from projectvault.core.schemas import APIResponse
from projectvault.domains.recommendations.cache import get_recommendation_cache

setup_logging()
logger = get_logger(__name__)

# Exception 은 나머지 처리되지 않은 예외 (500)
EXCEPTION_HANDLERS: tuple[tuple[type[Exception], Callable[..., Any]], ...] = (
    (BaseAPIException, base_exception_handler),
    (RequestValidationError, validation_exception_handler),
    (HTTPException, http_exception_handler),
    (Exception, generic_exception_handler),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기

    기동 시 마이그레이션을 적용하고, 종료 시 추천 캐시와 DB 커넥션을 정리합니다.
    """
    logger.info(
        f"🚀 Starting {settings.app_name} ({settings.app_env}) "
        f"| recommendations: limit={settings.recommendation_limit}, "
        f"max_score={settings.recommendation_max_score}, "
        f"cache_ttl={settings.recommendation_cache_ttl_seconds}s"
    )
    run_migrations_on_startup(auto_migrate=settings.auto_migrate)

    yield

    cache = get_recommendation_cache()
    logger.info(
        f"👋 Shutting down {settings.app_name} "
        f"(dropping {len(cache)} cached recommendation sets)"
    )
    cache.clear()
    await close_db()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리"""
    docs_enabled = settings.is_development
    app = FastAPI(
        title=settings.app_name,
        description="학술 프로젝트 포털의 태그 기반 프로젝트 추천 서비스",
        version="0.1.0",
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )

    # 마지막에 추가한 미들웨어가 가장 바깥에서 실행됨
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    for exc_class, handler in EXCEPTION_HANDLERS:
        app.add_exception_handler(exc_class, handler)

    app.include_router(api_v1_router, prefix="/api/v1")
    return app


app = create_app()


@app.get(
    "/health", tags=["Health"], response_model=APIResponse[dict[str, Any]]
)
async def health_check():
    """헬스 체크 (추천 캐시 상태 포함, DB 는 조회하지 않음)"""
    cache = get_recommendation_cache()
    return APIResponse(
        success=True,
        message="OK",
        data={
            "status": "healthy",
            "app_name": settings.app_name,
            "environment": settings.app_env,
            "recommendation_cache": {
                "entries": len(cache),
                "max_entries": cache.max_entries,
                "ttl_seconds": cache.ttl_seconds,
            },
        },
    )
