"""API v1 라우터"""

from typing import Any

from fastapi import APIRouter

from projectvault.core.schemas import APIResponse
from projectvault.domains.interactions.router import router as interactions_router
from projectvault.domains.projects.router import router as projects_router
from projectvault.domains.recommendations.router import (
    router as recommendations_router,
)

api_router = APIRouter()

# 도메인 라우터 등록
api_router.include_router(projects_router, prefix="/projects", tags=["Projects"])
api_router.include_router(
    interactions_router, prefix="/users", tags=["Interactions"]
)
api_router.include_router(
    recommendations_router, prefix="/recommendations", tags=["Recommendations"]
)


@api_router.get("/", response_model=APIResponse[dict[str, Any]])
async def api_v1_root():
    """API v1 루트 엔드포인트"""
    return APIResponse(
        success=True,
        message="ProjectVault API v1",
        data={
            "version": "1.0.0",
            "docs": "/docs",
        },
    )
