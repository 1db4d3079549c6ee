"""Recommendations 도메인 라우터

사용자별 프로젝트 추천 API 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from projectvault.core.database import get_db
from projectvault.core.dependencies import verify_internal_api_key
from projectvault.core.schemas import APIResponse, create_response
from projectvault.domains.recommendations.adapters import (
    SqlInteractionStore,
    SqlProjectCatalog,
)
from projectvault.domains.recommendations.cache import (
    RecommendationCache,
    get_recommendation_cache,
)
from projectvault.domains.recommendations.schemas import RecommendationResponse
from projectvault.domains.recommendations.service import RecommendationService

router = APIRouter(dependencies=[Depends(verify_internal_api_key)])

EMPTY_STATE_MESSAGE = (
    "아직 추천할 프로젝트가 없습니다 — 관심 있는 프로젝트에 좋아요를 눌러보세요"
)
STALE_MESSAGE = "추천을 새로 계산하지 못해 이전 결과를 반환했습니다."


def get_recommendation_service(
    session: AsyncSession = Depends(get_db),
) -> RecommendationService:
    """RecommendationService 의존성"""
    return RecommendationService(
        interaction_store=SqlInteractionStore(session),
        catalog=SqlProjectCatalog(session),
    )


@router.get("/{user_id}", response_model=APIResponse[RecommendationResponse])
async def get_recommendations(
    user_id: str,
    refresh: bool = Query(False, description="캐시를 무시하고 다시 계산"),
    service: RecommendationService = Depends(get_recommendation_service),
    cache: RecommendationCache = Depends(get_recommendation_cache),
):
    """사용자 추천 프로젝트 조회"""
    cached = await cache.get_or_compute(
        user_id,
        lambda: service.get_recommendations(user_id),
        refresh=refresh,
    )

    if cached.result.is_empty:
        message = EMPTY_STATE_MESSAGE
    elif cached.is_stale:
        message = STALE_MESSAGE
    else:
        message = "추천 프로젝트를 조회했습니다."

    return create_response(
        data=RecommendationResponse.from_cached(cached),
        message=message,
    )
