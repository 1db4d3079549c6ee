"""Interactions 도메인 라우터

사용자별 좋아요/북마크 API 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from projectvault.core.database import get_db
from projectvault.core.dependencies import verify_internal_api_key
from projectvault.core.schemas import APIResponse, create_response
from projectvault.domains.interactions.schemas import (
    InteractionResponse,
    InteractionUpdate,
)
from projectvault.domains.interactions.service import InteractionService
from projectvault.domains.recommendations.cache import (
    RecommendationCache,
    get_recommendation_cache,
)

router = APIRouter(dependencies=[Depends(verify_internal_api_key)])


def get_interaction_service(
    session: AsyncSession = Depends(get_db),
    cache: RecommendationCache = Depends(get_recommendation_cache),
) -> InteractionService:
    """InteractionService 의존성"""
    return InteractionService(session, recommendation_cache=cache)


@router.get(
    "/{user_id}/interactions",
    response_model=APIResponse[list[InteractionResponse]],
)
async def get_interactions(
    user_id: str,
    liked_only: bool = Query(False, description="좋아요한 항목만 조회"),
    service: InteractionService = Depends(get_interaction_service),
):
    """사용자 인터랙션 목록 조회"""
    interactions = await service.get_user_interactions(
        user_id, liked_only=liked_only
    )
    return create_response(
        data=[InteractionResponse.model_validate(i) for i in interactions],
        message="인터랙션 목록을 조회했습니다.",
    )


@router.put(
    "/{user_id}/interactions/{project_id}",
    response_model=APIResponse[InteractionResponse],
)
async def update_interaction(
    user_id: str,
    project_id: str,
    data: InteractionUpdate,
    service: InteractionService = Depends(get_interaction_service),
):
    """좋아요/북마크 변경 (병합)"""
    interaction = await service.update_interaction(user_id, project_id, data)
    return create_response(
        data=InteractionResponse.model_validate(interaction),
        message="인터랙션이 저장되었습니다.",
    )
