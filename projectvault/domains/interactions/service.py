"""Interactions 도메인 서비스

좋아요/북마크 토글을 기록합니다. 좋아요가 바뀌면 커밋이 끝난 뒤 해당
사용자의 추천 캐시를 만료시켜 다음 조회 때 다시 계산되도록 합니다.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from projectvault.core.logging import get_logger
from projectvault.domains.interactions.models import ProjectInteraction
from projectvault.domains.interactions.repository import InteractionRepository
from projectvault.domains.interactions.schemas import InteractionUpdate
from projectvault.domains.projects.exceptions import ProjectNotFoundException
from projectvault.domains.projects.repository import ProjectRepository
from projectvault.domains.recommendations.cache import RecommendationCache

logger = get_logger(__name__)


class InteractionService:
    """인터랙션 서비스"""

    def __init__(
        self,
        session: AsyncSession,
        recommendation_cache: Optional[RecommendationCache] = None,
    ):
        self.session = session
        self.repository = InteractionRepository(session)
        self.project_repository = ProjectRepository(session)
        self.recommendation_cache = recommendation_cache

    async def get_user_interactions(
        self, user_id: str, liked_only: bool = False
    ) -> list[ProjectInteraction]:
        """사용자 인터랙션 목록 조회"""
        return list(
            await self.repository.list_by_user(user_id, liked_only=liked_only)
        )

    async def update_interaction(
        self, user_id: str, project_id: str, data: InteractionUpdate
    ) -> ProjectInteraction:
        """인터랙션 병합 갱신

        레코드가 없으면 생성하며, 요청에 없는 필드는 기존 값(신규면 False)을
        유지합니다.

        Args:
            user_id: 사용자 ID
            project_id: 프로젝트 ID
            data: 변경할 필드

        Returns:
            갱신된 인터랙션

        Raises:
            ProjectNotFoundException: 프로젝트가 없거나 삭제된 경우
            SQLAlchemyError: 커밋에 실패한 경우 (추천 캐시는 그대로 유지)
        """
        if await self.project_repository.get_by_id(project_id) is None:
            raise ProjectNotFoundException(project_id=project_id)

        interaction = await self.repository.get(user_id, project_id)
        previously_liked = bool(interaction and interaction.liked)

        if interaction is None:
            interaction = ProjectInteraction(
                user_id=user_id,
                project_id=project_id,
                liked=bool(data.liked),
                bookmarked=bool(data.bookmarked),
            )
            interaction = await self.repository.create(interaction)
        else:
            if data.liked is not None:
                interaction.liked = data.liked
            if data.bookmarked is not None:
                interaction.bookmarked = data.bookmarked
            interaction = await self.repository.update(interaction)

        # 만료는 커밋 이후에만 (그 전의 동시 조회는 이전 좋아요로 캐시를 채움)
        await self.session.commit()

        if interaction.liked != previously_liked and self.recommendation_cache:
            self.recommendation_cache.mark_stale(user_id)

        logger.info(
            "Interaction updated",
            extra={
                "user_id": user_id,
                "project_id": project_id,
                "liked": interaction.liked,
                "bookmarked": interaction.bookmarked,
            },
        )
        return interaction
