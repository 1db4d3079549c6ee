"""Interactions 도메인 리포지토리"""

from typing import Optional, Sequence, cast

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from projectvault.domains.interactions.models import ProjectInteraction


class InteractionRepository:
    """인터랙션 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(
        self, user_id: str, project_id: str
    ) -> Optional[ProjectInteraction]:
        """(사용자, 프로젝트) 인터랙션 조회"""
        query = select(ProjectInteraction).where(
            ProjectInteraction.user_id == user_id,
            ProjectInteraction.project_id == project_id,
        )
        result = await self.session.execute(query)
        return cast(Optional[ProjectInteraction], result.scalar_one_or_none())

    async def list_by_user(
        self, user_id: str, liked_only: bool = False
    ) -> Sequence[ProjectInteraction]:
        """사용자의 인터랙션 목록 조회

        Args:
            user_id: 사용자 ID
            liked_only: True면 좋아요한 레코드만 조회

        Returns:
            인터랙션 목록 (프로젝트 ID 오름차순)
        """
        query = select(ProjectInteraction).where(
            ProjectInteraction.user_id == user_id
        )
        if liked_only:
            query = query.where(ProjectInteraction.liked.is_(True))

        query = query.order_by(ProjectInteraction.project_id)
        result = await self.session.execute(query)
        return cast(Sequence[ProjectInteraction], result.scalars().all())

    async def create(self, interaction: ProjectInteraction) -> ProjectInteraction:
        """인터랙션 생성"""
        self.session.add(interaction)
        await self.session.flush()
        await self.session.refresh(interaction)
        return interaction

    async def update(self, interaction: ProjectInteraction) -> ProjectInteraction:
        """인터랙션 수정"""
        await self.session.flush()
        await self.session.refresh(interaction)
        return interaction
