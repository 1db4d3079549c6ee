"""Projects 도메인 리포지토리

프로젝트 카탈로그 CRUD 및 태그 조회를 위한 데이터 접근 계층입니다.
"""

from dataclasses import dataclass
from typing import Collection, Optional, Sequence, cast

from sqlalchemy import Select, any_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from projectvault.core.utils.datetime import now_utc
from projectvault.domains.projects.models import Project, ProjectStatus


@dataclass
class ProjectFilters:
    """프로젝트 목록 조회 필터

    모든 필드는 선택적이며, 제공된 필터만 적용됩니다.
    """

    status: Optional[ProjectStatus] = None
    tag: Optional[str] = None


class ProjectRepository:
    """프로젝트 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(
        self, project_id: str, include_deleted: bool = False
    ) -> Optional[Project]:
        """ID로 프로젝트 조회

        Args:
            project_id: 프로젝트 ID
            include_deleted: 삭제된 프로젝트 포함 여부 (기본: False)

        Returns:
            프로젝트 객체 또는 None
        """
        query = select(Project).where(Project.id == project_id)

        if not include_deleted:
            query = query.where(Project.deleted_at.is_(None))

        result = await self.session.execute(query)
        return cast(Optional[Project], result.scalar_one_or_none())

    async def get_by_ids(self, project_ids: Collection[str]) -> Sequence[Project]:
        """여러 ID로 프로젝트 일괄 조회

        존재하지 않거나 삭제된 ID는 결과에서 빠집니다.

        Args:
            project_ids: 프로젝트 ID 목록

        Returns:
            프로젝트 목록 (ID 오름차순)
        """
        if not project_ids:
            return []

        query = (
            select(Project)
            .where(Project.id.in_(list(project_ids)))
            .where(Project.deleted_at.is_(None))
            .order_by(Project.id)
        )

        result = await self.session.execute(query)
        return cast(Sequence[Project], result.scalars().all())

    async def get_by_any_tag(self, tags: Collection[str]) -> Sequence[Project]:
        """태그 중 하나라도 포함하는 프로젝트 조회

        Args:
            tags: 조회할 태그 목록 (비어 있으면 조회하지 않음)

        Returns:
            프로젝트 목록 (ID 오름차순)
        """
        if not tags:
            return []

        # PostgreSQL ARRAY overlap operator: tags && ARRAY['AI', 'Web']
        query = (
            select(Project)
            .where(Project.tags.overlap(sorted(tags)))
            .where(Project.deleted_at.is_(None))
            .order_by(Project.id)
        )

        result = await self.session.execute(query)
        return cast(Sequence[Project], result.scalars().all())

    def _apply_filters(
        self, query: Select, filters: Optional[ProjectFilters]
    ) -> Select:
        query = query.where(Project.deleted_at.is_(None))
        if filters is None:
            return query

        if filters.status is not None:
            query = query.where(Project.status == filters.status)
        if filters.tag:
            query = query.where(filters.tag == any_(Project.tags))
        return query

    async def get_list(
        self,
        skip: int = 0,
        limit: int = 20,
        filters: Optional[ProjectFilters] = None,
    ) -> Sequence[Project]:
        """프로젝트 목록 조회 (최신순)

        Args:
            skip: 건너뛸 레코드 수
            limit: 조회할 최대 레코드 수
            filters: 필터 옵션

        Returns:
            프로젝트 목록
        """
        query = self._apply_filters(select(Project), filters)
        query = (
            query.order_by(Project.created_at.desc(), Project.id)
            .offset(skip)
            .limit(limit)
        )

        result = await self.session.execute(query)
        return cast(Sequence[Project], result.scalars().all())

    async def count(self, filters: Optional[ProjectFilters] = None) -> int:
        """프로젝트 수 조회"""
        query = self._apply_filters(select(func.count(Project.id)), filters)
        result = await self.session.execute(query)
        return int(result.scalar_one())

    async def create(self, project: Project) -> Project:
        """프로젝트 생성"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def update(self, project: Project) -> Project:
        """프로젝트 수정"""
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def soft_delete(self, project: Project) -> Project:
        """프로젝트 Soft Delete"""
        project.deleted_at = now_utc()
        await self.session.flush()
        await self.session.refresh(project)
        return project
