"""Projects 도메인 서비스

포털 프로젝트 카탈로그 동기화를 위한 비즈니스 로직 계층입니다.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from projectvault.core.logging import get_logger
from projectvault.domains.projects.exceptions import ProjectNotFoundException
from projectvault.domains.projects.models import Project
from projectvault.domains.projects.repository import (
    ProjectFilters,
    ProjectRepository,
)
from projectvault.domains.projects.schemas import BulkSyncResponse, ProjectSync

logger = get_logger(__name__)


def _apply_sync(project: Project, data: ProjectSync) -> None:
    """동기화 데이터를 모델에 반영"""
    project.title = data.title
    project.description = data.description
    project.tags = list(data.tags)
    project.github_link = data.github_link
    project.status = data.status
    project.owner_id = data.owner_id


class ProjectService:
    """프로젝트 서비스"""

    def __init__(self, session: AsyncSession):
        self.repository = ProjectRepository(session)

    async def get_project(self, project_id: str) -> Project:
        """프로젝트 조회

        Raises:
            ProjectNotFoundException: 프로젝트를 찾을 수 없는 경우
        """
        project = await self.repository.get_by_id(project_id)
        if not project:
            raise ProjectNotFoundException(project_id=project_id)
        return project

    async def get_projects(
        self,
        page: int = 1,
        size: int = 20,
        filters: Optional[ProjectFilters] = None,
    ) -> tuple[list[Project], int]:
        """프로젝트 목록 조회

        Returns:
            (프로젝트 목록, 전체 프로젝트 수) 튜플
        """
        skip = (page - 1) * size
        projects = await self.repository.get_list(
            skip=skip, limit=size, filters=filters
        )
        total = await self.repository.count(filters=filters)
        return list(projects), total

    async def _upsert(self, data: ProjectSync) -> tuple[Project, str]:
        existing = await self.repository.get_by_id(
            data.id, include_deleted=True
        )

        if existing is None:
            project = Project(id=data.id)
            _apply_sync(project, data)
            return await self.repository.create(project), "created"

        action = "updated"
        if existing.deleted_at is not None:
            existing.deleted_at = None  # 복구
            action = "restored"

        _apply_sync(existing, data)
        return await self.repository.update(existing), action

    async def upsert_project(self, data: ProjectSync) -> Project:
        """프로젝트 Upsert (생성 또는 업데이트)

        - 존재하지 않으면 생성
        - 이미 존재하면 내용 갱신
        - 삭제된 프로젝트는 복구 (deleted_at = NULL)

        Args:
            data: 프로젝트 동기화 데이터

        Returns:
            생성 또는 업데이트된 프로젝트 객체
        """
        project, action = await self._upsert(data)

        logger.info(
            "Project synced",
            extra={
                "project_id": project.id,
                "action": action,
            },
        )
        return project

    async def bulk_upsert_projects(
        self, projects: list[ProjectSync]
    ) -> BulkSyncResponse:
        """벌크 프로젝트 Upsert

        하나라도 실패하면 예외를 그대로 전파합니다 (요청 단위 롤백).
        """
        counts = {"created": 0, "updated": 0, "restored": 0}

        for data in projects:
            try:
                _, action = await self._upsert(data)
            except Exception:
                logger.exception(
                    "Failed to sync project",
                    extra={
                        "project_id": data.id,
                    },
                )
                raise
            counts[action] += 1

        logger.info(
            f"Bulk project sync finished: total={len(projects)}, {counts}"
        )
        return BulkSyncResponse(total=len(projects), **counts)

    async def delete_project(self, project_id: str) -> None:
        """프로젝트 Soft Delete

        Raises:
            ProjectNotFoundException: 프로젝트를 찾을 수 없는 경우
        """
        project = await self.get_project(project_id)
        await self.repository.soft_delete(project)

        logger.info(
            "Project deleted",
            extra={
                "project_id": project_id,
                "action": "deleted",
            },
        )
