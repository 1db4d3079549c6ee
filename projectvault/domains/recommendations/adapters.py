"""추천용 저장소 어댑터

추천 코어는 두 개의 읽기 인터페이스만 사용합니다.

- InteractionStore: 사용자가 좋아요한 프로젝트 ID 조회
- ProjectCatalog: ID / 태그 겹침으로 프로젝트 조회

어댑터는 저장소 문서를 ProjectRecord 로 정규화하고, 전송/드라이버 오류를
StoreUnavailableError 로 변환합니다. 부분 결과를 성공처럼 돌려주지 않습니다.
"""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Mapping
from contextlib import contextmanager
from typing import Any, Collection, Generator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from projectvault.core.exceptions import StoreUnavailableError
from projectvault.core.logging import get_logger
from projectvault.domains.interactions.repository import InteractionRepository
from projectvault.domains.projects.repository import ProjectRepository
from projectvault.domains.recommendations.tags import normalize_tags
from projectvault.domains.recommendations.types import ProjectRecord

logger = get_logger(__name__)

INTERACTIONS_STORE = "interactions"
PROJECTS_STORE = "projects"

TRANSIENT_ERRORS = (SQLAlchemyError, OSError, asyncio.TimeoutError)


class InteractionStore(ABC):
    """인터랙션 저장소 읽기 인터페이스"""

    @abstractmethod
    async def get_liked_project_ids(self, user_id: str) -> set[str]:
        """좋아요한 프로젝트 ID 집합 (없으면 빈 집합)"""
        raise NotImplementedError


class ProjectCatalog(ABC):
    """프로젝트 카탈로그 읽기 인터페이스"""

    @abstractmethod
    async def get_projects_by_ids(
        self, project_ids: Collection[str]
    ) -> dict[str, ProjectRecord]:
        """ID로 프로젝트 조회 (없는 ID는 결과에서 빠짐)"""
        raise NotImplementedError

    @abstractmethod
    async def get_projects_by_any_tag(
        self, tags: Collection[str]
    ) -> list[ProjectRecord]:
        """태그가 하나라도 겹치는 프로젝트 조회 (빈 태그면 빈 목록)"""
        raise NotImplementedError


@contextmanager
def translate_store_errors(store: str) -> Generator[None, None, None]:
    """저장소 전송 오류를 StoreUnavailableError 로 변환"""
    try:
        yield
    except TRANSIENT_ERRORS as e:
        logger.warning(f"Store '{store}' read failed: {type(e).__name__}: {e}")
        raise StoreUnavailableError(store=store, original_error=str(e)) from e


def _read_field(source: Any, *names: str) -> Any:
    for name in names:
        if isinstance(source, Mapping):
            if name in source:
                return source[name]
        elif hasattr(source, name):
            return getattr(source, name)
    return None


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def to_project_record(source: Any) -> ProjectRecord:
    """저장소 문서(ORM 모델 또는 dict)를 ProjectRecord 로 정규화

    tags 가 누락/None/컬렉션이 아닌 값이면 빈 태그로 취급합니다.
    dict 문서는 ``githubLink`` 와 ``github_link`` 를 모두 허용합니다.
    """
    return ProjectRecord(
        id=str(_read_field(source, "id")),
        title=_optional_str(_read_field(source, "title")) or "",
        description=_optional_str(_read_field(source, "description")) or "",
        tags=normalize_tags(_read_field(source, "tags")),
        github_link=_optional_str(
            _read_field(source, "github_link", "githubLink")
        ),
        status=_optional_str(_read_field(source, "status")),
    )


class SqlInteractionStore(InteractionStore):
    """PostgreSQL 인터랙션 저장소 어댑터"""

    def __init__(self, session: AsyncSession):
        self.repository = InteractionRepository(session)

    async def get_liked_project_ids(self, user_id: str) -> set[str]:
        with translate_store_errors(INTERACTIONS_STORE):
            rows = await self.repository.list_by_user(user_id, liked_only=True)
        return {row.project_id for row in rows if row.liked}


class SqlProjectCatalog(ProjectCatalog):
    """PostgreSQL 프로젝트 카탈로그 어댑터

    태그 조회 결과는 프로젝트 ID 오름차순이므로 동점 순서가 결정적입니다.
    """

    def __init__(self, session: AsyncSession):
        self.repository = ProjectRepository(session)

    async def get_projects_by_ids(
        self, project_ids: Collection[str]
    ) -> dict[str, ProjectRecord]:
        if not project_ids:
            return {}

        with translate_store_errors(PROJECTS_STORE):
            rows = await self.repository.get_by_ids(project_ids)

        records = (to_project_record(row) for row in rows)
        return {record.id: record for record in records}

    async def get_projects_by_any_tag(
        self, tags: Collection[str]
    ) -> list[ProjectRecord]:
        if not tags:
            return []

        with translate_store_errors(PROJECTS_STORE):
            rows = await self.repository.get_by_any_tag(tags)

        return [to_project_record(row) for row in rows]
