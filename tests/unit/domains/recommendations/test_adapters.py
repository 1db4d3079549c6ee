"""추천 저장소 어댑터 단위 테스트"""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from projectvault.core.exceptions import ErrorCode, StoreUnavailableError
from projectvault.domains.projects.models import Project
from projectvault.domains.recommendations.adapters import (
    SqlInteractionStore,
    SqlProjectCatalog,
    to_project_record,
    translate_store_errors,
)


class TestToProjectRecord:
    """저장소 문서 정규화 테스트"""

    def test_from_orm_model(self):
        """ORM 모델 변환"""
        project = Project(
            id="P1",
            title="Smart Campus",
            description="IoT",
            tags=["IoT", "AI", "IoT"],
            github_link="https://github.com/example/p1",
            status="approved",
        )

        record = to_project_record(project)

        assert record.id == "P1"
        assert record.tags == ("IoT", "AI")
        assert record.github_link == "https://github.com/example/p1"

    def test_from_document_with_camel_case_link(self):
        """문서형 dict 의 githubLink 허용"""
        record = to_project_record(
            {"id": "P2", "title": "T", "githubLink": "https://x", "tags": ["AI"]}
        )

        assert record.github_link == "https://x"
        assert record.tags == ("AI",)

    @pytest.mark.parametrize(
        "document",
        [
            {"id": "P3", "title": "T"},
            {"id": "P3", "title": "T", "tags": None},
            {"id": "P3", "title": "T", "tags": "AI"},
            {"id": "P3", "title": "T", "tags": {"AI": 1}},
        ],
        ids=["missing", "null", "string", "object"],
    )
    def test_malformed_tags_become_empty(self, document):
        """tags 가 없거나 배열이 아니면 태그 없음"""
        assert to_project_record(document).tags == ()

    def test_missing_optional_fields(self):
        """누락된 제목/설명은 빈 문자열"""
        record = to_project_record(SimpleNamespace(id=7))

        assert record.id == "7"
        assert record.title == ""
        assert record.description == ""
        assert record.github_link is None


class TestTranslateStoreErrors:
    """전송 오류 변환 테스트"""

    def test_sqlalchemy_error(self):
        """드라이버 오류 → StoreUnavailableError"""
        original = OperationalError("SELECT 1", {}, Exception("down"))

        with pytest.raises(StoreUnavailableError) as exc_info:
            with translate_store_errors("projects"):
                raise original

        exc = exc_info.value
        assert exc.store == "projects"
        assert exc.error_code == ErrorCode.STORE_UNAVAILABLE
        assert exc.__cause__ is original

    @pytest.mark.parametrize(
        "error",
        [ConnectionRefusedError("refused"), asyncio.TimeoutError()],
        ids=["connection", "timeout"],
    )
    def test_transport_errors(self, error):
        with pytest.raises(StoreUnavailableError):
            with translate_store_errors("interactions"):
                raise error

    def test_programming_errors_pass_through(self):
        """전송 오류가 아닌 예외는 변환하지 않음"""
        with pytest.raises(TypeError):
            with translate_store_errors("projects"):
                raise TypeError("bug")


class TestSqlInteractionStore:
    """SqlInteractionStore 테스트"""

    @pytest.mark.asyncio
    async def test_returns_liked_project_ids(self):
        """좋아요한 프로젝트 ID 집합"""
        # Given
        store = SqlInteractionStore(MagicMock())
        store.repository.list_by_user = AsyncMock(
            return_value=[
                SimpleNamespace(project_id="P1", liked=True),
                SimpleNamespace(project_id="P2", liked=True),
            ]
        )

        # When
        liked = await store.get_liked_project_ids("user-1")

        # Then
        assert liked == {"P1", "P2"}
        store.repository.list_by_user.assert_awaited_once_with(
            "user-1", liked_only=True
        )

    @pytest.mark.asyncio
    async def test_store_failure(self):
        """조회 실패 → StoreUnavailableError(interactions)"""
        store = SqlInteractionStore(MagicMock())
        store.repository.list_by_user = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("down"))
        )

        with pytest.raises(StoreUnavailableError) as exc_info:
            await store.get_liked_project_ids("user-1")

        assert exc_info.value.store == "interactions"


class TestSqlProjectCatalog:
    """SqlProjectCatalog 테스트"""

    @pytest.fixture
    def catalog(self):
        catalog = SqlProjectCatalog(MagicMock())
        catalog.repository.get_by_ids = AsyncMock(return_value=[])
        catalog.repository.get_by_any_tag = AsyncMock(return_value=[])
        return catalog

    @pytest.mark.asyncio
    async def test_empty_inputs_do_not_query(self, catalog):
        """빈 입력은 조회하지 않음"""
        assert await catalog.get_projects_by_ids([]) == {}
        assert await catalog.get_projects_by_any_tag(set()) == []

        catalog.repository.get_by_ids.assert_not_awaited()
        catalog.repository.get_by_any_tag.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_get_projects_by_ids(self, catalog):
        """ID 조회 결과를 ID 기준 dict 로 반환"""
        catalog.repository.get_by_ids.return_value = [
            Project(id="P1", title="A", description="", tags=None),
        ]

        projects = await catalog.get_projects_by_ids({"P1", "missing"})

        assert list(projects) == ["P1"]
        assert projects["P1"].tags == ()

    @pytest.mark.asyncio
    async def test_get_projects_by_any_tag_keeps_order(self, catalog):
        """태그 조회 결과 순서 유지"""
        catalog.repository.get_by_any_tag.return_value = [
            Project(id="P1", title="A", description="", tags=["AI"]),
            Project(id="P2", title="B", description="", tags=["AI", "Web"]),
        ]

        projects = await catalog.get_projects_by_any_tag({"AI"})

        assert [p.id for p in projects] == ["P1", "P2"]

    @pytest.mark.asyncio
    async def test_catalog_failure(self, catalog):
        """조회 실패 → StoreUnavailableError(projects)"""
        catalog.repository.get_by_any_tag.side_effect = ConnectionResetError()

        with pytest.raises(StoreUnavailableError) as exc_info:
            await catalog.get_projects_by_any_tag({"AI"})

        assert exc_info.value.store == "projects"
