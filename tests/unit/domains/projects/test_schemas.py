"""Projects 스키마 단위 테스트"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from projectvault.domains.projects.models import Project, ProjectStatus
from projectvault.domains.projects.schemas import (
    ProjectBulkSync,
    ProjectResponse,
    ProjectSync,
)


class TestProjectSync:
    """ProjectSync 스키마 테스트"""

    def test_accepts_camel_case_fields(self):
        """camelCase 입력 허용"""
        data = ProjectSync(
            id="P1",
            title="Smart Campus",
            githubLink="https://github.com/example/p1",
            ownerId="student-1",
        )

        assert data.github_link == "https://github.com/example/p1"
        assert data.owner_id == "student-1"
        assert data.status == ProjectStatus.PENDING

    def test_tags_are_stripped_and_deduplicated(self):
        """공백 태그 제거, 중복 제거"""
        data = ProjectSync(id="P1", title="T", tags=[" AI ", "", "Web", "AI"])

        assert data.tags == ["AI", "Web"]

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            ProjectSync(id="", title="T")

    def test_invalid_status_rejected(self):
        with pytest.raises(ValidationError):
            ProjectSync(id="P1", title="T", status="published")


class TestProjectBulkSync:
    """ProjectBulkSync 스키마 테스트"""

    def test_empty_list_rejected(self):
        with pytest.raises(ValidationError):
            ProjectBulkSync(projects=[])

    def test_over_limit_rejected(self):
        """최대 1000개"""
        projects = [{"id": f"P{i}", "title": "T"} for i in range(1001)]

        with pytest.raises(ValidationError):
            ProjectBulkSync(projects=projects)


class TestProjectResponse:
    """ProjectResponse 스키마 테스트"""

    def test_serializes_camel_case_and_null_tags(self):
        """null 태그는 빈 목록, camelCase 직렬화"""
        project = Project(
            id="P1",
            title="T",
            description="",
            tags=None,
            github_link="https://x",
            status="approved",
            created_at=datetime(2026, 3, 1, tzinfo=timezone.utc),
        )

        data = ProjectResponse.model_validate(project).model_dump(by_alias=True)

        assert data["tags"] == []
        assert data["githubLink"] == "https://x"
        assert data["status"] == ProjectStatus.APPROVED
