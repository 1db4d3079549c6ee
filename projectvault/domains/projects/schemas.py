"""Projects 도메인 스키마 정의

포털에서 제출/수정/심사된 프로젝트를 동기화하기 위한 Pydantic 스키마입니다.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from projectvault.core.schemas import CamelSchema
from projectvault.domains.projects.models import ProjectStatus


class ProjectSync(CamelSchema):
    """프로젝트 동기화 요청 스키마"""

    id: str = Field(..., min_length=1, max_length=128, description="프로젝트 ID")
    title: str = Field(..., min_length=1, max_length=500, description="제목")
    description: str = Field(default="", description="설명")
    tags: list[str] = Field(default_factory=list, description="태그 목록")
    github_link: Optional[str] = Field(default=None, description="GitHub 링크")
    status: ProjectStatus = Field(
        default=ProjectStatus.PENDING, description="심사 상태"
    )
    owner_id: Optional[str] = Field(
        default=None, max_length=128, description="제출한 학생 ID"
    )

    @field_validator("tags")
    @classmethod
    def strip_blank_tags(cls, v: list[str]) -> list[str]:
        """공백 태그 제거 및 중복 제거 (입력 순서 유지)"""
        cleaned = [tag.strip() for tag in v if tag and tag.strip()]
        return list(dict.fromkeys(cleaned))


class ProjectBulkSync(CamelSchema):
    """벌크 프로젝트 동기화 요청 스키마"""

    projects: list[ProjectSync] = Field(
        ...,
        min_length=1,
        max_length=1000,
        description="동기화할 프로젝트 목록 (최대 1000개)",
    )


class ProjectResponse(CamelSchema):
    """프로젝트 응답 스키마"""

    id: str
    owner_id: Optional[str] = None
    title: str
    description: str
    tags: list[str] = Field(default_factory=list)
    github_link: Optional[str] = None
    status: ProjectStatus
    created_at: datetime
    updated_at: Optional[datetime] = None

    @field_validator("tags", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return v or []


class BulkSyncResponse(CamelSchema):
    """벌크 동기화 응답 스키마"""

    total: int = Field(..., description="요청된 총 프로젝트 수")
    created: int = Field(..., description="새로 생성된 프로젝트 수")
    updated: int = Field(..., description="업데이트된 프로젝트 수")
    restored: int = Field(..., description="복구된 프로젝트 수")
