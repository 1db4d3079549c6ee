"""Projects 도메인 모델 정의

포털에서 제출된 학술 프로젝트 카탈로그입니다.
ID는 포털에서 발급되며 불투명한 문자열입니다.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import DateTime, Index, String, Text, func, text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from projectvault.core.database import Base


class ProjectStatus(str, Enum):
    """심사 상태 (추천 로직에서는 사용하지 않음)"""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Project(Base):
    """프로젝트 모델 (포털 동기화용)

    - tags: PostgreSQL ARRAY(String), NULL 허용 (태그 없음과 동일 취급)
    - deleted_at: Soft Delete, 삭제된 프로젝트는 조회/추천 대상에서 제외
    """

    __tablename__ = "projects"
    __table_args__ = (
        Index("idx_projects_tags", "tags", postgresql_using="gin"),
        Index(
            "idx_projects_active",
            "id",
            postgresql_where=text("deleted_at IS NULL"),
        ),
    )

    id: Mapped[str] = mapped_column(
        String(128),
        primary_key=True,
        comment="포털에서 발급한 프로젝트 ID",
    )
    owner_id: Mapped[Optional[str]] = mapped_column(
        String(128),
        nullable=True,
        comment="제출한 학생 사용자 ID",
    )
    title: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        comment="프로젝트 제목",
    )
    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        server_default="",
        comment="프로젝트 설명",
    )
    tags: Mapped[Optional[list[str]]] = mapped_column(
        ARRAY(String),
        nullable=True,
        comment="프로젝트 태그 (PostgreSQL ARRAY)",
    )
    github_link: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="GitHub 저장소 링크",
    )
    status: Mapped[ProjectStatus] = mapped_column(
        String(20),
        nullable=False,
        default=ProjectStatus.PENDING,
        server_default="pending",
        comment="심사 상태 (pending/approved/rejected)",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="생성 일시",
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True,
        comment="수정 일시",
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True, comment="삭제 일시 (Soft Delete)"
    )

    def __repr__(self) -> str:
        return (
            f"<Project(id={self.id!r}, status={self.status}, "
            f"deleted_at={self.deleted_at})>"
        )
