"""Interactions 도메인 모델 정의

사용자별 프로젝트 인터랙션(좋아요/북마크) 레코드입니다.
(user_id, project_id) 당 하나의 레코드만 존재합니다.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Index, String, false, func, text
from sqlalchemy.orm import Mapped, mapped_column

from projectvault.core.database import Base


class ProjectInteraction(Base):
    """프로젝트 인터랙션 모델

    추천 로직은 liked == true 인 레코드만 사용합니다.
    project_id 는 카탈로그에서 삭제된 프로젝트를 가리킬 수도 있습니다.
    """

    __tablename__ = "project_interactions"
    __table_args__ = (
        Index(
            "idx_project_interactions_liked",
            "user_id",
            postgresql_where=text("liked IS TRUE"),
        ),
    )

    user_id: Mapped[str] = mapped_column(
        String(128),
        primary_key=True,
        comment="포털 사용자 ID",
    )
    project_id: Mapped[str] = mapped_column(
        String(128),
        primary_key=True,
        comment="프로젝트 ID",
    )
    liked: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
        comment="좋아요 여부",
    )
    bookmarked: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
        comment="북마크 여부",
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

    def __repr__(self) -> str:
        return (
            f"<ProjectInteraction(user_id={self.user_id!r}, "
            f"project_id={self.project_id!r}, liked={self.liked}, "
            f"bookmarked={self.bookmarked})>"
        )
