"""create_projects_and_interactions

Revision ID: 5c1e7a9d2b40
Revises:
Create Date: 2026-03-01 10:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "5c1e7a9d2b40"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """업그레이드 마이그레이션: projects, project_interactions 테이블 생성"""
    op.create_table(
        "projects",
        sa.Column(
            "id",
            sa.String(length=128),
            nullable=False,
            comment="포털에서 발급한 프로젝트 ID",
        ),
        sa.Column(
            "owner_id",
            sa.String(length=128),
            nullable=True,
            comment="제출한 학생 사용자 ID",
        ),
        sa.Column(
            "title", sa.String(length=500), nullable=False, comment="프로젝트 제목"
        ),
        sa.Column(
            "description",
            sa.Text(),
            server_default="",
            nullable=False,
            comment="프로젝트 설명",
        ),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String()),
            nullable=True,
            comment="프로젝트 태그 (PostgreSQL ARRAY)",
        ),
        sa.Column(
            "github_link", sa.Text(), nullable=True, comment="GitHub 저장소 링크"
        ),
        sa.Column(
            "status",
            sa.String(length=20),
            server_default="pending",
            nullable=False,
            comment="심사 상태 (pending/approved/rejected)",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
            comment="생성 일시",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="수정 일시",
        ),
        sa.Column(
            "deleted_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="삭제 일시 (Soft Delete)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # 태그 겹침(&&) 조회용 GIN 인덱스
    op.create_index(
        "idx_projects_tags",
        "projects",
        ["tags"],
        unique=False,
        postgresql_using="gin",
    )
    # Soft Delete를 위한 부분 인덱스 (deleted_at IS NULL인 레코드만 인덱싱)
    op.create_index(
        "idx_projects_active",
        "projects",
        ["id"],
        unique=False,
        postgresql_where=sa.text("deleted_at IS NULL"),
    )

    op.create_table(
        "project_interactions",
        sa.Column(
            "user_id", sa.String(length=128), nullable=False, comment="포털 사용자 ID"
        ),
        sa.Column(
            "project_id", sa.String(length=128), nullable=False, comment="프로젝트 ID"
        ),
        sa.Column(
            "liked",
            sa.Boolean(),
            server_default=sa.false(),
            nullable=False,
            comment="좋아요 여부",
        ),
        sa.Column(
            "bookmarked",
            sa.Boolean(),
            server_default=sa.false(),
            nullable=False,
            comment="북마크 여부",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
            comment="생성 일시",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="수정 일시",
        ),
        sa.PrimaryKeyConstraint("user_id", "project_id"),
    )

    # 좋아요 조회용 부분 인덱스
    op.create_index(
        "idx_project_interactions_liked",
        "project_interactions",
        ["user_id"],
        unique=False,
        postgresql_where=sa.text("liked IS TRUE"),
    )


def downgrade() -> None:
    """다운그레이드 마이그레이션: 테이블 삭제"""
    op.drop_index(
        "idx_project_interactions_liked", table_name="project_interactions"
    )
    op.drop_table("project_interactions")
    op.drop_index("idx_projects_active", table_name="projects")
    op.drop_index("idx_projects_tags", table_name="projects")
    op.drop_table("projects")
