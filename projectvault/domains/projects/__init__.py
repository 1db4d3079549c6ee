"""Projects 도메인 모듈

포털 프로젝트 카탈로그(제출/수정/심사 결과) 동기화를 위한 도메인입니다.

구조:
    - models.py: SQLAlchemy 모델 정의 (Project)
    - schemas.py: Pydantic 스키마 (ProjectSync, ProjectResponse, etc.)
    - repository.py: 데이터 접근 계층 (ID/태그 조회 포함)
    - service.py: 비즈니스 로직 (동기화, Upsert)
    - router.py: API 엔드포인트 (API Key 인증 포함)
    - exceptions.py: 도메인 예외
"""

from projectvault.domains.projects.exceptions import (
    ProjectErrorCode,
    ProjectNotFoundException,
)
from projectvault.domains.projects.models import Project, ProjectStatus
from projectvault.domains.projects.repository import (
    ProjectFilters,
    ProjectRepository,
)

__all__ = [
    "Project",
    "ProjectStatus",
    "ProjectFilters",
    "ProjectRepository",
    "ProjectErrorCode",
    "ProjectNotFoundException",
]
