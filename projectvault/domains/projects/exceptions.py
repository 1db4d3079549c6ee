"""Projects 도메인 예외 정의"""

from enum import Enum

from projectvault.core.exceptions import NotFoundException


class ProjectErrorCode(str, Enum):
    """프로젝트 도메인 에러 코드"""

    PROJECT_NOT_FOUND = "PROJECT_NOT_FOUND"


class ProjectNotFoundException(NotFoundException):
    """프로젝트를 찾을 수 없는 경우"""

    def __init__(self, project_id: str | None = None):
        detail = {"project_id": project_id} if project_id else {}
        super().__init__(
            message="프로젝트를 찾을 수 없습니다.",
            error_code=ProjectErrorCode.PROJECT_NOT_FOUND,
            detail=detail,
        )
