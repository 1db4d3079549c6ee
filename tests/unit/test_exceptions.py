"""예외 단위 테스트"""

from projectvault.core.exceptions import (
    BadRequestException,
    ErrorCode,
    InternalServerException,
    NotFoundException,
    ServiceUnavailableException,
    StoreUnavailableError,
    UnauthorizedException,
)
from projectvault.domains.projects.exceptions import (
    ProjectErrorCode,
    ProjectNotFoundException,
)
from projectvault.domains.recommendations.exceptions import (
    RecommendationErrorCode,
    RecommendationUnavailableException,
)


class TestGlobalExceptions:
    """전역 예외 테스트"""

    def test_not_found_exception(self):
        """NotFoundException 기본값"""
        exc = NotFoundException()

        assert exc.status_code == 404
        assert exc.error_code == ErrorCode.NOT_FOUND
        assert exc.message == "리소스를 찾을 수 없습니다."

    def test_not_found_exception_custom(self):
        """NotFoundException 커스텀 메시지"""
        exc = NotFoundException(
            message="태그를 찾을 수 없습니다.",
            detail={"tag": "AI"},
        )

        assert exc.message == "태그를 찾을 수 없습니다."
        assert exc.detail_info == {"tag": "AI"}

    def test_bad_request_exception(self):
        exc = BadRequestException(message="잘못된 입력입니다.")

        assert exc.status_code == 400
        assert exc.error_code == ErrorCode.BAD_REQUEST

    def test_unauthorized_exception(self):
        exc = UnauthorizedException()

        assert exc.status_code == 401
        assert exc.error_code == ErrorCode.UNAUTHORIZED

    def test_internal_server_exception(self):
        exc = InternalServerException()

        assert exc.status_code == 500
        assert exc.error_code == ErrorCode.INTERNAL_ERROR

    def test_service_unavailable_exception(self):
        exc = ServiceUnavailableException()

        assert exc.status_code == 503
        assert exc.error_code == ErrorCode.SERVICE_UNAVAILABLE

    def test_store_unavailable_error(self):
        """StoreUnavailableError 는 내부 500 오류"""
        exc = StoreUnavailableError(store="projects", original_error="timeout")

        assert exc.status_code == 500
        assert exc.error_code == ErrorCode.STORE_UNAVAILABLE
        assert exc.store == "projects"
        assert exc.detail_info == {"store": "projects", "error": "timeout"}


class TestDomainExceptions:
    """도메인 예외 테스트"""

    def test_project_not_found_exception(self):
        exc = ProjectNotFoundException(project_id="P1")

        assert exc.status_code == 404
        assert exc.error_code == ProjectErrorCode.PROJECT_NOT_FOUND
        assert exc.message == "프로젝트를 찾을 수 없습니다."
        assert exc.detail_info == {"project_id": "P1"}

    def test_recommendation_unavailable_exception(self):
        """RecommendationUnavailableException 은 원인을 보존"""
        cause = StoreUnavailableError(
            store="interactions", original_error="refused"
        )

        exc = RecommendationUnavailableException(user_id="user-1", cause=cause)

        assert exc.status_code == 503
        assert exc.error_code == RecommendationErrorCode.RECOMMENDATION_UNAVAILABLE
        assert exc.cause is cause
        assert exc.detail_info["user_id"] == "user-1"
        assert exc.detail_info["store"] == "interactions"
