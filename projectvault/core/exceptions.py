from enum import Enum
from typing import Any, Dict, Optional

from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from projectvault.core.logging import get_logger

logger = get_logger(__name__)


class ErrorCode(str, Enum):
    """전역 에러 코드"""

    # 공통 에러
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    BAD_REQUEST = "BAD_REQUEST"
    CONFLICT = "CONFLICT"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"

    # 인증 관련
    INVALID_API_KEY = "INVALID_API_KEY"

    # 외부 저장소 관련
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


class BaseAPIException(HTTPException):
    """기본 API 예외 클래스"""

    def __init__(
        self,
        status_code: int,
        error_code: str,
        message: str,
        detail: Optional[Dict[str, Any]] = None,
    ):
        self.error_code = error_code
        self.message = message
        self.detail_info = detail or {}
        super().__init__(status_code=status_code, detail=message)


class BadRequestException(BaseAPIException):
    """400 Bad Request"""

    def __init__(
        self,
        message: str = "잘못된 요청입니다.",
        error_code: str = ErrorCode.BAD_REQUEST,
        detail: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=error_code,
            message=message,
            detail=detail,
        )


class UnauthorizedException(BaseAPIException):
    """401 Unauthorized"""

    def __init__(
        self,
        message: str = "인증이 필요합니다.",
        error_code: str = ErrorCode.UNAUTHORIZED,
        detail: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            error_code=error_code,
            message=message,
            detail=detail,
        )


class NotFoundException(BaseAPIException):
    """404 Not Found"""

    def __init__(
        self,
        message: str = "리소스를 찾을 수 없습니다.",
        error_code: str = ErrorCode.NOT_FOUND,
        detail: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            error_code=error_code,
            message=message,
            detail=detail,
        )


class InternalServerException(BaseAPIException):
    """500 Internal Server Error"""

    def __init__(
        self,
        message: str = "서버 내부 오류가 발생했습니다.",
        error_code: str = ErrorCode.INTERNAL_ERROR,
        detail: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code=error_code,
            message=message,
            detail=detail,
        )


class ServiceUnavailableException(BaseAPIException):
    """503 Service Unavailable"""

    def __init__(
        self,
        message: str = "서비스를 일시적으로 사용할 수 없습니다.",
        error_code: str = ErrorCode.SERVICE_UNAVAILABLE,
        detail: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            error_code=error_code,
            message=message,
            detail=detail,
        )


class StoreUnavailableError(InternalServerException):
    """외부 저장소 읽기 실패

    인터랙션 저장소 또는 프로젝트 카탈로그 조회가 네트워크/인증/쿼터 등의
    이유로 완료되지 못했을 때 발생합니다. 호출자가 재시도 여부를 결정하며,
    서비스 경계에서 도메인 예외로 변환되어야 합니다.

    Example:
        try:
            rows = await repository.list_liked(user_id)
        except SQLAlchemyError as e:
            raise StoreUnavailableError(
                store="interactions", original_error=str(e)
            ) from e
    """

    def __init__(self, store: str, original_error: str):
        self.store = store
        super().__init__(
            message=f"Store '{store}' is unavailable: {original_error}",
            error_code=ErrorCode.STORE_UNAVAILABLE,
            detail={"store": store, "error": original_error},
        )


async def base_exception_handler(
    request: Request, exc: BaseAPIException
) -> JSONResponse:
    """BaseAPIException 핸들러"""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "message": exc.message,
            "error": {
                "code": exc.error_code,
                "message": exc.message,
                "detail": exc.detail_info,
            },
        },
    )


async def http_exception_handler(
    request: Request, exc: HTTPException
) -> JSONResponse:
    """HTTPException 핸들러"""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "message": str(exc.detail),
            "error": {
                "code": ErrorCode.INTERNAL_ERROR,
                "message": str(exc.detail),
                "detail": None,
            },
        },
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """요청 검증 실패 핸들러 (공통 에러 형식으로 변환)"""
    errors = jsonable_encoder(exc.errors())
    logger.info(
        f"Request validation failed on {request.url.path}: "
        f"{len(errors)} error(s)"
    )
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "message": "요청 형식이 올바르지 않습니다.",
            "error": {
                "code": ErrorCode.VALIDATION_ERROR,
                "message": "요청 형식이 올바르지 않습니다.",
                "detail": {"errors": errors},
            },
        },
    )


async def generic_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """일반 예외 핸들러"""
    logger.exception(f"Unhandled exception on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "message": "서버 내부 오류가 발생했습니다.",
            "error": {
                "code": ErrorCode.INTERNAL_ERROR,
                "message": "서버 내부 오류가 발생했습니다.",
                "detail": None,
            },
        },
    )
