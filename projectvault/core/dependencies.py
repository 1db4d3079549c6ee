"""공통 의존성 함수 정의"""

from fastapi import Header

from projectvault.core.config import settings
from projectvault.core.exceptions import ErrorCode, UnauthorizedException


async def verify_internal_api_key(
    x_internal_api_key: str = Header(..., alias="X-Internal-Api-Key")
) -> None:
    """내부 API Key 검증 (포털 백엔드 통신용)

    Args:
        x_internal_api_key: 요청 헤더의 X-Internal-Api-Key 값

    Raises:
        UnauthorizedException: API Key가 유효하지 않은 경우
    """
    if x_internal_api_key != settings.internal_api_key:
        raise UnauthorizedException(
            message="유효하지 않은 API 키입니다.",
            error_code=ErrorCode.INVALID_API_KEY,
        )
