"""Recommendations 도메인 예외 정의"""

from enum import Enum

from projectvault.core.exceptions import (
    ServiceUnavailableException,
    StoreUnavailableError,
)


class RecommendationErrorCode(str, Enum):
    """추천 도메인 에러 코드"""

    RECOMMENDATION_UNAVAILABLE = "RECOMMENDATION_UNAVAILABLE"


class RecommendationUnavailableException(ServiceUnavailableException):
    """추천 서비스 일시 불가

    저장소 조회 실패로 추천을 계산하지 못했고, 호출자에게 되돌려 줄 이전
    결과도 없을 때 발생합니다. 원인은 ``cause`` 와 ``__cause__`` 로 전달됩니다.
    """

    def __init__(self, user_id: str, cause: StoreUnavailableError):
        self.user_id = user_id
        self.cause = cause
        super().__init__(
            message="추천 서비스를 일시적으로 사용할 수 없습니다.",
            error_code=RecommendationErrorCode.RECOMMENDATION_UNAVAILABLE,
            detail={
                "user_id": user_id,
                "store": cause.store,
                "cause": cause.message,
            },
        )
