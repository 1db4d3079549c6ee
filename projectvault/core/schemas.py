"""공통 API 응답 스키마

모든 엔드포인트는 ``{success, message, data}`` 형태의 봉투로 응답합니다.
포털 프런트엔드가 camelCase 필드(``githubLink``, ``matchScore``)를 사용하므로
도메인 스키마는 ``CamelSchema`` 를 상속해 camelCase 로 직렬화합니다.

Usage::

    from projectvault.core.schemas import APIResponse, create_response
    return create_response(data=project, message="프로젝트를 조회했습니다.")
"""

import math
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")

DEFAULT_SUCCESS_MESSAGE = "요청이 성공적으로 처리되었습니다."


class CamelSchema(BaseModel):
    """camelCase 직렬화 스키마 (ORM 모델 변환 지원)

    입력은 snake_case / camelCase 모두 허용합니다.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class APIResponse(BaseModel, Generic[DataT]):
    """단일 데이터 API 응답"""

    success: bool = True
    message: str = DEFAULT_SUCCESS_MESSAGE
    data: Optional[DataT] = None


class PageMeta(BaseModel):
    """페이지네이션 메타 정보"""

    total: int = Field(..., description="전체 아이템 수")
    page: int = Field(..., description="현재 페이지")
    size: int = Field(..., description="페이지 크기")
    total_pages: int = Field(..., description="전체 페이지 수")
    has_next: bool = Field(..., description="다음 페이지 존재 여부")
    has_prev: bool = Field(..., description="이전 페이지 존재 여부")


class ListAPIResponse(BaseModel, Generic[DataT]):
    """목록 데이터 API 응답 (페이지네이션 포함)"""

    success: bool = True
    message: str = DEFAULT_SUCCESS_MESSAGE
    data: list[DataT] = Field(default_factory=list)
    meta: PageMeta


def create_response(
    data: Optional[DataT] = None,
    message: str = DEFAULT_SUCCESS_MESSAGE,
    success: bool = True,
) -> APIResponse[DataT]:
    """API 응답 생성 팩토리 함수"""
    return APIResponse(success=success, message=message, data=data)


def create_list_response(
    data: list[DataT],
    total: int,
    page: int,
    size: int,
    message: str = DEFAULT_SUCCESS_MESSAGE,
) -> ListAPIResponse[DataT]:
    """목록 API 응답 생성 팩토리 함수

    Args:
        data: 목록 데이터
        total: 전체 아이템 수
        page: 현재 페이지
        size: 페이지 크기
        message: 응답 메시지

    Returns:
        ListAPIResponse 인스턴스
    """
    total_pages = math.ceil(total / size) if size > 0 else 0
    return ListAPIResponse(
        success=True,
        message=message,
        data=data,
        meta=PageMeta(
            total=total,
            page=page,
            size=size,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        ),
    )


class ErrorDetail(BaseModel):
    """에러 상세 정보"""

    code: str = Field(..., description="에러 코드")
    message: str = Field(..., description="에러 메시지")
    detail: Optional[dict[str, Any]] = Field(default=None, description="추가 정보")


class ErrorResponse(BaseModel):
    """에러 API 응답

    Example::

        {
            "success": false,
            "message": "추천 서비스를 일시적으로 사용할 수 없습니다.",
            "error": {
                "code": "RECOMMENDATION_UNAVAILABLE",
                "message": "추천 서비스를 일시적으로 사용할 수 없습니다.",
                "detail": {"user_id": "u-1", "cause": "..."}
            }
        }
    """

    success: bool = False
    message: str
    error: ErrorDetail
