"""Interactions 도메인 스키마 정의"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from projectvault.core.schemas import CamelSchema


class InteractionUpdate(CamelSchema):
    """인터랙션 변경 요청 스키마

    병합(merge) 방식: 생략한 필드는 기존 값을 유지합니다.
    """

    liked: Optional[bool] = Field(default=None, description="좋아요 여부")
    bookmarked: Optional[bool] = Field(default=None, description="북마크 여부")

    @model_validator(mode="after")
    def require_any_field(self) -> "InteractionUpdate":
        if self.liked is None and self.bookmarked is None:
            raise ValueError("liked 또는 bookmarked 중 하나는 필요합니다.")
        return self


class InteractionResponse(CamelSchema):
    """인터랙션 응답 스키마"""

    user_id: str
    project_id: str
    liked: bool
    bookmarked: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
