"""Recommendations 도메인 스키마 정의

포털 프런트엔드가 쓰는 camelCase 형식으로 직렬화합니다.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from projectvault.core.config import MAX_MATCH_SCORE, MIN_MATCH_SCORE
from projectvault.core.schemas import CamelSchema
from projectvault.domains.recommendations.cache import CachedRecommendations
from projectvault.domains.recommendations.types import (
    EmptyReason,
    RecommendationItem,
)


class RecommendationItemResponse(CamelSchema):
    """추천 항목 응답 스키마"""

    id: str
    title: str
    description: str
    tags: list[str] = Field(default_factory=list)
    github_link: Optional[str] = None
    match_score: int = Field(
        ..., ge=MIN_MATCH_SCORE, le=MAX_MATCH_SCORE, description="매치 점수 (1~5)"
    )

    @classmethod
    def from_item(cls, item: RecommendationItem) -> "RecommendationItemResponse":
        project = item.project
        return cls(
            id=project.id,
            title=project.title,
            description=project.description,
            tags=list(project.tags),
            github_link=project.github_link,
            match_score=item.match_score,
        )


class RecommendationResponse(CamelSchema):
    """추천 목록 응답 스키마"""

    items: list[RecommendationItemResponse] = Field(default_factory=list)
    empty_reason: Optional[EmptyReason] = Field(
        default=None, description="결과가 비었을 때의 사유"
    )
    is_stale: bool = Field(
        default=False, description="계산 실패로 이전 결과를 돌려준 경우"
    )
    generated_at: datetime

    @classmethod
    def from_cached(
        cls, cached: CachedRecommendations
    ) -> "RecommendationResponse":
        result = cached.result
        return cls(
            items=[RecommendationItemResponse.from_item(i) for i in result.items],
            empty_reason=result.empty_reason,
            is_stale=cached.is_stale,
            generated_at=result.generated_at,
        )
