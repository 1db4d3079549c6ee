"""추천 관련 타입 정의

어댑터 경계에서 정규화가 끝난 엄격한 값 타입입니다.
태그는 항상 중복 없는 문자열 튜플이며 None 이 들어오지 않습니다.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from projectvault.core.utils.datetime import now_utc


class EmptyReason(str, Enum):
    """빈 추천 결과의 사유 (오류가 아님)

    Attributes:
        NO_INTERACTIONS: 좋아요한 프로젝트가 없음
        NO_COMMON_TAGS: 좋아요한 프로젝트와 태그가 겹치는 후보가 없음
    """

    NO_INTERACTIONS = "no_interactions"
    NO_COMMON_TAGS = "no_common_tags"


@dataclass(frozen=True)
class ProjectRecord:
    """정규화된 프로젝트

    Attributes:
        id: 프로젝트 ID
        title: 제목
        description: 설명
        tags: 태그 (입력 순서 유지, 중복 없음)
        github_link: GitHub 링크
        status: 심사 상태 (추천에는 사용하지 않음)
    """

    id: str
    title: str = ""
    description: str = ""
    tags: tuple[str, ...] = ()
    github_link: Optional[str] = None
    status: Optional[str] = None

    @property
    def tag_set(self) -> frozenset[str]:
        return frozenset(self.tags)


@dataclass(frozen=True)
class RecommendationItem:
    """추천 항목 (프로젝트 + 매치 점수)

    Attributes:
        project: 추천된 프로젝트
        match_score: 공통 태그 수를 1~5로 자른 값
    """

    project: ProjectRecord
    match_score: int


@dataclass(frozen=True)
class RecommendationResult:
    """한 번의 추천 계산 결과

    Attributes:
        items: match_score 내림차순 추천 항목
        empty_reason: 결과가 비었을 때의 사유
        generated_at: 계산 시각 (UTC)
    """

    items: tuple[RecommendationItem, ...] = ()
    empty_reason: Optional[EmptyReason] = None
    generated_at: datetime = field(default_factory=now_utc)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def project_ids(self) -> list[str]:
        return [item.project.id for item in self.items]

    @classmethod
    def empty(cls, reason: EmptyReason) -> "RecommendationResult":
        return cls(items=(), empty_reason=reason)
