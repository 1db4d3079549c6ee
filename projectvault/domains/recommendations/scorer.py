"""후보 프로젝트 점수 계산

공통 태그 수를 [1, max_score] 로 자른 값이 매치 점수입니다. 정규화된
유사도(Jaccard 등)가 아니라 거친 구간화이며, 정렬은 점수 내림차순의
안정 정렬이라 동점은 후보 입력 순서를 유지합니다.
"""

from typing import Collection, Iterable

from projectvault.core.config import MAX_MATCH_SCORE, MIN_MATCH_SCORE
from projectvault.core.logging import get_logger
from projectvault.domains.recommendations.types import (
    ProjectRecord,
    RecommendationItem,
)

logger = get_logger(__name__)

DEFAULT_LIMIT = 3


class CandidateScorer:
    """후보 점수 계산기"""

    def __init__(self, max_score: int = MAX_MATCH_SCORE):
        """
        Args:
            max_score: 매치 점수 상한 (1 ~ 5, 기본 5)
        """
        if not MIN_MATCH_SCORE <= max_score <= MAX_MATCH_SCORE:
            raise ValueError(
                f"max_score must be between {MIN_MATCH_SCORE} and "
                f"{MAX_MATCH_SCORE}, got {max_score}"
            )
        self.max_score = max_score

    def _calculate_match_score(self, common_tag_count: int) -> int:
        return min(self.max_score, max(MIN_MATCH_SCORE, common_tag_count))

    def score(
        self,
        candidates: Iterable[ProjectRecord],
        liked_tags: Collection[str],
        exclude_ids: Collection[str],
        limit: int = DEFAULT_LIMIT,
    ) -> list[RecommendationItem]:
        """후보를 점수화하여 상위 N개 반환

        Args:
            candidates: 태그 겹침 조회로 얻은 후보 프로젝트
            liked_tags: 좋아요한 프로젝트들의 태그 집합
            exclude_ids: 제외할 프로젝트 ID (이미 좋아요한 프로젝트)
            limit: 반환할 최대 항목 수

        Returns:
            match_score 내림차순 추천 항목 (최대 limit개)
        """
        if limit <= 0 or not liked_tags:
            return []

        liked = frozenset(liked_tags)
        excluded = frozenset(exclude_ids)
        scored: list[RecommendationItem] = []

        for candidate in candidates:
            if candidate.id in excluded:
                continue

            # 상위 조회가 이미 태그로 걸렀더라도 다시 확인
            common_tag_count = len(candidate.tag_set & liked)
            if common_tag_count == 0:
                continue

            scored.append(
                RecommendationItem(
                    project=candidate,
                    match_score=self._calculate_match_score(common_tag_count),
                )
            )

        scored.sort(key=lambda item: item.match_score, reverse=True)

        logger.debug(
            f"Scored {len(scored)} candidates → top {min(limit, len(scored))}"
        )
        return scored[:limit]
