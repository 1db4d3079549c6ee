"""추천 서비스

좋아요한 프로젝트의 태그와 겹치는 프로젝트를 추천합니다.

파이프라인 (순서 고정, 재시도 없음):
1. 좋아요한 프로젝트 ID 조회 → 없으면 빈 결과 (NO_INTERACTIONS)
2. 좋아요한 프로젝트 조회
3. 태그 합집합 계산 → 비면 빈 결과 (NO_COMMON_TAGS)
4. 태그가 겹치는 후보 조회
5. 점수화 (이미 좋아요한 프로젝트 제외, 상위 limit개)

저장소 오류는 서비스 경계에서 RecommendationUnavailableException 으로
바뀌며, 원시 전송 오류는 밖으로 나가지 않습니다. 이전 결과로 대체할지는
호출자(RecommendationCache)가 결정합니다.
"""

from typing import Optional

from projectvault.core.config import settings
from projectvault.core.exceptions import StoreUnavailableError
from projectvault.core.logging import get_logger
from projectvault.domains.recommendations.adapters import (
    InteractionStore,
    ProjectCatalog,
)
from projectvault.domains.recommendations.exceptions import (
    RecommendationUnavailableException,
)
from projectvault.domains.recommendations.scorer import CandidateScorer
from projectvault.domains.recommendations.tags import aggregate_tags
from projectvault.domains.recommendations.types import (
    EmptyReason,
    RecommendationResult,
)

logger = get_logger(__name__)


class RecommendationService:
    """추천 서비스"""

    def __init__(
        self,
        interaction_store: InteractionStore,
        catalog: ProjectCatalog,
        scorer: Optional[CandidateScorer] = None,
        limit: Optional[int] = None,
    ):
        """
        Args:
            interaction_store: 좋아요 조회 어댑터
            catalog: 프로젝트 카탈로그 어댑터
            scorer: 점수 계산기 (기본: 설정의 최대 점수 사용)
            limit: 반환할 최대 추천 수 (기본: 설정값, 3)
        """
        self.interaction_store = interaction_store
        self.catalog = catalog
        self.scorer = scorer or CandidateScorer(
            max_score=settings.recommendation_max_score
        )
        self.limit = settings.recommendation_limit if limit is None else limit

    async def get_recommendations(self, user_id: str) -> RecommendationResult:
        """사용자 추천 계산

        Args:
            user_id: 사용자 ID (세션 상태가 아닌 명시적 파라미터)

        Returns:
            match_score 내림차순 추천 결과 (빈 결과는 empty_reason 포함)

        Raises:
            RecommendationUnavailableException: 저장소 조회에 실패한 경우
        """
        try:
            return await self._compute(user_id)
        except StoreUnavailableError as e:
            logger.warning(
                f"Recommendations unavailable for user {user_id}: "
                f"store={e.store}, error={e.detail_info.get('error')}"
            )
            raise RecommendationUnavailableException(
                user_id=user_id, cause=e
            ) from e

    async def _compute(self, user_id: str) -> RecommendationResult:
        liked_ids = await self.interaction_store.get_liked_project_ids(user_id)
        if not liked_ids:
            logger.info(f"No liked projects for user {user_id}")
            return RecommendationResult.empty(EmptyReason.NO_INTERACTIONS)

        # 좋아요 이후 삭제된 프로젝트는 결과에서 빠져 있음
        liked_projects = await self.catalog.get_projects_by_ids(liked_ids)
        liked_tags = aggregate_tags(liked_projects.values())
        if not liked_tags:
            logger.info(
                f"Liked projects of user {user_id} have no tags "
                f"({len(liked_ids)} liked, {len(liked_projects)} found)"
            )
            return RecommendationResult.empty(EmptyReason.NO_COMMON_TAGS)

        candidates = await self.catalog.get_projects_by_any_tag(liked_tags)
        items = self.scorer.score(
            candidates,
            liked_tags=liked_tags,
            exclude_ids=liked_ids,
            limit=self.limit,
        )

        logger.info(
            f"Recommendations for user {user_id}: "
            f"{len(liked_ids)} liked, {len(liked_tags)} tags, "
            f"{len(candidates)} candidates → {len(items)} items"
        )

        if not items:
            return RecommendationResult.empty(EmptyReason.NO_COMMON_TAGS)
        return RecommendationResult(items=tuple(items))
