"""추천 결과 캐시 (호출자 측)

추천 코어 바깥에서 사용자별 최근 결과를 보관합니다.

- TTL(기본 5분) 이내의 결과는 다시 계산하지 않음
- 계산이 RecommendationUnavailableException 으로 실패하면 마지막 정상 결과를
  stale 로 표시해 돌려줌 (정상 결과를 오류 상태로 덮어쓰지 않음)
- 이전 결과가 없으면 예외를 그대로 전파
- 항목 수는 LRU 로 제한
"""

import time
from collections import OrderedDict
from dataclasses import dataclass
from functools import lru_cache
from typing import Awaitable, Callable, Optional

from projectvault.core.config import settings
from projectvault.core.logging import get_logger
from projectvault.domains.recommendations.exceptions import (
    RecommendationUnavailableException,
)
from projectvault.domains.recommendations.types import RecommendationResult

logger = get_logger(__name__)


@dataclass(frozen=True)
class CachedRecommendations:
    """캐시 조회 결과

    Attributes:
        result: 추천 결과
        is_stale: 계산 실패로 이전 결과를 대신 돌려준 경우 True
    """

    result: RecommendationResult
    is_stale: bool = False


@dataclass
class _Entry:
    result: RecommendationResult
    stored_at: float
    expired: bool = False


class RecommendationCache:
    """사용자별 추천 결과 캐시 (단일 프로세스, 인메모리)"""

    def __init__(
        self,
        ttl_seconds: float = 300.0,
        max_entries: int = 1024,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            ttl_seconds: 결과를 새로 계산하지 않고 재사용할 시간 (초)
            max_entries: 보관할 최대 사용자 수 (초과 시 가장 오래 안 쓴 항목 제거)
            clock: 단조 증가 시계 (테스트용 주입)
        """
        if max_entries < 1:
            raise ValueError("max_entries must be >= 1")
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: "OrderedDict[str, _Entry]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, user_id: str) -> Optional[RecommendationResult]:
        """마지막 정상 결과 (신선도와 무관)"""
        entry = self._entries.get(user_id)
        return entry.result if entry else None

    def is_fresh(self, user_id: str) -> bool:
        entry = self._entries.get(user_id)
        if entry is None or entry.expired:
            return False
        return self._clock() - entry.stored_at < self.ttl_seconds

    def put(self, user_id: str, result: RecommendationResult) -> None:
        self._entries[user_id] = _Entry(result=result, stored_at=self._clock())
        self._entries.move_to_end(user_id)
        while len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug(f"Evicted cached recommendations for user {evicted}")

    def mark_stale(self, user_id: str) -> None:
        """다음 조회 시 다시 계산하도록 표시 (마지막 결과는 대체용으로 유지)"""
        entry = self._entries.get(user_id)
        if entry is not None:
            entry.expired = True

    def clear(self) -> None:
        self._entries.clear()

    async def get_or_compute(
        self,
        user_id: str,
        compute: Callable[[], Awaitable[RecommendationResult]],
        refresh: bool = False,
    ) -> CachedRecommendations:
        """캐시 조회 후 필요하면 계산

        Args:
            user_id: 사용자 ID
            compute: 추천 계산 코루틴 함수
            refresh: True면 신선한 캐시가 있어도 다시 계산

        Returns:
            추천 결과와 stale 여부

        Raises:
            RecommendationUnavailableException: 계산에 실패했고 이전 결과도 없는 경우
        """
        if not refresh and self.is_fresh(user_id):
            self._entries.move_to_end(user_id)
            return CachedRecommendations(result=self._entries[user_id].result)

        try:
            result = await compute()
        except RecommendationUnavailableException:
            previous = self.get(user_id)
            if previous is None:
                raise
            logger.warning(
                f"Serving stale recommendations for user {user_id} "
                f"(generated at {previous.generated_at.isoformat()})"
            )
            return CachedRecommendations(result=previous, is_stale=True)

        self.put(user_id, result)
        return CachedRecommendations(result=result)


@lru_cache
def _create_recommendation_cache() -> RecommendationCache:
    """추천 캐시 싱글톤 생성 (캐시됨)"""
    return RecommendationCache(
        ttl_seconds=settings.recommendation_cache_ttl_seconds,
        max_entries=settings.recommendation_cache_max_entries,
    )


def get_recommendation_cache() -> RecommendationCache:
    """FastAPI DI용 추천 캐시 의존성"""
    return _create_recommendation_cache()
