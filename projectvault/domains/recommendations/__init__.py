"""Recommendations 도메인 모듈

좋아요한 프로젝트의 태그와 겹치는 프로젝트를 추천하는 도메인입니다.

구조:
    - types.py: 추천 코어 값 타입 (ProjectRecord, RecommendationResult)
    - tags.py: 태그 정규화 / 합집합
    - scorer.py: 후보 점수 계산
    - adapters.py: 저장소 읽기 인터페이스와 PostgreSQL 어댑터
    - service.py: 추천 파이프라인
    - cache.py: 호출자 측 결과 캐시 (stale 대체)
    - router.py: API 엔드포인트
"""

from projectvault.domains.recommendations.exceptions import (
    RecommendationErrorCode,
    RecommendationUnavailableException,
)
from projectvault.domains.recommendations.types import (
    EmptyReason,
    ProjectRecord,
    RecommendationItem,
    RecommendationResult,
)

__all__ = [
    "EmptyReason",
    "ProjectRecord",
    "RecommendationItem",
    "RecommendationResult",
    "RecommendationErrorCode",
    "RecommendationUnavailableException",
]
