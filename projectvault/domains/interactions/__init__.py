"""Interactions 도메인 모듈

사용자별 프로젝트 좋아요/북마크 기록을 위한 도메인입니다.
추천 도메인은 이 레코드 중 liked == true 인 것만 읽습니다.
"""

from projectvault.domains.interactions.models import ProjectInteraction
from projectvault.domains.interactions.repository import InteractionRepository

__all__ = [
    "ProjectInteraction",
    "InteractionRepository",
]
