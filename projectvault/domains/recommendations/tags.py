"""태그 정규화 및 집계

문서 저장소의 tags 필드는 누락, null, 문자열, 숫자 등 어떤 값이든 올 수
있으므로 카탈로그 경계에서 normalize_tags 로 정리한 뒤에만 사용합니다.
"""

from typing import Any, Iterable

from projectvault.domains.recommendations.types import ProjectRecord


def normalize_tags(value: Any) -> tuple[str, ...]:
    """저장된 tags 값을 태그 튜플로 정규화

    - list/tuple/set/frozenset 이 아니면 빈 튜플 (문자열 하나도 컬렉션이 아님)
    - 문자열이 아니거나 빈 문자열인 원소는 버림
    - 중복은 첫 등장 순서로 제거

    Args:
        value: 저장소에서 읽은 tags 원본 값

    Returns:
        정규화된 태그 튜플 (예외를 발생시키지 않음)
    """
    if not isinstance(value, (list, tuple, set, frozenset)):
        return ()

    tags = (tag for tag in value if isinstance(tag, str) and tag)
    return tuple(dict.fromkeys(tags))


def aggregate_tags(projects: Iterable[ProjectRecord]) -> set[str]:
    """좋아요한 프로젝트들의 태그 합집합

    Args:
        projects: 정규화된 프로젝트 목록

    Returns:
        태그 집합 (입력이 비어 있으면 빈 집합)
    """
    liked_tags: set[str] = set()
    for project in projects:
        liked_tags.update(project.tags)
    return liked_tags
