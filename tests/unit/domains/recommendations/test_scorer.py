"""CandidateScorer 단위 테스트"""

import pytest

from projectvault.domains.recommendations.scorer import CandidateScorer
from projectvault.domains.recommendations.types import ProjectRecord


def _project(project_id: str, *tags: str) -> ProjectRecord:
    return ProjectRecord(id=project_id, title=project_id, tags=tuple(tags))


@pytest.fixture
def scorer():
    """기본 CandidateScorer (최대 점수 5)"""
    return CandidateScorer()


class TestMatchScore:
    """매치 점수 계산 테스트"""

    def test_single_common_tag_scores_one(self, scorer):
        """공통 태그 1개 → 점수 1"""
        # Given
        candidates = [_project("P3", "AI", "Mobile"), _project("P4", "Web")]

        # When
        items = scorer.score(
            candidates, liked_tags={"AI", "Web"}, exclude_ids={"P1", "P2"}
        )

        # Then
        assert {item.project.id for item in items} == {"P3", "P4"}
        assert all(item.match_score == 1 for item in items)

    def test_score_is_common_tag_count(self, scorer):
        """공통 태그 3개 → 점수 3"""
        candidates = [_project("P6", "AI", "Web", "Mobile", "Blockchain")]

        items = scorer.score(
            candidates,
            liked_tags={"AI", "Web", "Mobile"},
            exclude_ids={"P1"},
        )

        assert len(items) == 1
        assert items[0].match_score == 3

    def test_score_clamps_to_max(self, scorer):
        """공통 태그 7개여도 점수는 5"""
        tags = [f"T{i}" for i in range(7)]
        candidates = [_project("P7", *tags)]

        items = scorer.score(candidates, liked_tags=set(tags), exclude_ids=set())

        assert items[0].match_score == 5

    def test_custom_max_score(self):
        """최대 점수 설정"""
        scorer = CandidateScorer(max_score=2)
        candidates = [_project("P1", "A", "B", "C")]

        items = scorer.score(
            candidates, liked_tags={"A", "B", "C"}, exclude_ids=set()
        )

        assert items[0].match_score == 2

    @pytest.mark.parametrize("max_score", [0, 6])
    def test_invalid_max_score(self, max_score):
        """최대 점수는 1 ~ 5"""
        with pytest.raises(ValueError):
            CandidateScorer(max_score=max_score)


class TestCandidateFiltering:
    """후보 필터링 테스트"""

    def test_excludes_liked_projects(self, scorer):
        """이미 좋아요한 프로젝트는 제외"""
        candidates = [_project("P1", "AI"), _project("P3", "AI")]

        items = scorer.score(candidates, liked_tags={"AI"}, exclude_ids={"P1"})

        assert [item.project.id for item in items] == ["P3"]

    def test_drops_candidates_without_overlap(self, scorer):
        """태그가 겹치지 않는 후보는 제외"""
        candidates = [_project("P5", "Blockchain"), _project("P8")]

        items = scorer.score(candidates, liked_tags={"AI"}, exclude_ids=set())

        assert items == []

    def test_empty_liked_tags(self, scorer):
        """좋아요 태그가 없으면 빈 결과"""
        items = scorer.score(
            [_project("P3", "AI")], liked_tags=set(), exclude_ids=set()
        )

        assert items == []


class TestOrderingAndLimit:
    """정렬 및 개수 제한 테스트"""

    def test_sorted_by_score_descending(self, scorer):
        """점수 내림차순 정렬"""
        candidates = [
            _project("A", "x"),
            _project("B", "x", "y", "z"),
            _project("C", "x", "y"),
        ]

        items = scorer.score(
            candidates, liked_tags={"x", "y", "z"}, exclude_ids=set(), limit=10
        )

        scores = [item.match_score for item in items]
        assert scores == [3, 2, 1]
        assert all(a >= b for a, b in zip(scores, scores[1:]))

    def test_ties_keep_input_order(self, scorer):
        """동점은 후보 입력 순서 유지 (안정 정렬)"""
        candidates = [
            _project("P2", "x"),
            _project("P1", "x"),
            _project("P3", "x", "y"),
        ]

        items = scorer.score(
            candidates, liked_tags={"x", "y"}, exclude_ids=set(), limit=10
        )

        assert [item.project.id for item in items] == ["P3", "P2", "P1"]

    def test_default_limit_is_three(self, scorer):
        """기본 최대 3개"""
        candidates = [_project(f"P{i}", "x") for i in range(10)]

        items = scorer.score(candidates, liked_tags={"x"}, exclude_ids=set())

        assert len(items) == 3

    def test_non_positive_limit(self, scorer):
        """limit 0 이하 → 빈 결과"""
        items = scorer.score(
            [_project("P1", "x")], liked_tags={"x"}, exclude_ids=set(), limit=0
        )

        assert items == []
