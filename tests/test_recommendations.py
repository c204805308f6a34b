"""Unit tests for RecommendationService."""

import logging
from unittest.mock import MagicMock

import pytest

from skillmatch.config.models import RecommendationSettings
from skillmatch.matching import InvalidInputError
from skillmatch.recommendations import RecommendationPage, RecommendationService


@pytest.fixture
def postings():
    """Eleven postings with descending match for a Python/SQL candidate."""
    return [
        {"id": "open", "title": "Open Role"},
        {"id": "py", "title": "Python Dev", "skills": ["Python"]},
        {"id": "py-sql-go", "title": "Data Eng", "skills": ["Python", "SQL", "Go"]},
        {"id": "py-go", "title": "Platform", "skills": ["Python", "Go"]},
        {"id": "go-rust-java-py", "title": "Systems", "skills": ["Go", "Rust", "Java", "Python"]},
    ] + [{"id": f"none-{i}", "title": f"Ruby {i}", "skills": ["Ruby"]} for i in range(6)]


@pytest.fixture
def candidate_skills():
    return ["Python", "SQL"]


class TestRecommendPostings:
    """Tests for recommend_postings."""

    def test_first_page_uses_default_page_size(self, postings, candidate_skills):
        """Test the settings page size applies when no limit is passed."""
        service = RecommendationService()
        page = service.recommend_postings(candidate_skills, postings)

        assert isinstance(page, RecommendationPage)
        assert page.count == 10
        assert page.total == 11
        assert page.pages == 2
        assert [item["id"] for item in page.items[:5]] == [
            "open", "py", "py-sql-go", "py-go", "go-rust-java-py"
        ]

    def test_second_page(self, postings, candidate_skills):
        """Test later pages continue the same ranking."""
        service = RecommendationService()
        page = service.recommend_postings(candidate_skills, postings, page=2)

        assert page.count == 1
        assert page.items[0]["id"] == "none-5"

    def test_page_past_the_end_is_empty(self, postings, candidate_skills):
        """Test a page beyond the last one has no items."""
        page = RecommendationService().recommend_postings(candidate_skills, postings, page=5, limit=5)

        assert page.items == []
        assert page.total == 11
        assert page.pages == 3

    def test_min_match_filters_before_paging(self, postings, candidate_skills):
        """Test postings below the floor are dropped and totals reflect it."""
        page = RecommendationService().recommend_postings(
            candidate_skills, postings, min_match=50, limit=2
        )

        # open 100, py 100, py-sql-go 67, py-go 50
        assert page.total == 4
        assert page.pages == 2
        assert page.min_match == 50
        assert all(item["matchPercentage"] >= 50 for item in page.items)

    def test_min_match_default_from_settings(self, postings, candidate_skills):
        """Test the settings floor applies when none is passed."""
        service = RecommendationService(RecommendationSettings(min_match=100))
        page = service.recommend_postings(candidate_skills, postings)

        assert [item["id"] for item in page.items] == ["open", "py"]

    def test_zero_min_match_keeps_everything(self, postings, candidate_skills):
        """Test a floor of 0 keeps zero-percent postings."""
        page = RecommendationService(RecommendationSettings(min_match=60)).recommend_postings(
            candidate_skills, postings, min_match=0, limit=100
        )
        assert page.total == len(postings)

    def test_items_are_ranking_entries(self, postings, candidate_skills):
        """Test items carry the ranking fields and message."""
        page = RecommendationService().recommend_postings(candidate_skills, postings, limit=3)
        item = page.items[2]

        assert item["title"] == "Data Eng"
        assert item["matchPercentage"] == 67
        assert item["matchLevel"] == "medium"
        assert item["missingSkills"] == ["Go"]
        assert "matchMessage" in item

    def test_no_postings(self, candidate_skills):
        """Test an empty posting list yields an empty page."""
        page = RecommendationService().recommend_postings(candidate_skills, [])

        assert page.items == []
        assert page.total == 0
        assert page.pages == 0

    @pytest.mark.parametrize(
        "kwargs,field",
        [
            ({"page": 0}, "page"),
            ({"page": "2"}, "page"),
            ({"limit": 0}, "limit"),
            ({"limit": True}, "limit"),
            ({"min_match": 101}, "min_match"),
            ({"min_match": -1}, "min_match"),
            ({"min_match": 50.5}, "min_match"),
        ],
    )
    def test_invalid_paging(self, postings, candidate_skills, kwargs, field):
        """Test malformed paging arguments raise InvalidInputError."""
        with pytest.raises(InvalidInputError) as exc_info:
            RecommendationService().recommend_postings(candidate_skills, postings, **kwargs)

        assert exc_info.value.field == field

    def test_logs_page_built(self, postings, candidate_skills):
        """Test an info record is logged for each page."""
        mock_logger = MagicMock(spec=logging.Logger)
        service = RecommendationService(logger_instance=mock_logger)
        service.recommend_postings(candidate_skills, postings, limit=4)

        mock_logger.info.assert_called_once()
        extra = mock_logger.info.call_args.kwargs["extra"]
        assert extra["event"] == "recommendations.page_built"
        assert extra["total"] == 11
        assert extra["count"] == 4

    def test_to_dict(self, postings, candidate_skills):
        """Test the page serializes with the listing envelope."""
        data = RecommendationService().recommend_postings(
            candidate_skills, postings, page=2, limit=4
        ).to_dict()

        assert data["count"] == 4
        assert data["total"] == 11
        assert data["page"] == 2
        assert data["pages"] == 3
        assert data["minMatch"] == 0
        assert len(data["recommendations"]) == 4


class TestTopCandidates:
    """Tests for top_candidates."""

    @pytest.fixture
    def posting(self):
        return {"title": "Backend Intern", "skills": ["Python", "SQL"]}

    @pytest.fixture
    def candidates(self):
        return [
            {"fullName": "Half", "skills": ["Python"]},
            {"fullName": "Full", "skills": ["Python", "SQL"]},
            {"fullName": "None", "skills": []},
        ]

    def test_best_first(self, posting, candidates):
        """Test candidates are returned best match first."""
        shortlist = RecommendationService().top_candidates(posting, candidates)

        assert [c["fullName"] for c in shortlist] == ["Full", "Half", "None"]
        assert [c["matchPercentage"] for c in shortlist] == [100, 50, 0]

    def test_limit(self, posting, candidates):
        """Test the shortlist is cut at the limit."""
        shortlist = RecommendationService().top_candidates(posting, candidates, limit=1)
        assert [c["fullName"] for c in shortlist] == ["Full"]

    def test_limit_default_from_settings(self, posting, candidates):
        """Test the settings shortlist size applies when no limit is passed."""
        service = RecommendationService(RecommendationSettings(top_candidates_limit=2))
        assert len(service.top_candidates(posting, candidates)) == 2

    def test_invalid_limit(self, posting, candidates):
        """Test a non-positive limit raises."""
        with pytest.raises(InvalidInputError):
            RecommendationService().top_candidates(posting, candidates, limit=-3)


class TestSinglePosting:
    """Tests for match_posting and domain_fit."""

    def test_match_posting_uses_leveled_requirements(self):
        """Test the posting's leveled skills are used for the match."""
        posting = {
            "skillsWithLevels": [{"name": "Python", "level": "expert"}],
            "skills": ["Cobol"],
        }
        result = RecommendationService().match_posting(
            [{"name": "Python", "level": "advanced"}], posting
        )

        assert result.percentage == 70
        assert result.matched_skills == ["Python"]

    def test_match_posting_open_role(self):
        """Test a posting without requirements matches at 100."""
        result = RecommendationService().match_posting(["Python"], {"title": "Open"})
        assert result.percentage == 100

    def test_domain_fit(self):
        """Test domain alignment is passed through."""
        result = RecommendationService().domain_fit(["SQL", "Excel", "Tableau"], "Consulting")

        assert result.aligned is True
        assert result.matched_domain_skills == ["excel", "sql", "tableau"]
        assert result.score == 60
