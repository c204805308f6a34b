"""Unit tests for the ranking layer."""

import copy

import pytest
from pydantic import BaseModel

from skillmatch.domain.models import SkillRecord
from skillmatch.matching import (
    InvalidInputError,
    rank_candidates_for_posting,
    rank_postings_for_candidate,
    resolve_candidate_skills,
    resolve_posting_skills,
)


@pytest.fixture
def postings():
    """Postings with a spread of requirements."""
    return [
        {"id": "p1", "title": "Data Intern", "skills": ["SQL", "Excel"]},
        {
            "id": "p2",
            "title": "Backend Intern",
            "skillsWithLevels": [{"name": "Python", "level": "intermediate"}],
            "skills": ["Java"],
        },
        {"id": "p3", "title": "Open Role"},
        {"id": "p4", "title": "Java Intern", "skills": ["Java"]},
    ]


class TestResolvePostingSkills:
    """Tests for posting requirement resolution."""

    def test_prefers_skills_with_levels(self):
        """Test leveled skills win over the bare list."""
        skills = resolve_posting_skills(
            {"skillsWithLevels": [{"name": "Go", "level": "expert"}], "skills": ["Java"]}
        )
        assert skills == (SkillRecord(name="Go", level="expert"),)

    def test_falls_back_to_bare_skills(self):
        """Test bare skills default to intermediate."""
        skills = resolve_posting_skills({"skillsWithLevels": [], "skills": ["Java", "Git"]})
        assert [(s.name, s.level) for s in skills] == [("Java", "intermediate"), ("Git", "intermediate")]

    @pytest.mark.parametrize("posting", [{}, {"skills": []}, {"skills": None, "skillsWithLevels": None}])
    def test_empty_when_unset(self, posting):
        """Test postings without skills resolve to no requirements."""
        assert resolve_posting_skills(posting) == ()

    def test_rejects_non_mapping(self):
        """Test a non-mapping posting raises."""
        with pytest.raises(InvalidInputError):
            resolve_posting_skills(["python"])


class TestResolveCandidateSkills:
    """Tests for candidate skill resolution."""

    def test_prefers_portfolio_technical_skills(self):
        """Test portfolio technical skills win over the flat list."""
        candidate = {
            "portfolioData": {"skills": {"technical": [{"name": "Rust", "level": "advanced"}]}},
            "skills": ["Excel"],
        }
        assert resolve_candidate_skills(candidate) == (SkillRecord(name="Rust", level="advanced"),)

    @pytest.mark.parametrize(
        "portfolio",
        [None, {}, {"skills": None}, {"skills": {}}, {"skills": {"technical": []}}, "n/a"],
    )
    def test_falls_back_to_flat_skills(self, portfolio):
        """Test missing or empty portfolio data falls back to skills."""
        candidate = {"portfolioData": portfolio, "skills": ["Excel"]}
        assert resolve_candidate_skills(candidate) == (SkillRecord(name="Excel"),)

    def test_empty_when_unset(self):
        """Test a candidate with no skill fields has no skills."""
        assert resolve_candidate_skills({"fullName": "No Skills"}) == ()

    def test_accepts_pydantic_models(self):
        """Test pydantic records are read through model_dump."""

        class Candidate(BaseModel):
            fullName: str
            skills: list

        assert resolve_candidate_skills(Candidate(fullName="A", skills=["Go"])) == (SkillRecord(name="Go"),)


class TestRankPostingsForCandidate:
    """Tests for rank_postings_for_candidate."""

    def test_sorted_by_percentage(self, postings):
        """Test postings come back best match first."""
        ranked = rank_postings_for_candidate([{"name": "Python", "level": "advanced"}, "SQL"], postings)

        assert [p["id"] for p in ranked] == ["p3", "p2", "p1", "p4"]
        assert [p["matchPercentage"] for p in ranked] == [100, 90, 50, 0]

    def test_augmented_fields(self, postings):
        """Test ranking fields including the message are attached."""
        ranked = rank_postings_for_candidate(["SQL"], postings)
        data_intern = next(p for p in ranked if p["id"] == "p1")

        assert data_intern["title"] == "Data Intern"
        assert data_intern["matchPercentage"] == 50
        assert data_intern["matchLevel"] == "medium"
        assert data_intern["matchedSkills"] == ["SQL"]
        assert data_intern["missingSkills"] == ["Excel"]
        assert data_intern["matchMessage"] == "Good match. Consider developing missing skills."
        assert data_intern["matchDetails"][0] == {
            "skill": "SQL",
            "requiredLevel": "intermediate",
            "studentLevel": "intermediate",
            "score": 100,
        }

    def test_ties_keep_input_order(self):
        """Test equal percentages keep their original relative order."""
        postings = [{"id": i, "skills": ["Go"]} for i in range(5)]
        ranked = rank_postings_for_candidate(["Rust"], postings)

        assert [p["id"] for p in ranked] == [0, 1, 2, 3, 4]

    def test_is_permutation_of_input(self, postings):
        """Test every posting appears exactly once."""
        ranked = rank_postings_for_candidate(["Java"], postings)

        assert len(ranked) == len(postings)
        assert sorted(p["id"] for p in ranked) == sorted(p["id"] for p in postings)
        percentages = [p["matchPercentage"] for p in ranked]
        assert percentages == sorted(percentages, reverse=True)

    def test_inputs_not_mutated(self, postings):
        """Test the caller's postings are never modified."""
        original = copy.deepcopy(postings)
        ranked = rank_postings_for_candidate(["Python"], postings)

        assert postings == original
        assert all(r is not p for r in ranked for p in postings)

    @pytest.mark.parametrize("empty", [None, []])
    def test_empty_postings(self, empty):
        """Test no postings yields an empty ranking."""
        assert rank_postings_for_candidate(["Python"], empty) == []

    def test_no_candidate_skills(self, postings):
        """Test a candidate without skills only matches open postings."""
        ranked = rank_postings_for_candidate([], postings)

        assert ranked[0]["id"] == "p3"
        assert ranked[0]["matchPercentage"] == 100
        assert all(p["matchPercentage"] == 0 for p in ranked[1:])

    def test_rejects_non_collection(self):
        """Test a single posting mapping instead of a list raises."""
        with pytest.raises(InvalidInputError):
            rank_postings_for_candidate(["Python"], {"skills": ["Python"]})

    def test_rejects_non_mapping_posting(self):
        """Test a posting that is not a mapping raises."""
        with pytest.raises(InvalidInputError):
            rank_postings_for_candidate(["Python"], ["Backend Intern"])


class TestRankCandidatesForPosting:
    """Tests for rank_candidates_for_posting."""

    @pytest.fixture
    def posting(self):
        return {
            "title": "Backend Intern",
            "skillsWithLevels": [
                {"name": "Python", "level": "advanced"},
                {"name": "Docker", "level": "beginner"},
            ],
        }

    def test_ranked_candidates(self, posting):
        """Test candidates are scored from portfolio or flat skills and sorted."""
        candidates = [
            {"name": "flat", "skills": ["Python"]},
            {"name": "none"},
            {
                "name": "portfolio",
                "portfolioData": {
                    "skills": {"technical": [{"name": "python", "level": "expert"}, "docker"]}
                },
            },
        ]
        ranked = rank_candidates_for_posting(posting, candidates)

        # portfolio: (90 + 90) / 2 = 90; flat: (70 + 0) / 2 = 35; none: 0
        assert [c["name"] for c in ranked] == ["portfolio", "flat", "none"]
        assert [c["matchPercentage"] for c in ranked] == [90, 35, 0]
        assert ranked[2]["missingSkills"] == ["Python", "Docker"]

    def test_no_message_field(self, posting):
        """Test candidate rankings carry no matchMessage."""
        ranked = rank_candidates_for_posting(posting, [{"skills": ["Python"]}])
        assert "matchMessage" not in ranked[0]
        assert ranked[0]["matchLevel"] == "low"

    def test_posting_without_requirements(self):
        """Test every candidate is a universal match for an open posting."""
        ranked = rank_candidates_for_posting({"title": "Open"}, [{"skills": []}, {"skills": ["Go"]}])
        assert [c["matchPercentage"] for c in ranked] == [100, 100]

    def test_empty_candidates(self, posting):
        """Test no candidates yields an empty ranking."""
        assert rank_candidates_for_posting(posting, []) == []

    @pytest.mark.parametrize("candidates", [None, []])
    def test_empty_candidates_skip_posting(self, candidates):
        """Test an empty candidate list returns before the posting is read."""
        assert rank_candidates_for_posting(None, candidates) == []

    def test_inputs_not_mutated(self, posting):
        """Test posting and candidates are never modified."""
        candidates = [{"skills": ["Python"]}]
        original_posting = copy.deepcopy(posting)
        rank_candidates_for_posting(posting, candidates)

        assert candidates == [{"skills": ["Python"]}]
        assert posting == original_posting

    def test_rejects_non_mapping_posting(self):
        """Test a posting that is not a mapping raises."""
        with pytest.raises(InvalidInputError):
            rank_candidates_for_posting("Backend Intern", [{"skills": ["Python"]}])
