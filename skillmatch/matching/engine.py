"""Skill match aggregation.

This module implements the matching logic that:
1. Coerces candidate and required skills into canonical SkillRecords
2. Builds a normalized-name lookup of the candidate's levels
3. Scores every required skill and averages the scores into a percentage
4. Splits the requirements into matched and missing skills
"""

from typing import Any, Dict, Iterable, List

from skillmatch.domain.models import SkillRecord
from skillmatch.logging import get_logger

from .models import MatchResult, SkillDetail
from .normalization import (
    coerce_skill_set,
    level_to_ordinal,
    normalize_skill_name,
    ordinal_to_level,
)
from .scoring import match_message, round_half_up, score_pair

logger = get_logger(__name__, component="matching")

NO_REQUIREMENTS_MESSAGE = "no specific skills required"
NO_CANDIDATE_SKILLS_MESSAGE = "candidate has no skills listed"


def build_skill_lookup(skills: Iterable[SkillRecord]) -> Dict[str, int]:
    """Map normalized skill name to level ordinal.

    Later entries win when two skills normalize to the same name. Skills
    whose names normalize to an empty string are ignored.
    """
    lookup: Dict[str, int] = {}
    for skill in skills:
        key = normalize_skill_name(skill.name)
        if key:
            lookup[key] = level_to_ordinal(skill.level)
    return lookup


def score_requirements(
    lookup: Dict[str, int], required: Iterable[SkillRecord]
) -> List[SkillDetail]:
    """Score each required skill against the candidate lookup.

    Requirements whose names normalize to an empty string are skipped and
    produce no detail entry.
    """
    details = []
    for requirement in required:
        key = normalize_skill_name(requirement.name)
        if not key:
            continue
        candidate_ordinal = lookup.get(key, 0)
        details.append(
            SkillDetail(
                skill=requirement.name,
                required_level=requirement.level,
                student_level=ordinal_to_level(candidate_ordinal),
                score=score_pair(candidate_ordinal, level_to_ordinal(requirement.level)),
            )
        )
    return details


def calculate_match(candidate_skills: Any, required_skills: Any) -> MatchResult:
    """Calculate how well a candidate's skills satisfy a set of requirements.

    Edge cases, in order:
    - No requirements: universal match (100).
    - Requirements but no candidate skills: 0, every requirement missing.

    Otherwise the percentage is the rounded mean of the pairwise scores of
    every requirement with a non-empty normalized name.

    Args:
        candidate_skills: Candidate's skills (bare names, mappings or SkillRecords)
        required_skills: Required skills in the same shapes

    Returns:
        MatchResult for this pair of skill sets

    Raises:
        InvalidInputError: If either argument is not a collection of skills
    """
    candidate = coerce_skill_set(candidate_skills, field="candidate_skills")
    required = coerce_skill_set(required_skills, field="required_skills")

    if not required:
        return MatchResult(percentage=100, message=NO_REQUIREMENTS_MESSAGE)

    if not candidate:
        return MatchResult(
            percentage=0,
            missing_skills=[skill.name for skill in required],
            message=NO_CANDIDATE_SKILLS_MESSAGE,
        )

    details = score_requirements(build_skill_lookup(candidate), required)

    # Every requirement had a blank name: nothing left to score
    if not details:
        return MatchResult(percentage=100, message=NO_REQUIREMENTS_MESSAGE)

    percentage = round_half_up(sum(d.score for d in details) / len(details))
    result = MatchResult(
        percentage=percentage,
        matched_skills=[d.skill for d in details if d.score > 0],
        missing_skills=[d.skill for d in details if d.score == 0],
        details=details,
        message=match_message(percentage),
    )

    logger.debug(
        "Calculated skill match",
        extra={
            "event": "matching.calculated",
            "percentage": percentage,
            "required_scored": len(details),
            "matched_count": len(result.matched_skills),
            "missing_count": len(result.missing_skills),
        },
    )
    return result
