"""Ranking of postings and candidates by skill match.

Postings and candidates arrive as plain mappings (e.g. documents fetched by
the caller) or pydantic models. Each one is copied, augmented with match
fields and sorted by match percentage; the caller's objects are never
modified.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel

from skillmatch.domain.models import DEFAULT_LEVEL, SkillRecord
from skillmatch.logging import get_logger

from .engine import calculate_match
from .exceptions import InvalidInputError
from .normalization import coerce_skill_set

logger = get_logger(__name__, component="ranking")

# Posting fields holding requirements, in order of precedence
POSTING_LEVELED_SKILLS_FIELD = "skillsWithLevels"
POSTING_SKILLS_FIELD = "skills"

# Candidate fields holding skills, in order of precedence
CANDIDATE_PORTFOLIO_PATH = ("portfolioData", "skills", "technical")
CANDIDATE_SKILLS_FIELD = "skills"

PERCENTAGE_FIELD = "matchPercentage"


def _entity_to_dict(entity: Any, field: str) -> Dict[str, Any]:
    """Shallow copy of a posting/candidate as a plain dict."""
    if isinstance(entity, Mapping):
        return dict(entity)
    if isinstance(entity, BaseModel):
        return entity.model_dump(by_alias=True)
    raise InvalidInputError(field, "a mapping", entity)


def _entities(values: Any, field: str) -> List[Any]:
    if values is None:
        return []
    if isinstance(values, (str, bytes, Mapping)) or not isinstance(values, Iterable):
        raise InvalidInputError(field, "a list of records", values)
    return list(values)


def _dig(data: Mapping, path: Tuple[str, ...]) -> Any:
    current: Any = data
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def resolve_posting_skills(posting: Any) -> Tuple[SkillRecord, ...]:
    """Required skills of a posting.

    Prefers the leveled ``skillsWithLevels`` list, falls back to the bare
    ``skills`` list at the default level, and is empty when neither is set.
    """
    data = _entity_to_dict(posting, "posting")
    leveled = data.get(POSTING_LEVELED_SKILLS_FIELD)
    if leveled:
        return coerce_skill_set(leveled, field=POSTING_LEVELED_SKILLS_FIELD)
    names = data.get(POSTING_SKILLS_FIELD)
    if names:
        return coerce_skill_set(names, default_level=DEFAULT_LEVEL, field=POSTING_SKILLS_FIELD)
    return ()


def resolve_candidate_skills(candidate: Any) -> Tuple[SkillRecord, ...]:
    """Skills of a candidate.

    Prefers the portfolio's technical skills, falls back to the flat
    ``skills`` list, and is empty when neither is set.
    """
    data = _entity_to_dict(candidate, "candidate")
    technical = _dig(data, CANDIDATE_PORTFOLIO_PATH)
    if technical:
        return coerce_skill_set(technical, field="portfolioData.skills.technical")
    skills = data.get(CANDIDATE_SKILLS_FIELD)
    if skills:
        return coerce_skill_set(skills, field=CANDIDATE_SKILLS_FIELD)
    return ()


def _sort_by_match(ranked: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    # sorted() is stable, so equal percentages keep their input order
    return sorted(ranked, key=lambda entry: entry[PERCENTAGE_FIELD], reverse=True)


def rank_postings_for_candidate(candidate_skills: Any, postings: Any) -> List[Dict[str, Any]]:
    """Rank postings by how well a candidate's skills meet their requirements.

    Args:
        candidate_skills: Candidate's skills (bare names, mappings or SkillRecords)
        postings: Posting records

    Returns:
        Copies of the postings with matchPercentage, matchLevel, matchedSkills,
        missingSkills, matchDetails and matchMessage attached, best match first

    Raises:
        InvalidInputError: If an argument or a posting has the wrong shape
    """
    entries = _entities(postings, "postings")
    if not entries:
        return []

    skills = coerce_skill_set(candidate_skills, field="candidate_skills")
    ranked = []
    for posting in entries:
        entry = _entity_to_dict(posting, "posting")
        result = calculate_match(skills, resolve_posting_skills(entry))
        entry.update(result.ranking_fields(include_message=True))
        ranked.append(entry)

    ranked = _sort_by_match(ranked)
    logger.debug(
        "Ranked postings for candidate",
        extra={
            "event": "ranking.postings.completed",
            "posting_count": len(ranked),
            "candidate_skill_count": len(skills),
            "top_percentage": ranked[0][PERCENTAGE_FIELD],
        },
    )
    return ranked


def rank_candidates_for_posting(posting: Any, candidates: Any) -> List[Dict[str, Any]]:
    """Rank candidates by how well their skills meet a posting's requirements.

    Args:
        posting: Posting record
        candidates: Candidate records

    Returns:
        Copies of the candidates with matchPercentage, matchLevel, matchedSkills,
        missingSkills and matchDetails attached, best match first

    Raises:
        InvalidInputError: If an argument or a candidate has the wrong shape
    """
    entries = _entities(candidates, "candidates")
    if not entries:
        return []

    required = resolve_posting_skills(posting)
    ranked = []
    for candidate in entries:
        entry = _entity_to_dict(candidate, "candidate")
        result = calculate_match(resolve_candidate_skills(entry), required)
        entry.update(result.ranking_fields())
        ranked.append(entry)

    ranked = _sort_by_match(ranked)
    logger.debug(
        "Ranked candidates for posting",
        extra={
            "event": "ranking.candidates.completed",
            "candidate_count": len(ranked),
            "required_skill_count": len(required),
            "top_percentage": ranked[0][PERCENTAGE_FIELD],
        },
    )
    return ranked
