"""Skill matching engine.

This module provides:
- Normalization of skill names and levels into comparable keys
- score_pair: level-gap scoring of one skill against one requirement
- calculate_match: aggregation of a whole skill set into a MatchResult
- Ranking of postings for a candidate and candidates for a posting
- check_domain_alignment: organization-type keyword heuristic
"""

from .domain_alignment import ORG_TYPE_SKILL_DOMAINS, check_domain_alignment
from .engine import calculate_match
from .exceptions import InvalidInputError, MatchingError
from .models import DomainAlignmentResult, MatchResult, SkillDetail
from .normalization import (
    SKILL_LEVELS,
    coerce_skill_record,
    coerce_skill_set,
    level_to_ordinal,
    normalize_skill_name,
    ordinal_to_level,
)
from .ranking import (
    rank_candidates_for_posting,
    rank_postings_for_candidate,
    resolve_candidate_skills,
    resolve_posting_skills,
)
from .scoring import classify_match, match_level, match_message, round_half_up, score_pair

__all__ = [
    # Normalization
    "SKILL_LEVELS",
    "normalize_skill_name",
    "level_to_ordinal",
    "ordinal_to_level",
    "coerce_skill_record",
    "coerce_skill_set",
    # Scoring
    "score_pair",
    "round_half_up",
    "classify_match",
    "match_level",
    "match_message",
    # Aggregation and ranking
    "calculate_match",
    "rank_postings_for_candidate",
    "rank_candidates_for_posting",
    "resolve_posting_skills",
    "resolve_candidate_skills",
    # Domain alignment
    "ORG_TYPE_SKILL_DOMAINS",
    "check_domain_alignment",
    # Models
    "MatchResult",
    "SkillDetail",
    "DomainAlignmentResult",
    # Exceptions
    "MatchingError",
    "InvalidInputError",
]
