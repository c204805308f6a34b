"""Recommendation service built on the matching engine.

Adds the listing behaviour callers need around the pure ranking functions:
percentage floors, pagination, applicant shortlists, and single-posting
match checks, with defaults taken from RecommendationSettings.
"""

import logging
from typing import Any, Dict, List, Optional

from skillmatch.config.models import RecommendationSettings
from skillmatch.logging import get_logger
from skillmatch.matching import (
    DomainAlignmentResult,
    InvalidInputError,
    MatchResult,
    calculate_match,
    check_domain_alignment,
    rank_candidates_for_posting,
    rank_postings_for_candidate,
    resolve_posting_skills,
)
from skillmatch.matching.ranking import PERCENTAGE_FIELD

from .models import RecommendationPage

logger = get_logger(__name__, component="recommendations")


def _positive_int(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidInputError(field, "a positive integer", value)
    return value


def _percentage(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 100:
        raise InvalidInputError(field, "an integer between 0 and 100", value)
    return value


class RecommendationService:
    """Serves ranked postings to candidates and ranked applicants to organizations.

    Responsibilities:
    - Rank postings for a candidate, apply a min-match floor and paginate
    - Shortlist the best-matching candidates for a posting
    - Score a candidate against one posting
    - Report organization-type alignment
    """

    def __init__(
        self,
        settings: Optional[RecommendationSettings] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize RecommendationService.

        Args:
            settings: Listing defaults (page size, min match, shortlist size)
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.settings = settings or RecommendationSettings()
        self.logger = logger_instance or logger

    def recommend_postings(
        self,
        candidate_skills: Any,
        postings: Any,
        min_match: Optional[int] = None,
        page: int = 1,
        limit: Optional[int] = None,
    ) -> RecommendationPage:
        """Rank postings for a candidate and return one page of them.

        Args:
            candidate_skills: Candidate's skills
            postings: Posting records
            min_match: Drop postings below this percentage (0 keeps all;
                defaults to settings.min_match)
            page: 1-based page number
            limit: Page size (defaults to settings.page_size)

        Raises:
            InvalidInputError: If paging arguments or inputs are malformed
        """
        min_match = _percentage(
            self.settings.min_match if min_match is None else min_match, "min_match"
        )
        page = _positive_int(page, "page")
        limit = _positive_int(self.settings.page_size if limit is None else limit, "limit")

        ranked = rank_postings_for_candidate(candidate_skills, postings)
        if min_match > 0:
            ranked = [entry for entry in ranked if entry[PERCENTAGE_FIELD] >= min_match]

        start = (page - 1) * limit
        result = RecommendationPage(
            items=ranked[start:start + limit],
            total=len(ranked),
            page=page,
            limit=limit,
            min_match=min_match,
        )

        self.logger.info(
            f"Built recommendation page {page}/{result.pages}",
            extra={
                "event": "recommendations.page_built",
                "total": result.total,
                "count": result.count,
                "page": page,
                "limit": limit,
                "min_match": min_match,
            },
        )
        return result

    def top_candidates(
        self, posting: Any, candidates: Any, limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """Return the best-matching candidates for a posting.

        Args:
            posting: Posting record
            candidates: Candidate records
            limit: Maximum candidates returned (defaults to settings.top_candidates_limit)

        Raises:
            InvalidInputError: If limit or inputs are malformed
        """
        limit = _positive_int(
            self.settings.top_candidates_limit if limit is None else limit, "limit"
        )
        ranked = rank_candidates_for_posting(posting, candidates)
        shortlist = ranked[:limit]

        self.logger.info(
            f"Shortlisted {len(shortlist)} of {len(ranked)} candidates",
            extra={
                "event": "recommendations.candidates_ranked",
                "total_candidates": len(ranked),
                "count": len(shortlist),
                "limit": limit,
            },
        )
        return shortlist

    def match_posting(self, candidate_skills: Any, posting: Any) -> MatchResult:
        """Score a candidate's skills against a single posting's requirements."""
        result = calculate_match(candidate_skills, resolve_posting_skills(posting))
        self.logger.info(
            f"Calculated match: {result.percentage}%",
            extra={
                "event": "recommendations.match_calculated",
                "percentage": result.percentage,
                "match_level": result.match_level,
            },
        )
        return result

    def domain_fit(self, candidate_skills: Any, org_type: Optional[str]) -> DomainAlignmentResult:
        """Check how well a candidate's skills fit an organization type."""
        result = check_domain_alignment(candidate_skills, org_type)
        self.logger.info(
            f"Domain alignment for '{result.org_type}': {result.score}",
            extra={
                "event": "recommendations.domain_checked",
                "org_type": result.org_type,
                "aligned": result.aligned,
                "score": result.score,
            },
        )
        return result
