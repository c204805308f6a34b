"""Data models for recommendation listings."""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class RecommendationPage:
    """One page of ranked postings for a candidate.

    Attributes:
        items: Ranked postings on this page, best match first
        total: Ranked postings left after min-match filtering (all pages)
        page: 1-based page number
        limit: Page size used
        min_match: Percentage floor applied before paginating
    """

    items: List[Dict[str, Any]] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10
    min_match: int = 0

    @property
    def count(self) -> int:
        """Number of postings on this page."""
        return len(self.items)

    @property
    def pages(self) -> int:
        """Total number of pages at this page size."""
        return math.ceil(self.total / self.limit)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "total": self.total,
            "page": self.page,
            "pages": self.pages,
            "minMatch": self.min_match,
            "recommendations": list(self.items),
        }
