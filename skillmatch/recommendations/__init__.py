"""Recommendation listings for candidates and organizations."""

from .models import RecommendationPage
from .service import RecommendationService

__all__ = ["RecommendationService", "RecommendationPage"]
