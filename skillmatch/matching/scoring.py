"""Pairwise skill scoring and match classification."""

import math
from typing import Tuple

# Score awarded by level gap (candidate ordinal - required ordinal)
EXACT_LEVEL_SCORE = 100
ABOVE_LEVEL_SCORE = 90
ONE_BELOW_SCORE = 70
TWO_BELOW_SCORE = 40
FAR_BELOW_SCORE = 20
MISSING_SKILL_SCORE = 0

# (minimum percentage, level label, message), highest first
MATCH_THRESHOLDS: Tuple[Tuple[int, str, str], ...] = (
    (85, "excellent", "Excellent match! Your skills align very well."),
    (70, "high", "Strong match. You meet most requirements."),
    (50, "medium", "Good match. Consider developing missing skills."),
    (30, "low", "Partial match. Some skill gaps to address."),
)
MINIMAL_MATCH = ("minimal", "Limited match. Significant skill development needed.")


def score_pair(candidate_ordinal: int, required_ordinal: int) -> int:
    """Score one candidate skill against one requirement on a 0-100 scale.

    A missing skill (ordinal 0) always scores 0. Otherwise the score is a
    fixed step function of the level gap: exact level 100, any level above
    90, one below 70, two below 40, three or more below 20.
    """
    if not candidate_ordinal:
        return MISSING_SKILL_SCORE

    diff = candidate_ordinal - required_ordinal
    if diff == 0:
        return EXACT_LEVEL_SCORE
    if diff >= 1:
        return ABOVE_LEVEL_SCORE
    if diff == -1:
        return ONE_BELOW_SCORE
    if diff == -2:
        return TWO_BELOW_SCORE
    return FAR_BELOW_SCORE


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounding up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def classify_match(percentage: int) -> Tuple[str, str]:
    """Return the (level label, message) pair for a match percentage."""
    for minimum, level, message in MATCH_THRESHOLDS:
        if percentage >= minimum:
            return level, message
    return MINIMAL_MATCH


def match_level(percentage: int) -> str:
    """Level label for a percentage: excellent, high, medium, low or minimal."""
    return classify_match(percentage)[0]


def match_message(percentage: int) -> str:
    """Human-readable message for a percentage."""
    return classify_match(percentage)[1]
