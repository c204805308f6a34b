"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for settings that are valid but probably unintended.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    recommendations = config_dict.get("recommendations", {})
    if not isinstance(recommendations, dict):
        return warning_messages

    # A high floor hides most postings from candidates with partial skills
    min_match = recommendations.get("min_match", 0)
    if isinstance(min_match, int) and min_match >= 85:
        warning_messages.append(
            f"High min_match ({min_match}) will hide all but excellent matches"
        )

    top_limit = recommendations.get("top_candidates_limit", 20)
    if isinstance(top_limit, int) and top_limit > 500:
        warning_messages.append(
            f"Large top_candidates_limit ({top_limit}) may produce very long applicant lists"
        )

    page_size = recommendations.get("page_size", 10)
    if isinstance(page_size, int) and isinstance(top_limit, int) and page_size > top_limit:
        warning_messages.append(
            f"page_size ({page_size}) is larger than top_candidates_limit ({top_limit})"
        )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
