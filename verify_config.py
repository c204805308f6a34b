#!/usr/bin/env python3
"""Verify config.example.yaml (or a given file) against the skillmatch schema."""

import sys
from pathlib import Path

import yaml

from skillmatch.config import validate_config_file


def verify_config(path: Path) -> bool:
    """Validate the file and print a short summary of the effective settings."""
    if not path.exists():
        print(f"✗ {path} not found")
        return False

    if not validate_config_file(path):
        return False

    with open(path, "r") as f:
        config = yaml.safe_load(f) or {}

    recommendations = config.get("recommendations", {})
    print(f"  - Page size: {recommendations.get('page_size', 10)}")
    print(f"  - Min match: {recommendations.get('min_match', 0)}%")
    print(f"  - Top candidates limit: {recommendations.get('top_candidates_limit', 20)}")
    return True


if __name__ == "__main__":
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("config.example.yaml")
    sys.exit(0 if verify_config(target) else 1)
