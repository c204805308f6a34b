#!/usr/bin/env python3
"""Sample recommendation harness for manual end-to-end validation.

Runs every skillmatch operation against a sample marketplace document and
prints the plain-text reports, without going through the CLI.

Usage:
    # Use the bundled sample data
    python scripts/run_sample_recommendations.py

    # Use your own document and config
    python scripts/run_sample_recommendations.py --data my_marketplace.yaml --config config.yaml
"""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from skillmatch.config.loader import load_config
from skillmatch.logging.config import configure_logging
from skillmatch.main import load_input
from skillmatch.matching import resolve_candidate_skills
from skillmatch.recommendations import RecommendationService
from skillmatch.reporting import ReportRenderer

DEFAULT_DATA = Path(__file__).parent.parent / "tests" / "fixtures" / "sample_marketplace.yaml"


def print_header(title: str):
    """Print a formatted section header."""
    width = 80
    print("\n" + "=" * width)
    print(f" {title}")
    print("=" * width + "\n")


def main() -> int:
    parser = argparse.ArgumentParser(description="Run skillmatch against sample data")
    parser.add_argument("--data", type=Path, default=DEFAULT_DATA, help="Marketplace document")
    parser.add_argument("--config", type=Path, default=None, help="Configuration file")
    args = parser.parse_args()

    load_dotenv()
    app_config, env_config = load_config(args.config)
    configure_logging(level=env_config.log_level or "WARNING", format_type="key-value")

    data = load_input(args.data)
    skills = resolve_candidate_skills(data["candidate"])
    service = RecommendationService(app_config.recommendations)
    renderer = ReportRenderer()

    print_header("Recommended Postings")
    print(renderer.render_recommendations(service.recommend_postings(skills, data["postings"])))

    print_header("Match Against Single Posting")
    print(renderer.render_match(service.match_posting(skills, data["posting"]), data["posting"]))

    print_header("Top Candidates")
    print(renderer.render_candidates(
        service.top_candidates(data["posting"], data["candidates"]), data["posting"]
    ))

    print_header("Domain Alignment")
    print(renderer.render_alignment(service.domain_fit(skills, data.get("orgType"))))
    return 0


if __name__ == "__main__":
    sys.exit(main())
