"""Command-line entry point for skillmatch."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import json
import sys
import time
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from skillmatch.config.environment import EnvironmentConfig
from skillmatch.config.exceptions import ConfigurationError
from skillmatch.config.loader import load_config
from skillmatch.config.models import AppConfig
from skillmatch.logging import get_logger
from skillmatch.logging.config import configure_logging
from skillmatch.logging.context import log_context
from skillmatch.matching import InvalidInputError, resolve_candidate_skills
from skillmatch.recommendations import RecommendationService
from skillmatch.reporting import ReportRenderer, ReportTemplateError

logger = get_logger(__name__, component="cli")

COMMANDS = ("match", "recommend", "rank-candidates", "align")


class InputFileError(Exception):
    """The input document could not be read or lacks a required key."""

    pass


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and settle the effective logging settings.

    Log level priority: CLI > environment > config file. Log format
    priority: environment > config file.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level

    if not env_config.log_format:
        env_config.log_format = app_config.logging.format

    return app_config, env_config


def load_input(input_path: Path) -> Dict[str, Any]:
    """
    Read the command's input document (JSON for *.json files, YAML otherwise).

    Raises:
        InputFileError: If the file is unreadable, unparsable or not a mapping
    """
    try:
        text = input_path.read_text(encoding="utf-8")
    except OSError as e:
        raise InputFileError(f"Cannot read input file {input_path}: {e}") from e

    try:
        if input_path.suffix.lower() == ".json":
            document = json.loads(text)
        else:
            document = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise InputFileError(f"Cannot parse input file {input_path}: {e}") from e

    if not isinstance(document, dict):
        raise InputFileError(
            f"Input file {input_path} must contain a mapping, got {type(document).__name__}"
        )
    return document


def _require(payload: Dict[str, Any], key: str, command: str) -> Any:
    if payload.get(key) is None:
        raise InputFileError(f"'{command}' input requires a '{key}' entry")
    return payload[key]


def _candidate_skills(payload: Dict[str, Any]) -> Any:
    """Skills given directly under 'skills', else resolved from a 'candidate' record."""
    if payload.get("skills") is not None:
        return payload["skills"]
    if payload.get("candidate") is not None:
        return resolve_candidate_skills(payload["candidate"])
    return []


def run_command(
    command: str,
    payload: Dict[str, Any],
    service: RecommendationService,
    renderer: ReportRenderer,
    output_format: str = "json",
) -> str:
    """
    Execute one CLI command against an input document.

    Returns:
        Rendered output (JSON document or plain-text report)

    Raises:
        InputFileError: If the document lacks a required key
        InvalidInputError: If a value in the document has the wrong shape
    """
    data: Any
    text: str

    if command == "match":
        posting = _require(payload, "posting", command)
        result = service.match_posting(_candidate_skills(payload), posting)
        data = result.to_dict()
        text = renderer.render_match(result, posting) if output_format == "text" else ""

    elif command == "recommend":
        page = service.recommend_postings(
            _candidate_skills(payload),
            _require(payload, "postings", command),
            min_match=payload.get("minMatch"),
            page=payload.get("page", 1),
            limit=payload.get("limit"),
        )
        data = page.to_dict()
        text = renderer.render_recommendations(page) if output_format == "text" else ""

    elif command == "rank-candidates":
        posting = _require(payload, "posting", command)
        candidates: List[Dict[str, Any]] = service.top_candidates(
            posting,
            _require(payload, "candidates", command),
            limit=payload.get("limit"),
        )
        data = {"count": len(candidates), "topCandidates": candidates}
        text = renderer.render_candidates(candidates, posting) if output_format == "text" else ""

    elif command == "align":
        result = service.domain_fit(_candidate_skills(payload), payload.get("orgType"))
        data = result.to_dict()
        text = renderer.render_alignment(result) if output_format == "text" else ""

    else:
        raise ValueError(f"Unknown command: {command}")

    if output_format == "text":
        return text
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skillmatch",
        description="Skill-based matching of candidates and internship postings",
    )
    parser.add_argument("command", choices=COMMANDS, help="Operation to run")
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        required=True,
        help="JSON or YAML document with the command's inputs",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        default="json",
        choices=["json", "text"],
        help="Output format (default: json)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the skillmatch CLI.

    Returns:
        Exit code (0 for success, 1 for configuration or input errors).
    """
    start_time = time.time()
    args = build_parser().parse_args(argv)
    logging_ready = False

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)
        configure_logging(
            level=env_config.log_level,
            format_type=env_config.log_format,
            environment=env_config.environment,
        )
        logging_ready = True

        with log_context(command=args.command, run_id=uuid.uuid4().hex[:12]):
            payload = load_input(args.input)
            service = RecommendationService(app_config.recommendations)
            output = run_command(
                args.command, payload, service, ReportRenderer(), args.output_format
            )
            print(output)

            logger.info(
                f"Command '{args.command}' completed",
                extra={
                    "event": "cli.command.completed",
                    "input_path": str(args.input),
                    "output_format": args.output_format,
                    "duration_seconds": round(time.time() - start_time, 3),
                },
            )
        return 0

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        if logging_ready:
            logger.error(
                "Configuration error",
                extra={"event": "config.error", "error_type": "ConfigurationError"},
            )
        return 1
    except (InputFileError, InvalidInputError) as e:
        print(f"Input Error: {e}", file=sys.stderr)
        logger.error(
            "Invalid command input",
            extra={"event": "cli.input.invalid", "error_type": type(e).__name__, "error": str(e)},
        )
        return 1
    except ReportTemplateError as e:
        print(f"Report Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
