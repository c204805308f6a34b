"""Environment variable loading and validation."""

import os
from typing import Optional

from .exceptions import ConfigurationError
from .models import LogFormat, LogLevel


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        log_level: Optional[str] = None,
        log_format: Optional[str] = None,
        environment: Optional[str] = None,
    ):
        self.log_level = log_level
        self.log_format = log_format
        self.environment = environment or "local"


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    All variables are optional:
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_FORMAT: Override log format (json, key-value)
    - ENVIRONMENT: Environment label stamped on log records (default: local)

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If a variable is set to an invalid value
    """
    errors = []

    log_level = os.getenv("LOG_LEVEL") or None
    log_format = os.getenv("LOG_FORMAT") or None
    environment = os.getenv("ENVIRONMENT") or None

    valid_levels = [level.value for level in LogLevel]
    if log_level:
        log_level = log_level.strip().upper()
        if log_level not in valid_levels:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(valid_levels)}"
            )

    valid_formats = [fmt.value for fmt in LogFormat]
    if log_format:
        log_format = log_format.strip().lower()
        if log_format not in valid_formats:
            errors.append(
                f"Invalid LOG_FORMAT: '{log_format}'. Must be one of: {', '.join(valid_formats)}"
            )

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Copy .env.example to .env and adjust the values",
                "Unset the variable to fall back to config.yaml",
            ],
        )

    return EnvironmentConfig(
        log_level=log_level,
        log_format=log_format,
        environment=environment.strip() if environment else None,
    )
