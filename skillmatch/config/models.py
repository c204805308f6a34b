"""Configuration schema models using Pydantic."""

from enum import Enum

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class RecommendationSettings(BaseModel):
    """Defaults for recommendation listings and applicant rankings."""

    page_size: int = Field(10, ge=1, le=100, description="Postings per recommendation page")
    min_match: int = Field(
        0, ge=0, le=100, description="Drop recommendations below this percentage (0 = keep all)"
    )
    top_candidates_limit: int = Field(
        20, ge=1, description="Maximum candidates returned when ranking applicants"
    )

    model_config = {"extra": "forbid"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True, "validate_default": True, "extra": "forbid"}


class AppConfig(BaseModel):
    """Root configuration object for skillmatch."""

    recommendations: RecommendationSettings = Field(
        default_factory=RecommendationSettings, description="Recommendation defaults"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    model_config = {"extra": "forbid"}
