"""Boundary models for skills and proficiency levels.

This module defines the canonical shapes every skill input is converted into
before any scoring logic runs:
- SkillLevel: the four recognized proficiency levels
- SkillRecord: a single (name, level) pair
- SkillInput: the accepted raw shapes (bare name, mapping, or SkillRecord)
"""

from enum import Enum
from typing import Any, Mapping, Union

from pydantic import BaseModel, Field, field_validator


class SkillLevel(str, Enum):
    """Recognized skill proficiency levels, ordered from lowest to highest."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"

    @property
    def ordinal(self) -> int:
        """Integer rank of the level (beginner=1 ... expert=4)."""
        return list(SkillLevel).index(self) + 1


# Level assumed for skills supplied as a bare name or without a level
DEFAULT_LEVEL = SkillLevel.INTERMEDIATE.value


class SkillRecord(BaseModel):
    """A single skill with its proficiency level.

    The name is kept exactly as supplied (it is echoed back in match details);
    the level is kept as the raw string so unrecognized levels can still be
    reported. Comparison keys are derived by the matching normalizer.
    """

    name: str = Field("", description="Skill name as supplied by the caller")
    level: str = Field(DEFAULT_LEVEL, description="Proficiency level as supplied")

    model_config = {"frozen": True}

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, v: Any) -> str:
        """Treat a missing name as empty and stringify anything else."""
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @field_validator("level", mode="before")
    @classmethod
    def coerce_level(cls, v: Any) -> str:
        """Fall back to the default level when the level is absent or blank."""
        if v is None:
            return DEFAULT_LEVEL
        text = v if isinstance(v, str) else str(v)
        return text if text.strip() else DEFAULT_LEVEL


# Raw skill shapes accepted at the API boundary
SkillInput = Union[str, Mapping[str, Any], SkillRecord]
