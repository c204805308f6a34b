"""Domain models for skills and proficiency levels."""

from .models import DEFAULT_LEVEL, SkillInput, SkillLevel, SkillRecord

__all__ = ["SkillLevel", "SkillRecord", "SkillInput", "DEFAULT_LEVEL"]
