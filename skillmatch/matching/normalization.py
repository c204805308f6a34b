"""Skill name and level normalization.

Converts free-text skill names and level strings into comparable keys, and
coerces the heterogeneous skill shapes callers send (bare names, mappings,
SkillRecord instances) into canonical SkillRecord tuples.
"""

import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any, Optional, Tuple

from pydantic import ValidationError

from skillmatch.domain.models import DEFAULT_LEVEL, SkillLevel, SkillRecord

from .exceptions import InvalidInputError

SKILL_LEVELS: Mapping = MappingProxyType({level.value: level.ordinal for level in SkillLevel})

MISSING_LEVEL = "missing"

_LEVEL_NAMES = MappingProxyType({ordinal: name for name, ordinal in SKILL_LEVELS.items()})

_NAME_STRIP_RE = re.compile(r"[^a-z0-9+#]")


def normalize_skill_name(name: Optional[Any]) -> str:
    """Canonicalize a skill name into a comparison key.

    Lower-cases, trims, and removes every character outside ``[a-z0-9+#]``.

    Example:
        >>> normalize_skill_name("Node.js")
        'nodejs'
        >>> normalize_skill_name(" C++ ")
        'c++'
    """
    if not name:
        return ""
    return _NAME_STRIP_RE.sub("", str(name).lower().strip())


def level_to_ordinal(level: Optional[Any]) -> int:
    """Map a level string to 1-4, or 0 when absent or unrecognized."""
    if not level:
        return 0
    return SKILL_LEVELS.get(str(level).lower().strip(), 0)


def ordinal_to_level(ordinal: int) -> str:
    """Map an ordinal back to its level name; 0 (or anything unknown) is 'missing'."""
    return _LEVEL_NAMES.get(ordinal, MISSING_LEVEL)


def coerce_skill_record(value: Any, default_level: str = DEFAULT_LEVEL) -> SkillRecord:
    """Convert one raw skill into a SkillRecord.

    Args:
        value: Bare skill name, mapping with ``name``/``level`` keys, or SkillRecord
        default_level: Level used when none is given

    Raises:
        InvalidInputError: If value is none of the accepted shapes
    """
    if isinstance(value, SkillRecord):
        return value
    if isinstance(value, str):
        return SkillRecord(name=value, level=default_level)
    if isinstance(value, Mapping):
        level = value.get("level") or default_level
        try:
            return SkillRecord(name=value.get("name"), level=level)
        except ValidationError as e:
            raise InvalidInputError("skill", "a skill name or {name, level} mapping", value) from e
    raise InvalidInputError("skill", "a skill name or {name, level} mapping", value)


def coerce_skill_set(
    values: Any, default_level: str = DEFAULT_LEVEL, field: str = "skills"
) -> Tuple[SkillRecord, ...]:
    """Convert a raw skill collection into a tuple of SkillRecord.

    ``None`` is treated as an empty skill set. Strings and mappings are
    rejected rather than iterated, since iterating them would silently
    produce nonsense skills.

    Args:
        values: Iterable of raw skills, or None
        default_level: Level applied to skills supplied without one
        field: Argument name used in error messages

    Raises:
        InvalidInputError: If values is not a collection of skills
    """
    if values is None:
        return ()
    if isinstance(values, (str, bytes, Mapping)) or not isinstance(values, Iterable):
        raise InvalidInputError(field, "a list of skills", values)
    return tuple(coerce_skill_record(value, default_level) for value in values)
