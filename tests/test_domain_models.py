"""Unit tests for skill domain models."""

import pytest
from pydantic import ValidationError

from skillmatch.domain.models import DEFAULT_LEVEL, SkillLevel, SkillRecord


class TestSkillLevel:
    """Tests for SkillLevel enum."""

    @pytest.mark.parametrize(
        "level,ordinal",
        [
            (SkillLevel.BEGINNER, 1),
            (SkillLevel.INTERMEDIATE, 2),
            (SkillLevel.ADVANCED, 3),
            (SkillLevel.EXPERT, 4),
        ],
    )
    def test_ordinals(self, level, ordinal):
        """Test each level maps to its 1-4 ordinal."""
        assert level.ordinal == ordinal

    def test_default_level_is_intermediate(self):
        """Test bare-name skills default to intermediate."""
        assert DEFAULT_LEVEL == "intermediate"


class TestSkillRecord:
    """Tests for SkillRecord model."""

    def test_defaults(self):
        """Test an empty record has a blank name and the default level."""
        record = SkillRecord()
        assert record.name == ""
        assert record.level == "intermediate"

    def test_keeps_raw_values(self):
        """Test name and level are stored exactly as supplied."""
        record = SkillRecord(name="Node.js", level="Expert ")
        assert record.name == "Node.js"
        assert record.level == "Expert "

    def test_none_name_becomes_empty(self):
        """Test a missing name is coerced to an empty string."""
        assert SkillRecord(name=None).name == ""

    def test_non_string_name_is_stringified(self):
        """Test numeric names are converted to strings."""
        assert SkillRecord(name=3).name == "3"

    @pytest.mark.parametrize("level", [None, "", "   "])
    def test_blank_level_uses_default(self, level):
        """Test absent or blank levels fall back to intermediate."""
        assert SkillRecord(name="python", level=level).level == "intermediate"

    def test_unknown_level_is_kept(self):
        """Test unrecognized levels are preserved for reporting."""
        assert SkillRecord(name="python", level="guru").level == "guru"

    def test_record_is_frozen(self):
        """Test records cannot be modified after creation."""
        record = SkillRecord(name="python")
        with pytest.raises(ValidationError):
            record.name = "java"
