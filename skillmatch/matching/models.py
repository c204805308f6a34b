"""Result models for the matching engine.

Results are frozen dataclasses built fresh on every call; ``to_dict()``
produces the camelCase field names API clients expect.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .scoring import match_level


@dataclass(frozen=True)
class SkillDetail:
    """Per-requirement scoring detail.

    Attributes:
        skill: Required skill name as supplied
        required_level: Required level as supplied (or the default)
        student_level: Candidate's level name, or "missing"
        score: Pairwise score 0-100
    """

    skill: str
    required_level: str
    student_level: str
    score: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "skill": self.skill,
            "requiredLevel": self.required_level,
            "studentLevel": self.student_level,
            "score": self.score,
        }


@dataclass(frozen=True)
class MatchResult:
    """Result of scoring a candidate's skills against a set of requirements.

    Attributes:
        percentage: Overall match 0-100
        matched_skills: Required skill names that scored above zero, in input order
        missing_skills: Required skill names that scored zero, in input order
        details: One SkillDetail per scored requirement
        message: Human-readable summary of the match
    """

    percentage: int
    matched_skills: List[str] = field(default_factory=list)
    missing_skills: List[str] = field(default_factory=list)
    details: List[SkillDetail] = field(default_factory=list)
    message: str = ""

    @property
    def match_level(self) -> str:
        """Classification label: excellent, high, medium, low or minimal."""
        return match_level(self.percentage)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "percentage": self.percentage,
            "matchLevel": self.match_level,
            "matchedSkills": list(self.matched_skills),
            "missingSkills": list(self.missing_skills),
            "details": [detail.to_dict() for detail in self.details],
            "message": self.message,
        }

    def ranking_fields(self, include_message: bool = False) -> Dict[str, Any]:
        """Fields attached to a ranked posting or candidate."""
        fields = {
            "matchPercentage": self.percentage,
            "matchLevel": self.match_level,
            "matchedSkills": list(self.matched_skills),
            "missingSkills": list(self.missing_skills),
            "matchDetails": [detail.to_dict() for detail in self.details],
        }
        if include_message:
            fields["matchMessage"] = self.message
        return fields


@dataclass(frozen=True)
class DomainAlignmentResult:
    """How well a skill set fits an organization type's typical vocabulary.

    Attributes:
        aligned: True if the skills overlap the industry keywords
        score: Alignment score 0-100
        matched_domain_skills: Industry keywords that matched, in table order
        org_type: Normalized organization type that was checked
        message: Explanation for non-scored outcomes (e.g. unknown org type)
    """

    aligned: bool
    score: int
    matched_domain_skills: List[str] = field(default_factory=list)
    org_type: Optional[str] = None
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "aligned": self.aligned,
            "score": self.score,
            "matchedDomainSkills": list(self.matched_domain_skills),
            "orgType": self.org_type,
        }
        if self.message is not None:
            data["message"] = self.message
        return data
