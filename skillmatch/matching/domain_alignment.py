"""Organization-type to skill-domain alignment heuristic.

A secondary signal, independent of requirement matching: checks how many of
an industry's typical keywords show up in a candidate's skills.
"""

from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Tuple

from skillmatch.logging import get_logger

from .exceptions import InvalidInputError
from .models import DomainAlignmentResult
from .normalization import coerce_skill_set, normalize_skill_name
from .scoring import round_half_up

logger = get_logger(__name__, component="domain_alignment")

ORG_TYPE_SKILL_DOMAINS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "it": (
        "javascript", "python", "java", "react", "nodejs", "aws", "docker", "git",
        "sql", "mongodb", "typescript", "angular", "vue", "devops", "kubernetes",
        "linux", "api", "rest", "graphql", "microservices",
    ),
    "technology": (
        "javascript", "python", "java", "react", "nodejs", "aws", "docker", "git",
        "sql", "mongodb", "typescript", "angular", "vue", "devops", "kubernetes",
    ),
    "finance": (
        "excel", "sql", "python", "r", "tableau", "powerbi", "accounting",
        "financial modeling", "data analysis", "bloomberg", "risk management",
        "compliance",
    ),
    "banking": (
        "excel", "sql", "python", "accounting", "financial analysis",
        "risk management", "compliance", "sas", "data analysis", "regulatory",
    ),
    "healthcare": (
        "python", "r", "sql", "healthcare informatics", "ehr", "hipaa",
        "data analysis", "medical terminology", "clinical research",
    ),
    "marketing": (
        "google analytics", "seo", "sem", "social media", "content marketing",
        "copywriting", "adobe creative", "hubspot", "mailchimp", "a/b testing",
    ),
    "consulting": (
        "excel", "powerpoint", "data analysis", "problem solving", "communication",
        "project management", "sql", "tableau",
    ),
    "education": (
        "teaching", "curriculum development", "lms", "communication", "presentation",
        "research", "educational technology",
    ),
    "manufacturing": (
        "lean", "six sigma", "cad", "erp", "supply chain", "quality control",
        "autocad", "solidworks",
    ),
    "retail": (
        "inventory management", "pos systems", "customer service", "merchandising",
        "excel", "data analysis", "crm",
    ),
    "media": (
        "adobe creative", "video editing", "content creation", "social media",
        "copywriting", "photography", "seo",
    ),
})

# Keyword count treated as full coverage, whatever the list length
MAX_SCORED_KEYWORDS = 5

UNKNOWN_ORG_TYPE_SCORE = 50
UNKNOWN_ORG_TYPE_MESSAGE = "unknown org type"


def _keyword_matches(keyword: str, skill_names: List[str]) -> bool:
    return any(keyword in name or name in keyword for name in skill_names)


def check_domain_alignment(candidate_skills: Any, org_type: Optional[str]) -> DomainAlignmentResult:
    """Score a candidate's skills against an organization type's keyword set.

    Matching is deliberately loose: a keyword matches when it contains, or is
    contained in, some normalized skill name. The score divides by at most
    MAX_SCORED_KEYWORDS keywords so long industry lists stay reachable.

    Args:
        candidate_skills: Candidate's skills (bare names, mappings or SkillRecords)
        org_type: Organization type, e.g. "IT" or "finance"

    Returns:
        DomainAlignmentResult; unknown org types get a neutral score of 50

    Raises:
        InvalidInputError: If org_type is not a string or skills are not a collection
    """
    if org_type is not None and not isinstance(org_type, str):
        raise InvalidInputError("org_type", "a string", org_type)

    skills = coerce_skill_set(candidate_skills, field="candidate_skills")
    normalized_org_type = (org_type or "").lower().strip()

    if not normalized_org_type or not skills:
        return DomainAlignmentResult(aligned=False, score=0, org_type=normalized_org_type or None)

    keywords = ORG_TYPE_SKILL_DOMAINS.get(normalized_org_type)
    if not keywords:
        return DomainAlignmentResult(
            aligned=True,
            score=UNKNOWN_ORG_TYPE_SCORE,
            org_type=normalized_org_type,
            message=UNKNOWN_ORG_TYPE_MESSAGE,
        )

    skill_names = [name for name in (normalize_skill_name(s.name) for s in skills) if name]
    matched = [keyword for keyword in keywords if _keyword_matches(keyword, skill_names)]

    score = round_half_up(len(matched) / min(len(keywords), MAX_SCORED_KEYWORDS) * 100)
    result = DomainAlignmentResult(
        aligned=bool(matched),
        score=min(score, 100),
        matched_domain_skills=matched,
        org_type=normalized_org_type,
    )

    logger.debug(
        "Checked domain alignment",
        extra={
            "event": "domain_alignment.checked",
            "org_type": normalized_org_type,
            "matched_count": len(matched),
            "score": result.score,
        },
    )
    return result
