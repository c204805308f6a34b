"""Plain-text rendering of match results using Jinja2.

Templates live in the skillmatch.reporting.report_templates package
directory. StrictUndefined makes a template referencing a field the result
does not carry fail loudly instead of printing blanks.
"""

import logging
from typing import Any, Dict, List, Optional

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError

from skillmatch.matching.models import DomainAlignmentResult, MatchResult
from skillmatch.recommendations.models import RecommendationPage

from .exceptions import ReportTemplateError

logger = logging.getLogger(__name__)

RECOMMENDATIONS_TEMPLATE = "recommendations.txt.j2"
CANDIDATES_TEMPLATE = "candidates.txt.j2"
MATCH_TEMPLATE = "match.txt.j2"
ALIGNMENT_TEMPLATE = "alignment.txt.j2"


def _posting_title(posting: Optional[Dict[str, Any]]) -> str:
    if posting and posting.get("title"):
        return str(posting["title"])
    return "this posting"


class ReportRenderer:
    """Renders match results as plain-text reports for the CLI."""

    def __init__(self, template_dir: str = "report_templates"):
        """Initialize the Jinja2 environment.

        Args:
            template_dir: Directory name within the skillmatch.reporting package
        """
        self.env = Environment(
            loader=PackageLoader("skillmatch.reporting", template_dir),
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render one template.

        Raises:
            ReportTemplateError: If the template is missing or fails to render
        """
        try:
            return self.env.get_template(template_name).render(context)
        except TemplateError as e:
            error_msg = f"Report rendering failed ({template_name}): {e}"
            logger.error(error_msg, extra={"event": "reporting.render_failed"}, exc_info=True)
            raise ReportTemplateError(error_msg) from e

    def render_recommendations(self, page: RecommendationPage) -> str:
        context = page.to_dict()
        context["offset"] = (page.page - 1) * page.limit
        return self.render(RECOMMENDATIONS_TEMPLATE, context)

    def render_candidates(
        self, candidates: List[Dict[str, Any]], posting: Optional[Dict[str, Any]] = None
    ) -> str:
        return self.render(
            CANDIDATES_TEMPLATE,
            {"candidates": candidates, "posting_title": _posting_title(posting)},
        )

    def render_match(self, result: MatchResult, posting: Optional[Dict[str, Any]] = None) -> str:
        context = result.to_dict()
        context["posting_title"] = _posting_title(posting)
        return self.render(MATCH_TEMPLATE, context)

    def render_alignment(self, result: DomainAlignmentResult) -> str:
        return self.render(ALIGNMENT_TEMPLATE, result.to_dict())
