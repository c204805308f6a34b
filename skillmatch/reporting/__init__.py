"""Plain-text report rendering for match and recommendation results."""

from .exceptions import ReportTemplateError
from .renderer import ReportRenderer

__all__ = ["ReportRenderer", "ReportTemplateError"]
