"""Custom exceptions for report rendering."""


class ReportTemplateError(Exception):
    """A report template could not be loaded or rendered."""

    pass
