"""Structured logging helpers shared by every skillmatch component."""

import logging
from typing import Optional, Union


class ComponentLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that stamps a component name onto every record.

    Fields passed through ``extra=`` on the call win over the adapter's own.
    """

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(
    name: str, component: Optional[str] = None
) -> Union[logging.Logger, ComponentLoggerAdapter]:
    """Get a logger, optionally bound to a component.

    Args:
        name: Logger name (typically __name__)
        component: Component identifier added to all records (e.g. "matching")

    Example:
        >>> logger = get_logger(__name__, component="ranking")
        >>> logger.debug("Ranked postings", extra={"event": "ranking.completed"})
    """
    logger = logging.getLogger(name)
    if component:
        return ComponentLoggerAdapter(logger, {"component": component})
    return logger
