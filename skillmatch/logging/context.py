"""Context propagation for structured logging.

Fields pushed here are merged into every log record emitted inside the scope
(see ContextualFilter). Context lives in a ContextVar, so concurrent ranking
requests served from different threads or tasks never see each other's fields.
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Any, Dict, Iterator, Optional

_log_context: ContextVar[Optional[Dict[str, Any]]] = ContextVar("skillmatch_log_context", default=None)


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the fields active in the current context."""
    return dict(_log_context.get() or {})


def push_log_context(**fields: Any) -> Token:
    """Merge fields into the current context.

    Returns:
        Token to hand to pop_log_context() to restore the previous state
    """
    return _log_context.set({**get_log_context(), **fields})


def pop_log_context(token: Token) -> None:
    """Restore the context that was active before push_log_context()."""
    _log_context.reset(token)


def clear_log_context() -> None:
    """Drop every context field (mainly useful in tests)."""
    _log_context.set(None)


@contextmanager
def log_context(**fields: Any) -> Iterator[Dict[str, Any]]:
    """Scope fields to a block of code.

    Example:
        >>> with log_context(command="recommend", run_id="abc123"):
        ...     logger.info("Ranking postings")  # carries command and run_id
    """
    token = push_log_context(**fields)
    try:
        yield get_log_context()
    finally:
        pop_log_context(token)
