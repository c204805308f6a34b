"""Custom exceptions for the matching engine."""

from typing import Any


class MatchingError(Exception):
    """Base exception for all matching engine errors."""

    pass


class InvalidInputError(MatchingError, ValueError):
    """A caller passed a value of the wrong shape.

    Raised only for contract violations (e.g. a bare string where a list of
    skills is expected). Malformed business data such as blank skill names or
    unknown levels never raises; it degrades to a defined result instead.
    """

    def __init__(self, field: str, expected: str, received: Any) -> None:
        """Initialize with the offending field and what was expected.

        Args:
            field: Name of the argument or field that failed validation
            expected: Human-readable description of the accepted shape
            received: The value actually supplied
        """
        self.field = field
        self.expected = expected
        self.received_type = type(received).__name__
        super().__init__(f"Invalid {field}: expected {expected}, got {self.received_type}")
