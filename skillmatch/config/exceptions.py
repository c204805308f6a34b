"""Custom exceptions for configuration management."""

from typing import List, Optional

from pydantic import ValidationError


class ConfigurationError(Exception):
    """Configuration could not be loaded or failed validation.

    Carries every individual validation error plus suggestions for fixing
    them, all rendered into the exception message.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.errors = list(errors or [])
        self.suggestions = list(suggestions or [])
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        if self.errors:
            parts.append("\nValidation Errors:")
            parts.extend(f"  {i}. {error}" for i, error in enumerate(self.errors, 1))
        if self.suggestions:
            parts.append("\nSuggestions:")
            parts.extend(f"  - {suggestion}" for suggestion in self.suggestions)
        return "\n".join(parts)

    @classmethod
    def from_validation_error(cls, error: ValidationError, source: str) -> "ConfigurationError":
        """Translate a pydantic ValidationError into readable per-field errors.

        Args:
            error: Error raised by AppConfig.model_validate()
            source: Where the configuration came from (used in the message)
        """
        errors = []
        for item in error.errors():
            field_path = " -> ".join(str(loc) for loc in item["loc"]) or "(root)"
            error_type = item["type"]
            if error_type == "missing":
                errors.append(f"Missing required field: {field_path}")
            elif error_type.endswith("_type"):
                expected = error_type[: -len("_type")]
                errors.append(
                    f"Invalid type for '{field_path}': expected {expected}, got {item.get('input')!r}"
                )
            elif error_type == "extra_forbidden":
                errors.append(f"Unknown field: {field_path}")
            else:
                errors.append(f"{field_path}: {item['msg']}")

        return cls(
            f"Configuration validation failed: {source}",
            errors=errors,
            suggestions=[
                "Review config.example.yaml for the expected format",
                "Verify field types and ranges match the schema",
            ],
        )
