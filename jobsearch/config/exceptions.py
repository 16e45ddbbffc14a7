"""Exceptions raised while loading configuration and alias tables."""

from typing import List, Optional

from pydantic import ValidationError


class ConfigurationError(Exception):
    """
    Raised when a configuration file, environment variable or alias table is invalid.

    Carries a list of specific errors and a list of suggestions, both rendered
    into the exception message.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: Primary error message
            errors: Specific validation errors
            suggestions: Hints for fixing the errors
        """
        self.message = message
        self.errors = errors or []
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]

        if self.errors:
            parts.append("\nValidation Errors:")
            for i, error in enumerate(self.errors, 1):
                parts.append(f"  {i}. {error}")

        if self.suggestions:
            parts.append("\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"  - {suggestion}")

        return "\n".join(parts)

    @classmethod
    def from_validation_error(
        cls,
        message: str,
        error: ValidationError,
        suggestions: Optional[List[str]] = None,
    ) -> "ConfigurationError":
        """Build a ConfigurationError with one readable line per pydantic error.

        Args:
            message: Primary error message
            error: Pydantic ValidationError to convert
            suggestions: Hints for fixing the errors

        Returns:
            ConfigurationError listing every field error
        """
        return cls(message, errors=describe_validation_errors(error), suggestions=suggestions)


def describe_validation_errors(error: ValidationError) -> List[str]:
    """Turn pydantic validation errors into user-facing messages.

    Args:
        error: Pydantic ValidationError

    Returns:
        List of messages such as "Missing required field: entries -> 0 -> canonical_term"
    """
    messages = []
    for item in error.errors():
        field_path = " -> ".join(str(loc) for loc in item["loc"]) or "(root)"
        error_type = item["type"]

        if error_type == "missing":
            messages.append(f"Missing required field: {field_path}")
        elif error_type in ("string_type", "int_type", "float_type", "bool_type", "list_type"):
            expected_type = error_type.replace("_type", "")
            messages.append(
                f"Invalid type for '{field_path}': expected {expected_type}, got {item.get('input')!r}"
            )
        elif "enum" in error_type or error_type == "literal_error":
            messages.append(f"Invalid value for '{field_path}': {item['msg']}")
        else:
            messages.append(f"{field_path}: {item['msg']}")
    return messages
