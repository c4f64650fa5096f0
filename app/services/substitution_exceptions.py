"""
Word substitution exceptions.
"""

from typing import Any

from app.exceptions import ErrorTypes


class SubstitutionError(Exception):
    """Base exception for substitution engine errors."""

    def __init__(
        self,
        message: str,
        error_type: str = ErrorTypes.SUBSTITUTION_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.error_type = error_type
        self.details = details or {}


class HTMLParseError(SubstitutionError):
    """Raised when no document tree can be built from the input."""

    def __init__(self, message: str, parser: str | None = None):
        super().__init__(message, ErrorTypes.PARSE_ERROR, {"parser": parser})


class SubstitutionConfigError(SubstitutionError):
    """Raised when the word pair or matching policy is invalid."""

    def __init__(self, message: str, field: str):
        super().__init__(message, ErrorTypes.CONFIG_ERROR, {"field": field})
