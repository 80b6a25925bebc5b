# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from typing import Any


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for application-specific errors.

    Carries an actionable message so callers know HOW to fix the input,
    not just WHAT failed.

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging

    Example:
        class InvalidInputError(ApplicationError):
            def __init__(self, message: str, **kwargs):
                super().__init__(message, code="INVALID_INPUT", **kwargs)
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "code": self.code,
            "message": self.message,
            "suggestion": self.suggestion,
            "details": self.details,
        }
