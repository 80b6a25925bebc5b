# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors tell the caller HOW to fix the request, not just WHAT failed.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class PayoutsException(Exception):
    """
    Base exception for the Payouts API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "PAYOUTS_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Epoch Exceptions
# =============================================================================

class InvalidEpochError(PayoutsException):
    """Raised when the epoch number is not a positive integer."""

    def __init__(self, value: Any):
        super().__init__(
            message=f"Invalid epoch number: {value}",
            code="INVALID_EPOCH",
            status_code=400,
            suggestion="Use a whole number >= 1, e.g. GET /payouts/6",
            details={"value": str(value)}
        )


class EpochTooLargeError(PayoutsException):
    """Raised when the epoch number exceeds the configured maximum."""

    def __init__(self, epoch: int, max_epoch: int):
        super().__init__(
            message=f"Epoch number too large: {epoch} (max: {max_epoch})",
            code="EPOCH_TOO_LARGE",
            status_code=400,
            suggestion=f"Request an epoch number no greater than {max_epoch}",
            details={"epoch": epoch, "max_epoch": max_epoch}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def payouts_exception_handler(
    request: Request,
    exc: PayoutsException
) -> JSONResponse:
    """
    Convert PayoutsException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )
