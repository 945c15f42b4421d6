"""
Error Taxonomy - Consistent error codes across the application.

Usage:
    from portfolio.config.errors import ValidationError

    raise ValidationError("All fields are required", {"missing": ["email"]})

Callers only ever see ``{"success": false, "message": ...}``; ``details`` are
for the operator log.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Standardized error codes for machine-readable error responses."""

    # Contact errors
    CONTACT_SUBMISSION_FAILED = "CONTACT_SUBMISSION_FAILED"

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"


class PortfolioError(Exception):
    """Base exception with error code support."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(f"[{code.value}] {message}")

    @property
    def http_status(self) -> int:
        return error_code_to_status(self.code)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the response body returned to API callers."""
        return {
            "success": False,
            "message": self.message,
        }


class ValidationError(PortfolioError):
    """Request input failed validation."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.VALIDATION_ERROR, message, details)


class NotFoundError(PortfolioError):
    """No route matches the request."""

    def __init__(
        self,
        message: str = "API endpoint not found",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(ErrorCode.NOT_FOUND, message, details)


class InternalError(PortfolioError):
    """Unexpected failure; message is generic, cause goes to details."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
    ) -> None:
        super().__init__(code, message, details)


def error_code_to_status(code: ErrorCode) -> int:
    """Map error codes to HTTP status codes."""
    mapping = {
        # 400 Bad Request
        ErrorCode.VALIDATION_ERROR: 400,
        # 404 Not Found
        ErrorCode.NOT_FOUND: 404,
        # 500 Internal Server Error
        ErrorCode.INTERNAL_ERROR: 500,
        ErrorCode.CONTACT_SUBMISSION_FAILED: 500,
    }
    return mapping.get(code, 500)
