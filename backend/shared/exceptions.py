"""
Base exception classes for the monitoring backend.

Each module defines its own exceptions on top of these bases. The base class
decides the HTTP status the API layer answers with:

- AuthenticationError -> 401
- AuthorizationError -> 403
- NotFoundError -> 404
- ValidationError -> 400
- ExternalServiceError -> 500
"""

from typing import Optional, Any


class MonitorError(Exception):
    """
    Base exception for all monitoring errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(MonitorError):
    """Resource not found, or not visible to the caller."""

    status_code = 404


class ValidationError(MonitorError):
    """Input rejected: bad credentials, duplicates, unknown values."""

    status_code = 400


class AuthenticationError(MonitorError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(MonitorError):
    """Authorization failed (insufficient permissions)."""

    status_code = 403


class ExternalServiceError(MonitorError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class UpstreamFailure(ExternalServiceError):
    """A store query failed or the store was unreachable."""

    def __init__(self, operation: str, original_error: Optional[str] = None):
        super().__init__(
            f"Store operation failed: {operation}",
            service="supabase",
            code="UPSTREAM_FAILURE",
            details={"operation": operation, "original_error": original_error},
        )
