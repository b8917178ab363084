"""Application error hierarchy with status codes and machine-readable codes."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional


class AppError(Exception):
    """Base error carrying an HTTP status and an error code."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        field: Optional[str] = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.field = field
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "field": self.field,
                "details": self.details,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        }


class ValidationError(AppError):
    status_code = 400
    code = "VALIDATION_ERROR"


class AuthenticationError(AppError):
    status_code = 401
    code = "AUTH_ERROR"

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class NotFoundError(AppError):
    status_code = 404
    code = "NOT_FOUND"

    def __init__(self, resource: str) -> None:
        super().__init__(f"{resource} not found")


class DatabaseError(AppError):
    status_code = 500
    code = "DB_ERROR"


class ConfigurationError(AppError):
    status_code = 500
    code = "CONFIG_ERROR"


class InvalidTimezoneError(AppError, ValueError):
    """Raised when a timezone identifier is not in the IANA database."""

    status_code = 400
    code = "INVALID_TIMEZONE"

    def __init__(self, timezone_id: object) -> None:
        super().__init__(
            f"Unknown timezone identifier: {timezone_id!r}",
            field="timezone",
        )
        self.timezone_id = timezone_id


__all__ = [
    "AppError",
    "AuthenticationError",
    "ConfigurationError",
    "DatabaseError",
    "InvalidTimezoneError",
    "NotFoundError",
    "ValidationError",
]
