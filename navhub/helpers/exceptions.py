"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Every exception carries a machine-readable ``code``; the API layer maps codes to status codes.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations

from typing import Any

from navhub.helpers.dto.validation_dto import VALIDATION_ERROR, ValidationError


class NavhubError(Exception):
    """Base class for errors the API layer translates into an error envelope."""

    code = "INTERNAL_ERROR"

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": str(self)}


class NavigationValidationError(NavhubError):
    """A single field failed validation (create/update of entries, layout profiles)."""

    code = VALIDATION_ERROR

    def __init__(self, error: ValidationError) -> None:
        super().__init__(error.message)
        self.error = error
        self.code = error.code

    def to_dict(self) -> dict[str, Any]:
        body = self.error.to_dict()
        body["error"] = body.pop("code")
        return body


class RegistrationRequestError(NavhubError):
    """A registration request was rejected before any declaration was looked at."""

    code = VALIDATION_ERROR

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": str(self), "field": self.field}


class RouteRegistrationError(NavhubError):
    """One or more route declarations failed validation; nothing was written."""

    code = VALIDATION_ERROR

    def __init__(self, details: list[dict[str, Any]]) -> None:
        super().__init__("One or more route definitions are invalid")
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": str(self), "details": self.details}


class NotFoundError(NavhubError):
    """A keyed record does not exist."""

    code = "NOT_FOUND"


class PolicyNotFoundError(NotFoundError):
    """PUT on the refresh policy before any policy row exists."""

    code = "NO_POLICY_FOUND"

    def __init__(self) -> None:
        super().__init__("No refresh policy exists yet")


class InvalidIntervalError(NavhubError):
    """A refresh interval is missing, non-numeric or outside the allowed range."""

    code = "INVALID_INTERVAL_OR_RANGE"

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(f"{field} must be an integer between 1000 and 60000")
        self.field = field
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": str(self), "field": self.field, "value": self.value}


class ReorderError(NavhubError):
    """Some writes of a reorder batch failed. Writes that succeeded stay applied."""

    code = "REORDER_FAILED"

    def __init__(self, failures: dict[str, str]) -> None:
        first_id, first_msg = next(iter(failures.items()))
        super().__init__(f"Failed to reorder items: {first_id}: {first_msg}")
        self.failures = failures

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": str(self), "failures": self.failures}


class UnauthorizedError(NavhubError):
    """No usable bearer credential."""

    code = "UNAUTHORIZED"

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code}


class ForbiddenError(NavhubError):
    """Credential is valid but lacks the required role."""

    code = "FORBIDDEN"

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code}
