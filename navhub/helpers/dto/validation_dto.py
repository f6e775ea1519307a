"""
Validation DTOs.

ValidationError is a value, not an exception: validators return it (or
None) so callers can collect several failures before deciding whether
to raise. Exceptions that carry these values live in helpers/exceptions.py.

Rules:
- Import only stdlib and typing (no navhub.* imports)
- Pure data structures only
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

VALIDATION_ERROR = "VALIDATION_ERROR"
LAYOUT_PROFILE_NOT_FOUND = "LAYOUT_PROFILE_NOT_FOUND"
MENU_ID_NOT_FOUND = "MENU_ID_NOT_FOUND"


@dataclass(frozen=True)
class ValidationError:
    """A rejected value: machine-readable code, message, and where it came from."""

    code: str
    message: str
    field: str | None = None
    value: Any = None
    details: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON envelopes. field/value/details are included only when set."""
        data: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.field is not None:
            data["field"] = self.field
            data["value"] = self.value
        elif self.value is not None:
            data["value"] = self.value
        if self.details is not None:
            data["details"] = self.details
        return data
