"""
Field validators for navigation entries and routes.

Pure functions: no I/O, never raise. Each returns a ValidationError or
None so callers can collect failures across a batch.
"""

from __future__ import annotations

import re
from typing import Any

from navhub.helpers.dto.validation_dto import VALIDATION_ERROR, ValidationError

ALLOWED_VIEW_TYPES: tuple[str, ...] = ("list", "detail", "form", "dashboard", "wizard")
ADMIN_ROUTE_PREFIX = "/admin/"

_UUID_RE = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE)


def validate_view_type(view_type: Any) -> ValidationError | None:
    """Accept only one of ALLOWED_VIEW_TYPES."""
    if not isinstance(view_type, str) or view_type not in ALLOWED_VIEW_TYPES:
        return ValidationError(
            code=VALIDATION_ERROR,
            message=f"Invalid view_type. Allowed values: {', '.join(ALLOWED_VIEW_TYPES)}",
            field="view_type",
            value=view_type,
        )
    return None


def validate_route_path(route: Any) -> ValidationError | None:
    """Accept a non-empty string under the /admin/ prefix."""
    if not route or not isinstance(route, str):
        return ValidationError(
            code=VALIDATION_ERROR,
            message="Route must be a non-empty string",
            field="route",
            value=route,
        )

    if not route.startswith(ADMIN_ROUTE_PREFIX):
        return ValidationError(
            code=VALIDATION_ERROR,
            message=f"Route must start with {ADMIN_ROUTE_PREFIX}",
            field="route",
            value=route,
        )

    return None


def validate_identifier(value: Any, field_name: str = "id") -> ValidationError | None:
    """Accept the canonical 8-4-4-4-12 UUID text form, any case."""
    if not isinstance(value, str) or not _UUID_RE.fullmatch(value):
        return ValidationError(
            code=VALIDATION_ERROR,
            message=f"{field_name} must be a valid UUID",
            field=field_name,
            value=value,
        )
    return None
