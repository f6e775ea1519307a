"""Refresh policy interval validation."""

from __future__ import annotations

from typing import Any

from navhub.helpers.dto.policy_dto import RefreshIntervals
from navhub.helpers.exceptions import InvalidIntervalError

MIN_INTERVAL_MS = 1000
MAX_INTERVAL_MS = 60000
DEFAULT_INTERVAL_MS = 5000

INTERVAL_FIELDS: tuple[str, ...] = ("default_interval", "module_interval", "settings_interval", "dashboard_interval")


def validate_intervals(body: Any) -> RefreshIntervals:
    """
    Validate a refresh policy update body.

    Every field in INTERVAL_FIELDS is required and must be an integer
    in [MIN_INTERVAL_MS, MAX_INTERVAL_MS]. Fields are checked in order;
    the first bad one is reported.

    Raises:
        InvalidIntervalError: On the first missing, non-integer or out-of-range field
    """
    if not isinstance(body, dict):
        raise InvalidIntervalError("body", body)

    values: dict[str, int] = {}
    for field in INTERVAL_FIELDS:
        value = body.get(field)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidIntervalError(field, value)
        if value < MIN_INTERVAL_MS or value > MAX_INTERVAL_MS:
            raise InvalidIntervalError(field, value)
        values[field] = value

    return RefreshIntervals(**values)
