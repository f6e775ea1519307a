"""Refresh policy components."""

from navhub.components.refresh.refresh_policy_comp import (
    DEFAULT_INTERVAL_MS,
    INTERVAL_FIELDS,
    MAX_INTERVAL_MS,
    MIN_INTERVAL_MS,
    validate_intervals,
)

__all__ = ["DEFAULT_INTERVAL_MS", "INTERVAL_FIELDS", "MAX_INTERVAL_MS", "MIN_INTERVAL_MS", "validate_intervals"]
