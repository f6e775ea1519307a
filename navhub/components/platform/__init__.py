"""Platform components: storage schema bootstrap and revision bookkeeping."""

from .arango_bootstrap_comp import ensure_schema
from .revision_comp import (
    NAVIGATION_ITEMS_KEY,
    NAVIGATION_ROUTES_KEY,
    NAVIGATION_SETTINGS_KEY,
    REFRESH_POLICY_KEY,
    bump_revision,
)

__all__ = [
    "NAVIGATION_ITEMS_KEY",
    "NAVIGATION_ROUTES_KEY",
    "NAVIGATION_SETTINGS_KEY",
    "REFRESH_POLICY_KEY",
    "bump_revision",
    "ensure_schema",
]
