"""System revision bookkeeping.

Each settings key has a monotonically increasing revision. Writers bump
the key they touched; the system-state endpoint reports all counters so
clients know which cached data to refetch.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from navhub.helpers.time_helper import now_iso

if TYPE_CHECKING:
    from navhub.persistence.db import Database

logger = logging.getLogger(__name__)

NAVIGATION_ITEMS_KEY = "navigation_items"
NAVIGATION_ROUTES_KEY = "navigation_routes"
NAVIGATION_SETTINGS_KEY = "navigation_settings"
REFRESH_POLICY_KEY = "refresh_policy"


def bump_revision(db: Database, key: str) -> None:
    db.system_revision.bump(key, now_iso())
    logger.debug(f"Bumped system revision for {key}")
