"""
Refresh policy service.
Client polling intervals (milliseconds), stored as a singleton.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, Any

from navhub.components.platform.revision_comp import REFRESH_POLICY_KEY, bump_revision
from navhub.components.refresh.refresh_policy_comp import DEFAULT_INTERVAL_MS, validate_intervals
from navhub.helpers.dto.policy_dto import RefreshPolicy
from navhub.helpers.exceptions import PolicyNotFoundError
from navhub.helpers.time_helper import now_iso

if TYPE_CHECKING:
    from navhub.persistence.db import Database

logger = logging.getLogger(__name__)


class RefreshPolicyService:
    """Read-or-create and validated update of the refresh policy."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def get_or_create_policy(self) -> RefreshPolicy:
        """Return the policy, creating the default one on first access."""
        doc = self.db.refresh_policy.get_policy()
        if doc:
            return RefreshPolicy.from_doc(doc)

        timestamp = now_iso()
        stored = self.db.refresh_policy.insert_policy(
            {
                "id": str(uuid.uuid4()),
                "default_interval": DEFAULT_INTERVAL_MS,
                "module_interval": DEFAULT_INTERVAL_MS,
                "settings_interval": DEFAULT_INTERVAL_MS,
                "dashboard_interval": DEFAULT_INTERVAL_MS,
                "created_at": timestamp,
                "updated_at": timestamp,
            }
        )
        logger.info("[RefreshPolicy] Created default refresh policy")
        return RefreshPolicy.from_doc(stored)

    def update_policy(self, body: Any) -> RefreshPolicy:
        """
        Overwrite all four intervals.

        Args:
            body: Raw request body; validated here

        Raises:
            InvalidIntervalError: Missing, non-integer or out-of-range interval
            PolicyNotFoundError: No policy exists yet (GET creates it)
        """
        intervals = validate_intervals(body)

        existing = self.db.refresh_policy.get_policy()
        if not existing:
            raise PolicyNotFoundError()

        stored = self.db.refresh_policy.update_policy(
            existing["id"],
            {
                "default_interval": intervals.default_interval,
                "module_interval": intervals.module_interval,
                "settings_interval": intervals.settings_interval,
                "dashboard_interval": intervals.dashboard_interval,
                "updated_at": now_iso(),
            },
        )
        if stored is None:
            raise PolicyNotFoundError()

        bump_revision(self.db, REFRESH_POLICY_KEY)
        logger.info(f"[RefreshPolicy] Updated refresh policy: default={intervals.default_interval}ms")
        return RefreshPolicy.from_doc(stored)
