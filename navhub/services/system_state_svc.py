"""System state service: revision counters for client cache invalidation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from navhub.helpers.dto.policy_dto import SystemRevision, SystemStateResult
from navhub.helpers.time_helper import now_iso

if TYPE_CHECKING:
    from navhub.persistence.db import Database


class SystemStateService:
    def __init__(self, db: Database) -> None:
        self.db = db

    def get_system_state(self) -> SystemStateResult:
        """All revision counters plus the server time they were read at."""
        revisions = [
            SystemRevision(key=doc["key"], revision=int(doc["revision"]), updated_at=doc["updated_at"])
            for doc in self.db.system_revision.list_revisions()
        ]
        return SystemStateResult(revisions=revisions, timestamp=now_iso())
