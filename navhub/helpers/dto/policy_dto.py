"""
Refresh policy and system state DTOs.

Rules:
- Import only stdlib and typing (no navhub.* imports)
- Pure data structures only
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class RefreshPolicy:
    """The singleton client refresh-interval policy (milliseconds)."""

    id: str
    default_interval: int
    module_interval: int
    settings_interval: int
    dashboard_interval: int
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_doc(cls, doc: dict[str, Any]) -> RefreshPolicy:
        default = int(doc.get("default_interval", 5000))
        return cls(
            id=doc.get("id") or doc["_key"],
            default_interval=default,
            module_interval=int(doc.get("module_interval", default)),
            settings_interval=int(doc.get("settings_interval", default)),
            dashboard_interval=int(doc.get("dashboard_interval", default)),
            created_at=doc.get("created_at"),
            updated_at=doc.get("updated_at"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "default_interval": self.default_interval,
            "module_interval": self.module_interval,
            "settings_interval": self.settings_interval,
            "dashboard_interval": self.dashboard_interval,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@dataclass
class RefreshIntervals:
    """The four intervals of a refresh policy update, after validation."""

    default_interval: int
    module_interval: int
    settings_interval: int
    dashboard_interval: int


@dataclass
class SystemRevision:
    """Revision counter for one settings key."""

    key: str
    revision: int
    updated_at: str


@dataclass
class SystemStateResult:
    """Result from system_state_service.get_system_state."""

    revisions: list[SystemRevision]
    timestamp: str

    def to_dict(self) -> dict[str, Any]:
        """Flatten to {key: {revision, updated_at}, ..., timestamp}."""
        data: dict[str, Any] = {
            r.key: {"revision": r.revision, "updated_at": r.updated_at} for r in self.revisions
        }
        data["timestamp"] = self.timestamp
        return data
