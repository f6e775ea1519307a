"""Feature flag operations for ArangoDB."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from navhub.persistence.arango_client import DatabaseLike

if TYPE_CHECKING:
    from arango.cursor import Cursor


class FeatureFlagsOperations:
    """Operations for the feature_flags collection."""

    def __init__(self, db: DatabaseLike) -> None:
        self.db = db
        self.collection = db.collection("feature_flags")

    def get_active_flags(self, flag_keys: list[str], tenant_id: str | None = None) -> list[dict[str, Any]]:
        """Fetch active flags for the given keys that are global or belong to tenant_id.

        Args:
            flag_keys: Keys to fetch
            tenant_id: Tenant scope to include besides global (None = global only)

        Returns:
            Flag documents with flag_key, is_active, scope, tenant_id
        """
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
                FOR f IN feature_flags
                    FILTER f.flag_key IN @flag_keys AND f.is_active == true
                    FILTER f.scope == "global" OR (@tenant_id != null AND f.tenant_id == @tenant_id)
                    RETURN { flag_key: f.flag_key, is_active: f.is_active, scope: f.scope, tenant_id: f.tenant_id }
                """,
                bind_vars={"flag_keys": flag_keys, "tenant_id": tenant_id},
            ),
        )
        return list(cursor)

    def upsert_flag(
        self,
        flag_key: str,
        is_active: bool,
        scope: str,
        tenant_id: str | None,
        timestamp: str,
        display_name: str | None = None,
    ) -> dict[str, Any]:
        """Create or update the flag identified by (flag_key, scope, tenant_id)."""
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
                UPSERT { flag_key: @flag_key, scope: @scope, tenant_id: @tenant_id }
                INSERT {
                    flag_key: @flag_key,
                    display_name: @display_name,
                    is_active: @is_active,
                    scope: @scope,
                    tenant_id: @tenant_id,
                    created_at: @timestamp,
                    updated_at: @timestamp
                }
                UPDATE { is_active: @is_active, updated_at: @timestamp }
                IN feature_flags
                RETURN UNSET(NEW, "_key", "_id", "_rev")
                """,
                bind_vars={
                    "flag_key": flag_key,
                    "display_name": display_name or flag_key,
                    "is_active": is_active,
                    "scope": scope,
                    "tenant_id": tenant_id,
                    "timestamp": timestamp,
                },
            ),
        )
        return cast("dict[str, Any]", next(cursor))
