"""Refresh policy operations for ArangoDB (singleton document)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from navhub.persistence.arango_client import DatabaseLike

if TYPE_CHECKING:
    from arango.cursor import Cursor


class RefreshPolicyOperations:
    """Operations for the refresh_policy collection."""

    def __init__(self, db: DatabaseLike) -> None:
        self.db = db
        self.collection = db.collection("refresh_policy")

    def get_policy(self) -> dict[str, Any] | None:
        """Get the first (only) policy document, or None."""
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
                FOR p IN refresh_policy
                    SORT p.created_at ASC
                    LIMIT 1
                    RETURN UNSET(p, "_key", "_id", "_rev")
                """,
            ),
        )
        return next(cursor, None)

    def insert_policy(self, doc: dict[str, Any]) -> dict[str, Any]:
        """Insert a policy document and return it as stored."""
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
                INSERT MERGE(@doc, { _key: @doc.id }) INTO refresh_policy
                RETURN UNSET(NEW, "_key", "_id", "_rev")
                """,
                bind_vars={"doc": doc},
            ),
        )
        return cast("dict[str, Any]", next(cursor))

    def update_policy(self, policy_id: str, fields: dict[str, Any]) -> dict[str, Any] | None:
        """Overwrite interval fields; returns None if the policy vanished."""
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
                FOR p IN refresh_policy
                    FILTER p.id == @policy_id
                    UPDATE p WITH @fields IN refresh_policy
                    RETURN UNSET(NEW, "_key", "_id", "_rev")
                """,
                bind_vars={"policy_id": policy_id, "fields": fields},
            ),
        )
        return next(cursor, None)
