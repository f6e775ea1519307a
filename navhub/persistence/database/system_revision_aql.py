"""System revision operations for ArangoDB.

One document per settings key; `revision` increments on every write to
the data behind that key so polling clients can detect change cheaply.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from navhub.persistence.arango_client import DatabaseLike

if TYPE_CHECKING:
    from arango.cursor import Cursor


class SystemRevisionOperations:
    """Operations for the system_revision collection."""

    def __init__(self, db: DatabaseLike) -> None:
        self.db = db
        self.collection = db.collection("system_revision")

    def list_revisions(self) -> list[dict[str, Any]]:
        """All revision counters as {key, revision, updated_at}."""
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
                FOR rev IN system_revision
                    SORT rev.key ASC
                    RETURN { key: rev.key, revision: rev.revision, updated_at: rev.updated_at }
                """,
            ),
        )
        return list(cursor)

    def bump(self, key: str, timestamp: str) -> None:
        """Increment the revision of key, creating it at 1."""
        self.db.aql.execute(
            """
            UPSERT { key: @key }
            INSERT { _key: @key, key: @key, revision: 1, updated_at: @timestamp }
            UPDATE { revision: OLD.revision + 1, updated_at: @timestamp }
            IN system_revision
            """,
            bind_vars={"key": key, "timestamp": timestamp},
        )
