"""Navigation settings operations for ArangoDB (singleton document)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from navhub.persistence.arango_client import DatabaseLike

if TYPE_CHECKING:
    from arango.cursor import Cursor


class NavigationSettingsOperations:
    """Operations for the navigation_settings collection.

    The collection holds at most one document. Absence is legal and means
    "defaults everywhere, no layout profiles configured".
    """

    def __init__(self, db: DatabaseLike) -> None:
        self.db = db
        self.collection = db.collection("navigation_settings")

    def get_settings(self) -> dict[str, Any] | None:
        """Get the settings singleton, or None."""
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
                FOR s IN navigation_settings
                    SORT s.created_at ASC
                    LIMIT 1
                    RETURN MERGE(UNSET(s, "_id", "_rev"), { id: s.id || s._key })
                """,
            ),
        )
        return next(cursor, None)

    def insert_settings(self, doc: dict[str, Any]) -> dict[str, Any]:
        """Create the singleton."""
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
                INSERT MERGE(@doc, { _key: @doc.id }) INTO navigation_settings
                RETURN UNSET(NEW, "_id", "_rev")
                """,
                bind_vars={"doc": doc},
            ),
        )
        return cast("dict[str, Any]", next(cursor))

    def update_settings(self, key: str, fields: dict[str, Any]) -> dict[str, Any] | None:
        """Overwrite top-level settings fields; nested objects are replaced, not merged."""
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
                FOR s IN navigation_settings
                    FILTER s._key == @key
                    UPDATE s WITH @fields IN navigation_settings
                    OPTIONS { keepNull: true, mergeObjects: false }
                    RETURN UNSET(NEW, "_id", "_rev")
                """,
                bind_vars={"key": key, "fields": fields},
            ),
        )
        return next(cursor, None)
