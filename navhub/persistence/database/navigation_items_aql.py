"""Navigation item operations for ArangoDB.

Documents use the entry UUID as both `_key` and `id`. Query results
strip the Arango system attributes so callers only see domain fields.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from navhub.persistence.arango_client import DatabaseLike

if TYPE_CHECKING:
    from arango.cursor import Cursor

_STRIP = 'UNSET(item, "_key", "_id", "_rev")'


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so user text matches literally."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class NavigationItemsOperations:
    """Operations for the navigation_items collection."""

    def __init__(self, db: DatabaseLike) -> None:
        self.db = db
        self.collection = db.collection("navigation_items")

    def list_items(self, active_only: bool = True, tenant_id: str | None = None) -> list[dict[str, Any]]:
        """List entries ordered by sort_order.

        Args:
            active_only: Skip entries with is_active == false
            tenant_id: Only entries for this tenant (None = no tenant filter)

        Returns:
            Entry documents
        """
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                f"""
                FOR item IN navigation_items
                    FILTER @active_only == false OR item.is_active == true
                    FILTER @tenant_id == null OR item.tenant_id == @tenant_id
                    SORT item.sort_order ASC
                    RETURN {_STRIP}
                """,
                bind_vars={"active_only": active_only, "tenant_id": tenant_id},
            ),
        )
        return list(cursor)

    def get_item(self, item_id: str) -> dict[str, Any] | None:
        """Get one entry by id, or None."""
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                f"""
                FOR item IN navigation_items
                    FILTER item.id == @item_id
                    LIMIT 1
                    RETURN {_STRIP}
                """,
                bind_vars={"item_id": item_id},
            ),
        )
        return next(cursor, None)

    def insert_item(self, doc: dict[str, Any]) -> dict[str, Any]:
        """Insert a fully-populated entry document and return it as stored."""
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
                INSERT MERGE(@doc, { _key: @doc.id }) INTO navigation_items
                RETURN UNSET(NEW, "_key", "_id", "_rev")
                """,
                bind_vars={"doc": doc},
            ),
        )
        return cast("dict[str, Any]", next(cursor))

    def update_item(self, item_id: str, fields: dict[str, Any]) -> dict[str, Any] | None:
        """Replace the given top-level fields of an entry.

        Nested objects (metadata) are replaced, not merged. Null values are kept
        so parent_id can be cleared.

        Returns:
            Updated document, or None when no entry has this id
        """
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
                FOR item IN navigation_items
                    FILTER item.id == @item_id
                    UPDATE item WITH @fields IN navigation_items
                    OPTIONS { keepNull: true, mergeObjects: false }
                    RETURN UNSET(NEW, "_key", "_id", "_rev")
                """,
                bind_vars={"item_id": item_id, "fields": fields},
            ),
        )
        return next(cursor, None)

    def update_position(
        self,
        item_id: str,
        sort_order: int,
        updated_at: str,
        parent_id: str | None = None,
        update_parent: bool = False,
    ) -> bool:
        """Set sort_order (and optionally parent_id) of one entry.

        Returns:
            True if an entry was updated
        """
        fields: dict[str, Any] = {"sort_order": sort_order, "updated_at": updated_at}
        if update_parent:
            fields["parent_id"] = parent_id
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
                FOR item IN navigation_items
                    FILTER item.id == @item_id
                    UPDATE item WITH @fields IN navigation_items
                    OPTIONS { keepNull: true }
                    RETURN 1
                """,
                bind_vars={"item_id": item_id, "fields": fields},
            ),
        )
        return next(cursor, None) is not None

    def delete_item(self, item_id: str) -> bool:
        """Delete one entry. Children keep their (now dangling) parent_id.

        Returns:
            True if an entry was removed
        """
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
                FOR item IN navigation_items
                    FILTER item.id == @item_id
                    REMOVE item IN navigation_items
                    RETURN 1
                """,
                bind_vars={"item_id": item_id},
            ),
        )
        return next(cursor, None) is not None

    def search_items(
        self,
        query: str,
        include_inactive: bool = False,
        tenant_id: str | None = None,
    ) -> list[dict[str, Any]]:
        """Case-insensitive substring search across title and path.

        Args:
            query: Free text; LIKE wildcards are matched literally
            include_inactive: Include entries with is_active == false
            tenant_id: Only entries for this tenant

        Returns:
            Matching entry documents ordered by sort_order
        """
        pattern = f"%{escape_like(query)}%"
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                f"""
                FOR item IN navigation_items
                    FILTER LIKE(item.title, @pattern, true) OR LIKE(item.path, @pattern, true)
                    FILTER @include_inactive == true OR item.is_active == true
                    FILTER @tenant_id == null OR item.tenant_id == @tenant_id
                    SORT item.sort_order ASC
                    RETURN {_STRIP}
                """,
                bind_vars={"pattern": pattern, "include_inactive": include_inactive, "tenant_id": tenant_id},
            ),
        )
        return list(cursor)
