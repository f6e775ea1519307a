"""Navigation route operations for ArangoDB.

(module_id, route) is the natural key, backed by a unique persistent index
created in arango_bootstrap_comp.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from navhub.persistence.arango_client import DatabaseLike

if TYPE_CHECKING:
    from arango.cursor import Cursor


class NavigationRoutesOperations:
    """Operations for the navigation_routes collection."""

    def __init__(self, db: DatabaseLike) -> None:
        self.db = db
        self.collection = db.collection("navigation_routes")

    def find_route(self, module_id: str, route: str) -> dict[str, Any] | None:
        """Look up a route by its natural key."""
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
                FOR r IN navigation_routes
                    FILTER r.module_id == @module_id AND r.route == @route
                    LIMIT 1
                    RETURN UNSET(r, "_key", "_id", "_rev")
                """,
                bind_vars={"module_id": module_id, "route": route},
            ),
        )
        return next(cursor, None)

    def insert_route(self, doc: dict[str, Any]) -> dict[str, Any]:
        """Insert a new route document and return it as stored.

        Raises:
            DocumentInsertError: If (module_id, route) already exists (unique index)
        """
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
                INSERT MERGE(@doc, { _key: @doc.id }) INTO navigation_routes
                RETURN UNSET(NEW, "_key", "_id", "_rev")
                """,
                bind_vars={"doc": doc},
            ),
        )
        return cast("dict[str, Any]", next(cursor))

    def update_route(self, route_id: str, fields: dict[str, Any]) -> dict[str, Any] | None:
        """Overwrite mutable fields (menu_id, view_type, layout_profile, updated_at).

        Returns:
            Updated document, or None if the route disappeared
        """
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
                FOR r IN navigation_routes
                    FILTER r.id == @route_id
                    UPDATE r WITH @fields IN navigation_routes
                    OPTIONS { keepNull: true }
                    RETURN UNSET(NEW, "_key", "_id", "_rev")
                """,
                bind_vars={"route_id": route_id, "fields": fields},
            ),
        )
        return next(cursor, None)

    def delete_for_module(self, module_id: str, routes: list[str] | None = None) -> int:
        """Delete a module's routes, optionally only the listed route strings.

        Returns:
            Number of removed documents
        """
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
                FOR r IN navigation_routes
                    FILTER r.module_id == @module_id
                    FILTER @routes == null OR r.route IN @routes
                    REMOVE r IN navigation_routes
                    RETURN 1
                """,
                bind_vars={"module_id": module_id, "routes": routes},
            ),
        )
        return sum(1 for _ in cursor)

    def list_routes(self, module_id: str | None = None, order_by: str = "route") -> list[dict[str, Any]]:
        """List routes, optionally for one module.

        Args:
            module_id: Restrict to this module
            order_by: "route" or "module_id" (module listing orders by module, then route)
        """
        sort_clause = "SORT r.module_id ASC, r.route ASC" if order_by == "module_id" else "SORT r.route ASC"
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                f"""
                FOR r IN navigation_routes
                    FILTER @module_id == null OR r.module_id == @module_id
                    {sort_clause}
                    RETURN UNSET(r, "_key", "_id", "_rev")
                """,
                bind_vars={"module_id": module_id},
            ),
        )
        return list(cursor)
