"""ArangoDB schema bootstrap component.

Creates the navhub collections and indexes. Idempotent: existing
collections and indexes are left untouched, so it is safe on every start.

Lives in components/platform rather than persistence/ because the
persistence layer holds AQL only.
"""

from __future__ import annotations

import logging

from arango.exceptions import CollectionCreateError, IndexCreateError

from navhub.persistence.arango_client import DatabaseLike

logger = logging.getLogger(__name__)

DOCUMENT_COLLECTIONS: tuple[str, ...] = (
    "navigation_items",
    "navigation_routes",
    "navigation_settings",
    "feature_flags",
    "refresh_policy",
    "system_revision",
    "navigation_logs",
    "api_tokens",
)

# (collection, fields, unique, sparse)
PERSISTENT_INDEXES: tuple[tuple[str, list[str], bool, bool], ...] = (
    ("navigation_items", ["id"], True, False),
    ("navigation_items", ["parent_id"], False, True),
    ("navigation_items", ["tenant_id"], False, True),
    ("navigation_items", ["sort_order"], False, False),
    # natural key of a registered route
    ("navigation_routes", ["module_id", "route"], True, False),
    ("navigation_routes", ["id"], True, False),
    ("feature_flags", ["flag_key"], False, False),
    ("api_tokens", ["token_hash"], True, False),
)


def ensure_schema(db: DatabaseLike) -> None:
    """Ensure all navhub collections and indexes exist.

    Args:
        db: ArangoDB database handle
    """
    created = _create_collections(db)
    _create_indexes(db)
    if created:
        logger.info(f"[bootstrap] Created collections: {', '.join(created)}")


def _create_collections(db: DatabaseLike) -> list[str]:
    created: list[str] = []
    for collection_name in DOCUMENT_COLLECTIONS:
        if db.has_collection(collection_name):
            continue
        try:
            db.create_collection(collection_name)
            created.append(collection_name)
        except CollectionCreateError:
            logger.debug(f"[bootstrap] Collection {collection_name} created concurrently")
    return created


def _create_indexes(db: DatabaseLike) -> None:
    for collection, fields, unique, sparse in PERSISTENT_INDEXES:
        _ensure_index(db, collection, fields, unique=unique, sparse=sparse)


def _ensure_index(
    db: DatabaseLike,
    collection: str,
    fields: list[str],
    unique: bool = False,
    sparse: bool = False,
) -> None:
    """Create a persistent index; ArangoDB returns the existing one when it already exists."""
    try:
        db.collection(collection).add_persistent_index(fields=fields, unique=unique, sparse=sparse)
    except IndexCreateError as e:
        # A unique index fails to build over duplicate data; surface that instead of hiding it
        logger.error(f"[bootstrap] Could not create index on {collection}({', '.join(fields)}): {e}")
        raise
