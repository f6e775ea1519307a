"""
Navigation service.
Navigation entries, layout profiles and the assembled tree for all interfaces.
"""

from __future__ import annotations

import logging
import uuid
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from navhub.components.navigation.entry_validation_comp import validate_identifier, validate_view_type
from navhub.components.navigation.feature_flag_comp import flags_satisfied
from navhub.components.navigation.layout_profile_comp import (
    FALLBACK_PROFILE_ID,
    resolve_layout_profiles,
    validate_profile_mapping,
    validate_profile_reference,
)
from navhub.components.navigation.tree_builder_comp import build_tree
from navhub.components.platform.revision_comp import (
    NAVIGATION_ITEMS_KEY,
    NAVIGATION_SETTINGS_KEY,
    bump_revision,
)
from navhub.helpers.dto.navigation_dto import (
    CreateNavigationItemParams,
    LayoutProfiles,
    NavigationEntry,
    NavigationFullResult,
    NavigationRoute,
    NavigationTreeNode,
    ReorderItem,
)
from navhub.helpers.dto.validation_dto import VALIDATION_ERROR, ValidationError
from navhub.helpers.exceptions import NavigationValidationError, NotFoundError, ReorderError
from navhub.helpers.time_helper import now_iso

if TYPE_CHECKING:
    from navhub.persistence.db import Database

logger = logging.getLogger(__name__)

# Stored alongside layout_profiles when the settings singleton is first created.
# The engine stores these knobs; enforcing them is up to consumers.
DEFAULT_NAVIGATION_SETTINGS: dict[str, Any] = {
    "cache_ttl": 300,
    "max_tree_depth": 5,
    "require_authentication": True,
    "enable_audit_logging": True,
    "enable_live_updates": True,
    "enable_soft_delete": False,
    "max_batch_size": 100,
    "default_icon": "menu",
    "language": "en",
    "layout_profiles": None,
}

UPDATABLE_FIELDS = frozenset(
    {
        "title",
        "path",
        "parent_id",
        "icon",
        "sort_order",
        "is_active",
        "roles",
        "metadata",
        "tenant_id",
        "required_feature_flags",
        "view_type",
        "layout_profile",
    }
)


@dataclass
class NavigationServiceConfig:
    """Configuration for NavigationService."""

    reorder_max_workers: int = 8


def _require_text(value: Any, field: str) -> None:
    if not value or not isinstance(value, str):
        raise NavigationValidationError(
            ValidationError(
                code=VALIDATION_ERROR,
                message=f"{field} must be a non-empty string",
                field=field,
                value=value,
            )
        )


# Updatable fields that can never be null; title, path, view_type and
# layout_profile have their own validators.
_TYPED_UPDATE_FIELDS: dict[str, tuple[type, str]] = {
    "sort_order": (int, "an integer"),
    "is_active": (bool, "a boolean"),
    "roles": (list, "an array"),
    "metadata": (dict, "an object"),
    "required_feature_flags": (list, "an array"),
}


def _require_type(value: Any, field: str) -> None:
    expected, label = _TYPED_UPDATE_FIELDS[field]
    # bool is an int subclass; a sort_order of true is still rejected
    if isinstance(value, expected) and not (expected is int and isinstance(value, bool)):
        return
    raise NavigationValidationError(
        ValidationError(
            code=VALIDATION_ERROR,
            message=f"{field} must be {label}",
            field=field,
            value=value,
        )
    )


class NavigationService:
    """
    Navigation entry store and read-side assembly.

    Writes validate view type and layout profile references before
    touching storage. Every successful write bumps the matching system
    revision so polling clients notice the change.
    """

    def __init__(self, db: Database, cfg: NavigationServiceConfig | None = None) -> None:
        self.db = db
        self.cfg = cfg or NavigationServiceConfig()

    # ------------------------------------------------------------------
    # Entry reads
    # ------------------------------------------------------------------

    def get_items(self, tenant_id: str | None = None) -> list[NavigationEntry]:
        """Active entries ordered by sort_order, restricted to tenant_id when given."""
        docs = self.db.navigation_items.list_items(active_only=True, tenant_id=tenant_id)
        return [NavigationEntry.from_doc(doc) for doc in docs]

    def get_all_items(self, include_inactive: bool = False) -> list[NavigationEntry]:
        docs = self.db.navigation_items.list_items(active_only=not include_inactive)
        return [NavigationEntry.from_doc(doc) for doc in docs]

    def get_item(self, item_id: str) -> NavigationEntry | None:
        doc = self.db.navigation_items.get_item(item_id)
        return NavigationEntry.from_doc(doc) if doc else None

    def search_items(
        self,
        query: str,
        include_inactive: bool = False,
        tenant_id: str | None = None,
    ) -> list[NavigationEntry]:
        """Case-insensitive substring match on title or path."""
        docs = self.db.navigation_items.search_items(query, include_inactive=include_inactive, tenant_id=tenant_id)
        return [NavigationEntry.from_doc(doc) for doc in docs]

    # ------------------------------------------------------------------
    # Entry writes
    # ------------------------------------------------------------------

    def create_item(self, params: CreateNavigationItemParams) -> NavigationEntry:
        """
        Create a navigation entry.

        Absent optional fields take the creation defaults (sort_order 999,
        active, roles ["authenticated"], empty metadata, view type "list",
        layout profile "backend_default").

        Raises:
            NavigationValidationError: If any field fails validation
        """
        entry = self._apply_create_defaults(params)

        _require_text(entry.title, "title")
        _require_text(entry.path, "path")
        self._raise_if_invalid(validate_view_type(entry.view_type))
        if entry.parent_id is not None:
            self._raise_if_invalid(validate_identifier(entry.parent_id, "parent_id"))
        self._raise_if_invalid(validate_profile_reference(entry.layout_profile, self.get_layout_profiles()))

        stored = self.db.navigation_items.insert_item(entry.to_dict())
        bump_revision(self.db, NAVIGATION_ITEMS_KEY)
        logger.info(f"[NavigationService] Created navigation item {entry.id} ({entry.path})")
        return NavigationEntry.from_doc(stored)

    @staticmethod
    def _apply_create_defaults(params: CreateNavigationItemParams) -> NavigationEntry:
        """The single place creation defaults are applied."""
        timestamp = now_iso()
        defaults = NavigationEntry(id="", title="", path="")

        def pick(value: Any, default: Any) -> Any:
            return default if value is None else value

        return NavigationEntry(
            id=str(uuid.uuid4()),
            title=params.title,
            path=params.path,
            parent_id=params.parent_id or None,
            icon=params.icon,
            sort_order=pick(params.sort_order, defaults.sort_order),
            is_active=pick(params.is_active, defaults.is_active),
            roles=pick(params.roles, defaults.roles),
            metadata=pick(params.metadata, defaults.metadata),
            tenant_id=params.tenant_id,
            required_feature_flags=pick(params.required_feature_flags, defaults.required_feature_flags),
            view_type=pick(params.view_type, defaults.view_type),
            layout_profile=pick(params.layout_profile, defaults.layout_profile),
            created_at=timestamp,
            updated_at=timestamp,
        )

    def update_item(self, item_id: str, updates: dict[str, Any]) -> NavigationEntry:
        """
        Partially update an entry. Only the fields present are validated and written;
        parent_id, icon and tenant_id may be cleared with None, no other field can.

        Raises:
            NavigationValidationError: On an unknown or invalid field
            NotFoundError: If no entry has this id
        """
        unknown = sorted(set(updates) - UPDATABLE_FIELDS)
        if unknown:
            raise NavigationValidationError(
                ValidationError(
                    code=VALIDATION_ERROR,
                    message=f"Unknown field: {unknown[0]}",
                    field=unknown[0],
                )
            )

        if "title" in updates:
            _require_text(updates["title"], "title")
        if "path" in updates:
            _require_text(updates["path"], "path")
        for field in sorted(_TYPED_UPDATE_FIELDS.keys() & updates.keys()):
            _require_type(updates[field], field)
        if "view_type" in updates:
            self._raise_if_invalid(validate_view_type(updates["view_type"]))
        if updates.get("parent_id") is not None:
            self._raise_if_invalid(validate_identifier(updates["parent_id"], "parent_id"))
        if "layout_profile" in updates:
            self._raise_if_invalid(validate_profile_reference(updates["layout_profile"], self.get_layout_profiles()))

        fields = {**updates, "updated_at": now_iso()}
        stored = self.db.navigation_items.update_item(item_id, fields)
        if stored is None:
            raise NotFoundError(f"Navigation item {item_id} not found")

        bump_revision(self.db, NAVIGATION_ITEMS_KEY)
        logger.info(f"[NavigationService] Updated navigation item {item_id}: {sorted(updates)}")
        return NavigationEntry.from_doc(stored)

    def delete_item(self, item_id: str) -> None:
        """
        Delete an entry. Its children are kept and surface at the root of the tree.

        Raises:
            NotFoundError: If no entry has this id
        """
        if not self.db.navigation_items.delete_item(item_id):
            raise NotFoundError(f"Navigation item {item_id} not found")
        bump_revision(self.db, NAVIGATION_ITEMS_KEY)
        logger.info(f"[NavigationService] Deleted navigation item {item_id}")

    def reorder_items(self, items: list[ReorderItem]) -> int:
        """
        Apply a batch of position updates.

        Each write is independent and dispatched concurrently. All writes are
        allowed to settle before failures are reported; successful writes
        stay applied.

        Returns:
            Number of entries updated

        Raises:
            ReorderError: If any write failed or targeted a missing entry
        """
        if not items:
            return 0

        timestamp = now_iso()
        outcomes: dict[str, str | None] = {}
        workers = max(1, min(self.cfg.reorder_max_workers, len(items)))

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="navhub-reorder") as pool:
            futures = {
                pool.submit(
                    self.db.navigation_items.update_position,
                    item.id,
                    item.sort_order,
                    timestamp,
                    item.parent_id,
                    item.update_parent,
                ): item.id
                for item in items
            }
            for future in as_completed(futures):
                item_id = futures[future]
                try:
                    outcomes[item_id] = None if future.result() else "not found"
                except Exception as e:
                    logger.warning(f"[NavigationService] Reorder write failed for {item_id}: {e}")
                    outcomes[item_id] = str(e)

        # report in input order
        failures = {item.id: outcomes[item.id] for item in items if outcomes.get(item.id)}
        applied = len(items) - len(failures)
        if applied:
            bump_revision(self.db, NAVIGATION_ITEMS_KEY)
        if failures:
            raise ReorderError({item_id: str(msg) for item_id, msg in failures.items()})

        logger.info(f"[NavigationService] Reordered {applied} navigation item(s)")
        return applied

    # ------------------------------------------------------------------
    # Feature flags and tree
    # ------------------------------------------------------------------

    def check_feature_flags(self, required_flags: list[str], tenant_id: str | None = None) -> bool:
        return flags_satisfied(self.db, required_flags, tenant_id)

    def build_tree(self, entries: list[NavigationEntry]) -> list[NavigationTreeNode]:
        return build_tree(entries)

    def get_navigation_tree(self, tenant_id: str | None = None) -> list[NavigationTreeNode]:
        return build_tree(self.get_items(tenant_id))

    # ------------------------------------------------------------------
    # Settings and layout profiles
    # ------------------------------------------------------------------

    def get_navigation_settings(self) -> dict[str, Any] | None:
        return self.db.navigation_settings.get_settings()

    def get_layout_profiles(self) -> LayoutProfiles:
        return resolve_layout_profiles(self.get_navigation_settings())

    def update_layout_profiles(self, profiles: Any) -> LayoutProfiles:
        """
        Replace the configured layout profile mapping.

        Every profile is structurally validated before anything is written.
        The settings singleton is created with default knobs when absent.

        Raises:
            NavigationValidationError: On the first invalid profile
        """
        self._raise_if_invalid(validate_profile_mapping(profiles))

        timestamp = now_iso()
        settings = self.get_navigation_settings()
        if settings is None:
            key = str(uuid.uuid4())
            doc = {
                **DEFAULT_NAVIGATION_SETTINGS,
                "id": key,
                "layout_profiles": profiles,
                "created_at": timestamp,
                "updated_at": timestamp,
            }
            self.db.navigation_settings.insert_settings(doc)
        else:
            key = settings.get("_key") or settings["id"]
            self.db.navigation_settings.update_settings(key, {"layout_profiles": profiles, "updated_at": timestamp})

        bump_revision(self.db, NAVIGATION_SETTINGS_KEY)
        if FALLBACK_PROFILE_ID not in profiles:
            logger.warning(
                f"[NavigationService] Layout profiles saved without {FALLBACK_PROFILE_ID}; "
                "entries and routes must name a configured profile explicitly"
            )
        logger.info(f"[NavigationService] Saved {len(profiles)} layout profile(s)")
        return profiles

    # ------------------------------------------------------------------
    # Composite reads
    # ------------------------------------------------------------------

    def get_navigation_full(self, tenant_id: str | None = None) -> NavigationFullResult:
        """Items, layout profiles and routes in one call; the three reads run concurrently."""
        with ThreadPoolExecutor(max_workers=3, thread_name_prefix="navhub-full") as pool:
            items_future = pool.submit(self.get_items, tenant_id)
            profiles_future = pool.submit(self.get_layout_profiles)
            routes_future = pool.submit(self.db.navigation_routes.list_routes, None, "module_id")

            return NavigationFullResult(
                navigation_items=items_future.result(),
                layout_profiles=profiles_future.result(),
                routes=[NavigationRoute.from_doc(doc) for doc in routes_future.result()],
            )

    def get_navigation_routes(self, module_id: str | None = None) -> list[NavigationRoute]:
        """Registered routes ordered by route, optionally for one module."""
        docs = self.db.navigation_routes.list_routes(module_id=module_id)
        return [NavigationRoute.from_doc(doc) for doc in docs]

    @staticmethod
    def _raise_if_invalid(error: ValidationError | None) -> None:
        if error:
            raise NavigationValidationError(error)
