"""
Navigation domain DTOs.

Cross-layer contracts for navigation entries, tree nodes and feature flags.

Rules:
- Import only stdlib and typing (no navhub.* imports)
- Pure data structures only (no I/O, no DB access, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

ViewType = Literal["list", "detail", "form", "dashboard", "wizard"]
LayoutProfiles = dict[str, dict[str, Any]]


@dataclass
class NavigationEntry:
    """One node of the menu hierarchy as stored in navigation_items."""

    id: str
    title: str
    path: str
    parent_id: str | None = None
    icon: str | None = None
    sort_order: int = 999
    is_active: bool = True
    roles: list[str] = field(default_factory=lambda: ["authenticated"])
    metadata: dict[str, Any] = field(default_factory=dict)
    tenant_id: str | None = None
    required_feature_flags: list[str] = field(default_factory=list)
    view_type: str = "list"
    layout_profile: str = "backend_default"
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_doc(cls, doc: dict[str, Any]) -> NavigationEntry:
        """Build from a stored document; unknown keys (_key, _id, _rev) are ignored."""
        return cls(
            id=doc.get("id") or doc["_key"],
            title=doc.get("title", ""),
            path=doc.get("path", ""),
            parent_id=doc.get("parent_id"),
            icon=doc.get("icon"),
            sort_order=int(doc.get("sort_order", 999)),
            is_active=bool(doc.get("is_active", True)),
            roles=list(doc.get("roles") or []),
            metadata=dict(doc.get("metadata") or {}),
            tenant_id=doc.get("tenant_id"),
            required_feature_flags=list(doc.get("required_feature_flags") or []),
            view_type=doc.get("view_type", "list"),
            layout_profile=doc.get("layout_profile", "backend_default"),
            created_at=doc.get("created_at"),
            updated_at=doc.get("updated_at"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "parent_id": self.parent_id,
            "title": self.title,
            "path": self.path,
            "icon": self.icon,
            "sort_order": self.sort_order,
            "is_active": self.is_active,
            "roles": list(self.roles),
            "metadata": dict(self.metadata),
            "tenant_id": self.tenant_id,
            "required_feature_flags": list(self.required_feature_flags),
            "view_type": self.view_type,
            "layout_profile": self.layout_profile,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@dataclass
class NavigationTreeNode:
    """A navigation entry plus its (sorted) children. Wraps the entry, never copies into it."""

    entry: NavigationEntry
    children: list[NavigationTreeNode] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data = self.entry.to_dict()
        data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass
class CreateNavigationItemParams:
    """Input for navigation_service.create_item. None means "use the default"."""

    title: str
    path: str
    parent_id: str | None = None
    icon: str | None = None
    sort_order: int | None = None
    is_active: bool | None = None
    roles: list[str] | None = None
    metadata: dict[str, Any] | None = None
    tenant_id: str | None = None
    required_feature_flags: list[str] | None = None
    view_type: str | None = None
    layout_profile: str | None = None


@dataclass
class ReorderItem:
    """One entry of a reorder batch. parent_id is written only when update_parent is set."""

    id: str
    sort_order: int
    parent_id: str | None = None
    update_parent: bool = False


@dataclass
class FeatureFlag:
    """A feature flag record as read for resolution."""

    flag_key: str
    is_active: bool
    scope: str
    tenant_id: str | None = None

    @classmethod
    def from_doc(cls, doc: dict[str, Any]) -> FeatureFlag:
        return cls(
            flag_key=doc["flag_key"],
            is_active=bool(doc.get("is_active", False)),
            scope=doc.get("scope", "global"),
            tenant_id=doc.get("tenant_id"),
        )


@dataclass
class NavigationRoute:
    """A module's binding of an /admin/ route to the hierarchy. Natural key: (module_id, route)."""

    id: str
    module_id: str
    route: str
    menu_id: str | None = None
    view_type: str = "list"
    layout_profile: str = "backend_default"
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_doc(cls, doc: dict[str, Any]) -> NavigationRoute:
        return cls(
            id=doc.get("id") or doc["_key"],
            module_id=doc["module_id"],
            route=doc["route"],
            menu_id=doc.get("menu_id"),
            view_type=doc.get("view_type", "list"),
            layout_profile=doc.get("layout_profile", "backend_default"),
            created_at=doc.get("created_at"),
            updated_at=doc.get("updated_at"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "module_id": self.module_id,
            "route": self.route,
            "menu_id": self.menu_id,
            "view_type": self.view_type,
            "layout_profile": self.layout_profile,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@dataclass
class NavigationFullResult:
    """Result from navigation_service.get_navigation_full."""

    navigation_items: list[NavigationEntry]
    layout_profiles: LayoutProfiles
    routes: list[NavigationRoute]
