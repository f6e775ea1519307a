"""
Navigation API types.

External API contracts for navigation item, tree, layout profile and
feature flag endpoints.

Architecture:
- These types are owned by the interface layer
- They transform internal DTOs via .from_dto() classmethods
- Services and lower layers should NOT import from this module
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Self

from navhub.helpers.dto.navigation_dto import (
    CreateNavigationItemParams,
    NavigationEntry,
    NavigationFullResult,
    NavigationRoute,
    NavigationTreeNode,
    ReorderItem,
)

# ──────────────────────────────────────────────────────────────────────
# Navigation item types
# ──────────────────────────────────────────────────────────────────────


class NavigationItemResponse(BaseModel):
    """Single navigation entry. Maps directly to NavigationEntry."""

    id: str
    parent_id: str | None = None
    title: str
    path: str
    icon: str | None = None
    sort_order: int
    is_active: bool
    roles: list[str]
    metadata: dict[str, Any]
    tenant_id: str | None = None
    required_feature_flags: list[str]
    view_type: str
    layout_profile: str
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_dto(cls, entry: NavigationEntry) -> Self:
        return cls(**entry.to_dict())


class NavigationItemListResponse(BaseModel):
    items: list[NavigationItemResponse]

    @classmethod
    def from_dto(cls, entries: list[NavigationEntry]) -> Self:
        return cls(items=[NavigationItemResponse.from_dto(e) for e in entries])


class CreateNavigationItemRequest(BaseModel):
    """Create request. Omitted optional fields take the creation defaults."""

    model_config = ConfigDict(extra="forbid")

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

    def to_params(self) -> CreateNavigationItemParams:
        return CreateNavigationItemParams(**self.model_dump())


class UpdateNavigationItemRequest(BaseModel):
    """Partial update request. Only fields sent by the client are applied."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    path: str | None = None
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

    def to_updates(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ReorderItemRequest(BaseModel):
    id: str
    sort_order: int
    parent_id: str | None = None

    def to_dto(self) -> ReorderItem:
        # parent_id is only rewritten when the client sent it (null clears it)
        return ReorderItem(
            id=self.id,
            sort_order=self.sort_order,
            parent_id=self.parent_id,
            update_parent="parent_id" in self.model_fields_set,
        )


class ReorderRequest(BaseModel):
    items: list[ReorderItemRequest] = Field(default_factory=list)


class ReorderResponse(BaseModel):
    updated: int


# ──────────────────────────────────────────────────────────────────────
# Tree types
# ──────────────────────────────────────────────────────────────────────


class NavigationTreeNodeResponse(NavigationItemResponse):
    children: list[NavigationTreeNodeResponse] = Field(default_factory=list)

    @classmethod
    def from_node(cls, node: NavigationTreeNode) -> NavigationTreeNodeResponse:
        return cls(
            **node.entry.to_dict(),
            children=[cls.from_node(child) for child in node.children],
        )


NavigationTreeNodeResponse.model_rebuild()


class NavigationTreeResponse(BaseModel):
    tree: list[NavigationTreeNodeResponse]

    @classmethod
    def from_dto(cls, roots: list[NavigationTreeNode]) -> Self:
        return cls(tree=[NavigationTreeNodeResponse.from_node(root) for root in roots])


# ──────────────────────────────────────────────────────────────────────
# Layout profiles, feature flags, composite reads
# ──────────────────────────────────────────────────────────────────────


class LayoutProfilesResponse(BaseModel):
    layout_profiles: dict[str, Any]


class UpdateLayoutProfilesRequest(BaseModel):
    # Validated structurally by the navigation service, not by pydantic,
    # so that errors carry the same codes and ordering as everywhere else.
    layout_profiles: Any = None


class FeatureFlagCheckRequest(BaseModel):
    flags: list[str] = Field(default_factory=list)
    tenant_id: str | None = None


class FeatureFlagCheckResponse(BaseModel):
    satisfied: bool


class NavigationRouteResponse(BaseModel):
    """Single registered route. Maps directly to NavigationRoute."""

    id: str
    module_id: str
    route: str
    menu_id: str | None = None
    view_type: str
    layout_profile: str
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_dto(cls, route: NavigationRoute) -> Self:
        return cls(**route.to_dict())


class NavigationRouteListResponse(BaseModel):
    routes: list[NavigationRouteResponse]

    @classmethod
    def from_dto(cls, routes: list[NavigationRoute]) -> Self:
        return cls(routes=[NavigationRouteResponse.from_dto(r) for r in routes])


class NavigationFullResponse(BaseModel):
    navigation_items: list[NavigationItemResponse]
    layout_profiles: dict[str, Any]
    routes: list[NavigationRouteResponse]

    @classmethod
    def from_dto(cls, result: NavigationFullResult) -> Self:
        return cls(
            navigation_items=[NavigationItemResponse.from_dto(e) for e in result.navigation_items],
            layout_profiles=dict(result.layout_profiles),
            routes=[NavigationRouteResponse.from_dto(r) for r in result.routes],
        )
