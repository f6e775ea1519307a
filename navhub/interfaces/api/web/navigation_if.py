"""Navigation item, tree, layout profile and feature flag endpoints."""

import logging

from fastapi import APIRouter, Depends, Query

from navhub.helpers.exceptions import NotFoundError
from navhub.interfaces.api.auth import require_admin, require_principal
from navhub.interfaces.api.types.navigation_types import (
    CreateNavigationItemRequest,
    FeatureFlagCheckRequest,
    FeatureFlagCheckResponse,
    LayoutProfilesResponse,
    NavigationFullResponse,
    NavigationItemListResponse,
    NavigationItemResponse,
    NavigationTreeResponse,
    ReorderRequest,
    ReorderResponse,
    UpdateLayoutProfilesRequest,
    UpdateNavigationItemRequest,
)
from navhub.interfaces.api.web.dependencies import get_navigation_service
from navhub.services.navigation_svc import NavigationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/navigation", tags=["Navigation"])


# ──────────────────────────────────────────────────────────────────────
# Navigation items
# ──────────────────────────────────────────────────────────────────────


@router.get("/items", dependencies=[Depends(require_principal)])
async def list_items(
    tenant_id: str | None = None,
    include_inactive: bool = False,
    navigation_service: NavigationService = Depends(get_navigation_service),
) -> NavigationItemListResponse:
    """Tenant-scoped active items, or every item when no tenant is given."""
    if tenant_id:
        entries = navigation_service.get_items(tenant_id)
    else:
        entries = navigation_service.get_all_items(include_inactive=include_inactive)
    return NavigationItemListResponse.from_dto(entries)


@router.get("/items/search", dependencies=[Depends(require_principal)])
async def search_items(
    q: str = Query(..., min_length=1),
    tenant_id: str | None = None,
    include_inactive: bool = False,
    navigation_service: NavigationService = Depends(get_navigation_service),
) -> NavigationItemListResponse:
    entries = navigation_service.search_items(q, include_inactive=include_inactive, tenant_id=tenant_id)
    return NavigationItemListResponse.from_dto(entries)


@router.post("/items/reorder", dependencies=[Depends(require_admin)])
async def reorder_items(
    request: ReorderRequest,
    navigation_service: NavigationService = Depends(get_navigation_service),
) -> ReorderResponse:
    updated = navigation_service.reorder_items([item.to_dto() for item in request.items])
    return ReorderResponse(updated=updated)


@router.get("/items/{item_id}", dependencies=[Depends(require_principal)])
async def get_item(
    item_id: str,
    navigation_service: NavigationService = Depends(get_navigation_service),
) -> NavigationItemResponse:
    entry = navigation_service.get_item(item_id)
    if entry is None:
        raise NotFoundError(f"Navigation item {item_id} not found")
    return NavigationItemResponse.from_dto(entry)


@router.post("/items", status_code=201, dependencies=[Depends(require_admin)])
async def create_item(
    request: CreateNavigationItemRequest,
    navigation_service: NavigationService = Depends(get_navigation_service),
) -> NavigationItemResponse:
    entry = navigation_service.create_item(request.to_params())
    return NavigationItemResponse.from_dto(entry)


@router.patch("/items/{item_id}", dependencies=[Depends(require_admin)])
async def update_item(
    item_id: str,
    request: UpdateNavigationItemRequest,
    navigation_service: NavigationService = Depends(get_navigation_service),
) -> NavigationItemResponse:
    entry = navigation_service.update_item(item_id, request.to_updates())
    return NavigationItemResponse.from_dto(entry)


@router.delete("/items/{item_id}", status_code=204, dependencies=[Depends(require_admin)])
async def delete_item(
    item_id: str,
    navigation_service: NavigationService = Depends(get_navigation_service),
) -> None:
    navigation_service.delete_item(item_id)


# ──────────────────────────────────────────────────────────────────────
# Tree and composite reads
# ──────────────────────────────────────────────────────────────────────


@router.get("/tree", dependencies=[Depends(require_principal)])
async def get_tree(
    tenant_id: str | None = None,
    navigation_service: NavigationService = Depends(get_navigation_service),
) -> NavigationTreeResponse:
    return NavigationTreeResponse.from_dto(navigation_service.get_navigation_tree(tenant_id))


@router.get("/full", dependencies=[Depends(require_principal)])
async def get_full(
    tenant_id: str | None = None,
    navigation_service: NavigationService = Depends(get_navigation_service),
) -> NavigationFullResponse:
    """Items, layout profiles and routes in a single response."""
    return NavigationFullResponse.from_dto(navigation_service.get_navigation_full(tenant_id))


# ──────────────────────────────────────────────────────────────────────
# Layout profiles and feature flags
# ──────────────────────────────────────────────────────────────────────


@router.get("/layout-profiles", dependencies=[Depends(require_principal)])
async def get_layout_profiles(
    navigation_service: NavigationService = Depends(get_navigation_service),
) -> LayoutProfilesResponse:
    return LayoutProfilesResponse(layout_profiles=dict(navigation_service.get_layout_profiles()))


@router.put("/layout-profiles", dependencies=[Depends(require_admin)])
async def update_layout_profiles(
    request: UpdateLayoutProfilesRequest,
    navigation_service: NavigationService = Depends(get_navigation_service),
) -> LayoutProfilesResponse:
    profiles = navigation_service.update_layout_profiles(request.layout_profiles)
    return LayoutProfilesResponse(layout_profiles=dict(profiles))


@router.post("/feature-flags/check", dependencies=[Depends(require_principal)])
async def check_feature_flags(
    request: FeatureFlagCheckRequest,
    navigation_service: NavigationService = Depends(get_navigation_service),
) -> FeatureFlagCheckResponse:
    satisfied = navigation_service.check_feature_flags(request.flags, request.tenant_id)
    return FeatureFlagCheckResponse(satisfied=satisfied)
