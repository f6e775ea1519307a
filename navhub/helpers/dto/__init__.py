"""
Domain DTOs (Data Transfer Objects) used across multiple layers.

Domain DTOs live in helpers/dto/<domain>_dto.py and form cross-layer
contracts (interfaces -> services -> components -> persistence).

Rules for DTO modules:
- Import only stdlib and typing (no navhub.* imports)
- Contain ONLY dataclass/type definitions and simple type aliases
- No I/O, no DB access, no business logic
"""

from __future__ import annotations

from navhub.helpers.dto.access_dto import IssuedToken, Principal
from navhub.helpers.dto.navigation_dto import (
    CreateNavigationItemParams,
    FeatureFlag,
    LayoutProfiles,
    NavigationEntry,
    NavigationFullResult,
    NavigationRoute,
    NavigationTreeNode,
    ReorderItem,
    ViewType,
)
from navhub.helpers.dto.policy_dto import (
    RefreshIntervals,
    RefreshPolicy,
    SystemRevision,
    SystemStateResult,
)
from navhub.helpers.dto.routes_dto import (
    RegisteredRoute,
    RegisterRoutesResult,
    ResolvedRouteDeclaration,
    RouteDeclaration,
)
from navhub.helpers.dto.validation_dto import (
    LAYOUT_PROFILE_NOT_FOUND,
    MENU_ID_NOT_FOUND,
    VALIDATION_ERROR,
    ValidationError,
)

__all__ = [
    "LAYOUT_PROFILE_NOT_FOUND",
    "MENU_ID_NOT_FOUND",
    "VALIDATION_ERROR",
    "CreateNavigationItemParams",
    "FeatureFlag",
    "IssuedToken",
    "LayoutProfiles",
    "NavigationEntry",
    "NavigationFullResult",
    "NavigationRoute",
    "NavigationTreeNode",
    "Principal",
    "RefreshIntervals",
    "RefreshPolicy",
    "RegisterRoutesResult",
    "RegisteredRoute",
    "ResolvedRouteDeclaration",
    "RouteDeclaration",
    "SystemRevision",
    "SystemStateResult",
    "ReorderItem",
    "ValidationError",
    "ViewType",
]
