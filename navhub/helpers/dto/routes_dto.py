"""
Route registration DTOs.

Contracts between the registration interface, the route declaration
component and RouteRegistrationService.

Rules:
- Import only stdlib and typing (no navhub.* imports)
- Pure data structures only
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class RouteDeclaration:
    """A route exactly as a module submitted it. Values are unvalidated."""

    route: Any
    menu_id: Any = None
    view_type: Any = None
    layout_profile: Any = None

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> RouteDeclaration:
        return cls(
            route=data.get("route"),
            menu_id=data.get("menu_id"),
            view_type=data.get("view_type"),
            layout_profile=data.get("layout_profile"),
        )


@dataclass(frozen=True)
class ResolvedRouteDeclaration:
    """A declaration after defaulting: every field holds the value that will be validated and written."""

    route: Any
    menu_id: Any
    view_type: Any
    layout_profile: Any


@dataclass
class RegisteredRoute:
    """Per-declaration outcome of a successful registration."""

    route: str
    menu_id: str | None
    view_type: str
    layout_profile: str
    created: bool
    updated: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "route": self.route,
            "menu_id": self.menu_id,
            "view_type": self.view_type,
            "layout_profile": self.layout_profile,
            "created": self.created,
            "updated": self.updated,
        }


@dataclass
class RegisterRoutesResult:
    """Result from route_registration_service.register_routes."""

    module: str
    routes: list[RegisteredRoute]

    def to_dict(self) -> dict[str, Any]:
        return {"module": self.module, "routes": [r.to_dict() for r in self.routes]}
