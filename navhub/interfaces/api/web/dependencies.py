"""
FastAPI dependency injection helpers for navigation endpoints.

Services are read from the Application stored on app.state by
create_api_app(), so every app instance (and every test client) carries
its own container.

ARCHITECTURE:
- Endpoints should ONLY inject services, never Database or raw infrastructure
- Endpoints are thin presentation layers that call services and format responses
"""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, Request

from navhub.services.access_svc import AccessService
from navhub.services.navigation_svc import NavigationService
from navhub.services.refresh_policy_svc import RefreshPolicyService
from navhub.services.route_registration_svc import RouteRegistrationService
from navhub.services.system_state_svc import SystemStateService


def _get_service(request: Request, name: str, label: str) -> Any:
    application = getattr(request.app.state, "application", None)
    service = application.services.get(name) if application is not None else None
    if service is None:
        raise HTTPException(status_code=503, detail=f"{label} not available")
    return service


def get_navigation_service(request: Request) -> NavigationService:
    """Get NavigationService instance."""
    return _get_service(request, "navigation", "Navigation service")  # type: ignore[no-any-return]


def get_route_registration_service(request: Request) -> RouteRegistrationService:
    """Get RouteRegistrationService instance."""
    return _get_service(request, "routes", "Route registration service")  # type: ignore[no-any-return]


def get_refresh_policy_service(request: Request) -> RefreshPolicyService:
    return _get_service(request, "refresh_policy", "Refresh policy service")  # type: ignore[no-any-return]


def get_system_state_service(request: Request) -> SystemStateService:
    return _get_service(request, "system_state", "System state service")  # type: ignore[no-any-return]


def get_access_service(request: Request) -> AccessService:
    return _get_service(request, "access", "Access service")  # type: ignore[no-any-return]
