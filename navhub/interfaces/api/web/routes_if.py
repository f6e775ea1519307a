"""Module route registration endpoints."""

import logging

from fastapi import APIRouter, Depends, Query

from navhub.interfaces.api.auth import require_admin, require_principal
from navhub.interfaces.api.types.navigation_types import NavigationRouteListResponse
from navhub.interfaces.api.types.routes_types import (
    RegisterRoutesRequest,
    RegisterRoutesResponse,
    UnregisterRoutesResponse,
)
from navhub.interfaces.api.web.dependencies import get_navigation_service, get_route_registration_service
from navhub.services.navigation_svc import NavigationService
from navhub.services.route_registration_svc import RouteRegistrationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/navigation/routes", tags=["Routes"])


@router.get("", dependencies=[Depends(require_principal)])
async def list_routes(
    module_id: str | None = None,
    navigation_service: NavigationService = Depends(get_navigation_service),
) -> NavigationRouteListResponse:
    return NavigationRouteListResponse.from_dto(navigation_service.get_navigation_routes(module_id))


@router.post("/register", dependencies=[Depends(require_admin)])
async def register_routes(
    request: RegisterRoutesRequest,
    route_service: RouteRegistrationService = Depends(get_route_registration_service),
) -> RegisterRoutesResponse:
    """
    Create or update a module's routes.

    Every declaration is validated first; if any fails nothing is written
    and the response lists each failure with its index.
    """
    result = route_service.register_routes(request.module, request.to_declarations())
    return RegisterRoutesResponse.from_dto(result)


@router.delete("/{module_id}", dependencies=[Depends(require_admin)])
async def unregister_routes(
    module_id: str,
    routes: list[str] | None = Query(None),
    route_service: RouteRegistrationService = Depends(get_route_registration_service),
) -> UnregisterRoutesResponse:
    removed = route_service.unregister_routes(module_id, routes)
    return UnregisterRoutesResponse(module=module_id, removed=removed)
