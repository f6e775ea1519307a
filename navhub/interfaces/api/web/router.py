"""
Combined router for all navhub HTTP endpoints.

Every route lives under /api.
"""

from fastapi import APIRouter

from navhub.interfaces.api.web import navigation_if, refresh_policy_if, routes_if, system_state_if

router = APIRouter(prefix="/api")

router.include_router(system_state_if.router)
router.include_router(refresh_policy_if.router)
router.include_router(navigation_if.router)
router.include_router(routes_if.router)
