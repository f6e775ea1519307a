"""
Authentication for the FastAPI application.
Thin wrapper around AccessService for FastAPI dependency injection.
"""

from __future__ import annotations

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from navhub.helpers.dto.access_dto import Principal
from navhub.helpers.exceptions import ForbiddenError, UnauthorizedError
from navhub.interfaces.api.web.dependencies import get_access_service
from navhub.services.access_svc import AccessService

auth_scheme = HTTPBearer(auto_error=False)


async def require_principal(
    creds: HTTPAuthorizationCredentials | None = Depends(auth_scheme),
    access_service: AccessService = Depends(get_access_service),
) -> Principal:
    """Resolve the bearer token to a principal, or fail with UNAUTHORIZED."""
    if creds is None:
        raise UnauthorizedError("Missing Authorization header")
    principal = access_service.resolve_principal(creds.credentials.strip())
    if principal is None:
        raise UnauthorizedError("Invalid or revoked token")
    return principal


async def require_admin(principal: Principal = Depends(require_principal)) -> Principal:
    """Require the admin or system role, or fail with FORBIDDEN."""
    if not AccessService.is_admin(principal):
        raise ForbiddenError(f"{principal.subject} lacks admin/system role")
    return principal
