"""Refresh policy endpoints (admin/system only)."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from navhub.interfaces.api.auth import require_admin
from navhub.interfaces.api.types.policy_types import RefreshPolicyResponse
from navhub.interfaces.api.web.dependencies import get_refresh_policy_service
from navhub.services.refresh_policy_svc import RefreshPolicyService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/refresh-policy", tags=["Refresh Policy"])


@router.get("", dependencies=[Depends(require_admin)])
async def get_refresh_policy(
    refresh_policy_service: RefreshPolicyService = Depends(get_refresh_policy_service),
) -> RefreshPolicyResponse:
    """Current policy; the default policy is created on first access."""
    return RefreshPolicyResponse.from_dto(refresh_policy_service.get_or_create_policy())


@router.put("", dependencies=[Depends(require_admin)])
async def update_refresh_policy(
    body: Any = Body(None),
    refresh_policy_service: RefreshPolicyService = Depends(get_refresh_policy_service),
) -> RefreshPolicyResponse:
    """Replace all four intervals. Each must be an integer in [1000, 60000]."""
    policy = refresh_policy_service.update_policy(body)
    return RefreshPolicyResponse.from_dto(policy)
