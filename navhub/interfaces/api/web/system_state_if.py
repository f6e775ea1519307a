"""System state endpoint: revision counters for client cache invalidation."""

import logging
from typing import Any

from fastapi import APIRouter, Depends

from navhub.interfaces.api.auth import require_principal
from navhub.interfaces.api.web.dependencies import get_system_state_service
from navhub.services.system_state_svc import SystemStateService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["System"])


@router.get("/system-state", dependencies=[Depends(require_principal)])
async def get_system_state(
    system_state_service: SystemStateService = Depends(get_system_state_service),
) -> dict[str, Any]:
    """Every settings key's {revision, updated_at}, plus the server timestamp."""
    return system_state_service.get_system_state().to_dict()
