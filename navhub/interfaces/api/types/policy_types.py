"""
Refresh policy and system state API types.
"""

from __future__ import annotations

from pydantic import BaseModel
from typing_extensions import Self

from navhub.helpers.dto.policy_dto import RefreshPolicy


class RefreshPolicyResponse(BaseModel):
    """Maps directly to RefreshPolicy."""

    id: str
    default_interval: int
    module_interval: int
    settings_interval: int
    dashboard_interval: int
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_dto(cls, policy: RefreshPolicy) -> Self:
        return cls(**policy.to_dict())
