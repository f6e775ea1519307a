"""
Feature flag resolution component.

A navigation entry may list required flag keys. The requirement holds
only when every key has an active record that is either global, or
tenant-scoped to the tenant being resolved for. No partial credit.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from navhub.helpers.dto.navigation_dto import FeatureFlag

if TYPE_CHECKING:
    from navhub.persistence.db import Database

GLOBAL_SCOPE = "global"
TENANT_SCOPE = "tenant"


def _flag_applies(flag: FeatureFlag, tenant_id: str | None) -> bool:
    if not flag.is_active:
        return False
    if flag.scope == GLOBAL_SCOPE:
        return True
    return tenant_id is not None and flag.scope == TENANT_SCOPE and flag.tenant_id == tenant_id


def evaluate_flags(required_flags: Sequence[str], flags: Iterable[FeatureFlag], tenant_id: str | None = None) -> bool:
    """
    Decide whether fetched flag records satisfy a requirement set.

    Args:
        required_flags: Flag keys that must all be on
        flags: Candidate records (may include records for other keys/tenants)
        tenant_id: Tenant being resolved for, or None for global-only

    Returns:
        True when the requirement set is empty or every key is satisfied
    """
    if not required_flags:
        return True

    satisfied = {flag.flag_key for flag in flags if _flag_applies(flag, tenant_id)}
    return all(key in satisfied for key in required_flags)


def flags_satisfied(db: Database, required_flags: Sequence[str], tenant_id: str | None = None) -> bool:
    """Fetch the relevant active flags and evaluate the requirement set."""
    if not required_flags:
        return True

    docs = db.feature_flags.get_active_flags(list(dict.fromkeys(required_flags)), tenant_id=tenant_id)
    return evaluate_flags(required_flags, (FeatureFlag.from_doc(doc) for doc in docs), tenant_id)
