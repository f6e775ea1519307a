"""Unit tests for SystemStateService."""

import pytest

from navhub.components.platform.revision_comp import NAVIGATION_ITEMS_KEY, REFRESH_POLICY_KEY, bump_revision
from navhub.services.system_state_svc import SystemStateService

pytestmark = pytest.mark.unit


def test_empty_state_has_timestamp_only(fake_db):
    state = SystemStateService(fake_db).get_system_state().to_dict()

    assert list(state) == ["timestamp"]


def test_revisions_reported_per_key(fake_db):
    bump_revision(fake_db, NAVIGATION_ITEMS_KEY)
    bump_revision(fake_db, NAVIGATION_ITEMS_KEY)
    bump_revision(fake_db, REFRESH_POLICY_KEY)

    state = SystemStateService(fake_db).get_system_state().to_dict()

    assert state["navigation_items"]["revision"] == 2
    assert state["refresh_policy"]["revision"] == 1
    assert "updated_at" in state["navigation_items"]
    assert state["timestamp"] >= state["navigation_items"]["updated_at"]
