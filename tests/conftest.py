"""
Pytest fixtures and configuration for the test suite.

Strategy:
- Persistence classes are tested against a MagicMock database (AQL text and bind vars)
- Services and the HTTP API run against an in-memory FakeDatabase that mirrors
  the operations-class API of navhub.persistence.db.Database
"""

from __future__ import annotations

import copy
import uuid
from typing import Any
from unittest.mock import MagicMock

import pytest

from navhub.app import Application
from navhub.helpers.dto.navigation_dto import CreateNavigationItemParams
from navhub.services.access_svc import hash_token
from navhub.services.config_svc import ConfigService
from navhub.services.navigation_svc import NavigationService
from navhub.services.route_registration_svc import RouteRegistrationService

# ----------------------------------------------------------------------
#  In-memory operations classes
# ----------------------------------------------------------------------


class FakeNavigationItems:
    def __init__(self) -> None:
        self.docs: dict[str, dict[str, Any]] = {}
        self.fail_ids: set[str] = set()

    def _sorted(self, docs):
        return sorted((copy.deepcopy(d) for d in docs), key=lambda d: d.get("sort_order", 999))

    def list_items(self, active_only=True, tenant_id=None):
        return self._sorted(
            d
            for d in self.docs.values()
            if (not active_only or d.get("is_active", True)) and (tenant_id is None or d.get("tenant_id") == tenant_id)
        )

    def get_item(self, item_id):
        doc = self.docs.get(item_id)
        return copy.deepcopy(doc) if doc else None

    def insert_item(self, doc):
        self.docs[doc["id"]] = copy.deepcopy(doc)
        return copy.deepcopy(doc)

    def update_item(self, item_id, fields):
        if item_id not in self.docs:
            return None
        self.docs[item_id].update(copy.deepcopy(fields))
        return copy.deepcopy(self.docs[item_id])

    def update_position(self, item_id, sort_order, updated_at, parent_id=None, update_parent=False):
        if item_id in self.fail_ids:
            raise RuntimeError("write timed out")
        if item_id not in self.docs:
            return False
        self.docs[item_id]["sort_order"] = sort_order
        self.docs[item_id]["updated_at"] = updated_at
        if update_parent:
            self.docs[item_id]["parent_id"] = parent_id
        return True

    def delete_item(self, item_id):
        return self.docs.pop(item_id, None) is not None

    def search_items(self, query, include_inactive=False, tenant_id=None):
        needle = query.lower()
        return self._sorted(
            d
            for d in self.docs.values()
            if (needle in d.get("title", "").lower() or needle in d.get("path", "").lower())
            and (include_inactive or d.get("is_active", True))
            and (tenant_id is None or d.get("tenant_id") == tenant_id)
        )


class FakeNavigationRoutes:
    def __init__(self) -> None:
        self.docs: dict[str, dict[str, Any]] = {}
        self.inserts = 0
        self.updates = 0

    def find_route(self, module_id, route):
        for doc in self.docs.values():
            if doc["module_id"] == module_id and doc["route"] == route:
                return copy.deepcopy(doc)
        return None

    def insert_route(self, doc):
        if self.find_route(doc["module_id"], doc["route"]):
            raise ValueError("unique constraint violated")
        self.inserts += 1
        self.docs[doc["id"]] = copy.deepcopy(doc)
        return copy.deepcopy(doc)

    def update_route(self, route_id, fields):
        if route_id not in self.docs:
            return None
        self.updates += 1
        self.docs[route_id].update(copy.deepcopy(fields))
        return copy.deepcopy(self.docs[route_id])

    def delete_for_module(self, module_id, routes=None):
        doomed = [
            key
            for key, doc in self.docs.items()
            if doc["module_id"] == module_id and (routes is None or doc["route"] in routes)
        ]
        for key in doomed:
            del self.docs[key]
        return len(doomed)

    def list_routes(self, module_id=None, order_by="route"):
        docs = [copy.deepcopy(d) for d in self.docs.values() if module_id is None or d["module_id"] == module_id]
        if order_by == "module_id":
            return sorted(docs, key=lambda d: (d["module_id"], d["route"]))
        return sorted(docs, key=lambda d: d["route"])


class FakeNavigationSettings:
    def __init__(self) -> None:
        self.doc: dict[str, Any] | None = None

    def get_settings(self):
        return copy.deepcopy(self.doc)

    def insert_settings(self, doc):
        self.doc = {**copy.deepcopy(doc), "_key": doc["id"]}
        return copy.deepcopy(self.doc)

    def update_settings(self, key, fields):
        if not self.doc or self.doc["_key"] != key:
            return None
        self.doc.update(copy.deepcopy(fields))
        return copy.deepcopy(self.doc)


class FakeFeatureFlags:
    def __init__(self) -> None:
        self.docs: list[dict[str, Any]] = []

    def add(self, flag_key, is_active=True, scope="global", tenant_id=None):
        self.docs.append({"flag_key": flag_key, "is_active": is_active, "scope": scope, "tenant_id": tenant_id})

    def get_active_flags(self, flag_keys, tenant_id=None):
        return [
            dict(d)
            for d in self.docs
            if d["flag_key"] in flag_keys
            and d["is_active"]
            and (d["scope"] == "global" or (tenant_id is not None and d["tenant_id"] == tenant_id))
        ]


class FakeRefreshPolicy:
    def __init__(self) -> None:
        self.doc: dict[str, Any] | None = None

    def get_policy(self):
        return copy.deepcopy(self.doc)

    def insert_policy(self, doc):
        self.doc = copy.deepcopy(doc)
        return copy.deepcopy(doc)

    def update_policy(self, policy_id, fields):
        if not self.doc or self.doc["id"] != policy_id:
            return None
        self.doc.update(fields)
        return copy.deepcopy(self.doc)


class FakeSystemRevision:
    def __init__(self) -> None:
        self.docs: dict[str, dict[str, Any]] = {}

    def list_revisions(self):
        return [dict(self.docs[k]) for k in sorted(self.docs)]

    def bump(self, key, timestamp):
        doc = self.docs.setdefault(key, {"key": key, "revision": 0, "updated_at": timestamp})
        doc["revision"] += 1
        doc["updated_at"] = timestamp


class FakeApiTokens:
    def __init__(self) -> None:
        self.docs: list[dict[str, Any]] = []

    def get_by_hash(self, token_hash):
        for d in self.docs:
            if d["token_hash"] == token_hash and not d["revoked"]:
                return {"subject": d["subject"], "roles": list(d["roles"])}
        return None

    def insert_token(self, subject, roles, token_hash, timestamp):
        self.docs.append(
            {"subject": subject, "roles": list(roles), "token_hash": token_hash, "revoked": False, "created_at": timestamp}
        )

    def revoke_subject(self, subject):
        count = 0
        for d in self.docs:
            if d["subject"] == subject and not d["revoked"]:
                d["revoked"] = True
                count += 1
        return count


class FakeDatabase:
    """Drop-in for navhub.persistence.db.Database backed by dicts."""

    def __init__(self) -> None:
        self.db = MagicMock()
        self.navigation_items = FakeNavigationItems()
        self.navigation_routes = FakeNavigationRoutes()
        self.navigation_settings = FakeNavigationSettings()
        self.feature_flags = FakeFeatureFlags()
        self.refresh_policy = FakeRefreshPolicy()
        self.system_revision = FakeSystemRevision()
        self.api_tokens = FakeApiTokens()


# ----------------------------------------------------------------------
#  Fixtures
# ----------------------------------------------------------------------


@pytest.fixture
def mock_db() -> MagicMock:
    """Raw ArangoDB handle mock for persistence tests."""
    db = MagicMock()
    db.name = "test_db"
    return db


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def navigation_service(fake_db) -> NavigationService:
    return NavigationService(fake_db)  # type: ignore[arg-type]


@pytest.fixture
def route_service(fake_db, navigation_service) -> RouteRegistrationService:
    return RouteRegistrationService(fake_db, navigation_service)  # type: ignore[arg-type]


@pytest.fixture
def make_item(navigation_service):
    """Create a navigation item through the service; returns the stored entry."""

    def _make(title: str = "Dashboard", path: str = "/admin/dashboard", **kwargs: Any):
        return navigation_service.create_item(CreateNavigationItemParams(title=title, path=path, **kwargs))

    return _make


@pytest.fixture
def sample_profile() -> dict[str, Any]:
    return {
        "label": "Compact",
        "zones": {
            "header": {"visible": True},
            "sidebar": {"visible": False, "width": 200},
            "toolbar": {"visible": True},
            "footer": {"visible": True},
        },
        "options": {"content_padding": "sm", "max_content_width": "xl", "scroll_behavior": "page"},
    }


@pytest.fixture
def application(fake_db, monkeypatch) -> Application:
    """Started Application wired to the fake database, isolated from host config."""
    monkeypatch.delenv("NAVHUB_CONFIG_PATH", raising=False)
    monkeypatch.setattr(ConfigService, "_load_yaml", lambda self, path: {})
    app = Application(ConfigService(), db=fake_db)  # type: ignore[arg-type]
    app.start()
    return app


def _store_token(fake_db: FakeDatabase, subject: str, roles: list[str]) -> str:
    token = f"tok-{subject}-{uuid.uuid4().hex}"
    fake_db.api_tokens.insert_token(subject, roles, hash_token(token), "2026-01-01T00:00:00+00:00")
    return token


@pytest.fixture
def admin_headers(fake_db) -> dict[str, str]:
    return {"Authorization": f"Bearer {_store_token(fake_db, 'ops', ['admin'])}"}


@pytest.fixture
def user_headers(fake_db) -> dict[str, str]:
    return {"Authorization": f"Bearer {_store_token(fake_db, 'viewer', ['authenticated'])}"}


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test (no database, no HTTP)")
    config.addinivalue_line("markers", "integration: mark test as integration test (API or CLI end to end)")
