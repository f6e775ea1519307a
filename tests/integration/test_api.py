"""
Integration tests for the HTTP API.

The FastAPI app is built from a started Application wired to the
in-memory database, so requests run through routing, auth, pydantic
types, services and components together.
"""

import pytest
from fastapi.testclient import TestClient

from navhub.interfaces.api.api_app import create_api_app

pytestmark = [pytest.mark.integration]

UNKNOWN_ID = "3f2b8a4e-1c9d-4e7a-9b3c-2d1e0f4a5b6c"


@pytest.fixture
def client(application):
    return TestClient(create_api_app(application), raise_server_exceptions=False)


class TestAuth:
    def test_missing_token(self, client):
        response = client.get("/api/system-state")

        assert response.status_code == 401
        assert response.json() == {"error": "UNAUTHORIZED"}

    def test_unknown_token(self, client):
        response = client.get("/api/system-state", headers={"Authorization": "Bearer nope"})

        assert response.status_code == 401

    def test_non_admin_forbidden(self, client, user_headers):
        response = client.get("/api/refresh-policy", headers=user_headers)

        assert response.status_code == 403
        assert response.json() == {"error": "FORBIDDEN"}

    def test_non_admin_cannot_register(self, client, user_headers):
        response = client.post(
            "/api/navigation/routes/register",
            json={"module": "billing", "routes": [{"route": "/admin/b"}]},
            headers=user_headers,
        )

        assert response.status_code == 403


class TestSystemState:
    def test_reports_revisions(self, client, admin_headers, user_headers):
        client.post("/api/navigation/items", json={"title": "Home", "path": "/admin"}, headers=admin_headers)

        body = client.get("/api/system-state", headers=user_headers).json()

        assert body["navigation_items"]["revision"] == 1
        assert "updated_at" in body["navigation_items"]
        assert "timestamp" in body

    def test_storage_failure_is_500(self, client, user_headers, fake_db, monkeypatch):
        def broken():
            raise RuntimeError("database unavailable")

        monkeypatch.setattr(fake_db.system_revision, "list_revisions", broken)

        response = client.get("/api/system-state", headers=user_headers)

        assert response.status_code == 500
        assert response.json() == {"error": "database unavailable"}


class TestRefreshPolicy:
    BODY = {
        "default_interval": 2000,
        "module_interval": 3000,
        "settings_interval": 4000,
        "dashboard_interval": 5000,
    }

    def test_put_before_get_is_404(self, client, admin_headers):
        response = client.put("/api/refresh-policy", json=self.BODY, headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["error"] == "NO_POLICY_FOUND"

    def test_get_creates_then_put_updates(self, client, admin_headers):
        created = client.get("/api/refresh-policy", headers=admin_headers).json()
        assert created["default_interval"] == 5000

        response = client.put("/api/refresh-policy", json=self.BODY, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["id"] == created["id"]
        assert response.json()["module_interval"] == 3000

    @pytest.mark.parametrize("bad", [999, 60001, "2000", None])
    def test_invalid_interval(self, client, admin_headers, bad):
        client.get("/api/refresh-policy", headers=admin_headers)

        response = client.put("/api/refresh-policy", json={**self.BODY, "settings_interval": bad}, headers=admin_headers)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "INVALID_INTERVAL_OR_RANGE"
        assert body["field"] == "settings_interval"


class TestNavigationItems:
    def test_create_get_update_delete(self, client, admin_headers, user_headers):
        response = client.post(
            "/api/navigation/items",
            json={"title": "Billing", "path": "/admin/billing", "icon": "wallet"},
            headers=admin_headers,
        )
        assert response.status_code == 201
        item = response.json()
        assert item["sort_order"] == 999
        assert item["roles"] == ["authenticated"]

        fetched = client.get(f"/api/navigation/items/{item['id']}", headers=user_headers)
        assert fetched.json()["icon"] == "wallet"

        patched = client.patch(
            f"/api/navigation/items/{item['id']}", json={"sort_order": 1, "icon": None}, headers=admin_headers
        )
        assert patched.status_code == 200
        assert patched.json()["sort_order"] == 1
        assert patched.json()["icon"] is None
        assert patched.json()["title"] == "Billing"

        assert client.delete(f"/api/navigation/items/{item['id']}", headers=admin_headers).status_code == 204
        assert client.get(f"/api/navigation/items/{item['id']}", headers=user_headers).status_code == 404

    def test_invalid_view_type(self, client, admin_headers):
        response = client.post(
            "/api/navigation/items",
            json={"title": "X", "path": "/admin/x", "view_type": "grid"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "VALIDATION_ERROR"
        assert body["field"] == "view_type"
        assert body["value"] == "grid"

    def test_unknown_layout_profile(self, client, admin_headers):
        response = client.post(
            "/api/navigation/items",
            json={"title": "X", "path": "/admin/x", "layout_profile": "compact"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"] == "LAYOUT_PROFILE_NOT_FOUND"

    def test_malformed_body(self, client, admin_headers):
        response = client.post("/api/navigation/items", json={"title": "X"}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"
        assert response.json()["details"]

    def test_patch_null_sort_order_keeps_reads_working(self, client, admin_headers, user_headers):
        item = client.post(
            "/api/navigation/items", json={"title": "Billing", "path": "/admin/billing", "sort_order": 3}, headers=admin_headers
        ).json()

        response = client.patch(f"/api/navigation/items/{item['id']}", json={"sort_order": None}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"
        assert response.json()["field"] == "sort_order"
        tree = client.get("/api/navigation/tree", headers=user_headers)
        assert tree.status_code == 200
        assert tree.json()["tree"][0]["sort_order"] == 3

    def test_patch_null_is_active(self, client, admin_headers, user_headers):
        item = client.post(
            "/api/navigation/items", json={"title": "Billing", "path": "/admin/billing"}, headers=admin_headers
        ).json()

        response = client.patch(f"/api/navigation/items/{item['id']}", json={"is_active": None}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["field"] == "is_active"
        assert client.get(f"/api/navigation/items/{item['id']}", headers=user_headers).json()["is_active"] is True

    def test_patch_missing_item(self, client, admin_headers):
        response = client.patch(f"/api/navigation/items/{UNKNOWN_ID}", json={"title": "x"}, headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"

    def test_list_and_search(self, client, admin_headers, user_headers):
        for title, tenant in [("Acme Billing", "acme"), ("Globex Billing", "globex"), ("Users", None)]:
            client.post(
                "/api/navigation/items",
                json={"title": title, "path": f"/admin/{title.lower().replace(' ', '-')}", "tenant_id": tenant},
                headers=admin_headers,
            )

        everything = client.get("/api/navigation/items", headers=user_headers).json()["items"]
        acme = client.get("/api/navigation/items", params={"tenant_id": "acme"}, headers=user_headers).json()["items"]
        found = client.get("/api/navigation/items/search", params={"q": "billing"}, headers=user_headers).json()

        assert len(everything) == 3
        assert [i["title"] for i in acme] == ["Acme Billing"]
        assert {i["title"] for i in found["items"]} == {"Acme Billing", "Globex Billing"}

    def test_reorder_and_tree(self, client, admin_headers, user_headers):
        def create(title, **extra):
            return client.post(
                "/api/navigation/items", json={"title": title, "path": f"/admin/{title}", **extra}, headers=admin_headers
            ).json()

        settings = create("settings", sort_order=1)
        users = create("users", sort_order=1)
        roles = create("roles", sort_order=2, parent_id=settings["id"])

        response = client.post(
            "/api/navigation/items/reorder",
            json={"items": [{"id": users["id"], "sort_order": 5, "parent_id": settings["id"]}, {"id": roles["id"], "sort_order": 9}]},
            headers=admin_headers,
        )
        assert response.json() == {"updated": 2}

        tree = client.get("/api/navigation/tree", headers=user_headers).json()["tree"]
        assert [n["title"] for n in tree] == ["settings"]
        assert [c["title"] for c in tree[0]["children"]] == ["users", "roles"]

    def test_reorder_partial_failure(self, client, admin_headers):
        item = client.post(
            "/api/navigation/items", json={"title": "A", "path": "/admin/a"}, headers=admin_headers
        ).json()

        response = client.post(
            "/api/navigation/items/reorder",
            json={"items": [{"id": item["id"], "sort_order": 1}, {"id": UNKNOWN_ID, "sort_order": 2}]},
            headers=admin_headers,
        )

        assert response.status_code == 500
        assert response.json()["error"] == "REORDER_FAILED"
        assert response.json()["failures"] == {UNKNOWN_ID: "not found"}


class TestLayoutProfilesAndFlags:
    def test_fallback_then_configured(self, client, admin_headers, user_headers, sample_profile):
        fallback = client.get("/api/navigation/layout-profiles", headers=user_headers).json()
        assert list(fallback["layout_profiles"]) == ["backend_default"]

        response = client.put(
            "/api/navigation/layout-profiles", json={"layout_profiles": {"compact": sample_profile}}, headers=admin_headers
        )
        assert response.status_code == 200

        configured = client.get("/api/navigation/layout-profiles", headers=user_headers).json()
        assert list(configured["layout_profiles"]) == ["compact"]

    def test_empty_mapping_saved(self, client, admin_headers, user_headers):
        response = client.put("/api/navigation/layout-profiles", json={"layout_profiles": {}}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"layout_profiles": {}}
        assert client.get("/api/navigation/layout-profiles", headers=user_headers).json() == {"layout_profiles": {}}

    def test_invalid_profile(self, client, admin_headers, sample_profile):
        sample_profile["options"]["scroll_behavior"] = "sideways"

        response = client.put(
            "/api/navigation/layout-profiles", json={"layout_profiles": {"compact": sample_profile}}, headers=admin_headers
        )

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Profile 'compact': Invalid scroll_behavior. Allowed values: main_only, page"
        assert body["details"] == {"profile_id": "compact"}

    def test_feature_flag_check(self, client, user_headers, fake_db):
        fake_db.feature_flags.add("beta", scope="tenant", tenant_id="acme")

        def check(payload):
            return client.post("/api/navigation/feature-flags/check", json=payload, headers=user_headers).json()

        assert check({"flags": []}) == {"satisfied": True}
        assert check({"flags": ["beta"]}) == {"satisfied": False}
        assert check({"flags": ["beta"], "tenant_id": "acme"}) == {"satisfied": True}


class TestRouteRegistration:
    def test_register_twice_then_list(self, client, admin_headers, user_headers, fake_db):
        first = client.post(
            "/api/navigation/routes/register",
            json={"module": "billing", "routes": [{"route": "/admin/billing", "view_type": "list"}]},
            headers=admin_headers,
        )
        second = client.post(
            "/api/navigation/routes/register",
            json={"module": "billing", "routes": [{"route": "/admin/billing", "view_type": "dashboard"}]},
            headers=admin_headers,
        )

        assert first.json()["routes"][0]["created"] is True
        assert second.json() == {
            "module": "billing",
            "routes": [
                {
                    "route": "/admin/billing",
                    "menu_id": None,
                    "view_type": "dashboard",
                    "layout_profile": "backend_default",
                    "created": False,
                    "updated": True,
                }
            ],
        }
        assert len(fake_db.navigation_routes.docs) == 1

        listed = client.get("/api/navigation/routes", params={"module_id": "billing"}, headers=user_headers).json()
        assert [r["view_type"] for r in listed["routes"]] == ["dashboard"]

    def test_invalid_item_rejects_batch(self, client, admin_headers, fake_db):
        response = client.post(
            "/api/navigation/routes/register",
            json={
                "module": "billing",
                "routes": [{"route": "/admin/a"}, {"route": "/billing/b"}, {"route": "/admin/c"}],
            },
            headers=admin_headers,
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "VALIDATION_ERROR"
        assert [d["index"] for d in body["details"]] == [1]
        assert body["details"][0]["route"] == "/billing/b"
        assert fake_db.navigation_routes.docs == {}

    def test_menu_reference(self, client, admin_headers):
        item = client.post(
            "/api/navigation/items", json={"title": "Billing", "path": "/admin/billing"}, headers=admin_headers
        ).json()

        ok = client.post(
            "/api/navigation/routes/register",
            json={"module": "billing", "routes": [{"route": "/admin/billing", "menu_id": item["id"]}]},
            headers=admin_headers,
        )
        missing = client.post(
            "/api/navigation/routes/register",
            json={"module": "billing", "routes": [{"route": "/admin/other", "menu_id": UNKNOWN_ID}]},
            headers=admin_headers,
        )

        assert ok.json()["routes"][0]["menu_id"] == item["id"]
        assert missing.json()["details"][0]["error"]["code"] == "MENU_ID_NOT_FOUND"

    @pytest.mark.parametrize(
        ("payload", "field"),
        [
            ({"module": "", "routes": [{"route": "/admin/a"}]}, "module"),
            ({"module": "billing", "routes": []}, "routes"),
            ({"routes": [{"route": "/admin/a"}]}, "module"),
        ],
    )
    def test_request_level_errors(self, client, admin_headers, payload, field):
        response = client.post("/api/navigation/routes/register", json=payload, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["field"] == field

    def test_unregister(self, client, admin_headers):
        client.post(
            "/api/navigation/routes/register",
            json={"module": "billing", "routes": [{"route": "/admin/a"}, {"route": "/admin/b"}, {"route": "/admin/c"}]},
            headers=admin_headers,
        )

        some = client.delete(
            "/api/navigation/routes/billing", params=[("routes", "/admin/a"), ("routes", "/admin/b")], headers=admin_headers
        )
        rest = client.delete("/api/navigation/routes/billing", headers=admin_headers)
        none = client.delete("/api/navigation/routes/billing", headers=admin_headers)

        assert some.json() == {"module": "billing", "removed": 2}
        assert rest.json() == {"module": "billing", "removed": 1}
        assert none.json() == {"module": "billing", "removed": 0}

    def test_full_snapshot(self, client, admin_headers, user_headers):
        client.post("/api/navigation/items", json={"title": "Home", "path": "/admin"}, headers=admin_headers)
        client.post(
            "/api/navigation/routes/register",
            json={"module": "billing", "routes": [{"route": "/admin/billing"}]},
            headers=admin_headers,
        )

        body = client.get("/api/navigation/full", headers=user_headers).json()

        assert [i["title"] for i in body["navigation_items"]] == ["Home"]
        assert list(body["layout_profiles"]) == ["backend_default"]
        assert [r["route"] for r in body["routes"]] == ["/admin/billing"]
