"""API resource tests."""

from falcon.testing import TestClient

from rolegate.domain.value_objects import Permission, Role
from rolegate.infrastructure.permission.permission_resolver import PermissionResolver
from rolegate.interfaces.api.app import create_app

from tests.api.conftest import as_user
from tests.conftest import make_record


class TestHealth:
    def test_health_ok(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/health")
        assert r.status_code == 200
        assert r.json["status"] == "ok"

    def test_ready_counts_seeded_users(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/health/ready")
        assert r.json["cached_users"] == 5


class TestCatalog:
    def test_permissions(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/catalog/permissions")
        assert r.status_code == 200
        assert len(r.json["items"]) == len(Permission)
        item = next(i for i in r.json["items"] if i["permission"] == "task:view")
        assert item["name"] and item["description"]
        assert set(r.json["groups"]) == {
            "user_basic", "user_full", "creator", "approver", "automation", "admin",
        }

    def test_roles_ordered_by_level(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/catalog/roles")
        assert r.status_code == 200
        items = r.json["items"]
        assert items[0]["role"] == "super_admin"
        assert items[-1]["role"] == "guest"
        levels = [i["level"] for i in items]
        assert levels == sorted(levels, reverse=True)
        by_role = {i["role"]: i for i in items}
        assert by_role["guest"]["public"] is True
        assert by_role["creator"]["paid"] is True
        assert by_role["user"]["paid"] is False
        assert r.json["default_role"] == "user"


class TestMe:
    def test_requires_identity(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/me/permissions")
        assert r.status_code == 401

    def test_unregistered_user(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/me/permissions", headers=as_user("ghost"))
        assert r.status_code == 404

    def test_own_record(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/me/permissions", headers=as_user("u1"))
        assert r.status_code == 200
        assert r.json["user_id"] == "u1"
        assert r.json["roles"] == ["user"]
        assert "task:view" in r.json["effective_permissions"]
        assert "user:delete" not in r.json["effective_permissions"]

    def test_custom_user_header(self, seeded_resolver) -> None:
        client = TestClient(create_app(seeded_resolver, user_header="X-Forwarded-User"))
        assert client.simulate_get("/v1/me/permissions", headers=as_user("u1")).status_code == 401
        r = client.simulate_get("/v1/me/permissions", headers={"X-Forwarded-User": "u1"})
        assert r.status_code == 200


class TestUserPermissions:
    def test_get_requires_identity(self, client: TestClient) -> None:
        assert client.simulate_get("/v1/users/u1/permissions").status_code == 401

    def test_get_own(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/users/u1/permissions", headers=as_user("u1"))
        assert r.status_code == 200
        assert r.json["roles"] == ["user"]

    def test_get_other_needs_system_users(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/users/u1/permissions", headers=as_user("u2"))
        assert r.status_code == 403
        r = client.simulate_get("/v1/users/u1/permissions", headers=as_user("admin-1"))
        assert r.status_code == 200

    def test_get_unknown(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/users/ghost/permissions", headers=as_user("admin-1"))
        assert r.status_code == 404

    def test_put_registers(self, client: TestClient, seeded_resolver) -> None:
        r = client.simulate_put(
            "/v1/users/new/permissions",
            headers=as_user("admin-1"),
            json={
                "roles": ["premium_user"],
                "custom_permissions": ["audit:view"],
                "denied_permissions": ["task:share"],
            },
        )
        assert r.status_code == 200
        assert r.json["user_id"] == "new"
        assert r.json["roles"] == ["premium_user"]
        assert "audit:view" in r.json["effective_permissions"]
        assert "task:share" not in r.json["effective_permissions"]
        assert seeded_resolver.check_permission("new", Permission.AUDIT_VIEW)

    def test_put_requires_system_users(self, client: TestClient) -> None:
        r = client.simulate_put(
            "/v1/users/new/permissions", headers=as_user("u1"), json={"roles": ["guest"]}
        )
        assert r.status_code == 403
        r = client.simulate_put("/v1/users/new/permissions", json={"roles": ["guest"]})
        assert r.status_code == 401

    def test_put_rejects_unknown_role(self, client: TestClient) -> None:
        r = client.simulate_put(
            "/v1/users/new/permissions", headers=as_user("admin-1"), json={"roles": ["owner"]}
        )
        assert r.status_code == 400
        assert "owner" in r.json["error"]

    def test_put_rejects_malformed_body(self, client: TestClient) -> None:
        r = client.simulate_put(
            "/v1/users/new/permissions", headers=as_user("admin-1"), json=["user"]
        )
        assert r.status_code == 400
        r = client.simulate_put(
            "/v1/users/new/permissions", headers=as_user("admin-1"), json={"roles": "user"}
        )
        assert r.status_code == 400

    def test_put_cannot_escalate(self, client: TestClient, seeded_resolver) -> None:
        r = client.simulate_put(
            "/v1/users/u1/permissions", headers=as_user("admin-1"), json={"roles": ["admin"]}
        )
        assert r.status_code == 403
        assert not seeded_resolver.check_permission("u1", Permission.SYSTEM_USERS)

    def test_delete(self, client: TestClient) -> None:
        r = client.simulate_delete("/v1/users/u2/permissions", headers=as_user("admin-1"))
        assert r.status_code == 204
        r = client.simulate_get("/v1/users/u2/permissions", headers=as_user("admin-1"))
        assert r.status_code == 404

    def test_delete_superior_is_forbidden(self, client: TestClient) -> None:
        r = client.simulate_delete("/v1/users/root/permissions", headers=as_user("admin-1"))
        assert r.status_code == 403


class TestCheck:
    def _check(self, client: TestClient, permission: str, caller: str = "u1"):
        return client.simulate_get(
            "/v1/users/u1/check", headers=as_user(caller), params={"permission": permission}
        )

    def test_allowed(self, client: TestClient) -> None:
        r = self._check(client, "task:view")
        assert r.status_code == 200
        assert r.json == {"user_id": "u1", "permission": "task:view", "allowed": True}

    def test_not_allowed(self, client: TestClient) -> None:
        assert self._check(client, "user:delete").json["allowed"] is False

    def test_unknown_permission_is_not_allowed(self, client: TestClient) -> None:
        r = self._check(client, "task:fly")
        assert r.status_code == 200
        assert r.json["allowed"] is False

    def test_missing_parameter(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/users/u1/check", headers=as_user("u1"))
        assert r.status_code == 400

    def test_other_user_forbidden(self, client: TestClient) -> None:
        assert self._check(client, "task:view", caller="u2").status_code == 403


class TestRoles:
    def test_assign(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/users/u1/roles", headers=as_user("root"), json={"role": "creator"}
        )
        assert r.status_code == 200
        assert r.json["roles"] == ["creator", "user"]
        assert "skill:publish" in r.json["effective_permissions"]

    def test_assign_requires_system_roles(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/users/u1/roles", headers=as_user("admin-1"), json={"role": "creator"}
        )
        assert r.status_code == 403

    def test_assign_validation(self, client: TestClient) -> None:
        r = client.simulate_post("/v1/users/u1/roles", headers=as_user("root"), json={})
        assert r.status_code == 400
        r = client.simulate_post(
            "/v1/users/u1/roles", headers=as_user("root"), json={"role": "owner"}
        )
        assert r.status_code == 400

    def test_assign_unknown_subject(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/users/ghost/roles", headers=as_user("root"), json={"role": "user"}
        )
        assert r.status_code == 404
        assert r.json["error"] == "Not found: UserPermissions/ghost"

    def test_remove(self, client: TestClient) -> None:
        r = client.simulate_delete("/v1/users/creator-1/roles/creator", headers=as_user("root"))
        assert r.status_code == 200
        assert r.json["roles"] == []
        assert r.json["effective_permissions"] == []


class TestOverrides:
    def test_grant_and_revoke(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/users/u1/grants", headers=as_user("root"), json={"permission": "audit:view"}
        )
        assert r.status_code == 200
        assert r.json["custom_permissions"] == ["audit:view"]

        r = client.simulate_delete("/v1/users/u1/grants/audit:view", headers=as_user("root"))
        assert r.status_code == 200
        assert r.json["custom_permissions"] == []
        assert "audit:view" not in r.json["effective_permissions"]

    def test_grant_validation(self, client: TestClient) -> None:
        r = client.simulate_post("/v1/users/u1/grants", headers=as_user("root"), json={})
        assert r.status_code == 400
        r = client.simulate_post(
            "/v1/users/u1/grants", headers=as_user("root"), json={"permission": "task:fly"}
        )
        assert r.status_code == 400

    def test_deny_wins_over_role(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/users/u1/denials", headers=as_user("root"), json={"permission": "task:view"}
        )
        assert r.status_code == 200
        assert r.json["denied_permissions"] == ["task:view"]
        assert "task:view" not in r.json["effective_permissions"]

        r = client.simulate_get(
            "/v1/users/u1/check", headers=as_user("u1"), params={"permission": "task:view"}
        )
        assert r.json["allowed"] is False

    def test_overrides_require_system_roles(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/users/u2/denials", headers=as_user("u1"), json={"permission": "task:view"}
        )
        assert r.status_code == 403

    def test_admin_with_roles_grant_cannot_touch_root(self, client: TestClient, seeded_resolver) -> None:
        seeded_resolver.set_user_permissions(
            make_record("ops", custom={Permission.SYSTEM_ROLES}, roles=None)
        )
        r = client.simulate_post(
            "/v1/users/root/denials", headers=as_user("ops"), json={"permission": "task:view"}
        )
        assert r.status_code == 403


class TestRegistrationLimits:
    def test_put_cannot_hand_out_unheld_permissions(
        self, client: TestClient, seeded_resolver
    ) -> None:
        r = client.simulate_put(
            "/v1/users/sock/permissions",
            headers=as_user("admin-1"),
            json={"roles": ["user"], "custom_permissions": ["audit:delete", "system:settings"]},
        )
        assert r.status_code == 403
        assert "audit:delete" in r.json["error"]
        assert seeded_resolver.get_user_permissions("sock") is None

    def test_concurrent_change_is_conflict(self) -> None:
        resolver = PermissionResolver(lock_stripes=4)
        resolver.set_user_permissions(make_record("root", {Role.SUPER_ADMIN}))
        resolver.set_user_permissions(make_record("u1", {Role.USER}))
        original_add_role = resolver.add_role

        def add_role_after_promotion(user_id, role, *, expected=None):
            resolver.set_user_permissions(make_record(user_id, {Role.ADMIN}))
            return original_add_role(user_id, role, expected=expected)

        resolver.add_role = add_role_after_promotion
        client = TestClient(create_app(resolver))
        r = client.simulate_post(
            "/v1/users/u1/roles", headers=as_user("root"), json={"role": "creator"}
        )
        assert r.status_code == 409
        assert r.json["error"] == "Modified concurrently: UserPermissions/u1"
        assert resolver.get_user_permissions("u1").roles == {Role.ADMIN}
