"""User permission API resources."""

from dataclasses import asdict

import falcon
import falcon.asgi

from rolegate.application.dto.user_permissions_dto import (
    UserPermissionsInput,
    UserPermissionsOutput,
)
from rolegate.application.guards import require_permission
from rolegate.application.use_cases.user.register_user_permissions import (
    ClearUserPermissionsUseCase,
    RegisterUserPermissionsUseCase,
)
from rolegate.domain.catalog.permissions import is_valid_permission
from rolegate.domain.value_objects import Permission
from rolegate.infrastructure.permission.permission_resolver import PermissionResolver
from rolegate.interfaces.api.middleware.guard import guard_hook

_can_manage_users = require_permission(Permission.SYSTEM_USERS)


def record_media(resolver: PermissionResolver, record) -> dict:
    """Serialize a record together with its effective permissions."""
    return asdict(
        UserPermissionsOutput.from_record(record, resolver.get_all_permissions(record))
    )


def _may_read(req: falcon.asgi.Request, user_id: str) -> bool:
    """Users may read their own record; reading others needs system:users."""
    user = req.context.user
    return user.user_id == user_id or _can_manage_users(req.context.permissions)


class MePermissionsResource:
    """GET /v1/me/permissions - the caller's roles and effective permissions."""

    def __init__(self, resolver: PermissionResolver) -> None:
        self._resolver = resolver

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        record = req.context.permissions
        if record is None:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "No permissions registered"}
            return

        resp.media = record_media(self._resolver, record)
        resp.status = falcon.HTTP_200


class UserPermissionsResource:
    """GET/PUT/DELETE /v1/users/{user_id}/permissions - read, register, clear."""

    def __init__(
        self,
        resolver: PermissionResolver,
        register_permissions: RegisterUserPermissionsUseCase,
        clear_permissions: ClearUserPermissionsUseCase,
    ) -> None:
        self._resolver = resolver
        self._register = register_permissions
        self._clear = clear_permissions

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        """Return the cached record for user_id."""
        if not getattr(req.context, "user", None):
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return
        if not _may_read(req, user_id):
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        record = self._resolver.get_user_permissions(user_id)
        if record is None:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "No permissions registered"}
            return

        resp.media = record_media(self._resolver, record)
        resp.status = falcon.HTTP_200

    @falcon.before(guard_hook(_can_manage_users))
    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        """Register (or replace) the record for user_id."""
        body = await req.get_media()
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Body must be a JSON object"}
            return

        data = UserPermissionsInput(
            user_id=user_id,
            roles=body.get("roles", []),
            custom_permissions=body.get("custom_permissions", []),
            denied_permissions=body.get("denied_permissions", []),
        )
        record = self._register.execute(req.context.user.user_id, data.to_record())
        resp.media = record_media(self._resolver, record)
        resp.status = falcon.HTTP_200

    @falcon.before(guard_hook(_can_manage_users))
    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        """Drop the cached record for user_id."""
        self._clear.execute(req.context.user.user_id, user_id)
        resp.status = falcon.HTTP_204


class PermissionCheckResource:
    """GET /v1/users/{user_id}/check?permission=... - single permission check."""

    def __init__(self, resolver: PermissionResolver) -> None:
        self._resolver = resolver

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        if not getattr(req.context, "user", None):
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return
        if not _may_read(req, user_id):
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        permission = req.get_param("permission")
        if not permission:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Missing required parameter: permission"}
            return

        # Unknown permissions are never held.
        allowed = is_valid_permission(permission) and self._resolver.check_permission(
            user_id, Permission(permission)
        )
        resp.media = {"user_id": user_id, "permission": permission, "allowed": allowed}
        resp.status = falcon.HTTP_200
