"""Per-user grant and denial API resources."""

import falcon
import falcon.asgi

from rolegate.application.guards import require_permission
from rolegate.application.use_cases.permission.deny_permission import DenyPermissionUseCase
from rolegate.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from rolegate.application.use_cases.permission.revoke_permission import (
    RevokePermissionUseCase,
)
from rolegate.domain.catalog.permissions import parse_permission
from rolegate.domain.value_objects import Permission
from rolegate.infrastructure.permission.permission_resolver import PermissionResolver
from rolegate.interfaces.api.middleware.guard import guard_hook
from rolegate.interfaces.api.resources.users import record_media

_can_manage_roles = guard_hook(require_permission(Permission.SYSTEM_ROLES))


async def _permission_from_body(req: falcon.asgi.Request) -> str | None:
    body = await req.get_media()
    if not isinstance(body, dict):
        return None
    return body.get("permission")


class GrantsResource:
    """POST /v1/users/{user_id}/grants - grant a custom permission."""

    def __init__(self, resolver: PermissionResolver, grant: GrantPermissionUseCase) -> None:
        self._resolver = resolver
        self._grant = grant

    @falcon.before(_can_manage_roles)
    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        permission = await _permission_from_body(req)
        if permission is None:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Missing required field: permission"}
            return

        record = self._grant.execute(
            req.context.user.user_id, user_id, parse_permission(permission)
        )
        resp.media = record_media(self._resolver, record)
        resp.status = falcon.HTTP_200


class GrantResource:
    """DELETE /v1/users/{user_id}/grants/{permission} - revoke a custom grant."""

    def __init__(self, resolver: PermissionResolver, revoke: RevokePermissionUseCase) -> None:
        self._resolver = resolver
        self._revoke = revoke

    @falcon.before(_can_manage_roles)
    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
        permission: str,
    ) -> None:
        record = self._revoke.execute(
            req.context.user.user_id, user_id, parse_permission(permission)
        )
        resp.media = record_media(self._resolver, record)
        resp.status = falcon.HTTP_200


class DenialsResource:
    """POST /v1/users/{user_id}/denials - deny a permission."""

    def __init__(self, resolver: PermissionResolver, deny: DenyPermissionUseCase) -> None:
        self._resolver = resolver
        self._deny = deny

    @falcon.before(_can_manage_roles)
    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        permission = await _permission_from_body(req)
        if permission is None:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Missing required field: permission"}
            return

        record = self._deny.execute(
            req.context.user.user_id, user_id, parse_permission(permission)
        )
        resp.media = record_media(self._resolver, record)
        resp.status = falcon.HTTP_200
