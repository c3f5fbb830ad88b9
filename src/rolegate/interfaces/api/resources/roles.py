"""User role API resources."""

import falcon
import falcon.asgi

from rolegate.application.guards import require_permission
from rolegate.application.use_cases.role.assign_role import AssignRoleUseCase
from rolegate.application.use_cases.role.remove_role import RemoveRoleUseCase
from rolegate.domain.catalog.roles import parse_role
from rolegate.domain.value_objects import Permission
from rolegate.infrastructure.permission.permission_resolver import PermissionResolver
from rolegate.interfaces.api.middleware.guard import guard_hook
from rolegate.interfaces.api.resources.users import record_media

_can_manage_roles = guard_hook(require_permission(Permission.SYSTEM_ROLES))


class UserRolesResource:
    """POST /v1/users/{user_id}/roles - assign a role."""

    def __init__(self, resolver: PermissionResolver, assign_role: AssignRoleUseCase) -> None:
        self._resolver = resolver
        self._assign = assign_role

    @falcon.before(_can_manage_roles)
    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        body = await req.get_media()
        if not isinstance(body, dict) or "role" not in body:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Missing required field: role"}
            return

        record = self._assign.execute(
            req.context.user.user_id, user_id, parse_role(body["role"])
        )
        resp.media = record_media(self._resolver, record)
        resp.status = falcon.HTTP_200


class UserRoleResource:
    """DELETE /v1/users/{user_id}/roles/{role} - remove a role."""

    def __init__(self, resolver: PermissionResolver, remove_role: RemoveRoleUseCase) -> None:
        self._resolver = resolver
        self._remove = remove_role

    @falcon.before(_can_manage_roles)
    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str, role: str
    ) -> None:
        record = self._remove.execute(req.context.user.user_id, user_id, parse_role(role))
        resp.media = record_media(self._resolver, record)
        resp.status = falcon.HTTP_200
