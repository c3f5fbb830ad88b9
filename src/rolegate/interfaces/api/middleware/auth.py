"""Auth middleware - reads the gateway-authenticated user and their cached record."""

from dataclasses import dataclass

import falcon.asgi

from rolegate.application.ports import PermissionStore


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str


class AuthMiddleware:
    """Sets req.context.user and req.context.permissions for every request.

    Authentication happens upstream; the gateway forwards the user id in a
    header. A missing header leaves both context values as None.
    """

    def __init__(self, permission_store: PermissionStore, user_header: str = "X-User-Id") -> None:
        self._store = permission_store
        self._user_header = user_header

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        user_id = (req.get_header(self._user_header) or "").strip()
        if not user_id:
            req.context.user = None
            req.context.permissions = None
            return
        req.context.user = RequestUser(user_id=user_id)
        req.context.permissions = self._store.get_user_permissions(user_id)
