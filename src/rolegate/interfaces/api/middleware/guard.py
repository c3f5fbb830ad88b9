"""Falcon hooks that apply guard predicates to responders."""

import falcon

from rolegate.application.guards import Guard


def guard_hook(guard: Guard):
    """Build a `falcon.before` hook rejecting requests the guard does not pass.

    Usage:
        @falcon.before(guard_hook(require_permission(Permission.SYSTEM_USERS)))
        async def on_put(self, req, resp, user_id): ...
    """

    async def hook(req, resp, resource, params) -> None:
        if getattr(req.context, "user", None) is None:
            raise falcon.HTTPUnauthorized(title="Unauthorized")
        if not guard(getattr(req.context, "permissions", None)):
            raise falcon.HTTPForbidden(title="Permission denied")

    return hook
