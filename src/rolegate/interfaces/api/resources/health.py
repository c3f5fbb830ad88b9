"""Health check endpoints."""

import falcon.asgi

from rolegate.infrastructure.permission.permission_resolver import PermissionResolver


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, resolver: PermissionResolver) -> None:
        self._resolver = resolver

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness, with the number of cached records."""
        resp.media = {"status": "ready", "cached_users": len(self._resolver)}
        resp.status = falcon.HTTP_200
