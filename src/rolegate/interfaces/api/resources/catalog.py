"""Catalog API resources - read-only views of permissions and roles."""

import falcon.asgi

from rolegate.domain.catalog.permissions import (
    PERMISSION_GROUPS,
    get_permission_description,
    get_permission_name,
)
from rolegate.domain.catalog.roles import (
    DEFAULT_ROLE,
    PAID_ROLES,
    PUBLIC_ROLES,
    ROLE_DEFINITIONS,
)
from rolegate.domain.value_objects import Permission


class PermissionCatalogResource:
    """GET /v1/catalog/permissions - every permission and the named groups."""

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = {
            "items": [
                {
                    "permission": str(p),
                    "name": get_permission_name(p),
                    "description": get_permission_description(p),
                }
                for p in Permission
            ],
            "groups": {
                name: sorted(str(p) for p in perms)
                for name, perms in PERMISSION_GROUPS.items()
            },
        }
        resp.status = falcon.HTTP_200


class RoleCatalogResource:
    """GET /v1/catalog/roles - roles ordered from most to least privileged."""

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        definitions = sorted(
            ROLE_DEFINITIONS.values(), key=lambda d: (-d.level, d.role.value)
        )
        resp.media = {
            "items": [
                {
                    "role": str(d.role),
                    "name": d.name,
                    "description": d.description,
                    "level": d.level,
                    "permissions": sorted(str(p) for p in d.permissions),
                    "public": d.role in PUBLIC_ROLES,
                    "paid": d.role in PAID_ROLES,
                }
                for d in definitions
            ],
            "default_role": str(DEFAULT_ROLE),
        }
        resp.status = falcon.HTTP_200
