"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi

from rolegate.application.use_cases.permission.deny_permission import DenyPermissionUseCase
from rolegate.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from rolegate.application.use_cases.permission.revoke_permission import (
    RevokePermissionUseCase,
)
from rolegate.application.use_cases.role.assign_role import AssignRoleUseCase
from rolegate.application.use_cases.role.remove_role import RemoveRoleUseCase
from rolegate.application.use_cases.user.register_user_permissions import (
    ClearUserPermissionsUseCase,
    RegisterUserPermissionsUseCase,
)
from rolegate.domain.exceptions import Conflict, NotFound, PermissionDenied, ValidationError
from rolegate.infrastructure.permission.permission_resolver import PermissionResolver
from rolegate.interfaces.api.middleware.auth import AuthMiddleware
from rolegate.interfaces.api.resources.catalog import (
    PermissionCatalogResource,
    RoleCatalogResource,
)
from rolegate.interfaces.api.resources.health import HealthResource
from rolegate.interfaces.api.resources.overrides import (
    DenialsResource,
    GrantResource,
    GrantsResource,
)
from rolegate.interfaces.api.resources.roles import UserRoleResource, UserRolesResource
from rolegate.interfaces.api.resources.users import (
    MePermissionsResource,
    PermissionCheckResource,
    UserPermissionsResource,
)

logger = logging.getLogger(__name__)


async def _permission_denied(req, resp, ex, params):
    resp.status = falcon.HTTP_403
    resp.media = {"error": str(ex) or "Permission denied"}


async def _not_found(req, resp, ex, params):
    resp.status = falcon.HTTP_404
    resp.media = {"error": "Not found: " + "/".join(str(a) for a in ex.args)}


async def _conflict(req, resp, ex, params):
    resp.status = falcon.HTTP_409
    resp.media = {"error": "Modified concurrently: " + "/".join(str(a) for a in ex.args)}


async def _validation_error(req, resp, ex, params):
    resp.status = falcon.HTTP_400
    resp.media = {"error": str(ex)}


async def _log_exception(req, resp, ex, params):
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(resolver: PermissionResolver, user_header: str = "X-User-Id") -> falcon.asgi.App:
    """Build the Falcon app around an existing resolver."""
    register_permissions = RegisterUserPermissionsUseCase(resolver)
    clear_permissions = ClearUserPermissionsUseCase(resolver)
    assign_role = AssignRoleUseCase(resolver)
    remove_role = RemoveRoleUseCase(resolver)
    grant = GrantPermissionUseCase(resolver)
    revoke = RevokePermissionUseCase(resolver)
    deny = DenyPermissionUseCase(resolver)

    health_resource = HealthResource(resolver)

    app = falcon.asgi.App(middleware=[AuthMiddleware(resolver, user_header)])
    app.add_error_handler(Exception, _log_exception)
    app.add_error_handler(PermissionDenied, _permission_denied)
    app.add_error_handler(NotFound, _not_found)
    app.add_error_handler(ValidationError, _validation_error)
    app.add_error_handler(Conflict, _conflict)

    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/catalog/permissions", PermissionCatalogResource())
    app.add_route("/v1/catalog/roles", RoleCatalogResource())
    app.add_route("/v1/me/permissions", MePermissionsResource(resolver))
    app.add_route(
        "/v1/users/{user_id}/permissions",
        UserPermissionsResource(resolver, register_permissions, clear_permissions),
    )
    app.add_route("/v1/users/{user_id}/check", PermissionCheckResource(resolver))
    app.add_route("/v1/users/{user_id}/roles", UserRolesResource(resolver, assign_role))
    app.add_route("/v1/users/{user_id}/roles/{role}", UserRoleResource(resolver, remove_role))
    app.add_route("/v1/users/{user_id}/grants", GrantsResource(resolver, grant))
    app.add_route("/v1/users/{user_id}/grants/{permission}", GrantResource(resolver, revoke))
    app.add_route("/v1/users/{user_id}/denials", DenialsResource(resolver, deny))
    return app
