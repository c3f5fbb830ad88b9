"""Application entry point and composition root."""

import logging

from rolegate import __version__
from rolegate.config import Settings, get_settings
from rolegate.domain.catalog.roles import ROLE_DEFINITIONS
from rolegate.domain.entities import UserPermissionRecord
from rolegate.domain.value_objects import Role
from rolegate.infrastructure.permission.permission_resolver import PermissionResolver
from rolegate.interfaces.api.app import create_app
from rolegate.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point."""
    print(f"RoleGate v{__version__}")


def create_resolver(settings: Settings) -> PermissionResolver:
    """Build the resolver and seed the bootstrap administrator, if configured."""
    resolver = PermissionResolver(lock_stripes=settings.lock_stripes)
    if settings.bootstrap_admin_id:
        resolver.set_user_permissions(
            UserPermissionRecord(
                user_id=settings.bootstrap_admin_id,
                roles=frozenset({Role.SUPER_ADMIN}),
            )
        )
        logger.info("Registered bootstrap admin %s", settings.bootstrap_admin_id)
    return resolver


def create_rolegate_app(settings: Settings | None = None):
    """Composition root - build the Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.debug)
    resolver = create_resolver(settings)
    logger.info(
        "RoleGate v%s starting (%s, %d roles)",
        __version__,
        settings.environment,
        len(ROLE_DEFINITIONS),
    )
    return create_app(resolver, user_header=settings.user_header)


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    app = create_rolegate_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
