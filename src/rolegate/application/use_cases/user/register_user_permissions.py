"""Register and clear user permission records."""

import logging

from rolegate.application.ports import PermissionStore
from rolegate.application.use_cases.authorization import (
    assignable_roles,
    require_actor,
    require_outranks,
    require_subject,
)
from rolegate.domain import evaluation
from rolegate.domain.entities import UserPermissionRecord
from rolegate.domain.exceptions import Conflict, PermissionDenied
from rolegate.domain.value_objects import Permission

logger = logging.getLogger(__name__)


class RegisterUserPermissionsUseCase:
    """Store a user's record, replacing any existing one."""

    def __init__(self, permission_store: PermissionStore) -> None:
        self._store = permission_store

    def execute(self, actor_id: str, record: UserPermissionRecord) -> UserPermissionRecord:
        """Actor needs system:users.

        The actor may only hand out roles below its own and custom
        permissions it holds itself.
        """
        actor = require_actor(self._store, actor_id, Permission.SYSTEM_USERS)
        out_of_reach = record.roles - assignable_roles(actor)
        if out_of_reach:
            names = ", ".join(sorted(out_of_reach))
            logger.warning("User %s may not assign roles: %s", actor_id, names)
            raise PermissionDenied(f"Cannot assign roles: {names}")

        not_held = record.custom_permissions - evaluation.get_all_permissions(actor)
        if not_held:
            names = ", ".join(sorted(not_held))
            logger.warning("User %s may not grant permissions: %s", actor_id, names)
            raise PermissionDenied(f"Cannot grant permissions without holding them: {names}")

        existing = self._store.get_user_permissions(record.user_id)
        if existing is not None:
            require_outranks(actor, existing)

        if not self._store.replace_user_permissions(record, expected=existing):
            raise Conflict("UserPermissions", record.user_id)
        logger.info("User %s registered permissions for %s", actor_id, record.user_id)
        return record


class ClearUserPermissionsUseCase:
    """Drop a user's record from the cache."""

    def __init__(self, permission_store: PermissionStore) -> None:
        self._store = permission_store

    def execute(self, actor_id: str, subject_id: str) -> None:
        actor = require_actor(self._store, actor_id, Permission.SYSTEM_USERS)
        subject = require_subject(self._store, subject_id)
        require_outranks(actor, subject)
        if not self._store.clear_user_permissions(subject_id, expected=subject):
            raise Conflict("UserPermissions", subject_id)
