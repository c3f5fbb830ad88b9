"""Grant permission use case."""

import logging

from rolegate.application.ports import PermissionStore
from rolegate.application.use_cases.authorization import (
    require_actor,
    require_outranks,
    require_subject,
)
from rolegate.domain import evaluation
from rolegate.domain.entities import UserPermissionRecord
from rolegate.domain.exceptions import Conflict, NotFound, PermissionDenied
from rolegate.domain.value_objects import Permission

logger = logging.getLogger(__name__)


class GrantPermissionUseCase:
    """Grant a custom permission to a user, lifting any denial of it."""

    def __init__(self, permission_store: PermissionStore) -> None:
        self._store = permission_store

    def execute(
        self, actor_id: str, subject_id: str, permission: Permission
    ) -> UserPermissionRecord:
        """Actor needs system:roles and must hold the permission it hands out."""
        actor = require_actor(self._store, actor_id, Permission.SYSTEM_ROLES)
        if not evaluation.has_permission(actor, permission):
            logger.warning("User %s may not grant %s without holding it", actor_id, permission)
            raise PermissionDenied(f"Cannot grant {permission} without holding it")
        subject = require_subject(self._store, subject_id)
        require_outranks(actor, subject)

        if not self._store.grant_permission(subject_id, permission, expected=subject):
            raise Conflict("UserPermissions", subject_id)
        updated = self._store.get_user_permissions(subject_id)
        if updated is None:
            raise NotFound("UserPermissions", subject_id)
        return updated
