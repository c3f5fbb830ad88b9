"""Deny permission use case."""

from rolegate.application.ports import PermissionStore
from rolegate.application.use_cases.authorization import (
    require_actor,
    require_outranks,
    require_subject,
)
from rolegate.domain.entities import UserPermissionRecord
from rolegate.domain.exceptions import Conflict, NotFound
from rolegate.domain.value_objects import Permission


class DenyPermissionUseCase:
    """Explicitly deny a permission, overriding role and custom grants."""

    def __init__(self, permission_store: PermissionStore) -> None:
        self._store = permission_store

    def execute(
        self, actor_id: str, subject_id: str, permission: Permission
    ) -> UserPermissionRecord:
        actor = require_actor(self._store, actor_id, Permission.SYSTEM_ROLES)
        subject = require_subject(self._store, subject_id)
        require_outranks(actor, subject)

        if not self._store.deny_permission(subject_id, permission, expected=subject):
            raise Conflict("UserPermissions", subject_id)
        updated = self._store.get_user_permissions(subject_id)
        if updated is None:
            raise NotFound("UserPermissions", subject_id)
        return updated
