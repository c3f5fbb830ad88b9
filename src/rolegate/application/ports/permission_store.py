"""Permission store port - cached RBAC records and their mutations."""

from typing import Protocol

from rolegate.domain.entities import UserPermissionRecord
from rolegate.domain.value_objects import Permission, Role


class PermissionStore(Protocol):
    """Port for reading and mutating per-user permission records.

    Conditional writes take the snapshot the caller checked as `expected` and
    return False without changing anything if the record has moved on.
    """

    def set_user_permissions(self, record: UserPermissionRecord) -> None: ...

    def replace_user_permissions(
        self, record: UserPermissionRecord, expected: UserPermissionRecord | None
    ) -> bool: ...

    def get_user_permissions(self, user_id: str) -> UserPermissionRecord | None: ...

    def clear_user_permissions(
        self, user_id: str, *, expected: UserPermissionRecord | None = None
    ) -> bool: ...

    def grant_permission(
        self, user_id: str, permission: Permission, *, expected: UserPermissionRecord | None = None
    ) -> bool: ...

    def revoke_permission(
        self, user_id: str, permission: Permission, *, expected: UserPermissionRecord | None = None
    ) -> bool: ...

    def deny_permission(
        self, user_id: str, permission: Permission, *, expected: UserPermissionRecord | None = None
    ) -> bool: ...

    def add_role(
        self, user_id: str, role: Role, *, expected: UserPermissionRecord | None = None
    ) -> bool: ...

    def remove_role(
        self, user_id: str, role: Role, *, expected: UserPermissionRecord | None = None
    ) -> bool: ...
