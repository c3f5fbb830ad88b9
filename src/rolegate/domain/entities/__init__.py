"""Domain entities."""

from rolegate.domain.entities.role_definition import RoleDefinition
from rolegate.domain.entities.user_permission_record import UserPermissionRecord

__all__ = [
    "RoleDefinition",
    "UserPermissionRecord",
]
