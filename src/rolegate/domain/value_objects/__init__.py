"""Domain value objects."""

from rolegate.domain.value_objects.permission import Permission
from rolegate.domain.value_objects.role import Role

__all__ = [
    "Permission",
    "Role",
]
