"""Role definition entity for RBAC."""

from dataclasses import dataclass

from rolegate.domain.value_objects import Permission, Role


@dataclass(frozen=True)
class RoleDefinition:
    """Role - permission set, privilege level and display text."""

    role: Role
    permissions: frozenset[Permission]
    level: int
    name: str
    description: str

    def __post_init__(self) -> None:
        if self.level < 0:
            raise ValueError("Role level must be non-negative")
