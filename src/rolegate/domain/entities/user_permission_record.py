"""User permission record - the unit of the resolver cache."""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from rolegate.domain.value_objects import Permission, Role


@dataclass(frozen=True)
class UserPermissionRecord:
    """Roles plus per-user grant and denial overrides for one user.

    Records are immutable; mutations produce a new record so concurrent
    readers always observe a complete snapshot. A permission never sits in
    both custom_permissions and denied_permissions.
    """

    user_id: str
    roles: frozenset[Role] = field(default_factory=frozenset)
    custom_permissions: frozenset[Permission] = field(default_factory=frozenset)
    denied_permissions: frozenset[Permission] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not isinstance(self.user_id, str) or not self.user_id:
            raise TypeError("user_id must be a non-empty string")
        # Accept any iterable of members, store as frozensets.
        object.__setattr__(self, "roles", _freeze(self.roles, Role, "roles"))
        object.__setattr__(
            self,
            "custom_permissions",
            _freeze(self.custom_permissions, Permission, "custom_permissions"),
        )
        object.__setattr__(
            self,
            "denied_permissions",
            _freeze(self.denied_permissions, Permission, "denied_permissions"),
        )
        overlap = self.custom_permissions & self.denied_permissions
        if overlap:
            # Denial wins; keep the invariant on records built from raw data.
            object.__setattr__(
                self, "custom_permissions", self.custom_permissions - overlap
            )

    def with_grant(self, permission: Permission) -> "UserPermissionRecord":
        return replace(
            self,
            custom_permissions=self.custom_permissions | {permission},
            denied_permissions=self.denied_permissions - {permission},
        )

    def with_revoke(self, permission: Permission) -> "UserPermissionRecord":
        return replace(self, custom_permissions=self.custom_permissions - {permission})

    def with_denial(self, permission: Permission) -> "UserPermissionRecord":
        return replace(
            self,
            custom_permissions=self.custom_permissions - {permission},
            denied_permissions=self.denied_permissions | {permission},
        )

    def with_role(self, role: Role) -> "UserPermissionRecord":
        return replace(self, roles=self.roles | {role})

    def without_role(self, role: Role) -> "UserPermissionRecord":
        return replace(self, roles=self.roles - {role})


def _freeze(values: Iterable, kind: type, field_name: str) -> frozenset:
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise TypeError(f"{field_name} must be a set of {kind.__name__}")
    frozen = frozenset(values)
    for value in frozen:
        if not isinstance(value, kind):
            raise TypeError(f"{field_name} must contain only {kind.__name__} values")
    return frozen
