"""User permission DTOs."""

from dataclasses import dataclass, field

from rolegate.domain.catalog.permissions import parse_permission
from rolegate.domain.catalog.roles import parse_role
from rolegate.domain.entities import UserPermissionRecord
from rolegate.domain.exceptions import ValidationError


@dataclass
class UserPermissionsInput:
    """Raw record fields as received from a caller."""

    user_id: str
    roles: list[str] = field(default_factory=list)
    custom_permissions: list[str] = field(default_factory=list)
    denied_permissions: list[str] = field(default_factory=list)

    def to_record(self) -> UserPermissionRecord:
        """Validate every identifier against the catalogs and build the record."""
        for name in ("roles", "custom_permissions", "denied_permissions"):
            if not isinstance(getattr(self, name), list):
                raise ValidationError(f"{name} must be a list")
        return UserPermissionRecord(
            user_id=self.user_id,
            roles=frozenset(parse_role(r) for r in self.roles),
            custom_permissions=frozenset(parse_permission(p) for p in self.custom_permissions),
            denied_permissions=frozenset(parse_permission(p) for p in self.denied_permissions),
        )


@dataclass
class UserPermissionsOutput:
    """Output DTO for a cached record and its effective permissions."""

    user_id: str
    roles: list[str]
    custom_permissions: list[str]
    denied_permissions: list[str]
    effective_permissions: list[str]

    @classmethod
    def from_record(
        cls, record: UserPermissionRecord, effective: frozenset
    ) -> "UserPermissionsOutput":
        return cls(
            user_id=record.user_id,
            roles=sorted(str(r) for r in record.roles),
            custom_permissions=sorted(str(p) for p in record.custom_permissions),
            denied_permissions=sorted(str(p) for p in record.denied_permissions),
            effective_permissions=sorted(str(p) for p in effective),
        )
