"""Permission evaluation over a single UserPermissionRecord.

get_all_permissions is the only place precedence is decided: role grants and
custom grants are unioned, then denials are subtracted. Every permission
check is a predicate over its result.
"""

from collections.abc import Iterable

from rolegate.domain.catalog.roles import LOWEST_LEVEL, get_role_level, get_role_permissions
from rolegate.domain.entities import UserPermissionRecord
from rolegate.domain.value_objects import Permission, Role


def get_all_permissions(record: UserPermissionRecord) -> frozenset[Permission]:
    """Effective permissions: (role grants ∪ custom grants) − denials."""
    granted: set[Permission] = set()
    for role in record.roles:
        granted |= get_role_permissions(role)
    granted |= record.custom_permissions
    return frozenset(granted - record.denied_permissions)


def has_permission(record: UserPermissionRecord, permission: Permission) -> bool:
    return permission in get_all_permissions(record)


def has_all_permissions(
    record: UserPermissionRecord, permissions: Iterable[Permission]
) -> bool:
    effective = get_all_permissions(record)
    return all(p in effective for p in permissions)


def has_any_permission(
    record: UserPermissionRecord, permissions: Iterable[Permission]
) -> bool:
    effective = get_all_permissions(record)
    return any(p in effective for p in permissions)


def has_role(record: UserPermissionRecord, role: Role) -> bool:
    return role in record.roles


def has_all_roles(record: UserPermissionRecord, roles: Iterable[Role]) -> bool:
    return all(r in record.roles for r in roles)


def has_any_role(record: UserPermissionRecord, roles: Iterable[Role]) -> bool:
    return any(r in record.roles for r in roles)


def max_role_level(record: UserPermissionRecord) -> int:
    """Highest level among the record's roles; LOWEST_LEVEL with no roles."""
    return max((get_role_level(r) for r in record.roles), default=LOWEST_LEVEL)


def highest_role(record: UserPermissionRecord) -> Role | None:
    """Role with the highest level, or None for an empty role set.

    Ties are broken by role value so the result is deterministic.
    """
    if not record.roles:
        return None
    return max(record.roles, key=lambda r: (get_role_level(r), r.value))


def has_higher_role(record: UserPermissionRecord, target_role: Role) -> bool:
    return max_role_level(record) > get_role_level(target_role)


def has_higher_or_equal_role(record: UserPermissionRecord, target_role: Role) -> bool:
    if not record.roles:
        return False
    return max_role_level(record) >= get_role_level(target_role)
