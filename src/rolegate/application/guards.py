"""Guard builders - reusable predicates gating protected operations.

Each builder closes over one static requirement and returns a predicate over
an optional UserPermissionRecord. An absent record always fails: callers that
are not authenticated, or not in the cache, are never let through.
"""

from collections.abc import Callable

from rolegate.domain import evaluation
from rolegate.domain.entities import UserPermissionRecord
from rolegate.domain.value_objects import Permission, Role

Guard = Callable[[UserPermissionRecord | None], bool]


def require_permission(permission: Permission) -> Guard:
    def guard(record: UserPermissionRecord | None) -> bool:
        if record is None:
            return False
        return evaluation.has_permission(record, permission)

    return guard


def require_role(role: Role) -> Guard:
    def guard(record: UserPermissionRecord | None) -> bool:
        if record is None:
            return False
        return evaluation.has_role(record, role)

    return guard


def require_all_permissions(*permissions: Permission) -> Guard:
    """AND: every listed permission must be held."""
    required = frozenset(permissions)

    def guard(record: UserPermissionRecord | None) -> bool:
        if record is None:
            return False
        return evaluation.has_all_permissions(record, required)

    return guard


def require_any_permission(*permissions: Permission) -> Guard:
    """OR: at least one listed permission must be held."""
    required = frozenset(permissions)

    def guard(record: UserPermissionRecord | None) -> bool:
        if record is None:
            return False
        return evaluation.has_any_permission(record, required)

    return guard


def require_higher_or_equal_role(role: Role) -> Guard:
    def guard(record: UserPermissionRecord | None) -> bool:
        if record is None:
            return False
        return evaluation.has_higher_or_equal_role(record, role)

    return guard


def all_of(*guards: Guard) -> Guard:
    def guard(record: UserPermissionRecord | None) -> bool:
        return record is not None and all(g(record) for g in guards)

    return guard


def any_of(*guards: Guard) -> Guard:
    def guard(record: UserPermissionRecord | None) -> bool:
        return record is not None and any(g(record) for g in guards)

    return guard
