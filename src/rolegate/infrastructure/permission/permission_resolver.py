"""In-memory permission resolver - caches UserPermissionRecords per user."""

import logging
import threading
from collections.abc import Callable, Iterable

from rolegate.domain import evaluation
from rolegate.domain.catalog.permissions import is_valid_permission
from rolegate.domain.catalog.roles import is_valid_role
from rolegate.domain.entities import UserPermissionRecord
from rolegate.domain.value_objects import Permission, Role

logger = logging.getLogger(__name__)

DEFAULT_LOCK_STRIPES = 64


class PermissionResolver:
    """Owns the record cache and answers permission queries.

    Records are immutable, so reads take no lock. Each mutation rebuilds the
    record under the lock stripe for its user_id and publishes it with one
    dict assignment. Mutations and clears on an unknown user are no-ops, as
    are mutations naming an unknown permission or role.
    """

    def __init__(self, lock_stripes: int = DEFAULT_LOCK_STRIPES) -> None:
        if lock_stripes < 1:
            raise ValueError("lock_stripes must be at least 1")
        self._records: dict[str, UserPermissionRecord] = {}
        self._locks = tuple(threading.Lock() for _ in range(lock_stripes))

    def __len__(self) -> int:
        return len(self._records)

    def _lock_for(self, user_id: str) -> threading.Lock:
        return self._locks[hash(user_id) % len(self._locks)]

    # ── Cache ───────────────────────────────────────────────

    def set_user_permissions(self, record: UserPermissionRecord) -> None:
        """Register or wholesale-replace the record for record.user_id."""
        if not isinstance(record, UserPermissionRecord):
            raise TypeError("record must be a UserPermissionRecord")
        with self._lock_for(record.user_id):
            self._records[record.user_id] = record
        logger.debug("Stored permissions for user %s", record.user_id)

    def replace_user_permissions(
        self, record: UserPermissionRecord, expected: UserPermissionRecord | None
    ) -> bool:
        """Store record only if the cached one is still expected (None: absent)."""
        if not isinstance(record, UserPermissionRecord):
            raise TypeError("record must be a UserPermissionRecord")
        with self._lock_for(record.user_id):
            if self._records.get(record.user_id) is not expected:
                logger.debug("Skipping store for user %s: record changed", record.user_id)
                return False
            self._records[record.user_id] = record
        logger.debug("Stored permissions for user %s", record.user_id)
        return True

    def get_user_permissions(self, user_id: str) -> UserPermissionRecord | None:
        """Cached record, or None when the user was never registered."""
        return self._records.get(user_id)

    def clear_user_permissions(
        self, user_id: str, *, expected: UserPermissionRecord | None = None
    ) -> bool:
        """Drop the record; with expected, only if it is still that snapshot."""
        with self._lock_for(user_id):
            current = self._records.get(user_id)
            if current is None or (expected is not None and current is not expected):
                return False
            del self._records[user_id]
        logger.info("Cleared permissions for user %s", user_id)
        return True

    def clear_all(self) -> None:
        # Stripes are always taken in index order, so this cannot deadlock
        # with a single-stripe mutation.
        for lock in self._locks:
            lock.acquire()
        try:
            count = len(self._records)
            self._records.clear()
        finally:
            for lock in reversed(self._locks):
                lock.release()
        logger.info("Cleared permission cache (%d records)", count)

    def cached_user_ids(self) -> list[str]:
        return list(self._records)

    # ── Record queries ──────────────────────────────────────

    def get_all_permissions(self, record: UserPermissionRecord) -> frozenset[Permission]:
        return evaluation.get_all_permissions(record)

    def has_permission(self, record: UserPermissionRecord, permission: Permission) -> bool:
        return evaluation.has_permission(record, permission)

    def has_all_permissions(
        self, record: UserPermissionRecord, permissions: Iterable[Permission]
    ) -> bool:
        return evaluation.has_all_permissions(record, permissions)

    def has_any_permission(
        self, record: UserPermissionRecord, permissions: Iterable[Permission]
    ) -> bool:
        return evaluation.has_any_permission(record, permissions)

    def has_role(self, record: UserPermissionRecord, role: Role) -> bool:
        return evaluation.has_role(record, role)

    def has_all_roles(self, record: UserPermissionRecord, roles: Iterable[Role]) -> bool:
        return evaluation.has_all_roles(record, roles)

    def has_any_role(self, record: UserPermissionRecord, roles: Iterable[Role]) -> bool:
        return evaluation.has_any_role(record, roles)

    def has_higher_role(self, record: UserPermissionRecord, target_role: Role) -> bool:
        return evaluation.has_higher_role(record, target_role)

    def has_higher_or_equal_role(
        self, record: UserPermissionRecord, target_role: Role
    ) -> bool:
        return evaluation.has_higher_or_equal_role(record, target_role)

    # ── Cached-user queries ─────────────────────────────────

    def check_permission(self, user_id: str, permission: Permission) -> bool:
        """has_permission against the cached record; False for unknown users."""
        record = self._records.get(user_id)
        return record is not None and evaluation.has_permission(record, permission)

    def check_all_permissions(self, user_id: str, permissions: Iterable[Permission]) -> bool:
        record = self._records.get(user_id)
        return record is not None and evaluation.has_all_permissions(record, permissions)

    def check_any_permission(self, user_id: str, permissions: Iterable[Permission]) -> bool:
        record = self._records.get(user_id)
        return record is not None and evaluation.has_any_permission(record, permissions)

    def check_role(self, user_id: str, role: Role) -> bool:
        record = self._records.get(user_id)
        return record is not None and evaluation.has_role(record, role)

    # ── Mutations ───────────────────────────────────────────
    #
    # Identifiers may be enum members or their string values. Unknown
    # identifiers and unknown users are no-ops. When `expected` is given the
    # change applies only if the cached record is still that exact snapshot.
    # Each mutation returns True if it replaced the record.

    def grant_permission(
        self,
        user_id: str,
        permission: Permission | str,
        *,
        expected: UserPermissionRecord | None = None,
    ) -> bool:
        """Add a custom grant and lift any denial of the same permission."""
        p = _as_permission(permission)
        if p is None:
            return _ignore_unknown("grant", permission, user_id)
        return self._update(user_id, lambda r: r.with_grant(p), "grant", p, expected)

    def revoke_permission(
        self,
        user_id: str,
        permission: Permission | str,
        *,
        expected: UserPermissionRecord | None = None,
    ) -> bool:
        """Drop a custom grant. Denials and role grants are untouched."""
        p = _as_permission(permission)
        if p is None:
            return _ignore_unknown("revoke", permission, user_id)
        return self._update(user_id, lambda r: r.with_revoke(p), "revoke", p, expected)

    def deny_permission(
        self,
        user_id: str,
        permission: Permission | str,
        *,
        expected: UserPermissionRecord | None = None,
    ) -> bool:
        """Deny a permission and drop any custom grant of it."""
        p = _as_permission(permission)
        if p is None:
            return _ignore_unknown("deny", permission, user_id)
        return self._update(user_id, lambda r: r.with_denial(p), "deny", p, expected)

    def add_role(
        self,
        user_id: str,
        role: Role | str,
        *,
        expected: UserPermissionRecord | None = None,
    ) -> bool:
        r = _as_role(role)
        if r is None:
            return _ignore_unknown("add_role", role, user_id)
        return self._update(user_id, lambda rec: rec.with_role(r), "add_role", r, expected)

    def remove_role(
        self,
        user_id: str,
        role: Role | str,
        *,
        expected: UserPermissionRecord | None = None,
    ) -> bool:
        r = _as_role(role)
        if r is None:
            return _ignore_unknown("remove_role", role, user_id)
        return self._update(user_id, lambda rec: rec.without_role(r), "remove_role", r, expected)

    def _update(
        self,
        user_id: str,
        change: Callable[[UserPermissionRecord], UserPermissionRecord],
        action: str,
        target: str,
        expected: UserPermissionRecord | None,
    ) -> bool:
        with self._lock_for(user_id):
            current = self._records.get(user_id)
            if current is None:
                logger.debug("Ignoring %s %s for unknown user %s", action, target, user_id)
                return False
            if expected is not None and current is not expected:
                logger.debug("Skipping %s %s for user %s: record changed", action, target, user_id)
                return False
            self._records[user_id] = change(current)
        logger.debug("Applied %s %s for user %s", action, target, user_id)
        return True


def _as_permission(value: object) -> Permission | None:
    return Permission(value) if is_valid_permission(value) else None


def _as_role(value: object) -> Role | None:
    return Role(value) if is_valid_role(value) else None


def _ignore_unknown(action: str, value: object, user_id: str) -> bool:
    logger.debug("Ignoring %s of unknown identifier %r for user %s", action, value, user_id)
    return False
