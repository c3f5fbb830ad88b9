"""Pytest fixtures for RoleGate tests."""

from __future__ import annotations

import pytest

from rolegate.domain.entities import UserPermissionRecord
from rolegate.domain.value_objects import Permission, Role
from rolegate.infrastructure.permission.permission_resolver import PermissionResolver


def make_record(
    user_id: str = "u1",
    roles: set[Role] | None = None,
    custom: set[Permission] | None = None,
    denied: set[Permission] | None = None,
) -> UserPermissionRecord:
    """Build a record with sensible defaults."""
    return UserPermissionRecord(
        user_id=user_id,
        roles=frozenset(roles if roles is not None else {Role.USER}),
        custom_permissions=frozenset(custom or ()),
        denied_permissions=frozenset(denied or ()),
    )


# --- Fixtures ---


@pytest.fixture
def resolver() -> PermissionResolver:
    """Empty resolver for each test."""
    return PermissionResolver(lock_stripes=8)


@pytest.fixture
def seeded_resolver(resolver: PermissionResolver) -> PermissionResolver:
    """Resolver with a super admin, an admin, a creator and two plain users."""
    resolver.set_user_permissions(make_record("root", {Role.SUPER_ADMIN}))
    resolver.set_user_permissions(make_record("admin-1", {Role.ADMIN}))
    resolver.set_user_permissions(make_record("creator-1", {Role.CREATOR}))
    resolver.set_user_permissions(make_record("u1", {Role.USER}))
    resolver.set_user_permissions(make_record("u2", {Role.USER}))
    return resolver


@pytest.fixture
def mock_permission_store():
    """MagicMock standing in for the PermissionStore port."""
    from unittest.mock import MagicMock

    mock = MagicMock()
    mock.get_user_permissions.return_value = None
    return mock
