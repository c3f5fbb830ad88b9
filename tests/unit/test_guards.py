"""Unit tests for guard builders."""

import pytest

from rolegate.application.guards import (
    all_of,
    any_of,
    require_all_permissions,
    require_any_permission,
    require_higher_or_equal_role,
    require_permission,
    require_role,
)
from rolegate.domain.value_objects import Permission, Role

from tests.conftest import make_record

_ALL_GUARDS = [
    require_permission(Permission.TASK_VIEW),
    require_role(Role.GUEST),
    require_all_permissions(),
    require_all_permissions(Permission.TASK_VIEW),
    require_any_permission(Permission.TASK_VIEW, Permission.AUDIT_VIEW),
    require_higher_or_equal_role(Role.GUEST),
    all_of(),
    any_of(require_role(Role.GUEST)),
]


@pytest.mark.parametrize("guard", _ALL_GUARDS)
def test_absent_record_fails_closed(guard) -> None:
    assert guard(None) is False


def test_require_permission() -> None:
    guard = require_permission(Permission.TASK_CREATE)
    assert guard(make_record(roles={Role.USER})) is True
    assert guard(make_record(roles={Role.GUEST})) is False
    assert guard(make_record(roles={Role.USER}, denied={Permission.TASK_CREATE})) is False


def test_require_role() -> None:
    guard = require_role(Role.APPROVER)
    assert guard(make_record(roles={Role.USER, Role.APPROVER})) is True
    # Role checks are membership, not hierarchy.
    assert guard(make_record(roles={Role.SUPER_ADMIN})) is False


def test_require_all_permissions() -> None:
    guard = require_all_permissions(Permission.TASK_VIEW, Permission.TASK_SHARE)
    assert guard(make_record(roles={Role.PREMIUM_USER})) is True
    assert guard(make_record(roles={Role.USER})) is False


def test_require_any_permission() -> None:
    guard = require_any_permission(Permission.AUDIT_VIEW, Permission.TASK_VIEW)
    assert guard(make_record(roles={Role.GUEST})) is True
    assert guard(make_record(roles=set())) is False
    assert require_any_permission()(make_record(roles={Role.SUPER_ADMIN})) is False


def test_require_higher_or_equal_role() -> None:
    guard = require_higher_or_equal_role(Role.CREATOR)
    assert guard(make_record(roles={Role.ADMIN})) is True
    assert guard(make_record(roles={Role.CREATOR})) is True
    assert guard(make_record(roles={Role.PREMIUM_USER})) is False
    assert guard(make_record(roles=set())) is False


def test_combinators() -> None:
    creator_or_approver = any_of(require_role(Role.CREATOR), require_role(Role.APPROVER))
    can_publish = all_of(
        require_permission(Permission.SKILL_PUBLISH),
        require_permission(Permission.STORE_ANALYTICS),
    )
    creator = make_record(roles={Role.CREATOR})
    approver = make_record(roles={Role.APPROVER})
    assert creator_or_approver(creator) and creator_or_approver(approver)
    assert can_publish(creator) is True
    assert can_publish(approver) is False


def test_guard_reflects_latest_snapshot(resolver) -> None:
    guard = require_permission(Permission.TASK_VIEW)
    resolver.set_user_permissions(make_record("u1", roles={Role.USER}))
    assert guard(resolver.get_user_permissions("u1")) is True
    resolver.deny_permission("u1", Permission.TASK_VIEW)
    assert guard(resolver.get_user_permissions("u1")) is False
    assert guard(resolver.get_user_permissions("ghost")) is False
