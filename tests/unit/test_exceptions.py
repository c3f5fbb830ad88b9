"""Unit tests for domain exceptions."""

import pytest

from rolegate.domain.exceptions import (
    Conflict,
    NotFound,
    PermissionDenied,
    RoleGateError,
    ValidationError,
)


def test_permission_denied_inherits_rolegate_error() -> None:
    """PermissionDenied is a subclass of RoleGateError."""
    assert issubclass(PermissionDenied, RoleGateError)


def test_not_found_inherits_rolegate_error() -> None:
    """NotFound is a subclass of RoleGateError."""
    assert issubclass(NotFound, RoleGateError)


def test_validation_error_inherits_rolegate_error() -> None:
    """ValidationError is a subclass of RoleGateError."""
    assert issubclass(ValidationError, RoleGateError)


def test_conflict_inherits_rolegate_error() -> None:
    """Conflict is a subclass of RoleGateError."""
    assert issubclass(Conflict, RoleGateError)


def test_raise_not_found_catchable_as_rolegate_error() -> None:
    """NotFound can be caught as RoleGateError."""
    with pytest.raises(RoleGateError):
        raise NotFound("UserPermissions", "u1")


def test_exception_message_preserved() -> None:
    """Exception message is preserved when raised."""
    msg = "User does not have system:roles permission"
    with pytest.raises(PermissionDenied, match=msg):
        raise PermissionDenied(msg)
