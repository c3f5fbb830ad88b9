"""Roles for RBAC."""

from enum import StrEnum


class Role(StrEnum):
    """Closed catalog of roles a user can hold."""

    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    CREATOR = "creator"
    PREMIUM_USER = "premium_user"
    USER = "user"
    GUEST = "guest"
    APPROVER = "approver"
    AUTOMATION_OPERATOR = "automation_operator"
