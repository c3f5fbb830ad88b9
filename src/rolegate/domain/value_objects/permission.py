"""Atomic permissions for RBAC."""

from enum import StrEnum


class Permission(StrEnum):
    """Closed catalog of permissions, named `domain:action`."""

    # User management
    USER_VIEW = "user:view"
    USER_CREATE = "user:create"
    USER_EDIT = "user:edit"
    USER_DELETE = "user:delete"

    # Tasks / sessions
    TASK_VIEW = "task:view"
    TASK_CREATE = "task:create"
    TASK_EDIT = "task:edit"
    TASK_DELETE = "task:delete"
    TASK_SHARE = "task:share"
    TASK_EXPORT = "task:export"

    # Avatars
    AVATAR_VIEW = "avatar:view"
    AVATAR_CREATE = "avatar:create"
    AVATAR_EDIT = "avatar:edit"
    AVATAR_DELETE = "avatar:delete"
    AVATAR_ACTIVATE = "avatar:activate"
    AVATAR_DEACTIVATE = "avatar:deactivate"

    # Skills
    SKILL_VIEW = "skill:view"
    SKILL_CREATE = "skill:create"
    SKILL_EDIT = "skill:edit"
    SKILL_DELETE = "skill:delete"
    SKILL_PUBLISH = "skill:publish"
    SKILL_UNPUBLISH = "skill:unpublish"

    # Projects
    PROJECT_VIEW = "project:view"
    PROJECT_CREATE = "project:create"
    PROJECT_EDIT = "project:edit"
    PROJECT_DELETE = "project:delete"
    PROJECT_PUBLISH = "project:publish"
    PROJECT_UNPUBLISH = "project:unpublish"

    # Store
    STORE_VIEW = "store:view"
    STORE_PURCHASE = "store:purchase"
    STORE_MANAGE = "store:manage"
    STORE_ANALYTICS = "store:analytics"

    # Payments and subscriptions
    PAYMENT_VIEW = "payment:view"
    PAYMENT_CREATE = "payment:create"
    PAYMENT_REFUND = "payment:refund"

    SUBSCRIPTION_VIEW = "subscription:view"
    SUBSCRIPTION_MANAGE = "subscription:manage"
    SUBSCRIPTION_CANCEL = "subscription:cancel"

    # Revenue
    REVENUE_VIEW = "revenue:view"
    REVENUE_WITHDRAW = "revenue:withdraw"
    REVENUE_ANALYTICS = "revenue:analytics"

    # Audit log
    AUDIT_VIEW = "audit:view"
    AUDIT_EXPORT = "audit:export"
    AUDIT_DELETE = "audit:delete"

    # System administration
    SYSTEM_SETTINGS = "system:settings"
    SYSTEM_USERS = "system:users"
    SYSTEM_ROLES = "system:roles"
    SYSTEM_MONITOR = "system:monitor"

    # API keys
    API_KEY_VIEW = "api_key:view"
    API_KEY_CREATE = "api_key:create"
    API_KEY_DELETE = "api_key:delete"

    # Files
    FILE_UPLOAD = "file:upload"
    FILE_DOWNLOAD = "file:download"
    FILE_DELETE = "file:delete"

    # Human-in-the-loop approvals
    HITL_APPROVE = "hitl:approve"
    HITL_REJECT = "hitl:reject"
    HITL_VIEW = "hitl:view"

    # Automation
    AUTOMATION_VIEW = "automation:view"
    AUTOMATION_CREATE = "automation:create"
    AUTOMATION_EDIT = "automation:edit"
    AUTOMATION_DELETE = "automation:delete"
    AUTOMATION_EXECUTE = "automation:execute"
