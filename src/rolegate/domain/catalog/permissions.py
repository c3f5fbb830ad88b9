"""Permission catalog: groups for bulk assignment and display metadata.

Groups are plain frozensets expanded at import time. A group may only extend
groups defined above it, so the catalog can never contain a cycle.
"""

from rolegate.domain.exceptions import ValidationError
from rolegate.domain.value_objects import Permission

ALL_PERMISSIONS: frozenset[Permission] = frozenset(Permission)

_VALID_VALUES: frozenset[str] = frozenset(p.value for p in Permission)


# ── Groups ──────────────────────────────────────────────────

USER_BASIC: frozenset[Permission] = frozenset({
    Permission.TASK_VIEW,
    Permission.TASK_CREATE,
    Permission.TASK_EDIT,
    Permission.TASK_DELETE,
    Permission.AVATAR_VIEW,
    Permission.SKILL_VIEW,
    Permission.PROJECT_VIEW,
    Permission.STORE_VIEW,
    Permission.FILE_UPLOAD,
    Permission.FILE_DOWNLOAD,
})

USER_FULL: frozenset[Permission] = USER_BASIC | {
    Permission.TASK_SHARE,
    Permission.TASK_EXPORT,
    Permission.AVATAR_CREATE,
    Permission.AVATAR_EDIT,
    Permission.AVATAR_ACTIVATE,
    Permission.AVATAR_DEACTIVATE,
    Permission.STORE_PURCHASE,
    Permission.PAYMENT_VIEW,
    Permission.PAYMENT_CREATE,
    Permission.SUBSCRIPTION_VIEW,
    Permission.SUBSCRIPTION_MANAGE,
    Permission.FILE_DELETE,
}

CREATOR: frozenset[Permission] = frozenset({
    Permission.SKILL_CREATE,
    Permission.SKILL_EDIT,
    Permission.SKILL_DELETE,
    Permission.SKILL_PUBLISH,
    Permission.SKILL_UNPUBLISH,
    Permission.PROJECT_CREATE,
    Permission.PROJECT_EDIT,
    Permission.PROJECT_DELETE,
    Permission.PROJECT_PUBLISH,
    Permission.PROJECT_UNPUBLISH,
    Permission.REVENUE_VIEW,
    Permission.REVENUE_WITHDRAW,
    Permission.REVENUE_ANALYTICS,
    Permission.STORE_ANALYTICS,
})

APPROVER: frozenset[Permission] = frozenset({
    Permission.HITL_VIEW,
    Permission.HITL_APPROVE,
    Permission.HITL_REJECT,
})

AUTOMATION: frozenset[Permission] = frozenset({
    Permission.AUTOMATION_VIEW,
    Permission.AUTOMATION_CREATE,
    Permission.AUTOMATION_EDIT,
    Permission.AUTOMATION_DELETE,
    Permission.AUTOMATION_EXECUTE,
})

ADMIN: frozenset[Permission] = ALL_PERMISSIONS

PERMISSION_GROUPS: dict[str, frozenset[Permission]] = {
    "user_basic": USER_BASIC,
    "user_full": USER_FULL,
    "creator": CREATOR,
    "approver": APPROVER,
    "automation": AUTOMATION,
    "admin": ADMIN,
}


# ── Display metadata ────────────────────────────────────────

PERMISSION_DESCRIPTIONS: dict[Permission, tuple[str, str]] = {
    Permission.USER_VIEW: ("View users", "View the user list and user details"),
    Permission.USER_CREATE: ("Create users", "Create new users"),
    Permission.USER_EDIT: ("Edit users", "Change user information"),
    Permission.USER_DELETE: ("Delete users", "Delete user accounts"),
    Permission.TASK_VIEW: ("View tasks", "View the task and session list"),
    Permission.TASK_CREATE: ("Create tasks", "Start new tasks and sessions"),
    Permission.TASK_EDIT: ("Edit tasks", "Change task content"),
    Permission.TASK_DELETE: ("Delete tasks", "Delete tasks and sessions"),
    Permission.TASK_SHARE: ("Share tasks", "Share tasks with other users"),
    Permission.TASK_EXPORT: ("Export tasks", "Export task data"),
    Permission.AVATAR_VIEW: ("View avatars", "View the avatar list"),
    Permission.AVATAR_CREATE: ("Create avatars", "Create new avatars"),
    Permission.AVATAR_EDIT: ("Edit avatars", "Change avatar configuration"),
    Permission.AVATAR_DELETE: ("Delete avatars", "Delete avatars"),
    Permission.AVATAR_ACTIVATE: ("Activate avatars", "Start avatars"),
    Permission.AVATAR_DEACTIVATE: ("Deactivate avatars", "Stop avatars"),
    Permission.SKILL_VIEW: ("View skills", "View the skill list"),
    Permission.SKILL_CREATE: ("Create skills", "Create new skills"),
    Permission.SKILL_EDIT: ("Edit skills", "Change skill content"),
    Permission.SKILL_DELETE: ("Delete skills", "Delete skills"),
    Permission.SKILL_PUBLISH: ("Publish skills", "Publish skills to the store"),
    Permission.SKILL_UNPUBLISH: ("Unpublish skills", "Remove skills from the store"),
    Permission.PROJECT_VIEW: ("View projects", "View the project list"),
    Permission.PROJECT_CREATE: ("Create projects", "Create new projects"),
    Permission.PROJECT_EDIT: ("Edit projects", "Change project content"),
    Permission.PROJECT_DELETE: ("Delete projects", "Delete projects"),
    Permission.PROJECT_PUBLISH: ("Publish projects", "Publish projects to the store"),
    Permission.PROJECT_UNPUBLISH: ("Unpublish projects", "Remove projects from the store"),
    Permission.STORE_VIEW: ("Browse store", "Browse store content"),
    Permission.STORE_PURCHASE: ("Purchase", "Buy skills and projects"),
    Permission.STORE_MANAGE: ("Manage store", "Manage store configuration"),
    Permission.STORE_ANALYTICS: ("Store analytics", "View store analytics"),
    Permission.PAYMENT_VIEW: ("View payments", "View payment history"),
    Permission.PAYMENT_CREATE: ("Create payments", "Initiate payments"),
    Permission.PAYMENT_REFUND: ("Refund", "Process refunds"),
    Permission.SUBSCRIPTION_VIEW: ("View subscription", "View subscription details"),
    Permission.SUBSCRIPTION_MANAGE: ("Manage subscription", "Change subscription plan"),
    Permission.SUBSCRIPTION_CANCEL: ("Cancel subscription", "Cancel a subscription"),
    Permission.REVENUE_VIEW: ("View revenue", "View revenue data"),
    Permission.REVENUE_WITHDRAW: ("Withdraw", "Withdraw earned revenue"),
    Permission.REVENUE_ANALYTICS: ("Revenue analytics", "View revenue analytics"),
    Permission.AUDIT_VIEW: ("View audit log", "View the audit log"),
    Permission.AUDIT_EXPORT: ("Export audit log", "Export the audit log"),
    Permission.AUDIT_DELETE: ("Delete audit log", "Delete audit log entries"),
    Permission.SYSTEM_SETTINGS: ("System settings", "Change system settings"),
    Permission.SYSTEM_USERS: ("User administration", "Manage system users"),
    Permission.SYSTEM_ROLES: ("Role administration", "Manage roles and permissions"),
    Permission.SYSTEM_MONITOR: ("System monitoring", "View monitoring data"),
    Permission.API_KEY_VIEW: ("View API keys", "View API keys"),
    Permission.API_KEY_CREATE: ("Create API keys", "Create new API keys"),
    Permission.API_KEY_DELETE: ("Delete API keys", "Delete API keys"),
    Permission.FILE_UPLOAD: ("Upload files", "Upload files"),
    Permission.FILE_DOWNLOAD: ("Download files", "Download files"),
    Permission.FILE_DELETE: ("Delete files", "Delete files"),
    Permission.HITL_APPROVE: ("Approve requests", "Approve human-in-the-loop requests"),
    Permission.HITL_REJECT: ("Reject requests", "Reject human-in-the-loop requests"),
    Permission.HITL_VIEW: ("View requests", "View human-in-the-loop requests"),
    Permission.AUTOMATION_VIEW: ("View automations", "View automation jobs"),
    Permission.AUTOMATION_CREATE: ("Create automations", "Create automation jobs"),
    Permission.AUTOMATION_EDIT: ("Edit automations", "Change automation jobs"),
    Permission.AUTOMATION_DELETE: ("Delete automations", "Delete automation jobs"),
    Permission.AUTOMATION_EXECUTE: ("Run automations", "Run automation jobs manually"),
}


# ── Lookups ─────────────────────────────────────────────────

def is_valid_permission(value: object) -> bool:
    """Return True if value names a permission in the catalog."""
    return isinstance(value, str) and value in _VALID_VALUES


def parse_permission(value: object) -> Permission:
    """Convert an external string into a Permission, rejecting unknown values."""
    if not is_valid_permission(value):
        raise ValidationError(f"Unknown permission: {value!r}")
    return Permission(value)


def get_permission_name(permission: Permission) -> str:
    entry = PERMISSION_DESCRIPTIONS.get(permission)
    return entry[0] if entry else str(permission)


def get_permission_description(permission: Permission) -> str:
    entry = PERMISSION_DESCRIPTIONS.get(permission)
    return entry[1] if entry else ""
