"""Role catalog: role → permission set, hierarchy level and display text.

Levels only express relative privilege; they need not be contiguous and two
roles may share a level. Unknown roles carry no permissions and rank below
every real role.
"""

from rolegate.domain.catalog import permissions as groups
from rolegate.domain.entities import RoleDefinition
from rolegate.domain.exceptions import ValidationError
from rolegate.domain.value_objects import Permission, Role

# Effective level of an unknown role or an empty role set.
LOWEST_LEVEL = -1


ROLE_DEFINITIONS: dict[Role, RoleDefinition] = {
    Role.SUPER_ADMIN: RoleDefinition(
        role=Role.SUPER_ADMIN,
        permissions=groups.ADMIN,
        level=100,
        name="Super administrator",
        description="Holds every permission and can manage all features and users",
    ),
    Role.ADMIN: RoleDefinition(
        role=Role.ADMIN,
        permissions=groups.USER_FULL | groups.CREATOR | {
            Permission.USER_VIEW,
            Permission.USER_CREATE,
            Permission.USER_EDIT,
            Permission.SYSTEM_USERS,
            Permission.SYSTEM_MONITOR,
            Permission.AUDIT_VIEW,
            Permission.AUDIT_EXPORT,
            Permission.STORE_MANAGE,
            Permission.PAYMENT_REFUND,
        },
        level=80,
        name="Administrator",
        description="Most administrative permissions, manages users and configuration",
    ),
    Role.CREATOR: RoleDefinition(
        role=Role.CREATOR,
        permissions=groups.USER_FULL | groups.CREATOR,
        level=30,
        name="Creator",
        description="Creates and publishes skills and projects and earns revenue",
    ),
    Role.PREMIUM_USER: RoleDefinition(
        role=Role.PREMIUM_USER,
        permissions=groups.USER_FULL,
        level=20,
        name="Premium user",
        description="Paying user with the full set of user features",
    ),
    Role.USER: RoleDefinition(
        role=Role.USER,
        permissions=groups.USER_BASIC | {
            Permission.AVATAR_CREATE,
            Permission.AVATAR_EDIT,
            Permission.STORE_PURCHASE,
            Permission.PAYMENT_VIEW,
            Permission.SUBSCRIPTION_VIEW,
        },
        level=10,
        name="User",
        description="Access to the basic features",
    ),
    Role.GUEST: RoleDefinition(
        role=Role.GUEST,
        permissions=frozenset({
            Permission.TASK_VIEW,
            Permission.AVATAR_VIEW,
            Permission.SKILL_VIEW,
            Permission.PROJECT_VIEW,
            Permission.STORE_VIEW,
        }),
        level=0,
        name="Guest",
        description="Read-only browsing",
    ),
    Role.APPROVER: RoleDefinition(
        role=Role.APPROVER,
        permissions=groups.USER_BASIC | groups.APPROVER,
        level=15,
        name="Approver",
        description="Reviews human-in-the-loop requests",
    ),
    Role.AUTOMATION_OPERATOR: RoleDefinition(
        role=Role.AUTOMATION_OPERATOR,
        permissions=groups.USER_BASIC | groups.AUTOMATION,
        level=15,
        name="Automation operator",
        description="Creates and runs automation jobs",
    ),
}

# Role given to newly registered users.
DEFAULT_ROLE = Role.USER

# Roles available without logging in.
PUBLIC_ROLES: frozenset[Role] = frozenset({Role.GUEST})

PAID_ROLES: frozenset[Role] = frozenset({Role.PREMIUM_USER, Role.CREATOR})

_VALID_VALUES: frozenset[str] = frozenset(r.value for r in Role)


def is_valid_role(value: object) -> bool:
    """Return True if value names a role in the catalog."""
    return isinstance(value, str) and value in _VALID_VALUES


def parse_role(value: object) -> Role:
    """Convert an external string into a Role, rejecting unknown values."""
    if not is_valid_role(value):
        raise ValidationError(f"Unknown role: {value!r}")
    return Role(value)


def get_role_permissions(role: Role) -> frozenset[Permission]:
    """Permissions every holder of role receives; empty for unknown roles."""
    definition = ROLE_DEFINITIONS.get(role)
    return definition.permissions if definition else frozenset()


def get_role_level(role: Role) -> int:
    definition = ROLE_DEFINITIONS.get(role)
    return definition.level if definition else LOWEST_LEVEL


def get_role_name(role: Role) -> str:
    definition = ROLE_DEFINITIONS.get(role)
    return definition.name if definition else str(role)


def get_role_description(role: Role) -> str:
    definition = ROLE_DEFINITIONS.get(role)
    return definition.description if definition else ""


def is_role_higher(role_a: Role, role_b: Role) -> bool:
    """True if role_a ranks strictly above role_b."""
    return get_role_level(role_a) > get_role_level(role_b)


def is_role_higher_or_equal(role_a: Role, role_b: Role) -> bool:
    """True if role_a ranks at or above role_b."""
    return get_role_level(role_a) >= get_role_level(role_b)


def get_assignable_roles(current_role: Role) -> frozenset[Role]:
    """Roles a holder of current_role may hand out: strictly lower levels only."""
    current_level = get_role_level(current_role)
    return frozenset(
        role
        for role, definition in ROLE_DEFINITIONS.items()
        if definition.level < current_level
    )
