"""Shared actor/subject checks for administrative use cases.

Checks run against snapshots read outside the resolver lock. Use cases pass
the checked subject snapshot as `expected` to the write and raise Conflict
when another request changed the record in between.
"""

import logging

from rolegate.application.ports import PermissionStore
from rolegate.domain import evaluation
from rolegate.domain.catalog.roles import get_assignable_roles
from rolegate.domain.entities import UserPermissionRecord
from rolegate.domain.exceptions import NotFound, PermissionDenied
from rolegate.domain.value_objects import Permission, Role

logger = logging.getLogger(__name__)


def require_actor(
    store: PermissionStore, actor_id: str, permission: Permission
) -> UserPermissionRecord:
    """Return the actor's record, or raise PermissionDenied if it lacks permission."""
    actor = store.get_user_permissions(actor_id)
    if actor is None or not evaluation.has_permission(actor, permission):
        logger.warning("User %s lacks %s", actor_id, permission)
        raise PermissionDenied(f"User does not have {permission} permission")
    return actor


def require_subject(store: PermissionStore, subject_id: str) -> UserPermissionRecord:
    subject = store.get_user_permissions(subject_id)
    if subject is None:
        raise NotFound("UserPermissions", subject_id)
    return subject


def assignable_roles(actor: UserPermissionRecord) -> frozenset[Role]:
    """Roles strictly below the actor's highest role."""
    top = evaluation.highest_role(actor)
    if top is None:
        return frozenset()
    return get_assignable_roles(top)


def require_assignable(actor: UserPermissionRecord, role: Role) -> None:
    if role not in assignable_roles(actor):
        logger.warning("User %s may not manage role %s", actor.user_id, role)
        raise PermissionDenied(f"Role {role} is not below the actor's own role")


def require_outranks(actor: UserPermissionRecord, subject: UserPermissionRecord) -> None:
    """Actors may only manage users whose highest role is below their own."""
    if evaluation.max_role_level(subject) >= evaluation.max_role_level(actor):
        logger.warning("User %s may not manage user %s", actor.user_id, subject.user_id)
        raise PermissionDenied("Cannot manage a user at or above your own role")
