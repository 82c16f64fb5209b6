"""Account-level predicates for the user-management screens.

These combine the action gate with facts the gate cannot see, such as whether
the target account is the actor's own.
"""

from collections.abc import Hashable

from roleguard.domain.authorization.action import Action
from roleguard.domain.authorization.gate import is_allowed
from roleguard.domain.authorization.permission import PermissionRecord
from roleguard.domain.authorization.role import Role


def can_edit_account_profile(actor: PermissionRecord, target_role: Role | str) -> bool:
    return is_allowed(actor, target_role, Action.EDIT_PROFILE)


def can_edit_account_role(actor: PermissionRecord, target_role: Role | str) -> bool:
    return actor.can_edit_role and is_allowed(actor, target_role, Action.EDIT_ROLE)


def can_delete_account(
    actor: PermissionRecord,
    actor_id: Hashable,
    target_role: Role | str,
    target_id: Hashable,
) -> bool:
    """Deletion additionally requires that the target is not the actor's own account."""
    if actor_id == target_id:
        return False
    return is_allowed(actor, target_role, Action.DELETE)


def has_management_access(actor: PermissionRecord) -> bool:
    """False when the actor can only look at accounts."""
    return actor.can_create_users or actor.can_edit_profile or actor.can_delete_users
