"""Action gate: may an actor perform an action on an account holding a target role?"""

from __future__ import annotations

import logging
from typing import assert_never

from roleguard.domain.authorization.action import Action
from roleguard.domain.authorization.permission import PermissionRecord
from roleguard.domain.authorization.role import Role
from roleguard.domain.shared.error import AuthorizationError

logger = logging.getLogger(__name__)


def is_allowed(actor: PermissionRecord, target: Role | str, action: Action | str) -> bool:
    """Decide whether ``actor`` may perform ``action`` on an account with role ``target``.

    Evaluation order:
    1. ``view`` is always allowed.
    2. A protected target role is refused, whatever the boolean flags say.
    3. Otherwise the flag matching the action decides.

    Unrecognized actions or target roles are refused. Never raises.
    """
    parsed_action = Action.parse(action)
    if parsed_action is None:
        return False
    if parsed_action is Action.VIEW:
        return True

    parsed_target = Role.parse(target)
    if parsed_target is None:
        return False
    if actor.protects(parsed_target):
        return False

    match parsed_action:
        case Action.CREATE:
            return actor.can_create_users
        case Action.EDIT_PROFILE:
            return actor.can_edit_profile
        case Action.EDIT_ROLE:
            return actor.can_edit_role
        case Action.DELETE:
            return actor.can_delete_users
        case _:
            assert_never(parsed_action)


def require(actor: PermissionRecord, target: Role | str, action: Action | str) -> None:
    """Raise AuthorizationError if ``is_allowed`` refuses the decision.

    Intended for server-side mutation handlers, where ``actor`` must come from a
    verified session, never from the client.
    """
    # Unrecognized values are logged by repr, never as raw text.
    target_label = Role.parse(target) or repr(target)
    action_label = Action.parse(action) or repr(action)

    if is_allowed(actor, target, action):
        logger.info(
            "Authorization allowed: actor=%s target=%s action=%s",
            actor.role,
            target_label,
            action_label,
        )
        return

    logger.warning(
        "Authorization denied: actor=%s target=%s action=%s",
        actor.role,
        target_label,
        action_label,
    )
    raise AuthorizationError(f"Access denied: {action_label} on {target_label}", code="access_denied")


def decision_matrix(actor: PermissionRecord) -> dict[Action, dict[Role, bool]]:
    """Every action x target-role decision for one actor, in declaration order."""
    return {action: {target: is_allowed(actor, target, action) for target in Role} for action in Action}
