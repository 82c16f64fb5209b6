"""Policy inspection commands: roles, check, clamp, rank, matrix."""

import json
import sys
from typing import Any

from rich.markup import escape

from roleguard.cli.bootstrap import bootstrap
from roleguard.cli.console import get_console
from roleguard.config import Config
from roleguard.domain.authorization.action import Action
from roleguard.domain.authorization.assignment import clamp as clamp_role
from roleguard.domain.authorization.catalog import ROLE_CATALOG
from roleguard.domain.authorization.gate import decision_matrix, is_allowed
from roleguard.domain.authorization.permission import PermissionRecord
from roleguard.domain.authorization.ranking import rank as rank_roles
from roleguard.domain.authorization.resolver import resolve
from roleguard.domain.authorization.role import Role, display_name
from roleguard.domain.shared.error import ValidationError

# Exit codes: 0 allowed/ok, 1 denied, 2 bad input
EXIT_DENIED = 1
EXIT_USAGE = 2


def _parse_role(value: str) -> Role:
    try:
        return Role.parse_strict(value)
    except ValidationError as e:
        get_console().error(e.message, hint=f"Known roles: {', '.join(Role)}")
        sys.exit(EXIT_USAGE)


def _parse_action(value: str) -> Action:
    try:
        return Action.parse_strict(value)
    except ValidationError as e:
        get_console().error(e.message, hint=f"Known actions: {', '.join(Action)}")
        sys.exit(EXIT_USAGE)


def _json_mode(config: Config, flag: bool | None) -> bool:
    return config.cli.json_output if flag is None else flag


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _record_dict(record: PermissionRecord) -> dict[str, Any]:
    return {
        "role": str(record.role),
        "display_name": display_name(record.role),
        "can_create_users": record.can_create_users,
        "can_edit_profile": record.can_edit_profile,
        "can_edit_role": record.can_edit_role,
        "can_delete_users": record.can_delete_users,
        "assignable_roles": [str(r) for r in record.assignable_roles],
        "protected_target_roles": [str(r) for r in rank_roles(record.protected_target_roles)],
    }


def _yes_no(value: bool) -> str:
    return "yes" if value else "-"


def roles(*, json_output: bool | None = None) -> None:
    """List every role, most privileged first, with its permissions.

    Args:
        json_output: Print JSON instead of a table.
    """
    as_json = _json_mode(bootstrap(), json_output)
    records = [_record_dict(record) for record in ROLE_CATALOG]

    if as_json:
        _print_json(records)
        return

    rows = [
        {
            **record,
            "can_create_users": _yes_no(record["can_create_users"]),
            "can_edit_profile": _yes_no(record["can_edit_profile"]),
            "can_edit_role": _yes_no(record["can_edit_role"]),
            "can_delete_users": _yes_no(record["can_delete_users"]),
            "assignable_roles": ", ".join(record["assignable_roles"]) or "-",
            "protected_target_roles": ", ".join(record["protected_target_roles"]) or "-",
        }
        for record in records
    ]
    get_console().table(
        rows,
        [
            ("role", "Role"),
            ("display_name", "Name"),
            ("can_create_users", "Create"),
            ("can_edit_profile", "Edit profile"),
            ("can_edit_role", "Edit role"),
            ("can_delete_users", "Delete"),
            ("assignable_roles", "Assignable"),
            ("protected_target_roles", "Protected"),
        ],
        title="Roles",
    )


def check(actor: str, target: str, action: str, /, *, json_output: bool | None = None) -> None:
    """Decide whether ACTOR may perform ACTION on an account holding TARGET.

    Exits with status 1 when the action is denied.

    Args:
        actor: Role of the acting account.
        target: Role of the account acted upon.
        action: One of create, edit-profile, edit-role, delete, view.
        json_output: Print JSON instead of a message.
    """
    as_json = _json_mode(bootstrap(), json_output)
    actor_role = _parse_role(actor)
    target_role = _parse_role(target)
    parsed_action = _parse_action(action)

    allowed = is_allowed(resolve(actor_role), target_role, parsed_action)

    if as_json:
        _print_json(
            {
                "actor": str(actor_role),
                "target": str(target_role),
                "action": str(parsed_action),
                "allowed": allowed,
            }
        )
    elif allowed:
        get_console().success(f"{actor_role} may {parsed_action} {target_role} accounts")
    else:
        get_console().denied(f"{actor_role} may not {parsed_action} {target_role} accounts")

    if not allowed:
        sys.exit(EXIT_DENIED)


def clamp(actor: str, requested: str, /, *, json_output: bool | None = None) -> None:
    """Show the role that would be stored when ACTOR submits REQUESTED.

    REQUESTED is accepted as-is, including unknown values, the way a tampered
    form submission would arrive.

    Args:
        actor: Role of the acting account.
        requested: Submitted role value.
        json_output: Print JSON instead of a message.
    """
    as_json = _json_mode(bootstrap(), json_output)
    actor_role = _parse_role(actor)

    result = clamp_role(resolve(actor_role), requested)
    changed = result != requested

    if as_json:
        _print_json(
            {
                "actor": str(actor_role),
                "requested": requested,
                "assigned": str(result),
                "changed": changed,
            }
        )
        return

    if changed:
        get_console().print(f"{result} (requested {escape(repr(requested))} is not assignable by {actor_role})")
    else:
        get_console().print(str(result))


def rank(*roles: str, json_output: bool | None = None) -> None:
    """Print ROLES ordered from most to least privileged.

    Args:
        roles: Role names to order.
        json_output: Print a JSON list instead of one role per line.
    """
    as_json = _json_mode(bootstrap(), json_output)
    ordered = rank_roles(_parse_role(r) for r in roles)

    if as_json:
        _print_json([str(r) for r in ordered])
        return

    for role in ordered:
        get_console().print(f"{role}  [dim]{display_name(role)}[/dim]")


def matrix(actor: str, /, *, json_output: bool | None = None) -> None:
    """Show every action x target-role decision for ACTOR.

    Args:
        actor: Role of the acting account.
        json_output: Print JSON instead of a table.
    """
    as_json = _json_mode(bootstrap(), json_output)
    actor_role = _parse_role(actor)
    decisions = decision_matrix(resolve(actor_role))

    if as_json:
        _print_json(
            {
                "actor": str(actor_role),
                "decisions": {
                    str(action): {str(target): allowed for target, allowed in targets.items()}
                    for action, targets in decisions.items()
                },
            }
        )
        return

    rows = [
        {"action": str(action), **{str(target): _yes_no(allowed) for target, allowed in targets.items()}}
        for action, targets in decisions.items()
    ]
    get_console().table(
        rows,
        [("action", "Action"), *((str(role), str(role)) for role in Role)],
        title=f"Decisions for {actor_role}",
    )
