"""Role assignment: keep submitted role values within the actor's authority."""

from roleguard.domain.authorization.permission import PermissionRecord
from roleguard.domain.authorization.role import Role, display_name


def clamp(actor: PermissionRecord, requested: Role | str | None) -> Role:
    """Return ``requested`` if the actor may grant it, else the actor's default grant.

    The fallback is the first (most privileged) assignable role, or ``Role.USER``
    when the actor may assign nothing. Idempotent; never raises.
    """
    role = Role.parse(requested)
    if role is not None and actor.may_assign(role):
        return role
    return default_assignment(actor)


def default_assignment(actor: PermissionRecord) -> Role:
    """Initial role value for a new-account form."""
    if actor.assignable_roles:
        return actor.assignable_roles[0]
    return Role.USER


def role_options(actor: PermissionRecord) -> list[tuple[Role, str]]:
    """(role, label) pairs the actor may grant, most privileged first."""
    return [(role, display_name(role)) for role in Role if actor.may_assign(role)]


def role_options_for_target(actor: PermissionRecord, current_role: Role | str | None) -> list[tuple[Role, str]]:
    """Options for an edit form, keeping an existing super_admin role visible.

    The extra option is display-only: whatever is submitted still goes through clamp().
    """
    options = role_options(actor)
    if Role.parse(current_role) is Role.SUPER_ADMIN and not actor.may_assign(Role.SUPER_ADMIN):
        options.insert(0, (Role.SUPER_ADMIN, display_name(Role.SUPER_ADMIN)))
    return options
