"""PermissionRecord: what one role may do to other accounts."""

from dataclasses import dataclass

from roleguard.domain.authorization.role import Role


@dataclass(frozen=True)
class PermissionRecord:
    """Capabilities granted to every actor holding ``role``.

    Immutable and shared by reference; one instance per role lives in the catalog.
    ``protected_target_roles`` overrides every boolean flag for non-view actions.
    """

    role: Role
    can_create_users: bool
    can_edit_profile: bool
    can_edit_role: bool
    can_delete_users: bool
    assignable_roles: tuple[Role, ...]  # Highest privilege first
    protected_target_roles: frozenset[Role]

    def may_assign(self, role: Role) -> bool:
        return role in self.assignable_roles

    def protects(self, role: Role) -> bool:
        return role in self.protected_target_roles


def permit(
    role: Role,
    *,
    create: bool = False,
    edit_profile: bool = False,
    edit_role: bool = False,
    delete: bool = False,
    assignable: tuple[Role, ...] = (),
    protected: tuple[Role, ...] = (),
) -> PermissionRecord:
    """Convenience constructor for a catalog entry (everything denied by default)."""
    return PermissionRecord(
        role=role,
        can_create_users=create,
        can_edit_profile=edit_profile,
        can_edit_role=edit_role,
        can_delete_users=delete,
        assignable_roles=tuple(assignable),
        protected_target_roles=frozenset(protected),
    )
