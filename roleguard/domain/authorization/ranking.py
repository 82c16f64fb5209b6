"""Privilege ranking for presentation. Has no authorization effect."""

from collections.abc import Iterable

from roleguard.domain.authorization.role import Role


def rank(roles: Iterable[Role | str]) -> list[Role]:
    """Stable sort, most privileged first. Unrecognized entries are dropped."""
    parsed = [role for role in map(Role.parse, roles) if role is not None]
    return sorted(parsed, key=lambda role: role.weight, reverse=True)
