"""RoleCatalog: the single source of truth for "which role may do what to whom".

Contains the RoleCatalog container and the ROLE_CATALOG constant, built once at
import time and never mutated afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from roleguard.domain.authorization.permission import PermissionRecord, permit
from roleguard.domain.authorization.role import Role
from roleguard.domain.shared.error import ConfigurationError


class RoleCatalog:
    """Read-only mapping of Role -> PermissionRecord.

    Safe to share across threads and tasks: the underlying mapping is a
    MappingProxyType over records that are themselves frozen.
    """

    def __init__(self, records: Iterable[PermissionRecord]) -> None:
        self._records = list(records)
        by_role: dict[Role, PermissionRecord] = {}
        for record in self._records:
            by_role.setdefault(record.role, record)
        self._by_role = MappingProxyType(by_role)

    def __getitem__(self, role: Role) -> PermissionRecord:
        return self._by_role[role]

    def __contains__(self, role: object) -> bool:
        return role in self._by_role

    def __iter__(self) -> Iterator[PermissionRecord]:
        """Iterate records in privilege order, most privileged first."""
        return (self._by_role[role] for role in Role if role in self._by_role)

    def __len__(self) -> int:
        return len(self._by_role)

    def get(self, role: Role) -> PermissionRecord | None:
        return self._by_role.get(role)

    def validate(self) -> None:
        """Start-up check: every invariant of the permission table must hold.

        Raises ConfigurationError listing all violations at once.
        """
        violations: list[str] = []

        seen: set[Role] = set()
        for record in self._records:
            if record.role in seen:
                violations.append(f"duplicate record for role {record.role}")
            seen.add(record.role)

        missing = set(Role) - seen
        if missing:
            names = ", ".join(sorted(str(r) for r in missing))
            violations.append(f"roles without a permission record: {names}")

        for record in self._by_role.values():
            violations.extend(_record_violations(record))

        if violations:
            raise ConfigurationError(
                f"Role catalog validation failed with {len(violations)} violation(s):\n"
                + "\n".join(f"  - {v}" for v in violations)
            )


def _record_violations(record: PermissionRecord) -> list[str]:
    role = record.role
    violations: list[str] = []

    overlap = set(record.assignable_roles) & record.protected_target_roles
    if overlap:
        names = ", ".join(sorted(str(r) for r in overlap))
        violations.append(f"{role}: roles both assignable and protected: {names}")

    if len(set(record.assignable_roles)) != len(record.assignable_roles):
        violations.append(f"{role}: assignable roles contain duplicates")

    weights = [r.weight for r in record.assignable_roles]
    if weights != sorted(weights, reverse=True):
        violations.append(f"{role}: assignable roles are not ordered by privilege")

    if role is Role.SUPER_ADMIN:
        if record.protected_target_roles:
            violations.append(f"{role}: must not have protected target roles")
        if set(record.assignable_roles) != set(Role):
            violations.append(f"{role}: must be able to assign every role")

    if role is Role.USER:
        if record.assignable_roles:
            violations.append(f"{role}: must not be able to assign any role")
        if record.protected_target_roles != frozenset(Role):
            violations.append(f"{role}: every role must be protected")

    return violations


ROLE_CATALOG = RoleCatalog(
    [
        permit(
            Role.SUPER_ADMIN,
            create=True,
            edit_profile=True,
            edit_role=True,
            delete=True,
            assignable=(Role.SUPER_ADMIN, Role.ADMIN, Role.TECHNICIAN, Role.USER),
        ),
        permit(
            Role.ADMIN,
            create=True,
            edit_profile=True,
            edit_role=True,
            delete=True,
            assignable=(Role.ADMIN, Role.TECHNICIAN, Role.USER),
            protected=(Role.SUPER_ADMIN,),
        ),
        # Technicians maintain plain-user profiles only
        permit(
            Role.TECHNICIAN,
            edit_profile=True,
            assignable=(Role.USER,),
            protected=(Role.SUPER_ADMIN, Role.ADMIN),
        ),
        permit(
            Role.USER,
            protected=(Role.SUPER_ADMIN, Role.ADMIN, Role.TECHNICIAN, Role.USER),
        ),
    ]
)
