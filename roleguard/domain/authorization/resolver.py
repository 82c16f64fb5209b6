"""Permission resolution: the single default-deny point for ambiguous identities."""

import logging

from roleguard.domain.authorization.catalog import ROLE_CATALOG, RoleCatalog
from roleguard.domain.authorization.permission import PermissionRecord, permit
from roleguard.domain.authorization.role import Role

logger = logging.getLogger(__name__)

# Used when a catalog has no user record: every mutation refused.
_DENY_ALL = permit(Role.USER, protected=tuple(Role))


def resolve(role: Role | str | None, catalog: RoleCatalog = ROLE_CATALOG) -> PermissionRecord:
    """Return the permission record for a role.

    Absent, empty or unrecognized input resolves to the plain-user record, or to
    a record that refuses every mutation when the catalog has none.
    """
    fallback = catalog.get(Role.USER) or _DENY_ALL
    parsed = Role.parse(role)
    if parsed is None:
        if role:
            logger.debug("Unrecognized role %r, resolving to %s", role, Role.USER)
        return fallback
    return catalog.get(parsed) or fallback
