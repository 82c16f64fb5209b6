"""Role-based authorization policy engine."""

from roleguard.domain.authorization.action import Action
from roleguard.domain.authorization.assignment import clamp, default_assignment, role_options
from roleguard.domain.authorization.catalog import ROLE_CATALOG, RoleCatalog
from roleguard.domain.authorization.gate import is_allowed, require
from roleguard.domain.authorization.permission import PermissionRecord
from roleguard.domain.authorization.ranking import rank
from roleguard.domain.authorization.resolver import resolve
from roleguard.domain.authorization.role import Role, display_name

__all__ = [
    "Action",
    "PermissionRecord",
    "ROLE_CATALOG",
    "Role",
    "RoleCatalog",
    "clamp",
    "default_assignment",
    "display_name",
    "is_allowed",
    "rank",
    "require",
    "resolve",
    "role_options",
]
