"""Start-up validation for the role catalog."""

import logging

from roleguard.domain.authorization.catalog import ROLE_CATALOG, RoleCatalog

logger = logging.getLogger(__name__)


def validate_policy(catalog: RoleCatalog = ROLE_CATALOG, *, enabled: bool = True) -> None:
    """Validate the catalog before any decision is served.

    Raises ConfigurationError listing every violated invariant.
    """
    if not enabled:
        logger.warning("Role catalog validation disabled by configuration")
        return

    catalog.validate()
    logger.info("Role catalog validation passed for %d roles", len(catalog))
