"""Process start-up shared by every CLI command."""

from roleguard.config import Config, configure_logging
from roleguard.domain.authorization.startup import validate_policy


def bootstrap() -> Config:
    """Load config, configure logging and validate the role catalog."""
    config = Config()
    configure_logging(config.logging)
    validate_policy(enabled=config.policy.validate_on_startup)
    return config
