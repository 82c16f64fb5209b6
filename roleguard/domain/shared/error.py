"""Error hierarchy for roleguard.

Error layers:
- RoleGuardError: Base class for all roleguard errors
- DomainError: Authorization refusals and rejected input (mapped to 4xx by integrators)
- InfrastructureError: Broken process configuration, e.g. an inconsistent role catalog

The decision functions themselves never raise. These errors are only used by the
opt-in guard, strict parsing at the CLI boundary, and start-up validation.
"""


class RoleGuardError(Exception):
    """Base class for all roleguard errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(RoleGuardError):
    """Base class for domain errors."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class AuthorizationError(DomainError):
    """Actor not authorized for this operation."""


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(RoleGuardError):
    """Base class for system errors."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
