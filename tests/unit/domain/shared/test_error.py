"""Tests for the error hierarchy."""

from roleguard.domain.shared.error import (
    AuthorizationError,
    ConfigurationError,
    DomainError,
    InfrastructureError,
    RoleGuardError,
    ValidationError,
)


class TestErrorCodes:
    def test_code_defaults_to_class_name(self) -> None:
        assert ConfigurationError("broken").code == "ConfigurationError"

    def test_explicit_code(self) -> None:
        assert AuthorizationError("no", code="access_denied").code == "access_denied"

    def test_validation_error_field(self) -> None:
        error = ValidationError("bad role", field="role")

        assert error.code == "VALIDATION_ERROR"
        assert error.field == "role"
        assert error.message == "bad role"


class TestErrorLayers:
    def test_domain_errors(self) -> None:
        assert issubclass(AuthorizationError, DomainError)
        assert issubclass(ValidationError, DomainError)

    def test_infrastructure_errors(self) -> None:
        assert issubclass(ConfigurationError, InfrastructureError)

    def test_common_base(self) -> None:
        assert issubclass(DomainError, RoleGuardError)
        assert issubclass(InfrastructureError, RoleGuardError)
