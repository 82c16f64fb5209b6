"""Tests for role assignment clamping and form helpers."""

import pytest

from roleguard.domain.authorization.assignment import (
    clamp,
    default_assignment,
    role_options,
    role_options_for_target,
)
from roleguard.domain.authorization.catalog import ROLE_CATALOG
from roleguard.domain.authorization.permission import PermissionRecord
from roleguard.domain.authorization.resolver import resolve
from roleguard.domain.authorization.role import Role, display_name


class TestClamp:
    def test_admin_request_for_super_admin_falls_back_to_admin(self) -> None:
        assert clamp(resolve("admin"), "super_admin") is Role.ADMIN

    def test_admin_may_assign_technician(self) -> None:
        assert clamp(resolve("admin"), "technician") is Role.TECHNICIAN

    def test_technician_request_for_admin_falls_back_to_user(self) -> None:
        assert clamp(resolve("technician"), "admin") is Role.USER

    def test_technician_may_assign_user(self) -> None:
        assert clamp(resolve("technician"), "user") is Role.USER

    def test_super_admin_may_assign_anything(self) -> None:
        for role in Role:
            assert clamp(resolve("super_admin"), role) is role

    def test_user_actor_always_gets_user(self) -> None:
        for role in Role:
            assert clamp(resolve("user"), role) is Role.USER

    @pytest.mark.parametrize("requested", [None, "", "root", "ADMIN"])
    def test_tampered_values_fall_back(self, requested: str | None) -> None:
        assert clamp(resolve("admin"), requested) is Role.ADMIN

    @pytest.mark.parametrize("actor", list(ROLE_CATALOG), ids=lambda r: str(r.role))
    @pytest.mark.parametrize("requested", [*Role, "bogus", None])
    def test_idempotent(self, actor: PermissionRecord, requested: Role | str | None) -> None:
        once = clamp(actor, requested)

        assert clamp(actor, once) is once

    @pytest.mark.parametrize("actor", list(ROLE_CATALOG), ids=lambda r: str(r.role))
    def test_result_is_grantable_or_user(self, actor: PermissionRecord) -> None:
        for requested in Role:
            result = clamp(actor, requested)
            assert actor.may_assign(result) or (not actor.assignable_roles and result is Role.USER)


class TestDefaultAssignment:
    def test_highest_assignable_role(self) -> None:
        assert default_assignment(resolve("super_admin")) is Role.SUPER_ADMIN
        assert default_assignment(resolve("admin")) is Role.ADMIN
        assert default_assignment(resolve("technician")) is Role.USER

    def test_user_actor_defaults_to_user(self) -> None:
        assert default_assignment(resolve("user")) is Role.USER


class TestRoleOptions:
    def test_admin_options_most_privileged_first(self) -> None:
        options = role_options(resolve("admin"))

        assert [role for role, _ in options] == [Role.ADMIN, Role.TECHNICIAN, Role.USER]
        assert options[0][1] == display_name(Role.ADMIN)

    def test_user_actor_has_no_options(self) -> None:
        assert role_options(resolve("user")) == []

    def test_existing_super_admin_stays_visible_for_admin(self) -> None:
        options = role_options_for_target(resolve("admin"), Role.SUPER_ADMIN)

        assert [role for role, _ in options] == [Role.SUPER_ADMIN, Role.ADMIN, Role.TECHNICIAN, Role.USER]

    def test_super_admin_not_added_twice(self) -> None:
        options = role_options_for_target(resolve("super_admin"), "super_admin")

        assert [role for role, _ in options].count(Role.SUPER_ADMIN) == 1

    def test_other_targets_get_plain_options(self) -> None:
        actor = resolve("technician")

        assert role_options_for_target(actor, Role.USER) == role_options(actor)

    def test_visible_super_admin_option_is_still_clamped(self) -> None:
        actor = resolve("admin")
        role_options_for_target(actor, Role.SUPER_ADMIN)

        assert clamp(actor, Role.SUPER_ADMIN) is Role.ADMIN
