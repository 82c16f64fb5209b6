"""Account roles, their privilege order and display labels."""

from enum import StrEnum

from roleguard.domain.shared.error import ValidationError


class Role(StrEnum):
    """The four privilege levels an account can hold.

    Members are declared most-privileged first, so iterating ``Role`` yields
    privilege order. Ordering operators compare privilege, not the string values:
    ``role >= Role.ADMIN`` is a hierarchy check.
    """

    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    TECHNICIAN = "technician"
    USER = "user"

    @property
    def weight(self) -> int:
        """Numeric privilege level; higher is more privileged."""
        return _WEIGHTS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Role):
            return NotImplemented
        return self.weight < other.weight

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Role):
            return NotImplemented
        return self.weight <= other.weight

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Role):
            return NotImplemented
        return self.weight > other.weight

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Role):
            return NotImplemented
        return self.weight >= other.weight

    def outranks(self, other: "Role") -> bool:
        return self.weight > other.weight

    @classmethod
    def parse(cls, value: "Role | str | None") -> "Role | None":
        """Return the matching role, or None for absent, empty or unknown input."""
        if isinstance(value, cls):
            return value
        if not value or not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def parse_strict(cls, value: str) -> "Role":
        """Like parse(), but raise ValidationError instead of returning None."""
        role = cls.parse(value)
        if role is None:
            raise ValidationError(f"Unknown role: {value!r}", field="role")
        return role


_WEIGHTS: dict[Role, int] = {
    Role.SUPER_ADMIN: 3,
    Role.ADMIN: 2,
    Role.TECHNICIAN: 1,
    Role.USER: 0,
}

_DISPLAY_NAMES: dict[Role, str] = {
    Role.SUPER_ADMIN: "ผู้ดูแลระบบสูงสุด",
    Role.ADMIN: "ผู้ดูแลระบบ",
    Role.TECHNICIAN: "ช่างเทคนิค",
    Role.USER: "ผู้ใช้งานทั่วไป",
}


def display_name(role: Role | str | None) -> str:
    """Human-readable label for a role. Unknown input gets the plain-user label."""
    return _DISPLAY_NAMES[Role.parse(role) or Role.USER]
