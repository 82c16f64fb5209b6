"""Authorization actions: every account operation subject to access control."""

from enum import StrEnum

from roleguard.domain.shared.error import ValidationError


class Action(StrEnum):
    """Closed set of operations an actor can attempt on another account."""

    CREATE = "create"
    EDIT_PROFILE = "edit-profile"
    EDIT_ROLE = "edit-role"
    DELETE = "delete"
    VIEW = "view"

    @classmethod
    def parse(cls, value: "Action | str | None") -> "Action | None":
        """Return the matching action, or None for absent, empty or unknown input."""
        if isinstance(value, cls):
            return value
        if not value or not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def parse_strict(cls, value: str) -> "Action":
        action = cls.parse(value)
        if action is None:
            raise ValidationError(f"Unknown action: {value!r}", field="action")
        return action
