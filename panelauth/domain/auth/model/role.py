"""Panel roles, highest authority first."""

from enum import StrEnum


class Role(StrEnum):
    """Closed set of account roles in the panel hierarchy.

    Ranks live in ``panelauth.domain.shared.authorization.hierarchy``; member
    order here matches rank order (OWNER highest, USER lowest).
    """

    OWNER = "OWNER"
    SUB_OWNER = "SUB_OWNER"
    SUPER_ADMIN = "SUPER_ADMIN"
    ADMIN = "ADMIN"
    SUB = "SUB"
    MASTER = "MASTER"
    SUPER_AGENT = "SUPER_AGENT"
    AGENT = "AGENT"
    USER = "USER"

    @classmethod
    def parse(cls, value: "str | Role | None") -> "Role | None":
        """Look up a role by its exact identifier. Returns None if unknown."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: dict[Role, str] = {
    Role.OWNER: "Owner",
    Role.SUB_OWNER: "Sub Owner",
    Role.SUPER_ADMIN: "Super Admin",
    Role.ADMIN: "Admin",
    Role.SUB: "Sub Admin",
    Role.MASTER: "Master",
    Role.SUPER_AGENT: "Super Agent",
    Role.AGENT: "Agent",
    Role.USER: "Client",
}


def display_name(role: str) -> str:
    """Human-readable name for a role string; unknown strings are returned as-is."""
    parsed = Role.parse(role)
    return parsed.display_name if parsed is not None else role
