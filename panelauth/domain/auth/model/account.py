"""AccountRef — read-only view of a platform account owned by an external store."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AccountRef:
    """An agent or client in the account tree.

    ``role`` is kept as the raw stored string so that unknown roles reach the
    policy functions and fail closed there.
    """

    id: str
    role: str
    parent_id: str | None = None
    name: str | None = None
    code: str | None = None
    is_active: bool = True

    @property
    def label(self) -> str:
        """Picker label: ``"<code> <name>"``, skipping missing parts."""
        return " ".join(part for part in (self.code, self.name) if part) or self.id
