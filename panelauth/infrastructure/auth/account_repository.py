"""In-memory account repository."""

from collections.abc import Iterable

from panelauth.domain.auth.model.account import AccountRef
from panelauth.domain.auth.model.role import Role
from panelauth.domain.auth.port.account_repository import AccountRepository


class InMemoryAccountRepository(AccountRepository):
    """Account store held in process memory.

    Populated from configuration at startup; accounts are immutable once loaded.
    """

    def __init__(self, accounts: Iterable[AccountRef] = ()) -> None:
        self._accounts: dict[str, AccountRef] = {a.id: a for a in accounts}

    async def get(self, account_id: str) -> AccountRef | None:
        return self._accounts.get(account_id)

    async def list_by_role(self, role: Role, active_only: bool = True) -> list[AccountRef]:
        matches = [
            a
            for a in self._accounts.values()
            if a.role == role and (a.is_active or not active_only)
        ]
        return sorted(matches, key=lambda a: (a.name is None, a.name or ""))

    async def list_all(self) -> list[AccountRef]:
        return list(self._accounts.values())
