"""Repository port for reading platform accounts."""

from abc import abstractmethod
from typing import Protocol

from panelauth.domain.auth.model.account import AccountRef
from panelauth.domain.auth.model.role import Role


class AccountRepository(Protocol):
    """Read access to the external account store. The core never writes."""

    @abstractmethod
    async def get(self, account_id: str) -> AccountRef | None:
        """Get an account by id."""
        ...

    @abstractmethod
    async def list_by_role(self, role: Role, active_only: bool = True) -> list[AccountRef]:
        """List accounts holding ``role``, ordered by name."""
        ...

    @abstractmethod
    async def list_all(self) -> list[AccountRef]:
        """List every account in storage order."""
        ...
