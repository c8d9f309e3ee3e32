import pytest

from panelauth.domain.auth.model.account import AccountRef
from panelauth.infrastructure.auth.account_repository import InMemoryAccountRepository


@pytest.fixture
def accounts() -> list[AccountRef]:
    return [
        AccountRef(id="so-1", role="SUB_OWNER", name="Sub Owner"),
        AccountRef(id="sa-1", role="SUPER_ADMIN", parent_id="so-1", name="Zeta", code="SA1"),
        AccountRef(id="ad-2", role="ADMIN", parent_id="sa-1", name="Bravo", code="AD2"),
        AccountRef(id="ad-1", role="ADMIN", parent_id="sa-1", name="Alpha", code="AD1"),
        AccountRef(id="ad-3", role="ADMIN", parent_id="sa-1", name="Closed", is_active=False),
        AccountRef(id="sb-1", role="SUB", parent_id="ad-1", name="Sub One", code="SB1"),
        AccountRef(id="ag-1", role="AGENT", parent_id="sb-1", name="Agent One"),
        AccountRef(id="c-1", role="USER", parent_id="ag-1", name="Client One"),
        AccountRef(id="x-1", role="LEGACY", name="Old Account"),
    ]


@pytest.fixture
def account_repo(accounts: list[AccountRef]) -> InMemoryAccountRepository:
    return InMemoryAccountRepository(accounts)
