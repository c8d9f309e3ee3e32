"""Tests for AccessService."""

import pytest

from panelauth.domain.auth.model.principal import Principal
from panelauth.domain.auth.model.role import Role
from panelauth.domain.auth.service.access import AccessService
from panelauth.domain.shared.authorization.navigation import NavLink
from panelauth.infrastructure.auth.account_repository import InMemoryAccountRepository

NAVIGATION = {
    "USER DETAILS": [
        NavLink(label="Admin", href="/user_details/admin", role="ADMIN"),
        NavLink(label="Client", href="/user_details/client", role="USER"),
    ],
    "COMMISSIONS": [NavLink(label="Commissions", href="/commissions", role="USER")],
}


@pytest.fixture
def service(account_repo: InMemoryAccountRepository) -> AccessService:
    return AccessService(_account_repo=account_repo, _navigation=NAVIGATION)


class TestSummarize:
    @pytest.mark.asyncio
    async def test_sub_summary(self, service: AccessService) -> None:
        access = await service.summarize(Principal(user_id="sb-1", role="SUB"))

        assert access.accessible_roles == [Role.MASTER, Role.SUPER_AGENT, Role.AGENT, Role.USER]
        assert list(access.navigation) == ["USER DETAILS"]
        assert [link.label for link in access.navigation["USER DETAILS"]] == ["Client"]
        assert [a.id for a in access.accessible_users_by_role["AGENT"]] == ["ag-1"]
        assert access.accessible_users_by_role["MASTER"] == []

    @pytest.mark.asyncio
    async def test_feature_map_covers_every_feature(self, service: AccessService) -> None:
        access = await service.summarize(Principal(user_id="ad-1", role="ADMIN"))

        assert access.feature_access["super_admin_management"] is True
        assert access.feature_access["admin_management"] is False
        assert len(access.feature_access) == 9

    @pytest.mark.asyncio
    async def test_sub_owner_summary(self, service: AccessService) -> None:
        access = await service.summarize(Principal(user_id="so-1", role="SUB_OWNER"))

        assert len(access.accessible_roles) == 9
        assert "COMMISSIONS" in access.navigation
        assert all(access.feature_access.values())

    @pytest.mark.asyncio
    async def test_users_by_role_only_active(self, service: AccessService) -> None:
        access = await service.summarize(Principal(user_id="sa-1", role="SUPER_ADMIN"))

        assert [a.id for a in access.accessible_users_by_role["ADMIN"]] == ["ad-1", "ad-2"]

    @pytest.mark.asyncio
    async def test_unknown_role_gets_empty_view(self, service: AccessService) -> None:
        access = await service.summarize(Principal(user_id="x-1", role="LEGACY"))

        assert access.accessible_roles == []
        assert access.navigation == {}
        assert access.accessible_users_by_role == {}


class TestListAccessibleAccounts:
    @pytest.mark.asyncio
    async def test_filters_and_keeps_storage_order(self, service: AccessService) -> None:
        accounts = await service.list_accessible_accounts(Principal(user_id="sb-1", role="SUB"))

        assert [a.id for a in accounts] == ["ag-1", "c-1"]

    @pytest.mark.asyncio
    async def test_unknown_account_roles_dropped(self, service: AccessService) -> None:
        accounts = await service.list_accessible_accounts(Principal(user_id="sa-1", role="SUPER_ADMIN"))

        assert "x-1" not in {a.id for a in accounts}

    @pytest.mark.asyncio
    async def test_sub_owner_sees_all(self, service: AccessService, accounts: list) -> None:
        result = await service.list_accessible_accounts(Principal(user_id="so-1", role="SUB_OWNER"))

        assert result == accounts


class TestListAccountsByRole:
    @pytest.mark.asyncio
    async def test_sorted_by_name(self, service: AccessService) -> None:
        admins = await service.list_accounts_by_role(Role.ADMIN)

        assert [a.name for a in admins] == ["Alpha", "Bravo"]
