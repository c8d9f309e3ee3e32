"""Role-scoped account listing queries."""

from panelauth.domain.auth.model.account import AccountRef
from panelauth.domain.auth.model.principal import Principal
from panelauth.domain.auth.model.role import Role
from panelauth.domain.auth.port.account_repository import AccountRepository
from panelauth.domain.auth.service.access import AccessService
from panelauth.domain.shared.authorization.access import has_full_access
from panelauth.domain.shared.authorization.policy import authenticated, can_manage
from panelauth.domain.shared.authorization.resource import account_access_denied, manages_account
from panelauth.domain.shared.error import AuthorizationError, NotFoundError, ValidationError
from panelauth.domain.shared.query import Query, QueryHandler
from panelauth.domain.shared.query import Result as QueryResult


class ListAccountsByRole(Query):
    role: str


class ListAccessibleAccounts(Query):
    pass


class GetAccount(Query):
    account_id: str


class AccountListResult(QueryResult):
    accounts: list[AccountRef]


class AccountResult(QueryResult):
    account: AccountRef


class ListAccountsByRoleHandler(QueryHandler[ListAccountsByRole, AccountListResult]):
    __auth__ = authenticated()
    principal: Principal
    access_service: AccessService

    async def run(self, query: ListAccountsByRole) -> AccountListResult:
        role = Role.parse(query.role)
        if role is None:
            raise ValidationError(f"Unknown role '{query.role}'", field="role")

        policy = can_manage(role)
        if not policy.evaluate(self.principal):
            raise AuthorizationError(
                f"Access denied: Cannot access role '{role}' with role '{self.principal.role}'",
                code="access_denied",
            )

        return AccountListResult(accounts=await self.access_service.list_accounts_by_role(role))


class ListAccessibleAccountsHandler(QueryHandler[ListAccessibleAccounts, AccountListResult]):
    __auth__ = authenticated()
    principal: Principal
    access_service: AccessService

    async def run(self, query: ListAccessibleAccounts) -> AccountListResult:
        accounts = await self.access_service.list_accessible_accounts(self.principal)
        return AccountListResult(accounts=accounts)


class GetAccountHandler(QueryHandler[GetAccount, AccountResult]):
    __auth__ = authenticated()
    principal: Principal
    account_repo: AccountRepository

    async def run(self, query: GetAccount) -> AccountResult:
        account = await self.account_repo.get(query.account_id)
        if account is None:
            # Only the full-access role learns whether an id exists.
            if not has_full_access(self.principal.role):
                raise account_access_denied(self.principal, query.account_id)
            raise NotFoundError(f"Account {query.account_id} not found", code="account_not_found")
        manages_account().evaluate(self.principal, account)
        return AccountResult(account=account)
