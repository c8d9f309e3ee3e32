"""Role-scoped account listing routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import BaseModel

from panelauth.domain.auth.model.account import AccountRef
from panelauth.domain.auth.query.list_accounts import (
    GetAccount,
    GetAccountHandler,
    ListAccessibleAccounts,
    ListAccessibleAccountsHandler,
    ListAccountsByRole,
    ListAccountsByRoleHandler,
)

router = APIRouter(prefix="/users", tags=["Users"], route_class=DishkaRoute)


class AccountResponse(BaseModel):
    id: str
    role: str
    parent_id: str | None
    name: str | None
    code: str | None
    label: str
    is_active: bool

    @classmethod
    def from_account(cls, account: AccountRef) -> "AccountResponse":
        return cls(
            id=account.id,
            role=account.role,
            parent_id=account.parent_id,
            name=account.name,
            code=account.code,
            label=account.label,
            is_active=account.is_active,
        )


class AccountListResponse(BaseModel):
    success: bool = True
    users: list[AccountResponse]


@router.get("/by-role", response_model=AccountListResponse)
async def list_by_role(
    handler: FromDishka[ListAccountsByRoleHandler],
    role: str = Query(..., description="Role to list active accounts for"),
) -> AccountListResponse:
    result = await handler.run(ListAccountsByRole(role=role))
    return AccountListResponse(users=[AccountResponse.from_account(a) for a in result.accounts])


@router.get("/accessible", response_model=AccountListResponse)
async def list_accessible(
    handler: FromDishka[ListAccessibleAccountsHandler],
) -> AccountListResponse:
    result = await handler.run(ListAccessibleAccounts())
    return AccountListResponse(users=[AccountResponse.from_account(a) for a in result.accounts])


@router.get("/{account_id}", response_model=AccountResponse)
async def get_account(
    account_id: str,
    handler: FromDishka[GetAccountHandler],
) -> AccountResponse:
    result = await handler.run(GetAccount(account_id=account_id))
    return AccountResponse.from_account(result.account)
