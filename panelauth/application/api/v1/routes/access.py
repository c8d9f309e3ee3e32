"""Role-access routes: what the session user may see and do."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import BaseModel

from panelauth.domain.auth.model.account import AccountRef
from panelauth.domain.auth.query.check_access import (
    CheckFeatureAccess,
    CheckFeatureAccessHandler,
    CheckRouteAccess,
    CheckRouteAccessHandler,
)
from panelauth.domain.auth.query.get_role_access import GetRoleAccess, GetRoleAccessHandler
from panelauth.domain.shared.authorization.navigation import NavLink

router = APIRouter(prefix="/auth", tags=["Access"], route_class=DishkaRoute)


class SessionUserResponse(BaseModel):
    id: str
    role: str


class AccessResponse(BaseModel):
    accessible_roles: list[str]
    navigation: dict[str, list[NavLink]]
    feature_access: dict[str, bool]
    accessible_users_by_role: dict[str, list[AccountRef]]


class RoleAccessResponse(BaseModel):
    success: bool = True
    user: SessionUserResponse
    access: AccessResponse


class FeatureAccessResponse(BaseModel):
    feature: str
    allowed: bool


class RouteAccessResponse(BaseModel):
    path: str
    allowed: bool


@router.get("/role-access", response_model=RoleAccessResponse)
async def get_role_access(handler: FromDishka[GetRoleAccessHandler]) -> RoleAccessResponse:
    """Accessible roles, navigation, feature flags and reachable accounts."""
    result = await handler.run(GetRoleAccess())
    return RoleAccessResponse(
        user=SessionUserResponse(id=result.user_id, role=result.role),
        access=AccessResponse(
            accessible_roles=[role.value for role in result.access.accessible_roles],
            navigation=result.access.navigation,
            feature_access=result.access.feature_access,
            accessible_users_by_role=result.access.accessible_users_by_role,
        ),
    )


@router.get("/features/{feature}", response_model=FeatureAccessResponse)
async def check_feature(
    feature: str,
    handler: FromDishka[CheckFeatureAccessHandler],
) -> FeatureAccessResponse:
    result = await handler.run(CheckFeatureAccess(feature=feature))
    return FeatureAccessResponse(feature=result.subject, allowed=result.allowed)


@router.get("/routes", response_model=RouteAccessResponse)
async def check_route(
    handler: FromDishka[CheckRouteAccessHandler],
    path: str = Query(..., description="Panel route, e.g. /ledger/agent"),
) -> RouteAccessResponse:
    result = await handler.run(CheckRouteAccess(path=path))
    return RouteAccessResponse(path=result.subject, allowed=result.allowed)
