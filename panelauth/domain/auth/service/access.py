"""Access service — the role-access summary a panel loads after login."""

import logging
from dataclasses import dataclass

from pydantic import BaseModel

from panelauth.domain.auth.model.account import AccountRef
from panelauth.domain.auth.model.feature import Feature
from panelauth.domain.auth.model.principal import Principal
from panelauth.domain.auth.model.role import Role
from panelauth.domain.auth.port.account_repository import AccountRepository
from panelauth.domain.shared.authorization.access import (
    can_access_feature,
    filter_accessible_users,
    list_accessible_roles,
)
from panelauth.domain.shared.authorization.navigation import NavLink, Navigation, filter_navigation

logger = logging.getLogger(__name__)


class RoleAccess(BaseModel):
    """Everything a panel needs to decide what to show the session user."""

    accessible_roles: list[Role]
    navigation: dict[str, list[NavLink]]
    feature_access: dict[str, bool]
    accessible_users_by_role: dict[str, list[AccountRef]]


@dataclass
class AccessService:
    """Builds role-scoped views over the account store."""

    _account_repo: AccountRepository
    _navigation: Navigation

    async def summarize(self, principal: Principal) -> RoleAccess:
        accessible_roles = list_accessible_roles(principal.role)

        users_by_role: dict[str, list[AccountRef]] = {}
        for role in accessible_roles:
            users_by_role[role.value] = await self._account_repo.list_by_role(role)

        logger.debug(
            "Role access for user_id=%s role=%s: %d accessible roles",
            principal.user_id,
            principal.role,
            len(accessible_roles),
        )
        return RoleAccess(
            accessible_roles=accessible_roles,
            navigation=filter_navigation(principal.role, self._navigation),
            feature_access={
                feature.value: can_access_feature(principal.role, feature) for feature in Feature
            },
            accessible_users_by_role=users_by_role,
        )

    async def list_accessible_accounts(self, principal: Principal) -> list[AccountRef]:
        """Every stored account the principal may manage, in storage order."""
        return filter_accessible_users(principal.role, await self._account_repo.list_all())

    async def list_accounts_by_role(self, role: Role) -> list[AccountRef]:
        """Active accounts of ``role``, ordered by name."""
        return await self._account_repo.list_by_role(role, active_only=True)
