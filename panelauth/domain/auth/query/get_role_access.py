"""GetRoleAccess query and handler."""

from panelauth.domain.auth.model.principal import Principal
from panelauth.domain.auth.service.access import AccessService, RoleAccess
from panelauth.domain.shared.authorization.policy import authenticated
from panelauth.domain.shared.query import Query, QueryHandler
from panelauth.domain.shared.query import Result as QueryResult


class GetRoleAccess(Query):
    """Query for the session user's role-access summary."""


class GetRoleAccessResult(QueryResult):
    user_id: str
    role: str
    access: RoleAccess


class GetRoleAccessHandler(QueryHandler[GetRoleAccess, GetRoleAccessResult]):
    __auth__ = authenticated()
    principal: Principal
    access_service: AccessService

    async def run(self, query: GetRoleAccess) -> GetRoleAccessResult:
        return GetRoleAccessResult(
            user_id=self.principal.user_id,
            role=self.principal.role,
            access=await self.access_service.summarize(self.principal),
        )
