"""Point checks: may the session user use a feature or open a route."""

from panelauth.domain.auth.model.principal import Principal
from panelauth.domain.shared.authorization.policy import (
    authenticated,
    requires_feature,
    restricted_sections,
)
from panelauth.domain.shared.authorization.routes import can_access_route, is_restricted_route
from panelauth.domain.shared.query import Query, QueryHandler
from panelauth.domain.shared.query import Result as QueryResult


class CheckFeatureAccess(Query):
    feature: str


class CheckRouteAccess(Query):
    path: str


class AccessCheckResult(QueryResult):
    subject: str
    allowed: bool


class CheckFeatureAccessHandler(QueryHandler[CheckFeatureAccess, AccessCheckResult]):
    __auth__ = authenticated()
    principal: Principal

    async def run(self, query: CheckFeatureAccess) -> AccessCheckResult:
        return AccessCheckResult(
            subject=query.feature,
            allowed=requires_feature(query.feature).evaluate(self.principal),
        )


class CheckRouteAccessHandler(QueryHandler[CheckRouteAccess, AccessCheckResult]):
    __auth__ = authenticated()
    principal: Principal

    async def run(self, query: CheckRouteAccess) -> AccessCheckResult:
        if is_restricted_route(query.path):
            allowed = restricted_sections().evaluate(self.principal)
        else:
            allowed = can_access_route(self.principal.role, query.path)
        return AccessCheckResult(subject=query.path, allowed=allowed)
