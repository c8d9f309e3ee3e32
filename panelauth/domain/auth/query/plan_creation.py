"""PlanCreation query and handler."""

from panelauth.domain.auth.model.principal import Principal
from panelauth.domain.auth.service.hierarchy import CreationPlan, HierarchyService
from panelauth.domain.shared.authorization.policy import authenticated
from panelauth.domain.shared.query import Query, QueryHandler
from panelauth.domain.shared.query import Result as QueryResult


class PlanCreation(Query):
    """Query how an account of ``role`` would attach if the session user created it."""

    role: str


class PlanCreationResult(QueryResult):
    plan: CreationPlan


class PlanCreationHandler(QueryHandler[PlanCreation, PlanCreationResult]):
    # Per-role permission is enforced by the service once the role is known.
    __auth__ = authenticated()
    principal: Principal
    hierarchy_service: HierarchyService

    async def run(self, query: PlanCreation) -> PlanCreationResult:
        plan = await self.hierarchy_service.plan_creation(self.principal, query.role)
        return PlanCreationResult(plan=plan)
