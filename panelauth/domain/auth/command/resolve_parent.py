"""ResolveParent command and handler."""

from panelauth.domain.auth.model.principal import Principal
from panelauth.domain.auth.service.hierarchy import HierarchyService
from panelauth.domain.shared.authorization.policy import authenticated
from panelauth.domain.shared.command import Command, CommandHandler, Result


class ResolveParent(Command):
    """Pick the parent for a new account of ``role`` created by the session user."""

    role: str
    parent_id: str | None = None


class ResolveParentResult(Result):
    role: str
    parent_id: str


class ResolveParentHandler(CommandHandler[ResolveParent, ResolveParentResult]):
    __auth__ = authenticated()
    principal: Principal
    hierarchy_service: HierarchyService

    async def run(self, cmd: ResolveParent) -> ResolveParentResult:
        parent_id = await self.hierarchy_service.resolve_parent(
            self.principal, cmd.role, cmd.parent_id
        )
        return ResolveParentResult(role=cmd.role, parent_id=parent_id)
