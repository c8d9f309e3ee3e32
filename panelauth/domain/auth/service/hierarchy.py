"""Hierarchy service — planning where a new account attaches in the tree."""

import logging
from dataclasses import dataclass

from pydantic import BaseModel

from panelauth.domain.auth.model.account import AccountRef
from panelauth.domain.auth.model.decision import AccessDecision
from panelauth.domain.auth.model.principal import Principal
from panelauth.domain.auth.model.role import Role
from panelauth.domain.auth.port.account_repository import AccountRepository
from panelauth.domain.shared.authorization.resolver import resolve, selection_title
from panelauth.domain.shared.error import AuthorizationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class CreationPlan(BaseModel):
    """How an account of ``role`` gets its parent when ``principal`` creates it.

    ``candidates`` lists the active accounts the creator must pick from when
    ``decision.requires_selection`` is true; it is empty otherwise.
    """

    role: Role
    decision: AccessDecision
    selection_title: str | None = None
    candidates: list[AccountRef] = []


@dataclass
class HierarchyService:
    """Validates create-subordinate requests against the role hierarchy."""

    _account_repo: AccountRepository

    def decide(self, principal: Principal, target_role: str) -> tuple[Role, AccessDecision]:
        """Resolve the creation decision, rejecting requests the creator may not make.

        Raises:
            ValidationError: ``target_role`` is not a known role.
            AuthorizationError: the creator may not manage or create ``target_role``.
        """
        role = Role.parse(target_role)
        if role is None:
            raise ValidationError(f"Unknown role '{target_role}'", field="role")

        if not principal.can_manage(role):
            raise AuthorizationError(
                f"Access denied: Cannot access role '{role}' with role '{principal.role}'",
                code="access_denied",
            )

        decision = resolve(principal.role, role)
        if decision.skip_level == 0:
            # Reachable for the full-access role creating a peer or superior.
            raise AuthorizationError(
                f"Role '{principal.role}' cannot create accounts of role '{role}'",
                code="cannot_create",
            )
        return role, decision

    async def plan_creation(self, principal: Principal, target_role: str) -> CreationPlan:
        role, decision = self.decide(principal, target_role)

        if decision.upper_role is None:
            return CreationPlan(role=role, decision=decision)

        candidates = await self._account_repo.list_by_role(decision.upper_role, active_only=True)
        logger.info(
            "Skip-level creation: creator=%s role=%s skip_level=%d parent_role=%s candidates=%d",
            principal.user_id,
            role,
            decision.skip_level,
            decision.upper_role,
            len(candidates),
        )
        return CreationPlan(
            role=role,
            decision=decision,
            selection_title=selection_title(decision.upper_role),
            candidates=candidates,
        )

    async def resolve_parent(
        self,
        principal: Principal,
        target_role: str,
        parent_id: str | None = None,
    ) -> str:
        """Return the parent id the new account must be created under.

        Direct subordinates hang under the creator and ``parent_id`` is
        ignored. Skip-level creation requires ``parent_id`` to name an active
        account of the decision's upper role.
        """
        role, decision = self.decide(principal, target_role)

        if decision.is_direct_subordinate:
            return principal.user_id

        upper_role = decision.upper_role
        if upper_role is None:
            raise ValidationError(f"No parent role exists above '{role}'", field="role")

        if not parent_id:
            raise ValidationError(selection_title(upper_role), field="parent_id")

        parent = await self._account_repo.get(parent_id)
        if parent is None:
            raise NotFoundError(f"Parent account {parent_id} not found", code="parent_not_found")

        if parent.role != upper_role:
            raise ValidationError(
                f"Parent of a {role.display_name} must be a {upper_role.display_name}, "
                f"got role '{parent.role}'",
                field="parent_id",
            )
        if not parent.is_active:
            raise ValidationError(f"Parent account {parent_id} is inactive", field="parent_id")

        return parent.id
