"""Hierarchy routes for the create-subordinate flow."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import BaseModel

from panelauth.domain.auth.command.resolve_parent import ResolveParent, ResolveParentHandler
from panelauth.domain.auth.query.plan_creation import PlanCreation, PlanCreationHandler

router = APIRouter(prefix="/hierarchy", tags=["Hierarchy"], route_class=DishkaRoute)


class CandidateResponse(BaseModel):
    """Parent-picker option."""

    id: str
    label: str
    value: str
    name: str | None
    code: str | None


class RelationshipResponse(BaseModel):
    role: str
    is_direct_subordinate: bool
    upper_role: str | None
    skip_level: int
    requires_selection: bool
    selection_title: str | None
    candidates: list[CandidateResponse]


class ResolveParentRequest(BaseModel):
    role: str
    parent_id: str | None = None


class ResolveParentResponse(BaseModel):
    role: str
    parent_id: str


@router.get("/relationship", response_model=RelationshipResponse)
async def get_relationship(
    handler: FromDishka[PlanCreationHandler],
    role: str = Query(..., description="Role of the account to be created"),
) -> RelationshipResponse:
    """How an account of ``role`` attaches when the session user creates it."""
    plan = (await handler.run(PlanCreation(role=role))).plan
    decision = plan.decision
    return RelationshipResponse(
        role=plan.role.value,
        is_direct_subordinate=decision.is_direct_subordinate,
        upper_role=decision.upper_role.value if decision.upper_role else None,
        skip_level=decision.skip_level,
        requires_selection=decision.requires_selection,
        selection_title=plan.selection_title,
        candidates=[
            CandidateResponse(id=a.id, label=a.label, value=a.id, name=a.name, code=a.code)
            for a in plan.candidates
        ],
    )


@router.post("/parent", response_model=ResolveParentResponse)
async def resolve_parent(
    body: ResolveParentRequest,
    handler: FromDishka[ResolveParentHandler],
) -> ResolveParentResponse:
    """Validate the chosen parent and return the id the new account goes under."""
    result = await handler.run(ResolveParent(role=body.role, parent_id=body.parent_id))
    return ResolveParentResponse(role=result.role, parent_id=result.parent_id)
