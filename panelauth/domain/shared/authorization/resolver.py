"""Resolve where a newly created account attaches in the hierarchy."""

import logging

from panelauth.domain.auth.model.decision import REFUSED, AccessDecision
from panelauth.domain.auth.model.role import Role, display_name
from panelauth.domain.shared.authorization.hierarchy import rank_of, role_for_rank

logger = logging.getLogger(__name__)


def resolve(creator_role: "str | Role | None", new_user_role: "str | Role | None") -> AccessDecision:
    """Decide whether creating ``new_user_role`` needs an intermediate parent.

    A creator one rank above the target is the direct parent. When the creator
    skips levels, the new account's parent must be an existing account of the
    role directly above the target (``rank(target) + 1``), not the role
    directly below the creator.

    Creating a peer or superior yields ``REFUSED``. So does an unknown creator
    role, since it ranks lowest; callers still check ``can_access_role``.
    """
    creator_rank = rank_of(creator_role)
    target_rank = rank_of(new_user_role)

    if creator_rank <= target_rank:
        return REFUSED

    skip_level = creator_rank - target_rank
    if skip_level == 1:
        return AccessDecision(is_direct_subordinate=True, upper_role=None, skip_level=1)

    upper_role = role_for_rank(target_rank + 1)
    if upper_role is None:
        logger.warning("No role at rank %d above %r", target_rank + 1, new_user_role)
    return AccessDecision(is_direct_subordinate=False, upper_role=upper_role, skip_level=skip_level)


def selection_title(upper_role: "str | Role") -> str:
    """Heading for the parent picker shown on skip-level creation."""
    return f"Select {display_name(upper_role)}"
