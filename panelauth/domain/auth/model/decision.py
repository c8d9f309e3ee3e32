"""AccessDecision — outcome of resolving a create-subordinate request."""

from dataclasses import dataclass

from panelauth.domain.auth.model.role import Role


@dataclass(frozen=True)
class AccessDecision:
    """Whether a new account hangs directly under its creator.

    When ``upper_role`` is set, the caller must pick an existing account of
    that role to become the new account's parent. A decision with every field
    falsy means creation was refused, or one of the roles was unknown; the two
    cases are indistinguishable here, so callers check ``can_access_role``
    before acting on it.
    """

    is_direct_subordinate: bool
    upper_role: Role | None
    skip_level: int

    @property
    def requires_selection(self) -> bool:
        return self.upper_role is not None


REFUSED = AccessDecision(is_direct_subordinate=False, upper_role=None, skip_level=0)
