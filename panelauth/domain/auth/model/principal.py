"""Principal — authenticated session user, resolved per-request."""

from dataclasses import dataclass

from panelauth.domain.auth.model.identity import Identity


@dataclass(frozen=True)
class Principal(Identity):
    """The authenticated identity of the current requester.

    Resolved per-request from a verified session token. ``role`` is the raw
    string carried by the session; an unrecognised value simply ranks lowest.
    """

    user_id: str
    role: str

    def can_manage(self, role: str) -> bool:
        """Check whether this principal may manage accounts of ``role``."""
        from panelauth.domain.shared.authorization.access import can_access_role

        return can_access_role(self.role, role)
