"""Page-route access table for the user-management panel."""

from types import MappingProxyType

from panelauth.domain.auth.model.role import Role
from panelauth.domain.shared.authorization.access import has_full_access

# Any route containing one of these fragments is reserved for the full-access role.
RESTRICTED_ROUTE_FRAGMENTS = ("/commissions", "/reports/login-reports", "/old-data")

_ABOVE_SUB = frozenset({Role.SUB_OWNER})
_ABOVE_MASTER = _ABOVE_SUB | {Role.SUB}
_ABOVE_SUPER_AGENT = _ABOVE_MASTER | {Role.MASTER}
_ABOVE_AGENT = _ABOVE_SUPER_AGENT | {Role.SUPER_AGENT}
_ABOVE_USER = _ABOVE_AGENT | {Role.AGENT}
_EVERYONE = _ABOVE_USER | {Role.USER}

# Page slug -> roles allowed to open the user_details / ct / ledger pages for it.
_SLUG_ROLES = {
    "super_admin": _ABOVE_SUB,
    "admin": _ABOVE_SUB,
    "sub_owner": _ABOVE_SUB,
    "sub": _ABOVE_SUB,
    "master": _ABOVE_MASTER,
    "super": _ABOVE_SUPER_AGENT,
    "agent": _ABOVE_AGENT,
    "client": _ABOVE_USER,
}


def _build_route_table() -> dict[str, frozenset[Role]]:
    table: dict[str, frozenset[Role]] = {}
    for page in ("user_details", "ct", "ledger"):
        for slug, roles in _SLUG_ROLES.items():
            table[f"/{page}/{slug}"] = roles
    table["/game/inPlay"] = _EVERYONE
    table["/game/completeGame"] = _EVERYONE
    return table


ROUTE_ACCESS = MappingProxyType(_build_route_table())

# Every route the panel knows about, in menu order.
ALL_ROUTES: tuple[str, ...] = (
    *ROUTE_ACCESS,
    "/reports/login-reports",
    "/commissions",
)


def is_restricted_route(route: str) -> bool:
    return any(fragment in route for fragment in RESTRICTED_ROUTE_FRAGMENTS)


def can_access_route(user_role: "str | Role | None", route: str) -> bool:
    """Check whether ``user_role`` may open ``route``. Unknown routes are denied."""
    if has_full_access(user_role):
        return True
    if is_restricted_route(route):
        return False
    return user_role in ROUTE_ACCESS.get(route, frozenset())


def get_accessible_routes(user_role: "str | Role | None") -> list[str]:
    """Known routes ``user_role`` may open, in menu order."""
    return [route for route in ALL_ROUTES if can_access_route(user_role, route)]
