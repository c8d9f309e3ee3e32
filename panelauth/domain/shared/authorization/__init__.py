"""Role-hierarchy authorization: rank table, predicates, resolver and gates."""

from .access import (
    can_access_feature,
    can_access_restricted_sections,
    can_access_role,
    can_access_user_data,
    filter_accessible_users,
    get_accessible_roles,
    list_accessible_roles,
)
from .hierarchy import UNKNOWN_RANK, rank_of, role_for_rank
from .resolver import resolve
from .routes import can_access_route, get_accessible_routes

__all__ = [
    "UNKNOWN_RANK",
    "can_access_feature",
    "can_access_restricted_sections",
    "can_access_role",
    "can_access_route",
    "can_access_user_data",
    "filter_accessible_users",
    "get_accessible_roles",
    "get_accessible_routes",
    "list_accessible_roles",
    "rank_of",
    "resolve",
    "role_for_rank",
]
