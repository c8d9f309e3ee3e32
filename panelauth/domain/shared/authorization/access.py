"""Access predicates over the role hierarchy.

Every function here is pure and fails closed: unknown roles rank lowest and
unknown features are denied. ``SUB_OWNER`` is a named bypass checked before
any rank comparison; it is not modelled as a rank.
"""

from collections.abc import Iterable

from panelauth.domain.auth.model.account import AccountRef
from panelauth.domain.auth.model.feature import FEATURE_MIN_ROLE, Feature
from panelauth.domain.auth.model.role import Role
from panelauth.domain.shared.authorization.hierarchy import ROLE_RANKS, ordered_roles, rank_of

# Bypasses every rank-based predicate.
FULL_ACCESS_ROLE = Role.SUB_OWNER

# Closed allow-list for commissions, old data and login reports.
RESTRICTED_SECTION_ROLES = frozenset({Role.SUB_OWNER})


def has_full_access(user_role: "str | Role | None") -> bool:
    return user_role == FULL_ACCESS_ROLE


def can_access_role(user_role: "str | Role | None", target_role: "str | Role | None") -> bool:
    """Check whether ``user_role`` may manage accounts of ``target_role``.

    Only strictly lower roles qualify; peers and superiors are always denied.
    An unknown target ranks lowest, so any known role may manage it.
    """
    if has_full_access(user_role):
        return True
    return rank_of(target_role) < rank_of(user_role)


def can_access_user_data(
    requesting_role: "str | Role | None", target_role: "str | Role | None"
) -> bool:
    """Check whether ``requesting_role`` may read data of an account with ``target_role``."""
    return can_access_role(requesting_role, target_role)


def get_accessible_roles(user_role: "str | Role | None") -> frozenset[Role]:
    """Roles that ``user_role`` may manage: every role ranked strictly below it."""
    if has_full_access(user_role):
        return frozenset(ROLE_RANKS)
    user_rank = rank_of(user_role)
    return frozenset(role for role, rank in ROLE_RANKS.items() if rank < user_rank)


def list_accessible_roles(user_role: "str | Role | None") -> list[Role]:
    """Same as ``get_accessible_roles``, highest rank first."""
    accessible = get_accessible_roles(user_role)
    return [role for role in ordered_roles() if role in accessible]


def can_access_feature(user_role: "str | Role | None", feature: "str | Feature") -> bool:
    """Check whether ``user_role`` may use ``feature``.

    Compares the feature's minimum role against the user: allowed only when
    the minimum role ranks strictly above the user. Features keyed to a low
    minimum role are therefore reachable through the ``SUB_OWNER`` bypass
    alone.
    """
    if has_full_access(user_role):
        return True
    try:
        min_role = FEATURE_MIN_ROLE[Feature(feature)]
    except ValueError:
        return False
    return rank_of(min_role) > rank_of(user_role)


def can_access_restricted_sections(user_role: "str | Role | None") -> bool:
    """Check membership of the restricted-sections allow-list. No rank comparison."""
    return user_role in RESTRICTED_SECTION_ROLES


def filter_accessible_users(
    user_role: "str | Role | None", users: Iterable[AccountRef]
) -> list[AccountRef]:
    """Keep the accounts ``user_role`` may manage, preserving input order.

    Accounts whose stored role is not a known role are dropped.
    """
    if has_full_access(user_role):
        return list(users)
    accessible = get_accessible_roles(user_role)
    return [user for user in users if Role.parse(user.role) in accessible]
