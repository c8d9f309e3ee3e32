"""Role hierarchy: the static rank table every authorization check is built on.

Higher rank means more authority. Ranks are unique, so the table is a strict
total order over ``Role``. Anything that is not a known role ranks at
``UNKNOWN_RANK``, below every real role.
"""

import logging
from types import MappingProxyType

from panelauth.domain.auth.model.role import Role

logger = logging.getLogger(__name__)

UNKNOWN_RANK = 0

ROLE_RANKS = MappingProxyType(
    {
        Role.OWNER: 9,
        Role.SUB_OWNER: 8,
        Role.SUPER_ADMIN: 7,
        Role.ADMIN: 6,
        Role.SUB: 5,
        Role.MASTER: 4,
        Role.SUPER_AGENT: 3,
        Role.AGENT: 2,
        Role.USER: 1,
    }
)

_ROLES_BY_RANK = MappingProxyType({rank: role for role, rank in ROLE_RANKS.items()})


def rank_of(role: "str | Role | None") -> int:
    """Return the rank of ``role``, or ``UNKNOWN_RANK`` if it is not a known role.

    Never raises. Unknown input is logged as a warning and treated as least
    privileged.
    """
    parsed = Role.parse(role)
    if parsed is None:
        logger.warning("Invalid role: %r", role)
        return UNKNOWN_RANK
    return ROLE_RANKS[parsed]


def role_for_rank(rank: int) -> Role | None:
    """Return the role occupying ``rank``, or None if no role does."""
    return _ROLES_BY_RANK.get(rank)


def ordered_roles() -> list[Role]:
    """All roles, highest rank first."""
    return sorted(ROLE_RANKS, key=ROLE_RANKS.__getitem__, reverse=True)
