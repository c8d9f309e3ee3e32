"""Role-based filtering of panel navigation menus.

The menu itself (sections, labels, hrefs, icons) is configuration supplied by
the caller; this module only decides which entries a role gets to see.
"""

from collections.abc import Mapping, Sequence

from pydantic import BaseModel

from panelauth.domain.auth.model.role import Role
from panelauth.domain.shared.authorization.access import (
    can_access_restricted_sections,
    can_access_role,
    has_full_access,
)
from panelauth.domain.shared.authorization.hierarchy import UNKNOWN_RANK, rank_of

RESTRICTED_SECTIONS = frozenset({"COMMISSIONS", "OLD DATA", "Login Reports"})


class NavLink(BaseModel):
    """A single menu entry, shown to roles that may manage ``role``."""

    label: str
    href: str
    icon: str = ""
    role: str


Navigation = Mapping[str, Sequence[NavLink]]


def _is_visible(user_role: "str | Role", link: NavLink) -> bool:
    # Links keyed to an unknown role are hidden rather than ranked lowest.
    return Role.parse(link.role) is not None and can_access_role(user_role, link.role)


def filter_navigation(user_role: "str | Role | None", navigation: Navigation) -> dict[str, list[NavLink]]:
    """Return the sections and links visible to ``user_role``.

    Restricted sections are dropped unless the role is on the restricted
    allow-list. Within a section, only links for roles the user may manage
    are kept, and sections left empty are omitted. Unknown roles see nothing,
    and links keyed to an unknown role are shown to the full-access role only.
    """
    if not user_role or rank_of(user_role) == UNKNOWN_RANK:
        return {}

    if has_full_access(user_role):
        return {section: list(links) for section, links in navigation.items()}

    filtered: dict[str, list[NavLink]] = {}
    for section, links in navigation.items():
        if section in RESTRICTED_SECTIONS and not can_access_restricted_sections(user_role):
            continue
        visible = [link for link in links if _is_visible(user_role, link)]
        if visible:
            filtered[section] = visible
    return filtered
