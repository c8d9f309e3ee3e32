"""Feature keys and the minimum role each one is keyed to."""

from enum import StrEnum
from types import MappingProxyType

from panelauth.domain.auth.model.role import Role


class Feature(StrEnum):
    """Panel features gated by role."""

    LOGIN_REPORTS = "login_reports"
    SUPER_ADMIN_MANAGEMENT = "super_admin_management"
    ADMIN_MANAGEMENT = "admin_management"
    SUB_OWNER_MANAGEMENT = "sub_owner_management"
    SUB_MANAGEMENT = "sub_management"
    MASTER_MANAGEMENT = "master_management"
    SUPER_AGENT_MANAGEMENT = "super_agent_management"
    AGENT_MANAGEMENT = "agent_management"
    CLIENT_MANAGEMENT = "client_management"


FEATURE_MIN_ROLE = MappingProxyType(
    {
        Feature.LOGIN_REPORTS: Role.ADMIN,
        Feature.SUPER_ADMIN_MANAGEMENT: Role.SUPER_ADMIN,
        Feature.ADMIN_MANAGEMENT: Role.ADMIN,
        Feature.SUB_OWNER_MANAGEMENT: Role.SUB_OWNER,
        Feature.SUB_MANAGEMENT: Role.SUB,
        Feature.MASTER_MANAGEMENT: Role.MASTER,
        Feature.SUPER_AGENT_MANAGEMENT: Role.SUPER_AGENT,
        Feature.AGENT_MANAGEMENT: Role.AGENT,
        Feature.CLIENT_MANAGEMENT: Role.USER,
    }
)
