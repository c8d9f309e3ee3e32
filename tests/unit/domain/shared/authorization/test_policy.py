"""Tests for composable handler policies."""

from panelauth.domain.auth.model.feature import Feature
from panelauth.domain.auth.model.principal import Principal
from panelauth.domain.auth.model.role import Role
from panelauth.domain.shared.authorization.policy import (
    AllOf,
    AnyOf,
    Authenticated,
    CanManageRole,
    Not,
    Policy,
    authenticated,
    can_manage,
    requires_feature,
    restricted_sections,
)


def _principal(role: str) -> Principal:
    return Principal(user_id="u-1", role=role)


class TestAuthenticated:
    def test_any_principal_passes(self) -> None:
        assert authenticated().evaluate(_principal("USER")) is True
        assert authenticated().evaluate(_principal("NOT_A_ROLE")) is True

    def test_singleton(self) -> None:
        assert authenticated() is authenticated()
        assert isinstance(authenticated(), Authenticated)


class TestCanManageRole:
    def test_outranking_principal_passes(self) -> None:
        assert can_manage(Role.AGENT).evaluate(_principal("MASTER")) is True

    def test_peer_fails_by_default(self) -> None:
        assert can_manage(Role.AGENT).evaluate(_principal("AGENT")) is False

    def test_peer_passes_with_allow_same_role(self) -> None:
        assert can_manage(Role.AGENT, allow_same_role=True).evaluate(_principal("AGENT")) is True

    def test_lower_fails_even_with_allow_same_role(self) -> None:
        assert can_manage(Role.AGENT, allow_same_role=True).evaluate(_principal("USER")) is False

    def test_sub_owner_bypass(self) -> None:
        assert can_manage(Role.OWNER).evaluate(_principal("SUB_OWNER")) is True

    def test_equality_and_hash(self) -> None:
        assert can_manage(Role.ADMIN) == CanManageRole(role=Role.ADMIN)
        assert hash(can_manage(Role.ADMIN)) == hash(CanManageRole(role=Role.ADMIN))
        assert can_manage(Role.ADMIN) != can_manage(Role.SUB)


class TestRequiresFeature:
    def test_uses_feature_table(self) -> None:
        policy = requires_feature(Feature.SUPER_ADMIN_MANAGEMENT)

        assert policy.evaluate(_principal("ADMIN")) is True
        assert policy.evaluate(_principal("SUPER_ADMIN")) is False

    def test_unknown_feature_denied(self) -> None:
        assert requires_feature("bogus").evaluate(_principal("ADMIN")) is False

    def test_describe(self) -> None:
        assert requires_feature(Feature.LOGIN_REPORTS).describe() == "feature 'login_reports'"


class TestRestrictedSectionsPolicy:
    def test_only_sub_owner(self) -> None:
        assert restricted_sections().evaluate(_principal("SUB_OWNER")) is True
        assert restricted_sections().evaluate(_principal("OWNER")) is False


class TestComposition:
    def test_and(self) -> None:
        policy = can_manage(Role.AGENT) & can_manage(Role.MASTER)

        assert isinstance(policy, AllOf)
        assert policy.evaluate(_principal("SUB")) is True
        assert policy.evaluate(_principal("SUPER_AGENT")) is False

    def test_or(self) -> None:
        policy = restricted_sections() | can_manage(Role.ADMIN)

        assert isinstance(policy, AnyOf)
        assert policy.evaluate(_principal("SUPER_ADMIN")) is True
        assert policy.evaluate(_principal("SUB_OWNER")) is True
        assert policy.evaluate(_principal("ADMIN")) is False

    def test_not(self) -> None:
        policy = ~restricted_sections()

        assert isinstance(policy, Not)
        assert policy.evaluate(_principal("OWNER")) is True
        assert policy.evaluate(_principal("SUB_OWNER")) is False

    def test_composites_are_policies(self) -> None:
        assert isinstance(authenticated() & restricted_sections(), Policy)

    def test_describe_joins_parts(self) -> None:
        policy = can_manage(Role.AGENT) & restricted_sections()

        assert policy.describe() == "role 'AGENT' and restricted sections"
        assert (~restricted_sections()).describe() == "not restricted sections"
