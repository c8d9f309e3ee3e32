"""Tests for account-level resource checks."""

import pytest

from panelauth.domain.auth.model.account import AccountRef
from panelauth.domain.auth.model.identity import Anonymous
from panelauth.domain.auth.model.principal import Principal
from panelauth.domain.shared.authorization.resource import (
    ManagesAccount,
    ResourceCheck,
    account_access_denied,
    manages_account,
)
from panelauth.domain.shared.error import AuthorizationError


class TestManagesAccount:
    def test_is_resource_check(self) -> None:
        assert isinstance(manages_account(), ResourceCheck)
        assert manages_account() == ManagesAccount()

    def test_lower_account_allowed(self) -> None:
        manages_account().evaluate(
            Principal(user_id="m-1", role="MASTER"), AccountRef(id="c-1", role="USER")
        )

    def test_peer_account_denied(self) -> None:
        with pytest.raises(AuthorizationError) as exc_info:
            manages_account().evaluate(
                Principal(user_id="m-1", role="MASTER"), AccountRef(id="m-2", role="MASTER")
            )

        assert exc_info.value.code == "access_denied"

    def test_sub_owner_sees_owner(self) -> None:
        manages_account().evaluate(
            Principal(user_id="so-1", role="SUB_OWNER"), AccountRef(id="o-1", role="OWNER")
        )

    def test_anonymous_rejected(self) -> None:
        with pytest.raises(AuthorizationError) as exc_info:
            manages_account().evaluate(Anonymous(), AccountRef(id="c-1", role="USER"))

        assert exc_info.value.code == "missing_token"

    def test_unknown_account_role_denied(self) -> None:
        with pytest.raises(AuthorizationError) as exc_info:
            manages_account().evaluate(
                Principal(user_id="c-1", role="USER"), AccountRef(id="x-1", role="LEGACY")
            )

        assert exc_info.value.code == "access_denied"

    def test_unknown_account_role_denied_to_owner(self) -> None:
        with pytest.raises(AuthorizationError):
            manages_account().evaluate(
                Principal(user_id="o-1", role="OWNER"), AccountRef(id="x-1", role="LEGACY")
            )

    def test_unknown_account_role_visible_to_sub_owner(self) -> None:
        manages_account().evaluate(
            Principal(user_id="so-1", role="SUB_OWNER"), AccountRef(id="x-1", role="LEGACY")
        )


class TestAccountAccessDenied:
    def test_message_does_not_reveal_account_role(self) -> None:
        error = account_access_denied(Principal(user_id="sb-1", role="SUB"), "ad-1")

        assert error.code == "access_denied"
        assert error.message == "Access denied: Cannot access account 'ad-1' with role 'SUB'"
