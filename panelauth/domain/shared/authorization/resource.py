"""Resource-level authorization checks on individual accounts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from panelauth.domain.auth.model.role import Role
from panelauth.domain.shared.authorization.access import can_access_user_data, has_full_access

if TYPE_CHECKING:
    from panelauth.domain.auth.model.account import AccountRef
    from panelauth.domain.auth.model.principal import Principal
    from panelauth.domain.shared.error import AuthorizationError


class ResourceCheck(ABC):
    """Base class for resource-level authorization checks.

    Anonymous identities are rejected. Principals are checked via the
    abstract _check method.
    """

    def evaluate(self, identity: Any, resource: Any) -> None:
        """Evaluate the check against the given identity and resource.

        Raises AuthorizationError if access is denied.
        """
        from panelauth.domain.auth.model.principal import Principal
        from panelauth.domain.shared.error import AuthorizationError

        if not isinstance(identity, Principal):
            raise AuthorizationError("Authentication required", code="missing_token")

        self._check(identity, resource)

    @abstractmethod
    def _check(self, principal: "Principal", resource: Any) -> None:
        """Check authorization for an authenticated principal.

        Raises:
            AuthorizationError: If principal is not authorized for this resource.
        """
        ...


@dataclass(frozen=True)
class ManagesAccount(ResourceCheck):
    """Check that the principal may see data of the account's role.

    Accounts with an unknown stored role are visible to the full-access role only.
    """

    def _check(self, principal: "Principal", resource: "AccountRef") -> None:
        if has_full_access(principal.role):
            return
        if Role.parse(resource.role) is None or not can_access_user_data(
            principal.role, resource.role
        ):
            raise account_access_denied(principal, resource.id)


def account_access_denied(principal: "Principal", account_id: str) -> "AuthorizationError":
    """Denial for a single account, identical whether or not the account exists."""
    from panelauth.domain.shared.error import AuthorizationError

    return AuthorizationError(
        f"Access denied: Cannot access account '{account_id}' with role '{principal.role}'",
        code="access_denied",
    )


def manages_account() -> ManagesAccount:
    return ManagesAccount()
