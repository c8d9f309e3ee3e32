"""DI provider for auth domain."""

import logging

from dishka import Provider, from_context, provide
from starlette.requests import Request

from panelauth.application.navigation import DEFAULT_NAVIGATION
from panelauth.config import Config
from panelauth.domain.auth.command.resolve_parent import ResolveParentHandler
from panelauth.domain.auth.model.identity import Anonymous, Identity
from panelauth.domain.auth.model.principal import Principal
from panelauth.domain.auth.port.account_repository import AccountRepository
from panelauth.domain.auth.port.session_verifier import SessionVerifier
from panelauth.domain.auth.query.check_access import (
    CheckFeatureAccessHandler,
    CheckRouteAccessHandler,
)
from panelauth.domain.auth.query.get_role_access import GetRoleAccessHandler
from panelauth.domain.auth.query.list_accounts import (
    GetAccountHandler,
    ListAccessibleAccountsHandler,
    ListAccountsByRoleHandler,
)
from panelauth.domain.auth.query.plan_creation import PlanCreationHandler
from panelauth.domain.auth.service.access import AccessService
from panelauth.domain.auth.service.hierarchy import HierarchyService
from panelauth.domain.shared.authorization.navigation import NavLink
from panelauth.domain.shared.error import AuthorizationError
from panelauth.util.di.scope import Scope

logger = logging.getLogger(__name__)

HANDLERS: tuple[type, ...] = (
    GetRoleAccessHandler,
    CheckFeatureAccessHandler,
    CheckRouteAccessHandler,
    PlanCreationHandler,
    ListAccountsByRoleHandler,
    ListAccessibleAccountsHandler,
    GetAccountHandler,
    ResolveParentHandler,
)


def extract_session_token(request: Request, cookie_name: str) -> str | None:
    """Session token from the session cookie, else from an Authorization: Bearer header."""
    token = request.cookies.get(cookie_name)
    if token:
        return token
    auth_header = request.headers.get("Authorization")
    if auth_header and auth_header.startswith("Bearer "):
        return auth_header[7:]  # Remove "Bearer " prefix
    return None


class AuthProvider(Provider):
    """DI provider for auth domain services and handlers."""

    request = from_context(provides=Request, scope=Scope.UOW)

    # Query Handlers
    get_role_access_handler = provide(GetRoleAccessHandler, scope=Scope.UOW)
    check_feature_access_handler = provide(CheckFeatureAccessHandler, scope=Scope.UOW)
    check_route_access_handler = provide(CheckRouteAccessHandler, scope=Scope.UOW)
    plan_creation_handler = provide(PlanCreationHandler, scope=Scope.UOW)
    list_accounts_by_role_handler = provide(ListAccountsByRoleHandler, scope=Scope.UOW)
    list_accessible_accounts_handler = provide(ListAccessibleAccountsHandler, scope=Scope.UOW)
    get_account_handler = provide(GetAccountHandler, scope=Scope.UOW)

    # Command Handlers
    resolve_parent_handler = provide(ResolveParentHandler, scope=Scope.UOW)

    @provide(scope=Scope.UOW)
    def get_access_service(
        self,
        config: Config,
        account_repo: AccountRepository,
    ) -> AccessService:
        """Provide AccessService with the configured (or default) panel navigation."""
        navigation: dict[str, list[NavLink]] = config.navigation or DEFAULT_NAVIGATION
        return AccessService(_account_repo=account_repo, _navigation=navigation)

    @provide(scope=Scope.UOW)
    def get_hierarchy_service(self, account_repo: AccountRepository) -> HierarchyService:
        return HierarchyService(_account_repo=account_repo)

    @provide(scope=Scope.UOW)
    def get_identity(
        self,
        request: Request,
        config: Config,
        verifier: SessionVerifier,
    ) -> Identity:
        """Resolve Identity from the session token.

        Returns Anonymous when no token is presented. A token that fails
        verification raises AuthenticationError rather than downgrading.
        """
        token = extract_session_token(request, config.session.cookie_name)
        if token is None:
            return Anonymous()

        session_user = verifier.verify(token)
        logger.debug(
            "Identity resolved: user_id=%s, role=%s", session_user.user_id, session_user.role
        )
        return Principal(user_id=session_user.user_id, role=session_user.role)

    @provide(scope=Scope.UOW)
    def get_principal(self, identity: Identity) -> Principal:
        """Extract Principal from Identity. Raises if not authenticated."""
        if isinstance(identity, Principal):
            return identity
        raise AuthorizationError("Authentication required", code="missing_token")
