"""DI provider for auth infrastructure."""

from dishka import Provider, from_context, provide

from panelauth.config import Config
from panelauth.domain.auth.model.account import AccountRef
from panelauth.domain.auth.port.account_repository import AccountRepository
from panelauth.domain.auth.port.session_verifier import SessionVerifier
from panelauth.infrastructure.auth.account_repository import InMemoryAccountRepository
from panelauth.infrastructure.auth.session import JwtSessionVerifier
from panelauth.util.di.scope import Scope


class AuthInfraProvider(Provider):
    """DI provider for auth infrastructure adapters."""

    config = from_context(provides=Config, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_account_repository(self, config: Config) -> AccountRepository:
        """Account store seeded from configuration."""
        return InMemoryAccountRepository(
            AccountRef(**seed.model_dump()) for seed in config.accounts
        )

    @provide(scope=Scope.APP)
    def get_session_verifier(self, config: Config) -> SessionVerifier:
        return JwtSessionVerifier(config.session)
