from dishka import AsyncContainer, make_async_container

from panelauth.config import Config
from panelauth.domain.auth.util.di.provider import AuthProvider
from panelauth.infrastructure.auth.di import AuthInfraProvider
from panelauth.util.di.scope import Scope


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    return make_async_container(
        AuthProvider(),
        AuthInfraProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
