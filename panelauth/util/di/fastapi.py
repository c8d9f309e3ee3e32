"""Dishka FastAPI integration using Scope.UOW."""

from starlette.requests import Request
from starlette.types import ASGIApp, Receive, Scope, Send

from dishka import AsyncContainer

from panelauth.util.di.scope import Scope as PanelScope


class ContainerMiddleware:
    """ASGI middleware that opens a Scope.UOW container for each HTTP request.

    Replaces dishka.integrations.starlette.ContainerMiddleware, which would
    enter dishka.Scope.REQUEST instead of our Scope.UOW.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        request = Request(scope, receive=receive, send=send)
        async with request.app.state.dishka_container(
            {Request: request},
            scope=PanelScope.UOW,
        ) as request_container:
            request.state.dishka_container = request_container
            return await self.app(scope, receive, send)


def setup_dishka(container: AsyncContainer, app) -> None:
    """Attach the container to the app and open a UOW scope per request."""
    app.add_middleware(ContainerMiddleware)
    app.state.dishka_container = container
