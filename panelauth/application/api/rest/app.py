import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from panelauth.application.api.v1.errors import map_error
from panelauth.application.api.v1.routes import access, health, hierarchy, users
from panelauth.application.di import create_container
from panelauth.config import Config, configure_logging
from panelauth.domain.auth.util.di.provider import HANDLERS
from panelauth.domain.shared.authorization.startup import validate_all_handlers
from panelauth.domain.shared.error import PanelAuthError
from panelauth.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await app.state.dishka_container.close()


def create_app(config: Config | None = None) -> FastAPI:
    """Create FastAPI application."""
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    configure_logging(config.logging)
    logger.info("Starting %s v%s", config.server.name, config.server.version)

    if not config.session.secret:
        logger.warning("Session secret is empty; every session token will be rejected")

    # Validate all handlers have authorization declarations (fail fast)
    validate_all_handlers(HANDLERS)

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )

    container = create_container(config)
    setup_dishka(container, app_instance)

    app_instance.include_router(health.router, prefix="/api/v1")
    app_instance.include_router(access.router, prefix="/api/v1")
    app_instance.include_router(hierarchy.router, prefix="/api/v1")
    app_instance.include_router(users.router, prefix="/api/v1")

    # Maps domain and infrastructure errors to HTTP responses
    @app_instance.exception_handler(PanelAuthError)
    async def panelauth_error_handler(request: Request, exc: PanelAuthError):
        http_exc = map_error(exc)
        if http_exc.status_code == 403:
            logger.info("Denied %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=http_exc.status_code,
            content=http_exc.detail,
            headers=http_exc.headers,
        )

    # Logs all unhandled exceptions
    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Internal server error"},
        )

    return app_instance
