"""Main FastAPI application entry point.

The application is a local command bridge: the webview front end calls these
routes to drive the session controller and re-renders from the returned
state. It binds to the loopback interface only.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import CommandLoggingMiddleware
from api.routes.health import APP_VERSION
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from api.v1.dependencies import build_session_controller, get_uow_factory
from core.config import settings
from core.exceptions import ValidationError
from core.logging import setup_logging
from domain.services.legacy_import import LegacyImportService
from infrastructure.database.session import async_session_factory, engine, init_db

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


async def import_legacy_log() -> None:
    """Pull the single-person JSON log into an empty store, if present."""
    service = LegacyImportService(get_uow_factory(async_session_factory))
    try:
        await service.import_file(
            settings.legacy_import_path, settings.legacy_profile_name
        )
    except ValidationError as e:
        # A malformed file is left in place for the user to inspect.
        logger.error(
            "legacy_import_failed",
            path=str(settings.legacy_import_path),
            reason=e.message,
        )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the store, import legacy data and load the session."""
    await init_db(engine)
    if settings.legacy_import_enabled:
        await import_legacy_log()

    controller = build_session_controller(async_session_factory, settings.per_page)
    await controller.load()
    app.state.session_controller = controller
    logger.info(
        "session_loaded",
        profiles=len(controller.profiles),
        active_profile_id=str(controller.active_profile_id),
    )

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## Volunteer Log command bridge\n\n"
            "Local API used by the desktop/mobile webview to log volunteering "
            "sessions per profile, browse them by year and page, and see hour "
            "totals.\n\n"
            "Every command returns the full session state so the UI can "
            "re-render from a single response."
        ),
        version=APP_VERSION,
        debug=settings.debug,
        openapi_tags=[
            {
                "name": "health",
                "description": "Liveness and store connectivity",
            },
            {
                "name": "session",
                "description": "View filters and the entry form",
            },
            {
                "name": "entries",
                "description": "Volunteer entry operations",
            },
            {
                "name": "profiles",
                "description": "Profile management operations",
            },
        ],
    )

    app.add_middleware(CommandLoggingMiddleware)

    # The webview is served from its own origin.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
