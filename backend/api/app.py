"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings, require_backend_settings
from shared.database import get_supabase_client
from shared.logging_config import configure_logging
from .dependencies import ServiceContainer
from .errors import register_exception_handlers
from .routes import audits, dashboard, health, notifications, reports, session, stores, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup refuses to continue without the Supabase settings; the
    ConfigurationError propagates and the server exits.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    require_backend_settings(settings)

    client = await get_supabase_client(settings)
    container = ServiceContainer(client, settings)
    await container.start()
    app.state.container = container
    logger.info(
        f"Starting {settings.app_name} on {settings.host}:{settings.port} "
        f"(session: {container.session.state.value})"
    )
    yield
    # Shutdown
    await container.close()
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Retail store audit console over Supabase",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(session.router, prefix="/api/session", tags=["session"])
    app.include_router(notifications.router, prefix="/api/notifications", tags=["notifications"])
    app.include_router(dashboard.router, prefix="/api/dashboard", tags=["dashboard"])
    app.include_router(audits.router, prefix="/api/audits", tags=["audits"])
    app.include_router(reports.router, prefix="/api/reports", tags=["reports"])
    app.include_router(stores.router, prefix="/api/stores", tags=["stores"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])

    return app


# Application instance for uvicorn
app = create_app()
