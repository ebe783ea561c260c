"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from shared.config import get_settings
from shared.database import reset_client_cache

from .dependencies import get_container
from .errors import register_exception_handlers
from .routes import health
from modules.users.routes import router as users_router, auth_router
from modules.profiles.routes import router as profile_router
from modules.posts.routes import router as posts_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Creates collection indexes on startup and closes the
    MongoDB client on shutdown.
    """
    # Startup
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    for repository in get_container().repositories:
        await repository.ensure_indexes()
    logger.info("MongoDB indexes ensured")
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")
    reset_client_cache()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Developer social network API",
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

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        return "Api is running..."

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(users_router, prefix="/api/users", tags=["users"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(profile_router, prefix="/api/profile", tags=["profile"])
    app.include_router(posts_router, prefix="/api/posts", tags=["posts"])

    return app


# Application instance for uvicorn
app = create_app()
