"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from omi.infrastructure.persistence.sqlalchemy.init_db import create_tables
from omi.presentation.api.dependencies import get_engine
from omi.presentation.api.exception_handlers import setup_exception_handlers
from omi.presentation.api.routers import (
    auth_router,
    comments_router,
    favorites_router,
    ratings_router,
)
from omi.presentation.api.schemas.common import HealthResponse
from omi_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Sets up logging for the omi application with:
    - Console output with timestamps and module names
    - Configurable log level for omi modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("omi").setLevel(log_level)
    logging.getLogger("omi_identity").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

# API version info
API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

# OpenAPI tags metadata for documentation
OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """User accounts and bearer tokens.

**Account lifecycle:**
- Register (email, password, name, age 13-120) and receive a token
- Login with email and password
- Read, partially update and delete your profile

**Password reset:**
- `forgot-password` answers the same whether or not the email exists
- The emailed reset token is single-use and valid for one hour

**Security:**
- Passwords are hashed with bcrypt
- HS256 JWT bearer tokens, 24 hours by default
""",
    },
    {
        "name": "Favorites",
        "description": """Bookmarked Pexels photos and videos.

Each item can be saved once per user. All endpoints need a bearer token.
""",
    },
    {
        "name": "Ratings",
        "description": """One 1-5 star rating per user and video.

**Features:**
- Rating again replaces your previous score
- `/stats` is public and returns average, count and distribution
- Only the author can delete a rating
""",
    },
    {
        "name": "Comments",
        "description": """Comments on videos.

Listing is public; posting needs a bearer token. Only the author can edit
or delete a comment. Content is 1-1000 characters after trimming.
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting OMI API v%s...", API_VERSION)
    engine = get_engine()
    await _init_database_schema(engine)
    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down OMI API...")
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Initialize database schema (if not existent) and verify connectivity."""
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(favorites_router, prefix="/favorites", tags=["Favorites"])
    v1_router.include_router(ratings_router, prefix="/ratings", tags=["Ratings"])
    v1_router.include_router(comments_router, prefix="/comments", tags=["Comments"])

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    # Configure logging on first app creation (not on module import)
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app_name = settings.app_name

    app = FastAPI(
        title=f"{app_name} API",
        description=(
            "Backend for the **OMI** video demo: accounts, favorites, "
            "ratings and comments on Pexels videos."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register domain exception handlers for consistent error responses
    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint.

        Unversioned for load balancer/monitoring compatibility.
        """
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            api_versions=["v1"],
        )

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "auth": f"{API_V1_PREFIX}/auth",
                "favorites": f"{API_V1_PREFIX}/favorites",
                "ratings": f"{API_V1_PREFIX}/ratings",
                "comments": f"{API_V1_PREFIX}/comments",
            },
        }

    return app


# Application instance for uvicorn
app = create_app()
