"""FastAPI application factory.

Creates and configures the FastAPI application with the users router,
middleware, and exception handlers.

Each application owns exactly one user repository, created here (or
passed in by tests) and shared by every request through ``app.state``.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from userhub.domain.user import UserRepository
from userhub.infrastructure.persistence.memory import InMemoryUserRepository
from userhub.presentation.api.exception_handlers import setup_exception_handlers
from userhub.presentation.api.routers import users_router
from userhub.presentation.api.schemas import HealthResponse
from userhub_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Sets up logging for the userhub application with:
    - Console output with timestamps and module names
    - Configurable log level for userhub modules (from settings)
    - WARNING level for uvicorn's per-request access log
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("userhub").setLevel(log_level)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

OPENAPI_TAGS = [
    {
        "name": "Users",
        "description": """Create, read, rename and delete users.

**Identifiers:**
- Assigned by the server on creation
- Opaque unsigned integers; never reused while the user exists

**Usernames:**
- Must contain at least one non-whitespace character
- Stored exactly as submitted (no trimming, no case folding)

**Storage:**
- In memory only; restarting the service discards all users
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting %s API v%s...", app.state.settings.app_name, API_VERSION)
    yield
    user_count = await app.state.user_repository.count()
    logger.info("Shutting down, discarding %d in-memory users", user_count)


def create_app(
    settings: Settings | None = None,
    user_repository: UserRepository | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.
    user_repository
        Optional repository override; defaults to a fresh in-memory store.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="In-memory **user** service with CRUD endpoints.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.state.settings = settings
    app.state.user_repository = (
        user_repository if user_repository is not None else InMemoryUserRepository()
    )

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    setup_exception_handlers(app)

    app.include_router(users_router, prefix="/users", tags=["Users"])

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", version=API_VERSION)

    return app
