"""
Team BFF Application

Main FastAPI application entry point. Exposes the team/account
management API and forwards every operation to the upstream API.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from team_bff.api.team.router import router as team_router
from team_bff.config import Settings, settings as default_settings
from team_bff.core.error_handlers import register_exception_handlers
from team_bff.core.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from team_bff.core.observability import setup_logging
from team_bff.infrastructure.token_store import TokenStore
from team_bff.infrastructure.upstream_client import UpstreamClient

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# LIFESPAN MANAGEMENT
# ═══════════════════════════════════════════════════════════════════════════════


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Startup: Configure logging, log configuration
    - Shutdown: Close the upstream connection pool
    """
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)

    # ─────────────────────────────────────────────────────────────────────────
    # STARTUP
    # ─────────────────────────────────────────────────────────────────────────
    logger.info("=" * 60)
    logger.info(f"Starting {settings.app_name}")
    logger.info(f"   Environment: {settings.app_env}")
    logger.info(f"   Debug Mode: {settings.debug}")
    logger.info(f"   Upstream: {settings.upstream_base_url}")
    logger.info(f"   API Prefix: {settings.api_prefix}")
    logger.info("=" * 60)

    yield

    # ─────────────────────────────────────────────────────────────────────────
    # SHUTDOWN
    # ─────────────────────────────────────────────────────────────────────────
    logger.info(f"Shutting down {settings.app_name}")
    await app.state.upstream_client.aclose()
    logger.info("Upstream connections closed")


# ═══════════════════════════════════════════════════════════════════════════════
# ROUTER REGISTRATION
# ═══════════════════════════════════════════════════════════════════════════════


def register_routers(app: FastAPI, settings: Settings) -> None:
    """Register all API routers."""

    @app.get(
        "/health",
        tags=["Health"],
        summary="Health Check",
        description="Basic health check - returns OK if the application is running.",
    )
    async def health_check() -> dict:
        """
        Basic health check endpoint.

        Used by load balancers and container orchestration to verify
        the application is running. Does not contact the upstream API.
        """
        return {"status": "ok", "message": "Server is running"}

    app.include_router(team_router, prefix=settings.api_prefix)


# ═══════════════════════════════════════════════════════════════════════════════
# APPLICATION FACTORY
# ═══════════════════════════════════════════════════════════════════════════════


def create_application(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application instance with:
    - The token store and upstream client
    - CORS, request logging and security header middleware
    - Exception handlers
    - Route registration

    Args:
        settings: Settings to use instead of the environment-derived ones
        transport: Optional httpx transport for the upstream client

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Team and account management API. Every operation is forwarded "
            "to the upstream API with the caller's bearer token."
        ),
        version="1.0.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    token_store = TokenStore(settings.access_token)
    app.state.settings = settings
    app.state.token_store = token_store
    app.state.upstream_client = UpstreamClient(
        base_url=settings.upstream_base_url,
        token_store=token_store,
        timeout=settings.upstream_timeout_seconds,
        transport=transport,
    )

    # ─────────────────────────────────────────────────────────────────────────
    # Middleware
    # ─────────────────────────────────────────────────────────────────────────
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routers(app, settings)

    return app


# ═══════════════════════════════════════════════════════════════════════════════
# APPLICATION INSTANCE
# ═══════════════════════════════════════════════════════════════════════════════

app = create_application()


# ═══════════════════════════════════════════════════════════════════════════════
# DEVELOPMENT SERVER
# ═══════════════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "team_bff.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug,
        reload_dirs=["team_bff"] if default_settings.debug else None,
        log_level="debug" if default_settings.debug else "info",
        access_log=False,
    )
