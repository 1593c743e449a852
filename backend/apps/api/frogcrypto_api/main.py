"""
FrogCrypto API - FastAPI application entry point.

This module initializes the FastAPI application and configures
middleware, routers, error handlers and lifecycle events.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from frogcrypto_core import get_logger, init_logging
from frogcrypto_core.auth import SignedCredentialVerifier
from frogcrypto_core.clock import to_epoch_ms
from frogcrypto_core.config import frogcrypto_config
from frogcrypto_core.error_reporting import ErrorReporter
from frogcrypto_core.exceptions import CooldownError, FrogCryptoError
from frogcrypto_core.feed_cache import FeedCache
from frogcrypto_core.issuance import UnsignedRewardIssuer

from .config import settings
from .routers import admin, feeds, users

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifecycle manager.

    Initializes the database and loads the feed cache on startup, stops the
    cache refresh loop and closes the database on shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during application runtime.
    """
    from frogcrypto_database.session import close_database, get_session_factory, init_database

    init_logging(settings.log_level, settings.json_logs)
    logger.info("Starting FrogCrypto API", extra={"version": settings.version})
    init_database(settings.database_url, echo=settings.database_echo)

    if not frogcrypto_config.admin_user_ids:
        logger.warning("No FrogCrypto admin users configured")

    feed_cache = FeedCache(
        get_session_factory(),
        error_reporter=app.state.error_reporter,
        refresh_interval_seconds=frogcrypto_config.feed_refresh_interval_seconds,
    )
    await feed_cache.start()
    app.state.feed_cache = feed_cache
    logger.info("Feed cache started", extra={"feed_count": len(feed_cache.get_all_feeds())})

    yield

    await feed_cache.stop()
    await close_database()
    logger.info("Shutting down FrogCrypto API")


async def frogcrypto_error_handler(request: Request, exc: FrogCryptoError) -> JSONResponse:
    """Render FrogCrypto errors in the same shape as HTTPException."""
    content: dict[str, str | int] = {"detail": exc.detail}
    if isinstance(exc, CooldownError):
        content["next_fetch_at"] = to_epoch_ms(exc.next_fetch_at, round_up=True)
    return JSONResponse(status_code=exc.status_code, content=content)


def create_app() -> FastAPI:
    """
    Build a FastAPI application instance.

    Returns:
        Configured application.
    """
    app = FastAPI(
        title=settings.app_name,
        description="FrogCrypto - time-gated frog feeds",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    app.state.error_reporter = ErrorReporter(frogcrypto_config.error_webhook_url)
    app.state.credential_verifier = SignedCredentialVerifier(
        secret_key=frogcrypto_config.credential_secret_key,
        algorithm=frogcrypto_config.credential_algorithm,
        max_age_seconds=frogcrypto_config.credential_max_age_seconds,
    )
    app.state.reward_issuer = UnsignedRewardIssuer()

    # Configure CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(FrogCryptoError, frogcrypto_error_handler)

    # Register API routers
    app.include_router(feeds.router, prefix="/frogcrypto/feeds", tags=["Feeds"])
    app.include_router(users.router, prefix="/frogcrypto", tags=["Users"])
    app.include_router(admin.router, prefix="/frogcrypto/admin", tags=["Admin"])

    @app.get("/api/health")
    async def health_check() -> dict[str, str]:
        """
        Health check endpoint.

        Returns:
            Dictionary containing service status and version.
        """
        return {"status": "healthy", "version": settings.version}

    return app


app = create_app()
