"""
PURPOSE: Main FastAPI application factory and lifecycle management for the MNQ Strat webhook relay.

Initializes the FastAPI application with:
- Alert webhook and system routers
- Root liveness endpoint
- Exception handlers returning the {"success": false, "error": ...} contract
- Startup logging of endpoints and unconfigured Discord channels
- Metadata from version.json
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.api import api_router
from app.config.constants import TIMEFRAMES
from app.config.settings import settings
from app.utils.logger import get_logger, setup_logging
from app.utils.time_utils import get_utc_now, to_iso_z
from app.version import get_version


logger = get_logger(__name__)

SERVICE_NAME = "MNQ Strat Webhook Server"


# ════════════════════════════════════════════════════════════════
# Lifecycle Events
# ════════════════════════════════════════════════════════════════


async def on_startup() -> None:
    """
    PURPOSE: Execute startup tasks: configuration checks and endpoint logging.

    CALLED BY: FastAPI lifespan startup

    Tasks:
        1. Log the alert endpoints being served
        2. Warn about timeframe channels with no Discord webhook
    """
    logger.info(
        "application_startup_starting",
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
        app_env=settings.APP_ENV,
    )

    for timeframe in TIMEFRAMES:
        if settings.webhook_url_for(timeframe) is None:
            logger.warning(
                "discord_webhook_not_configured",
                timeframe=timeframe,
                setting=f"DISCORD_WEBHOOK_{timeframe.upper()}",
            )

    logger.info(
        "application_startup_complete",
        endpoints=[f"/webhook/{timeframe}" for timeframe in TIMEFRAMES],
        health_check="/",
    )


async def on_shutdown() -> None:
    """
    PURPOSE: Execute shutdown tasks.

    CALLED BY: FastAPI lifespan shutdown
    """
    logger.info("application_shutdown_complete")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    PURPOSE: Manage application lifespan with startup and shutdown events.

    CALLED BY: FastAPI during application startup and shutdown

    Args:
        app: FastAPI application instance

    Yields:
        None
    """
    # Startup
    await on_startup()

    yield

    # Shutdown
    await on_shutdown()


# ════════════════════════════════════════════════════════════════
# Exception Handlers
# ════════════════════════════════════════════════════════════════


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    PURPOSE: Handle unexpected exceptions with logging and safe error response.

    CALLED BY: FastAPI exception handler middleware

    Args:
        request: HTTP request that raised exception
        exc: Exception that was raised

    Returns:
        JSONResponse: Safe error response without exposing internals
    """
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exception_type=type(exc).__name__
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": "Internal Server Error",
        },
    )


# ════════════════════════════════════════════════════════════════
# FastAPI Application Factory
# ════════════════════════════════════════════════════════════════


def create_app() -> FastAPI:
    """
    PURPOSE: Create and configure FastAPI application with all routers and handlers.

    CALLED BY: Application entrypoint (uvicorn, docker, etc)

    Returns:
        FastAPI: Configured FastAPI application ready to run
    """
    setup_logging(settings.LOG_LEVEL)

    # Get version info
    try:
        version_data = get_version()
        version = version_data.get("version", "unknown")
        description = f"TradingView to Discord alert relay - {version_data.get('codename', 'Strat Relay')}"
    except Exception as e:
        logger.warning("version_data_unavailable", error=str(e))
        version = "unknown"
        description = "TradingView to Discord alert relay"

    # Create FastAPI instance
    app = FastAPI(
        title=SERVICE_NAME,
        description=description,
        version=version,
        lifespan=lifespan,
    )

    # ────────────────────────────────────────────────────────────
    # Routes
    # ────────────────────────────────────────────────────────────

    app.include_router(api_router)

    # Root endpoint
    @app.get("/", tags=["root"])
    async def root():
        """
        PURPOSE: Root endpoint for liveness checks.

        CALLED BY: Hosting platform health checks, basic connectivity tests

        Returns:
            dict: Service status, version and current server time
        """
        return {
            "status": f"{SERVICE_NAME} Running",
            "service": SERVICE_NAME,
            "version": version,
            "timestamp": to_iso_z(get_utc_now()),
        }

    # ────────────────────────────────────────────────────────────
    # Exception Handlers
    # ────────────────────────────────────────────────────────────

    app.add_exception_handler(Exception, general_exception_handler)

    logger.info(
        "fastapi_application_created",
        title=SERVICE_NAME,
        version=version,
    )

    return app


# Create the application
app = create_app()


if __name__ == "__main__":
    """
    PURPOSE: Run FastAPI application with Uvicorn server.

    Usage:
        python -m app.main
        OR
        uvicorn app.main:app --host 0.0.0.0 --port 3000
    """
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
