"""FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from powerball_watch.config import settings

# Configure loguru
logger.remove()
logger.add(sys.stderr, level="DEBUG" if settings.DEBUG else "INFO")
logger.add(str(settings.LOG_FILE), rotation="10 MB", retention="7 days", level="INFO")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("Starting {} ...", settings.APP_NAME)

    from powerball_watch.db.engine import engine, init_models
    await init_models()

    # Start scheduler if enabled
    if settings.SCHEDULER_ENABLED:
        try:
            from powerball_watch.scraper.scheduler import start_scheduler
            start_scheduler()
            logger.info("Draw check scheduler started")
        except Exception as e:
            logger.warning("Failed to start scheduler: {}", e)

    yield

    # Shutdown
    if settings.SCHEDULER_ENABLED:
        from powerball_watch.scraper.scheduler import stop_scheduler
        stop_scheduler()

    await engine.dispose()
    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="Watches Powerball draws and notifies on ticket matches",
    lifespan=lifespan,
)

# Include API routers
from powerball_watch.api.v1.router import api_router  # noqa: E402
app.include_router(api_router, prefix="/api/v1")


@app.get("/health", include_in_schema=False)
async def health():
    return {"status": "ok"}
