"""
FastAPI application factory.

Creates and configures the FastAPI application instance.  On startup
the app waits for the database (bounded retries), creates the schema,
and only then starts serving.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from babysleep.api.error_handlers import register_error_handlers
from babysleep.api.router import api_router
from babysleep.core.config import settings
from babysleep.core.observability import setup_logging
from babysleep.db.init_db import init_db, wait_for_db
from babysleep.db.session import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    await run_in_threadpool(wait_for_db, engine, settings.DB_CONNECT_RETRIES, settings.DB_CONNECT_RETRY_INTERVAL)
    await run_in_threadpool(init_db, engine)

    logger.info(f"{settings.PROJECT_NAME} API v{settings.VERSION} ready")
    logger.info(f"Night/day boundary: {settings.NIGHT_START_HOUR}:00 UTC")
    baby = f", Baby name: {settings.BABY_NAME}" if settings.BABY_NAME else ""
    logger.info(f"Language: {settings.LANGUAGE}{baby}")
    if settings.auth_enabled:
        logger.info("API auth: enabled (Bearer token required)")
    else:
        logger.info("API auth: disabled (no API_TOKEN set)")
    if settings.notifications_enabled:
        logger.info(f"Home Assistant integration enabled: {settings.HA_URL}")
    else:
        logger.info("Home Assistant integration not configured")

    yield

    engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Track baby sleep sessions and day/night sleep statistics.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan)

app.add_middleware(CORSMiddleware, allow_origins=settings.CORS_ORIGINS, allow_credentials=False, allow_methods=["*"],
                   allow_headers=["*"], )

register_error_handlers(app)

# Include API router
app.include_router(api_router, prefix="/api")
