"""Ward Site API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WardSiteError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager
    - GET / redirects to the default auxiliary's calendar
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from wardsite.api.error_handlers import register_error_handlers
from wardsite.api.routes import auxiliaries, events, health, posts
from wardsite.config import get_settings
from wardsite.infrastructure import database
from wardsite.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Ward Site API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("Ward Site API shutting down")


app = FastAPI(
    title="Ward Site API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auxiliaries.router)
app.include_router(events.router)
app.include_router(posts.router)

register_error_handlers(app)


@app.get("/", include_in_schema=False)
async def home():
    """Landing page: the default auxiliary's calendar."""
    return RedirectResponse(
        f"/api/v1/auxiliaries/{get_settings().default_auxiliary}/calendar",
    )
