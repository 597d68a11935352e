"""Backoffice API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly under settings.api_prefix (no auto-discovery)
    - Global error handlers map BackofficeError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized and schema created on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Parent routers registered before nested ones; FastAPI matches by full path,
      so order only affects the OpenAPI listing
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backoffice.api.error_handlers import register_error_handlers
from backoffice.api.routes import employees, health, menu_items, menus, timesheets
from backoffice.config import get_settings
from backoffice.db.schema import create_schema
from backoffice.infrastructure.database import close_db, init_db
from backoffice.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    await create_schema(manager.engine)
    logger.info("Backoffice API started")
    yield
    await close_db()
    logger.info("Backoffice API shutting down")


app = FastAPI(title="Backoffice API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.router, prefix=settings.api_prefix)
app.include_router(employees.router, prefix=settings.api_prefix)
app.include_router(timesheets.router, prefix=settings.api_prefix)
app.include_router(menus.router, prefix=settings.api_prefix)
app.include_router(menu_items.router, prefix=settings.api_prefix)
