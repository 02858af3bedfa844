"""Blog Post API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RPCCallError/BlogPostError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database, schema and the post RPC stack initialized on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema created once at startup when database_auto_create is set; alembic otherwise
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blogpost.api.dependencies import build_post_rpc
from blogpost.api.error_handlers import register_error_handlers
from blogpost.api.routes import health, post_service
from blogpost.config import get_settings
from blogpost.infrastructure.database import init_db
from blogpost.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("initialized database engine")
    if settings.database_auto_create:
        await db.create_schema()
    app.state.post_rpc = build_post_rpc(
        db, operation_timeout=settings.database_operation_timeout_seconds,
    )
    logger.info("Blog post API started")
    yield
    logger.info("Blog post API shutting down")
    await db.close()


app = FastAPI(
    title="Blog Post API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(post_service.router)

register_error_handlers(app)
