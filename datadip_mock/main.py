"""Data Dip Mock API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DataDipError → plain-text responses at the error's status
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - No CORS, no static files: the only client is the connector, server to server
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from datadip_mock import __version__
from datadip_mock.api.error_handlers import register_error_handlers
from datadip_mock.api.routes import accounts, cases, contacts
from datadip_mock.config import get_settings
from datadip_mock.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Data Dip mock started")
    yield
    logger.info("Data Dip mock shutting down")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Data Dip Mock API", version=__version__, lifespan=lifespan,
    )
    app.include_router(accounts.router)
    app.include_router(contacts.router)
    app.include_router(cases.router)
    register_error_handlers(app)
    return app


app = create_app()
