"""Server Bootstrap: read the port, start the listener, block until interrupted.

Invariants:
    - PORT env var selects the listen port (default 8080)
    - run() returns once SIGINT/SIGTERM stops the server loop

Design Decisions:
    - uvicorn.Server over uvicorn.run: same signal handling, but the config is
      inspectable before serving (build_server is tested without binding a socket)
    - log_config=None: uvicorn keeps our root handler instead of installing its own
"""

import logging

import uvicorn

from datadip_mock.config import Settings, get_settings
from datadip_mock.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def build_server(settings: Settings) -> uvicorn.Server:
    config = uvicorn.Config(
        "datadip_mock.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    return uvicorn.Server(config)


def run() -> None:
    """Console entry point."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Listening on port {settings.port}")
    server = build_server(settings)
    logger.info("Starting server...")
    server.run()
