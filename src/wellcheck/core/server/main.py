"""Wellcheck server entry point: ``python -m wellcheck.core.server.main``."""

from __future__ import annotations

import logging

from wellcheck.core.config.settings import get_settings
from wellcheck.core.server.app import create_app

logger = logging.getLogger(__name__)


def run() -> None:
    """Start the Wellcheck MCP server with Streamable HTTP transport.

    The bind check runs before the app is built, so a refused host never
    issues a client id or loads the signpost table.
    """
    settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    host, port = settings.bind_address()
    if settings.wellcheck_allow_insecure_bind:
        logger.warning("Insecure bind allowed; serving assessment records on %s:%d", host, port)

    mcp = create_app()
    logger.info(
        "Starting Wellcheck Assessment server on %s:%d (client ids from %0*d)",
        host,
        port,
        settings.client_id_width,
        settings.client_id_start + 1,
    )
    mcp.run(transport="streamable-http", host=host, port=port)


if __name__ == "__main__":
    run()
