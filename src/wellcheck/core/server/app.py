"""Wellcheck Assessment MCP Server: application factory.

This module provides:
- create_app() for testability (integration tests create fresh server instances)
- Module-level `mcp` variable for FastMCP discovery
"""

from __future__ import annotations

import logging

from fastmcp import FastMCP

from wellcheck.core.config.settings import get_settings
from wellcheck.core.ids import ClientIdIssuer
from wellcheck.core.ids.counter import CounterClientIdIssuer
from wellcheck.domains.assessment.advice.signposts import signpost_table
from wellcheck.domains.assessment.report import SECTION_COMPOSERS
from wellcheck.domains.assessment.resources.options import register_assessment_resources
from wellcheck.domains.assessment.tools.assessment_tools import register_assessment_tools

logger = logging.getLogger(__name__)


def create_app(*, issuer_override: ClientIdIssuer | None = None) -> FastMCP:
    """Create and configure the Wellcheck Assessment MCP server.

    This is the main application factory. It:
    1. Creates the FastMCP server instance
    2. Loads the static signpost table
    3. Creates the client id issuer (counter from settings unless overridden)
    4. Registers all tools and resources
    """
    settings = get_settings()

    # --- Server instance ---
    server = FastMCP(
        "Wellcheck Assessment",
        instructions=(
            "Health assessment server. Classifies blood pressure, BMI, pulse, lipids, "
            "fatigue and wellbeing answers into clinical categories and composes a "
            "personalised, plain-language report with a 4 week action plan."
        ),
    )

    # --- Static content ---
    signposts = signpost_table()

    # --- Client id issuer ---
    if issuer_override is not None:
        issuer = issuer_override
    else:
        issuer = CounterClientIdIssuer(
            start=settings.client_id_start,
            width=settings.client_id_width,
        )
        logger.info(
            "Client ids issued from counter (start %d, width %d)",
            settings.client_id_start,
            settings.client_id_width,
        )

    # --- Register tools ---
    @server.tool
    def health_check() -> dict:
        """Check server health and return basic status information."""
        return {
            "status": "ok",
            "server": "Wellcheck Assessment",
            "version": "0.1.0",
            "sections": list(SECTION_COMPOSERS),
            "signposts_loaded": len(signposts.signposts),
        }

    register_assessment_tools(server, issuer)
    logger.info("Assessment tools registered")

    # --- Register resources ---
    register_assessment_resources(server)

    return server


# Module-level instance for FastMCP discovery.
# Lazy: only created when this module is loaded directly (not when tests import create_app).
def __getattr__(name: str):
    if name == "mcp":
        global mcp  # noqa: PLW0603
        mcp = create_app()
        return mcp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
