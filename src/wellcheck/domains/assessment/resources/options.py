"""MCP resources describing the assessment form and its static resource table."""

from __future__ import annotations

import json
from dataclasses import asdict

from fastmcp import FastMCP

from wellcheck.domains.assessment.advice.signposts import signpost_table
from wellcheck.domains.assessment.models.options import (
    CHALDER_QUESTIONS,
    FIELD_OPTIONS,
    STRESSORS,
    WELLBEING_DOMAINS,
)


def register_assessment_resources(mcp: FastMCP) -> None:
    """Register form-discovery resources on the MCP server."""

    @mcp.resource("assessment://options")
    def assessment_options_resource() -> str:
        """Every enumerated answer set, the Chalder questions and wellbeing domains."""
        return json.dumps(
            {
                "field_options": {key: list(values) for key, values in FIELD_OPTIONS.items()},
                "chalder_questions": CHALDER_QUESTIONS,
                "wellbeing_domains": WELLBEING_DOMAINS,
                "stressors": list(STRESSORS),
            },
            indent=2,
        )

    @mcp.resource("assessment://signposts")
    def assessment_signposts_resource() -> str:
        """The "Helpful resources" text used by each advice section and the action plan."""
        table = asdict(signpost_table())
        table["plan_general"] = list(table["plan_general"])
        return json.dumps(table, indent=2)
