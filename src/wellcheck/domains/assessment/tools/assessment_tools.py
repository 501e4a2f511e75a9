"""MCP tools for assessment records: issue, update, classify and compose.

Records travel over the wire in their nested-dict form (see
``AssessmentRecord.from_dict``). Structural problems come back as
``{"status": "error", "message": ...}`` payloads rather than tool failures.
"""

from __future__ import annotations

import json
import logging
from datetime import date, datetime, timezone
from typing import TYPE_CHECKING, Any

from fastmcp import Context, FastMCP

if TYPE_CHECKING:
    from wellcheck.core.ids import ClientIdIssuer

from wellcheck.core.text.segments import segment_to_dict
from wellcheck.domains.assessment.domain_logic.classification import compute_derived
from wellcheck.domains.assessment.models.record import AssessmentRecord, RecordError
from wellcheck.domains.assessment.models.updates import apply_update, new_record, update_from_dict
from wellcheck.domains.assessment.report import (
    SECTION_COMPOSERS,
    UnknownSectionError,
    compose_report as build_report,
    compose_section as build_section,
    render_report_html,
    render_report_text,
    report_to_dict,
)

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "html", "text")


def _error(message: str) -> str:
    return json.dumps({"status": "error", "message": message})


def _today(value: str) -> date:
    """Parse an ISO date, defaulting to the current UTC date."""
    if not value:
        return datetime.now(timezone.utc).date()
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise RecordError(f"today must be an ISO date (YYYY-MM-DD), got {value!r}") from None


def _load(record: dict[str, Any], today: str) -> tuple[AssessmentRecord, date]:
    return AssessmentRecord.from_dict(record), _today(today)


def register_assessment_tools(mcp: FastMCP, issuer: ClientIdIssuer) -> None:
    """Register the assessment tools on the MCP server."""

    @mcp.tool
    async def issue_client_id(ctx: Context, assessment_date: str = "") -> str:
        """Start a new, empty assessment record stamped with the next client id.

        Args:
            assessment_date: Date of the assessment (ISO 8601). Defaults to today.
        """
        try:
            assessment_date = _today(assessment_date).isoformat()
        except RecordError as exc:
            return _error(str(exc))
        record = new_record(issuer, assessment_date)
        return json.dumps({
            "status": "ok",
            "client_id": record.client.client_id,
            "record": record.to_dict(),
        })

    @mcp.tool
    async def update_assessment(
        ctx: Context,
        record: dict[str, Any],
        updates: list[dict[str, Any]],
    ) -> str:
        """Apply typed updates to an assessment record and return the new record.

        Args:
            record: The current record in nested form (groups such as 'vitals', 'lipids').
            updates: Update commands applied in order, e.g.
                {"type": "replace_group", "group": "vitals", "values": {"systolic": "128"}},
                {"type": "set_chalder_answer", "question": "3", "score": "6"},
                {"type": "toggle_stressor", "tag": "Finances"},
                {"type": "give_consent", "timestamp": "2026-01-15T10:00:00Z"},
                {"type": "revoke_consent"}.
        """
        try:
            current = AssessmentRecord.from_dict(record)
            for data in updates:
                if not isinstance(data, dict):
                    raise RecordError("Each update must be an object with a 'type'")
                current = apply_update(current, update_from_dict(data))
        except RecordError as exc:
            logger.info("Rejected assessment update: %s", exc)
            return _error(str(exc))
        logger.info("Applied %d updates to an assessment record", len(updates))
        return json.dumps({"status": "ok", "record": current.to_dict()})

    @mcp.tool
    async def classify_assessment(ctx: Context, record: dict[str, Any], today: str = "") -> str:
        """Compute age, BMI and every clinical category for an assessment record.

        Args:
            record: The record in nested form.
            today: Reference date for the age calculation (ISO 8601). Defaults to today.
        """
        try:
            parsed, reference = _load(record, today)
        except RecordError as exc:
            return _error(str(exc))
        derived = compute_derived(parsed, reference)
        return json.dumps({"status": "ok", "derived": derived.to_dict()})

    @mcp.tool
    async def compose_section(
        ctx: Context,
        section: str,
        record: dict[str, Any],
        today: str = "",
    ) -> str:
        """Compose the advice paragraphs for one report section.

        Args:
            section: One of blood_pressure, bmi, pulse, cholesterol, fatigue, wellbeing,
                urinalysis, context or priority_plan.
            record: The record in nested form.
            today: Reference date (ISO 8601). Defaults to today.
        """
        try:
            parsed, reference = _load(record, today)
            segments = build_section(section, parsed, compute_derived(parsed, reference))
        except (RecordError, UnknownSectionError) as exc:
            return _error(str(exc))
        return json.dumps({
            "status": "ok",
            "section": section,
            "segments": [segment_to_dict(segment) for segment in segments],
        })

    @mcp.tool
    async def compose_report(
        ctx: Context,
        record: dict[str, Any],
        today: str = "",
        output_format: str = "json",
    ) -> str:
        """Compose the full personalised assessment report.

        Consent and a client name are required; without them the report holds
        only a notice explaining what is missing.

        Args:
            record: The record in nested form.
            today: Reference date (ISO 8601). Defaults to today.
            output_format: 'json' (structured), 'html' (escaped fragment) or 'text'.
        """
        if output_format not in OUTPUT_FORMATS:
            return _error(f"output_format must be one of: {' | '.join(OUTPUT_FORMATS)}")
        try:
            parsed, reference = _load(record, today)
        except RecordError as exc:
            return _error(str(exc))

        report = build_report(parsed, compute_derived(parsed, reference))
        if output_format == "html":
            body: Any = render_report_html(report)
        elif output_format == "text":
            body = render_report_text(report)
        else:
            body = report_to_dict(report)
        return json.dumps({
            "status": report.status.value,
            "output_format": output_format,
            "report": body,
        })

    logger.debug("Assessment tools registered (sections: %s)", ", ".join(SECTION_COMPOSERS))
