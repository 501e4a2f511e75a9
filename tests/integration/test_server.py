"""Integration tests for the Wellcheck Assessment MCP server."""

from __future__ import annotations

import asyncio
import json

import pytest
from fastmcp import Client

from wellcheck.core.ids.counter import CounterClientIdIssuer
from wellcheck.core.server.app import create_app


def _run(coro):
    """Run an async coroutine synchronously (no pytest-asyncio required)."""
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def _payload(result) -> dict:
    """Decode the JSON text block of a tool result."""
    blocks = getattr(result, "content", result)
    return json.loads(blocks[0].text)


ALL_EXPECTED_TOOLS = [
    "health_check",
    "issue_client_id",
    "update_assessment",
    "classify_assessment",
    "compose_section",
    "compose_report",
]


@pytest.fixture
def client():
    """Create an MCP client connected to a fresh server with its own id counter."""
    mcp = create_app(issuer_override=CounterClientIdIssuer(start=0, width=4))
    return Client(mcp)


def test_server_starts_and_lists_tools(client):
    """Server should start and expose all registered tools."""
    async def _check():
        async with client:
            tools = await client.list_tools()
            tool_names = [t.name for t in tools]
            for expected in ALL_EXPECTED_TOOLS:
                assert expected in tool_names, f"Missing tool: {expected}"
    _run(_check())


def test_health_check_returns_ok(client):
    """health_check tool should return status ok."""
    async def _check():
        async with client:
            result = await client.call_tool("health_check", {})
            assert "ok" in str(result)
            assert "signposts_loaded" in str(result)
    _run(_check())


def test_issue_client_id_counts_up(client):
    async def _check():
        async with client:
            first = _payload(await client.call_tool(
                "issue_client_id", {"assessment_date": "2026-01-15"}
            ))
            second = _payload(await client.call_tool(
                "issue_client_id", {"assessment_date": "2026-01-15"}
            ))
            assert first["client_id"] == "0001"
            assert second["client_id"] == "0002"
            assert first["record"]["client"]["assessment_date"] == "2026-01-15"
            assert first["record"]["consent"]["given"] is False
    _run(_check())


def test_issue_client_id_rejects_bad_date(client):
    async def _check():
        async with client:
            data = _payload(await client.call_tool(
                "issue_client_id", {"assessment_date": "15/01/2026"}
            ))
            assert data["status"] == "error"
            assert "ISO date" in data["message"]
    _run(_check())


def test_update_assessment_applies_in_order(client, make_record):
    record = make_record(consent=False).to_dict()

    async def _check():
        async with client:
            data = _payload(await client.call_tool("update_assessment", {
                "record": record,
                "updates": [
                    {"type": "replace_group", "group": "vitals",
                     "values": {"systolic": "128", "diastolic": "82"}},
                    {"type": "set_chalder_answer", "question": "3", "score": "6"},
                    {"type": "toggle_stressor", "tag": "Finances"},
                    {"type": "give_consent", "timestamp": "2026-01-15T10:00:00Z"},
                ],
            }))
            assert data["status"] == "ok"
            updated = data["record"]
            assert updated["vitals"]["systolic"] == "128"
            assert updated["fatigue"]["chalder"] == {"3": "6"}
            assert updated["wellbeing"]["stressors"] == ["Finances"]
            assert updated["consent"]["given"] is True
    _run(_check())


def test_update_assessment_unknown_type_is_error(client, make_record):
    record = make_record().to_dict()

    async def _check():
        async with client:
            data = _payload(await client.call_tool("update_assessment", {
                "record": record,
                "updates": [{"type": "delete_everything"}],
            }))
            assert data == {"status": "error", "message": "Unknown update type: 'delete_everything'"}
    _run(_check())


def test_classify_assessment(client, full_record):
    async def _check():
        async with client:
            data = _payload(await client.call_tool("classify_assessment", {
                "record": full_record.to_dict(), "today": "2026-01-15",
            }))
            derived = data["derived"]
            assert data["status"] == "ok"
            assert derived["age"] == 45
            assert derived["bmi"] == "26.0"
            assert derived["bp_category"] == "Raised reading - GP confirmation needed"
            assert derived["wellbeing_category"] == "Needs support"
    _run(_check())


def test_compose_section_unknown_name(client, very_high_bp_record):
    async def _check():
        async with client:
            data = _payload(await client.call_tool("compose_section", {
                "section": "kidneys", "record": very_high_bp_record.to_dict(),
            }))
            assert data["status"] == "error"
            assert "Unknown section" in data["message"]
    _run(_check())


def test_compose_section_blood_pressure(client, very_high_bp_record):
    async def _check():
        async with client:
            data = _payload(await client.call_tool("compose_section", {
                "section": "blood_pressure", "record": very_high_bp_record.to_dict(),
                "today": "2026-01-15",
            }))
            assert data["section"] == "blood_pressure"
            texts = [segment["text"] for segment in data["segments"]]
            assert any("182/125 mmHg" in text for text in texts)
    _run(_check())


def test_compose_report_json(client, very_high_bp_record):
    async def _check():
        async with client:
            data = _payload(await client.call_tool("compose_report", {
                "record": very_high_bp_record.to_dict(), "today": "2026-01-15",
            }))
            assert data["status"] == "ok"
            assert data["output_format"] == "json"
            keys = [section["key"] for section in data["report"]["sections"]]
            assert keys == ["blood_pressure", "priority_plan"]
    _run(_check())


def test_compose_report_html_and_text(client, full_record):
    async def _check():
        async with client:
            html_data = _payload(await client.call_tool("compose_report", {
                "record": full_record.to_dict(), "today": "2026-01-15",
                "output_format": "html",
            }))
            text_data = _payload(await client.call_tool("compose_report", {
                "record": full_record.to_dict(), "today": "2026-01-15",
                "output_format": "text",
            }))
            assert html_data["report"].startswith('<article class="report">')
            assert "YOUR PRIORITY ACTIONS, NEXT 4 WEEKS" in text_data["report"]
    _run(_check())


def test_compose_report_without_consent(client, make_record):
    record = make_record(consent=False, vitals={"systolic": "120", "diastolic": "80"})

    async def _check():
        async with client:
            data = _payload(await client.call_tool("compose_report", {
                "record": record.to_dict(),
            }))
            assert data["status"] == "consent_required"
            assert data["report"]["sections"] == []
    _run(_check())


def test_compose_report_rejects_output_format(client, very_high_bp_record):
    async def _check():
        async with client:
            data = _payload(await client.call_tool("compose_report", {
                "record": very_high_bp_record.to_dict(), "output_format": "pdf",
            }))
            assert data["status"] == "error"
            assert "json | html | text" in data["message"]
    _run(_check())


def test_options_resource(client):
    async def _check():
        async with client:
            contents = await client.read_resource("assessment://options")
            data = json.loads(contents[0].text)
            assert "field_options" in data
            assert len(data["chalder_questions"]) == 11
            assert "Finances" in data["stressors"]
    _run(_check())


def test_signposts_resource(client):
    async def _check():
        async with client:
            contents = await client.read_resource("assessment://signposts")
            data = json.loads(contents[0].text)
            assert "bp" in data["signposts"]
            assert isinstance(data["plan_general"], list)
    _run(_check())
