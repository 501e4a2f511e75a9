"""Structured rich-text segments and their renderers.

A segment is an ordered tuple of runs. A run carries plain text plus two flags:
``bold`` for the single allowed emphasis marker and ``user_supplied`` for text
typed in by the client or practitioner. Composers never build markup; the
renderers below are the only place text becomes HTML, and every run is escaped
there regardless of its origin.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Run:
    text: str
    bold: bool = False
    user_supplied: bool = False


@dataclass(frozen=True)
class Segment:
    runs: tuple[Run, ...]

    @property
    def text(self) -> str:
        """Plain text of the segment with emphasis dropped."""
        return "".join(run.text for run in self.runs)

    @property
    def heading(self) -> str:
        """Text of the leading bold run, or an empty string."""
        if self.runs and self.runs[0].bold:
            return self.runs[0].text.rstrip(":")
        return ""

    def has_user_text(self) -> bool:
        return any(run.user_supplied for run in self.runs)


def labelled(label: str, body: str) -> Segment:
    """Build the common ``**Label:** body`` segment."""
    return Segment((Run(f"{label}:", bold=True), Run(f" {body}")))


def heading(label: str) -> Segment:
    """A segment holding only a bold ``Label:`` run."""
    return Segment((Run(f"{label}:", bold=True),))


def user_text(label: str, supplied: str, before: str = "", after: str = "") -> Segment:
    """A labelled segment embedding free text as its own delimited run."""
    runs = [Run(f"{label}:", bold=True), Run(f" {before}")]
    runs.append(Run(supplied, user_supplied=True))
    if after:
        runs.append(Run(after))
    return Segment(tuple(runs))


def concat(*segments: Segment) -> Segment:
    """Join segments into one, separated by single spaces."""
    runs: list[Run] = []
    for segment in segments:
        if runs:
            runs.append(Run(" "))
        runs.extend(segment.runs)
    return Segment(tuple(runs))


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------

def render_html(segment: Segment) -> str:
    """Render a segment as an HTML fragment; all run text is escaped."""
    parts = []
    for run in segment.runs:
        text = html.escape(run.text).replace("\n", "<br>")
        if run.bold:
            text = f"<strong>{text}</strong>"
        if run.user_supplied:
            text = f'<span class="client-text">{text}</span>'
        parts.append(text)
    return "".join(parts)


def render_text(segment: Segment) -> str:
    return segment.text


def segment_to_dict(segment: Segment) -> dict[str, Any]:
    """JSON-safe representation used by the MCP tools."""
    return {
        "text": segment.text,
        "runs": [
            {"text": run.text, "bold": run.bold, "user_supplied": run.user_supplied}
            for run in segment.runs
        ],
    }
