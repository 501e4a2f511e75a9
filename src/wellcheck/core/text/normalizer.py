"""Final cleanup pass applied to every composed segment.

Rules, applied repeatedly until the text stops changing:
    1. strip a leading dash, hyphen, en dash or em dash at the start of any line
    2. ``, and`` becomes `` and``
    3. runs of two or more whitespace characters become one space
    4. trim the ends

Every rule shortens the text whenever it fires, so the loop terminates and its
result is a fixed point: ``normalize(normalize(x)) == normalize(x)``.
"""

from __future__ import annotations

import re
from dataclasses import replace

from wellcheck.core.text.segments import Run, Segment

_LEADING_DASH = re.compile(r"^\s*(?:[-–—]\s*)+", re.MULTILINE)
# Inside a run that does not start a line, only dashes after a newline lead a line.
_DASH_AFTER_NEWLINE = re.compile(r"(?<=\n)[^\S\n]*(?:[-–—]\s*)+")
_COMMA_AND = re.compile(r",\s+and\b", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s{2,}")
_TRAILING_COMMA = re.compile(r",\s*$")
_LEADING_AND = re.compile(r"^\s*and\b", re.IGNORECASE)


def normalize(text: str) -> str:
    """Clean a single string."""
    previous = None
    while text != previous:
        previous = text
        text = _LEADING_DASH.sub("", text)
        text = _COMMA_AND.sub(" and", text)
        text = _WHITESPACE.sub(" ", text)
        text = text.strip()
    return text


def normalize_segment(segment: Segment) -> Segment:
    """Clean every run of a segment, keeping single spaces between runs.

    Empty runs are dropped; the run flags are preserved. A comma ending one run
    before ``and`` opening the next is removed as well, so the segment text
    matches ``normalize`` applied to the joined text.
    """
    runs = segment.runs
    while True:
        cleaned = _tidy_runs(runs)
        if cleaned == runs:
            return Segment(cleaned)
        runs = cleaned


def _tidy_runs(runs: tuple[Run, ...]) -> tuple[Run, ...]:
    out: list[Run] = []
    for run in runs:
        text = _COMMA_AND.sub(" and", run.text)
        text = _WHITESPACE.sub(" ", text)
        if out and _LEADING_AND.match(text):
            comma = _TRAILING_COMMA.search(out[-1].text)
            if comma and (comma.end() - comma.start() > 1 or text[:1].isspace()):
                kept = out[-1].text[:comma.start()]
                if kept:
                    out[-1] = replace(out[-1], text=kept)
                else:
                    out.pop()
                text = " " + text.lstrip()
        starts_line = not out or out[-1].text.endswith("\n")
        text = (_LEADING_DASH if starts_line else _DASH_AFTER_NEWLINE).sub("", text)
        if not out:
            text = text.lstrip()
        elif out[-1].text.endswith(" ") and text.startswith(" "):
            text = text[1:]
        if text:
            out.append(replace(run, text=text) if text != run.text else run)
    if out:
        last = out[-1]
        trimmed = last.text.rstrip()
        if trimmed != last.text:
            if trimmed:
                out[-1] = replace(last, text=trimmed)
            else:
                out.pop()
    return tuple(out)
