"""Tests for the urinalysis composer."""

from __future__ import annotations

from wellcheck.domains.assessment.advice.signposts import signpost_text
from wellcheck.domains.assessment.advice.urinalysis import compose_urinalysis


def _headings(segments):
    return [segment.heading for segment in segments]


class TestComposeUrinalysis:
    def test_no_dipstick_values(self, make_record):
        assert compose_urinalysis(make_record()) == []

    def test_notes_alone_do_not_trigger(self, make_record):
        assert compose_urinalysis(make_record(urinalysis={"notes": "Sample delayed"})) == []

    def test_all_normal(self, make_record):
        record = make_record(urinalysis={
            "leukocytes": "Negative", "nitrites": "Negative",
            "urobilinogen": "Normal (0.2-1.0)", "ph": "6.0", "specific_gravity": "1.015",
        })
        lines = compose_urinalysis(record)
        assert _headings(lines) == [
            "What this means", "Your results", "pH", "Specific gravity", "Hydration",
        ]
        assert "within normal limits" in lines[1].text

    def test_infection_pattern(self, make_record):
        record = make_record(urinalysis={"leukocytes": "+1 (Small)", "nitrites": "Positive"})
        lines = compose_urinalysis(record)
        assert lines[1].text == "Findings noted: Leukocytes: +1 (Small). Nitrites: Positive."
        headings = _headings(lines)
        assert "Leukocytes and nitrites" in headings
        assert "Leukocytes" not in headings
        assert headings[-2:] == ["Hydration", "Helpful resources"]
        assert signpost_text("urinalysis") in lines[-1].text

    def test_single_leukocytes(self, make_record):
        headings = _headings(compose_urinalysis(make_record(urinalysis={"leukocytes": "Trace"})))
        assert "Leukocytes" in headings
        assert "Leukocytes and nitrites" not in headings

    def test_analytes_in_panel_order(self, make_record):
        record = make_record(urinalysis={
            "glucose": "+1 (Small)", "protein": "Trace", "urobilinogen": "Raised (>1.0)",
        })
        lines = compose_urinalysis(record)
        assert lines[1].text == (
            "Findings noted: Protein: Trace. Glucose: +1 (Small). Urobilinogen: Raised."
        )
        headings = _headings(lines)
        assert headings.index("Protein") < headings.index("Glucose") < headings.index("Urobilinogen")

    def test_specific_gravity_bands(self, make_record):
        def sg_text(value):
            record = make_record(urinalysis={"blood": "Trace", "specific_gravity": value})
            return next(line for line in compose_urinalysis(record) if line.heading == "Specific gravity").text

        assert "lower end" in sg_text("1.005")
        assert "higher end" in sg_text("1.025")
        assert "within the normal range" in sg_text("1.015")

    def test_notes_are_user_supplied(self, make_record):
        record = make_record(urinalysis={"ketones": "Trace", "notes": "Fasted since 8pm"})
        notes = next(line for line in compose_urinalysis(record) if line.heading == "Additional notes")
        assert notes.has_user_text()
        assert notes.runs[-1].text == "Fasted since 8pm"
