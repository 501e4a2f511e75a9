"""Tests for segments and their renderers."""

from __future__ import annotations

from wellcheck.core.text.segments import (
    Run,
    Segment,
    concat,
    heading,
    labelled,
    render_html,
    render_text,
    segment_to_dict,
    user_text,
)


class TestBuilders:
    def test_labelled(self):
        segment = labelled("Smoking", "Stopping helps.")
        assert segment.text == "Smoking: Stopping helps."
        assert segment.heading == "Smoking"
        assert not segment.has_user_text()

    def test_heading_only(self):
        segment = heading("Week 1 (Days 1 to 7)")
        assert segment.text == "Week 1 (Days 1 to 7):"
        assert segment.heading == "Week 1 (Days 1 to 7)"

    def test_user_text_is_its_own_run(self):
        segment = user_text("Your priorities", "Sleep better", before="You told us: ")
        assert segment.text == "Your priorities: You told us: Sleep better"
        assert segment.has_user_text()
        supplied = [run for run in segment.runs if run.user_supplied]
        assert [run.text for run in supplied] == ["Sleep better"]

    def test_concat_separates_with_space(self):
        segment = concat(labelled("A", "one."), labelled("B", "two."))
        assert segment.text == "A: one. B: two."
        assert segment.heading == "A"

    def test_plain_segment_has_no_heading(self):
        assert Segment((Run("plain"),)).heading == ""


class TestRenderers:
    def test_render_html_escapes_user_text(self):
        segment = user_text("Notes", "<script>alert(1)</script>")
        rendered = render_html(segment)
        assert "<script>" not in rendered
        assert "&lt;script&gt;" in rendered
        assert '<span class="client-text">' in rendered

    def test_render_html_escapes_fixed_text_too(self):
        rendered = render_html(labelled("A&E", "call 999"))
        assert rendered.startswith("<strong>A&amp;E:</strong>")

    def test_render_html_newlines(self):
        assert render_html(Segment((Run("a\nb"),))) == "a<br>b"

    def test_render_text(self):
        assert render_text(labelled("Label", "body")) == "Label: body"

    def test_segment_to_dict(self):
        data = segment_to_dict(user_text("Notes", "typed"))
        assert data["text"] == "Notes: typed"
        assert data["runs"][0] == {"text": "Notes:", "bold": True, "user_supplied": False}
        assert data["runs"][-1] == {"text": "typed", "bold": False, "user_supplied": True}
