"""Tests for the signpost table loader."""

from __future__ import annotations

import pytest

from wellcheck.domains.assessment.advice.signposts import (
    SIGNPOST_FILE,
    load_signpost_file,
    signpost,
    signpost_table,
    signpost_text,
)

SECTION_KEYS = (
    "bp", "lowbp", "cholesterol", "weight", "mind", "smoking", "alcohol", "fatigue",
    "wheelchair", "limited_mobility", "vegan", "vegetarian", "diabetes", "urinalysis",
)


class TestLoadSignpostFile:
    def test_bundled_table_has_every_section_key(self):
        table = load_signpost_file(SIGNPOST_FILE)
        assert set(table.signposts) == set(SECTION_KEYS)
        assert all(text and text == text.strip() for text in table.signposts.values())

    def test_folded_text_is_single_line(self):
        assert "\n" not in signpost_text("wheelchair")

    def test_plan_resources(self):
        table = signpost_table()
        assert "0300 123 1044" in table.plan_smoking
        assert "drinkaware.co.uk" in table.plan_alcohol
        assert len(table.plan_general) >= 1
        assert table.safety_net.startswith("If symptoms worsen")

    def test_custom_file(self, tmp_path):
        path = tmp_path / "signposts.yaml"
        path.write_text(
            "signposts:\n"
            "  bp: '  Check your numbers.  '\n"
            "plan_resources:\n"
            "  smoking: Quit line.\n"
            "  alcohol: Drink line.\n"
            "  safety_net: Call 111.\n"
        )
        table = load_signpost_file(path)
        assert table.signposts == {"bp": "Check your numbers."}
        assert table.plan_general == ()

    def test_missing_plan_entry_raises(self, tmp_path):
        path = tmp_path / "signposts.yaml"
        path.write_text("signposts:\n  bp: Check.\nplan_resources: {}\n")
        with pytest.raises(KeyError):
            load_signpost_file(path)


class TestSignpostSegment:
    def test_closing_segment(self):
        segment = signpost("bp")
        assert segment.heading == "Helpful resources"
        assert segment.text == f"Helpful resources: {signpost_text('bp')}"

    def test_unknown_key(self):
        with pytest.raises(KeyError):
            signpost_text("sleep")
