"""Tests for the cholesterol composer."""

from __future__ import annotations

from wellcheck.domains.assessment.advice.lipids import compose_cholesterol
from wellcheck.domains.assessment.advice.signposts import signpost_text
from wellcheck.domains.assessment.models.derived import LipidTier


def _headings(segments):
    return [segment.heading for segment in segments]


class TestComposeCholesterol:
    def test_absent_tier_gives_nothing(self, make_record):
        assert compose_cholesterol(make_record(), None) == []

    def test_raised_layers(self, make_record):
        record = make_record(
            lipids={"total_cholesterol": "6.8", "ldl": "4.3", "hdl": "1.1", "triglycerides": "2.1",
                    "on_statin": True},
            lifestyle={"smoker": "Yes"},
        )
        lines = compose_cholesterol(record, LipidTier.RAISED)
        assert _headings(lines) == [
            "What this means",
            "Important note",
            "Your result",
            "Action needed",
            "Lifestyle still matters",
            "Wider picture",
            "Smoking",
            "Statin medication",
            "Non fasting sample",
            "Lifestyle factors",
            "Physical activity",
            "Fibre focus",
            "Fat quality",
            "Helpful resources",
        ]
        assert (
            "(total cholesterol 6.8 mmol/L, LDL 4.3 mmol/L, HDL 1.1 mmol/L, triglycerides 2.1 "
            "mmol/L) are classified as Raised, GP review recommended."
        ) in lines[2].text
        assert signpost_text("cholesterol") in lines[-1].text

    def test_fasting_sample_has_no_caveat(self, make_record):
        record = make_record(lipids={"total_cholesterol": "4.5", "triglycerides": "1.2", "fasting": True})
        headings = _headings(compose_cholesterol(record, LipidTier.WITHIN))
        assert "Non fasting sample" not in headings
        assert "Maintaining this" in headings

    def test_no_triglycerides_has_no_caveat(self, make_record):
        record = make_record(lipids={"total_cholesterol": "5.4"})
        headings = _headings(compose_cholesterol(record, LipidTier.BORDERLINE))
        assert "Non fasting sample" not in headings
        assert "Statin medication" not in headings

    def test_result_lists_only_recorded_values(self, make_record):
        record = make_record(lipids={"total_cholesterol": "5.4"})
        result = compose_cholesterol(record, LipidTier.BORDERLINE)[2]
        assert "(total cholesterol 5.4 mmol/L)" in result.text

    def test_ldl_only_result(self, make_record, derive):
        record = make_record(lipids={"ldl": "4.5"})
        tier = derive(record).cholesterol.overall
        assert tier is LipidTier.RAISED
        result = compose_cholesterol(record, tier)[2]
        assert result.text.startswith(
            "Your result: Today's results (LDL 4.5 mmol/L) are classified as Raised"
        )
        assert "total cholesterol" not in result.text

    def test_no_values_drops_parenthetical(self, make_record):
        result = compose_cholesterol(make_record(), LipidTier.WITHIN)[2]
        assert result.text.startswith(
            "Your result: Today's results are classified as Within healthy range."
        )

    def test_vegan_fat_quality(self, make_record):
        record = make_record(lipids={"total_cholesterol": "5.4"}, lifestyle={"diet_pattern": "Vegan"})
        lines = compose_cholesterol(record, LipidTier.BORDERLINE)
        fat = next(line for line in lines if line.heading == "Fat quality")
        assert "chia seeds" in fat.text
        assert "oily fish" not in fat.text

    def test_adapted_activity_for_wheelchair_users(self, make_record):
        record = make_record(
            lipids={"total_cholesterol": "5.4"}, lifestyle={"mobility_level": "Wheelchair user"},
        )
        lines = compose_cholesterol(record, LipidTier.BORDERLINE)
        activity = next(line for line in lines if line.heading == "Physical activity")
        assert "arm cycling" in activity.text
