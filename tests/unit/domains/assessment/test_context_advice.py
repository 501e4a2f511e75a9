"""Tests for the personal context composer."""

from __future__ import annotations

from wellcheck.domains.assessment.advice.context import compose_context
from wellcheck.domains.assessment.advice.signposts import signpost_text


def _headings(segments):
    return [segment.heading for segment in segments]


class TestComposeContext:
    def test_nothing_recorded(self, make_record):
        assert compose_context(make_record()) == []

    def test_negative_answers_emit_nothing(self, make_record):
        record = make_record(
            lifestyle={"mobility_level": "No limitations", "diet_pattern": "No special diet",
                       "activity_barrier": "None", "food_access": "No concerns"},
            clinical={"diabetes_type": "No diabetes", "sleep_apnoea": "No", "shift_work": "No",
                      "pregnancy_status": "Not applicable", "falls_12m": "No",
                      "cv_event_history": "No known event", "daytime_sleepiness": "3"},
        )
        assert compose_context(record) == []

    def test_wheelchair_user(self, make_record):
        lines = compose_context(make_record(lifestyle={"mobility_level": "Wheelchair user"}))
        assert _headings(lines) == ["Wheelchair user", "Helpful resources"]
        assert signpost_text("wheelchair") in lines[1].text

    def test_walking_aid_counts_as_limited_mobility(self, make_record):
        lines = compose_context(make_record(lifestyle={"mobility_level": "Uses walking aid"}))
        assert _headings(lines)[0] == "Movement with limited mobility"
        assert signpost_text("limited_mobility") in lines[1].text

    def test_halal_diet(self, make_record):
        lines = compose_context(make_record(lifestyle={"diet_pattern": "Halal"}))
        assert lines[0].heading == "Halal/Kosher diet"
        assert "adapted to halal food choices" in lines[0].text

    def test_fixed_gate_order(self, make_record):
        record = make_record(
            lifestyle={"mobility_level": "Limited mobility", "activity_barrier": "Time",
                       "diet_pattern": "Vegan", "last_caffeine_time": "After 16:00",
                       "alcohol_units_week": "22 or more"},
            clinical={"diabetes_type": "Type 2", "sleep_apnoea": "Yes", "snoring": "Yes",
                      "kidney_disease": "Yes", "upper_limb_function": "Severe limitation",
                      "other_context": "Recent knee surgery"},
        )
        headings = _headings(compose_context(record))
        expected_order = [
            "Movement with limited mobility",
            "Time as a barrier",
            "Vegan diet",
            "Diabetes",
            "Sleep apnoea",
            "Sleep breathing symptoms",
            "Caffeine timing",
            "Alcohol intake",
            "Kidney disease",
            "Upper limb limitations",
            "Additional context",
        ]
        positions = [headings.index(label) for label in expected_order]
        assert positions == sorted(positions)

    def test_daytime_sleepiness_threshold(self, make_record):
        assert compose_context(make_record(clinical={"daytime_sleepiness": "5"})) == []
        lines = compose_context(make_record(clinical={"daytime_sleepiness": "6"}))
        assert _headings(lines) == ["Sleep breathing symptoms"]

    def test_pain_threshold(self, make_record):
        assert compose_context(make_record(clinical={"pain_limiting_movement": "5"})) == []
        lines = compose_context(make_record(clinical={"pain_limiting_movement": "7"}))
        assert _headings(lines) == ["Pain limiting movement"]

    def test_alcohol_band_carries_resources(self, make_record):
        lines = compose_context(make_record(lifestyle={"alcohol_units_week": "15 to 21"}))
        assert len(lines) == 1
        assert signpost_text("alcohol") in lines[0].text
        assert compose_context(make_record(lifestyle={"alcohol_units_week": "8 to 14"})) == []

    def test_other_context_is_user_supplied(self, make_record):
        lines = compose_context(make_record(clinical={"other_context": "<b>Asthma</b>"}))
        assert lines[-1].heading == "Additional context"
        assert lines[-1].runs[-1].user_supplied
        assert lines[-1].runs[-1].text == "<b>Asthma</b>"
