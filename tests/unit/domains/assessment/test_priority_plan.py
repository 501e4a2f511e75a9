"""Tests for the 4 week action plan."""

from __future__ import annotations

from wellcheck.domains.assessment.advice.priority_plan import WEEKS, compose_priority_plan
from wellcheck.domains.assessment.advice.signposts import signpost_table


def _headings(segments):
    return [segment.heading for segment in segments]


def _week(lines, title):
    return next(line for line in lines if line.heading == title)


class TestComposePriorityPlan:
    def test_very_high_reading_leads_week_one(self, very_high_bp_record, derive):
        lines = compose_priority_plan(very_high_bp_record, derive(very_high_bp_record))
        assert _headings(lines) == ["Your 4 week action plan", *WEEKS, "Helpful resources"]
        week1 = _week(lines, WEEKS[0])
        assert week1.text.startswith(
            "Week 1 (Days 1 to 7): Blood pressure: Your reading today (182/125 mmHg) is very high."
        )
        assert "call 999" in week1.text

    def test_gp_confirmation_items_only_for_high_and_raised(self, make_record, derive):
        very_high = make_record(vitals={"systolic": "182", "diastolic": "125"})
        raised = make_record(vitals={"systolic": "145", "diastolic": "85"})
        assert "Continue home blood pressure checks" not in _week(
            compose_priority_plan(very_high, derive(very_high)), WEEKS[1]
        ).text
        lines = compose_priority_plan(raised, derive(raised))
        assert "Continue home blood pressure checks" in _week(lines, WEEKS[1]).text
        assert "Bring your home blood pressure averages" in _week(lines, WEEKS[3]).text

    def test_empty_week_is_omitted(self, make_record, derive):
        record = make_record()
        lines = compose_priority_plan(record, derive(record))
        headings = _headings(lines)
        assert WEEKS[0] not in headings
        assert headings == ["Your 4 week action plan", *WEEKS[1:], "Helpful resources"]

    def test_no_week_segment_is_bare(self, full_record, derive):
        lines = compose_priority_plan(full_record, derive(full_record))
        for line in lines:
            if line.heading in WEEKS:
                assert len(line.runs) > 1

    def test_weight_focus_for_vegan_client(self, make_record, derive):
        record = make_record(
            vitals={"height_cm": "170", "weight_kg": "75"},
            lifestyle={"diet_pattern": "Vegan"},
        )
        week1 = _week(compose_priority_plan(record, derive(record)), WEEKS[0])
        assert "Aim for an initial 4 kg reduction" in week1.text
        assert "whole plant foods" in week1.text

    def test_underweight_focus(self, make_record, derive):
        record = make_record(vitals={"height_cm": "170", "weight_kg": "50"})
        week1 = _week(compose_priority_plan(record, derive(record)), WEEKS[0])
        assert "below the typical range" in week1.text

    def test_raised_cholesterol_and_fatigue(self, full_record, derive):
        lines = compose_priority_plan(full_record, derive(full_record))
        week1 = _week(lines, WEEKS[0])
        assert "Cholesterol focus:" in week1.text
        assert "plant based omega 3" in week1.text
        assert "Your fatigue score suggests moderate fatigue." in week1.text
        week3 = _week(lines, WEEKS[2])
        assert "Energy:" in week3.text
        assert "Wellbeing:" in week3.text

    def test_mild_fatigue_routine_follows_mobility(self, make_record, derive):
        record = make_record(
            fatigue={"chalder": {str(q): "3" for q in range(1, 12)}},
            lifestyle={"mobility_level": "Wheelchair user"},
        )
        week1 = _week(compose_priority_plan(record, derive(record)), WEEKS[0])
        assert "adapted upper body movement" in week1.text

    def test_post_exertional_movement(self, make_record, derive):
        record = make_record(fatigue={"worse_after_activity": "Yes"})
        week2 = _week(compose_priority_plan(record, derive(record)), WEEKS[1])
        assert "post-exertional symptoms" in week2.text

    def test_resources_for_smoker_and_drinker(self, make_record, derive):
        table = signpost_table()
        record = make_record(lifestyle={"smoker": "Yes", "alcohol": "Yes"})
        resources = compose_priority_plan(record, derive(record))[-1]
        assert resources.text.startswith(f"Helpful resources: {table.plan_smoking}")
        assert table.plan_alcohol in resources.text
        assert resources.text.endswith(table.safety_net)

    def test_resources_without_risk_flags(self, make_record, derive):
        table = signpost_table()
        record = make_record()
        resources = compose_priority_plan(record, derive(record))[-1]
        assert table.plan_smoking not in resources.text
        assert table.plan_general[0] in resources.text
