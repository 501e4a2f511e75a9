"""Tests for the fatigue composer."""

from __future__ import annotations

from wellcheck.domains.assessment.advice.fatigue import compose_fatigue
from wellcheck.domains.assessment.advice.signposts import signpost_text
from wellcheck.domains.assessment.models.derived import FatigueLevel

ALL_FIVES = {str(q): "5" for q in range(1, 12)}


def _headings(segments):
    return [segment.heading for segment in segments]


class TestComposeFatigue:
    def test_absent_level_gives_nothing(self, make_record):
        assert compose_fatigue(make_record(), None) == []

    def test_result_reports_score_and_answered_items(self, make_record):
        record = make_record(fatigue={"chalder": ALL_FIVES})
        lines = compose_fatigue(record, FatigueLevel.MODERATE)
        assert _headings(lines)[:3] == ["What this suggests", "Important note", "Your result"]
        assert (
            "Your fatigue score today is 55 (11 of 11 questions answered), classified as "
            "Moderate fatigue."
        ) in lines[2].text

    def test_partial_scale_is_reported(self, make_record):
        record = make_record(fatigue={"chalder": {"1": "5", "2": "5"}})
        result = compose_fatigue(record, FatigueLevel.MINIMAL)[2]
        assert "is 10 (2 of 11 questions answered)" in result.text

    def test_minimal_maintains(self, make_record):
        record = make_record(fatigue={"chalder": {"1": "2"}})
        headings = _headings(compose_fatigue(record, FatigueLevel.MINIMAL))
        assert "Maintaining this" in headings
        assert "GP review" not in headings

    def test_mild_focus_on_sleep_and_stress(self, make_record):
        record = make_record(fatigue={"chalder": ALL_FIVES, "sleep_quality": "Poor", "stress_level": "7"})
        headings = _headings(compose_fatigue(record, FatigueLevel.MILD))
        assert "Sleep focus" in headings
        assert "Stress management" in headings

    def test_moderate_gp_review_and_night_waking(self, make_record):
        record = make_record(fatigue={"chalder": ALL_FIVES, "wake_night": "3-4"}, wellbeing={"sleep": "3"})
        headings = _headings(compose_fatigue(record, FatigueLevel.SIGNIFICANT))
        assert headings[3:6] == ["GP review", "Sleep priority", "Night waking"]

    def test_personalisation(self, make_record):
        record = make_record(fatigue={
            "chalder": ALL_FIVES,
            "worse_after_activity": "Yes",
            "recovery_time": "3-7 days",
            "brain_fog": "Yes",
            "water_intake": "Under 1L",
            "overall_health": "Very poor",
            "daily_alcohol": "5 or more drinks",
        })
        lines = compose_fatigue(record, FatigueLevel.MODERATE)
        by_heading = {line.heading: line for line in lines}
        assert "several days to recover" in by_heading["Post-exertional symptoms"].text
        assert "Brain fog" in by_heading
        assert "Hydration" in by_heading
        assert "as very poor" in by_heading["Overall health"].text
        assert signpost_text("alcohol") in by_heading["Alcohol and fatigue"].text
        assert "Given your post-exertional symptoms" in by_heading["Movement"].text

    def test_free_text_is_user_supplied(self, make_record):
        record = make_record(fatigue={
            "chalder": ALL_FIVES,
            "worse_factors": "Long shifts",
            "better_factors": "Weekend walks",
            "priorities_actions": "Bed by 11pm",
        })
        lines = compose_fatigue(record, FatigueLevel.MODERATE)
        supplied = [line for line in lines if line.has_user_text()]
        assert [line.heading for line in supplied] == [
            "What makes it worse", "What helps", "Agreed actions",
        ]
        assert supplied[-1].runs[-1].text == "Bed by 11pm"

    def test_closes_with_fatigue_resources(self, make_record):
        record = make_record(fatigue={"chalder": ALL_FIVES})
        lines = compose_fatigue(record, FatigueLevel.MODERATE)
        assert _headings(lines)[-8:] == [
            "Movement",
            "Food choices",
            "Fibre rich options",
            "Caffeine guidance",
            "Breathing reset",
            "Pacing technique",
            "Follow up",
            "Helpful resources",
        ]
        assert signpost_text("fatigue") in lines[-1].text
