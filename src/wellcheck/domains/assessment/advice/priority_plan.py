"""The 4 week action plan.

Reads every classification at once and sorts recommendations into weekly
buckets. Each rule contributes at most one item to its week; a week whose rules
all come up empty is left out of the plan entirely.
"""

from __future__ import annotations

import logging

from wellcheck.core.text.segments import Segment, concat, heading, labelled
from wellcheck.domains.assessment.advice.lifestyle import (
    diet_of,
    drinks_alcohol,
    post_exertional,
    smokes,
    tier_of,
)
from wellcheck.domains.assessment.advice.signposts import signpost_table
from wellcheck.domains.assessment.advice.vitals import weight_loss_target
from wellcheck.domains.assessment.domain_logic.classification import parse_number
from wellcheck.domains.assessment.models.derived import (
    BloodPressureCategory,
    DerivedValues,
    FatigueLevel,
    LipidTier,
)
from wellcheck.domains.assessment.models.options import DietPattern, MobilityTier
from wellcheck.domains.assessment.models.record import AssessmentRecord

logger = logging.getLogger(__name__)

WEEKS = (
    "Week 1 (Days 1 to 7)",
    "Week 2 (Days 8 to 14)",
    "Week 3 (Days 15 to 21)",
    "Week 4 (Days 22 to 28)",
)

_GP_CONFIRMATION = {BloodPressureCategory.HIGH, BloodPressureCategory.RAISED}
_MAINTENANCE = {BloodPressureCategory.NORMAL, BloodPressureCategory.OPTIMAL}


# ---------------------------------------------------------------------------
# Week 1
# ---------------------------------------------------------------------------

def _blood_pressure_first_week(record: AssessmentRecord, bp: BloodPressureCategory | None) -> list[Segment]:
    if bp is BloodPressureCategory.VERY_HIGH:
        vitals = record.vitals
        return [labelled(
            "Blood pressure",
            f"Your reading today ({vitals.systolic}/{vitals.diastolic} mmHg) is very high. "
            "Contact your GP surgery today for further assessment. If you experience chest "
            "pain, severe headache, breathlessness, confusion or visual changes, call 999 or "
            "attend A&E.",
        )]
    if bp is BloodPressureCategory.HIGH:
        return [
            labelled(
                "Blood pressure",
                "Start home blood pressure checks for 4 to 7 days if you have a monitor. Sit "
                "quietly for 5 minutes with feet flat on the floor and cuff at heart level. Take "
                "2 readings (1 minute apart) morning and evening. Book a GP appointment within 1 "
                "to 2 weeks and bring your readings.",
            ),
            labelled(
                "Corezen follow up",
                "Rebook with Corezen Health in 1 to 2 weeks for a repeat screening if you would "
                "like support interpreting your home readings.",
            ),
        ]
    if bp is BloodPressureCategory.RAISED:
        return [
            labelled(
                "Blood pressure",
                "Your reading is above the recommended range. Book a routine GP appointment to "
                "discuss whether home monitoring is needed. Consider lifestyle changes including "
                "reducing salt and increasing physical activity.",
            ),
            labelled(
                "Corezen follow up",
                "Rebook with Corezen Health in 2 to 4 weeks for a repeat screening to track your "
                "progress.",
            ),
        ]
    if bp is BloodPressureCategory.HIGHER_END:
        return [labelled(
            "Blood pressure",
            "Your blood pressure is at the higher end of normal. This is a good time to start "
            "one preventive habit such as reducing salt in meals or adding daily movement.",
        )]
    if bp is BloodPressureCategory.LOW:
        return [labelled(
            "Blood pressure",
            "Your reading today is lower than typical. Stay well hydrated, change position "
            "slowly when you stand up and speak to your GP if you feel dizzy or faint.",
        )]
    if bp in _MAINTENANCE:
        return [labelled(
            "Blood pressure",
            "Your blood pressure is in a healthy range. Continue your current routine and use "
            "the plan below to maintain long term heart health.",
        )]
    return []


def _weight_first_week(record: AssessmentRecord, derived: DerivedValues) -> list[Segment]:
    bmi = derived.bmi_value
    weight = parse_number(record.vitals.weight_kg)
    if bmi is None or weight is None:
        return []
    if bmi >= 25:
        target = weight_loss_target(weight, 0.05, 1)
        if diet_of(record) is DietPattern.VEGAN:
            swap = (
                "Add one fibre rich swap daily such as oats, beans, lentils or chickpeas. Reduce "
                "one ultra processed snack or sugary drink. Focus on whole plant foods for "
                "sustained energy."
            )
        else:
            swap = (
                "Add one fibre rich swap daily (such as oats, wholegrain bread, beans or lentils) "
                "and reduce one ultra processed snack or sugary drink."
            )
        return [
            labelled(
                "Weight focus",
                f"Aim for an initial {target} kg reduction over the next 10 to 12 weeks using "
                "steady and sustainable changes. This can improve blood pressure, cholesterol "
                "and energy.",
            ),
            labelled("Food choice this week", swap),
        ]
    if bmi < 18.5:
        return [labelled(
            "Weight focus",
            "Your BMI is below the typical range. Arrange a GP review and focus on regular meals "
            "with protein and healthy fats to support energy and nutrition.",
        )]
    return []


def _cholesterol_first_week(record: AssessmentRecord, derived: DerivedValues) -> list[Segment]:
    if derived.cholesterol.overall is not LipidTier.RAISED:
        return []
    if diet_of(record) is DietPattern.VEGAN:
        body = (
            "Prioritise soluble fibre daily (oats, beans, lentils, chickpeas, fruit and "
            "vegetables). Include plant based omega 3 sources such as chia seeds, flaxseed and "
            "walnuts. Choose whole plant fats like avocado, nuts and olive oil."
        )
    else:
        body = (
            "Prioritise soluble fibre daily (oats, beans, lentils, chickpeas, fruit and "
            "vegetables) and swap saturated fats for unsaturated fats (olive oil, nuts, seeds, "
            "avocado and oily fish)."
        )
    return [labelled("Cholesterol focus", body)]


_MILD_FATIGUE_ROUTINE = {
    MobilityTier.WHEELCHAIR: "adapted upper body movement",
    MobilityTier.LIMITED: "gentle chair based activity",
    MobilityTier.NONE: "a short daily walk",
}


def _fatigue_first_week(record: AssessmentRecord, level: FatigueLevel | None) -> list[Segment]:
    if level in (FatigueLevel.MODERATE, FatigueLevel.SIGNIFICANT):
        return [
            labelled(
                "Energy focus",
                f"Your fatigue score suggests {level.value.lower()}. Book a GP appointment to "
                "discuss fatigue and consider routine blood tests to rule out common causes such "
                "as anaemia and thyroid function.",
            ),
            labelled(
                "Sleep focus",
                "Set a consistent sleep and wake time and reduce caffeine after 2pm.",
            ),
        ]
    if level is FatigueLevel.MILD:
        routine = _MILD_FATIGUE_ROUTINE[tier_of(record)]
        return [labelled(
            "Energy focus",
            "Start a simple routine with a consistent bedtime, morning daylight exposure and "
            f"{routine} to support sleep and energy.",
        )]
    return []


# ---------------------------------------------------------------------------
# Weeks 2 to 4
# ---------------------------------------------------------------------------

def _movement_second_week(record: AssessmentRecord, derived: DerivedValues) -> Segment:
    tier = tier_of(record)
    bmi = derived.bmi_value
    if tier is MobilityTier.WHEELCHAIR:
        body = (
            "Build your adapted activity sessions this week. Aim for 3 sessions of 15 to 20 "
            "minutes of upper body exercises, resistance band work or seated stretching. A "
            "physiotherapist can help create a safe and effective plan for you."
        )
    elif tier is MobilityTier.LIMITED:
        body = (
            "Build your chair based or supported activity sessions this week. Aim for 3 "
            "sessions of 15 to 20 minutes of chair exercises, resistance band work or seated "
            "stretching."
        )
    elif post_exertional(record):
        body = (
            "Given your post-exertional symptoms, focus on very gentle paced activity. Aim for 3 "
            "sessions of 5 to 10 minutes maximum with full recovery between sessions. Only "
            "increase if you are recovering well the next day."
        )
    elif bmi is not None and bmi >= 25:
        body = (
            "Build towards 150 minutes per week of moderate activity over time. This week aim "
            "for 3 sessions of 20 minutes brisk walking or equivalent."
        )
    else:
        body = (
            "Aim for 10 to 20 minutes of walking or gentle activity on most days to support "
            "heart health and mood."
        )
    return labelled("Movement", body)


def _weekly_items(record: AssessmentRecord, derived: DerivedValues) -> list[list[Segment]]:
    bp = derived.bp_category

    week1 = _blood_pressure_first_week(record, bp)
    week1 += _weight_first_week(record, derived)
    week1 += _cholesterol_first_week(record, derived)
    week1 += _fatigue_first_week(record, derived.fatigue_level)

    week2 = []
    if bp in _GP_CONFIRMATION:
        week2.append(labelled(
            "Blood pressure",
            "Continue home blood pressure checks if using a monitor. If your average remains "
            "raised, keep your GP appointment and take your readings with you.",
        ))
    week2.append(_movement_second_week(record, derived))

    week3 = [labelled(
        "Consolidate",
        "Refine your routine. Choose the one change that felt easiest and repeat it daily.",
    )]
    if derived.fatigue_level is not None:
        week3.append(labelled(
            "Energy",
            "Add one recovery habit such as 10 minutes of wind down time before bed with no "
            "screens or a short daytime break for breathing and relaxation.",
        ))
    average = derived.wellbeing_value
    if average is not None and average < 6:
        week3.append(labelled(
            "Wellbeing",
            "Review the areas you scored lowest and pick one small and measurable step to "
            "improve it this week.",
        ))

    week4 = [labelled(
        "Review",
        "Look back at your week to week progress and note what helped most (food, movement, "
        "sleep or stress management).",
    )]
    if bp in _GP_CONFIRMATION:
        week4.append(labelled(
            "Blood pressure",
            "Bring your home blood pressure averages to your GP if requested and discuss whether "
            "ongoing monitoring or treatment is needed.",
        ))
    week4.append(labelled(
        "Corezen follow up",
        "Rebook with Corezen Health for a follow up screening to recheck blood pressure, weight "
        "and BMI and (if applicable) cholesterol, fatigue scores and wellbeing. We will adjust "
        "your plan based on your progress.",
    ))
    return [week1, week2, week3, week4]


def _resources(record: AssessmentRecord) -> Segment:
    table = signpost_table()
    parts = []
    if smokes(record):
        parts.append(table.plan_smoking)
    if drinks_alcohol(record):
        parts.append(table.plan_alcohol)
    parts.extend(table.plan_general)
    parts.append(table.safety_net)
    return labelled("Helpful resources", " ".join(parts))


def compose_priority_plan(record: AssessmentRecord, derived: DerivedValues) -> list[Segment]:
    """Intro, one segment per non-empty week, then the resource block."""
    lines = [labelled(
        "Your 4 week action plan",
        "This plan is tailored to your results today. It focuses on practical and realistic "
        "steps you can repeat consistently.",
    )]
    for title, items in zip(WEEKS, _weekly_items(record, derived)):
        if items:
            lines.append(concat(heading(title), *items))
        else:
            logger.debug("Plan bucket %s has no items; omitted", title)
    lines.append(_resources(record))
    return lines
