"""Advice for the wellbeing check and its optional deep dive."""

from __future__ import annotations

from wellcheck.core.text.segments import Segment, labelled, user_text
from wellcheck.domains.assessment.advice.lifestyle import (
    diet_of,
    high_stress,
    poor_sleep,
    tier_of,
    wellbeing_food_advice,
    wellbeing_movement_advice,
)
from wellcheck.domains.assessment.advice.signposts import signpost
from wellcheck.domains.assessment.domain_logic.classification import wellbeing_average
from wellcheck.domains.assessment.models.derived import WellbeingCategory
from wellcheck.domains.assessment.models.record import AssessmentRecord

_EXPLANATION = (
    "Your wellbeing rating gives a snapshot of how you feel across key areas today. Improving "
    "wellbeing usually works best when you target one to two small habits at a time rather "
    "than trying to change everything at once."
)
_CAVEAT = (
    "The average is based on the areas you scored today and can shift from week to week. It "
    "is a way to choose where to start, not a measure of mental health."
)

_FAIRLY_WELL = "Your overall wellbeing score suggests you are doing fairly well at the moment."
_RESULT = {
    WellbeingCategory.STRONG: _FAIRLY_WELL,
    WellbeingCategory.GOOD: _FAIRLY_WELL,
    WellbeingCategory.NEEDS_SUPPORT: (
        "Your overall wellbeing score suggests there are a few areas that could be improved "
        "with targeted and realistic changes."
    ),
    WellbeingCategory.LOW: (
        "Your overall wellbeing score suggests you are struggling at the moment. This is a "
        "signal to prioritise support and simplify your plan into very small and achievable "
        "steps."
    ),
}

_OPEN_TO_PRACTICE = {"Yes", "Already do it"}

_STRESSOR_ADVICE = (
    ("Work / workload", "Work stress",
     "You identified work or workload as a stress driver. Consider setting one clear boundary "
     "this week such as a defined finish time, a lunch break away from your desk or limiting "
     "email checking outside work hours."),
    ("Caring responsibilities", "Caring responsibilities",
     "You identified caring responsibilities as a stress driver. Carers often neglect their "
     "own needs. Try to build in one small thing for yourself each day, even just 10 minutes. "
     "Carers UK (carersuk.org) provides support and information for carers."),
    ("Finances", "Financial stress",
     "You identified finances as a stress driver. Practical support is available through "
     "Citizens Advice (citizensadvice.org.uk) and the Money Helper service "
     "(moneyhelper.org.uk). Addressing financial worries can reduce overall stress levels."),
    ("Health concerns", "Health concerns",
     "You identified health concerns as a stress driver. Addressing health worries with your "
     "GP can help reduce anxiety. This screening is a positive step towards understanding "
     "your health better."),
    ("Family / relationships", "Family and relationships",
     "You identified family or relationships as a stress driver. Relate (relate.org.uk) offers "
     "counselling and support for relationship and family difficulties."),
)


def _tier_guidance(record: AssessmentRecord, category: WellbeingCategory) -> list[Segment]:
    if category in (WellbeingCategory.STRONG, WellbeingCategory.GOOD):
        return [labelled(
            "Maintaining this",
            "Keep what is working and choose one small upgrade that supports long term health "
            "such as a short daily walk, adding more vegetables or maintaining a consistent "
            "bedtime.",
        )]
    if category is WellbeingCategory.LOW:
        return [labelled(
            "One anchor habit",
            "If you feel overwhelmed, choose one daily anchor. A short walk, a regular meal and "
            "a consistent wake time are good starting points.",
        )]

    lines = []
    if high_stress(record):
        lines.append(labelled(
            "Stress focus",
            "Your stress rating is high. Try a daily breathing reset and one boundary such as a "
            "fixed stop time for work messages or a 10 minute walk after lunch.",
        ))
    if poor_sleep(record):
        lines.append(labelled(
            "Sleep focus",
            "Your sleep rating is low. Keep a consistent wake time, reduce screens for 60 "
            "minutes before bed and keep caffeine earlier in the day.",
        ))
    return lines


def _personalisation(record: AssessmentRecord) -> list[Segment]:
    check = record.wellbeing
    lines = []

    mood = check.mood_description
    if mood:
        frequency = f" ({check.mood_frequency.lower()})" if check.mood_frequency else ""
        lines.append(labelled(
            "Mood noted",
            f"You indicated your mood is {mood.lower()}{frequency}. This helps tailor your plan.",
        ))
        if "low" in mood.lower() or "anx" in mood.lower():
            lines.append(labelled(
                "Support available",
                "If low mood or anxiety is affecting day to day life most days, consider "
                "booking a GP appointment to discuss support options including talking "
                "therapies and self help resources. If you ever feel unsafe, seek urgent help "
                "via NHS 111 or 999.",
            ))

    for tag, label, body in _STRESSOR_ADVICE:
        if tag in check.stressors:
            lines.append(labelled(label, body))

    if check.work_pattern in ("Night shifts", "Rotating shifts"):
        lines.append(labelled(
            "Shift work",
            "You work nights or rotating shifts. This can affect sleep, mood and energy. Try to "
            "keep meal times as consistent as possible, use blackout curtains for daytime "
            "sleep, avoid heavy meals before bed shifts and limit caffeine in the second half "
            "of your shift.",
        ))

    if check.relaxation == "None at the moment":
        lines.append(labelled(
            "Switch off time",
            "You reported little switch off time at the moment. A realistic starting point is "
            "a protected 10 minutes once daily. Choose one low effort activity that settles "
            "your nervous system such as a slow walk, gentle stretching, a warm drink without "
            "screens or a brief breathing practice.",
        ))

    if check.social_support == "Limited support / feel isolated":
        lines.append(labelled(
            "Social connection",
            "You reported limited support or feeling isolated. Building connection can be part "
            "of your health plan. Try one check in message to a trusted person each week, "
            "consider joining a local group (such as a walking group or hobby group) or use "
            "telephone support lines if you prefer anonymous support.",
        ))

    if check.mindfulness in _OPEN_TO_PRACTICE:
        lines.append(labelled(
            "Mindfulness practice",
            "How to try mindfulness (2 to 3 minutes): Sit comfortably and focus on your "
            "breathing. When thoughts pull you away, gently return to the feeling of breathing. "
            "If that feels hard, try a senses scan. Notice 5 things you can see, 4 you can "
            "feel, 3 you can hear, 2 you can smell and 1 you can taste.",
        ))

    if check.breathing in _OPEN_TO_PRACTICE:
        lines.append(labelled(
            "Breathing technique",
            "Breathe in through your nose for 4 seconds, pause for 1 second and breathe out "
            "slowly for 6 seconds. Repeat for 2 to 3 minutes. Keep your shoulders relaxed and "
            "breathe low into the belly rather than the upper chest.",
        ))

    if check.priorities:
        lines.append(user_text("Your priorities", check.priorities, before="You told us: "))
    return lines


def compose_wellbeing(record: AssessmentRecord, category: WellbeingCategory | None) -> list[Segment]:
    if category is None:
        return []
    average = wellbeing_average(record.wellbeing)
    score = f"Your average today is {average} out of 10, classified as {category.value}. "
    lines = [
        labelled("What this reflects", _EXPLANATION),
        labelled("Important note", _CAVEAT),
        labelled("Your result", f"{score}{_RESULT[category]}"),
    ]
    lines.extend(_tier_guidance(record, category))
    lines.extend(_personalisation(record))
    lines.extend([
        wellbeing_food_advice(diet_of(record)),
        labelled(
            "Fibre rich foods",
            "Include oats, wholegrain bread, beans, lentils, chickpeas, vegetables, berries, "
            "apples, pears and seeds such as chia or flax most days. If you increase fibre, "
            "increase your fluid intake too.",
        ),
        wellbeing_movement_advice(tier_of(record), record.lifestyle.activity_barrier),
        labelled(
            "Breathing exercise",
            "Try box breathing. Breathe in for 4 seconds, hold for 4 seconds, breathe out for 4 "
            "seconds and hold for 4 seconds. Repeat for 2 to 4 minutes. If you feel "
            "light-headed, stop and return to normal breathing.",
        ),
        labelled(
            "Follow up",
            "Consider a Corezen Health check in within 4 weeks to review changes and adjust "
            "your plan. If mood is persistently low, anxiety is severe or you have thoughts of "
            "self harm, seek urgent help via NHS 111, your GP or emergency services.",
        ),
        signpost("mind"),
    ])
    return lines
