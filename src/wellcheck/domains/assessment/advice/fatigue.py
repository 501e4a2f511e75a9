"""Advice for the fatigue screen (Chalder-style scale plus lifestyle drivers)."""

from __future__ import annotations

from wellcheck.core.text.segments import Segment, concat, labelled, user_text
from wellcheck.domains.assessment.advice.lifestyle import (
    diet_of,
    energy_food_advice,
    fatigue_movement_advice,
    high_stress,
    poor_sleep,
    post_exertional,
    tier_of,
)
from wellcheck.domains.assessment.advice.signposts import signpost
from wellcheck.domains.assessment.domain_logic.classification import chalder_total, parse_number
from wellcheck.domains.assessment.models.derived import FatigueLevel
from wellcheck.domains.assessment.models.options import CHALDER_QUESTIONS
from wellcheck.domains.assessment.models.record import AssessmentRecord

_EXPLANATION = (
    "Fatigue is often caused by multiple factors including sleep quality, stress load, physical "
    "activity levels, hydration, nutrition, pain, workload and recovery time. Your fatigue "
    "score is calculated using the validated Chalder Fatigue Scale which is widely used in "
    "clinical practice."
)
_CAVEAT = (
    "The score reflects how you have felt recently and is a screening measure, not a "
    "diagnosis. Each question is scored from 0 to 10 and the total is out of 110 when every "
    "question is answered."
)

_RESULT = {
    FatigueLevel.MINIMAL: (
        "Your fatigue score is within a healthier range today. This suggests your current "
        "routines are supporting energy and recovery."
    ),
    FatigueLevel.MILD: (
        "Your score suggests mild fatigue. Many people experience this when sleep and recovery "
        "slip, stress rises or activity and hydration reduce."
    ),
    FatigueLevel.MODERATE: (
        "Your score suggests more significant fatigue. This is a prompt to prioritise recovery "
        "and address the biggest drivers first which are typically sleep, stress and "
        "sustainable activity."
    ),
}
_RESULT[FatigueLevel.SIGNIFICANT] = _RESULT[FatigueLevel.MODERATE]

_LONG_RECOVERY = {"3-7 days", "Over 7 days"}
_LONG_DURATION = {"6-12 months", "Over 12 months"}
_HEAVY_CRASH = {"Yes, severe", "Yes, moderate"}
_HEAVY_DRINKING = {"3 to 4 drinks", "5 or more drinks"}
_FREQUENT_WAKING = {"3-4", "5+"}


def _tier_guidance(record: AssessmentRecord, level: FatigueLevel) -> list[Segment]:
    if level is FatigueLevel.MINIMAL:
        return [labelled(
            "Maintaining this",
            "Continue with what is working by staying consistent with sleep timing, hydration "
            "and regular movement.",
        )]

    lines = []
    if level is FatigueLevel.MILD:
        if poor_sleep(record):
            lines.append(labelled(
                "Sleep focus",
                "Build a steady routine. Keep a consistent wake time, reduce screens for 60 "
                "minutes before bed and keep your bedroom cool and dark. If you wake often, try "
                "a short breathing reset rather than checking the time.",
            ))
        if high_stress(record):
            lines.append(labelled(
                "Stress management",
                "Choose one daily decompression habit such as a short walk, stretching or "
                "breathing practice for 5 minutes. Small and consistent actions matter more "
                "than occasional large efforts.",
            ))
        return lines

    lines.append(labelled(
        "GP review",
        "If fatigue is persistent, worsening or affecting your daily activities significantly, "
        "please arrange a GP appointment to discuss possible underlying causes and consider "
        "routine blood tests.",
    ))
    if poor_sleep(record):
        lines.append(labelled(
            "Sleep priority",
            "Your sleep rating suggests recovery may be limited. Focus on routine, wind down "
            "time and reducing caffeine after lunchtime. If you experience loud snoring, pauses "
            "in breathing or significant daytime sleepiness, discuss this with your GP as it "
            "may indicate sleep apnoea.",
        ))
    if record.fatigue.wake_night in _FREQUENT_WAKING:
        lines.append(labelled(
            "Night waking",
            "If you wake several times during the night, keep the room dark, avoid checking "
            "your phone and use breathing exercises for a few minutes. If pain, reflux or "
            "bladder symptoms are driving waking, note patterns so we can tailor your plan at "
            "follow up.",
        ))
    return lines


def _personalisation(record: AssessmentRecord) -> list[Segment]:
    screen = record.fatigue
    lines = []

    if post_exertional(record):
        if screen.recovery_time in _LONG_RECOVERY:
            body = (
                "You reported that your symptoms worsen after activity and take several days "
                "to recover. This pattern is important to note. Please discuss this with your "
                "GP as it may require specific pacing strategies. Avoid pushing through fatigue "
                "as this can prolong recovery. Start with very gentle activity (5 minutes or "
                "less) and only increase when you consistently recover well the next day."
            )
        else:
            body = (
                "You reported that your symptoms worsen after activity. Pacing is important. "
                "Break activities into smaller chunks with planned rest periods. Listen to your "
                "body and stop before you feel exhausted rather than after."
            )
        lines.append(labelled("Post-exertional symptoms", body))

    if screen.brain_fog == "Yes":
        lines.append(labelled(
            "Brain fog",
            "You reported experiencing brain fog or mental fatigue. This is common with fatigue "
            "and often improves with better sleep, hydration and pacing. Keep a simple routine, "
            "use lists and reminders and avoid multitasking. If brain fog is significantly "
            "affecting your work or daily activities, discuss this with your GP.",
        ))

    if screen.afternoon_crash in _HEAVY_CRASH:
        lines.append(labelled(
            "Afternoon energy dip",
            "You reported a significant afternoon energy crash. This is often related to blood "
            "sugar patterns, sleep debt or dehydration. Try eating a balanced lunch with "
            "protein and fibre, staying hydrated throughout the day and if possible, a brief "
            "rest or short walk after lunch. Avoid sugary snacks which can worsen the crash.",
        ))

    if screen.caffeine_intake == "4+":
        lines.append(labelled(
            "Caffeine intake",
            "You noted high caffeine consumption (4 or more drinks per day). While caffeine "
            "provides short term alertness, high intake can disrupt sleep quality and create a "
            "cycle of fatigue. Consider gradually reducing intake, especially after lunchtime "
            "and replacing with water or herbal teas.",
        ))

    if screen.water_intake == "Under 1L":
        lines.append(labelled(
            "Hydration",
            "You noted low water intake (under 1 litre per day). Dehydration is a common cause "
            "of fatigue. Aim for 1.5 to 2 litres of water or other non-caffeinated fluids daily. "
            "Keep a water bottle visible as a reminder.",
        ))

    if screen.duration in _LONG_DURATION:
        lines.append(labelled(
            "Duration of fatigue",
            "You reported fatigue lasting 6 months or longer. Persistent fatigue of this "
            "duration warrants GP review to exclude underlying causes and discuss appropriate "
            "support. Please arrange an appointment if you have not already.",
        ))

    if screen.trend == "Worse":
        lines.append(labelled(
            "Fatigue trend",
            "You noted your fatigue is getting worse. This is an important signal to seek GP "
            "review sooner rather than later. Worsening fatigue can indicate an underlying "
            "issue that needs investigation.",
        ))

    diet_quality = parse_number(screen.diet_quality)
    if diet_quality is not None and diet_quality <= 4:
        lines.append(labelled(
            "Diet quality",
            "You rated your diet quality as low. Nutrition is closely linked to energy levels. "
            "Focus on including protein and fibre at each meal, eating at regular intervals and "
            "reducing ultra processed foods and sugary drinks. Small consistent changes can "
            "make a noticeable difference to energy.",
        ))

    if screen.overall_health in ("Poor", "Very poor"):
        lines.append(labelled(
            "Overall health",
            f"You rated your overall health as {screen.overall_health.lower()}. This is worth "
            "discussing with your GP to ensure any underlying health concerns are being "
            "addressed. A comprehensive health review can help identify areas for improvement.",
        ))

    if screen.daily_alcohol in _HEAVY_DRINKING:
        lines.append(concat(
            labelled(
                "Alcohol and fatigue",
                "Higher alcohol intake can significantly disrupt sleep quality and worsen "
                "fatigue. Alcohol reduces time spent in deep restorative sleep even when total "
                "sleep time appears adequate. Consider reducing intake and having alcohol free "
                "days.",
            ),
            signpost("alcohol"),
        ))

    if screen.worse_factors:
        lines.append(user_text(
            "What makes it worse",
            screen.worse_factors,
            before="You noted the following, which we will keep in mind when pacing your plan: ",
        ))
    if screen.better_factors:
        lines.append(user_text(
            "What helps",
            screen.better_factors,
            before="You noted the following, which we will build on at follow up: ",
        ))
    if screen.priorities_actions:
        lines.append(user_text("Agreed actions", screen.priorities_actions))
    return lines


def compose_fatigue(record: AssessmentRecord, level: FatigueLevel | None) -> list[Segment]:
    if level is None:
        return []
    score, answered = chalder_total(record.fatigue.chalder)
    total = len(CHALDER_QUESTIONS)

    lines = [
        labelled("What this suggests", _EXPLANATION),
        labelled("Important note", _CAVEAT),
        labelled(
            "Your result",
            f"Your fatigue score today is {score} ({answered} of {total} questions answered), "
            f"classified as {level.value}. {_RESULT[level]}",
        ),
    ]
    lines.extend(_tier_guidance(record, level))
    lines.extend(_personalisation(record))
    lines.extend([
        fatigue_movement_advice(
            tier_of(record), record.lifestyle.activity_barrier, post_exertional(record)
        ),
        energy_food_advice(diet_of(record)),
        labelled(
            "Fibre rich options",
            "Include oats, wholegrain bread, brown rice, quinoa, beans, lentils, chickpeas, "
            "berries, apples, pears, vegetables and seeds such as chia or flax most days.",
        ),
        labelled(
            "Caffeine guidance",
            "Most adults can tolerate up to around 400 mg of caffeine per day (roughly 4 cups "
            "of brewed filter coffee or 5 cups of instant coffee or 8 cups of tea). If sleep is "
            "affected, reduce intake after lunchtime and switch to decaffeinated or herbal "
            "options.",
        ),
        labelled(
            "Breathing reset",
            "Try a 4, 4, 6 pattern. Breathe in through your nose for 4 seconds, hold for 4 "
            "seconds and breathe out slowly for 6 seconds. Repeat for 3 to 5 minutes once or "
            "twice daily and before bed if your mind feels busy.",
        ),
        labelled(
            "Pacing technique",
            "Choose one task you usually push through. Break it into small chunks with a "
            "planned pause before you feel exhausted. Work for up to 20 minutes then pause for "
            "2 minutes to stretch, drink water or practise breathing. Increase duration "
            "gradually only when you are recovering well the next day.",
        ),
        labelled(
            "Follow up",
            "Consider booking a Corezen Health follow up in 2 to 4 weeks to review progress and "
            "adjust your plan. Seek GP input sooner if you have red flag symptoms such as chest "
            "pain, fainting, severe breathlessness, unexplained weight loss, persistent fever "
            "or new neurological symptoms.",
        ),
        signpost("fatigue"),
    ])
    return lines
