"""Enumerated answer sets for the assessment form.

Each select field has exactly one table here. Answers are stored as the option
text itself; an empty string means the question was not answered.
"""

from __future__ import annotations

from enum import Enum

# ---------------------------------------------------------------------------
# Shared answer sets
# ---------------------------------------------------------------------------

YES_NO = ("No", "Yes")
YES_NO_UNSURE = ("No", "Yes", "Not sure")
SCORE_0_10 = tuple(str(n) for n in range(11))

CHALDER_QUESTIONS = {
    "1": "Do you have problems with tiredness",
    "2": "Do you need to rest more",
    "3": "Do you feel sleepy or drowsy",
    "4": "Do you have problems starting things",
    "5": "Do you lack energy",
    "6": "Do you have less strength in your muscles",
    "7": "Do you feel weak",
    "8": "Do you have difficulty concentrating",
    "9": "Do you make slips of the tongue when speaking",
    "10": "Do you find it more difficult to find the right word",
    "11": "How is your memory",
}

WELLBEING_DOMAINS = {
    "energy": "Energy and fatigue",
    "sleep": "Sleep quality",
    "mood": "Mood and stress",
    "activity": "Physical activity",
    "nutrition": "Nutrition",
    "social": "Social connection",
    "stress": "Stress management",
    "work_life": "Work-life balance",
    "purpose": "Sense of purpose",
    "life_satisfaction": "Overall life satisfaction",
}

STRESSORS = (
    "Work / workload",
    "Family / relationships",
    "Health concerns",
    "Finances",
    "Caring responsibilities",
    "Other",
)

# Keyed "<group>.<field>"; fields absent here are free text or numeric entry.
FIELD_OPTIONS: dict[str, tuple[str, ...]] = {
    "lifestyle.smoker": ("No", "Yes", "Ex-smoker"),
    "lifestyle.family_history": YES_NO_UNSURE,
    "lifestyle.diabetes": YES_NO_UNSURE,
    "lifestyle.bp_medication": YES_NO,
    "lifestyle.exercise": YES_NO,
    "lifestyle.exercise_frequency": (
        "None",
        "1 to 2 times per week",
        "3 to 4 times per week",
        "5 or more times per week",
    ),
    "lifestyle.alcohol": YES_NO,
    "lifestyle.alcohol_units_week": ("0", "1 to 7", "8 to 14", "15 to 21", "22 or more"),
    "lifestyle.mobility_level": (
        "No limitations",
        "Mild limitation",
        "Limited mobility",
        "Uses walking aid",
        "Wheelchair user",
        "Housebound",
    ),
    "lifestyle.activity_barrier": (
        "None", "Pain", "Breathlessness", "Fatigue", "Time", "Motivation", "Other",
    ),
    "lifestyle.diet_pattern": (
        "No special diet", "Vegetarian", "Vegan", "Pescatarian", "Halal", "Kosher", "Other",
    ),
    "lifestyle.food_access": (
        "No concerns",
        "Limited budget",
        "Limited cooking facilities",
        "Low appetite or poor intake",
        "Not sure or prefer not to say",
    ),
    "lifestyle.last_caffeine_time": (
        "No caffeine", "Before 12:00", "12:00 to 14:00", "14:00 to 16:00", "After 16:00",
    ),
    "clinical.diabetes_type": (
        "No diabetes", "Type 1", "Type 2", "Pre-diabetes", "Gestational", "Not sure",
    ),
    "clinical.known_hypertension": YES_NO_UNSURE,
    "clinical.known_high_cholesterol": YES_NO_UNSURE,
    "clinical.sleep_apnoea": YES_NO_UNSURE,
    "clinical.pregnancy_status": ("Not applicable", "Pregnant", "Postpartum (under 12 months)"),
    "clinical.shift_work": ("No", "Yes, nights", "Yes, rotating", "Yes, other"),
    "clinical.nights_per_month": ("Not applicable", "1 to 4", "5 to 10", "11 or more"),
    "clinical.snoring": YES_NO_UNSURE,
    "clinical.witnessed_apnoea": YES_NO_UNSURE,
    "clinical.daytime_sleepiness": SCORE_0_10,
    "clinical.restless_legs": YES_NO_UNSURE,
    "clinical.home_bp_monitor": YES_NO_UNSURE,
    "clinical.cv_event_history": (
        "No known event",
        "Previous heart attack",
        "Previous stroke or TIA",
        "Angina",
        "Other, GP managed",
        "Not sure",
    ),
    "clinical.kidney_disease": YES_NO_UNSURE,
    "clinical.family_history_early": YES_NO_UNSURE,
    "clinical.falls_12m": ("No", "Yes, one fall", "Yes, two or more"),
    "clinical.pain_limiting_movement": SCORE_0_10,
    "clinical.upper_limb_function": (
        "No limitation", "Mild limitation", "Moderate limitation", "Severe limitation",
    ),
    "fatigue.sleep_quality": ("Very poor", "Poor", "Fair", "Good", "Very good"),
    "fatigue.difficulty_falling_asleep": YES_NO,
    "fatigue.wake_night": ("0", "1-2", "3-4", "5+"),
    "fatigue.refreshed_waking": YES_NO,
    "fatigue.caffeine_intake": ("None", "1", "2", "3", "4+"),
    "fatigue.water_intake": ("Under 1L", "1-1.5L", "1.5-2L", "2-3L", "Over 3L"),
    "fatigue.stress_level": SCORE_0_10,
    "fatigue.diet_quality": SCORE_0_10,
    "fatigue.overall_health": ("Good", "Fair", "Poor", "Very poor"),
    "fatigue.daily_alcohol": ("None", "1 to 2 drinks", "3 to 4 drinks", "5 or more drinks"),
    "fatigue.afternoon_crash": ("Yes, severe", "Yes, moderate", "Yes, mild", "No"),
    "fatigue.urge_nap": ("Daily", "Most days", "Sometimes", "Rarely", "Never"),
    "fatigue.brain_fog": YES_NO_UNSURE,
    "fatigue.need_caffeine": ("Never", "Rarely", "Sometimes", "Often", "Always"),
    "fatigue.concentration": SCORE_0_10,
    "fatigue.motivation": SCORE_0_10,
    "fatigue.muscle_aches": YES_NO_UNSURE,
    "fatigue.joint_pain": YES_NO_UNSURE,
    "fatigue.worse_after_activity": YES_NO_UNSURE,
    "fatigue.recovery_time": (
        "Not applicable", "Under 24 hours", "1-2 days", "3-7 days", "Over 7 days",
    ),
    "fatigue.activity_crashes": YES_NO_UNSURE,
    "fatigue.duration": ("Under 4 weeks", "1-3 months", "3-6 months", "6-12 months", "Over 12 months"),
    "fatigue.trend": ("Worse", "Better", "Stable", "Variable"),
    "wellbeing.mood_description": (
        "Mostly stable", "Low mood", "Anxious / worried", "Low mood and anxious",
    ),
    "wellbeing.mood_frequency": ("Rarely", "Some days", "Most days", "Every day"),
    "wellbeing.stressors": STRESSORS,
    "wellbeing.relaxation": ("None at the moment", "Occasionally", "Most days", "Daily"),
    "wellbeing.social_support": (
        "Strong support network", "Some support", "Limited support / feel isolated",
    ),
    "wellbeing.mindfulness": ("Yes", "No", "Already do it"),
    "wellbeing.breathing": ("Yes", "No", "Already do it"),
    "wellbeing.work_pattern": (
        "Day shifts", "Night shifts", "Rotating shifts", "Not working / retired",
    ),
    "urinalysis.leukocytes": ("Negative", "Trace", "+1 (Small)", "+2 (Moderate)", "+3 (Large)"),
    "urinalysis.nitrites": ("Negative", "Positive"),
    "urinalysis.protein": (
        "Negative", "Trace", "+1 (30 mg/dL)", "+2 (100 mg/dL)", "+3 (300 mg/dL)", "+4 (>1000 mg/dL)",
    ),
    "urinalysis.blood": ("Negative", "Trace", "+1 (Small)", "+2 (Moderate)", "+3 (Large)"),
    "urinalysis.glucose": (
        "Negative", "Trace", "+1 (100 mg/dL)", "+2 (250 mg/dL)", "+3 (500 mg/dL)", "+4 (>1000 mg/dL)",
    ),
    "urinalysis.ketones": ("Negative", "Trace", "+1 (Small)", "+2 (Moderate)", "+3 (Large)"),
    "urinalysis.bilirubin": ("Negative", "+1 (Small)", "+2 (Moderate)", "+3 (Large)"),
    "urinalysis.urobilinogen": ("Normal (0.2-1.0)", "Raised (>1.0)"),
    "urinalysis.ph": ("5.0", "5.5", "6.0", "6.5", "7.0", "7.5", "8.0", "8.5", "9.0"),
    "urinalysis.specific_gravity": ("1.000", "1.005", "1.010", "1.015", "1.020", "1.025", "1.030"),
}


# ---------------------------------------------------------------------------
# Lifestyle axes used to select movement and nutrition advice
# ---------------------------------------------------------------------------

class MobilityTier(str, Enum):
    NONE = "none"
    LIMITED = "limited"
    WHEELCHAIR = "wheelchair"


class DietPattern(str, Enum):
    OMNIVORE = "omnivore"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    PESCATARIAN = "pescatarian"
    HALAL = "halal"
    KOSHER = "kosher"


_MOBILITY_TIERS = {
    "Limited mobility": MobilityTier.LIMITED,
    "Uses walking aid": MobilityTier.LIMITED,
    "Housebound": MobilityTier.LIMITED,
    "Wheelchair user": MobilityTier.WHEELCHAIR,
}

_DIET_PATTERNS = {
    "Vegetarian": DietPattern.VEGETARIAN,
    "Vegan": DietPattern.VEGAN,
    "Pescatarian": DietPattern.PESCATARIAN,
    "Halal": DietPattern.HALAL,
    "Kosher": DietPattern.KOSHER,
}


def mobility_tier(mobility_level: str) -> MobilityTier:
    """Collapse the recorded mobility level onto the three advice tiers."""
    return _MOBILITY_TIERS.get(mobility_level, MobilityTier.NONE)


def diet_pattern(recorded: str) -> DietPattern:
    """Map the recorded diet answer; unanswered, none and other are omnivore."""
    return _DIET_PATTERNS.get(recorded, DietPattern.OMNIVORE)
