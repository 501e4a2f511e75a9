"""Advice for the clinic vitals: blood pressure, BMI and resting pulse."""

from __future__ import annotations

from wellcheck.core.text.segments import Segment, labelled
from wellcheck.domains.assessment.advice.lifestyle import (
    alcohol_advice,
    diet_of,
    drinks_alcohol,
    heart_food_advice,
    heart_movement_advice,
    high_stress,
    late_caffeine,
    poor_sleep,
    pulse_movement_advice,
    smokes,
    smoking_advice,
    tier_of,
    weekly_units,
    weight_nutrition_advice,
)
from wellcheck.domains.assessment.advice.signposts import signpost
from wellcheck.domains.assessment.domain_logic.classification import (
    calculate_bmi,
    parse_number,
    round_half_up,
)
from wellcheck.domains.assessment.models.derived import (
    BloodPressureCategory,
    BMICategory,
    PulseCategory,
)
from wellcheck.domains.assessment.models.record import AssessmentRecord

# ---------------------------------------------------------------------------
# Blood pressure
# ---------------------------------------------------------------------------

_BP_EXPLANATION = (
    "Blood pressure measures the force of blood against your artery walls. The first number "
    "(systolic) is the pressure when your heart pumps blood out. The second number "
    "(diastolic) is the pressure when your heart rests between beats. Both numbers matter "
    "for understanding your cardiovascular health."
)
_BP_CAVEAT = (
    "Blood pressure can vary throughout the day depending on activity, stress, hydration, "
    "posture and time of day. A single reading provides a snapshot and may not reflect your "
    "usual level. This is a screening result and not a diagnosis."
)

_BP_RESULT = {
    BloodPressureCategory.VERY_HIGH: "is very high and requires prompt clinical assessment.",
    BloodPressureCategory.HIGH: (
        "is in the high range. This is a screening finding and not a diagnosis. Further "
        "readings are needed to confirm whether this reflects your usual blood pressure."
    ),
    BloodPressureCategory.RAISED: (
        "is above the recommended range. This is a screening finding and not a diagnosis. "
        "Many people can improve readings with consistent lifestyle changes but GP "
        "confirmation is still important."
    ),
    BloodPressureCategory.HIGHER_END: (
        "is at the higher end of the normal range. This is an ideal time to focus on "
        "preventive lifestyle measures."
    ),
    BloodPressureCategory.LOW: (
        "is lower than typical. This is often normal, especially if you feel well and have "
        "no symptoms."
    ),
    BloodPressureCategory.NORMAL: (
        "is within the healthy range. This supports long term heart and brain health."
    ),
}
_BP_RESULT[BloodPressureCategory.OPTIMAL] = _BP_RESULT[BloodPressureCategory.NORMAL]

_MAINTAIN_BP = [
    ("Maintaining this",
     "Continue with your current healthy habits. Regular physical activity, a balanced diet, "
     "maintaining a healthy weight and limiting alcohol all support cardiovascular health."),
    ("Corezen follow up",
     "Routine screening every 1 to 2 years is recommended. Rebook with Corezen Health for "
     "your next check."),
]

_BP_GUIDANCE: dict[BloodPressureCategory, list[tuple[str, str]]] = {
    BloodPressureCategory.VERY_HIGH: [
        ("Action needed",
         "Contact your GP surgery today for further assessment. If you experience chest pain, "
         "severe headache, breathlessness, visual changes, weakness, confusion or feel acutely "
         "unwell, call 999 or attend A&E immediately."),
        ("Follow up",
         "Once you have seen your GP, you are welcome to rebook with Corezen Health for "
         "monitoring and ongoing support."),
    ],
    BloodPressureCategory.HIGH: [
        ("Action needed",
         "Book a GP appointment within 1 to 2 weeks. Your GP may arrange home or ambulatory "
         "monitoring and discuss your overall cardiovascular risk including cholesterol, "
         "diabetes and kidney health."),
        ("Home monitoring",
         "If you have a home blood pressure monitor, take readings twice daily (morning and "
         "evening) for 4 to 7 days. Sit quietly for 5 minutes beforehand with your feet flat "
         "on the floor and cuff at heart level. Avoid talking during the reading. Record all "
         "readings and bring them to your GP."),
        ("Corezen follow up",
         "Rebook with Corezen Health in 1 to 2 weeks if you would like support interpreting "
         "your home readings or would like a repeat clinic check."),
    ],
    BloodPressureCategory.RAISED: [
        ("Action needed",
         "Arrange a routine GP appointment to discuss your blood pressure and whether home "
         "monitoring or further assessment is needed."),
        ("Home monitoring",
         "If requested by your GP, take readings twice daily (morning and evening) for 4 to 7 "
         "days. Sit quietly for 5 minutes beforehand with your feet flat on the floor and cuff "
         "at heart level."),
        ("Corezen follow up",
         "Rebook with Corezen Health in 2 to 4 weeks to review your progress and repeat your "
         "screening."),
    ],
    BloodPressureCategory.HIGHER_END: [
        ("Action needed",
         "No urgent GP review is needed. Focus on lifestyle steps such as reducing salt "
         "intake, maintaining a healthy weight, regular physical activity and limiting "
         "alcohol."),
        ("Corezen follow up",
         "Rebook with Corezen Health in 6 to 12 months for a routine recheck or sooner if you "
         "would like to monitor your progress."),
    ],
    BloodPressureCategory.LOW: [
        ("Action needed",
         "If you experience dizziness, fainting, light-headedness or new symptoms, speak to "
         "your GP. Stay well hydrated and change position slowly when standing from sitting "
         "or lying."),
        ("Hydration",
         "Aim for pale straw coloured urine throughout the day. If you take blood pressure "
         "medications and have symptoms, discuss this with your GP."),
    ],
    BloodPressureCategory.NORMAL: _MAINTAIN_BP,
    BloodPressureCategory.OPTIMAL: _MAINTAIN_BP,
}


def compose_blood_pressure(
    record: AssessmentRecord,
    category: BloodPressureCategory | None,
) -> list[Segment]:
    if category is None:
        return []
    vitals = record.vitals
    reading = f"{vitals.systolic}/{vitals.diastolic} mmHg"

    lines = [
        labelled("What this means", _BP_EXPLANATION),
        labelled("Important note", _BP_CAVEAT),
        labelled("Your result", f"Your reading today ({reading}) {_BP_RESULT[category]}"),
    ]
    lines.extend(labelled(label, body) for label, body in _BP_GUIDANCE[category])

    if category is BloodPressureCategory.LOW:
        lines.append(signpost("lowbp"))
        return lines

    lines.extend(smoking_advice(
        record,
        "Smoking raises blood pressure and damages your arteries. NHS stop smoking support "
        "through your pharmacy or GP significantly improves quit success rates.",
    ))
    lines.extend(alcohol_advice(record))
    lines.extend(heart_food_advice(diet_of(record)))
    lines.append(heart_movement_advice(tier_of(record), record.lifestyle.activity_barrier))
    lines.append(signpost("bp"))
    return lines


# ---------------------------------------------------------------------------
# BMI
# ---------------------------------------------------------------------------

_BMI_EXPLANATION = (
    "BMI (Body Mass Index) is a screening tool that compares your weight to your height. It "
    "does not directly measure body fat or muscle composition so it is interpreted alongside "
    "your wider health context. Athletes and people with higher muscle mass may have a higher "
    "BMI without increased health risk."
)
_WAIST_CAVEAT = (
    "Waist circumference can add useful context. A higher waist size is linked to higher "
    "cardiometabolic risk even when BMI appears normal."
)

_BMI_RESULT = {
    BMICategory.UNDERWEIGHT: (
        "This is below the usual healthy range. If this is new, unintentional or accompanied "
        "by symptoms such as appetite change, bowel changes or fatigue, GP review is "
        "recommended."
    ),
    BMICategory.HEALTHY: (
        "This is within the healthy range which is associated with the lowest risk of weight "
        "related conditions."
    ),
    BMICategory.OVERWEIGHT: (
        "This is above the healthy range. Even modest weight loss of 5 to 10 percent can "
        "improve blood pressure, cholesterol and energy levels."
    ),
    BMICategory.OBESE: (
        "This is in a range associated with increased risk of type 2 diabetes, high blood "
        "pressure, sleep apnoea and cardiovascular disease. The most effective approach is "
        "steady and sustainable change."
    ),
}


def weight_loss_target(weight_kg: float, fraction: float, floor: int) -> int:
    """Whole kilograms for a fractional loss target, never below ``floor``."""
    return max(floor, int(round_half_up(weight_kg * fraction, 0)))


def _bmi_guidance(category: BMICategory, weight: float | None) -> list[Segment]:
    if category is BMICategory.UNDERWEIGHT:
        return [
            labelled(
                "Food approach",
                "Prioritise nutrient dense calories. Add olive oil, nut butters, avocado and "
                "full fat yoghurt (if you consume dairy) and include extra snacks between "
                "meals. Include protein with every meal to support muscle maintenance.",
            ),
            labelled(
                "Action needed",
                "Consider arranging a GP review to discuss possible underlying causes and "
                "receive tailored support.",
            ),
        ]
    if category is BMICategory.HEALTHY:
        return [labelled(
            "Maintaining this",
            "Continue with balanced meals, regular movement and a good sleep routine. If you "
            "have specific body composition goals, strength training twice weekly can support "
            "muscle maintenance.",
        )]

    lines = []
    if category is BMICategory.OVERWEIGHT:
        if weight:
            lines.append(labelled(
                "Realistic target",
                f"A practical first target is around {weight_loss_target(weight, 0.05, 1)} kg "
                "over 10 to 12 weeks using small and repeatable steps.",
            ))
        lines.append(labelled(
            "Corezen follow up",
            "Rebook with Corezen Health in 4 to 8 weeks to review your progress.",
        ))
        return lines

    if weight:
        low = weight_loss_target(weight, 0.05, 1)
        high = weight_loss_target(weight, 0.10, 2)
        lines.append(labelled(
            "Realistic target",
            f"A first target of 5 to 10 percent weight loss (about {low} to {high} kg) over "
            "the next 3 to 6 months. Even this modest change can improve blood pressure, "
            "cholesterol and energy levels.",
        ))
    lines.append(labelled(
        "Action needed",
        "If your BMI is significantly elevated or you have related conditions, your GP can "
        "discuss structured weight management options and additional support. Rebook with "
        "Corezen Health in 4 to 8 weeks to track your progress.",
    ))
    return lines


def compose_bmi(record: AssessmentRecord, category: BMICategory | None) -> list[Segment]:
    if category is None:
        return []
    bmi = calculate_bmi(record.vitals.height_cm, record.vitals.weight_kg)
    weight = parse_number(record.vitals.weight_kg)
    if weight is not None and weight <= 0:
        weight = None

    lines = [
        labelled("What this means", _BMI_EXPLANATION),
        labelled("Waist measurement", _WAIST_CAVEAT),
        labelled(
            "Your result",
            f"Your BMI today is {bmi} kg/m², classified as {category.value}. "
            f"{_BMI_RESULT[category]}",
        ),
    ]
    lines.extend(_bmi_guidance(category, weight))
    if category is not BMICategory.UNDERWEIGHT:
        lines.extend(weight_nutrition_advice(diet_of(record)))
    lines.append(heart_movement_advice(tier_of(record), record.lifestyle.activity_barrier))
    lines.append(signpost("weight"))
    return lines


# ---------------------------------------------------------------------------
# Resting pulse
# ---------------------------------------------------------------------------

_PULSE_EXPLANATION = (
    "Your resting pulse is the number of times your heart beats per minute while you are at "
    "rest. A normal resting pulse for most adults is between 60 and 100 beats per minute."
)
_PULSE_CAVEAT = (
    "A single resting reading can be affected by caffeine, recent activity, stress, pain and "
    "how long you were seated before the check."
)

_PULSE_RESULT = {
    PulseCategory.NORMAL: (
        "is within the normal range. This generally indicates healthy cardiovascular function."
    ),
    PulseCategory.BELOW: (
        "is below the typical range. This can be normal in very fit individuals or during "
        "deep relaxation."
    ),
    PulseCategory.ABOVE: (
        "is above the typical range. This can occur with stress, dehydration, pain, fever, "
        "caffeine, nicotine and poor sleep."
    ),
}

_PULSE_GUIDANCE: dict[PulseCategory, list[tuple[str, str]]] = {
    PulseCategory.NORMAL: [
        ("Healthy habits",
         "Regular hydration, steady sleep routines and breathing practices all support a "
         "stable resting pulse over time."),
    ],
    PulseCategory.BELOW: [
        ("When to seek advice",
         "If you experience symptoms such as dizziness, faintness, breathlessness or chest "
         "discomfort, please speak to your GP. Certain medications (such as beta blockers), "
         "thyroid conditions and electrolyte imbalances can lower pulse rate."),
        ("Healthy habits",
         "Staying well hydrated, maintaining steady sleep patterns and regular breathing "
         "practices all support cardiovascular health."),
    ],
    PulseCategory.ABOVE: [
        ("Immediate steps",
         "Ensure you are well hydrated, reduce caffeine and nicotine intake if applicable and "
         "allow time for rest and recovery."),
        ("When to seek advice",
         "If you experience palpitations, chest pain, breathlessness, faintness or your pulse "
         "remains consistently elevated at rest, please speak to your GP."),
    ],
}


def _pulse_factors(record: AssessmentRecord) -> list[str]:
    factors = []
    if smokes(record):
        factors.append(
            "You noted that you smoke. Nicotine increases resting heart rate. Stopping smoking "
            "supports a healthier resting pulse and overall cardiovascular health."
        )
    if late_caffeine(record) or record.fatigue.caffeine_intake == "4+":
        factors.append(
            "You noted higher caffeine intake. Caffeine can temporarily raise your heart rate. "
            "Consider reducing caffeine after lunchtime to support a calmer resting pulse."
        )
    if poor_sleep(record):
        factors.append(
            "You noted poor sleep quality. Poor sleep can elevate resting heart rate. "
            "Improving sleep hygiene supports a healthier resting pulse."
        )
    if high_stress(record):
        factors.append(
            "You noted high stress levels. Chronic stress activates your nervous system and "
            "can elevate resting pulse. Regular breathing exercises, physical activity and "
            "rest periods support a calmer heart rate."
        )
    units = weekly_units(record)
    if drinks_alcohol(record) and units is not None and units > 14:
        factors.append(
            "Your alcohol intake is above recommended levels. Reducing alcohol can help lower "
            "resting heart rate and improve cardiovascular health."
        )
    return factors


def compose_pulse(record: AssessmentRecord, category: PulseCategory | None) -> list[Segment]:
    if category is None:
        return []
    lines = [
        labelled("What this means", _PULSE_EXPLANATION),
        labelled("Important note", _PULSE_CAVEAT),
        labelled(
            "Your result",
            f"Your resting pulse today ({record.vitals.pulse} bpm) {_PULSE_RESULT[category]}",
        ),
    ]
    lines.extend(labelled(label, body) for label, body in _PULSE_GUIDANCE[category])

    factors = _pulse_factors(record)
    if factors:
        lines.append(labelled("Based on your responses", " ".join(factors)))

    if category is not PulseCategory.BELOW:
        lines.append(pulse_movement_advice(tier_of(record)))
    lines.append(signpost("bp"))
    return lines
