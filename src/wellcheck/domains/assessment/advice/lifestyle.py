"""Lifestyle sub-advice shared by the domain composers.

Movement text is selected by mobility tier (then activity barrier) and food
text by diet pattern. The two axes are independent: no movement variant looks
at diet and no food variant looks at mobility.

Also holds the risk-flag predicates the personalisation layers gate on.
"""

from __future__ import annotations

from wellcheck.core.text.segments import Segment, concat, labelled
from wellcheck.domains.assessment.advice.signposts import signpost
from wellcheck.domains.assessment.domain_logic.classification import parse_number
from wellcheck.domains.assessment.models.options import (
    DietPattern,
    MobilityTier,
    diet_pattern,
    mobility_tier,
)
from wellcheck.domains.assessment.models.record import AssessmentRecord

# ---------------------------------------------------------------------------
# Risk flags
# ---------------------------------------------------------------------------

_POOR_SLEEP_ANSWERS = {"Very poor", "Poor"}


def smokes(record: AssessmentRecord) -> bool:
    return record.lifestyle.smoker == "Yes"


def drinks_alcohol(record: AssessmentRecord) -> bool:
    return record.lifestyle.alcohol == "Yes"


def weekly_units(record: AssessmentRecord) -> int | None:
    units = parse_number(record.lifestyle.alcohol_units)
    return int(units) if units is not None else None


def poor_sleep(record: AssessmentRecord) -> bool:
    """Sleep quality answered Poor or Very poor, or a wellbeing sleep score of 4 or less."""
    if record.fatigue.sleep_quality in _POOR_SLEEP_ANSWERS:
        return True
    score = parse_number(record.wellbeing.sleep)
    return score is not None and score <= 4


def high_stress(record: AssessmentRecord) -> bool:
    stress = parse_number(record.fatigue.stress_level)
    return stress is not None and stress >= 7


def post_exertional(record: AssessmentRecord) -> bool:
    return record.fatigue.worse_after_activity == "Yes"


_LATE_CAFFEINE = {"14:00 to 16:00", "After 16:00"}


def late_caffeine(record: AssessmentRecord) -> bool:
    """Last caffeine recorded in the afternoon window that reaches 16:00 or later."""
    return record.lifestyle.last_caffeine_time in _LATE_CAFFEINE


def tier_of(record: AssessmentRecord) -> MobilityTier:
    return mobility_tier(record.lifestyle.mobility_level)


def diet_of(record: AssessmentRecord) -> DietPattern:
    return diet_pattern(record.lifestyle.diet_pattern)


# ---------------------------------------------------------------------------
# Smoking and alcohol
# ---------------------------------------------------------------------------

def smoking_advice(record: AssessmentRecord, body: str) -> list[Segment]:
    if not smokes(record):
        return []
    return [concat(labelled("Smoking", body), signpost("smoking"))]


def alcohol_advice(record: AssessmentRecord) -> list[Segment]:
    if not drinks_alcohol(record):
        return []
    units = weekly_units(record)
    if units is not None and units > 14:
        return [concat(
            labelled(
                "Alcohol",
                f"Your recorded intake ({units} units per week) is above UK guidance (14 units "
                "per week). Reducing often improves blood pressure and sleep. Consider alcohol "
                "free days and smaller measures.",
            ),
            signpost("alcohol"),
        )]
    return [labelled(
        "Alcohol",
        "UK guidance is not to regularly exceed 14 units per week, spread over 3 or more days "
        "with alcohol free days each week.",
    )]


# ---------------------------------------------------------------------------
# Food
# ---------------------------------------------------------------------------

_HEART_PROTEIN = {
    DietPattern.VEGAN: (
        "Vegan protein",
        "Prioritise beans, lentils, chickpeas, tofu, tempeh, edamame and soya yoghurt for "
        "protein. Choose fortified plant milks. Add omega 3 sources such as chia, flaxseed, "
        "walnuts and consider algae based supplements.",
    ),
    DietPattern.VEGETARIAN: (
        "Vegetarian protein",
        "Include beans, lentils, eggs and dairy (if used). Choose lower salt cheeses. Add "
        "omega 3 sources such as chia, flaxseed and walnuts.",
    ),
    DietPattern.PESCATARIAN: (
        "Pescatarian protein",
        "Include oily fish (such as salmon, sardines and mackerel) 1 to 2 times weekly for "
        "omega 3s alongside beans, lentils and plenty of vegetables.",
    ),
    DietPattern.HALAL: (
        "Protein choices",
        "Choose lean proteins within your dietary requirements. Include plenty of vegetables, "
        "wholegrains and healthy fats from olive oil, nuts and seeds.",
    ),
    DietPattern.OMNIVORE: (
        "Protein choices",
        "Choose lean proteins (fish, poultry and pulses) and limit processed meats which are "
        "often high in salt and saturated fat.",
    ),
}
_HEART_PROTEIN[DietPattern.KOSHER] = _HEART_PROTEIN[DietPattern.HALAL]


def heart_food_advice(diet: DietPattern) -> list[Segment]:
    """Food choices for blood pressure."""
    return [
        labelled(
            "Food choices",
            "Aim for a pattern that is high in vegetables, fruit, wholegrains and fibre with "
            "mostly unsaturated fats (olive or rapeseed oil, nuts and seeds) and minimal ultra "
            "processed foods.",
        ),
        labelled(
            "Salt",
            "Aim for no more than 6g salt a day (about 1 teaspoon). Choose reduced salt "
            "versions, limit takeaway and processed meats and flavour with herbs, garlic, "
            "lemon, pepper and spices.",
        ),
        labelled(
            "Potassium rich foods",
            "These support healthy blood pressure (unless your GP has advised restriction). "
            "Include bananas, oranges, tomatoes, spinach, broccoli, beans, lentils and "
            "potatoes with skin.",
        ),
        labelled(*_HEART_PROTEIN[diet]),
    ]


_WEIGHT_PROTEIN = {
    DietPattern.VEGAN: (
        "Vegan protein",
        "Use beans, lentils, chickpeas, tofu, tempeh and edamame for protein. Choose fortified "
        "plant milks. Include omega 3 sources (chia, flaxseed, walnuts and consider algae "
        "supplements).",
    ),
    DietPattern.VEGETARIAN: (
        "Vegetarian protein",
        "Include beans and lentils plus eggs and dairy (if used). Watch salt in cheeses and "
        "choose lower fat options where helpful.",
    ),
    DietPattern.PESCATARIAN: (
        "Pescatarian protein",
        "Include oily fish 1 to 2 times weekly plus beans, lentils and vegetables for fibre.",
    ),
}


def weight_nutrition_advice(diet: DietPattern) -> list[Segment]:
    """Nutrition for weight management."""
    lines = [
        labelled(
            "Food choices",
            "Build meals around vegetables, fruit and fibre (wholegrains, oats, beans and "
            "lentils). Choose mostly unsaturated fats (olive or rapeseed oil, nuts and seeds) "
            "and keep sugary drinks and takeaways as occasional.",
        ),
        labelled(
            "Portion guidance",
            "Aim for half a plate of vegetables or salad, a quarter lean protein and a quarter "
            "wholegrain carbohydrate. If snacking, plan protein plus fibre (such as hummus with "
            "vegetables, nuts with fruit or yoghurt with berries).",
        ),
    ]
    if diet in _WEIGHT_PROTEIN:
        lines.append(labelled(*_WEIGHT_PROTEIN[diet]))
    return lines


def fat_quality_advice(diet: DietPattern) -> Segment:
    if diet is DietPattern.VEGAN:
        return labelled(
            "Fat quality",
            "Replacing saturated fats with unsaturated fats supports cholesterol improvement. "
            "Choose olive oil, nuts, seeds, avocado and plant based omega 3 sources such as "
            "chia seeds, flaxseed and walnuts.",
        )
    return labelled(
        "Fat quality",
        "Replacing saturated fats with unsaturated fats supports cholesterol improvement. "
        "Choose olive oil, nuts, seeds, avocado and oily fish.",
    )


_ENERGY_FOODS = {
    DietPattern.VEGAN: (
        "Good vegan options include tofu, tempeh, beans, lentils, chickpeas, edamame, nuts and "
        "seeds plus vegetables, fruit and wholegrains. Include fortified foods or supplements "
        "for B12 and consider omega 3 from chia, flaxseed or algae supplements."
    ),
    DietPattern.VEGETARIAN: (
        "Good options include eggs, yoghurt, beans, lentils, chickpeas, tofu and nuts plus "
        "vegetables, fruit and wholegrains."
    ),
    DietPattern.PESCATARIAN: (
        "Good options include fish, eggs, yoghurt, beans, lentils, chickpeas, tofu and nuts "
        "plus vegetables, fruit and wholegrains."
    ),
}
_ENERGY_FOODS_DEFAULT = (
    "Good options include eggs, yoghurt, fish, chicken, tofu, beans, lentils, chickpeas and "
    "nuts plus vegetables, fruit and wholegrains."
)


def energy_food_advice(diet: DietPattern) -> Segment:
    """Food choices for steadier energy (fatigue)."""
    return labelled(
        "Food choices",
        "Aim for steadier energy by including protein and fibre at meals. "
        + _ENERGY_FOODS.get(diet, _ENERGY_FOODS_DEFAULT),
    )


_WELLBEING_PROTEIN = {
    DietPattern.VEGAN: (
        "plant protein (beans, lentils, chickpeas, tofu, tempeh)",
        " Include fortified foods or B12 supplements.",
    ),
    DietPattern.VEGETARIAN: ("protein (beans, lentils, eggs, dairy if used)", ""),
    DietPattern.PESCATARIAN: ("protein (fish, beans, lentils, eggs)", ""),
}


def wellbeing_food_advice(diet: DietPattern) -> Segment:
    protein, extra = _WELLBEING_PROTEIN.get(diet, ("protein", ""))
    return labelled(
        "Food choices",
        f"Aim for regular meals that include {protein}, fibre and colourful vegetables. This "
        f"supports energy, gut health and steadier blood sugar.{extra}",
    )


# ---------------------------------------------------------------------------
# Movement
# ---------------------------------------------------------------------------

def heart_movement_advice(tier: MobilityTier, barrier: str) -> Segment:
    """Movement for blood pressure and weight."""
    if tier is MobilityTier.WHEELCHAIR:
        return labelled(
            "Movement for wheelchair users",
            "Regular movement remains beneficial. Focus on upper body exercises such as arm "
            "raises, shoulder rolls, resistance band work and arm cycling if available. "
            "Breathing exercises and gentle stretching also support circulation and wellbeing. "
            "A physiotherapist can help create a personalised plan. Start with 5 to 10 minutes "
            "and build gradually.",
        )
    if tier is MobilityTier.LIMITED:
        return labelled(
            "Movement with limited mobility",
            "Short movement sessions still help. Consider chair based exercises such as seated "
            "marching, leg lifts, arm exercises, resistance band work or gentle stretching. "
            "Start with 5 to 10 minutes and build gradually. A GP or physiotherapist can help "
            "create a safe plan if you have concerns about pain, breathlessness or balance.",
        )
    if barrier == "Pain":
        return labelled(
            "Movement",
            "Given pain is a barrier, focus on gentle paced activity. Start with 5 to 10 "
            "minutes of low impact movement such as walking or swimming. Pacing is key. A "
            "physiotherapist can help create a plan that works with your pain. Aim to build "
            "gradually towards 150 minutes per week over time.",
        )
    if barrier == "Breathlessness":
        return labelled(
            "Movement",
            "Given breathlessness is a barrier, start with short sessions with planned rest "
            "breaks. Interval style activity (move for 1 to 2 minutes, rest, repeat) can help "
            "build tolerance. If breathlessness is new or worsening, see your GP first. Aim to "
            "build gradually towards regular activity.",
        )
    return labelled(
        "Movement",
        "Aim for around 150 minutes per week of moderate activity (such as 25 to 30 minutes on "
        "5 days or about 20 to 25 minutes per day of brisk walking where you can talk but not "
        "sing) plus 2 days per week of strength work. Even 10 minute walks after meals can "
        "help blood pressure.",
    )


def pulse_movement_advice(tier: MobilityTier) -> Segment:
    if tier is MobilityTier.WHEELCHAIR:
        return labelled(
            "Adapted activity",
            "Upper body exercises, resistance band work and breathing exercises support "
            "cardiovascular health and can help maintain a healthy resting pulse over time.",
        )
    if tier is MobilityTier.LIMITED:
        return labelled(
            "Adapted activity",
            "Chair based exercises, gentle stretching and breathing exercises support "
            "cardiovascular health and can help maintain a healthy resting pulse over time.",
        )
    return labelled(
        "Regular activity",
        "Regular physical activity and cardiovascular fitness support a healthy resting pulse. "
        "Even moderate walking helps improve heart efficiency.",
    )


def lipid_movement_advice(tier: MobilityTier) -> Segment:
    if tier is MobilityTier.WHEELCHAIR:
        body = (
            "Adapted activity such as upper body exercises, resistance band work and arm "
            "cycling (if available) supports triglyceride reduction and HDL improvement."
        )
    elif tier is MobilityTier.LIMITED:
        body = (
            "Adapted activity such as chair based exercises, resistance band work and gentle "
            "stretching supports triglyceride reduction and HDL improvement."
        )
    else:
        body = (
            "Regular physical activity supports triglyceride reduction and HDL improvement. "
            "Aim for a mix of cardiovascular activity and strength work."
        )
    return labelled("Physical activity", body)


def fatigue_movement_advice(tier: MobilityTier, barrier: str, exertion_sensitive: bool) -> Segment:
    if tier is MobilityTier.WHEELCHAIR:
        body = (
            "Adapted physical activity supports energy levels. Focus on upper body exercises, "
            "resistance band work, arm cycling if available and breathing exercises. Start "
            "with 5 to 10 minutes and build gradually as tolerated."
        )
    elif tier is MobilityTier.LIMITED:
        body = (
            "Aim for regular adapted activity such as chair based exercises, gentle stretching, "
            "resistance band work or supported standing. Start with 5 to 10 minutes and build "
            "gradually as tolerated."
        )
    elif exertion_sensitive:
        body = (
            "Given your post-exertional symptoms, pacing is essential. Start with very short "
            "gentle sessions (5 minutes or less). Only increase when you are consistently "
            "recovering well the next day. Pushing through can worsen fatigue. Prioritise rest "
            "and recovery."
        )
    elif barrier == "Fatigue":
        body = (
            "Start with very gentle activity (5 to 10 minutes). Pacing is key. Build gradually "
            "only when you are recovering well the next day. Pushing through fatigue often "
            "makes it worse."
        )
    else:
        body = (
            "Aim for around 150 minutes per week of moderate activity. This can be 20 to 25 "
            "minutes most days or 30 minutes on 5 days. If energy is low, start with 5 to 10 "
            "minutes daily and build gradually."
        )
    return labelled("Movement", body)


def wellbeing_movement_advice(tier: MobilityTier, barrier: str) -> Segment:
    if tier is MobilityTier.WHEELCHAIR:
        body = (
            "Adapted physical activity supports wellbeing. Focus on upper body exercises, "
            "resistance band work, breathing exercises and activities you enjoy. Even 10 to 15 "
            "minutes of movement can support mood and energy."
        )
    elif tier is MobilityTier.LIMITED:
        body = (
            "Adapted physical activity supports wellbeing. Chair based exercises, gentle "
            "stretching, resistance band work or supported standing all count. Start small "
            "with 5 to 10 minutes and build gradually."
        )
    elif barrier == "Motivation":
        body = (
            "Finding motivation can be challenging. Try linking activity to something you "
            "already do, finding an accountability partner or choosing activities you enjoy. "
            "Even 5 minutes counts. Aim to build towards 150 minutes per week of moderate "
            "activity over time."
        )
    else:
        body = (
            "Aim for around 150 minutes per week of moderate activity. This can be 20 to 25 "
            "minutes most days or 30 minutes on 5 days. If you are starting from low activity, "
            "begin with 5 to 10 minutes daily and build gradually."
        )
    return labelled("Movement", body)
