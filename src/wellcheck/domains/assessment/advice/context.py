"""Personal context paragraphs.

Each paragraph is gated on a single recorded answer and stands on its own; the
gates are evaluated in a fixed order and nothing is emitted for an unmet gate.
"""

from __future__ import annotations

from wellcheck.core.text.segments import Segment, concat, labelled, user_text
from wellcheck.domains.assessment.advice.lifestyle import late_caffeine, tier_of
from wellcheck.domains.assessment.advice.signposts import signpost
from wellcheck.domains.assessment.domain_logic.classification import parse_number
from wellcheck.domains.assessment.models.options import MobilityTier
from wellcheck.domains.assessment.models.record import AssessmentRecord

_BARRIERS = {
    "Pain": (
        "Pain as a barrier",
        "Pain limiting movement has been noted. Gentle, paced activity often helps manage pain "
        "better than complete rest. Start with very short sessions (5 minutes) and build "
        "gradually. A physiotherapist can help create a plan that works with your pain rather "
        "than against it.",
    ),
    "Breathlessness": (
        "Breathlessness as a barrier",
        "Breathlessness limiting activity has been noted. Paced activity with planned rest "
        "breaks can help build tolerance. If breathlessness is new, worsening or occurring at "
        "rest, please see your GP. Pulmonary rehabilitation may be available if you have a lung "
        "condition.",
    ),
    "Fatigue": (
        "Fatigue as a barrier",
        "Fatigue limiting activity has been noted. Pacing is key. Start with very short gentle "
        "sessions and only increase when you are recovering well. Pushing through fatigue often "
        "makes it worse. See the fatigue advice section for more detail.",
    ),
    "Motivation": (
        "Motivation as a barrier",
        "Motivation can be challenging. Try linking activity to something you already do (such "
        "as a walk after lunch) or finding an accountability partner. Choose activities you "
        "enjoy rather than what you think you should do. Even 5 minutes counts and often leads "
        "to more.",
    ),
    "Time": (
        "Time as a barrier",
        "Lack of time is a common barrier. Look for opportunities to build movement into your "
        "day such as walking meetings, taking stairs, parking further away or short walks after "
        "meals. Even 10 minute bouts add up and provide health benefits.",
    ),
}

_NOT_DIABETIC = {"", "No diabetes", "Not sure"}
_NO_CV_EVENT = {"", "No known event", "Not sure"}
_HIGH_UNIT_BANDS = {"15 to 21", "22 or more"}
_UPPER_LIMB_LIMITED = {"Moderate limitation", "Severe limitation"}


def _answered_other_than(value: str, *negatives: str) -> bool:
    return bool(value) and value not in negatives


def _mobility(record: AssessmentRecord) -> list[Segment]:
    tier = tier_of(record)
    if tier is MobilityTier.WHEELCHAIR:
        return [
            labelled(
                "Wheelchair user",
                "Movement remains beneficial and can be adapted to your situation. Upper body "
                "exercises, resistance band work, arm cycling (if available), seated stretching "
                "and breathing exercises all support circulation, cardiovascular health and "
                "mood. A physiotherapist can help create a safe and personalised exercise plan.",
            ),
            signpost("wheelchair"),
        ]
    if tier is MobilityTier.LIMITED:
        return [
            labelled(
                "Movement with limited mobility",
                "Physical activity remains beneficial and can be adapted to your needs. Chair "
                "based exercises, seated marching, resistance band work, supported standing (if "
                "safe) and gentle stretching all support circulation, blood pressure and mood. "
                "A GP or physiotherapist can help create a safe plan if you have concerns about "
                "pain, breathlessness or balance.",
            ),
            signpost("limited_mobility"),
        ]
    return []


def _diet(record: AssessmentRecord) -> list[Segment]:
    diet = record.lifestyle.diet_pattern
    if diet == "Vegan":
        return [
            labelled(
                "Vegan diet",
                "Your diet pattern has been included. Protein sources for you include beans, "
                "lentils, chickpeas, tofu, tempeh, edamame, seitan and soya products. Omega 3 "
                "sources include chia seeds, flaxseed, walnuts and algae based supplements. "
                "Consider discussing B12 supplementation with your GP if not already taking "
                "one.",
            ),
            signpost("vegan"),
        ]
    if diet == "Vegetarian":
        return [
            labelled(
                "Vegetarian diet",
                "Your diet pattern has been included. Protein sources include beans, lentils, "
                "chickpeas, tofu, eggs and dairy where used. Omega 3 sources include chia "
                "seeds, flaxseed and walnuts.",
            ),
            signpost("vegetarian"),
        ]
    if diet == "Pescatarian":
        return [labelled(
            "Pescatarian diet",
            "Your diet pattern has been included. Oily fish (such as salmon, sardines and "
            "mackerel) 1 to 2 times weekly provides omega 3s alongside plant proteins from "
            "beans, lentils and chickpeas.",
        )]
    if diet in ("Halal", "Kosher"):
        return [labelled(
            "Halal/Kosher diet",
            "Your dietary requirements have been noted. The healthy eating principles in this "
            f"report can be adapted to {diet.lower()} food choices. Focus on lean proteins, "
            "plenty of vegetables, wholegrains and healthy fats within your dietary framework.",
        )]
    return []


def compose_context(record: AssessmentRecord) -> list[Segment]:
    lifestyle = record.lifestyle
    clinical = record.clinical
    lines = _mobility(record)

    if lifestyle.activity_barrier in _BARRIERS:
        lines.append(labelled(*_BARRIERS[lifestyle.activity_barrier]))

    lines.extend(_diet(record))

    if clinical.diabetes_type not in _NOT_DIABETIC:
        lines.append(labelled(
            "Diabetes",
            "Your diabetes has been included. Balanced meals with higher fibre carbohydrates, "
            "lean protein and healthy fats support steadier blood glucose. Regular meal timing "
            "and portion awareness support glucose control. Medication plans remain GP led and "
            "should be followed as prescribed.",
        ))
        lines.append(signpost("diabetes"))

    if _answered_other_than(clinical.sleep_apnoea, "No"):
        lines.append(labelled(
            "Sleep apnoea",
            "Sleep apnoea has been included. Daytime fatigue and raised blood pressure risk can "
            "be associated with untreated or undertreated sleep apnoea. CPAP use, mask comfort "
            "and adherence support better sleep quality. GP review supports ongoing management "
            "and referral to sleep services where needed.",
        ))

    if _answered_other_than(clinical.known_hypertension, "No"):
        lines.append(labelled(
            "Known high blood pressure",
            "Known hypertension has been included. Medication adherence, home monitoring and "
            "regular GP review support long term control.",
        ))

    if _answered_other_than(clinical.known_high_cholesterol, "No"):
        lines.append(labelled(
            "Known high cholesterol",
            "Known high cholesterol has been included. Treatment plans remain GP led. Lifestyle "
            "steps support risk reduction alongside medication where prescribed.",
        ))

    if _answered_other_than(clinical.pregnancy_status, "Not applicable"):
        lines.append(labelled(
            "Pregnancy or postpartum",
            "Pregnancy or postpartum status has been included. Blood pressure and symptoms such "
            "as headaches, visual changes, swelling or upper abdominal pain need prompt medical "
            "review during pregnancy and the postpartum period.",
        ))

    if _answered_other_than(clinical.shift_work, "No"):
        lines.append(labelled(
            "Shift work",
            "Shift work has been included. Light exposure, meal timing and a consistent wind "
            "down routine support sleep quality around night shifts.",
        ))

    sleepiness = parse_number(clinical.daytime_sleepiness)
    if (
        clinical.snoring == "Yes"
        or clinical.witnessed_apnoea == "Yes"
        or (sleepiness is not None and sleepiness >= 6)
    ):
        lines.append(labelled(
            "Sleep breathing symptoms",
            "Sleep breathing symptoms have been included. Loud snoring, witnessed pauses and "
            "significant daytime sleepiness can be associated with sleep apnoea. GP review "
            "supports assessment and referral to a sleep service when needed.",
        ))

    if clinical.restless_legs == "Yes":
        lines.append(labelled(
            "Restless legs",
            "Restless legs symptoms have been included. Iron deficiency can contribute. GP "
            "review supports assessment, blood tests and management. Gentle stretching and a "
            "consistent evening routine can support symptoms.",
        ))

    if late_caffeine(record):
        lines.append(labelled(
            "Caffeine timing",
            "Your caffeine timing has been included. An earlier caffeine cut off supports sleep "
            "onset and sleep depth. Water and non-caffeinated drinks later in the day support "
            "hydration without affecting sleep.",
        ))

    if _answered_other_than(clinical.falls_12m, "No"):
        lines.append(labelled(
            "Falls history",
            "Falls history has been included. Strength, balance and safe home set up support "
            "confidence and reduce risk. GP review supports falls assessment when needed and "
            "physiotherapy can support safe exercise planning.",
        ))

    pain = parse_number(clinical.pain_limiting_movement)
    if pain is not None and pain >= 6:
        lines.append(labelled(
            "Pain limiting movement",
            "Pain limiting movement has been included. Pacing, gentle strengthening and gradual "
            "progression support movement without flare ups. GP review supports pain "
            "management and referral to physiotherapy when appropriate.",
        ))

    if _answered_other_than(lifestyle.food_access, "No concerns"):
        lines.append(labelled(
            "Food access",
            "Food access and cooking concerns have been included. Low cost options such as "
            "tinned beans, lentils, frozen vegetables, oats, eggs and tinned fish support "
            "nutrition. Batch cooking and simple meals support consistency. The British "
            "Dietetic Association at bda.uk.com provides budget friendly eating guidance.",
        ))

    if lifestyle.alcohol_units_week in _HIGH_UNIT_BANDS:
        lines.append(concat(
            labelled(
                "Alcohol intake",
                "Your alcohol intake has been included. Reducing alcohol supports blood "
                "pressure, sleep quality, weight and mood.",
            ),
            signpost("alcohol"),
        ))

    if clinical.home_bp_monitor == "Yes":
        lines.append(labelled(
            "Home blood pressure monitoring",
            "Home blood pressure monitoring has been included. A seven day home blood pressure "
            "log supports accurate GP review. Readings taken at the same times each day and "
            "recorded consistently support trend monitoring.",
        ))

    if clinical.cv_event_history not in _NO_CV_EVENT:
        lines.append(labelled(
            "Cardiovascular history",
            "Cardiovascular history has been included. GP review supports risk management, "
            "medication review and ongoing monitoring. Lifestyle changes remain valuable "
            "alongside prescribed treatment.",
        ))

    if clinical.kidney_disease == "Yes":
        lines.append(labelled(
            "Kidney disease",
            "Kidney disease has been included. Blood pressure targets and medication plans "
            "remain GP led. GP review supports monitoring of kidney function and cardiovascular "
            "risk.",
        ))

    if clinical.family_history_early == "Yes":
        lines.append(labelled(
            "Family history",
            "Family history of early heart disease has been included. Cardiovascular risk "
            "assessment through the GP supports longer term prevention and monitoring.",
        ))

    if clinical.upper_limb_function in _UPPER_LIMB_LIMITED:
        lines.append(labelled(
            "Upper limb limitations",
            "Upper limb limitations have been included. Activity can be adapted using lower "
            "limb movements, breathing based activity, supported standing where safe and "
            "physiotherapy guidance.",
        ))

    if clinical.other_context:
        lines.append(user_text(
            "Additional context",
            clinical.other_context,
            before="The following has been considered when tailoring the advice in this report: ",
        ))
    return lines
