"""Deterministic classification: raw assessment answers -> clinical categories.

Every function is pure. Missing or non-numeric input yields ``None`` (not enough
data), never an exception. Displayed values round half up. The current date is
always passed in; nothing here reads the clock.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from datetime import date

from wellcheck.domains.assessment.models.derived import (
    BloodPressureCategory,
    BMICategory,
    CholesterolAssessment,
    DerivedValues,
    FatigueLevel,
    HDLStatus,
    LipidStatus,
    LipidTier,
    PulseCategory,
    RatioRisk,
    WellbeingCategory,
)
from wellcheck.domains.assessment.models.options import CHALDER_QUESTIONS, WELLBEING_DOMAINS
from wellcheck.domains.assessment.models.record import AssessmentRecord, WellbeingCheck

logger = logging.getLogger(__name__)


def parse_number(value: str | None) -> float | None:
    """Parse a recorded answer as a finite number, or return None."""
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def round_half_up(value: float, places: int = 1) -> float:
    scale = 10 ** places
    return math.floor(value * scale + 0.5) / scale


# ---------------------------------------------------------------------------
# Age
# ---------------------------------------------------------------------------

def calculate_age(date_of_birth: str, today: date) -> int | None:
    """Whole years elapsed since a ``DD/MM/YYYY`` (or ``DD.MM.YYYY``) birth date."""
    parts = date_of_birth.strip().replace(".", "/").split("/")
    if len(parts) != 3:
        return None
    try:
        born = date(int(parts[2]), int(parts[1]), int(parts[0]))
    except ValueError:
        return None
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age if age >= 0 else None


# ---------------------------------------------------------------------------
# Body mass index
# ---------------------------------------------------------------------------

def calculate_bmi(height_cm: str, weight_kg: str) -> str | None:
    """BMI to one decimal place, e.g. ``"26.0"``."""
    height = parse_number(height_cm)
    weight = parse_number(weight_kg)
    if not height or not weight or height < 0 or weight < 0:
        return None
    height_m = height / 100
    return f"{round_half_up(weight / (height_m * height_m), 1):.1f}"


def classify_bmi(bmi: str | None) -> BMICategory | None:
    value = parse_number(bmi)
    if value is None:
        return None
    if value < 18.5:
        return BMICategory.UNDERWEIGHT
    if value < 25:
        return BMICategory.HEALTHY
    if value < 30:
        return BMICategory.OVERWEIGHT
    return BMICategory.OBESE


# ---------------------------------------------------------------------------
# Blood pressure and pulse
# ---------------------------------------------------------------------------

def classify_blood_pressure(systolic: str, diastolic: str) -> BloodPressureCategory | None:
    """First matching rule wins; the thresholds overlap across the two axes."""
    sys_ = parse_number(systolic)
    dia = parse_number(diastolic)
    if sys_ is None or dia is None:
        return None
    if sys_ < 90 and dia < 60:
        return BloodPressureCategory.LOW
    if sys_ >= 180 or dia >= 120:
        return BloodPressureCategory.VERY_HIGH
    if sys_ >= 160 or dia >= 100:
        return BloodPressureCategory.HIGH
    if sys_ >= 140 or dia >= 90:
        return BloodPressureCategory.RAISED
    if sys_ >= 130 or dia >= 85:
        return BloodPressureCategory.HIGHER_END
    if sys_ >= 120 or dia >= 80:
        return BloodPressureCategory.NORMAL
    return BloodPressureCategory.OPTIMAL


def classify_pulse(pulse: str) -> PulseCategory | None:
    value = parse_number(pulse)
    if value is None:
        return None
    if 60 <= value <= 100:
        return PulseCategory.NORMAL
    if value < 60:
        return PulseCategory.BELOW
    return PulseCategory.ABOVE


# ---------------------------------------------------------------------------
# Lipids
# ---------------------------------------------------------------------------

def assess_cholesterol(
    total: str,
    ldl: str,
    hdl: str,
    triglycerides: str,
) -> CholesterolAssessment:
    """Per-analyte status, ratios and the combined lipid tier (all mmol/L)."""
    tc = parse_number(total)
    h = parse_number(hdl)
    l = parse_number(ldl)  # noqa: E741
    tg = parse_number(triglycerides)

    total_status = None
    if tc is not None:
        if tc < 5:
            total_status = LipidStatus.DESIRABLE
        elif tc < 6.5:
            total_status = LipidStatus.BORDERLINE_HIGH
        else:
            total_status = LipidStatus.HIGH

    hdl_status = None
    if h is not None:
        if h > 1.2:
            hdl_status = HDLStatus.GOOD
        elif h > 1.0:
            hdl_status = HDLStatus.MODERATE
        else:
            hdl_status = HDLStatus.LOW

    ldl_status = None
    if l is not None:
        if l < 3:
            ldl_status = LipidStatus.OPTIMAL
        elif l < 4.1:
            ldl_status = LipidStatus.BORDERLINE_HIGH
        else:
            ldl_status = LipidStatus.HIGH

    tg_status = None
    if tg is not None:
        if tg < 2.3:
            tg_status = LipidStatus.DESIRABLE
        elif tg < 4.5:
            tg_status = LipidStatus.BORDERLINE_HIGH
        else:
            tg_status = LipidStatus.HIGH

    ratio = non_hdl = risk = None
    if tc is not None and h is not None and h > 0:
        ratio = round_half_up(tc / h, 1)
        non_hdl = round_half_up(tc - h, 1)
        if ratio < 4:
            risk = RatioRisk.LOW
        elif ratio < 5:
            risk = RatioRisk.MODERATE
        else:
            risk = RatioRisk.HIGH

    ldl_hdl_ratio = None
    if l is not None and h is not None and h > 0:
        ldl_hdl_ratio = round_half_up(l / h, 1)

    if (tc is not None and (tc >= 6.5 or risk is RatioRisk.HIGH)) or (l is not None and l >= 4.1):
        overall = LipidTier.RAISED
    elif tc is not None and (tc >= 5 or risk is RatioRisk.MODERATE):
        overall = LipidTier.BORDERLINE
    elif tc is not None:
        overall = LipidTier.WITHIN
    else:
        overall = None

    return CholesterolAssessment(
        total_status=total_status,
        hdl_status=hdl_status,
        ldl_status=ldl_status,
        triglycerides_status=tg_status,
        ratio=ratio,
        non_hdl=non_hdl,
        ldl_hdl_ratio=ldl_hdl_ratio,
        risk=risk,
        overall=overall,
    )


# ---------------------------------------------------------------------------
# Fatigue (Chalder-style scale, 11 items scored 0-10)
# ---------------------------------------------------------------------------

def chalder_total(answers: Mapping[str, str]) -> tuple[int | None, int]:
    """Sum of the answered items and how many were answered.

    A partially completed scale is summed as-is, without rescaling to the
    full 110-point range.
    """
    total = 0
    answered = 0
    for question in CHALDER_QUESTIONS:
        value = parse_number(answers.get(question, ""))
        if value is None:
            continue
        total += int(value)
        answered += 1
    return (total if answered else None), answered


def classify_fatigue(score: int | None) -> FatigueLevel | None:
    if score is None:
        return None
    if score < 20:
        return FatigueLevel.MINIMAL
    if score < 40:
        return FatigueLevel.MILD
    if score < 70:
        return FatigueLevel.MODERATE
    return FatigueLevel.SIGNIFICANT


# ---------------------------------------------------------------------------
# Wellbeing
# ---------------------------------------------------------------------------

def wellbeing_average(check: WellbeingCheck) -> str | None:
    """Mean of the answered domain scores to one decimal, e.g. ``"8.0"``."""
    scores = [parse_number(getattr(check, domain)) for domain in WELLBEING_DOMAINS]
    answered = [score for score in scores if score is not None]
    if not answered:
        return None
    return f"{round_half_up(sum(answered) / len(answered), 1):.1f}"


def classify_wellbeing(average: str | None) -> WellbeingCategory | None:
    value = parse_number(average)
    if value is None:
        return None
    if value >= 8:
        return WellbeingCategory.STRONG
    if value >= 6:
        return WellbeingCategory.GOOD
    if value >= 4:
        return WellbeingCategory.NEEDS_SUPPORT
    return WellbeingCategory.LOW


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------

def compute_derived(record: AssessmentRecord, today: date) -> DerivedValues:
    """Recompute every derived value from one record snapshot."""
    bmi = calculate_bmi(record.vitals.height_cm, record.vitals.weight_kg)
    fatigue_score, answered = chalder_total(record.fatigue.chalder)
    average = wellbeing_average(record.wellbeing)
    lipids = record.lipids

    derived = DerivedValues(
        age=calculate_age(record.client.date_of_birth, today),
        bmi=bmi,
        bmi_category=classify_bmi(bmi),
        bp_category=classify_blood_pressure(record.vitals.systolic, record.vitals.diastolic),
        pulse_category=classify_pulse(record.vitals.pulse),
        cholesterol=assess_cholesterol(
            lipids.total_cholesterol, lipids.ldl, lipids.hdl, lipids.triglycerides
        ),
        fatigue_score=fatigue_score,
        fatigue_items_answered=answered,
        fatigue_level=classify_fatigue(fatigue_score),
        wellbeing_average=average,
        wellbeing_category=classify_wellbeing(average),
    )
    logger.debug(
        "Derived: bp=%s bmi=%s pulse=%s lipids=%s fatigue=%s wellbeing=%s",
        derived.bp_category,
        derived.bmi_category,
        derived.pulse_category,
        derived.cholesterol.overall,
        derived.fatigue_level,
        derived.wellbeing_category,
    )
    return derived
