"""Classification categories and the derived-values record.

Each category enum's values are the display labels; a category that cannot be
computed is ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------

class BloodPressureCategory(str, Enum):
    LOW = "Low reading"
    VERY_HIGH = "Very high reading - urgent GP review"
    HIGH = "High reading - GP review advised"
    RAISED = "Raised reading - GP confirmation needed"
    HIGHER_END = "Higher end of normal"
    NORMAL = "Normal reading"
    OPTIMAL = "Optimal reading"


class BMICategory(str, Enum):
    UNDERWEIGHT = "Underweight"
    HEALTHY = "Healthy weight"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


class PulseCategory(str, Enum):
    NORMAL = "Normal range"
    BELOW = "Below typical range"
    ABOVE = "Above typical range"


class LipidStatus(str, Enum):
    """Status of total cholesterol, LDL and triglycerides."""

    OPTIMAL = "Optimal"
    DESIRABLE = "Desirable"
    BORDERLINE_HIGH = "Borderline high"
    HIGH = "High"


class HDLStatus(str, Enum):
    GOOD = "Good protective level"
    MODERATE = "Moderate level"
    LOW = "Low, needs improvement"


class RatioRisk(str, Enum):
    LOW = "Low risk"
    MODERATE = "Moderate risk"
    HIGH = "High risk"


class LipidTier(str, Enum):
    RAISED = "Raised, GP review recommended"
    BORDERLINE = "Borderline, lifestyle focus"
    WITHIN = "Within healthy range"


class FatigueLevel(str, Enum):
    MINIMAL = "Minimal fatigue"
    MILD = "Mild fatigue"
    MODERATE = "Moderate fatigue"
    SIGNIFICANT = "Significant fatigue"


class WellbeingCategory(str, Enum):
    STRONG = "Strong"
    GOOD = "Good"
    NEEDS_SUPPORT = "Needs support"
    LOW = "Low"


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CholesterolAssessment:
    total_status: LipidStatus | None = None
    hdl_status: HDLStatus | None = None
    ldl_status: LipidStatus | None = None
    triglycerides_status: LipidStatus | None = None
    ratio: float | None = None             # total / HDL
    non_hdl: float | None = None           # total - HDL
    ldl_hdl_ratio: float | None = None
    risk: RatioRisk | None = None
    overall: LipidTier | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_status": _label(self.total_status),
            "hdl_status": _label(self.hdl_status),
            "ldl_status": _label(self.ldl_status),
            "triglycerides_status": _label(self.triglycerides_status),
            "ratio": self.ratio,
            "non_hdl": self.non_hdl,
            "ldl_hdl_ratio": self.ldl_hdl_ratio,
            "risk": _label(self.risk),
            "overall": _label(self.overall),
        }


@dataclass(frozen=True)
class DerivedValues:
    """Everything computed from one AssessmentRecord snapshot."""

    age: int | None = None
    bmi: str | None = None                 # one decimal, e.g. "26.0"
    bmi_category: BMICategory | None = None
    bp_category: BloodPressureCategory | None = None
    pulse_category: PulseCategory | None = None
    cholesterol: CholesterolAssessment = field(default_factory=CholesterolAssessment)
    fatigue_score: int | None = None
    fatigue_items_answered: int = 0
    fatigue_level: FatigueLevel | None = None
    wellbeing_average: str | None = None   # one decimal, e.g. "8.0"
    wellbeing_category: WellbeingCategory | None = None

    @property
    def bmi_value(self) -> float | None:
        return float(self.bmi) if self.bmi is not None else None

    @property
    def wellbeing_value(self) -> float | None:
        return float(self.wellbeing_average) if self.wellbeing_average is not None else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "age": self.age,
            "bmi": self.bmi,
            "bmi_category": _label(self.bmi_category),
            "bp_category": _label(self.bp_category),
            "pulse_category": _label(self.pulse_category),
            "cholesterol": self.cholesterol.to_dict(),
            "fatigue_score": self.fatigue_score,
            "fatigue_items_answered": self.fatigue_items_answered,
            "fatigue_level": _label(self.fatigue_level),
            "wellbeing_average": self.wellbeing_average,
            "wellbeing_category": _label(self.wellbeing_category),
        }


def _label(category: Enum | None) -> str | None:
    return category.value if category is not None else None
