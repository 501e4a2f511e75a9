"""The assessment record: an immutable snapshot of one client's answers.

Every answer is a string and ``""`` means "not answered". The two lipid flags
and the consent flag are booleans; the Chalder answers are a read-only mapping
keyed ``"1"`` to ``"11"``; wellbeing stressors are a tuple of tags.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any

from wellcheck.domains.assessment.models.options import CHALDER_QUESTIONS, STRESSORS


class RecordError(ValueError):
    """A record or update violates the structural contract."""


# ---------------------------------------------------------------------------
# Field groups
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ClientDetails:
    client_id: str = ""
    assessment_date: str = ""      # ISO YYYY-MM-DD
    name: str = ""
    date_of_birth: str = ""        # DD/MM/YYYY, dots accepted
    contact_number: str = ""
    email: str = ""
    gp_practice: str = ""


@dataclass(frozen=True)
class Vitals:
    systolic: str = ""
    diastolic: str = ""
    pulse: str = ""
    height_cm: str = ""
    weight_kg: str = ""


@dataclass(frozen=True)
class LipidPanel:
    total_cholesterol: str = ""    # mmol/L throughout
    ldl: str = ""
    hdl: str = ""
    triglycerides: str = ""
    glucose: str = ""
    fasting: bool = False
    on_statin: bool = False


@dataclass(frozen=True)
class Lifestyle:
    smoker: str = ""
    family_history: str = ""
    diabetes: str = ""
    bp_medication: str = ""
    exercise: str = ""
    exercise_frequency: str = ""
    alcohol: str = ""
    alcohol_units: str = ""        # free numeric weekly units
    alcohol_units_week: str = ""   # banded weekly units
    mobility_level: str = ""
    activity_barrier: str = ""
    diet_pattern: str = ""
    food_access: str = ""
    last_caffeine_time: str = ""


@dataclass(frozen=True)
class ClinicalContext:
    diabetes_type: str = ""
    known_hypertension: str = ""
    known_high_cholesterol: str = ""
    sleep_apnoea: str = ""
    pregnancy_status: str = ""
    shift_work: str = ""
    nights_per_month: str = ""
    snoring: str = ""
    witnessed_apnoea: str = ""
    daytime_sleepiness: str = ""
    restless_legs: str = ""
    home_bp_monitor: str = ""
    cv_event_history: str = ""
    kidney_disease: str = ""
    family_history_early: str = ""
    falls_12m: str = ""
    pain_limiting_movement: str = ""
    upper_limb_function: str = ""
    other_context: str = ""


@dataclass(frozen=True)
class FatigueScreen:
    chalder: Mapping[str, str] = field(default_factory=dict)
    sleep_hours: str = ""
    sleep_quality: str = ""
    difficulty_falling_asleep: str = ""
    wake_night: str = ""
    refreshed_waking: str = ""
    caffeine_intake: str = ""
    water_intake: str = ""
    stress_level: str = ""
    priorities_actions: str = ""
    afternoon_crash: str = ""
    urge_nap: str = ""
    brain_fog: str = ""
    need_caffeine: str = ""
    concentration: str = ""
    motivation: str = ""
    muscle_aches: str = ""
    joint_pain: str = ""
    worse_after_activity: str = ""
    recovery_time: str = ""
    activity_crashes: str = ""
    duration: str = ""
    trend: str = ""
    worse_factors: str = ""
    better_factors: str = ""
    daily_alcohol: str = ""
    diet_quality: str = ""
    overall_health: str = ""

    def __post_init__(self) -> None:
        unknown = set(self.chalder) - set(CHALDER_QUESTIONS)
        if unknown:
            raise RecordError(f"Unknown Chalder question ids: {sorted(unknown)}")
        object.__setattr__(self, "chalder", MappingProxyType(dict(self.chalder)))


@dataclass(frozen=True)
class WellbeingCheck:
    energy: str = ""
    sleep: str = ""
    mood: str = ""
    activity: str = ""
    nutrition: str = ""
    social: str = ""
    stress: str = ""
    work_life: str = ""
    purpose: str = ""
    life_satisfaction: str = ""
    priorities: str = ""
    mood_description: str = ""
    mood_frequency: str = ""
    stressors: tuple[str, ...] = ()
    relaxation: str = ""
    social_support: str = ""
    mindfulness: str = ""
    breathing: str = ""
    work_pattern: str = ""

    def __post_init__(self) -> None:
        unknown = [tag for tag in self.stressors if tag not in STRESSORS]
        if unknown:
            raise RecordError(f"Unknown stressor tags: {unknown}")
        object.__setattr__(self, "stressors", tuple(self.stressors))


@dataclass(frozen=True)
class Urinalysis:
    leukocytes: str = ""
    nitrites: str = ""
    protein: str = ""
    blood: str = ""
    glucose: str = ""
    ketones: str = ""
    bilirubin: str = ""
    urobilinogen: str = ""
    ph: str = ""
    specific_gravity: str = ""
    notes: str = ""

    def has_dipstick_values(self) -> bool:
        return any(getattr(self, name) for name in DIPSTICK_FIELDS)


DIPSTICK_FIELDS = (
    "leukocytes", "nitrites", "protein", "blood", "glucose",
    "ketones", "bilirubin", "urobilinogen", "ph", "specific_gravity",
)


@dataclass(frozen=True)
class Consent:
    given: bool = False
    timestamp: str = ""

    def __post_init__(self) -> None:
        if self.given != bool(self.timestamp):
            raise RecordError("Consent flag and timestamp must be set or cleared together")


# ---------------------------------------------------------------------------
# The record
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AssessmentRecord:
    client: ClientDetails = field(default_factory=ClientDetails)
    vitals: Vitals = field(default_factory=Vitals)
    lipids: LipidPanel = field(default_factory=LipidPanel)
    lifestyle: Lifestyle = field(default_factory=Lifestyle)
    clinical: ClinicalContext = field(default_factory=ClinicalContext)
    fatigue: FatigueScreen = field(default_factory=FatigueScreen)
    wellbeing: WellbeingCheck = field(default_factory=WellbeingCheck)
    urinalysis: Urinalysis = field(default_factory=Urinalysis)
    consent: Consent = field(default_factory=Consent)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AssessmentRecord:
        """Build a record from its nested wire form.

        Missing groups and fields default to "not answered". Unknown groups or
        fields, and values of the wrong shape, raise RecordError.
        """
        if not isinstance(data, Mapping):
            raise RecordError("Assessment record must be a mapping of field groups")
        unknown = set(data) - set(GROUP_TYPES)
        if unknown:
            raise RecordError(f"Unknown field groups: {sorted(unknown)}")
        groups = {
            name: build_group(name, group_type, data.get(name) or {})
            for name, group_type in GROUP_TYPES.items()
        }
        return cls(**groups)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        out: dict[str, dict[str, Any]] = {}
        for name in GROUP_TYPES:
            group = getattr(self, name)
            values: dict[str, Any] = {}
            for f in fields(group):
                value = getattr(group, f.name)
                if isinstance(value, Mapping):
                    value = dict(value)
                elif isinstance(value, tuple):
                    value = list(value)
                values[f.name] = value
            out[name] = values
        return out


GROUP_TYPES: dict[str, type] = {
    "client": ClientDetails,
    "vitals": Vitals,
    "lipids": LipidPanel,
    "lifestyle": Lifestyle,
    "clinical": ClinicalContext,
    "fatigue": FatigueScreen,
    "wellbeing": WellbeingCheck,
    "urinalysis": Urinalysis,
    "consent": Consent,
}


def build_group(name: str, group_type: type, data: Any):
    if not isinstance(data, Mapping):
        raise RecordError(f"Field group {name!r} must be a mapping")
    known = {f.name: f for f in fields(group_type)}
    unknown = set(data) - set(known)
    if unknown:
        raise RecordError(f"Unknown fields in {name!r}: {sorted(unknown)}")

    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        default = known[key].default
        if key == "chalder":
            kwargs[key] = _chalder_answers(value)
        elif key == "stressors":
            kwargs[key] = _stressor_tags(value)
        elif isinstance(default, bool):
            if not isinstance(value, bool):
                raise RecordError(f"{name}.{key} must be true or false")
            kwargs[key] = value
        else:
            kwargs[key] = _answer(f"{name}.{key}", value)
    return group_type(**kwargs)


def _answer(path: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise RecordError(f"{path} must be text or a number")
    return str(value).strip()


def _chalder_answers(value: Any) -> dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise RecordError("fatigue.chalder must map question ids to scores")
    answers = {str(q): _answer(f"fatigue.chalder.{q}", score) for q, score in value.items()}
    return {q: score for q, score in answers.items() if score}


def _stressor_tags(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise RecordError("wellbeing.stressors must be a list of tags")
    return tuple(str(tag) for tag in value)
