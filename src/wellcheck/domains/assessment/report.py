"""Report assembly: gates, sections, metric cards and the closing blocks.

``compose_report`` turns one record and its derived values into a ``Report``
value. Every advice segment passes through the normaliser on the way in, so
renderers only ever see cleaned text.
"""

from __future__ import annotations

import html
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from wellcheck.core.text.normalizer import normalize_segment
from wellcheck.core.text.segments import (
    Segment,
    labelled,
    render_html,
    render_text,
    segment_to_dict,
    user_text,
)
from wellcheck.domains.assessment.advice.context import compose_context
from wellcheck.domains.assessment.advice.fatigue import compose_fatigue
from wellcheck.domains.assessment.advice.lipids import compose_cholesterol
from wellcheck.domains.assessment.advice.priority_plan import compose_priority_plan
from wellcheck.domains.assessment.advice.urinalysis import compose_urinalysis
from wellcheck.domains.assessment.advice.vitals import (
    compose_blood_pressure,
    compose_bmi,
    compose_pulse,
)
from wellcheck.domains.assessment.advice.wellbeing import compose_wellbeing
from wellcheck.domains.assessment.models.derived import (
    BloodPressureCategory,
    BMICategory,
    DerivedValues,
    FatigueLevel,
    LipidTier,
    PulseCategory,
    WellbeingCategory,
)
from wellcheck.domains.assessment.models.options import CHALDER_QUESTIONS
from wellcheck.domains.assessment.models.record import AssessmentRecord

logger = logging.getLogger(__name__)

REPORT_TITLE = "Your Corezen Health Assessment Report"
REPORT_SUBTITLE = (
    "Personalised health summary with evidence based education, practical guidance and GP "
    "referral where appropriate."
)
FOLLOW_UP = (
    "If you would like to review your progress, book a follow up with Corezen Health in 4 to 8 "
    "weeks. If you develop new or worsening symptoms, please contact your GP or NHS 111 (or 999 "
    "in an emergency)."
)
CONTACT = "Corezen Health: info@corezenhealth.co.uk"
DISCLAIMER = (
    "This report is produced by Corezen Health for education and guidance purposes. It is not a "
    "diagnostic document and does not replace medical advice from your GP or specialist."
)

CONSENT_NOTICE = (
    "Patient consent is required before generating a report. Please tick consent in the "
    "Essential Health MOT tab."
)
NAME_NOTICE = "Please complete at least the client name before generating a report."
NO_RESULTS_NOTICE = (
    "Enter your assessment results in the tabs above then return here to view your report."
)


class ReportStatus(str, Enum):
    OK = "ok"
    CONSENT_REQUIRED = "consent_required"
    CLIENT_NAME_REQUIRED = "client_name_required"


class UnknownSectionError(ValueError):
    """Raised for a section name that has no composer."""


# ---------------------------------------------------------------------------
# Report value types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MetricCard:
    label: str
    value: str
    unit: str = ""
    note: str = ""


@dataclass(frozen=True)
class ReportSection:
    key: str
    title: str
    tag: str
    tone: str                          # optimal | elevated | high | neutral
    cards: tuple[MetricCard, ...] = ()
    segments: tuple[Segment, ...] = ()


@dataclass(frozen=True)
class Report:
    status: ReportStatus
    notice: str = ""
    client_name: str = ""
    client_id: str = ""
    assessment_date: str = ""
    age: int | None = None
    context_summary: tuple[Segment, ...] = ()
    sections: tuple[ReportSection, ...] = ()
    follow_up: str = FOLLOW_UP
    contact: str = CONTACT
    disclaimer: str = DISCLAIMER


# ---------------------------------------------------------------------------
# Section composers
# ---------------------------------------------------------------------------

SectionComposer = Callable[[AssessmentRecord, DerivedValues], list[Segment]]

SECTION_COMPOSERS: dict[str, SectionComposer] = {
    "blood_pressure": lambda record, derived: compose_blood_pressure(record, derived.bp_category),
    "bmi": lambda record, derived: compose_bmi(record, derived.bmi_category),
    "pulse": lambda record, derived: compose_pulse(record, derived.pulse_category),
    "cholesterol": lambda record, derived: compose_cholesterol(record, derived.cholesterol.overall),
    "fatigue": lambda record, derived: compose_fatigue(record, derived.fatigue_level),
    "wellbeing": lambda record, derived: compose_wellbeing(record, derived.wellbeing_category),
    "urinalysis": lambda record, derived: compose_urinalysis(record),
    "context": lambda record, derived: compose_context(record),
    "priority_plan": compose_priority_plan,
}


def compose_section(name: str, record: AssessmentRecord, derived: DerivedValues) -> list[Segment]:
    """Run one named composer and normalise its output."""
    try:
        composer = SECTION_COMPOSERS[name]
    except KeyError:
        raise UnknownSectionError(
            f"Unknown section {name!r}; expected one of {', '.join(SECTION_COMPOSERS)}"
        ) from None
    return [normalize_segment(segment) for segment in composer(record, derived)]


# ---------------------------------------------------------------------------
# Tones and cards
# ---------------------------------------------------------------------------

_TONES: dict[type[Enum], dict[Enum, str]] = {
    BloodPressureCategory: {
        BloodPressureCategory.OPTIMAL: "optimal",
        BloodPressureCategory.NORMAL: "optimal",
        BloodPressureCategory.HIGHER_END: "elevated",
        BloodPressureCategory.RAISED: "elevated",
        BloodPressureCategory.LOW: "elevated",
        BloodPressureCategory.HIGH: "high",
        BloodPressureCategory.VERY_HIGH: "high",
    },
    BMICategory: {
        BMICategory.HEALTHY: "optimal",
        BMICategory.UNDERWEIGHT: "elevated",
        BMICategory.OVERWEIGHT: "elevated",
        BMICategory.OBESE: "high",
    },
    PulseCategory: {
        PulseCategory.NORMAL: "optimal",
        PulseCategory.BELOW: "elevated",
        PulseCategory.ABOVE: "elevated",
    },
    LipidTier: {
        LipidTier.WITHIN: "optimal",
        LipidTier.BORDERLINE: "elevated",
        LipidTier.RAISED: "high",
    },
    FatigueLevel: {
        FatigueLevel.MINIMAL: "optimal",
        FatigueLevel.MILD: "elevated",
        FatigueLevel.MODERATE: "high",
        FatigueLevel.SIGNIFICANT: "high",
    },
    WellbeingCategory: {
        WellbeingCategory.STRONG: "optimal",
        WellbeingCategory.GOOD: "optimal",
        WellbeingCategory.NEEDS_SUPPORT: "elevated",
        WellbeingCategory.LOW: "high",
    },
}


def tone_for(category: Enum | None) -> str:
    if category is None:
        return "neutral"
    return _TONES[type(category)][category]


def _label(category: Enum | None, fallback: str) -> str:
    return category.value if category is not None else fallback


def _card(label: str, value: Any, unit: str = "", note: str = "") -> MetricCard | None:
    if value is None or value == "":
        return None
    return MetricCard(label=label, value=str(value), unit=unit, note=note)


def _cards(*cards: MetricCard | None) -> tuple[MetricCard, ...]:
    return tuple(card for card in cards if card is not None)


def _bp_cards(record: AssessmentRecord, derived: DerivedValues) -> tuple[MetricCard, ...]:
    return _cards(
        _card("Systolic", record.vitals.systolic, "mmHg", "Pressure when heart pumps"),
        _card("Diastolic", record.vitals.diastolic, "mmHg", "Pressure between beats"),
    )


def _bmi_cards(record: AssessmentRecord, derived: DerivedValues) -> tuple[MetricCard, ...]:
    return _cards(
        _card("Height", record.vitals.height_cm, "cm"),
        _card("Weight", record.vitals.weight_kg, "kg"),
        _card("BMI", derived.bmi, "kg/m²", "Body Mass Index"),
        _card("Category", _label(derived.bmi_category, ""), note="NHS aligned range"),
    )


def _pulse_cards(record: AssessmentRecord, derived: DerivedValues) -> tuple[MetricCard, ...]:
    return _cards(
        _card("Resting pulse", record.vitals.pulse, "bpm"),
        _card("Category", _label(derived.pulse_category, ""), note="Interpretation"),
    )


def _cholesterol_cards(record: AssessmentRecord, derived: DerivedValues) -> tuple[MetricCard, ...]:
    lipids = record.lipids
    chol = derived.cholesterol
    return _cards(
        _card("Total cholesterol", lipids.total_cholesterol, "mmol/L", _label(chol.total_status, "")),
        _card("HDL", lipids.hdl, "mmol/L", _label(chol.hdl_status, "")),
        _card("LDL", lipids.ldl, "mmol/L", _label(chol.ldl_status, "")),
        _card("Triglycerides", lipids.triglycerides, "mmol/L", _label(chol.triglycerides_status, "")),
        _card("TC/HDL ratio", chol.ratio, note=_label(chol.risk, "")),
        _card("LDL/HDL ratio", chol.ldl_hdl_ratio),
        _card("Non HDL cholesterol", chol.non_hdl, "mmol/L"),
        _card("Glucose", lipids.glucose, "mmol/L", "Context only"),
    )


def _fatigue_cards(record: AssessmentRecord, derived: DerivedValues) -> tuple[MetricCard, ...]:
    note = "Chalder Fatigue Scale"
    if derived.fatigue_items_answered < len(CHALDER_QUESTIONS):
        note += f", {derived.fatigue_items_answered} of {len(CHALDER_QUESTIONS)} answered"
    return _cards(
        _card("Fatigue score", derived.fatigue_score, "/ 110", note),
        _card("Level", _label(derived.fatigue_level, ""), note="Overall impact"),
    )


def _wellbeing_cards(record: AssessmentRecord, derived: DerivedValues) -> tuple[MetricCard, ...]:
    return _cards(
        _card("Average score", derived.wellbeing_average, "/ 10", "Self rated wellbeing"),
        _card("Category", _label(derived.wellbeing_category, ""), note="Interpretation"),
    )


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class _Layout:
    key: str
    title: str
    present: Callable[[AssessmentRecord, DerivedValues], bool]
    category: Callable[[DerivedValues], Enum | None] = lambda derived: None
    fallback_tag: str = ""
    cards: Callable[[AssessmentRecord, DerivedValues], tuple[MetricCard, ...]] = (
        lambda record, derived: ()
    )


_RESULT_LAYOUTS = (
    _Layout(
        "blood_pressure",
        "YOUR BLOOD PRESSURE RESULTS",
        lambda record, derived: bool(record.vitals.systolic and record.vitals.diastolic),
        lambda derived: derived.bp_category,
        "Recorded",
        _bp_cards,
    ),
    _Layout(
        "bmi",
        "YOUR BODY MASS INDEX AND WEIGHT",
        lambda record, derived: derived.bmi is not None,
        lambda derived: derived.bmi_category,
        "Calculated",
        _bmi_cards,
    ),
    _Layout(
        "pulse",
        "YOUR HEART RATE AND CARDIOVASCULAR FITNESS",
        lambda record, derived: bool(record.vitals.pulse),
        lambda derived: derived.pulse_category,
        "Recorded",
        _pulse_cards,
    ),
    _Layout(
        "cholesterol",
        "YOUR CHOLESTEROL AND LIPID PROFILE",
        lambda record, derived: bool(record.lipids.total_cholesterol),
        lambda derived: derived.cholesterol.overall,
        "Lipid screening",
        _cholesterol_cards,
    ),
    _Layout(
        "fatigue",
        "YOUR FATIGUE AND ENERGY LEVELS",
        lambda record, derived: derived.fatigue_score is not None,
        lambda derived: derived.fatigue_level,
        "Assessed",
        _fatigue_cards,
    ),
    _Layout(
        "wellbeing",
        "YOUR OVERALL WELLBEING",
        lambda record, derived: derived.wellbeing_average is not None,
        lambda derived: derived.wellbeing_category,
        "Assessed",
        _wellbeing_cards,
    ),
)

_URINALYSIS = _Layout(
    "urinalysis", "YOUR URINALYSIS RESULTS", lambda r, d: True, fallback_tag="Urine screening"
)
_CONTEXT = _Layout("context", "YOUR PERSONAL HEALTH CONTEXT", lambda r, d: True)
_PLAN = _Layout(
    "priority_plan", "YOUR PRIORITY ACTIONS, NEXT 4 WEEKS", lambda r, d: True,
    fallback_tag="Action plan",
)


def _section(
    layout: _Layout,
    record: AssessmentRecord,
    derived: DerivedValues,
    segments: list[Segment],
) -> ReportSection:
    category = layout.category(derived)
    # The lipid section keeps a fixed tag; its tier is carried by the tone.
    if layout.key == "cholesterol":
        tag = layout.fallback_tag
    else:
        tag = _label(category, layout.fallback_tag)
    return ReportSection(
        key=layout.key,
        title=layout.title,
        tag=tag,
        tone=tone_for(category),
        cards=layout.cards(record, derived),
        segments=tuple(segments),
    )


def _context_summary(record: AssessmentRecord) -> tuple[Segment, ...]:
    lifestyle = record.lifestyle
    clinical = record.clinical
    items = []
    if lifestyle.mobility_level and lifestyle.mobility_level != "No limitations":
        items.append(labelled("Mobility", lifestyle.mobility_level))
    if lifestyle.diet_pattern and lifestyle.diet_pattern != "No special diet":
        items.append(labelled("Diet", lifestyle.diet_pattern))
    if clinical.diabetes_type not in ("", "No diabetes", "Not sure"):
        items.append(labelled("Diabetes", clinical.diabetes_type))
    if clinical.sleep_apnoea == "Yes":
        items.append(labelled("Sleep apnoea", "Yes"))
    if lifestyle.smoker == "Yes":
        items.append(labelled("Smoker", "Yes"))
    if clinical.other_context:
        items.append(user_text("Other", clinical.other_context))
    return tuple(normalize_segment(item) for item in items)


def compose_report(record: AssessmentRecord, derived: DerivedValues) -> Report:
    """Assemble the full report, or a notice-only report when a gate is unmet."""
    if not record.consent.given:
        logger.info("Report withheld: consent not given")
        return Report(status=ReportStatus.CONSENT_REQUIRED, notice=CONSENT_NOTICE)
    client = record.client
    if not client.name:
        logger.info("Report withheld: client name missing")
        return Report(status=ReportStatus.CLIENT_NAME_REQUIRED, notice=NAME_NOTICE)

    sections = []
    for layout in _RESULT_LAYOUTS:
        if not layout.present(record, derived):
            continue
        segments = compose_section(layout.key, record, derived)
        sections.append(_section(layout, record, derived, segments))

    urinalysis = compose_section("urinalysis", record, derived)
    if urinalysis:
        sections.append(_section(_URINALYSIS, record, derived, urinalysis))

    context = compose_section("context", record, derived)
    if context:
        sections.append(_section(_CONTEXT, record, derived, context))

    if sections:
        plan = compose_section("priority_plan", record, derived)
        sections.append(_section(_PLAN, record, derived, plan))

    logger.info(
        "Composed report: %d sections (%s)",
        len(sections),
        ", ".join(section.key for section in sections) or "none",
    )
    return Report(
        status=ReportStatus.OK,
        notice="" if sections else NO_RESULTS_NOTICE,
        client_name=client.name,
        client_id=client.client_id,
        assessment_date=client.assessment_date,
        age=derived.age,
        context_summary=_context_summary(record) if context else (),
        sections=tuple(sections),
    )


# ---------------------------------------------------------------------------
# Output forms
# ---------------------------------------------------------------------------

def report_to_dict(report: Report) -> dict[str, Any]:
    return {
        "status": report.status.value,
        "notice": report.notice,
        "title": REPORT_TITLE,
        "subtitle": REPORT_SUBTITLE,
        "client": {
            "name": report.client_name,
            "client_id": report.client_id,
            "assessment_date": report.assessment_date,
            "age": report.age,
        },
        "context_summary": [segment_to_dict(item) for item in report.context_summary],
        "sections": [
            {
                "key": section.key,
                "title": section.title,
                "tag": section.tag,
                "tone": section.tone,
                "cards": [
                    {"label": c.label, "value": c.value, "unit": c.unit, "note": c.note}
                    for c in section.cards
                ],
                "segments": [segment_to_dict(segment) for segment in section.segments],
            }
            for section in report.sections
        ],
        "follow_up": report.follow_up,
        "contact": report.contact,
        "disclaimer": report.disclaimer,
    }


def _card_text(card: MetricCard) -> str:
    value = f"{card.value} {card.unit}".strip()
    return f"{card.label}: {value}" + (f" ({card.note})" if card.note else "")


def render_report_text(report: Report) -> str:
    """Plain text rendering, one paragraph per segment."""
    parts = [REPORT_TITLE, REPORT_SUBTITLE]
    if report.status is not ReportStatus.OK:
        parts.append(report.notice)
        return "\n\n".join(parts)

    details = [f"Client: {report.client_name}"]
    if report.client_id:
        details.append(f"Client ID: {report.client_id}")
    if report.assessment_date:
        details.append(f"Assessment date: {report.assessment_date}")
    if report.age is not None:
        details.append(f"Age: {report.age}")
    parts.append("\n".join(details))

    if report.notice:
        parts.append(report.notice)
    if report.context_summary:
        lines = ["Context used to tailor your advice:"]
        lines.extend(f"  {render_text(item)}" for item in report.context_summary)
        parts.append("\n".join(lines))

    for section in report.sections:
        header = f"{section.title} [{section.tag}]" if section.tag else section.title
        block = [header]
        block.extend(f"  {_card_text(card)}" for card in section.cards)
        parts.append("\n".join(block))
        parts.extend(render_text(segment) for segment in section.segments)

    parts.extend([report.follow_up, report.contact, report.disclaimer])
    return "\n\n".join(parts)


def render_report_html(report: Report) -> str:
    """HTML fragment for the report; every piece of text is escaped."""
    esc = html.escape
    out = [
        '<article class="report">',
        f"<h1>{esc(REPORT_TITLE)}</h1>",
        f'<p class="subtitle">{esc(REPORT_SUBTITLE)}</p>',
    ]
    if report.status is not ReportStatus.OK:
        out.append(f'<p class="notice">{esc(report.notice)}</p>')
        out.append("</article>")
        return "\n".join(out)

    details = [("Client", report.client_name), ("Client ID", report.client_id),
               ("Assessment date", report.assessment_date)]
    if report.age is not None:
        details.append(("Age", str(report.age)))
    out.append('<dl class="client">')
    for label, value in details:
        if value:
            out.append(f"<dt>{esc(label)}</dt><dd>{esc(value)}</dd>")
    out.append("</dl>")

    if report.notice:
        out.append(f'<p class="notice">{esc(report.notice)}</p>')
    if report.context_summary:
        out.append('<ul class="context-summary">')
        out.extend(f"<li>{render_html(item)}</li>" for item in report.context_summary)
        out.append("</ul>")

    for section in report.sections:
        out.append(f'<section class="{esc(section.key)} tone-{esc(section.tone)}">')
        out.append(f"<h2>{esc(section.title)}</h2>")
        if section.tag:
            out.append(f'<span class="tag">{esc(section.tag)}</span>')
        for card in section.cards:
            out.append(
                f'<div class="card"><span class="label">{esc(card.label)}</span> '
                f'<span class="value">{esc(card.value)}</span> '
                f'<span class="unit">{esc(card.unit)}</span> '
                f'<span class="note">{esc(card.note)}</span></div>'
            )
        out.extend(f"<p>{render_html(segment)}</p>" for segment in section.segments)
        out.append("</section>")

    out.append(f'<p class="follow-up">{esc(report.follow_up)}</p>')
    out.append(f'<p class="contact">{esc(report.contact)}</p>')
    out.append(f'<p class="disclaimer">{esc(report.disclaimer)}</p>')
    out.append("</article>")
    return "\n".join(out)
