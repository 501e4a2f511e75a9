"""Advice for the lipid panel."""

from __future__ import annotations

from wellcheck.core.text.segments import Segment, labelled
from wellcheck.domains.assessment.advice.lifestyle import (
    diet_of,
    fat_quality_advice,
    lipid_movement_advice,
    smoking_advice,
    tier_of,
)
from wellcheck.domains.assessment.advice.signposts import signpost
from wellcheck.domains.assessment.models.derived import LipidTier
from wellcheck.domains.assessment.models.record import AssessmentRecord

_EXPLANATION = (
    "Cholesterol is a fatty substance in your blood. Your body needs it but too much can "
    "build up in your artery walls and increase the risk of heart disease and stroke. Total "
    "cholesterol, LDL (often called bad cholesterol), HDL (often called good cholesterol) and "
    "triglycerides are all measured to understand your cardiovascular risk."
)
_CAVEAT = (
    "A finger prick result is a screening measure. Recent meals, alcohol and illness can "
    "affect some values, particularly triglycerides, so results are best confirmed by your GP "
    "before any treatment decision."
)

_RESULT = {
    LipidTier.WITHIN: "Your lipid results are within a healthy range. This supports lower "
                      "cardiovascular risk.",
    LipidTier.BORDERLINE: "Your lipid levels are in a borderline range. This is an "
                          "opportunity to focus on targeted lifestyle improvements.",
    LipidTier.RAISED: "Your lipid levels are above the desirable range which means your "
                      "cardiovascular risk may be increased.",
}

_GUIDANCE: dict[LipidTier, list[tuple[str, str]]] = {
    LipidTier.WITHIN: [
        ("Maintaining this",
         "Continue with healthy habits including regular physical activity and a diet pattern "
         "rich in fibre and unsaturated fats."),
    ],
    LipidTier.BORDERLINE: [
        ("Action needed",
         "Focus on fibre intake, reducing saturated fat, regular physical activity and weight "
         "management. Reducing ultra processed foods and sugary drinks supports triglyceride "
         "reduction and overall heart health."),
    ],
    LipidTier.RAISED: [
        ("Action needed",
         "A GP appointment is recommended to discuss your overall cardiovascular risk, family "
         "history and whether medication may be appropriate."),
        ("Lifestyle still matters",
         "Lifestyle changes can improve results alongside any treatment your GP recommends. "
         "Focus on fibre intake, weight management, regular physical activity and reducing "
         "saturated fats."),
        ("Wider picture",
         "Blood pressure, diabetes status, smoking and family history all influence overall "
         "cardiovascular risk. Reviewing the full picture with your GP supports the best "
         "management plan."),
    ],
}


def _result_text(record: AssessmentRecord, tier: LipidTier) -> str:
    lipids = record.lipids
    measured = (
        ("total cholesterol", lipids.total_cholesterol),
        ("LDL", lipids.ldl),
        ("HDL", lipids.hdl),
        ("triglycerides", lipids.triglycerides),
    )
    values = [f"{label} {value} mmol/L" for label, value in measured if value]
    listed = f" ({', '.join(values)})" if values else ""
    return f"Today's results{listed} are classified as {tier.value}. {_RESULT[tier]}"


def compose_cholesterol(record: AssessmentRecord, tier: LipidTier | None) -> list[Segment]:
    if tier is None:
        return []
    lipids = record.lipids
    lines = [
        labelled("What this means", _EXPLANATION),
        labelled("Important note", _CAVEAT),
        labelled("Your result", _result_text(record, tier)),
    ]
    lines.extend(labelled(label, body) for label, body in _GUIDANCE[tier])

    lines.extend(smoking_advice(
        record,
        "Stopping smoking supports cardiovascular risk reduction and improves HDL cholesterol "
        "levels.",
    ))
    if lipids.on_statin:
        lines.append(labelled(
            "Statin medication",
            "You noted that you take a statin. Keep taking it as prescribed and discuss these "
            "results at your next medication review. Lifestyle changes work alongside your "
            "medication.",
        ))
    if not lipids.fasting and lipids.triglycerides:
        lines.append(labelled(
            "Non fasting sample",
            "This sample was not taken fasting. Triglycerides can read higher after eating so "
            "a raised triglyceride value may need repeating after a fast.",
        ))

    lines.extend([
        labelled(
            "Lifestyle factors",
            "Cholesterol responds to diet pattern, weight, physical activity, smoking, alcohol "
            "and genetics. Improvements are often seen over weeks to months with consistent "
            "effort.",
        ),
        lipid_movement_advice(tier_of(record)),
        labelled(
            "Fibre focus",
            "Soluble fibre helps lower LDL cholesterol. Good sources include oats, beans, "
            "lentils, chickpeas, fruit and vegetables.",
        ),
        fat_quality_advice(diet_of(record)),
        signpost("cholesterol"),
    ])
    return lines
