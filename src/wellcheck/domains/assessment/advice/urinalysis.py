"""Advice for the optional urine dipstick panel."""

from __future__ import annotations

from wellcheck.core.text.segments import Segment, labelled, user_text
from wellcheck.domains.assessment.advice.signposts import signpost
from wellcheck.domains.assessment.domain_logic.classification import parse_number
from wellcheck.domains.assessment.models.record import AssessmentRecord, Urinalysis

_HYDRATION = labelled(
    "Hydration",
    "Aim for pale straw coloured urine throughout the day as a simple guide to adequate "
    "hydration.",
)

_ANALYTE_ADVICE = {
    "protein": (
        "Protein",
        "Protein in urine (proteinuria) can be caused by vigorous exercise, fever, dehydration "
        "or urinary infection. Persistent proteinuria may indicate kidney disease. If this is a "
        "new finding or you have risk factors such as diabetes or high blood pressure, please "
        "see your GP for a repeat test and further assessment including kidney function blood "
        "tests.",
    ),
    "blood": (
        "Blood",
        "Blood in urine (haematuria) can be caused by infection, kidney stones, vigorous "
        "exercise or menstruation. Persistent or unexplained blood in urine requires GP "
        "assessment. Please arrange a GP appointment for further investigation including urine "
        "culture and possible referral.",
    ),
    "glucose": (
        "Glucose",
        "Glucose in urine (glycosuria) may suggest raised blood glucose levels. This can occur "
        "in diabetes or pre-diabetes. If you have not been tested for diabetes, please arrange "
        "a fasting blood glucose or HbA1c test with your GP. If you have known diabetes, this "
        "finding may indicate that your blood glucose levels need reviewing with your diabetes "
        "team.",
    ),
    "ketones": (
        "Ketones",
        "Ketones in urine can be caused by fasting, very low carbohydrate diets, prolonged "
        "vomiting or uncontrolled diabetes. If you have diabetes and ketones are present, "
        "contact your GP or diabetes team promptly as this may indicate diabetic ketoacidosis "
        "which needs urgent assessment. If you do not have diabetes, ketones may reflect "
        "dietary pattern or dehydration.",
    ),
    "bilirubin": (
        "Bilirubin",
        "Bilirubin in urine can indicate liver or gallbladder conditions. If you have symptoms "
        "such as yellowing of the skin or eyes, dark urine, pale stools or abdominal pain, "
        "please see your GP promptly. If this is an isolated finding without symptoms, GP "
        "review is still recommended for further liver function assessment.",
    ),
    "urobilinogen": (
        "Urobilinogen",
        "Raised urobilinogen can be associated with liver conditions or increased red blood "
        "cell breakdown. Please see your GP for further blood tests to assess liver function.",
    ),
}


_PANEL_ORDER = (
    "leukocytes", "nitrites", "protein", "blood", "glucose", "ketones", "bilirubin", "urobilinogen",
)


def _abnormal(panel: Urinalysis) -> dict[str, str]:
    """Abnormal analytes in panel order, mapped to the recorded result."""
    found = {}
    for name in _PANEL_ORDER:
        value = getattr(panel, name)
        if name == "nitrites":
            abnormal = value == "Positive"
        elif name == "urobilinogen":
            abnormal = "Raised" in value
            value = "Raised"
        else:
            abnormal = bool(value) and value != "Negative"
        if abnormal:
            found[name] = value
    return found


def _specific_gravity(recorded: str) -> Segment:
    sg = parse_number(recorded)
    if sg is not None and sg <= 1.005:
        body = (
            f"Your specific gravity ({recorded}) is at the lower end, which may suggest dilute "
            "urine or high fluid intake. This is usually not a concern."
        )
    elif sg is not None and sg >= 1.025:
        body = (
            f"Your specific gravity ({recorded}) is at the higher end, which may suggest "
            "concentrated urine or dehydration. Try to increase your fluid intake."
        )
    else:
        body = f"Your specific gravity ({recorded}) is within the normal range (1.005 to 1.030)."
    return labelled("Specific gravity", body)


def compose_urinalysis(record: AssessmentRecord) -> list[Segment]:
    """Dipstick commentary; empty when no dipstick value was recorded."""
    panel = record.urinalysis
    if not panel.has_dipstick_values():
        return []

    lines = [labelled(
        "What this means",
        "A urine dipstick test checks for substances in your urine that may indicate "
        "underlying health conditions. This is a screening test and not a diagnosis. Abnormal "
        "results may need further investigation by your GP.",
    )]

    found = _abnormal(panel)
    if not found:
        lines.append(labelled(
            "Your results",
            "All parameters tested are within normal limits. No further action is needed based "
            "on these results.",
        ))
        if panel.ph:
            lines.append(labelled(
                "pH",
                f"Your urine pH was {panel.ph}. Normal urine pH ranges from 4.5 to 8.0. This is "
                "influenced by diet, hydration and metabolic factors.",
            ))
        if panel.specific_gravity:
            lines.append(labelled(
                "Specific gravity",
                f"Your specific gravity was {panel.specific_gravity}. Normal range is 1.005 to "
                "1.030. This reflects hydration status. A higher value may suggest dehydration.",
            ))
        lines.append(_HYDRATION)
        return lines

    findings = ". ".join(f"{name.capitalize()}: {value}" for name, value in found.items())
    lines.append(labelled("Findings noted", f"{findings}."))

    if "leukocytes" in found and "nitrites" in found:
        lines.append(labelled(
            "Leukocytes and nitrites",
            "The combination of leukocytes and nitrites in urine can suggest a urinary tract "
            "infection (UTI). Common symptoms include burning or stinging when passing urine, "
            "needing to pass urine more often, cloudy or strong smelling urine and lower "
            "abdominal discomfort. Please see your GP for further assessment and possible urine "
            "culture. Drink plenty of water in the meantime.",
        ))
    elif "leukocytes" in found:
        lines.append(labelled(
            "Leukocytes",
            "Leukocytes (white blood cells) in urine can indicate infection, inflammation or "
            "contamination. If you have urinary symptoms (burning, frequency, urgency), please "
            "see your GP. If you have no symptoms, this may be a normal variant but can be "
            "rechecked if needed.",
        ))
    elif "nitrites" in found:
        lines.append(labelled(
            "Nitrites",
            "Nitrites in urine can suggest the presence of bacteria. If you have urinary "
            "symptoms, please see your GP for further assessment. Not all bacteria produce "
            "nitrites so a negative result does not rule out infection.",
        ))

    for name, (label, body) in _ANALYTE_ADVICE.items():
        if name in found:
            lines.append(labelled(label, body))

    if panel.ph:
        lines.append(labelled(
            "pH",
            f"Your urine pH was {panel.ph}. Normal range is 4.5 to 8.0. Very alkaline urine "
            "(above 8.0) may be seen with urinary infections. Very acidic urine (below 5.0) may "
            "be seen with dehydration or high protein diets.",
        ))
    if panel.specific_gravity:
        lines.append(_specific_gravity(panel.specific_gravity))
    if panel.notes:
        lines.append(user_text("Additional notes", panel.notes))

    lines.append(_HYDRATION)
    lines.append(signpost("urinalysis"))
    return lines
