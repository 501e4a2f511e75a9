"""Typed record updates.

The editing surface changes a record only through these commands. Each one is
applied with ``apply_update`` and produces a new record; the input record is
never modified.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Union

from wellcheck.core.ids import ClientIdIssuer
from wellcheck.domains.assessment.models.options import CHALDER_QUESTIONS, SCORE_0_10, STRESSORS
from wellcheck.domains.assessment.models.record import (
    GROUP_TYPES,
    AssessmentRecord,
    ClientDetails,
    ClinicalContext,
    Consent,
    FatigueScreen,
    LipidPanel,
    Lifestyle,
    RecordError,
    Urinalysis,
    Vitals,
    WellbeingCheck,
    build_group,
)

logger = logging.getLogger(__name__)

RecordGroup = Union[
    ClientDetails, Vitals, LipidPanel, Lifestyle, ClinicalContext,
    FatigueScreen, WellbeingCheck, Urinalysis,
]

_GROUP_NAMES = {group_type: name for name, group_type in GROUP_TYPES.items()}

# Consent changes only through GiveConsent and RevokeConsent.


@dataclass(frozen=True)
class ReplaceGroup:
    """Replace one whole field group; the target is chosen by the group's type."""

    group: RecordGroup


@dataclass(frozen=True)
class SetChalderAnswer:
    question: str
    score: str          # "" clears the answer


@dataclass(frozen=True)
class ToggleStressor:
    tag: str


@dataclass(frozen=True)
class GiveConsent:
    timestamp: str


@dataclass(frozen=True)
class RevokeConsent:
    pass


RecordUpdate = Union[ReplaceGroup, SetChalderAnswer, ToggleStressor, GiveConsent, RevokeConsent]


def new_record(issuer: ClientIdIssuer, assessment_date: str) -> AssessmentRecord:
    """Create an empty record stamped with the next client id."""
    client = ClientDetails(client_id=issuer.next_id(), assessment_date=assessment_date)
    logger.info("New assessment record %s dated %s", client.client_id, assessment_date)
    return AssessmentRecord(client=client)


def apply_update(record: AssessmentRecord, update: RecordUpdate) -> AssessmentRecord:
    """Return a new record with ``update`` applied."""
    if isinstance(update, ReplaceGroup):
        name = _GROUP_NAMES.get(type(update.group))
        if name is None or name == "consent":
            raise RecordError(f"Not a replaceable field group: {type(update.group).__name__}")
        return replace(record, **{name: update.group})

    if isinstance(update, SetChalderAnswer):
        if update.question not in CHALDER_QUESTIONS:
            raise RecordError(f"Unknown Chalder question id: {update.question!r}")
        if update.score and update.score not in SCORE_0_10:
            raise RecordError(f"Chalder scores run 0 to 10, got {update.score!r}")
        answers = dict(record.fatigue.chalder)
        if update.score:
            answers[update.question] = update.score
        else:
            answers.pop(update.question, None)
        return replace(record, fatigue=replace(record.fatigue, chalder=answers))

    if isinstance(update, ToggleStressor):
        if update.tag not in STRESSORS:
            raise RecordError(f"Unknown stressor tag: {update.tag!r}")
        current = record.wellbeing.stressors
        if update.tag in current:
            stressors = tuple(tag for tag in current if tag != update.tag)
        else:
            stressors = current + (update.tag,)
        return replace(record, wellbeing=replace(record.wellbeing, stressors=stressors))

    if isinstance(update, GiveConsent):
        if not update.timestamp:
            raise RecordError("Consent requires a timestamp")
        return replace(record, consent=Consent(given=True, timestamp=update.timestamp))

    if isinstance(update, RevokeConsent):
        return replace(record, consent=Consent())

    raise RecordError(f"Unsupported update: {type(update).__name__}")


def update_from_dict(data: Mapping[str, Any]) -> RecordUpdate:
    """Parse the wire form of an update, e.g. ``{"type": "toggle_stressor", "tag": "Finances"}``.

    ``replace_group`` takes ``group`` (the group name) and ``values`` (its fields).
    """
    kind = data.get("type")
    if kind == "replace_group":
        name = data.get("group")
        if name not in GROUP_TYPES or name == "consent":
            raise RecordError(f"Not a replaceable field group: {name!r}")
        return ReplaceGroup(build_group(name, GROUP_TYPES[name], data.get("values") or {}))
    if kind == "set_chalder_answer":
        return SetChalderAnswer(str(data.get("question", "")), str(data.get("score", "")))
    if kind == "toggle_stressor":
        return ToggleStressor(str(data.get("tag", "")))
    if kind == "give_consent":
        return GiveConsent(str(data.get("timestamp", "")))
    if kind == "revoke_consent":
        return RevokeConsent()
    raise RecordError(f"Unknown update type: {kind!r}")
