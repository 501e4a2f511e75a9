"""Tests for typed record updates."""

from __future__ import annotations

import pytest

from wellcheck.core.ids.counter import CounterClientIdIssuer
from wellcheck.domains.assessment.models.record import (
    AssessmentRecord,
    Consent,
    RecordError,
    Vitals,
)
from wellcheck.domains.assessment.models.updates import (
    GiveConsent,
    ReplaceGroup,
    RevokeConsent,
    SetChalderAnswer,
    ToggleStressor,
    apply_update,
    new_record,
    update_from_dict,
)


class TestNewRecord:
    def test_stamped_with_next_id(self):
        issuer = CounterClientIdIssuer(start=6)
        record = new_record(issuer, "2026-01-15")
        assert record.client.client_id == "0007"
        assert record.client.assessment_date == "2026-01-15"
        assert record.vitals == Vitals()

    def test_each_record_consumes_one_id(self):
        issuer = CounterClientIdIssuer()
        ids = [new_record(issuer, "2026-01-15").client.client_id for _ in range(3)]
        assert ids == ["0001", "0002", "0003"]


class TestApplyUpdate:
    def test_replace_group(self):
        record = AssessmentRecord()
        updated = apply_update(record, ReplaceGroup(Vitals(systolic="128", diastolic="82")))
        assert updated.vitals.systolic == "128"
        assert record.vitals.systolic == ""

    def test_consent_not_replaceable_as_group(self):
        with pytest.raises(RecordError):
            apply_update(AssessmentRecord(), ReplaceGroup(Consent()))  # type: ignore[arg-type]

    def test_set_and_clear_chalder_answer(self):
        record = apply_update(AssessmentRecord(), SetChalderAnswer("3", "6"))
        assert dict(record.fatigue.chalder) == {"3": "6"}
        record = apply_update(record, SetChalderAnswer("3", ""))
        assert dict(record.fatigue.chalder) == {}

    @pytest.mark.parametrize("question,score", [("0", "5"), ("12", "5"), ("1", "11"), ("1", "x")])
    def test_invalid_chalder_answer(self, question, score):
        with pytest.raises(RecordError):
            apply_update(AssessmentRecord(), SetChalderAnswer(question, score))

    def test_toggle_stressor(self):
        record = apply_update(AssessmentRecord(), ToggleStressor("Finances"))
        record = apply_update(record, ToggleStressor("Health concerns"))
        assert record.wellbeing.stressors == ("Finances", "Health concerns")
        record = apply_update(record, ToggleStressor("Finances"))
        assert record.wellbeing.stressors == ("Health concerns",)

    def test_unknown_stressor(self):
        with pytest.raises(RecordError):
            apply_update(AssessmentRecord(), ToggleStressor("Weather"))

    def test_consent_given_and_revoked(self):
        record = apply_update(AssessmentRecord(), GiveConsent("2026-01-15T09:00:00Z"))
        assert record.consent.given
        assert record.consent.timestamp == "2026-01-15T09:00:00Z"
        record = apply_update(record, RevokeConsent())
        assert record.consent == Consent()

    def test_consent_requires_timestamp(self):
        with pytest.raises(RecordError):
            apply_update(AssessmentRecord(), GiveConsent(""))


class TestUpdateFromDict:
    def test_replace_group(self):
        update = update_from_dict({
            "type": "replace_group", "group": "vitals", "values": {"pulse": 72},
        })
        assert update == ReplaceGroup(Vitals(pulse="72"))

    def test_consent_group_refused(self):
        with pytest.raises(RecordError):
            update_from_dict({"type": "replace_group", "group": "consent", "values": {}})

    def test_other_commands(self):
        assert update_from_dict({"type": "set_chalder_answer", "question": "2", "score": 4}) == (
            SetChalderAnswer("2", "4")
        )
        assert update_from_dict({"type": "toggle_stressor", "tag": "Finances"}) == (
            ToggleStressor("Finances")
        )
        assert update_from_dict({"type": "revoke_consent"}) == RevokeConsent()

    def test_unknown_type(self):
        with pytest.raises(RecordError, match="Unknown update type"):
            update_from_dict({"type": "set_field", "path": "vitals.pulse"})
