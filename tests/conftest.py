"""Shared test fixtures for Wellcheck tests."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path
from typing import Any

import pytest

# ---------------------------------------------------------------------------
# Test hermeticity
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _force_hermetic_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLIENT_ID_START", "0")
    monkeypatch.setenv("CLIENT_ID_WIDTH", "4")
    monkeypatch.setenv("WELLCHECK_LOG_LEVEL", "info")

# Allow running tests without `pip install -e .` by making `src/` importable.
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_SRC_DIR = _PROJECT_ROOT / "src"
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from wellcheck.domains.assessment.domain_logic.classification import compute_derived  # noqa: E402
from wellcheck.domains.assessment.models.derived import DerivedValues  # noqa: E402
from wellcheck.domains.assessment.models.record import AssessmentRecord  # noqa: E402

TODAY = date(2026, 1, 15)


def _make_record(consent: bool = True, name: str = "Alex Taylor", **groups: Any) -> AssessmentRecord:
    """Build a record from nested group dicts, with consent and a client name by default."""
    data: dict[str, Any] = {
        "client": {"client_id": "0001", "assessment_date": "2026-01-15", "name": name},
    }
    if consent:
        data["consent"] = {"given": True, "timestamp": "2026-01-15T09:00:00Z"}
    for group, values in groups.items():
        merged = dict(data.get(group, {}))
        merged.update(values)
        data[group] = merged
    return AssessmentRecord.from_dict(data)


def _derive(record: AssessmentRecord) -> DerivedValues:
    return compute_derived(record, TODAY)


@pytest.fixture
def make_record():
    """Factory fixture: nested group dicts in, consented AssessmentRecord out."""
    return _make_record


@pytest.fixture
def derive():
    """Compute derived values against the fixed test date."""
    return _derive


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def very_high_bp_record() -> AssessmentRecord:
    """Only a very high blood pressure reading has been recorded."""
    return _make_record(vitals={"systolic": "182", "diastolic": "125"})


@pytest.fixture
def full_record() -> AssessmentRecord:
    """A record exercising every section of the report."""
    return _make_record(
        client={"date_of_birth": "02/03/1980"},
        vitals={
            "systolic": "142", "diastolic": "88", "pulse": "78",
            "height_cm": "170", "weight_kg": "75",
        },
        lipids={
            "total_cholesterol": "6.8", "ldl": "4.3", "hdl": "1.1",
            "triglycerides": "2.1", "glucose": "5.2",
        },
        lifestyle={
            "smoker": "Yes", "alcohol": "Yes", "alcohol_units": "18",
            "diet_pattern": "Vegan", "mobility_level": "No limitations",
        },
        clinical={"diabetes_type": "Type 2", "other_context": "Night shift nurse"},
        fatigue={
            "chalder": {str(q): "5" for q in range(1, 12)},
            "sleep_quality": "Poor",
            "stress_level": "8",
        },
        wellbeing={
            "energy": "5", "sleep": "4", "mood": "6", "activity": "5", "nutrition": "6",
            "social": "7", "stress": "4", "work_life": "5", "purpose": "6",
            "life_satisfaction": "6", "priorities": "Sleep better",
        },
        urinalysis={"leukocytes": "+1 (Small)", "nitrites": "Positive", "ph": "6.0"},
    )
