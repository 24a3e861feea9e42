# tests/unit/data/test_models.py — v1
"""Tests for data/models.py and data/store.py — WeightSet invariants and static tables."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from skillsalary.data.models import ComboRule, WeightMeta, WeightSet
from skillsalary.data.store import static_weights
from skillsalary.data.tables import BASE_SALARIES, CURRENCIES, REGION_CODES, SKILLS, static_payload


class TestWeightSetFromPayload:
    def test_valid_payload(self, live_payload):
        ws = WeightSet.from_payload(live_payload)
        assert ws.base_salaries["US"] == 100000
        assert ws.skills["python"] == 2.0
        assert ws.experience.max_years == 10
        assert ws.combos[0].skills == ("python", "go")
        assert ws.meta.source == "static"

    def test_meta_attached(self, live_payload):
        ws = WeightSet.from_payload(live_payload, WeightMeta(source="live"))
        assert ws.meta.source == "live"

    def test_missing_us_rejected(self, live_payload):
        live_payload["baseSalaries"] = {"EU": 1}
        with pytest.raises(ValidationError, match="US"):
            WeightSet.from_payload(live_payload)

    def test_negative_multiplier_rejected(self, live_payload):
        live_payload["skills"]["cobol"] = -0.5
        with pytest.raises(ValidationError, match="cobol"):
            WeightSet.from_payload(live_payload)

    def test_empty_experience_rejected(self, minimal_payload):
        with pytest.raises(ValidationError):
            WeightSet.from_payload(minimal_payload)

    def test_frozen(self, live_payload):
        ws = WeightSet.from_payload(live_payload)
        with pytest.raises(ValidationError):
            ws.skills = {}  # type: ignore[misc]


class TestComboRule:
    def test_label(self):
        assert ComboRule(skills=("rust", "webassembly"), bonus=0.22).label == "rust+webassembly"


class TestStaticWeights:
    def test_default_source(self):
        ws = static_weights()
        assert ws.meta.source == "static"
        assert ws.base_salaries["US"] == 75000

    def test_tagged_source(self):
        ws = static_weights("static-fallback", error="boom")
        assert ws.meta.source == "static-fallback"
        assert ws.meta.error == "boom"
        assert ws.skills == static_weights().skills

    def test_static_payload_shape(self):
        payload = static_payload()
        assert set(payload) == {"baseSalaries", "skills", "experience", "combos", "currencies"}
        assert len(payload["combos"]) == 6

    def test_tables_consistent(self):
        assert set(CURRENCIES) == set(BASE_SALARIES)
        assert REGION_CODES[0] == "US"
        assert all(w >= 0 for w in SKILLS.values())
        assert "cpp" in SKILLS and "csharp" in SKILLS
