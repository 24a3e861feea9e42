# tests/conftest.py — v2
"""Shared test fixtures for unit and integration tests.

Provides sample weight payloads, loaders and isolated data loaders.
No network access — HTTP is served by httpx.MockTransport where needed.
"""

from __future__ import annotations

from typing import Any

import pytest

from skillsalary.cache.loader import DataLoader
from skillsalary.cache.memory_store import MemoryCacheStore
from skillsalary.logging.context import clear_context
from skillsalary.predictor.predictor import SalaryPredictor


# === FIXTURES: Weight payloads ===


@pytest.fixture
def minimal_payload() -> dict[str, Any]:
    """Smallest payload that passes key validation."""
    return {
        "baseSalaries": {"US": 1},
        "skills": {},
        "experience": {},
        "combos": [],
        "currencies": {},
    }


@pytest.fixture
def live_payload() -> dict[str, Any]:
    """Complete payload with round numbers for exact assertions."""
    return {
        "baseSalaries": {"US": 100000, "EU": 80000},
        "skills": {"python": 2.0, "go": 1.5},
        "experience": {"perYear": 0, "maxYears": 10, "seniorBonus": 0},
        "combos": [{"skills": ["python", "go"], "bonus": 0.5}],
        "currencies": {"US": "USD", "EU": "EUR"},
    }


# === FIXTURES: Loaders ===


@pytest.fixture
def cache_store() -> MemoryCacheStore:
    return MemoryCacheStore()


@pytest.fixture
def data_loader(cache_store: MemoryCacheStore) -> DataLoader:
    """DataLoader over a private cache so tests never share records."""
    return DataLoader(cache_store=cache_store)


@pytest.fixture
def failing_loader():
    async def _loader():
        raise ConnectionError("network down")

    return _loader


# === FIXTURES: Predictors ===


@pytest.fixture
def us_senior() -> SalaryPredictor:
    return SalaryPredictor(region="US", experience_years=5)


@pytest.fixture(autouse=True)
def _reset_log_context():
    clear_context()
    yield
    clear_context()
