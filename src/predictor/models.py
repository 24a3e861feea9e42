# src/predictor/models.py — v1
"""Prediction domain models: DataSource, PredictionResult and its parts, DataInfo.

Result models serialize with camelCase aliases (``model_dump(by_alias=True)``)
to match the JSON shape expected by HTTP and webhook consumers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from skillsalary.cache.loader import DEFAULT_TIMEOUT_MS, DEFAULT_TTL_MS, Loader, WarningCallback
from skillsalary.data.models import WeightSource

if TYPE_CHECKING:
    from skillsalary.cache.loader import DataLoader


@dataclass(frozen=True)
class DataSource:
    """Where a predictor gets its weights.

    mode="static" ignores every other field. mode="live" loads through
    ``data_loader`` (a private one if omitted) and falls back to the static
    tables when the load fails.
    """

    mode: Literal["static", "live"] = "live"
    loader: Loader | None = None
    cache_key: str | None = None
    ttl_ms: float = DEFAULT_TTL_MS
    timeout_ms: float = DEFAULT_TIMEOUT_MS
    allow_stale: bool = True
    on_warning: WarningCallback | None = None
    data_loader: DataLoader | None = None


class _ResultModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class SalaryRange(_ResultModel):
    min: int
    max: int


class Breakdown(_ResultModel):
    """Intermediate multipliers, rounded to two decimals."""

    base_salary: float
    skill_multiplier: float
    experience_multiplier: float
    combo_bonus: float
    senior_bonus: float
    total_multiplier: float


class SkillMatch(_ResultModel):
    matched: list[str]
    unmatched: list[str]
    total: int


class PredictionResult(_ResultModel):
    """Salary estimate for one skill set. Created fresh per call."""

    estimated_salary: int
    salary_range: SalaryRange
    currency: str
    region: str
    experience_years: float
    breakdown: Breakdown
    skills: SkillMatch
    active_combos: list[str]
    confidence: int
    execution_time_ms: float
    timestamp: datetime


class DataInfo(_ResultModel):
    source: WeightSource
    stale: bool = False
    fetched_at: datetime | None = None
