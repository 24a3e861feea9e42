# src/predictor/predictor.py — v4
"""Skill-to-salary prediction engine.

Usage:
    predictor = SalaryPredictor(region="US", experience_years=5)
    result = predictor.predict(["React", "TypeScript", "Node.js"])

With a live weight source, predictions must go through the async variants,
which resolve the data first:
    predictor = SalaryPredictor(data_source=DataSource(loader=my_loader))
    result = await predictor.predict_async(["Python"])
"""

from __future__ import annotations

import asyncio
import logging
import math
import time
from datetime import datetime, timezone

from skillsalary.cache.loader import DataLoader
from skillsalary.data.models import WeightMeta, WeightSet
from skillsalary.data.normalizer import normalize_skills
from skillsalary.data.store import static_weights
from skillsalary.data.tables import FALLBACK_CURRENCY, FALLBACK_REGION
from skillsalary.predictor.errors import DataNotReadyError
from skillsalary.predictor.models import (
    Breakdown,
    DataInfo,
    DataSource,
    PredictionResult,
    SalaryRange,
    SkillMatch,
)

logger = logging.getLogger(__name__)

SENIOR_THRESHOLD_YEARS = 5
RANGE_LOW = 0.85
RANGE_HIGH = 1.20


class SalaryPredictor:
    """Weighted-multiplier salary estimator bound to a region and experience level."""

    def __init__(
        self,
        region: str = FALLBACK_REGION,
        experience_years: float = 0,
        data_source: DataSource | None = None,
    ) -> None:
        self.region = region or FALLBACK_REGION
        self.experience_years = experience_years or 0
        self._data_source = data_source
        self._data_loader: DataLoader | None = None
        self._pending = False
        self._lock = asyncio.Lock()
        self._weights = self._initialize_weights()

    # --- Weight resolution ---

    @property
    def weights(self) -> WeightSet:
        return self._weights

    @property
    def is_live(self) -> bool:
        return self._data_source is not None and self._data_source.mode != "static"

    def _initialize_weights(self) -> WeightSet:
        if not self.is_live:
            return static_weights()
        if self._data_source.loader is None:
            raise ValueError("live data source requires a loader")
        self._data_loader = self._data_source.data_loader or DataLoader()
        self._pending = True
        return static_weights("static-pending-live")

    async def ensure_live_data(self) -> None:
        """Resolve pending live weights, falling back to static tables on failure."""
        if not self._pending:
            return
        async with self._lock:
            if not self._pending:
                return
            source = self._data_source
            # Cancellation leaves the predictor pending so the next call retries.
            try:
                result = await self._data_loader.load(
                    source.loader,
                    cache_key=source.cache_key,
                    ttl_ms=source.ttl_ms,
                    timeout_ms=source.timeout_ms,
                    allow_stale=source.allow_stale,
                    on_warning=source.on_warning,
                )
                weights = WeightSet.from_payload(
                    result.data,
                    WeightMeta(
                        source=result.source,
                        stale=result.stale,
                        fetched_at=result.fetched_at,
                    ),
                )
            except Exception as e:
                logger.warning("Falling back to static weight data: %s", e)
                self._weights = static_weights("static-fallback", error=str(e))
                self._pending = False
                if source.on_warning is not None:
                    source.on_warning("Falling back to static data", {"error": str(e)})
                return
            self._weights = weights
            self._pending = False

    async def refresh_data(self) -> WeightSet:
        """Reload live weights. Static predictors return their current weights."""
        if not self.is_live:
            return self._weights
        self._pending = True
        await self.ensure_live_data()
        return self._weights

    def get_data_info(self) -> DataInfo:
        meta = self._weights.meta
        return DataInfo(source=meta.source, stale=meta.stale, fetched_at=meta.fetched_at)

    # --- Prediction ---

    def predict(self, skills: list[str]) -> PredictionResult:
        """Estimate salary for one skill set.

        Raises:
            DataNotReadyError: If live weights have not been resolved yet.
        """
        if self._pending:
            raise DataNotReadyError()
        start = time.perf_counter()
        weights = self._weights

        normalized = normalize_skills(skills)
        present = set(normalized)

        base_salary = weights.base_salaries.get(self.region)
        if base_salary is None:
            base_salary = weights.base_salaries[FALLBACK_REGION]

        # Additive stacking: each matched skill adds (weight - 1).
        skill_multiplier = 1.0
        matched: list[str] = []
        unmatched: list[str] = []
        for skill in normalized:
            weight = weights.skills.get(skill)
            if weight is None:
                unmatched.append(skill)
            else:
                skill_multiplier += weight - 1.0
                matched.append(skill)

        combo_bonus = 0.0
        active_combos: list[str] = []
        for combo in weights.combos:
            if all(s in present for s in combo.skills):
                combo_bonus += combo.bonus
                active_combos.append(combo.label)

        curve = weights.experience
        capped_years = min(self.experience_years, curve.max_years)
        experience_multiplier = 1.0 + capped_years * curve.per_year
        senior_bonus = (
            curve.senior_bonus if self.experience_years >= SENIOR_THRESHOLD_YEARS else 0.0
        )

        total_multiplier = (
            skill_multiplier * experience_multiplier * (1 + combo_bonus + senior_bonus)
        )
        estimated = round_half_up(base_salary * total_multiplier)

        return PredictionResult(
            estimated_salary=estimated,
            salary_range=SalaryRange(
                min=round_half_up(estimated * RANGE_LOW),
                max=round_half_up(estimated * RANGE_HIGH),
            ),
            currency=self.get_currency(self.region),
            region=self.region,
            experience_years=self.experience_years,
            breakdown=Breakdown(
                base_salary=base_salary,
                skill_multiplier=round_half_up(skill_multiplier, 2),
                experience_multiplier=round_half_up(experience_multiplier, 2),
                combo_bonus=round_half_up(combo_bonus, 2),
                senior_bonus=round_half_up(senior_bonus, 2),
                total_multiplier=round_half_up(total_multiplier, 2),
            ),
            skills=SkillMatch(matched=matched, unmatched=unmatched, total=len(normalized)),
            active_combos=active_combos,
            confidence=calculate_confidence(len(matched), len(normalized)),
            execution_time_ms=round((time.perf_counter() - start) * 1000, 3),
            timestamp=datetime.now(timezone.utc),
        )

    def batch_predict(self, skill_sets: list[list[str]]) -> list[PredictionResult]:
        """Predict each skill set independently, preserving order."""
        return [self.predict(skills) for skills in skill_sets]

    async def predict_async(self, skills: list[str]) -> PredictionResult:
        await self.ensure_live_data()
        return self.predict(skills)

    async def batch_predict_async(self, skill_sets: list[list[str]]) -> list[PredictionResult]:
        await self.ensure_live_data()
        return self.batch_predict(skill_sets)

    # --- Lookups ---

    def get_currency(self, region: str) -> str:
        currencies = self._weights.currencies
        return currencies.get(region) or currencies.get(FALLBACK_REGION) or FALLBACK_CURRENCY

    def get_supported_skills(self) -> list[str]:
        return sorted(self._weights.skills)

    def get_supported_regions(self) -> list[str]:
        return list(self._weights.base_salaries)

    # --- Fluent mutators ---

    def set_region(self, region: str) -> SalaryPredictor:
        self.region = region
        return self

    def set_experience(self, years: float) -> SalaryPredictor:
        self.experience_years = years
        return self


def round_half_up(value: float, ndigits: int = 0) -> float | int:
    """Round halves up (toward +inf). Returns an int when ndigits is 0."""
    if ndigits == 0:
        return math.floor(value + 0.5)
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def calculate_confidence(matched: int, total: int) -> int:
    """Blend match rate (70%) with absolute matched count capped at 10 (30%)."""
    if total == 0:
        return 0
    match_rate = matched / total
    skill_count = min(matched / 10, 1)
    return round_half_up((match_rate * 0.7 + skill_count * 0.3) * 100)
