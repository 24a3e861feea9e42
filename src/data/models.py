# src/data/models.py — v2
"""Weight data models: ExperienceCurve, ComboRule, WeightMeta, WeightSet.

Field aliases follow the camelCase wire format used by live weight sources,
so a validated payload can be passed straight to ``WeightSet.from_payload``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from skillsalary.data.tables import FALLBACK_REGION

WeightSource = Literal[
    "static",
    "static-pending-live",
    "static-fallback",
    "live",
    "cache",
    "stale-cache",
]


class ExperienceCurve(BaseModel):
    """Linear experience multiplier with a cap and a flat senior bonus."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    per_year: float = Field(alias="perYear", ge=0)
    max_years: float = Field(alias="maxYears", ge=0)
    senior_bonus: float = Field(alias="seniorBonus", ge=0)


class ComboRule(BaseModel):
    """Bonus granted when every skill in the set is present."""

    model_config = ConfigDict(frozen=True)

    skills: tuple[str, ...]
    bonus: float = Field(ge=0)

    @property
    def label(self) -> str:
        return "+".join(self.skills)


class WeightMeta(BaseModel):
    """Where the active weight set came from."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: WeightSource = "static"
    stale: bool = False
    fetched_at: datetime | None = Field(default=None, alias="fetchedAt")
    error: str | None = None


class WeightSet(BaseModel):
    """Complete set of lookup tables consumed by the predictor.

    Immutable: a refresh replaces the whole set rather than editing it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    base_salaries: dict[str, float] = Field(alias="baseSalaries")
    skills: dict[str, float]
    experience: ExperienceCurve
    combos: tuple[ComboRule, ...] = ()
    currencies: dict[str, str] = Field(default_factory=dict)
    meta: WeightMeta = Field(default_factory=WeightMeta)

    @field_validator("skills")
    @classmethod
    def validate_multipliers(cls, v: dict[str, float]) -> dict[str, float]:
        negative = sorted(k for k, w in v.items() if w < 0)
        if negative:
            raise ValueError(f"skill multipliers must be >= 0: {', '.join(negative)}")
        return v

    @model_validator(mode="after")
    def validate_fallback_region(self) -> WeightSet:
        if FALLBACK_REGION not in self.base_salaries:
            raise ValueError(
                f"base salaries must contain the {FALLBACK_REGION!r} fallback region"
            )
        return self

    @classmethod
    def from_payload(cls, payload: dict[str, Any], meta: WeightMeta | None = None) -> WeightSet:
        """Build a WeightSet from a wire-shaped payload.

        Raises:
            pydantic.ValidationError: If a table is malformed or violates an invariant.
        """
        data = {k: payload[k] for k in ("baseSalaries", "skills", "experience", "combos", "currencies")}
        return cls.model_validate({**data, "meta": meta or WeightMeta()})

    def with_meta(self, meta: WeightMeta) -> WeightSet:
        return self.model_copy(update={"meta": meta})
