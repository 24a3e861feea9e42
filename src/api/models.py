# src/api/models.py — v2
"""Request models accepted by the service facade.

Region codes are restricted for synchronous predictions only. Job requests
accept any region string; unknown codes fall back to US at prediction time.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from skillsalary.jobs.models import JobOptions

RegionCode = Literal["US", "EU", "UK", "CA", "AU", "IN", "NG", "LATAM", "APAC"]

Skills = list[str]


class _RequestModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PredictionRequest(_RequestModel):
    """Single synchronous prediction."""

    skills: Skills = Field(min_length=1)
    region: RegionCode = "US"
    experience_years: float = Field(default=0, ge=0, le=50)
    save_result: bool = False


class BatchPredictionRequest(_RequestModel):
    """Several skill sets predicted with shared region and experience."""

    skill_sets: list[Skills] = Field(min_length=1)
    region: RegionCode = "US"
    experience_years: float = Field(default=0, ge=0, le=50)


class JobRequest(_RequestModel):
    """Asynchronous prediction job."""

    skills: Skills = Field(min_length=1)
    region: str = "US"
    experience_years: float = Field(default=0, ge=0)
    webhook_url: AnyHttpUrl | None = None
    metadata: dict[str, Any] | None = None

    def to_job_options(self) -> JobOptions:
        return JobOptions(
            region=self.region,
            experience_years=self.experience_years,
            webhook_url=str(self.webhook_url) if self.webhook_url else None,
            metadata=self.metadata,
        )
