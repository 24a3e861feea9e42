# src/jobs/models.py — v1
"""Job queue models: JobOptions, Job, JobTicket, WebhookPayload."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from skillsalary.predictor.models import PredictionResult

JobStatus = Literal["pending", "processing", "completed", "failed"]

TERMINAL_STATUSES: frozenset[str] = frozenset({"completed", "failed"})


class JobOptions(BaseModel):
    """Per-job prediction options."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    region: str = "US"
    experience_years: float = Field(default=0, ge=0)
    webhook_url: str | None = None
    metadata: dict[str, Any] | None = None


class Job(BaseModel):
    """In-memory job record, mutated in place by the queue worker only."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    status: JobStatus = "pending"
    skills: list[str]
    options: JobOptions
    created_at: datetime
    completed_at: datetime | None = None
    result: PredictionResult | None = None
    error: str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES


class JobTicket(BaseModel):
    """Returned by schedule_job() before any work has run."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    job_id: str
    status: JobStatus = "pending"


class WebhookPayload(BaseModel):
    """Body sent to a job's webhook on completion or failure."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    job_id: str
    status: Literal["completed", "failed"]
    result: PredictionResult | None = None
    error: str | None = None

    def to_json_dict(self) -> dict[str, Any]:
        """``{jobId, status, result}`` or ``{jobId, status, error}``."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
