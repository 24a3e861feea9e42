# src/logging/context.py — v2
"""Contextual logging support — attach job_id and region to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Set by the job worker while a job is processed.
_job_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "job_id", default=None
)
_region: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "region", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    job_id: str | None = None
    region: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(job_id=_job_id.get(), region=_region.get())


def set_job_context(job_id: str, region: str | None = None) -> None:
    """Set job-level context (called once per processed job)."""
    _job_id.set(job_id)
    _region.set(region)


def clear_context() -> None:
    """Reset all context variables."""
    _job_id.set(None)
    _region.set(None)
