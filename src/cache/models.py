# src/cache/models.py — v2
"""Cache domain models: CacheRecord, LoadResult."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel


class CacheRecord(BaseModel):
    """Weight payload cached under a key, stamped with its fetch time."""

    key: str
    data: dict[str, Any]
    fetched_at: datetime


class LoadResult(BaseModel):
    """Outcome of a single DataLoader.load() call."""

    data: dict[str, Any]
    source: Literal["live", "cache", "stale-cache"]
    stale: bool = False
    fetched_at: datetime
