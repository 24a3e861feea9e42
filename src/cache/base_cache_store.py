# src/cache/base_cache_store.py — v2
"""Abstract cache store interface for weight payloads."""

from __future__ import annotations

from abc import ABC, abstractmethod

from skillsalary.cache.models import CacheRecord


class BaseCacheStore(ABC):
    """Unified interface for weight cache backends.

    A store is a plain key -> record mapping. There is no eviction; records
    are overwritten on refresh and staleness is judged by the caller.
    """

    @abstractmethod
    async def get(self, key: str) -> CacheRecord | None:
        """Retrieve record by key."""

    @abstractmethod
    async def put(self, record: CacheRecord) -> None:
        """Store (or overwrite) a record under ``record.key``."""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove a record."""

    @abstractmethod
    async def clear(self) -> None:
        """Remove every record."""
