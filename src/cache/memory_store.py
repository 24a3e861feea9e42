# src/cache/memory_store.py — v1
"""In-memory cache store (default CACHE_BACKEND=memory)."""

from __future__ import annotations

from skillsalary.cache.base_cache_store import BaseCacheStore
from skillsalary.cache.models import CacheRecord


class MemoryCacheStore(BaseCacheStore):
    """Dict-backed store. One instance is shared by every loader that holds it."""

    def __init__(self) -> None:
        self._records: dict[str, CacheRecord] = {}

    async def get(self, key: str) -> CacheRecord | None:
        return self._records.get(key)

    async def put(self, record: CacheRecord) -> None:
        self._records[record.key] = record

    async def delete(self, key: str) -> None:
        self._records.pop(key, None)

    async def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)
