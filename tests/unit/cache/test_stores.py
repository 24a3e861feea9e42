# tests/unit/cache/test_stores.py — v1
"""Tests for cache/memory_store.py, cache/base_cache_store.py and cache/cache_factory.py."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from skillsalary.cache.base_cache_store import BaseCacheStore
from skillsalary.cache.cache_factory import create_cache_store
from skillsalary.cache.json_store import JsonCacheStore
from skillsalary.cache.memory_store import MemoryCacheStore
from skillsalary.cache.models import CacheRecord
from skillsalary.config.settings import Settings


def _record(key: str = "k", marker: int = 1) -> CacheRecord:
    return CacheRecord(
        key=key,
        data={"baseSalaries": {"US": marker}},
        fetched_at=datetime(2026, 3, 1, tzinfo=timezone.utc),
    )


class TestBaseCacheStore:
    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            BaseCacheStore()  # type: ignore[abstract]

    def test_has_required_methods(self):
        for method in ["get", "put", "delete", "clear"]:
            assert hasattr(BaseCacheStore, method)


class TestMemoryCacheStore:
    @pytest.mark.asyncio
    async def test_put_get_overwrite(self):
        store = MemoryCacheStore()
        await store.put(_record(marker=1))
        await store.put(_record(marker=2))
        got = await store.get("k")
        assert got.data["baseSalaries"]["US"] == 2
        assert len(store) == 1

    @pytest.mark.asyncio
    async def test_delete_and_missing(self):
        store = MemoryCacheStore()
        await store.put(_record())
        await store.delete("k")
        await store.delete("never-there")
        assert await store.get("k") is None

    @pytest.mark.asyncio
    async def test_clear(self):
        store = MemoryCacheStore()
        await store.put(_record("a"))
        await store.put(_record("b"))
        await store.clear()
        assert len(store) == 0


class TestCreateCacheStore:
    def test_default_memory(self):
        assert isinstance(create_cache_store(), MemoryCacheStore)

    def test_json_backend(self, tmp_path):
        s = Settings(_env_file=None, cache_backend="json", cache_root=tmp_path)
        store = create_cache_store(s)
        assert isinstance(store, JsonCacheStore)

    def test_unsupported_backend(self):
        """Settings validation rejects invalid backends before factory is reached."""
        with pytest.raises(ValueError):
            Settings(_env_file=None, cache_backend="redis")
