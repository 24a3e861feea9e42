# src/cache/json_store.py — v2
"""JSON file-based cache store (CACHE_BACKEND=json).

Stores each record as an individual JSON file under CACHE_ROOT so that the
last good weight payload survives a restart.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from skillsalary.cache.base_cache_store import BaseCacheStore
from skillsalary.cache.models import CacheRecord

logger = logging.getLogger(__name__)


class JsonCacheStore(BaseCacheStore):
    """File-based cache store using JSON files."""

    def __init__(self, cache_root: Path | str) -> None:
        self._root = Path(cache_root).expanduser()
        self._root.mkdir(parents=True, exist_ok=True)

    async def get(self, key: str) -> CacheRecord | None:
        """Retrieve record by key. Unreadable files count as a miss."""
        path = self._entry_path(key)
        if not path.exists():
            return None
        try:
            return CacheRecord.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValidationError, json.JSONDecodeError) as e:
            logger.warning("Failed to read cache record %s: %s", key, e)
            return None

    async def put(self, record: CacheRecord) -> None:
        path = self._entry_path(record.key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(record.model_dump_json(indent=2), encoding="utf-8")

    async def delete(self, key: str) -> None:
        path = self._entry_path(key)
        if path.exists():
            path.unlink()

    async def clear(self) -> None:
        for path in self._root.glob("*.json"):
            path.unlink()

    def _entry_path(self, key: str) -> Path:
        """Return file path for a cache key."""
        safe_key = key.replace("/", "_").replace("\\", "_").replace(":", "_")
        return self._root / f"{safe_key}.json"
