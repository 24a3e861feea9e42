# src/cache/loader.py — v2
"""Weight data loader with TTL cache, timeout and stale-if-error fallback.

Lookup order for a single load():
  1. Fresh cached record (age < ttl)    -> source="cache"
  2. One loader call raced against timeout, payload validated
                                        -> source="live", cache overwritten
  3. Failure with a cached record and allow_stale
                                        -> source="stale-cache", stale=True
  4. Otherwise the failure propagates.

Concurrent loads of the same stale key are not coalesced; each one calls its
loader. The last successful write wins.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Union

from pydantic import BaseModel

from skillsalary.cache.base_cache_store import BaseCacheStore
from skillsalary.cache.errors import DataLoadTimeoutError, InvalidPayloadError
from skillsalary.cache.fingerprint import loader_fingerprint
from skillsalary.cache.memory_store import MemoryCacheStore
from skillsalary.cache.models import CacheRecord, LoadResult

logger = logging.getLogger(__name__)

DEFAULT_TTL_MS = 10 * 60 * 1000
DEFAULT_TIMEOUT_MS = 3000

REQUIRED_KEYS: tuple[str, ...] = (
    "baseSalaries",
    "skills",
    "experience",
    "combos",
    "currencies",
)

Loader = Callable[[], Union[Any, Awaitable[Any]]]
WarningCallback = Callable[[str, dict[str, Any]], None]


def missing_keys(payload: Any) -> list[str]:
    """Return the required keys absent from payload (all of them for non-dicts)."""
    if not isinstance(payload, dict):
        return list(REQUIRED_KEYS)
    return [k for k in REQUIRED_KEYS if k not in payload]


def validate_payload(payload: Any) -> bool:
    """True if payload carries all five required top-level keys (values unchecked)."""
    return not missing_keys(payload)


class DataLoader:
    """Loads weight payloads through an explicitly owned cache store."""

    def __init__(self, cache_store: BaseCacheStore | None = None) -> None:
        self._cache = cache_store if cache_store is not None else MemoryCacheStore()

    @property
    def cache_store(self) -> BaseCacheStore:
        return self._cache

    async def clear(self) -> None:
        """Drop every cached record."""
        await self._cache.clear()

    async def load(
        self,
        loader: Loader,
        cache_key: str | None = None,
        ttl_ms: float = DEFAULT_TTL_MS,
        timeout_ms: float = DEFAULT_TIMEOUT_MS,
        allow_stale: bool = True,
        on_warning: WarningCallback | None = None,
    ) -> LoadResult:
        """Load a weight payload, serving from cache while fresh.

        Args:
            loader: Argument-less callable returning a payload or an awaitable of one.
            cache_key: Explicit key. Derived from the loader's identity if omitted.
            ttl_ms: Freshness window. Negative values treat every record as expired.
            timeout_ms: Upper bound on an awaitable loader.
            allow_stale: Serve the previous record when the refresh fails.
            on_warning: Called as ``on_warning(message, {"error": ...})`` on stale fallback.

        Raises:
            TypeError: If loader is not callable.
            DataLoadTimeoutError: Loader timed out and no stale record could be served.
            InvalidPayloadError: Payload lacked required keys and no stale record could be served.
            Exception: Whatever the loader raised, under the same condition.
        """
        if not callable(loader):
            raise TypeError("loader must be callable")

        key = cache_key or loader_fingerprint(loader)
        cached = await self._cache.get(key)

        if cached is not None and _age_ms(cached.fetched_at) < ttl_ms:
            logger.debug("Weight cache hit: %s", key)
            return LoadResult(
                data=cached.data, source="cache", stale=False, fetched_at=cached.fetched_at
            )

        try:
            payload = await _call_with_timeout(loader, timeout_ms)
            if isinstance(payload, BaseModel):
                payload = payload.model_dump(by_alias=True, exclude={"meta"})
            missing = missing_keys(payload)
            if missing:
                raise InvalidPayloadError(missing)
        except Exception as e:
            if cached is not None and allow_stale:
                logger.warning("Using stale weight data for %s: %s", key, e)
                if on_warning is not None:
                    on_warning("Using stale data due to load failure", {"error": str(e)})
                return LoadResult(
                    data=cached.data,
                    source="stale-cache",
                    stale=True,
                    fetched_at=cached.fetched_at,
                )
            raise

        record = CacheRecord(key=key, data=payload, fetched_at=datetime.now(timezone.utc))
        await self._cache.put(record)
        logger.info("Loaded live weight data: %s", key)
        return LoadResult(
            data=payload, source="live", stale=False, fetched_at=record.fetched_at
        )


async def _call_with_timeout(loader: Loader, timeout_ms: float) -> Any:
    """Invoke loader; await and bound its result if it is awaitable.

    A synchronous loader runs to completion inline on the event loop, so the
    timeout only applies to awaitable results.
    """
    result = loader()
    if not inspect.isawaitable(result):
        return result
    try:
        return await asyncio.wait_for(result, timeout=timeout_ms / 1000)
    except asyncio.TimeoutError as e:
        raise DataLoadTimeoutError(timeout_ms) from e


def _age_ms(fetched_at: datetime) -> float:
    return (datetime.now(timezone.utc) - fetched_at).total_seconds() * 1000
