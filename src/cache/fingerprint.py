# src/cache/fingerprint.py — v3
"""Stable cache keys derived from a loader's identity."""

from __future__ import annotations

import hashlib
from typing import Any, Callable


def loader_fingerprint(loader: Callable[[], Any]) -> str:
    """Compute a cache key for a loader that was given no explicit key.

    Loaders may expose a ``cache_identity`` string (the HTTP loader uses its
    URL) so that equivalent loaders share a cache entry. Otherwise the key is
    tied to the qualified name and object identity, which is stable for as
    long as the loader object lives.
    """
    identity = getattr(loader, "cache_identity", None)
    if not identity:
        module = getattr(loader, "__module__", None) or type(loader).__module__
        name = getattr(loader, "__qualname__", None) or type(loader).__qualname__
        identity = f"{module}.{name}#{id(loader):x}"
    digest = hashlib.sha256(identity.encode("utf-8")).hexdigest()
    return f"loader_{digest[:16]}"
