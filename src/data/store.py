# src/data/store.py — v1
"""Process-wide read-only access to the static weight set."""

from __future__ import annotations

from functools import lru_cache

from skillsalary.data.models import WeightMeta, WeightSet, WeightSource
from skillsalary.data.tables import static_payload


@lru_cache(maxsize=1)
def _static_weights() -> WeightSet:
    return WeightSet.from_payload(static_payload())


def static_weights(source: WeightSource = "static", error: str | None = None) -> WeightSet:
    """Return the static weight set tagged with the given meta source.

    Args:
        source: One of "static", "static-pending-live", "static-fallback".
        error: Load failure message recorded with a static fallback.
    """
    base = _static_weights()
    if source == "static" and error is None:
        return base
    return base.with_meta(WeightMeta(source=source, error=error))
