# src/cache/errors.py — v1
"""Weight data load failures."""

from __future__ import annotations


class DataLoadError(Exception):
    """A weight data source could not produce a usable payload."""


class InvalidPayloadError(DataLoadError):
    """Loaded payload is missing one or more required top-level keys."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Invalid data payload (missing: {', '.join(missing) or 'object'})")


class DataLoadTimeoutError(DataLoadError):
    """Loader did not settle before the timeout."""

    def __init__(self, timeout_ms: float) -> None:
        self.timeout_ms = timeout_ms
        super().__init__(f"Data load timeout after {timeout_ms:g}ms")
