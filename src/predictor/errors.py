# src/predictor/errors.py — v1
"""Predictor errors."""

from __future__ import annotations


class DataNotReadyError(RuntimeError):
    """Synchronous predict() was called while live weight data is still pending."""

    def __init__(self) -> None:
        super().__init__(
            "predict called before live data loaded; "
            "use predict_async() or await refresh_data() first"
        )
