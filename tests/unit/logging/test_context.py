# tests/unit/logging/test_context.py — v2
"""Tests for logging/context.py — contextual logging variables."""

from __future__ import annotations

import asyncio

import pytest

from skillsalary.logging.context import (
    LogContext,
    clear_context,
    get_context,
    set_job_context,
)


class TestLogContext:
    def test_initial_state(self):
        ctx = get_context()
        assert ctx.job_id is None
        assert ctx.region is None

    def test_set_job_context(self):
        set_job_context("job_1_1", "EU")
        ctx = get_context()
        assert ctx.job_id == "job_1_1"
        assert ctx.region == "EU"

    def test_as_dict_filters_none(self):
        set_job_context("job_1_1")
        assert get_context().as_dict() == {"job_id": "job_1_1"}

    def test_clear(self):
        set_job_context("job_1_1", "US")
        clear_context()
        assert get_context() == LogContext()

    @pytest.mark.asyncio
    async def test_isolated_per_task(self):
        async def run(job_id: str) -> str | None:
            set_job_context(job_id)
            await asyncio.sleep(0)
            return get_context().job_id

        results = await asyncio.gather(run("a"), run("b"))
        assert results == ["a", "b"]
        assert get_context().job_id is None
