# tests/integration/conftest.py — v8
"""Shared fixtures for integration tests.

HTTP endpoints (weight source, webhook receivers) are served in-process by
httpx.MockTransport. Cache files live under pytest's tmp_path.
"""

from __future__ import annotations

from typing import Any

import httpx
import pytest


class FakeEndpoint:
    """Scriptable HTTP endpoint that records every request it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status = 200
        self.body: Any = {}

    def respond(self, status: int, body: Any = None) -> None:
        self.status = status
        self.body = body if body is not None else {}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def endpoint() -> FakeEndpoint:
    return FakeEndpoint()

