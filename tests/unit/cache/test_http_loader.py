# tests/unit/cache/test_http_loader.py — v1
"""Tests for cache/http_loader.py — served by httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from skillsalary.cache.http_loader import HttpLoader, create_http_loader


def _transport(status: int = 200, body: object | str = None, seen: list | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        content = body if isinstance(body, str) else json.dumps(body)
        return httpx.Response(status, content=content, headers={"Content-Type": "application/json"})

    return httpx.MockTransport(handler)


class TestCreateHttpLoader:
    def test_url_required(self):
        with pytest.raises(ValueError, match="url is required"):
            create_http_loader(url="")

    def test_returns_loader(self):
        loader = create_http_loader(url="https://example.com/weights")
        assert isinstance(loader, HttpLoader)
        assert loader.url == "https://example.com/weights"
        assert loader.cache_identity == "GET https://example.com/weights"


class TestHttpLoaderCall:
    @pytest.mark.asyncio
    async def test_get_json(self, live_payload):
        seen: list[httpx.Request] = []
        loader = create_http_loader(
            url="https://example.com/weights",
            transport=_transport(body=live_payload, seen=seen),
        )
        assert await loader() == live_payload
        assert seen[0].method == "GET"

    @pytest.mark.asyncio
    async def test_bearer_token_and_headers(self, live_payload):
        seen: list[httpx.Request] = []
        loader = create_http_loader(
            url="https://example.com/weights",
            token="secret",
            headers={"X-Client": "skillsalary"},
            transport=_transport(body=live_payload, seen=seen),
        )
        await loader()
        assert seen[0].headers["Authorization"] == "Bearer secret"
        assert seen[0].headers["X-Client"] == "skillsalary"

    @pytest.mark.asyncio
    async def test_transform(self, live_payload):
        loader = create_http_loader(
            url="https://example.com/weights",
            transform=lambda body: body["data"],
            transport=_transport(body={"data": live_payload}),
        )
        assert await loader() == live_payload

    @pytest.mark.asyncio
    async def test_http_error_raises(self):
        loader = create_http_loader(
            url="https://example.com/weights",
            transport=_transport(status=503, body={"error": "down"}),
        )
        with pytest.raises(httpx.HTTPStatusError):
            await loader()

    @pytest.mark.asyncio
    async def test_bad_json_raises(self):
        loader = create_http_loader(
            url="https://example.com/weights",
            transport=_transport(body="not json"),
        )
        with pytest.raises(ValueError):
            await loader()
