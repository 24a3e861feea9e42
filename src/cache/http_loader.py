# src/cache/http_loader.py — v1
"""HTTP-based weight data loader.

Usage:
    loader = create_http_loader(url="https://example.com/weights.json", token="...")
    result = await DataLoader().load(loader)
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import httpx

logger = logging.getLogger(__name__)


class HttpLoader:
    """Argument-less async callable that GETs and parses a JSON weight payload."""

    def __init__(
        self,
        url: str,
        token: str | None = None,
        headers: dict[str, str] | None = None,
        timeout_ms: float = 3000,
        transform: Callable[[Any], Any] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._headers = dict(headers or {})
        if token:
            self._headers["Authorization"] = f"Bearer {token}"
        self._timeout_s = timeout_ms / 1000
        self._transform = transform
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    @property
    def cache_identity(self) -> str:
        return f"GET {self._url}"

    async def __call__(self) -> Any:
        """Fetch the payload.

        Raises:
            httpx.HTTPError: On network failure, timeout or a 4xx/5xx response.
            ValueError: If the body is not valid JSON.
        """
        async with httpx.AsyncClient(
            timeout=self._timeout_s, headers=self._headers, transport=self._transport
        ) as client:
            resp = await client.get(self._url)
            resp.raise_for_status()
            body = resp.json()
        logger.debug("Fetched weight payload from %s", self._url)
        return self._transform(body) if self._transform else body


def create_http_loader(
    url: str,
    token: str | None = None,
    headers: dict[str, str] | None = None,
    timeout_ms: float = 3000,
    transform: Callable[[Any], Any] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> HttpLoader:
    """Build an HTTP loader.

    Args:
        url: Endpoint returning the weight payload as JSON.
        token: Optional bearer token.
        headers: Extra request headers.
        timeout_ms: Per-request HTTP timeout.
        transform: Optional reshaping of the decoded JSON body.
        transport: Custom httpx transport (tests use httpx.MockTransport).

    Raises:
        ValueError: If url is empty.
    """
    if not url:
        raise ValueError("create_http_loader: url is required")
    return HttpLoader(
        url=url,
        token=token,
        headers=headers,
        timeout_ms=timeout_ms,
        transform=transform,
        transport=transport,
    )
