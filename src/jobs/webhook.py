# src/jobs/webhook.py — v1
"""Webhook delivery collaborators for finished jobs.

Delivery is best-effort: notifiers raise on failure and the job queue logs
and drops the error without touching job status.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import httpx

from skillsalary.jobs.models import WebhookPayload

if TYPE_CHECKING:
    from skillsalary.config.settings import Settings

logger = logging.getLogger(__name__)


class BaseWebhookNotifier(ABC):
    """Delivers a webhook payload to a URL."""

    @abstractmethod
    async def notify(self, url: str, payload: WebhookPayload) -> bool:
        """Deliver payload. Returns True on success, raises on transport failure."""


class LoggingWebhookNotifier(BaseWebhookNotifier):
    """Records the notification in the log instead of sending it."""

    async def notify(self, url: str, payload: WebhookPayload) -> bool:
        logger.info(
            "Webhook triggered: %s (job=%s, status=%s)",
            url, payload.job_id, payload.status,
            extra={"data": payload.to_json_dict()},
        )
        return True


class HttpWebhookNotifier(BaseWebhookNotifier):
    """POSTs the payload as JSON."""

    def __init__(
        self,
        timeout_s: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout_s = timeout_s
        self._transport = transport

    async def notify(self, url: str, payload: WebhookPayload) -> bool:
        async with httpx.AsyncClient(timeout=self._timeout_s, transport=self._transport) as client:
            resp = await client.post(url, json=payload.to_json_dict())
            resp.raise_for_status()
        logger.debug("Webhook delivered: %s -> %d", url, resp.status_code)
        return True


def create_webhook_notifier(settings: Settings | None = None) -> BaseWebhookNotifier:
    """Instantiate the configured webhook transport (default: log only)."""
    transport = "log" if settings is None else settings.webhook_transport
    if transport == "log":
        return LoggingWebhookNotifier()
    if transport == "http":
        return HttpWebhookNotifier(timeout_s=settings.webhook_timeout_s)
    raise ValueError(f"Unsupported webhook transport: {transport!r}")
