# src/api/facade.py — v2
"""Service facade — the entry points an HTTP layer or CLI calls into.

Usage:
    service = PredictionService(settings)
    result = await service.predict(PredictionRequest(skills=["Python"]))

    jobs = JobService(settings)
    ticket = jobs.schedule_job(JobRequest(skills=["Python"]))
    record = jobs.get_job(ticket.job_id)

Persistence of results and jobs is the caller's concern; nothing here
depends on it succeeding.
"""

from __future__ import annotations

import logging
from typing import Any

from skillsalary.api.models import BatchPredictionRequest, JobRequest, PredictionRequest
from skillsalary.cache.cache_factory import create_cache_store
from skillsalary.cache.http_loader import create_http_loader
from skillsalary.cache.loader import DataLoader
from skillsalary.config.settings import Settings
from skillsalary.jobs.models import Job, JobTicket, WebhookPayload
from skillsalary.jobs.queue import JobQueue, PredictorFactory
from skillsalary.jobs.webhook import BaseWebhookNotifier, create_webhook_notifier
from skillsalary.predictor.models import DataInfo, DataSource, PredictionResult
from skillsalary.predictor.predictor import SalaryPredictor

logger = logging.getLogger(__name__)


class PredictionService:
    """Builds a predictor per request against one shared weight cache."""

    def __init__(
        self,
        settings: Settings | None = None,
        data_loader: DataLoader | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._data_loader = data_loader or DataLoader(create_cache_store(self._settings))
        self._data_source = self._build_data_source()

    @property
    def data_loader(self) -> DataLoader:
        return self._data_loader

    def _build_data_source(self) -> DataSource | None:
        s = self._settings
        if s.weights_mode != "live":
            return None
        loader = create_http_loader(
            url=s.weights_url,
            token=s.weights_token or None,
            timeout_ms=s.weights_timeout_ms,
        )
        return DataSource(
            mode="live",
            loader=loader,
            cache_key=s.weights_cache_key or None,
            ttl_ms=s.weights_ttl_ms,
            timeout_ms=s.weights_timeout_ms,
            allow_stale=s.weights_allow_stale,
            on_warning=_log_data_warning,
            data_loader=self._data_loader,
        )

    def create_predictor(
        self,
        region: str | None = None,
        experience_years: float | None = None,
    ) -> SalaryPredictor:
        return SalaryPredictor(
            region=region or self._settings.default_region,
            experience_years=(
                self._settings.default_experience_years
                if experience_years is None
                else experience_years
            ),
            data_source=self._data_source,
        )

    async def predict(self, request: PredictionRequest) -> PredictionResult:
        predictor = self.create_predictor(request.region, request.experience_years)
        return await predictor.predict_async(request.skills)

    async def batch_predict(self, request: BatchPredictionRequest) -> list[PredictionResult]:
        predictor = self.create_predictor(request.region, request.experience_years)
        return await predictor.batch_predict_async(request.skill_sets)

    async def data_info(self) -> DataInfo:
        """Resolve weights the way a prediction would and report their origin."""
        predictor = self.create_predictor()
        await predictor.ensure_live_data()
        return predictor.get_data_info()

    async def supported_skills(self) -> list[str]:
        predictor = self.create_predictor()
        await predictor.ensure_live_data()
        return predictor.get_supported_skills()

    async def supported_regions(self) -> list[str]:
        predictor = self.create_predictor()
        await predictor.ensure_live_data()
        return predictor.get_supported_regions()


class JobService:
    """Owns the job queue and its periodic cleanup."""

    def __init__(
        self,
        settings: Settings | None = None,
        notifier: BaseWebhookNotifier | None = None,
        predictor_factory: PredictorFactory | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._notifier = notifier or create_webhook_notifier(self._settings)
        self._queue = JobQueue(predictor_factory=predictor_factory, notifier=self._notifier)

    def get_job_queue(self) -> JobQueue:
        return self._queue

    def start(self) -> None:
        """Start the periodic cleanup sweep (requires a running event loop)."""
        self._queue.start_cleanup_timer(
            interval_s=self._settings.job_cleanup_interval_s,
            older_than_ms=self._settings.job_retention_ms,
        )

    async def stop(self) -> None:
        await self._queue.stop()

    def schedule_job(self, request: JobRequest) -> JobTicket:
        return self._queue.schedule_job(request.skills, request.to_job_options())

    def get_job(self, job_id: str) -> Job | None:
        return self._queue.get_job(job_id)

    async def ping_webhook(self, url: str) -> dict[str, Any]:
        """Send a synthetic completed-job notification to check an endpoint."""
        payload = WebhookPayload(job_id="webhook_ping", status="completed")
        try:
            await self._notifier.notify(url, payload)
        except Exception as e:
            logger.warning("Webhook ping to %s failed: %s", url, e)
            return {"success": False, "error": str(e)}
        return {"success": True, "message": "Webhook delivered"}


def _log_data_warning(message: str, context: dict[str, Any]) -> None:
    logger.warning("%s: %s", message, context.get("error"))
