# src/jobs/queue.py — v3
"""In-memory prediction job queue.

schedule_job() registers a pending job and returns at once. A single worker
task owned by the queue consumes job ids in FIFO order, runs the prediction,
stamps the terminal state and fires the webhook (if any) as a detached task.

Job lifecycle: pending -> processing -> completed | failed. Terminal states
are final. Errors raised by a prediction are stored on the job and never
reach the scheduling caller.
"""

from __future__ import annotations

import asyncio
import contextlib
import itertools
import logging
import time
from datetime import datetime, timezone
from typing import Any, Callable

from skillsalary.jobs.models import Job, JobOptions, JobTicket, WebhookPayload
from skillsalary.jobs.webhook import BaseWebhookNotifier, LoggingWebhookNotifier
from skillsalary.logging.context import clear_context, set_job_context
from skillsalary.predictor.predictor import SalaryPredictor

logger = logging.getLogger(__name__)

DEFAULT_RETENTION_MS = 60 * 60 * 1000

PredictorFactory = Callable[[JobOptions], SalaryPredictor]


def default_predictor_factory(options: JobOptions) -> SalaryPredictor:
    return SalaryPredictor(region=options.region, experience_years=options.experience_years)


class JobQueue:
    """Schedules predictions off the caller's path and tracks their state.

    Must be used from within a running event loop: the worker task is started
    lazily by the first schedule_job() call.
    """

    def __init__(
        self,
        predictor_factory: PredictorFactory | None = None,
        notifier: BaseWebhookNotifier | None = None,
    ) -> None:
        self._predictor_factory = predictor_factory or default_predictor_factory
        self._notifier = notifier or LoggingWebhookNotifier()
        self._jobs: dict[str, Job] = {}
        self._counter = itertools.count(1)
        self._pending: asyncio.Queue[str] | None = None
        self._worker: asyncio.Task | None = None
        self._cleanup_task: asyncio.Task | None = None
        self._webhook_tasks: set[asyncio.Task] = set()

    def __len__(self) -> int:
        return len(self._jobs)

    # --- Public API ---

    def schedule_job(
        self,
        skills: list[str],
        options: JobOptions | dict[str, Any] | None = None,
    ) -> JobTicket:
        """Register a pending job and enqueue it for the worker.

        Raises:
            RuntimeError: If called outside a running event loop.
        """
        opts = options if isinstance(options, JobOptions) else JobOptions.model_validate(options or {})
        self._ensure_worker()

        job_id = f"job_{next(self._counter)}_{int(time.time() * 1000)}"
        self._jobs[job_id] = Job(
            id=job_id,
            skills=list(skills),
            options=opts,
            created_at=datetime.now(timezone.utc),
        )
        self._pending.put_nowait(job_id)
        logger.info("Scheduled job %s (%d skills, region=%s)", job_id, len(skills), opts.region)
        return JobTicket(job_id=job_id)

    def get_job(self, job_id: str) -> Job | None:
        """Return the in-memory job record, or None if unknown or swept."""
        return self._jobs.get(job_id)

    def cleanup(self, older_than_ms: float = DEFAULT_RETENTION_MS) -> int:
        """Delete terminal jobs completed more than older_than_ms ago.

        Returns:
            Number of jobs removed.
        """
        now = datetime.now(timezone.utc)
        expired = [
            job_id
            for job_id, job in self._jobs.items()
            if job.completed_at is not None
            and (now - job.completed_at).total_seconds() * 1000 > older_than_ms
        ]
        for job_id in expired:
            del self._jobs[job_id]
        if expired:
            logger.info("Cleaned up %d finished jobs", len(expired))
        return len(expired)

    def start_cleanup_timer(
        self,
        interval_s: float = 3600.0,
        older_than_ms: float = DEFAULT_RETENTION_MS,
    ) -> None:
        """Run cleanup() every interval_s seconds until stop()."""
        if self._cleanup_task is not None and not self._cleanup_task.done():
            return
        self._cleanup_task = asyncio.get_running_loop().create_task(
            self._run_cleanup(interval_s, older_than_ms)
        )

    async def drain(self) -> None:
        """Wait until every scheduled job and pending webhook has finished.

        Restarts the worker if jobs were left queued by stop().
        """
        if self._pending is not None:
            if not self._pending.empty():
                self._ensure_worker()
            await self._pending.join()
        if self._webhook_tasks:
            await asyncio.gather(*list(self._webhook_tasks))

    async def stop(self, webhook_grace_s: float = 5.0) -> None:
        """Cancel the worker and cleanup timer. Queued jobs stay pending.

        In-flight webhook deliveries get webhook_grace_s seconds to finish,
        then are cancelled.
        """
        for task in (self._worker, self._cleanup_task):
            if task is not None and not task.done():
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task
        self._worker = None
        self._cleanup_task = None

        if self._webhook_tasks:
            _, late = await asyncio.wait(list(self._webhook_tasks), timeout=webhook_grace_s)
            for task in late:
                task.cancel()
            if late:
                logger.warning("Cancelled %d undelivered webhooks on stop", len(late))
                await asyncio.gather(*late, return_exceptions=True)

    # --- Worker ---

    def _ensure_worker(self) -> None:
        loop = asyncio.get_running_loop()
        if self._pending is None:
            self._pending = asyncio.Queue()
        if self._worker is None or self._worker.done():
            self._worker = loop.create_task(self._run_worker())

    async def _run_worker(self) -> None:
        while True:
            job_id = await self._pending.get()
            try:
                self._process(job_id)
            finally:
                self._pending.task_done()

    def _process(self, job_id: str) -> None:
        job = self._jobs.get(job_id)
        if job is None or job.status != "pending":
            return

        set_job_context(job_id, job.options.region)
        try:
            job.status = "processing"
            try:
                predictor = self._predictor_factory(job.options)
                job.result = predictor.predict(job.skills)
                job.status = "completed"
                logger.info("Job completed: estimated=%d", job.result.estimated_salary)
            except Exception as e:
                job.error = str(e)
                job.status = "failed"
                logger.warning("Job failed: %s", e)
            job.completed_at = datetime.now(timezone.utc)

            if job.options.webhook_url:
                payload = WebhookPayload(
                    job_id=job.id, status=job.status, result=job.result, error=job.error
                )
                self._fire_webhook(job.options.webhook_url, payload)
        finally:
            clear_context()

    def _fire_webhook(self, url: str, payload: WebhookPayload) -> None:
        task = asyncio.get_running_loop().create_task(self._deliver(url, payload))
        self._webhook_tasks.add(task)
        task.add_done_callback(self._webhook_tasks.discard)

    async def _deliver(self, url: str, payload: WebhookPayload) -> None:
        try:
            await self._notifier.notify(url, payload)
        except Exception:
            logger.exception("Webhook delivery failed for %s (%s)", payload.job_id, url)

    async def _run_cleanup(self, interval_s: float, older_than_ms: float) -> None:
        while True:
            await asyncio.sleep(interval_s)
            self.cleanup(older_than_ms)
