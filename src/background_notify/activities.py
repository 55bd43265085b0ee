"""
Temporal activities: the worker side of the background job.

An **activity** is a single unit of work in a Temporal workflow. Activities are
where side-effects happen: here, waiting and then posting to Slack.

Key points:
  - Activities are methods on `NotificationActivities`, an instance built once
    by the worker process with its collaborators (notifier, clock, sleeper)
    injected. The bound method is what gets registered with the Worker.
  - Activities run OUTSIDE the deterministic workflow sandbox, so they can
    read the wall clock and do network I/O freely.
  - If the activity raises, Temporal records the step as failed. No retry
    happens in here; retrying is the orchestrator's decision.
"""

import logging

# `activity` provides the @activity.defn decorator that registers a function
# (or method) as a Temporal activity. The method name becomes the activity
# type name on the Temporal server ("notify_completion").
from temporalio import activity

from background_notify.domain.messages import build_completion_message
from background_notify.domain.models import ExecutionRequest, NotificationResult
from background_notify.domain.timing import DEFAULT_DELAY_MS, Clock, Sleeper, delay, elapsed_seconds, now_ms
from background_notify.errors import WorkerProcessingFailure
from background_notify.services.notify import SlackNotifier

logger = logging.getLogger(__name__)


class NotificationActivities:
    def __init__(
        self,
        notifier: SlackNotifier,
        *,
        environment: str,
        delay_ms: int = DEFAULT_DELAY_MS,
        clock: Clock = now_ms,
        sleep: Sleeper = delay,
    ) -> None:
        self._notifier = notifier
        self._environment = environment
        self._delay_ms = delay_ms
        self._clock = clock
        self._sleep = sleep

    @activity.defn
    async def notify_completion(self, request: ExecutionRequest) -> NotificationResult:
        """Wait, then report how long it has been since `start_date`.

        Elapsed time is measured after the delay, so it always includes it.
        Every failure is logged and re-raised as WorkerProcessingFailure;
        "delay failed" and "delivery failed" are not distinguished.
        """
        logger.info("Activity notify_completion started (startDate=%d)", request.start_date)
        try:
            await self._sleep(self._delay_ms)
            seconds = elapsed_seconds(request.start_date, self._clock())
            message = build_completion_message(self._environment, seconds)
            await self._notifier.send(message)
        except Exception as exc:
            logger.exception("Background processing failed (startDate=%d)", request.start_date)
            raise WorkerProcessingFailure(f"Background processing failed: {exc}") from exc
        logger.info("Activity notify_completion completed after %.3f seconds", seconds)
        return NotificationResult(success=True)
