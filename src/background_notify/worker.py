"""
Temporal worker: polls the configured task queue and runs the worker step.

A **worker** is a long-running process that connects to the Temporal server
and polls a **task queue** for work. It registers:
  - **Workflows** it can execute (BackgroundNotificationWorkflow)
  - **Activities** it can run (NotificationActivities.notify_completion)

The Temporal client and the webhook HTTP client are both created once here
and handed to the objects that need them. Multiple worker processes can poll
the same task queue for horizontal scaling.

Run with:
    python -m background_notify.worker
"""

import asyncio
import logging

import httpx

# Worker is the main event loop that polls the Temporal server for tasks.
from temporalio.client import Client
from temporalio.worker import Worker

from background_notify.activities import NotificationActivities
from background_notify.config import Settings, get_settings
from background_notify.services.notify import SlackNotifier
from background_notify.services.orchestrator import connect_client
from background_notify.workflows import BackgroundNotificationWorkflow


def build_worker(client: Client, http: httpx.AsyncClient, settings: Settings) -> Worker:
    notifier = SlackNotifier(http, str(settings.slack_webhook_url))
    activities = NotificationActivities(
        notifier,
        environment=settings.environment,
        delay_ms=settings.notify_delay_ms,
    )
    return Worker(
        client,
        task_queue=settings.task_queue,
        workflows=[BackgroundNotificationWorkflow],
        activities=[activities.notify_completion],
    )


async def run_worker(settings: Settings | None = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    logger = logging.getLogger(__name__)
    settings = settings or get_settings()

    client = await connect_client(settings)
    async with httpx.AsyncClient(timeout=settings.webhook_timeout_seconds) as http:
        worker = build_worker(client, http, settings)
        logger.info("Starting worker on queue %r (environment %s)", settings.task_queue, settings.environment)
        # worker.run() blocks until the worker is shut down (e.g., via Ctrl+C).
        await worker.run()


def main() -> None:
    asyncio.run(run_worker())


if __name__ == "__main__":
    main()
