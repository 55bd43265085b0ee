"""
Orchestrator service facade: starts background executions on Temporal.

This is the only place the initiator touches the Temporal SDK. Everything
the SDK can raise while starting a workflow (connection refused, namespace
missing, duplicate workflow id, ...) is folded into OrchestratorStartFailure
so the initiator has exactly one failure to handle.
"""

import logging
from datetime import timedelta

# Client is the Temporal SDK's entry point for interacting with the server.
from temporalio.client import Client

# RetryPolicy here is the *workflow* retry policy: if the worker step fails,
# Temporal re-runs the whole execution with the same input.
from temporalio.common import RetryPolicy

# The same data_converter must be used on both the worker AND the client,
# otherwise Pydantic payloads fail to deserialize.
from temporalio.contrib.pydantic import pydantic_data_converter

from background_notify.config import Settings
from background_notify.domain.models import ExecutionRequest
from background_notify.errors import OrchestratorStartFailure
from background_notify.workflows import BackgroundNotificationWorkflow

logger = logging.getLogger(__name__)


async def connect_client(settings: Settings, *, lazy: bool = False) -> Client:
    """Open the process-wide Temporal client.

    Called once at startup by each entry point; the returned client is then
    passed down explicitly rather than stored in a module global.

    Triggers connect lazily, so an unreachable server surfaces on the first
    `start_workflow` as an OrchestratorStartFailure (and thus a 500). The
    worker connects eagerly: Temporal workers cannot run on a lazy client.
    """
    client = await Client.connect(
        settings.temporal_address,
        lazy=lazy,
        namespace=settings.temporal_namespace,
        data_converter=pydantic_data_converter,
    )
    logger.info("Temporal client for %s (namespace %r)", settings.temporal_address, settings.temporal_namespace)
    return client


def execution_retry_policy(settings: Settings) -> RetryPolicy:
    return RetryPolicy(
        maximum_attempts=settings.execution_max_attempts,
        initial_interval=timedelta(seconds=settings.execution_retry_initial_seconds),
        backoff_coefficient=settings.execution_retry_backoff,
    )


class ExecutionStarter:
    """Starts one BackgroundNotificationWorkflow per call."""

    def __init__(self, client: Client, task_queue: str, retry_policy: RetryPolicy | None = None) -> None:
        self._client = client
        self.task_queue = task_queue
        self.retry_policy = retry_policy

    @classmethod
    def from_settings(cls, client: Client, settings: Settings) -> "ExecutionStarter":
        return cls(client, settings.task_queue, execution_retry_policy(settings))

    async def start(self, request: ExecutionRequest, *, execution_id: str) -> str:
        """Submit the execution and return its workflow id.

        Does not wait for the workflow to run, only for Temporal to accept it.
        """
        try:
            handle = await self._client.start_workflow(
                BackgroundNotificationWorkflow.run,
                request,
                id=execution_id,
                task_queue=self.task_queue,
                retry_policy=self.retry_policy,
            )
        except Exception as exc:
            raise OrchestratorStartFailure(f"Could not start execution {execution_id}") from exc
        logger.info("Started execution %s on queue %r", handle.id, self.task_queue)
        return handle.id
