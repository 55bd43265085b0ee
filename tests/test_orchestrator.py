from datetime import timedelta
from unittest.mock import AsyncMock, Mock, patch

import pytest
from temporalio.client import Client
from temporalio.common import RetryPolicy
from temporalio.contrib.pydantic import pydantic_data_converter

from background_notify.domain.models import ExecutionRequest
from background_notify.errors import OrchestratorStartFailure
from background_notify.services.orchestrator import ExecutionStarter, connect_client, execution_retry_policy
from background_notify.workflows import BackgroundNotificationWorkflow

from conftest import TASK_QUEUE


def test_default_retry_policy_disables_retries(settings) -> None:
    policy = execution_retry_policy(settings)

    assert policy.maximum_attempts == 1
    assert policy.initial_interval == timedelta(seconds=1)
    assert policy.backoff_coefficient == 2.0


def test_retry_policy_follows_settings(settings) -> None:
    tuned = settings.model_copy(
        update={
            "execution_max_attempts": 3,
            "execution_retry_initial_seconds": 0.5,
            "execution_retry_backoff": 3.0,
        }
    )

    assert execution_retry_policy(tuned) == RetryPolicy(
        maximum_attempts=3,
        initial_interval=timedelta(seconds=0.5),
        backoff_coefficient=3.0,
    )


@pytest.mark.asyncio
async def test_start_submits_workflow(temporal_client: AsyncMock, settings) -> None:
    starter = ExecutionStarter.from_settings(temporal_client, settings)

    workflow_id = await starter.start(ExecutionRequest(start_date=1000), execution_id="background-req-1")

    assert workflow_id == "background-req-1"
    temporal_client.start_workflow.assert_awaited_once_with(
        BackgroundNotificationWorkflow.run,
        ExecutionRequest(start_date=1000),
        id="background-req-1",
        task_queue=TASK_QUEUE,
        retry_policy=execution_retry_policy(settings),
    )


@pytest.mark.asyncio
async def test_start_wraps_any_sdk_error(temporal_client: AsyncMock) -> None:
    temporal_client.start_workflow.side_effect = RuntimeError("connection refused")
    starter = ExecutionStarter(temporal_client, TASK_QUEUE)

    with pytest.raises(OrchestratorStartFailure) as exc_info:
        await starter.start(ExecutionRequest(start_date=1000), execution_id="background-req-1")

    assert isinstance(exc_info.value.__cause__, RuntimeError)


@pytest.mark.asyncio
async def test_connect_client_passes_lazy_flag(settings) -> None:
    with patch.object(Client, "connect", AsyncMock(return_value=Mock())) as connect:
        await connect_client(settings, lazy=True)

    assert connect.await_args.args == ("localhost:7233",)
    assert connect.await_args.kwargs["lazy"] is True
    assert connect.await_args.kwargs["namespace"] == "default"
    assert connect.await_args.kwargs["data_converter"] is pydantic_data_converter
