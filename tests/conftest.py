from unittest.mock import AsyncMock, Mock

import pytest

from background_notify.config import Settings

WEBHOOK_URL = "https://hooks.slack.test/services/T000/B000/XXXX"
TASK_QUEUE = "background-test"


class FakeTime:
    """Clock and sleeper pair: sleeping advances the clock instead of blocking."""

    def __init__(self, now: int) -> None:
        self.now = now
        self.sleeps: list[int] = []

    def clock(self) -> int:
        return self.now

    async def sleep(self, ms: int) -> None:
        self.sleeps.append(ms)
        self.now += ms


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        task_queue=TASK_QUEUE,
        slack_webhook_url=WEBHOOK_URL,
        environment="test",
    )


@pytest.fixture
def temporal_client() -> AsyncMock:
    client = AsyncMock()
    client.start_workflow.return_value = Mock(id="background-req-1")
    return client
