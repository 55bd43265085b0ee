"""
Application configuration using pydantic-settings.

Values come from the environment (or a local .env file). The task queue,
webhook URL and environment label are required; a process started without
them fails fast with a ValidationError instead of running misconfigured.
"""

from functools import lru_cache

from pydantic import Field, HttpUrl, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from background_notify.domain.timing import ACTIVITY_TIMEOUT_SECONDS, DEFAULT_DELAY_MS


class Settings(BaseSettings):
    """Settings shared by the worker, the CLI trigger and the HTTP front door."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Required
    task_queue: str = Field(..., min_length=1, description="Task queue the execution is routed to")
    slack_webhook_url: HttpUrl = Field(..., description="Slack incoming webhook URL")
    environment: str = Field(..., min_length=1, description="Environment label shown in responses and messages")

    # Temporal connection
    temporal_address: str = Field(default="localhost:7233", description="Temporal frontend host:port")
    temporal_namespace: str = Field(default="default", description="Temporal namespace")

    # Worker
    notify_delay_ms: int = Field(default=DEFAULT_DELAY_MS, ge=0, description="Pause before notifying")
    webhook_timeout_seconds: float = Field(default=10.0, gt=0, description="Webhook HTTP timeout")

    # Execution retry policy, applied by Temporal to the whole workflow
    execution_max_attempts: int = Field(default=1, ge=1, description="1 disables retries")
    execution_retry_initial_seconds: float = Field(default=1.0, gt=0)
    execution_retry_backoff: float = Field(default=2.0, ge=1.0)

    @model_validator(mode="after")
    def _delay_fits_activity_timeout(self) -> "Settings":
        # The activity sleeps, then posts; both must finish inside its start-to-close timeout.
        budget = self.notify_delay_ms / 1000 + self.webhook_timeout_seconds
        if budget >= ACTIVITY_TIMEOUT_SECONDS:
            raise ValueError(
                f"notify_delay_ms ({self.notify_delay_ms}) plus webhook_timeout_seconds "
                f"({self.webhook_timeout_seconds}) must stay under the {ACTIVITY_TIMEOUT_SECONDS}s activity timeout"
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
