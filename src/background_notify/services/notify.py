"""
Slack notification service facade.

Posts Block Kit messages to a Slack incoming webhook. The httpx client is
owned by the worker process and passed in, so one connection pool is
reused across every activity execution instead of being rebuilt per call.
"""

import logging

import httpx

from background_notify.domain.models import SlackMessage

logger = logging.getLogger(__name__)


class SlackNotifier:
    """Delivers messages to a single incoming-webhook URL.

    Any transport error or non-2xx response propagates to the caller
    (the activity), which is what lets Temporal see the step fail.
    """

    def __init__(self, http: httpx.AsyncClient, webhook_url: str) -> None:
        self._http = http
        self.webhook_url = webhook_url

    async def send(self, message: SlackMessage) -> None:
        logger.info("Posting message to Slack webhook: %s", message.text)
        response = await self._http.post(self.webhook_url, json=message.model_dump(mode="json"))
        response.raise_for_status()
        logger.info("Slack webhook accepted message (HTTP %d)", response.status_code)
