"""
Domain models for the background notification workflow.

All models use Pydantic v2 BaseModel for validation and serialization.
Temporal transmits workflow/activity inputs and outputs as JSON payloads, and
Pydantic models serialize cleanly via the pydantic_data_converter configured
on both the client and the worker.

Wire names are camelCase (`startDate`, `statusCode`, `requestId`) because
they are read by callers outside Python. Python code uses snake_case field
names; `serialize_by_alias` makes every dump emit the wire name, and
`populate_by_name` lets either spelling be used on input.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

_WIRE_CONFIG = ConfigDict(populate_by_name=True, serialize_by_alias=True)


# ── Workflow input / output ──────────────────────────────────────────


class ExecutionRequest(BaseModel):
    """Input to the background workflow and its notification activity.

    Created by the initiator, passed verbatim through Temporal, consumed
    once by the worker activity.
    """

    model_config = _WIRE_CONFIG

    start_date: int = Field(..., alias="startDate", ge=0)  # Epoch milliseconds


class NotificationResult(BaseModel):
    """Returned by the worker activity (and the workflow) on success."""

    success: bool = True


# ── Initiator response ───────────────────────────────────────────────


class Acknowledgment(BaseModel):
    """Body of the 200 response returned by the initiator."""

    model_config = _WIRE_CONFIG

    message: str = "Processing started"
    timestamp: int                                # Equal to ExecutionRequest.start_date
    request_id: str = Field(..., alias="requestId")
    environment: str


class ErrorBody(BaseModel):
    """Body of the 500 response returned when no execution could be started."""

    error: str = "Failed to start processing"


class HttpResponse(BaseModel):
    """HTTP-style response produced by the initiator.

    `body` is already JSON-encoded so that front doors (FastAPI, the CLI)
    can pass it through byte-for-byte.
    """

    model_config = _WIRE_CONFIG

    status_code: int = Field(..., alias="statusCode")
    headers: dict[str, str] = Field(default_factory=dict)
    body: str


# ── Slack message payload ────────────────────────────────────────────
# Subset of the Slack Block Kit schema needed for the completion message.


class PlainText(BaseModel):
    type: Literal["plain_text"] = "plain_text"
    text: str
    emoji: bool = True


class Block(BaseModel):
    type: Literal["header", "section"]
    text: PlainText


class SlackMessage(BaseModel):
    """Incoming-webhook payload: fallback `text` plus rich `blocks`."""

    text: str
    blocks: list[Block]
