"""
Initiator: accepts a trigger, starts the background execution and answers at once.

The initiator never waits for the background work. It stamps the current
time, hands `{startDate}` to Temporal, and returns an HTTP-style response
whose shape matches what an API gateway expects (`statusCode`, `headers`,
`body` as a JSON string). Front doors (the FastAPI app and the CLI) only
translate that response; all decisions are made here.
"""

import logging
import uuid

from background_notify.domain.models import Acknowledgment, ErrorBody, ExecutionRequest, HttpResponse
from background_notify.domain.timing import Clock, now_ms
from background_notify.errors import OrchestratorStartFailure
from background_notify.services.orchestrator import ExecutionStarter

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}

CORS_HEADERS = {
    **JSON_HEADERS,
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET",
    "Access-Control-Allow-Headers": "Content-Type",
}


def new_execution_id() -> str:
    # Unique per trigger; the request id is for correlation only, so a
    # repeated X-Request-ID must not collide with a still-running execution.
    return f"background-{uuid.uuid4()}"


async def initiate(
    starter: ExecutionStarter,
    *,
    request_id: str,
    environment: str,
    clock: Clock = now_ms,
) -> HttpResponse:
    """Start one background execution and build the caller's response.

    Returns 200 with an Acknowledgment when Temporal accepted the execution,
    500 with a generic ErrorBody otherwise. The underlying error is logged,
    never echoed to the caller, and never retried here.
    """
    start_date = clock()
    request = ExecutionRequest(start_date=start_date)

    execution_id = new_execution_id()
    logger.info("Request %s starts execution %s", request_id, execution_id)
    try:
        await starter.start(request, execution_id=execution_id)
    except OrchestratorStartFailure:
        logger.exception("Failed to start background execution for request %s", request_id)
        return HttpResponse(status_code=500, headers=dict(JSON_HEADERS), body=ErrorBody().model_dump_json())

    ack = Acknowledgment(timestamp=start_date, request_id=request_id, environment=environment)
    return HttpResponse(status_code=200, headers=dict(CORS_HEADERS), body=ack.model_dump_json())
