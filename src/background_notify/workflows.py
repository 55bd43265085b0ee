"""
Temporal workflow: BackgroundNotificationWorkflow.

A Temporal **workflow** is a durable, fault-tolerant function that orchestrates
the execution of activities. This one has a single step: run the
`notify_completion` activity with the execution's `{startDate}` input.

Key constraints inside a workflow:
  - Must be **deterministic**: no I/O, no randomness, no system clock.
    The delay and the clock read both live in the activity for that reason.
  - Use `workflow.logger` instead of the stdlib `logging` module.
"""

from datetime import timedelta

from temporalio import workflow
from temporalio.common import RetryPolicy
from temporalio.exceptions import ActivityError

# ── Sandbox-safe imports ─────────────────────────────────────────────
# Temporal runs workflows inside a restricted sandbox that intercepts imports.
# Pydantic, httpx (pulled in by the activity module) and our own modules are
# passed through: they are only used for type references and data modelling
# here, and nothing side-effecting happens at import time.
with workflow.unsafe.imports_passed_through():
    from background_notify.activities import NotificationActivities
    from background_notify.domain.models import ExecutionRequest, NotificationResult
    from background_notify.domain.timing import ACTIVITY_TIMEOUT_SECONDS


# Settings validation keeps the delay plus the webhook timeout below this.
ACTIVITY_START_TO_CLOSE = timedelta(seconds=ACTIVITY_TIMEOUT_SECONDS)

# The activity itself is attempted once per workflow run. A failure fails the
# workflow, and the workflow RetryPolicy chosen by the initiator decides
# whether Temporal tries the whole execution again.
ACTIVITY_RETRY_POLICY = RetryPolicy(maximum_attempts=1)


@workflow.defn
class BackgroundNotificationWorkflow:
    """Runs the worker step for one triggered request."""

    @workflow.run
    async def run(self, request: ExecutionRequest) -> NotificationResult:
        workflow.logger.info("Background execution started (startDate=%d)", request.start_date)
        # execute_activity_method dispatches to the bound method registered on
        # the worker; the class reference here is only used for its name and
        # signature.
        try:
            result = await workflow.execute_activity_method(
                NotificationActivities.notify_completion,
                request,
                start_to_close_timeout=ACTIVITY_START_TO_CLOSE,
                retry_policy=ACTIVITY_RETRY_POLICY,
            )
        except ActivityError:
            # Re-raised so the execution is marked failed on the server.
            workflow.logger.exception("Background execution failed (startDate=%d)", request.start_date)
            raise
        workflow.logger.info("Background execution completed (startDate=%d)", request.start_date)
        return result
