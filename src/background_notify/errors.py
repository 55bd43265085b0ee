"""
Exceptions raised by the initiator and the worker.

Each wraps the underlying error as its ``__cause__`` (``raise ... from exc``)
so logs and Temporal failure details keep the original traceback.
"""


class BackgroundNotifyError(Exception):
    """Base class for errors raised by this package."""


class OrchestratorStartFailure(BackgroundNotifyError):
    """Temporal refused (or could not be reached) to start an execution.

    Caught by the initiator and turned into a 500 response. Never retried
    locally.
    """


class WorkerProcessingFailure(BackgroundNotifyError):
    """The delay or the webhook delivery failed inside the worker activity.

    Raised out of the activity so Temporal records the step as failed and
    applies whatever retry policy the execution was started with.
    """
