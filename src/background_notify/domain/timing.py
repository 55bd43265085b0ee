"""
Clock, delay and elapsed-time helpers shared by the initiator and the worker.

Both sides read the wall clock in epoch milliseconds. They may run on
different hosts, so the reported elapsed time includes any clock skew
between them; nothing here tries to correct for it.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable

# Fixed pause the worker takes before reporting completion.
DEFAULT_DELAY_MS = 4000

# Start-to-close limit for the worker activity: delay plus webhook call must fit.
ACTIVITY_TIMEOUT_SECONDS = 30

Clock = Callable[[], int]
Sleeper = Callable[[int], Awaitable[None]]


def now_ms() -> int:
    """Current wall-clock time as integer epoch milliseconds."""
    return time.time_ns() // 1_000_000


async def delay(ms: int) -> None:
    """Suspend the current task for `ms` milliseconds."""
    await asyncio.sleep(ms / 1000)


def elapsed_seconds(start_ms: int, end_ms: int) -> float:
    return (end_ms - start_ms) / 1000


def format_seconds(seconds: float) -> str:
    """Render seconds at full millisecond precision.

    Integral values drop the trailing ``.0`` so 4000 ms reads "4" rather
    than "4.0"; everything else uses the shortest float repr ("4.012").
    """
    if seconds.is_integer():
        return str(int(seconds))
    return repr(seconds)
