"""
Builders for the Slack completion message.

Pure functions with no I/O, so they can run anywhere (activity, tests,
or inside a workflow if ever needed).
"""

from background_notify.domain.models import Block, PlainText, SlackMessage
from background_notify.domain.timing import format_seconds


def completion_header(environment: str) -> str:
    return f"Request executed successfully ({environment})"


def elapsed_line(seconds: float) -> str:
    return f"{format_seconds(seconds)} seconds after start"


def build_completion_message(environment: str, seconds: float) -> SlackMessage:
    """Header block announcing success, section block with elapsed seconds.

    The header text doubles as the top-level `text`, which Slack shows in
    notifications and clients that cannot render blocks.
    """
    header = completion_header(environment)
    return SlackMessage(
        text=header,
        blocks=[
            Block(type="header", text=PlainText(text=header)),
            Block(type="section", text=PlainText(text=elapsed_line(seconds))),
        ],
    )
