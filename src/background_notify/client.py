"""
CLI trigger: runs the initiator once and prints its response.

Connects to Temporal, starts one background execution, and prints the same
HTTP-style response the HTTP front door would return. Exits non-zero when
the execution could not be started.

Usage:
    python -m background_notify.client
    python -m background_notify.client --request-id deploy-42
"""

import argparse
import asyncio
import logging
import sys
import uuid

from background_notify.config import get_settings
from background_notify.initiator import initiate
from background_notify.services.orchestrator import ExecutionStarter, connect_client


async def run_client(args: argparse.Namespace) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    logger = logging.getLogger(__name__)
    settings = get_settings()

    request_id = args.request_id or str(uuid.uuid4())
    logger.info("Triggering background execution for request %s", request_id)

    client = await connect_client(settings, lazy=True)
    response = await initiate(
        ExecutionStarter.from_settings(client, settings),
        request_id=request_id,
        environment=settings.environment,
    )
    print(response.model_dump_json(indent=2))
    return 0 if response.status_code == 200 else 1


def main() -> None:
    parser = argparse.ArgumentParser(description="Start a background notification execution")
    parser.add_argument("--request-id", default=None, help="Correlation id (default: random UUID)")
    sys.exit(asyncio.run(run_client(parser.parse_args())))


if __name__ == "__main__":
    main()
