"""
HTTP front door for the initiator.

`GET /` starts one background execution and returns the initiator's
response unchanged (status, CORS headers, JSON body). The Temporal client is
connected once in the application lifespan and kept on `app.state`; tests
pass a ready-made ExecutionStarter instead.

Run with:
    python -m background_notify.api --port 8000
"""

import argparse
import logging
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, Response

from background_notify.config import Settings, get_settings
from background_notify.domain.timing import Clock, now_ms
from background_notify.initiator import initiate
from background_notify.services.orchestrator import ExecutionStarter, connect_client

REQUEST_ID_HEADER = "X-Request-ID"


def create_app(
    settings: Settings | None = None,
    starter: ExecutionStarter | None = None,
    clock: Clock = now_ms,
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if app.state.starter is None:
            client = await connect_client(settings, lazy=True)
            app.state.starter = ExecutionStarter.from_settings(client, settings)
        yield

    app = FastAPI(title="Background Notify", lifespan=lifespan)
    app.state.settings = settings
    app.state.starter = starter

    @app.get("/")
    async def trigger(request: Request) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        result = await initiate(
            request.app.state.starter,
            request_id=request_id,
            environment=settings.environment,
            clock=clock,
        )
        return Response(content=result.body, status_code=result.status_code, headers=result.headers)

    @app.get("/healthz")
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    return app


def main() -> None:
    parser = argparse.ArgumentParser(description="Serve the background notification trigger over HTTP")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    uvicorn.run(create_app(), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
