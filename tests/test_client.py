import argparse
import json
from unittest.mock import AsyncMock, patch

import pytest

from background_notify import client as cli


@pytest.fixture
def patched(settings, temporal_client):
    with (
        patch.object(cli, "get_settings", return_value=settings),
        patch.object(cli, "connect_client", AsyncMock(return_value=temporal_client)) as connect,
    ):
        yield connect


@pytest.mark.asyncio
async def test_prints_acknowledgment(patched, capsys) -> None:
    code = await cli.run_client(argparse.Namespace(request_id="deploy-42"))

    assert code == 0
    response = json.loads(capsys.readouterr().out)
    assert response["statusCode"] == 200
    assert json.loads(response["body"])["requestId"] == "deploy-42"
    patched.assert_awaited_once()
    assert patched.await_args.kwargs == {"lazy": True}


@pytest.mark.asyncio
async def test_unreachable_temporal_prints_500(patched, temporal_client, capsys) -> None:
    temporal_client.start_workflow.side_effect = RuntimeError("connection refused")

    code = await cli.run_client(argparse.Namespace(request_id="deploy-42"))

    assert code == 1
    response = json.loads(capsys.readouterr().out)
    assert response["statusCode"] == 500
    assert json.loads(response["body"]) == {"error": "Failed to start processing"}
