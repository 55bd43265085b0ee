import json

import pytest
from pydantic import ValidationError

from background_notify.domain.models import Acknowledgment, ErrorBody, ExecutionRequest, HttpResponse


def test_execution_request_uses_camel_case_on_the_wire() -> None:
    request = ExecutionRequest(start_date=1000)

    assert request.model_dump() == {"startDate": 1000}
    assert json.loads(request.model_dump_json()) == {"startDate": 1000}


def test_execution_request_accepts_wire_name() -> None:
    assert ExecutionRequest.model_validate({"startDate": 1000}).start_date == 1000


def test_execution_request_rejects_negative_start_date() -> None:
    with pytest.raises(ValidationError):
        ExecutionRequest(start_date=-1)


def test_acknowledgment_body() -> None:
    ack = Acknowledgment(timestamp=1000, request_id="req-1", environment="prod")

    assert json.loads(ack.model_dump_json()) == {
        "message": "Processing started",
        "timestamp": 1000,
        "requestId": "req-1",
        "environment": "prod",
    }


def test_error_body() -> None:
    assert json.loads(ErrorBody().model_dump_json()) == {"error": "Failed to start processing"}


def test_http_response_dumps_status_code_alias() -> None:
    response = HttpResponse(status_code=200, body="{}")
    assert response.model_dump() == {"statusCode": 200, "headers": {}, "body": "{}"}
