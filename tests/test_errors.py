import asyncio
import json

import fastapi
from fastapi.exceptions import RequestValidationError
from fastapi.testclient import TestClient
from starlette.requests import Request

from employee_api.app import (BAD_REQUEST_DETAIL, INTERNAL_ERROR_DETAIL,
                              global_exception_handler,
                              validation_exception_handler)


def _run(coro):
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def _request(path: str = "/api/v1/greeting", method: str = "GET") -> Request:
    return Request({
        "type": "http",
        "method": method,
        "path": path,
        "headers": [],
        "query_string": b"",
    })


def test_validation_errors_become_generic_400():
    exc = RequestValidationError([
        {"loc": ("query", "limit"), "msg": "Field required", "type": "missing"},
    ])

    response = _run(validation_exception_handler(_request(), exc))

    assert response.status_code == 400
    assert json.loads(response.body) == {"detail": BAD_REQUEST_DETAIL}


def test_unhandled_errors_hide_internals(caplog):
    response = _run(global_exception_handler(_request(), RuntimeError("db password leaked")))

    assert response.status_code == 500
    body = json.loads(response.body)
    assert body == {"detail": INTERNAL_ERROR_DETAIL, "error_type": "internal_error"}
    assert "db password leaked" not in response.body.decode()
    assert "RuntimeError" in caplog.text


def test_handlers_apply_to_routes():
    api = fastapi.FastAPI()
    api.add_exception_handler(RequestValidationError, validation_exception_handler)
    api.add_exception_handler(Exception, global_exception_handler)

    @api.get("/boom")
    def boom():
        raise RuntimeError("boom")

    @api.get("/items")
    def items(limit: int):
        return {"limit": limit}

    with TestClient(api, raise_server_exceptions=False) as test_client:
        failed = test_client.get("/boom")
        invalid = test_client.get("/items", params={"limit": "many"})

    assert failed.status_code == 500
    assert failed.json()["error_type"] == "internal_error"
    assert invalid.status_code == 400
    assert invalid.json() == {"detail": BAD_REQUEST_DETAIL}
