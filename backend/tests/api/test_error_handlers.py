"""Error Handlers - every failure kind renders as the standard envelope.

Design Decisions:
    - Throwaway app per test: routes that raise on purpose stay out of the real app
    - raise_app_exceptions=False: Starlette re-raises after the catch-all responds
"""

import logging

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from customer_api.api.error_handlers import register_error_handlers
from customer_api.core.errors import CustomerSaveFailedError
from customer_api.schemas.customer import CustomerCreate


@pytest.fixture
async def error_client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/save-failed")
    async def save_failed():
        raise CustomerSaveFailedError("disk full")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret connection string")

    @app.post("/echo")
    async def echo(body: CustomerCreate):
        return body

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


async def test_domain_error_uses_its_status_and_message(error_client):
    res = await error_client.get("/save-failed")

    assert res.status_code == 500
    assert res.json() == {
        "message": "Failed to save customer: disk full",
        "success": False,
        "data": None,
    }


async def test_domain_error_logged_with_code_and_category(error_client, caplog):
    with caplog.at_level(logging.WARNING):
        await error_client.get("/save-failed")

    record = next(r for r in caplog.records if r.getMessage().startswith("CustomerApiError"))
    assert record.levelno == logging.CRITICAL
    assert record.error_code == "CUSTOMER_SAVE_FAILED"
    assert record.error_category == "database"


async def test_unexpected_error_does_not_leak_details(error_client):
    res = await error_client.get("/boom")

    assert res.status_code == 500
    assert res.json() == {
        "message": "An unexpected error occurred", "success": False, "data": None,
    }
    assert "secret" not in res.text


async def test_validation_error_lists_fields(error_client):
    res = await error_client.post(
        "/echo", json={"name": ["not", "a", "string"], "salary": "x"},
    )

    assert res.status_code == 400
    message = res.json()["message"]
    assert message.startswith("Invalid request data: ")
    assert "name:" in message
    assert "salary:" in message


async def test_malformed_json_message_has_no_offset_as_field(error_client):
    res = await error_client.post(
        "/echo",
        content='{"name": "Jane",',
        headers={"Content-Type": "application/json"},
    )

    assert res.status_code == 400
    assert res.json()["message"] == "Invalid request data: JSON decode error"
