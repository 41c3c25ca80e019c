"""
Tests for the error handling and request logging middleware.
"""
from fastapi.testclient import TestClient

from answer_gateway.app import create_app
from answer_gateway.config.settings import Settings
from answer_gateway.middleware.request_logging import REDACTED, redact


def _app_with_failing_route(settings: Settings):
    app = create_app(settings)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    return app


def test_unhandled_error_is_detailed_outside_production():
    client = TestClient(_app_with_failing_route(Settings(environment="local")))

    response = client.get("/boom")

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Internal Server Error"
    assert body["message"] == "RuntimeError: kaboom"
    assert "traceback" in body


def test_unhandled_error_is_hidden_in_production():
    client = TestClient(_app_with_failing_route(Settings(environment="production")))

    response = client.get("/boom")

    assert response.status_code == 500
    body = response.json()
    assert "kaboom" not in body["message"]
    assert "traceback" not in body


def test_redact_masks_sensitive_fields():
    body = {"api_key": "sk-1", "API_KEY": "sk-2", "model": "gpt-3.5-turbo"}

    assert redact(body) == {"api_key": REDACTED, "API_KEY": REDACTED, "model": "gpt-3.5-turbo"}
    assert redact(["not", "a", "dict"]) == ["not", "a", "dict"]


def test_ping_is_not_timed():
    client = TestClient(create_app(Settings()))

    response = client.get("/ping")

    assert "X-Process-Time" not in response.headers


def test_request_logging_can_be_disabled():
    client = TestClient(create_app(Settings(enable_request_logging=False)))

    response = client.post("/answer", json={
        "api_key": "k", "model": "m", "max_tokens": 1, "temperature": 0, "messages": [],
    })

    assert response.status_code == 200
    assert "X-Process-Time" not in response.headers
