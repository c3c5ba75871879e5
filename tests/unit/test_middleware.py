"""
Tests for request logging and error rendering
"""
import json
import logging
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI, HTTPException, Request
from fastapi.testclient import TestClient

from src.academics.errors import ConflictError, NotFoundError
from src.middleware.error_handler import error_handler, install_error_handlers
from src.middleware.request_logging import CORRELATION_HEADER, RequestLoggingMiddleware


@pytest.fixture
def app():
    """Minimal app with the error handlers and logging middleware installed"""
    app = FastAPI()
    install_error_handlers(app)
    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/conflict")
    async def conflict():
        raise ConflictError("Already enrolled")

    @app.get("/teapot")
    async def teapot():
        raise HTTPException(status_code=418, detail="I'm a teapot")

    @app.get("/ok")
    async def ok():
        return {"ok": True}

    return app


@pytest.fixture
def client(app):
    return TestClient(app)


class TestErrorHandler:
    def test_engine_error(self, client):
        response = client.get("/conflict")
        assert response.status_code == 400
        assert response.json() == {"error": "Already enrolled"}

    def test_unmatched_route(self, client):
        response = client.get("/missing")
        assert response.status_code == 404
        assert response.json() == {"error": "Endpoint not found"}

    def test_other_http_errors_keep_status(self, client):
        response = client.get("/teapot")
        assert response.status_code == 418
        assert response.json() == {"error": "I'm a teapot"}

    def test_wrong_method_is_unmatched_route(self, client):
        response = client.post("/ok")
        assert response.status_code == 404
        assert response.json() == {"error": "Endpoint not found"}

    def test_not_found_error_status(self):
        response = error_handler(MagicMock(spec=Request), NotFoundError("Task not found"))
        assert response.status_code == 404
        assert json.loads(response.body.decode()) == {"error": "Task not found"}

    def test_error_handler_with_status_attr(self):
        class CustomException(Exception):
            status = 418

        response = error_handler(MagicMock(), CustomException("Teapot"))
        assert response.status_code == 418

    def test_unexpected_error_hides_details(self):
        response = error_handler(MagicMock(), RuntimeError("database password is hunter2"))
        assert response.status_code == 500
        assert json.loads(response.body.decode()) == {"error": "Something went wrong"}


class TestRequestLoggingMiddleware:
    def test_generates_correlation_id(self, client):
        response = client.get("/ok")
        assert response.status_code == 200
        assert response.headers[CORRELATION_HEADER]

    def test_echoes_incoming_correlation_id(self, client):
        response = client.get("/ok", headers={CORRELATION_HEADER: "abc-123"})
        assert response.headers[CORRELATION_HEADER] == "abc-123"

    def test_logs_method_path_and_status(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="src.middleware.request_logging"):
            client.get("/conflict")
        messages = [r.getMessage() for r in caplog.records if r.name == "src.middleware.request_logging"]
        assert any("GET /conflict -> 400" in m for m in messages)

    def test_reraises_downstream_exception(self, app):
        middleware = RequestLoggingMiddleware(app)

        async def failing_call_next(request):
            raise Exception("Request processing error")

        request = MagicMock(spec=Request)
        request.url.path = "/test"
        request.method = "GET"
        request.headers = {}
        request.state = MagicMock()

        with pytest.raises(Exception):
            import asyncio
            asyncio.run(middleware.dispatch(request, failing_call_next))
