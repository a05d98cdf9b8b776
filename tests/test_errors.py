"""
Tests for the central error handlers
"""

import logging

from fastapi.testclient import TestClient

from database import get_db
from main import app


def test_unknown_endpoint(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"error": "unknown endpoint"}


def test_method_not_allowed_is_json(client):
    response = client.patch("/api/blogs")

    assert response.status_code == 405
    assert "error" in response.json()


def test_malformed_json_body_is_bad_request(client):
    response = client.post(
        "/api/login", content="{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400


def test_unexpected_error_hides_details(caplog):
    def broken_db():
        raise RuntimeError("database exploded")
        yield

    app.dependency_overrides[get_db] = broken_db
    caplog.set_level(logging.INFO, logger="blog_api.requests")
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/api/blogs")

    assert response.status_code == 500
    assert response.json() == {"error": "internal server error"}
    assert any("GET /api/blogs -> 500" in record.getMessage() for record in caplog.records)
