"""Tests for the FastAPI routes.

Covers:
- GET /health: liveness check
- GET /api/ask: question as query parameter
- POST /ask: question as JSON body
- GET /api/test-data: raw sample passthrough and store failure mapping
"""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from lpi_agent import agent, store
from lpi_agent.main import app

ROWS = [
    {"country": "Singapore", "region": "Asia", "lpi_score": "4.3"},
    {"country": "Viet Nam", "region": "Asia", "lpi_score": "three point two seven"},
    {"country": "VIETNAM", "region": "Asia", "lpi_score": "3.1"},
]


@pytest.fixture()
def client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    """TestClient with the record store serving ROWS and no model loading."""
    monkeypatch.setattr(store, "fetch_rows", lambda path, client=None: list(ROWS))
    monkeypatch.setattr(agent, "translate_question", lambda q: "not applicable")
    with TestClient(app) as test_client:
        yield test_client


def test_health(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_ask_query_parameter(client: TestClient):
    response = client.get("/api/ask", params={"question": "top 5 countries"})

    assert response.status_code == 200
    body = response.json()
    assert body["type"] == "rows"
    assert body["rows"] == [
        {"country": "Singapore", "region": "Asia", "lpi_score": 4.3},
        {"country": "Viet Nam", "region": "Asia", "lpi_score": 3.27},
    ]


def test_ask_requires_question(client: TestClient):
    assert client.get("/api/ask").status_code == 422


def test_ask_post_body(client: TestClient):
    response = client.post("/ask", json={"question": "average by region"})

    assert response.status_code == 200
    body = response.json()
    assert body["type"] == "averages"
    assert body["averages"]["ASIA"] == pytest.approx((4.3 + 3.27 + 3.1) / 3)


def test_ask_unrelated_question(client: TestClient):
    response = client.post("/ask", json={"question": "tell me a joke"})

    assert response.status_code == 200
    assert response.json()["type"] == "text"


def test_test_data_returns_raw_rows(client: TestClient):
    response = client.get("/api/test-data")

    assert response.status_code == 200
    assert response.json() == ROWS


def test_test_data_store_failure(client: TestClient, monkeypatch: pytest.MonkeyPatch):
    def fail(path, client=None):
        raise store.RecordStoreError("Record store request failed")

    monkeypatch.setattr(store, "fetch_rows", fail)

    response = client.get("/api/test-data")

    assert response.status_code == 502
    assert response.json() == {"detail": "Record store request failed"}


def test_cors_allows_any_origin(client: TestClient):
    response = client.get("/health", headers={"Origin": "http://frontend.test"})
    assert response.headers["access-control-allow-origin"] == "*"
