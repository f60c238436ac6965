"""Tests for application wiring: startup logging, CORS and OpenAPI docs."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.app_factory import list_routes
from app.core.config import settings


def test_list_routes_names_every_endpoint(app: FastAPI) -> None:
    routes = list_routes(app)

    assert routes == [
        "GET  /health",
        "POST /api/audit",
        "GET  /api/audit/{audit_id}",
        "POST /api/audityzer/scan",
        "POST /api/auditorsec/analyze",
    ]


def test_startup_logs_port_and_routes(app: FastAPI) -> None:
    records: list[logging.LogRecord] = []

    class _Collector(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            records.append(record)

    collector = _Collector(level=logging.INFO)
    factory_logger = logging.getLogger("app.core.app_factory")
    previous_level = factory_logger.level
    factory_logger.setLevel(logging.INFO)
    factory_logger.addHandler(collector)
    try:
        with TestClient(app):
            pass
    finally:
        factory_logger.removeHandler(collector)
        factory_logger.setLevel(previous_level)

    started = [r for r in records if r.getMessage() == "server.started"]
    assert len(started) == 1
    assert started[0].port == settings.server.port
    assert "POST /api/audit" in started[0].routes
    assert any(r.getMessage() == "server.stopped" for r in records)


def test_shutdown_clears_rate_limiter(app: FastAPI) -> None:
    with TestClient(app) as client:
        client.get("/api/audit/a")
        assert app.state.rate_limiter.tracked_keys() == 1

    assert app.state.rate_limiter.tracked_keys() == 0


def test_cors_allows_any_origin_by_default(client: TestClient) -> None:
    resp = client.get("/health", headers={"Origin": "https://example.org"})

    assert resp.headers.get("access-control-allow-origin") == "*"


def test_openapi_documents_throttling(client: TestClient) -> None:
    schema = client.get("/openapi.json").json()

    assert "429" in schema["paths"]["/api/audit"]["post"]["responses"]
    assert "429" not in schema["paths"]["/health"]["get"]["responses"]
    assert {t["name"] for t in schema["tags"]} >= {"Audit", "Integrations", "Health"}
