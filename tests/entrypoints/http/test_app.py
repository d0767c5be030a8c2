"""
Unit tests for FastAPI application setup and configuration.

Verifies:
- build_app() creates a properly configured FastAPI instance
- Every collection router is mounted under /v1, health at the root
- OpenAPI schema generation and documentation endpoints
"""

from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from vehicle_catalog.entrypoints.http.app import build_app

COLLECTIONS = ("brands", "types", "models", "subtypes", "prices", "clients")


def test_build_app_returns_fastapi_instance() -> None:
    assert isinstance(build_app(), FastAPI)


def test_build_app_creates_new_instance_each_call() -> None:
    assert build_app() is not build_app()


def test_app_metadata() -> None:
    app = build_app()

    assert app.title == "Vehicle Catalog API"
    assert app.version == "0.1.0"
    assert "vehicle catalog" in app.description
    assert app.docs_url == "/docs"
    assert app.redoc_url == "/redoc"
    assert app.openapi_url == "/openapi.json"


def test_log_level_comes_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATALOG_LOG_LEVEL", "debug")

    build_app()

    assert logging.getLogger("vehicle_catalog").level == logging.DEBUG
    logging.getLogger("vehicle_catalog").setLevel(logging.INFO)


def test_documentation_endpoints_are_accessible() -> None:
    client = TestClient(build_app())

    assert client.get("/docs").status_code == 200
    assert client.get("/redoc").status_code == 200
    response = client.get("/openapi.json")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"


def test_health_is_served_at_root() -> None:
    response = TestClient(build_app()).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.parametrize("collection", COLLECTIONS)
def test_collection_routes_use_v1_prefix(collection: str) -> None:
    """Checked via the OpenAPI schema, which does not trigger dependencies."""
    paths = build_app().openapi()["paths"]

    assert f"/{collection}" not in paths
    assert set(paths[f"/v1/{collection}"]) == {"get", "post", "put", "delete"}


def test_openapi_documents_failure_envelope() -> None:
    schema = build_app().openapi()

    assert "ErrorResponse" in schema["components"]["schemas"]
    responses = schema["paths"]["/v1/brands"]["post"]["responses"]
    assert {"400", "404", "500"} <= set(responses)
