"""Route tests run the real app against an in-memory store backend."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from vehicle_catalog.adapters.in_memory_store_backend import InMemoryStoreBackend
from vehicle_catalog.entrypoints.http.app import build_app
from vehicle_catalog.entrypoints.http.dependencies import get_store_backend


@pytest.fixture
def backend() -> InMemoryStoreBackend:
    return InMemoryStoreBackend()


@pytest.fixture
def app(backend: InMemoryStoreBackend) -> FastAPI:
    test_app = build_app()
    test_app.dependency_overrides[get_store_backend] = lambda: backend
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)

