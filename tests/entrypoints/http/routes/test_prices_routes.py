"""
Test suite for /v1/prices.

Covers:
- Matrix upsert (OkDTO response, idempotency, skipped cells, bad keys)
- Joined listing
- Single price update / delete
"""

from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from vehicle_catalog.adapters.in_memory_store_backend import InMemoryStoreBackend


def delete(client: TestClient, url: str, body: dict) -> httpx.Response:
    """DELETE with a JSON body (httpx's .delete() takes no body)."""
    return client.request("DELETE", url, json=body)


@pytest.fixture
def catalog(client: TestClient) -> None:
    """Brand 1, model 1 (Corolla), type 1, subtypes 1-2."""
    assert client.post("/v1/brands", json={"name": "Toyota"}).status_code == 200
    corolla = {"name": "Corolla", "year": 2022, "version": "XEi", "brand_id": 1}
    assert client.post("/v1/models", json=corolla).status_code == 200
    assert client.post("/v1/types", json={"name": "Sedán"}).status_code == 200
    assert client.post("/v1/subtypes", json={"name": "Base", "type_id": 1}).status_code == 200
    assert client.post("/v1/subtypes", json={"name": "Full", "type_id": 1}).status_code == 200


def test_upsert_answers_ok(client: TestClient, backend: InMemoryStoreBackend) -> None:
    response = client.post("/v1/prices", json={"1": {"2": 100}})

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    snapshot = backend.snapshot("prices")
    assert snapshot is not None
    assert snapshot.last_id == 1
    assert snapshot.records[0]["price"] == 100


def test_upsert_twice_updates_in_place(client: TestClient, backend: InMemoryStoreBackend) -> None:
    assert client.post("/v1/prices", json={"1": {"2": 100, "3": 200}}).status_code == 200
    assert client.post("/v1/prices", json={"1": {"2": 150}}).status_code == 200

    snapshot = backend.snapshot("prices")
    assert snapshot is not None
    assert snapshot.last_id == 2
    assert [(row["id"], row["price"]) for row in snapshot.records] == [(1, 150), (2, 200)]


def test_upsert_skips_empty_cells(client: TestClient, backend: InMemoryStoreBackend) -> None:
    assert client.post("/v1/prices", json={"1": {"1": None, "2": 0, "3": "", "4": "99.5"}}).status_code == 200

    snapshot = backend.snapshot("prices")
    assert snapshot is not None
    assert [(row["subtype_id"], row["price"]) for row in snapshot.records] == [(4, 99.5)]


def test_upsert_rejects_non_numeric_model_key(client: TestClient) -> None:
    response = client.post("/v1/prices", json={"abc": {"1": 100}})

    assert response.status_code == 400
    assert response.json()["errors"][0]["code"] == "INVALID_ID"


def test_upsert_rejects_non_object_body(client: TestClient) -> None:
    response = client.post("/v1/prices", json=[1, 2])

    assert response.status_code == 400
    assert response.json()["message"] == "Datos inválidos"


def test_list_prices_joined(catalog: None, client: TestClient) -> None:
    assert client.post("/v1/prices", json={"1": {"1": 85000, "2": 95000.5}}).status_code == 200

    rows = client.get("/v1/prices").json()

    assert len(rows) == 2
    first, second = rows
    assert first["model_name"] == "Corolla"
    assert first["year"] == 2022
    assert first["version"] == "XEi"
    assert first["brand_name"] == "Toyota"
    assert first["subtype_name"] == "Base"
    assert first["type_name"] == "Sedán"
    assert first["price"] == 85000
    assert second["price"] == 95000.5


def test_list_prices_drops_rows_of_inactive_model(catalog: None, client: TestClient) -> None:
    assert client.post("/v1/prices", json={"1": {"1": 85000}}).status_code == 200
    client.put("/v1/models", json={"id": 1, "is_active": False})

    assert client.get("/v1/prices").json() == []


def test_list_prices_filters(catalog: None, client: TestClient) -> None:
    assert client.post("/v1/prices", json={"1": {"1": 85000, "2": 95000}}).status_code == 200

    rows = client.get("/v1/prices", params={"subtype_id": "2"}).json()

    assert [row["id"] for row in rows] == [2]


def test_update_price(client: TestClient) -> None:
    assert client.post("/v1/prices", json={"1": {"2": 100}}).status_code == 200

    response = client.put("/v1/prices", json={"id": 1, "price": "120.75"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["price"] == 120.75
    assert (data["model_id"], data["subtype_id"]) == (1, 2)


def test_update_price_rejects_zero(client: TestClient) -> None:
    assert client.post("/v1/prices", json={"1": {"2": 100}}).status_code == 200

    response = client.put("/v1/prices", json={"id": 1, "price": 0})

    assert response.status_code == 400
    assert response.json()["message"] == "Precio inválido"


def test_prices_too_small_for_json_are_rejected(client: TestClient, backend: InMemoryStoreBackend) -> None:
    assert client.post("/v1/prices", json={"1": {"2": 100, "3": "1e-400"}}).status_code == 200

    response = client.put("/v1/prices", json={"id": 1, "price": "1e-400"})

    assert response.status_code == 400
    assert response.json()["message"] == "Precio inválido"
    snapshot = backend.snapshot("prices")
    assert snapshot is not None
    assert [(row["subtype_id"], row["price"]) for row in snapshot.records] == [(2, 100)]


def test_update_price_rejects_taken_pair(client: TestClient) -> None:
    assert client.post("/v1/prices", json={"1": {"2": 100, "3": 200}}).status_code == 200

    response = client.put("/v1/prices", json={"id": 2, "subtype_id": 2})

    assert response.status_code == 400
    assert response.json()["message"] == "Ya existe un precio para ese modelo y subtipo"


def test_delete_price(client: TestClient) -> None:
    assert client.post("/v1/prices", json={"1": {"2": 100}}).status_code == 200

    response = delete(client, "/v1/prices", {"id": 1})

    assert response.status_code == 200
    assert response.json()["data"]["price"] == 100
    assert delete(client, "/v1/prices", {"id": 1}).json()["message"] == "Precio no encontrado"
