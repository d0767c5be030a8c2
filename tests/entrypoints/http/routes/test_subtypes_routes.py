"""Test suite for /v1/subtypes."""

from __future__ import annotations

import httpx
from fastapi.testclient import TestClient


def delete(client: TestClient, url: str, body: dict) -> httpx.Response:
    """DELETE with a JSON body (httpx's .delete() takes no body)."""
    return client.request("DELETE", url, json=body)


def test_list_attaches_type_name(client: TestClient) -> None:
    client.post("/v1/types", json={"name": "SUV"})
    client.post("/v1/subtypes", json={"name": "SUV 5 puertas", "type_id": 1, "version": "Full"})
    client.post("/v1/subtypes", json={"name": "Furgón", "type_id": 9})

    rows = client.get("/v1/subtypes").json()

    assert [(row["name"], row["type_name"]) for row in rows] == [
        ("SUV 5 puertas", "SUV"),
        ("Furgón", None),
    ]
    assert rows[0]["year"] is None


def test_deleting_the_type_keeps_its_subtypes(client: TestClient) -> None:
    client.post("/v1/types", json={"name": "SUV"})
    client.post("/v1/subtypes", json={"name": "Base", "type_id": 1})

    delete(client, "/v1/types", {"id": 1})

    [row] = client.get("/v1/subtypes").json()
    assert row["name"] == "Base"
    assert row["type_name"] is None


def test_create_subtype_requires_name_and_type(client: TestClient) -> None:
    response = client.post("/v1/subtypes", json={"year": 2023})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Nombre o tipo inválido"
    assert [error["field"] for error in body["errors"]] == ["name", "type_id"]


def test_update_year_and_clear_it(client: TestClient) -> None:
    client.post("/v1/subtypes", json={"name": "Base", "type_id": 1})

    with_year = client.put("/v1/subtypes", json={"id": 1, "year": 2024}).json()["data"]
    cleared = client.put("/v1/subtypes", json={"id": 1, "year": 0}).json()["data"]

    assert with_year["year"] == 2024
    assert cleared["year"] is None
    assert cleared["name"] == "Base"


def test_list_subtypes_filters(client: TestClient) -> None:
    client.post("/v1/subtypes", json={"name": "Base", "type_id": 1, "version": "MT"})
    client.post("/v1/subtypes", json={"name": "Full", "type_id": 2, "version": "AT"})
    client.put("/v1/subtypes", json={"id": 2, "is_active": False})

    def ids(params: dict) -> list[int]:
        return [row["id"] for row in client.get("/v1/subtypes", params=params).json()]

    assert ids({"type_id": "2"}) == [2]
    assert ids({"q": "base mt"}) == [1]
    assert ids({"active": "true"}) == [1]


def test_delete_subtype(client: TestClient) -> None:
    client.post("/v1/subtypes", json={"name": "Base", "type_id": 1})

    response = delete(client, "/v1/subtypes", {"id": 1})

    assert response.json()["data"]["name"] == "Base"
    assert delete(client, "/v1/subtypes", {"id": 1}).json()["message"] == "Subtipo no encontrado"
