"""Test suite for /v1/clients."""

from __future__ import annotations

from typing import Any

import httpx
from fastapi.testclient import TestClient


def delete(client: TestClient, url: str, body: dict) -> httpx.Response:
    """DELETE with a JSON body (httpx's .delete() takes no body)."""
    return client.request("DELETE", url, json=body)


def client_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "dni": "40123456",
        "placa": "abc-123",
        "vin": "9BWZZZ377VT004251",
        "kms": 42000,
        "celular": "987654321",
        "email": " Ana@Example.com ",
        "estado": True,
        "model_id": 3,
        "brand_id": 1,
    }
    payload.update(overrides)
    return payload


def test_register_client_normalizes_fields(client: TestClient) -> None:
    response = client.post("/v1/clients", json=client_payload())

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == 1
    assert data["placa"] == "ABC-123"
    assert data["email"] == "ana@example.com"
    assert data["estado"] is True


def test_numeric_dni_is_kept_as_text(client: TestClient) -> None:
    data = client.post("/v1/clients", json=client_payload(dni=40123456)).json()["data"]

    assert data["dni"] == "40123456"


def test_register_client_with_missing_fields(client: TestClient) -> None:
    response = client.post("/v1/clients", json={"dni": "1"})

    assert response.status_code == 400
    body = response.json()
    assert body["message"].startswith("Datos incompletos: ")
    assert {error["field"] for error in body["errors"]} == {
        "placa",
        "vin",
        "kms",
        "celular",
        "email",
        "model_id",
        "brand_id",
    }


def test_duplicates_report_every_field(client: TestClient) -> None:
    client.post("/v1/clients", json=client_payload())

    response = client.post(
        "/v1/clients", json=client_payload(placa="ABC-123 ", email="ana@example.com", vin="X")
    )

    assert response.status_code == 400
    assert [error["field"] for error in response.json()["errors"]] == ["dni", "email", "placa"]
    assert len(client.get("/v1/clients").json()) == 1


def test_update_keeps_own_unique_values(client: TestClient) -> None:
    client.post("/v1/clients", json=client_payload())

    response = client.put("/v1/clients", json={"id": 1, "dni": "40123456", "kms": 50000})

    assert response.status_code == 200
    assert response.json()["data"]["kms"] == 50000


def test_update_rejects_value_of_another_client(client: TestClient) -> None:
    client.post("/v1/clients", json=client_payload())
    client.post(
        "/v1/clients", json=client_payload(dni="2", placa="XYZ-999", email="luis@example.com")
    )

    response = client.put("/v1/clients", json={"id": 2, "placa": "abc-123"})

    assert response.status_code == 400
    assert response.json()["message"] == "Placa ya registrada"


def test_list_clients_search(client: TestClient) -> None:
    client.post("/v1/clients", json=client_payload())
    client.post(
        "/v1/clients",
        json=client_payload(dni="2", placa="XYZ-999", email="luis@example.com", estado=False),
    )

    def ids(params: dict) -> list[int]:
        return [row["id"] for row in client.get("/v1/clients", params=params).json()]

    assert ids({"q": "xyz"}) == [2]
    assert ids({"q": "ANA@"}) == [1]
    assert ids({"active": "false"}) == [2]
    assert ids({"model_id": "3"}) == [1, 2]


def test_delete_client(client: TestClient) -> None:
    client.post("/v1/clients", json=client_payload())

    response = delete(client, "/v1/clients", {"id": "1"})

    assert response.status_code == 200
    assert client.get("/v1/clients").json() == []
