"""Test suite for /v1/models."""

from __future__ import annotations

import httpx
from fastapi.testclient import TestClient


def delete(client: TestClient, url: str, body: dict) -> httpx.Response:
    """DELETE with a JSON body (httpx's .delete() takes no body)."""
    return client.request("DELETE", url, json=body)


COROLLA = {"name": "Corolla", "year": 2022, "version": "XEi", "brand_id": 1}


def test_create_model_with_string_numbers(client: TestClient) -> None:
    response = client.post(
        "/v1/models", json={"name": " Corolla ", "year": "2022", "brand_id": "1"}
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Corolla"
    assert data["year"] == 2022
    assert data["brand_id"] == 1
    assert data["version"] == ""
    assert data["is_active"] is True


def test_create_model_lists_missing_fields(client: TestClient) -> None:
    response = client.post("/v1/models", json={"version": "XEi"})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Campos obligatorios faltantes: name, year, brand_id"
    assert [error["field"] for error in body["errors"]] == ["name", "year", "brand_id"]


def test_create_model_with_non_numeric_year(client: TestClient) -> None:
    response = client.post("/v1/models", json={**COROLLA, "year": "dos mil"})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Datos inválidos"
    assert body["errors"][0]["field"] == "year"


def test_brand_is_not_required_to_exist(client: TestClient) -> None:
    response = client.post("/v1/models", json={**COROLLA, "brand_id": 99})

    assert response.status_code == 200


def test_list_models_filters(client: TestClient) -> None:
    client.post("/v1/models", json=COROLLA)
    client.post("/v1/models", json={"name": "Hilux", "year": 2021, "version": "SRV", "brand_id": 1})
    client.post("/v1/models", json={"name": "Rio", "year": 2020, "version": "EX", "brand_id": 2})

    def names(params: dict) -> list[str]:
        return [model["name"] for model in client.get("/v1/models", params=params).json()]

    assert names({"brand_id": "1"}) == ["Corolla", "Hilux"]
    assert names({"q": "srv"}) == ["Hilux"]
    assert names({"q": "corolla xei"}) == ["Corolla"]
    assert names({"brand_id": "1", "q": "rio"}) == []


def test_list_models_documents_q_over_name_and_version(client: TestClient) -> None:
    operation = client.get("/openapi.json").json()["paths"]["/v1/models"]["get"]

    assert "`q`: case-insensitive substring of `\"<name> <version>\"`" in operation["description"]


def test_update_model_partially(client: TestClient) -> None:
    client.post("/v1/models", json=COROLLA)

    response = client.put("/v1/models", json={"id": 1, "version": "GLi", "is_active": False})

    data = response.json()["data"]
    assert data["name"] == "Corolla"
    assert data["year"] == 2022
    assert data["version"] == "GLi"
    assert data["is_active"] is False


def test_update_model_rejects_blank_name(client: TestClient) -> None:
    client.post("/v1/models", json=COROLLA)

    response = client.put("/v1/models", json={"id": 1, "name": " "})

    assert response.status_code == 400
    assert client.get("/v1/models").json()[0]["name"] == "Corolla"


def test_delete_unknown_model(client: TestClient) -> None:
    response = delete(client, "/v1/models", {"id": 4})

    assert response.status_code == 404
    assert response.json()["message"] == "Modelo no encontrado"
