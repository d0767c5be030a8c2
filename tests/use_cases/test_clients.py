"""Test suite for client use cases."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from vehicle_catalog.adapters.entity_repository import EntityRepository
from vehicle_catalog.adapters.in_memory_store_backend import InMemoryStoreBackend
from vehicle_catalog.domain.client import Client, ClientChanges, ClientFilters, NewClient
from vehicle_catalog.domain.errors import NotFoundError, ValidationError
from vehicle_catalog.use_cases.clients import CreateClient, ListClients, UpdateClient

START = datetime(2024, 5, 1, tzinfo=timezone.utc)


def new_client(**overrides: object) -> NewClient:
    fields: dict[str, object] = {
        "dni": "12345678",
        "placa": "abc-123",
        "vin": "1HGCM82633A004352",
        "kms": 15000,
        "celular": "999888777",
        "email": "Ana@Mail.com",
        "model_id": 1,
        "brand_id": 1,
    }
    fields.update(overrides)
    return NewClient(**fields)  # type: ignore[arg-type]


@pytest.fixture()
def backend() -> InMemoryStoreBackend:
    return InMemoryStoreBackend()


@pytest.fixture()
def clients(backend: InMemoryStoreBackend) -> EntityRepository[Client]:
    return EntityRepository(backend, Client)


@pytest.fixture()
def ana(clients: EntityRepository[Client]) -> Client:
    return CreateClient(clients, clock=lambda: START).execute(new_client())


@pytest.fixture()
def luis(clients: EntityRepository[Client], ana: Client) -> Client:
    return CreateClient(clients, clock=lambda: START).execute(
        new_client(dni="87654321", placa="xyz-987", email="luis@mail.com", estado=True)
    )


# ==============================================================================
# Create
# ==============================================================================


def test_create_normalizes_and_defaults_estado(ana: Client) -> None:
    assert ana.id == 1
    assert ana.placa == "ABC-123"
    assert ana.email == "ana@mail.com"
    assert ana.estado is False
    assert ana.created_at == ana.updated_at == START


def test_create_names_missing_fields(clients: EntityRepository[Client]) -> None:
    with pytest.raises(ValidationError) as exc_info:
        CreateClient(clients).execute(new_client(vin=None, kms=0))

    assert exc_info.value.message == "Datos incompletos: vin, kms"


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"dni": "12345678", "placa": "NEW-1", "email": "new@mail.com"}, "DNI ya registrado"),
        ({"dni": "1", "placa": "NEW-1", "email": "ANA@MAIL.COM"}, "Email ya registrado"),
        ({"dni": "1", "placa": " Abc-123 ", "email": "new@mail.com"}, "Placa ya registrada"),
    ],
)
def test_create_rejects_each_duplicate_field(
    clients: EntityRepository[Client], ana: Client, overrides: dict, message: str
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        CreateClient(clients).execute(new_client(**overrides))

    assert exc_info.value.message == message
    assert len(clients.load().records) == 1


# ==============================================================================
# List
# ==============================================================================


def test_list_filters(clients: EntityRepository[Client], ana: Client, luis: Client) -> None:
    use_case = ListClients(clients)

    assert [c.id for c in use_case.execute(ClientFilters())] == [1, 2]
    assert [c.id for c in use_case.execute(ClientFilters(q="XYZ"))] == [2]
    assert [c.id for c in use_case.execute(ClientFilters(active=False))] == [1]
    assert [c.id for c in use_case.execute(ClientFilters(brand_id=2))] == []


# ==============================================================================
# Update
# ==============================================================================


def test_update_with_own_values_succeeds(clients: EntityRepository[Client], ana: Client) -> None:
    updated = UpdateClient(clients, clock=lambda: START + timedelta(days=1)).execute(
        ClientChanges(id=ana.id, dni=ana.dni, email="ANA@mail.com", placa="abc-123", kms=20000)
    )

    assert updated.kms == 20000
    assert updated.email == "ana@mail.com"
    assert updated.created_at == START
    assert updated.updated_at == START + timedelta(days=1)


def test_update_conflict_leaves_store_untouched(
    clients: EntityRepository[Client], backend: InMemoryStoreBackend, ana: Client, luis: Client
) -> None:
    before = backend.snapshot("clients")

    with pytest.raises(ValidationError) as exc_info:
        UpdateClient(clients).execute(ClientChanges(id=ana.id, kms=1, email="luis@mail.com", placa="XYZ-987"))

    assert exc_info.value.errors == [
        {"field": "email", "message": "Email ya registrado", "code": "DUPLICATE"},
        {"field": "placa", "message": "Placa ya registrada", "code": "DUPLICATE"},
    ]
    assert backend.snapshot("clients") == before


def test_update_merges_only_provided_fields(
    clients: EntityRepository[Client], ana: Client
) -> None:
    updated = UpdateClient(clients).execute(ClientChanges(id=ana.id, estado=True, celular=" 111 "))

    assert updated.estado is True
    assert updated.celular == "111"
    assert updated.dni == ana.dni
    assert updated.vin == ana.vin
    assert updated.model_id == ana.model_id


def test_update_unknown_client(clients: EntityRepository[Client]) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        UpdateClient(clients).execute(ClientChanges(id=4, kms=1))

    assert exc_info.value.message == "Cliente no encontrado"


def test_update_requires_id(clients: EntityRepository[Client]) -> None:
    with pytest.raises(ValidationError) as exc_info:
        UpdateClient(clients).execute(ClientChanges(kms=1))

    assert exc_info.value.message == "Falta id"
