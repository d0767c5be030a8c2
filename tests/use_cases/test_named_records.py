"""
Test suite for brand and vehicle-type use cases.

Both collections share the same rules; brands are used for most cases and
types check that their own messages are used.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from vehicle_catalog.adapters.entity_repository import EntityRepository
from vehicle_catalog.adapters.in_memory_store_backend import InMemoryStoreBackend
from vehicle_catalog.domain.brand import Brand
from vehicle_catalog.domain.errors import NotFoundError, ValidationError
from vehicle_catalog.domain.named_record import NamedRecordChanges, NameFilters, NewNamedRecord
from vehicle_catalog.domain.vehicle_type import VehicleType
from vehicle_catalog.use_cases.brands import CreateBrand, ListBrands, UpdateBrand
from vehicle_catalog.use_cases.vehicle_types import CreateVehicleType, UpdateVehicleType

START = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Returns START, START+1s, START+2s, ... on successive calls."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> datetime:
        moment = START + timedelta(seconds=self.calls)
        self.calls += 1
        return moment


@pytest.fixture()
def backend() -> InMemoryStoreBackend:
    return InMemoryStoreBackend()


@pytest.fixture()
def brands(backend: InMemoryStoreBackend) -> EntityRepository[Brand]:
    return EntityRepository(backend, Brand)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def seeded(brands: EntityRepository[Brand], clock: FakeClock) -> list[Brand]:
    create = CreateBrand(brands, clock=clock)
    return [create.execute(NewNamedRecord(name)) for name in ("Toyota", "Nissan", "Kia")]


# ==============================================================================
# Create
# ==============================================================================


def test_create_assigns_sequential_ids_and_timestamps(
    brands: EntityRepository[Brand], clock: FakeClock
) -> None:
    brand = CreateBrand(brands, clock=clock).execute(NewNamedRecord("  Toyota  "))

    assert brand.id == 1
    assert brand.name == "Toyota"
    assert brand.is_active is True
    assert brand.created_at == brand.updated_at == START
    assert brands.load().last_id == 1


def test_create_uses_counter_not_record_count(backend: InMemoryStoreBackend) -> None:
    """After deletions the next id is still last_id + 1."""
    from vehicle_catalog.ports.store_backend import StoreSnapshot

    backend.persist("brands", StoreSnapshot(last_id=9, records=[]))

    brand = CreateBrand(EntityRepository(backend, Brand)).execute(NewNamedRecord("Kia"))

    assert brand.id == 10


@pytest.mark.parametrize("name", ["TOYOTA", "toyota", " Toyota "])
def test_create_rejects_duplicate_name_ignoring_case(
    brands: EntityRepository[Brand], seeded: list[Brand], name: str
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        CreateBrand(brands).execute(NewNamedRecord(name))

    assert exc_info.value.message == "Marca ya existe"
    assert len(brands.load().records) == 3


@pytest.mark.parametrize("name", [None, "", "   "])
def test_create_requires_name(brands: EntityRepository[Brand], name: str | None) -> None:
    with pytest.raises(ValidationError) as exc_info:
        CreateBrand(brands).execute(NewNamedRecord(name))

    assert exc_info.value.message == "Nombre requerido"
    assert brands.load().last_id == 0


def test_vehicle_type_messages(backend: InMemoryStoreBackend) -> None:
    types = EntityRepository(backend, VehicleType)
    create = CreateVehicleType(types)
    create.execute(NewNamedRecord("SUV"))

    with pytest.raises(ValidationError) as duplicate:
        create.execute(NewNamedRecord("suv"))
    with pytest.raises(ValidationError) as blank:
        create.execute(NewNamedRecord(""))
    with pytest.raises(NotFoundError) as missing:
        UpdateVehicleType(types).execute(NamedRecordChanges(id=99, name="Van"))

    assert duplicate.value.message == "Tipo ya existe"
    assert blank.value.message == "Nombre obligatorio"
    assert missing.value.message == "Tipo no encontrado"


# ==============================================================================
# List
# ==============================================================================


def test_list_without_filters_keeps_insertion_order(
    brands: EntityRepository[Brand], seeded: list[Brand]
) -> None:
    assert [b.name for b in ListBrands(brands).execute(NameFilters())] == ["Toyota", "Nissan", "Kia"]


def test_list_filters_combine_with_and(
    brands: EntityRepository[Brand], seeded: list[Brand]
) -> None:
    UpdateBrand(brands).execute(NamedRecordChanges(id=2, is_active=False))
    use_case = ListBrands(brands)

    assert [b.id for b in use_case.execute(NameFilters(q="I"))] == [2, 3]
    assert [b.id for b in use_case.execute(NameFilters(q="i", active=True))] == [3]
    assert [b.id for b in use_case.execute(NameFilters(id=1, active=False))] == []


# ==============================================================================
# Update
# ==============================================================================


def test_update_merges_partial_changes(
    brands: EntityRepository[Brand], seeded: list[Brand], clock: FakeClock
) -> None:
    original = seeded[0]

    updated = UpdateBrand(brands, clock=clock).execute(NamedRecordChanges(id=1, is_active=False))

    assert updated.name == "Toyota"
    assert updated.is_active is False
    assert updated.created_at == original.created_at
    assert updated.updated_at > original.updated_at
    assert brands.load().records[0] == updated


def test_update_allows_keeping_own_name(brands: EntityRepository[Brand], seeded: list[Brand]) -> None:
    updated = UpdateBrand(brands).execute(NamedRecordChanges(id=1, name="TOYOTA"))

    assert updated.name == "TOYOTA"


def test_update_rejects_name_of_another_record(
    brands: EntityRepository[Brand], seeded: list[Brand]
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        UpdateBrand(brands).execute(NamedRecordChanges(id=1, name="nissan"))

    assert exc_info.value.message == "Marca ya existe"
    assert brands.load().records[0].name == "Toyota"


def test_update_requires_id(brands: EntityRepository[Brand]) -> None:
    with pytest.raises(ValidationError) as exc_info:
        UpdateBrand(brands).execute(NamedRecordChanges(name="Kia"))

    assert exc_info.value.message == "Falta id"


def test_update_unknown_id(brands: EntityRepository[Brand], seeded: list[Brand]) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        UpdateBrand(brands).execute(NamedRecordChanges(id=42, name="Kia"))

    assert exc_info.value.message == "Marca no encontrada"
