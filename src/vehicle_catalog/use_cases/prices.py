from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from vehicle_catalog.adapters.entity_repository import EntityRepository
from vehicle_catalog.domain.brand import Brand
from vehicle_catalog.domain.errors import ValidationError
from vehicle_catalog.domain.price import Price, PriceChanges, PriceFilters, PriceListing, PriceMatrix
from vehicle_catalog.domain.store import utc_now
from vehicle_catalog.domain.subtype import Subtype
from vehicle_catalog.domain.vehicle_model import VehicleModel
from vehicle_catalog.domain.vehicle_type import VehicleType
from vehicle_catalog.use_cases.common import index_or_raise, require_id

logger = logging.getLogger(__name__)


class ListPrices:
    """
    Price list joined against models, brands, subtypes and types.

    Join rules (read time only, nothing is denormalized):
    - The price's model must exist and be active, otherwise the row is dropped
    - The price's subtype must exist and be active, otherwise the row is dropped
    - brand_name / type_name are None when the brand / type no longer exists
    """

    def __init__(
        self,
        repository: EntityRepository[Price],
        model_repository: EntityRepository[VehicleModel],
        brand_repository: EntityRepository[Brand],
        subtype_repository: EntityRepository[Subtype],
        type_repository: EntityRepository[VehicleType],
    ) -> None:
        self._repository = repository
        self._model_repository = model_repository
        self._brand_repository = brand_repository
        self._subtype_repository = subtype_repository
        self._type_repository = type_repository

    def execute(self, filters: PriceFilters) -> list[PriceListing]:
        prices = [p for p in self._repository.load().records if filters.matches(p)]

        models = {m.id: m for m in self._model_repository.load().records if m.is_active}
        subtypes = {s.id: s for s in self._subtype_repository.load().records if s.is_active}
        brand_names = {b.id: b.name for b in self._brand_repository.load().records}
        type_names = {t.id: t.name for t in self._type_repository.load().records}

        listings = []
        for price in prices:
            model = models.get(price.model_id)
            if model is None:
                continue
            subtype = subtypes.get(price.subtype_id)
            if subtype is None:
                continue

            listings.append(
                PriceListing(
                    price=price,
                    model_name=model.name,
                    year=model.year,
                    version=model.version,
                    brand_name=brand_names.get(model.brand_id),
                    subtype_name=subtype.name,
                    type_name=type_names.get(subtype.type_id),
                )
            )

        return listings


@dataclass(frozen=True, slots=True)
class UpsertPricesResult:
    created: int
    updated: int


class UpsertPrices:
    """
    Bulk create-or-update from a model -> subtype -> price matrix.

    Idempotent: resubmitting a matrix rewrites the same rows. An existing
    (model_id, subtype_id) row gets the new price and a fresh updated_at;
    a new pair is appended with the next id. The store is persisted once.
    """

    def __init__(
        self,
        repository: EntityRepository[Price],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self, matrix: PriceMatrix) -> UpsertPricesResult:
        created = updated = 0

        with self._repository.writing() as store:
            positions = {price.key: index for index, price in enumerate(store.records)}
            now = self._clock()

            for entry in matrix.entries:
                key = (entry.model_id, entry.subtype_id)
                index = positions.get(key)

                if index is not None:
                    store.records[index] = dataclasses.replace(
                        store.records[index], price=entry.price, updated_at=now
                    )
                    updated += 1
                    continue

                store.insert(
                    lambda new_id: Price(
                        id=new_id,
                        model_id=entry.model_id,
                        subtype_id=entry.subtype_id,
                        price=entry.price,
                        created_at=now,
                        updated_at=now,
                    )
                )
                positions[key] = len(store.records) - 1
                created += 1

        logger.info("Prices saved", extra={"created_count": created, "updated_count": updated})
        return UpsertPricesResult(created=created, updated=updated)


class UpdatePrice:
    def __init__(
        self,
        repository: EntityRepository[Price],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self, changes: PriceChanges) -> Price:
        """
        Merge the provided fields into the price with changes.id.

        Raises:
            ValidationError: If id is missing, a field is invalid, or the new
                (model_id, subtype_id) pair already belongs to another row
            NotFoundError: If no price has that id
        """
        record_id = require_id(changes.id)
        changes.validate()

        with self._repository.writing() as store:
            index = index_or_raise(store, Price, record_id)
            current = store.records[index]

            updated = dataclasses.replace(
                current,
                model_id=current.model_id if changes.model_id is None else changes.model_id,
                subtype_id=current.subtype_id if changes.subtype_id is None else changes.subtype_id,
                price=current.price if changes.price is None else changes.price,
                updated_at=self._clock(),
            )

            if any(p.key == updated.key for p in store.records if p.id != record_id):
                raise ValidationError(
                    "Ya existe un precio para ese modelo y subtipo",
                    errors=[
                        {"field": "model_id", "message": "Par modelo/subtipo duplicado", "code": "DUPLICATE"},
                        {"field": "subtype_id", "message": "Par modelo/subtipo duplicado", "code": "DUPLICATE"},
                    ],
                )

            store.records[index] = updated

        logger.info("Price updated", extra={"record_id": record_id})
        return updated
