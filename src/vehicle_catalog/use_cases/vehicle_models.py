from __future__ import annotations

import dataclasses
import logging
from datetime import datetime
from typing import Callable

from vehicle_catalog.adapters.entity_repository import EntityRepository
from vehicle_catalog.domain.store import utc_now
from vehicle_catalog.domain.vehicle_model import (
    ModelFilters,
    NewVehicleModel,
    VehicleModel,
    VehicleModelChanges,
)
from vehicle_catalog.use_cases.common import index_or_raise, require_id

logger = logging.getLogger(__name__)


class ListVehicleModels:
    """Search models by id, brand, "<name> <version>" substring and active flag."""

    def __init__(self, repository: EntityRepository[VehicleModel]) -> None:
        self._repository = repository

    def execute(self, filters: ModelFilters) -> list[VehicleModel]:
        store = self._repository.load()
        return [model for model in store.records if filters.matches(model)]


class CreateVehicleModel:
    """
    Create an active model.

    name, year and brand_id are required; version defaults to "".
    The brand is not checked for existence.
    """

    def __init__(
        self,
        repository: EntityRepository[VehicleModel],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self, draft: NewVehicleModel) -> VehicleModel:
        draft.validate()

        with self._repository.writing() as store:
            now = self._clock()
            model = store.insert(
                lambda new_id: VehicleModel(
                    id=new_id,
                    name=(draft.name or "").strip(),
                    year=draft.year or 0,
                    version=(draft.version or "").strip(),
                    brand_id=draft.brand_id or 0,
                    is_active=True,
                    created_at=now,
                    updated_at=now,
                )
            )

        logger.info("Model created", extra={"record_id": model.id, "brand_id": model.brand_id})
        return model


class UpdateVehicleModel:
    def __init__(
        self,
        repository: EntityRepository[VehicleModel],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self, changes: VehicleModelChanges) -> VehicleModel:
        """
        Merge the provided fields into the model with changes.id.

        Raises:
            ValidationError: If id is missing or a provided field is blank/zero
            NotFoundError: If no model has that id
        """
        record_id = require_id(changes.id)
        changes.validate()

        with self._repository.writing() as store:
            index = index_or_raise(store, VehicleModel, record_id)
            current = store.records[index]

            updated = dataclasses.replace(
                current,
                name=current.name if changes.name is None else changes.name.strip(),
                year=current.year if changes.year is None else changes.year,
                version=current.version if changes.version is None else changes.version.strip(),
                brand_id=current.brand_id if changes.brand_id is None else changes.brand_id,
                is_active=current.is_active if changes.is_active is None else changes.is_active,
                updated_at=self._clock(),
            )
            store.records[index] = updated

        logger.info("Model updated", extra={"record_id": record_id})
        return updated
