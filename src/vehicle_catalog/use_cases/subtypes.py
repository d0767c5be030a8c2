from __future__ import annotations

import dataclasses
import logging
from datetime import datetime
from typing import Callable

from vehicle_catalog.adapters.entity_repository import EntityRepository
from vehicle_catalog.domain.store import utc_now
from vehicle_catalog.domain.subtype import (
    NewSubtype,
    Subtype,
    SubtypeChanges,
    SubtypeFilters,
    SubtypeListing,
)
from vehicle_catalog.domain.vehicle_type import VehicleType
from vehicle_catalog.use_cases.common import index_or_raise, require_id

logger = logging.getLogger(__name__)


class ListSubtypes:
    """
    Search subtypes and attach the name of their type.

    A subtype whose type was deleted is still listed, with type_name None.
    """

    def __init__(
        self,
        repository: EntityRepository[Subtype],
        type_repository: EntityRepository[VehicleType],
    ) -> None:
        self._repository = repository
        self._type_repository = type_repository

    def execute(self, filters: SubtypeFilters) -> list[SubtypeListing]:
        subtypes = [s for s in self._repository.load().records if filters.matches(s)]
        type_names = {t.id: t.name for t in self._type_repository.load().records}

        return [
            SubtypeListing(subtype=subtype, type_name=type_names.get(subtype.type_id))
            for subtype in subtypes
        ]


class CreateSubtype:
    def __init__(
        self,
        repository: EntityRepository[Subtype],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self, draft: NewSubtype) -> Subtype:
        """
        Create an active subtype; year is optional (missing or 0 -> None).

        Raises:
            ValidationError: If name or type_id is missing
        """
        draft.validate()

        with self._repository.writing() as store:
            now = self._clock()
            subtype = store.insert(
                lambda new_id: Subtype(
                    id=new_id,
                    name=(draft.name or "").strip(),
                    type_id=draft.type_id or 0,
                    year=draft.year or None,
                    version=(draft.version or "").strip(),
                    is_active=True,
                    created_at=now,
                    updated_at=now,
                )
            )

        logger.info("Subtype created", extra={"record_id": subtype.id, "type_id": subtype.type_id})
        return subtype


class UpdateSubtype:
    def __init__(
        self,
        repository: EntityRepository[Subtype],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self, changes: SubtypeChanges) -> Subtype:
        record_id = require_id(changes.id)
        changes.validate()

        with self._repository.writing() as store:
            index = index_or_raise(store, Subtype, record_id)
            current = store.records[index]

            updated = dataclasses.replace(
                current,
                name=current.name if changes.name is None else changes.name.strip(),
                type_id=current.type_id if changes.type_id is None else changes.type_id,
                year=current.year if changes.year is None else (changes.year or None),
                version=current.version if changes.version is None else changes.version.strip(),
                is_active=current.is_active if changes.is_active is None else changes.is_active,
                updated_at=self._clock(),
            )
            store.records[index] = updated

        logger.info("Subtype updated", extra={"record_id": record_id})
        return updated
