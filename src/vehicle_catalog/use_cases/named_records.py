"""
List / create / update for collections of uniquely named records.

Brands and vehicle types share the exact same rules and only differ in
their messages, which live on the record class.
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import datetime
from typing import Callable, Generic, TypeVar

from vehicle_catalog.adapters.entity_repository import EntityRepository
from vehicle_catalog.domain.errors import ValidationError
from vehicle_catalog.domain.named_record import (
    NamedRecord,
    NamedRecordChanges,
    NameFilters,
    NewNamedRecord,
)
from vehicle_catalog.domain.store import Store, utc_now
from vehicle_catalog.use_cases.common import index_or_raise, require_id

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=NamedRecord)


def _ensure_name_available(store: Store[N], record_type: type[N], name: str, exclude_id: int | None = None) -> None:
    if any(record.has_name(name) for record in store.records if record.id != exclude_id):
        raise ValidationError.for_field("name", record_type.DUPLICATE_NAME_MESSAGE, code="DUPLICATE")


class ListNamedRecords(Generic[N]):
    """Filter the collection (AND semantics), preserving insertion order."""

    def __init__(self, repository: EntityRepository[N]) -> None:
        self._repository = repository

    def execute(self, filters: NameFilters) -> list[N]:
        store = self._repository.load()
        return [record for record in store.records if filters.matches(record)]


class CreateNamedRecord(Generic[N]):
    """
    Create an active record with a trimmed, case-insensitively unique name.

    The new record gets id = last_id + 1 and identical created_at/updated_at.
    """

    def __init__(
        self,
        repository: EntityRepository[N],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self, draft: NewNamedRecord) -> N:
        """
        Raises:
            ValidationError: If the name is blank or already taken
        """
        record_type = self._repository.record_type
        name = draft.cleaned_name(record_type.NAME_REQUIRED_MESSAGE)

        with self._repository.writing() as store:
            _ensure_name_available(store, record_type, name)

            now = self._clock()
            record = store.insert(
                lambda new_id: record_type(
                    id=new_id,
                    name=name,
                    is_active=True,
                    created_at=now,
                    updated_at=now,
                )
            )

        logger.info(
            "Record created",
            extra={"collection": self._repository.collection, "record_id": record.id},
        )
        return record


class UpdateNamedRecord(Generic[N]):
    """
    Merge a partial update into an existing record.

    Unspecified fields keep their value, the id never changes,
    created_at is preserved and updated_at is refreshed.
    """

    def __init__(
        self,
        repository: EntityRepository[N],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self, changes: NamedRecordChanges) -> N:
        """
        Raises:
            ValidationError: If id is missing, or the new name is blank or taken
            NotFoundError: If no record has the given id
        """
        record_id = require_id(changes.id)
        record_type = self._repository.record_type

        with self._repository.writing() as store:
            index = index_or_raise(store, record_type, record_id)
            current = store.records[index]

            name = current.name
            if changes.name is not None:
                name = NewNamedRecord(changes.name).cleaned_name(record_type.NAME_REQUIRED_MESSAGE)
                _ensure_name_available(store, record_type, name, exclude_id=record_id)

            updated = dataclasses.replace(
                current,
                name=name,
                is_active=current.is_active if changes.is_active is None else changes.is_active,
                updated_at=self._clock(),
            )
            store.records[index] = updated

        logger.info(
            "Record updated",
            extra={"collection": self._repository.collection, "record_id": record_id},
        )
        return updated
