"""Delete a record by id, for any collection."""

from __future__ import annotations

import logging
from typing import Generic

from vehicle_catalog.adapters.entity_repository import EntityRepository
from vehicle_catalog.domain.store import R
from vehicle_catalog.use_cases.common import index_or_raise, require_id

logger = logging.getLogger(__name__)


class DeleteRecord(Generic[R]):
    """
    Use case for removing a single record.

    Responsibilities:
    - Validate the identifier is present
    - Raise NotFoundError if no record has that identifier
    - Remove it (order of remaining records preserved) and persist

    Dependent records in other collections are left untouched.
    """

    def __init__(self, repository: EntityRepository[R]) -> None:
        self._repository = repository

    def execute(self, record_id: int | None) -> R:
        """
        Returns:
            The removed record

        Raises:
            ValidationError: If record_id is missing
            NotFoundError: If no record has record_id
        """
        record_id = require_id(record_id)

        with self._repository.writing() as store:
            index = index_or_raise(store, self._repository.record_type, record_id)
            removed = store.records.pop(index)

        logger.info(
            "Record deleted",
            extra={"collection": self._repository.collection, "record_id": record_id},
        )
        return removed
