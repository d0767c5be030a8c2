"""Helpers shared by the per-collection use cases."""

from __future__ import annotations

from vehicle_catalog.domain.errors import NotFoundError, ValidationError
from vehicle_catalog.domain.store import R, Store


def require_id(record_id: int | None) -> int:
    """
    Raises:
        ValidationError: If the identifier is missing or zero
    """
    if not record_id:
        raise ValidationError.for_field("id", "Falta id", code="REQUIRED")
    return record_id


def index_or_raise(store: Store[R], record_type: type[R], record_id: int) -> int:
    """
    Raises:
        NotFoundError: With the collection's own not-found message
    """
    index = store.index_of(record_id)
    if index is None:
        raise NotFoundError(
            resource=record_type.RESOURCE,
            identifier=str(record_id),
            message=record_type.NOT_FOUND_MESSAGE,
        )
    return index
