from __future__ import annotations

import dataclasses
import logging
from datetime import datetime
from typing import Callable

from vehicle_catalog.adapters.entity_repository import EntityRepository
from vehicle_catalog.domain.client import (
    Client,
    ClientChanges,
    ClientFilters,
    NewClient,
    ensure_unique,
)
from vehicle_catalog.domain.store import utc_now
from vehicle_catalog.use_cases.common import index_or_raise, require_id

logger = logging.getLogger(__name__)


class ListClients:
    def __init__(self, repository: EntityRepository[Client]) -> None:
        self._repository = repository

    def execute(self, filters: ClientFilters) -> list[Client]:
        store = self._repository.load()
        return [client for client in store.records if filters.matches(client)]


class CreateClient:
    """
    Register a client.

    All fields except estado are required. dni, email and placa are each
    checked for duplicates independently, after normalization
    (placa upper-case, email lower-case).
    """

    def __init__(
        self,
        repository: EntityRepository[Client],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self, draft: NewClient) -> Client:
        """
        Raises:
            ValidationError: If a field is missing or dni/email/placa is taken
        """
        draft = draft.normalized()
        draft.validate()

        with self._repository.writing() as store:
            ensure_unique(
                store.records,
                {"dni": draft.dni or "", "email": draft.email or "", "placa": draft.placa or ""},
            )

            now = self._clock()
            client = store.insert(
                lambda new_id: Client(
                    id=new_id,
                    dni=draft.dni or "",
                    placa=draft.placa or "",
                    vin=draft.vin or "",
                    kms=draft.kms or 0,
                    celular=draft.celular or "",
                    email=draft.email or "",
                    estado=draft.estado,
                    model_id=draft.model_id or 0,
                    brand_id=draft.brand_id or 0,
                    created_at=now,
                    updated_at=now,
                )
            )

        logger.info("Client created", extra={"record_id": client.id})
        return client


class UpdateClient:
    """
    Merge a partial update into a client.

    dni/email/placa are validated against every OTHER client before anything
    is changed; keeping one's own current value is allowed.
    """

    def __init__(
        self,
        repository: EntityRepository[Client],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self, changes: ClientChanges) -> Client:
        record_id = require_id(changes.id)
        changes = changes.normalized()
        changes.validate()

        with self._repository.writing() as store:
            index = index_or_raise(store, Client, record_id)
            ensure_unique(store.records, changes.unique_fields(), exclude_id=record_id)

            current = store.records[index]
            provided = {
                field.name: getattr(changes, field.name)
                for field in dataclasses.fields(changes)
                if field.name != "id" and getattr(changes, field.name) is not None
            }
            updated = dataclasses.replace(current, **provided, updated_at=self._clock())
            store.records[index] = updated

        logger.info("Client updated", extra={"record_id": record_id, "fields": sorted(provided)})
        return updated
