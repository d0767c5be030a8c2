"""SQLAlchemy implementation of StoreBackend."""

from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from typing import Callable

from sqlalchemy.orm import Session

from vehicle_catalog.infra.db.models.entity_store import EntityStoreRow
from vehicle_catalog.infra.db.session import get_session
from vehicle_catalog.ports.store_backend import StoreBackend, StoreSnapshot

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], AbstractContextManager[Session]]


class SqlStoreBackend(StoreBackend):
    """
    Stores each collection as one row of the ``entity_stores`` table.

    - The whole record list lives in a JSON column, mirroring the file format
    - One session (and transaction) per load/persist call
    - Missing row: an empty store is inserted and returned
    """

    def __init__(self, session_factory: SessionFactory = get_session) -> None:
        """
        Args:
            session_factory: Context manager yielding a session that commits on
                success and rolls back on error (defaults to get_session)
        """
        super().__init__()
        self._session_factory = session_factory

    def load(self, collection: str) -> StoreSnapshot:
        with self._session_factory() as session:
            row = session.get(EntityStoreRow, collection)
            if row is not None:
                return StoreSnapshot.coerce(row.last_id, row.records)

        return self._initialize(collection)

    def _initialize(self, collection: str) -> StoreSnapshot:
        """Insert an empty row unless a writer created it first."""
        with self.write_lock(collection), self._session_factory() as session:
            row = session.get(EntityStoreRow, collection)
            if row is not None:
                return StoreSnapshot.coerce(row.last_id, row.records)

            logger.info("Initializing empty store", extra={"collection": collection})
            session.add(EntityStoreRow(collection=collection, last_id=0, records=[]))
            return StoreSnapshot()

    def persist(self, collection: str, snapshot: StoreSnapshot) -> None:
        with self._session_factory() as session:
            row = session.get(EntityStoreRow, collection)

            if row is None:
                session.add(
                    EntityStoreRow(
                        collection=collection,
                        last_id=snapshot.last_id,
                        records=list(snapshot.records),
                    )
                )
            else:
                row.last_id = snapshot.last_id
                # Assign a new list so the JSON column is flagged dirty
                row.records = list(snapshot.records)

        logger.debug(
            "Store persisted",
            extra={"collection": collection, "last_id": snapshot.last_id, "rows": len(snapshot.records)},
        )
