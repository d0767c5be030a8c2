from __future__ import annotations

import copy

from vehicle_catalog.ports.store_backend import StoreBackend, StoreSnapshot


class InMemoryStoreBackend(StoreBackend):
    """
    Canonical contract implementation for tests.

    - Missing collections start empty and are persisted on first load
    - load() and persist() copy deeply, so callers only ever observe
      what was actually persisted
    """

    def __init__(self, initial: dict[str, StoreSnapshot] | None = None) -> None:
        super().__init__()
        self._documents: dict[str, StoreSnapshot] = copy.deepcopy(initial or {})
        self.persist_count = 0

    def load(self, collection: str) -> StoreSnapshot:
        if collection not in self._documents:
            with self.write_lock(collection):
                if collection not in self._documents:
                    self.persist(collection, StoreSnapshot())
        return copy.deepcopy(self._documents[collection])

    def persist(self, collection: str, snapshot: StoreSnapshot) -> None:
        self._documents[collection] = copy.deepcopy(snapshot)
        self.persist_count += 1

    def snapshot(self, collection: str) -> StoreSnapshot | None:
        """Inspect persisted state without triggering initialization."""
        document = self._documents.get(collection)
        return copy.deepcopy(document) if document is not None else None
