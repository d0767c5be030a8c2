from __future__ import annotations

from contextlib import contextmanager
from typing import Generic, Iterator

from vehicle_catalog.domain.store import R, Store
from vehicle_catalog.ports.store_backend import StoreBackend, StoreSnapshot


class EntityRepository(Generic[R]):
    """
    Typed view of one collection on top of a StoreBackend.

    Converts raw record dicts to domain records (and back) using the
    record class's from_dict/to_dict. The collection name comes from
    the record class (e.g. Brand.COLLECTION == "brands").
    """

    def __init__(self, backend: StoreBackend, record_type: type[R]) -> None:
        self._backend = backend
        self._record_type = record_type

    @property
    def record_type(self) -> type[R]:
        return self._record_type

    @property
    def collection(self) -> str:
        return self._record_type.COLLECTION

    def load(self) -> Store[R]:
        snapshot = self._backend.load(self.collection)
        return Store(
            last_id=snapshot.last_id,
            records=[self._record_type.from_dict(row) for row in snapshot.records],
        )

    def persist(self, store: Store[R]) -> None:
        self._backend.persist(
            self.collection,
            StoreSnapshot(
                last_id=store.last_id,
                records=[record.to_dict() for record in store.records],
            ),
        )

    @contextmanager
    def writing(self) -> Iterator[Store[R]]:
        """
        Load -> mutate -> persist under the collection's write lock.

        The store is persisted only if the block exits normally; an exception
        (e.g. ValidationError) leaves the persisted state untouched.
        """
        with self._backend.write_lock(self.collection):
            store = self.load()
            yield store
            self.persist(store)
