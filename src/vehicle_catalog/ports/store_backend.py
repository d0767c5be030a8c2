from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass(frozen=True)
class StoreSnapshot:
    """Persisted form of one collection: the id counter plus raw record dicts."""

    last_id: int = 0
    records: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def coerce(cls, last_id: Any, records: Any) -> StoreSnapshot:
        """
        Build a snapshot from possibly corrupt persisted values.

        - Non-numeric counter -> 0
        - Non-array collection -> empty
        - Non-object rows are dropped
        - A counter below the highest stored id is raised to that id
        """
        try:
            counter = int(last_id or 0)
        except (TypeError, ValueError):
            counter = 0

        rows = [row for row in records if isinstance(row, dict)] if isinstance(records, list) else []

        for row in rows:
            row_id = row.get("id")
            if isinstance(row_id, int) and not isinstance(row_id, bool) and row_id > counter:
                counter = row_id

        return cls(last_id=counter, records=rows)


class StoreBackend(ABC):
    """
    Port for whole-collection persistence.

    Each collection is loaded and persisted as a single document.
    Implementations must:
        - Initialize (and persist) an empty store on first load of a collection,
          under write_lock() and only if it is still missing once the lock is held
        - Overwrite the whole document on persist
        - Propagate any other read/write failure to the caller

    Writers are serialized per collection through write_lock(); readers only lock
    to initialize a missing store. The lock is reentrant so a writer can load
    (and initialize) while holding it.
    """

    def __init__(self) -> None:
        self._locks: dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    @contextmanager
    def write_lock(self, collection: str) -> Iterator[None]:
        with self._locks_guard:
            lock = self._locks.setdefault(collection, threading.RLock())
        with lock:
            yield

    @abstractmethod
    def load(self, collection: str) -> StoreSnapshot:
        """
        Load a collection, creating an empty one if it does not exist yet.

        Raises:
            InternalError: If the persisted document cannot be read or parsed
        """
        ...

    @abstractmethod
    def persist(self, collection: str, snapshot: StoreSnapshot) -> None:
        """Overwrite the persisted document of a collection."""
        ...
