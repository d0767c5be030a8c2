"""JSON file implementation of StoreBackend."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from vehicle_catalog.domain.errors import InternalError
from vehicle_catalog.ports.store_backend import StoreBackend, StoreSnapshot

logger = logging.getLogger(__name__)


class JsonFileStoreBackend(StoreBackend):
    """
    Stores each collection as ``<data_dir>/<collection>.json``.

    Document format:
        {"lastId": 3, "<collection>": [{...}, {...}, {...}]}

    - Missing file: an empty store is written and returned
    - Writes go to a temp file in the same directory, then os.replace()
      swaps it in, so readers never observe a partial document
    """

    def __init__(self, data_dir: Path | str) -> None:
        super().__init__()
        self._data_dir = Path(data_dir)

    def path_for(self, collection: str) -> Path:
        return self._data_dir / f"{collection}.json"

    def load(self, collection: str) -> StoreSnapshot:
        path = self.path_for(collection)

        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return self._initialize(collection)

        try:
            document = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise InternalError(
                f"Store '{collection}' is not valid JSON: {exc}",
                collection=collection,
            ) from exc

        if not isinstance(document, dict):
            document = {}

        return StoreSnapshot.coerce(document.get("lastId"), document.get(collection))

    def _initialize(self, collection: str) -> StoreSnapshot:
        """Write an empty store unless a writer created the file first."""
        path = self.path_for(collection)

        with self.write_lock(collection):
            if path.exists():
                return self.load(collection)

            logger.info(
                "Initializing empty store",
                extra={"collection": collection, "path": str(path)},
            )
            snapshot = StoreSnapshot()
            self.persist(collection, snapshot)
            return snapshot

    def persist(self, collection: str, snapshot: StoreSnapshot) -> None:
        path = self.path_for(collection)
        path.parent.mkdir(parents=True, exist_ok=True)

        document = {"lastId": snapshot.last_id, collection: snapshot.records}
        payload = json.dumps(document, ensure_ascii=False, indent=2)

        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{collection}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(payload)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug(
            "Store persisted",
            extra={"collection": collection, "last_id": snapshot.last_id, "rows": len(snapshot.records)},
        )
