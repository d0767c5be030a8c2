from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, ClassVar, Generic, Protocol, TypeVar


class Record(Protocol):
    """Shape shared by every persisted entity."""

    COLLECTION: ClassVar[str]
    RESOURCE: ClassVar[str]
    NOT_FOUND_MESSAGE: ClassVar[str]

    @property
    def id(self) -> int: ...

    def to_dict(self) -> dict[str, Any]: ...

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Any: ...


R = TypeVar("R", bound=Record)


@dataclass(slots=True)
class Store(Generic[R]):
    """
    Full in-memory view of one entity collection.

    - Records are kept in insertion order
    - last_id only ever grows; identifiers are never reused
    """

    last_id: int = 0
    records: list[R] = field(default_factory=list)

    def insert(self, build: Callable[[int], R]) -> R:
        new_id = self.last_id + 1
        record = build(new_id)
        self.records.append(record)
        self.last_id = new_id
        return record

    def index_of(self, record_id: int) -> int | None:
        for index, record in enumerate(self.records):
            if record.id == record_id:
                return index
        return None


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(moment: datetime) -> str:
    """Serialize as ISO-8601 UTC with millisecond precision and a Z suffix."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def from_iso(text: Any) -> datetime:
    if isinstance(text, str) and text:
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return datetime.fromtimestamp(0, timezone.utc)
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
    return datetime.fromtimestamp(0, timezone.utc)


def parse_active_flag(value: str | None) -> bool | None:
    """Only the literals 'true' and 'false' filter; anything else means no filter."""
    if value == "true":
        return True
    if value == "false":
        return False
    return None


def contains_text(query: str | None, *values: Any) -> bool:
    if not query:
        return True
    haystack = " ".join("" if value is None else str(value) for value in values)
    return query.lower() in haystack.lower()


def as_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def as_text(value: Any) -> str:
    return "" if value is None else str(value)
