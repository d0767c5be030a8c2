from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar

from vehicle_catalog.domain.errors import ValidationError
from vehicle_catalog.domain.store import as_int, as_text, contains_text, from_iso, to_iso


@dataclass(frozen=True, slots=True)
class NamedRecord:
    """A catalog entry identified by a case-insensitively unique name."""

    COLLECTION: ClassVar[str] = ""
    RESOURCE: ClassVar[str] = ""
    NOT_FOUND_MESSAGE: ClassVar[str] = ""
    NAME_REQUIRED_MESSAGE: ClassVar[str] = "Nombre requerido"
    DUPLICATE_NAME_MESSAGE: ClassVar[str] = ""

    id: int
    name: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    def has_name(self, name: str) -> bool:
        return self.name.lower() == name.lower()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "is_active": self.is_active,
            "created_at": to_iso(self.created_at),
            "updated_at": to_iso(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Any:
        return cls(
            id=as_int(data.get("id")),
            name=as_text(data.get("name")),
            is_active=bool(data.get("is_active", False)),
            created_at=from_iso(data.get("created_at")),
            updated_at=from_iso(data.get("updated_at")),
        )


@dataclass(frozen=True, slots=True)
class NameFilters:
    id: int | None = None
    q: str | None = None
    active: bool | None = None

    def matches(self, record: NamedRecord) -> bool:
        if self.id is not None and record.id != self.id:
            return False
        if not contains_text(self.q, record.name):
            return False
        if self.active is not None and record.is_active != self.active:
            return False
        return True


@dataclass(frozen=True, slots=True)
class NewNamedRecord:
    name: str | None = None

    def cleaned_name(self, required_message: str) -> str:
        """
        Return the trimmed name.

        Raises:
            ValidationError: If the name is missing or blank
        """
        name = (self.name or "").strip()
        if not name:
            raise ValidationError.for_field("name", required_message, code="REQUIRED")
        return name


@dataclass(frozen=True, slots=True)
class NamedRecordChanges:
    """Partial update; None means 'keep the current value'."""

    id: int | None = None
    name: str | None = None
    is_active: bool | None = None
