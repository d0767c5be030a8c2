from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar

from vehicle_catalog.domain.errors import ValidationError
from vehicle_catalog.domain.store import as_int, as_text, contains_text, from_iso, to_iso


@dataclass(frozen=True, slots=True)
class Subtype:
    COLLECTION: ClassVar[str] = "subtypes"
    RESOURCE: ClassVar[str] = "Subtipo"
    NOT_FOUND_MESSAGE: ClassVar[str] = "Subtipo no encontrado"

    id: int
    name: str
    type_id: int
    year: int | None
    version: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type_id": self.type_id,
            "year": self.year,
            "version": self.version,
            "is_active": self.is_active,
            "created_at": to_iso(self.created_at),
            "updated_at": to_iso(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Subtype:
        return cls(
            id=as_int(data.get("id")),
            name=as_text(data.get("name")),
            type_id=as_int(data.get("type_id")),
            year=as_int(data.get("year")) or None,
            version=as_text(data.get("version")),
            is_active=bool(data.get("is_active", False)),
            created_at=from_iso(data.get("created_at")),
            updated_at=from_iso(data.get("updated_at")),
        )


@dataclass(frozen=True, slots=True)
class SubtypeListing:
    """Subtype joined with the name of its type (None when the type is gone)."""

    subtype: Subtype
    type_name: str | None


@dataclass(frozen=True, slots=True)
class SubtypeFilters:
    id: int | None = None
    type_id: int | None = None
    q: str | None = None  # matches "<name> <version>"
    active: bool | None = None

    def matches(self, subtype: Subtype) -> bool:
        if self.id is not None and subtype.id != self.id:
            return False
        if self.type_id is not None and subtype.type_id != self.type_id:
            return False
        if not contains_text(self.q, subtype.name, subtype.version):
            return False
        if self.active is not None and subtype.is_active != self.active:
            return False
        return True


@dataclass(frozen=True, slots=True)
class NewSubtype:
    name: str | None = None
    type_id: int | None = None
    year: int | None = None
    version: str | None = None

    def validate(self) -> None:
        errors = []
        if not (self.name or "").strip():
            errors.append({"field": "name", "message": "Campo obligatorio", "code": "REQUIRED"})
        if not self.type_id:
            errors.append({"field": "type_id", "message": "Campo obligatorio", "code": "REQUIRED"})

        if errors:
            raise ValidationError("Nombre o tipo inválido", errors=errors)


@dataclass(frozen=True, slots=True)
class SubtypeChanges:
    """Partial update; None means 'keep the current value'."""

    id: int | None = None
    name: str | None = None
    type_id: int | None = None
    year: int | None = None
    version: str | None = None
    is_active: bool | None = None

    def validate(self) -> None:
        if self.name is not None and not self.name.strip():
            raise ValidationError.for_field("name", "Nombre o tipo inválido", code="REQUIRED")
        if self.type_id is not None and not self.type_id:
            raise ValidationError.for_field("type_id", "Nombre o tipo inválido")
