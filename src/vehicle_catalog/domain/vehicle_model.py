from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar

from vehicle_catalog.domain.errors import ValidationError
from vehicle_catalog.domain.store import as_int, as_text, contains_text, from_iso, to_iso


@dataclass(frozen=True, slots=True)
class VehicleModel:
    COLLECTION: ClassVar[str] = "models"
    RESOURCE: ClassVar[str] = "Modelo"
    NOT_FOUND_MESSAGE: ClassVar[str] = "Modelo no encontrado"

    id: int
    name: str
    year: int
    version: str
    brand_id: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "year": self.year,
            "version": self.version,
            "brand_id": self.brand_id,
            "is_active": self.is_active,
            "created_at": to_iso(self.created_at),
            "updated_at": to_iso(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VehicleModel:
        return cls(
            id=as_int(data.get("id")),
            name=as_text(data.get("name")),
            year=as_int(data.get("year")),
            version=as_text(data.get("version")),
            brand_id=as_int(data.get("brand_id")),
            is_active=bool(data.get("is_active", False)),
            created_at=from_iso(data.get("created_at")),
            updated_at=from_iso(data.get("updated_at")),
        )


@dataclass(frozen=True, slots=True)
class ModelFilters:
    id: int | None = None
    brand_id: int | None = None
    q: str | None = None  # matches "<name> <version>"
    active: bool | None = None

    def matches(self, model: VehicleModel) -> bool:
        if self.id is not None and model.id != self.id:
            return False
        if self.brand_id is not None and model.brand_id != self.brand_id:
            return False
        if not contains_text(self.q, model.name, model.version):
            return False
        if self.active is not None and model.is_active != self.active:
            return False
        return True


@dataclass(frozen=True, slots=True)
class NewVehicleModel:
    name: str | None = None
    year: int | None = None
    version: str | None = None
    brand_id: int | None = None

    def validate(self) -> None:
        """
        Raises:
            ValidationError: If name, year or brand_id is missing, blank or zero
        """
        missing = []
        if not (self.name or "").strip():
            missing.append("name")
        if not self.year:
            missing.append("year")
        if not self.brand_id:
            missing.append("brand_id")

        if missing:
            raise ValidationError(
                f"Campos obligatorios faltantes: {', '.join(missing)}",
                errors=[
                    {"field": field, "message": "Campo obligatorio", "code": "REQUIRED"}
                    for field in missing
                ],
            )


@dataclass(frozen=True, slots=True)
class VehicleModelChanges:
    """Partial update; None means 'keep the current value'."""

    id: int | None = None
    name: str | None = None
    year: int | None = None
    version: str | None = None
    brand_id: int | None = None
    is_active: bool | None = None

    def validate(self) -> None:
        if self.name is not None and not self.name.strip():
            raise ValidationError.for_field("name", "Nombre requerido", code="REQUIRED")
        if self.year is not None and not self.year:
            raise ValidationError.for_field("year", "Año inválido")
        if self.brand_id is not None and not self.brand_id:
            raise ValidationError.for_field("brand_id", "Marca inválida")
