from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from vehicle_catalog.domain.named_record import NamedRecord


@dataclass(frozen=True, slots=True)
class Brand(NamedRecord):
    COLLECTION: ClassVar[str] = "brands"
    RESOURCE: ClassVar[str] = "Marca"
    NOT_FOUND_MESSAGE: ClassVar[str] = "Marca no encontrada"
    NAME_REQUIRED_MESSAGE: ClassVar[str] = "Nombre requerido"
    DUPLICATE_NAME_MESSAGE: ClassVar[str] = "Marca ya existe"
