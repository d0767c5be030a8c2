from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from vehicle_catalog.domain.named_record import NamedRecord


@dataclass(frozen=True, slots=True)
class VehicleType(NamedRecord):
    """Body type of a vehicle (e.g. Sedán, SUV), parent of subtypes."""

    COLLECTION: ClassVar[str] = "types"
    RESOURCE: ClassVar[str] = "Tipo"
    NOT_FOUND_MESSAGE: ClassVar[str] = "Tipo no encontrado"
    NAME_REQUIRED_MESSAGE: ClassVar[str] = "Nombre obligatorio"
    DUPLICATE_NAME_MESSAGE: ClassVar[str] = "Tipo ya existe"
