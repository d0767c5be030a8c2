from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar, Mapping

from vehicle_catalog.domain.errors import ValidationError
from vehicle_catalog.domain.store import as_int, from_iso, to_iso


@dataclass(frozen=True, slots=True)
class Price:
    """Price of one (model, subtype) combination."""

    COLLECTION: ClassVar[str] = "prices"
    RESOURCE: ClassVar[str] = "Precio"
    NOT_FOUND_MESSAGE: ClassVar[str] = "Precio no encontrado"

    id: int
    model_id: int
    subtype_id: int
    price: Decimal
    created_at: datetime
    updated_at: datetime

    @property
    def key(self) -> tuple[int, int]:
        return (self.model_id, self.subtype_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "model_id": self.model_id,
            "subtype_id": self.subtype_id,
            "price": decimal_to_json(self.price),
            "created_at": to_iso(self.created_at),
            "updated_at": to_iso(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Price:
        return cls(
            id=as_int(data.get("id")),
            model_id=as_int(data.get("model_id")),
            subtype_id=as_int(data.get("subtype_id")),
            price=parse_price(data.get("price")) or Decimal("0"),
            created_at=from_iso(data.get("created_at")),
            updated_at=from_iso(data.get("updated_at")),
        )


@dataclass(frozen=True, slots=True)
class PriceListing:
    """
    Price row enriched with its model, brand, subtype and type names.

    brand_name / type_name are None when the parent record no longer exists.
    """

    price: Price
    model_name: str
    year: int
    version: str
    brand_name: str | None
    subtype_name: str
    type_name: str | None


@dataclass(frozen=True, slots=True)
class PriceFilters:
    id: int | None = None
    model_id: int | None = None
    subtype_id: int | None = None

    def matches(self, price: Price) -> bool:
        if self.id is not None and price.id != self.id:
            return False
        if self.model_id is not None and price.model_id != self.model_id:
            return False
        if self.subtype_id is not None and price.subtype_id != self.subtype_id:
            return False
        return True


@dataclass(frozen=True, slots=True)
class PriceEntry:
    model_id: int
    subtype_id: int
    price: Decimal


@dataclass(frozen=True, slots=True)
class PriceMatrix:
    """Bulk price input: model_id -> subtype_id -> price."""

    entries: tuple[PriceEntry, ...]

    @classmethod
    def parse(cls, data: Mapping[Any, Any]) -> PriceMatrix:
        """
        Flatten the nested mapping into entries.

        Cells with an empty, zero or non-numeric price are skipped.

        Raises:
            ValidationError: If a model or subtype key is not an integer identifier,
                or a model maps to something other than an object
        """
        entries = []
        for raw_model_id, cells in data.items():
            model_id = _parse_identifier(raw_model_id, "model_id")
            if not isinstance(cells, Mapping):
                raise ValidationError.for_field(
                    str(raw_model_id), "Matriz de precios inválida", code="INVALID_MATRIX"
                )
            for raw_subtype_id, raw_price in cells.items():
                subtype_id = _parse_identifier(raw_subtype_id, "subtype_id")
                price = parse_price(raw_price)
                if price is None:
                    continue
                entries.append(PriceEntry(model_id=model_id, subtype_id=subtype_id, price=price))

        return cls(entries=tuple(entries))


@dataclass(frozen=True, slots=True)
class PriceChanges:
    """Partial update; None means 'keep the current value'."""

    id: int | None = None
    model_id: int | None = None
    subtype_id: int | None = None
    price: Decimal | None = None

    def validate(self) -> None:
        if self.model_id is not None and not self.model_id:
            raise ValidationError.for_field("model_id", "Modelo inválido")
        if self.subtype_id is not None and not self.subtype_id:
            raise ValidationError.for_field("subtype_id", "Subtipo inválido")
        if self.price is not None and not is_storable_price(self.price):
            raise ValidationError.for_field("price", "Precio inválido")


def parse_price(value: Any) -> Decimal | None:
    """Numeric coercion for loosely typed prices; None when the cell carries no price."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        price = value
    elif isinstance(value, (int, float, str)):
        try:
            price = Decimal(str(value).strip())
        except InvalidOperation:
            return None
    else:
        return None

    if not is_storable_price(price):
        return None
    return price


def is_storable_price(price: Decimal) -> bool:
    """Non-zero and still non-zero and finite once stored as a JSON float."""
    if not price.is_finite() or not price:
        return False
    as_float = float(price)
    return math.isfinite(as_float) and as_float != 0


def decimal_to_json(value: Decimal) -> int | float:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def _parse_identifier(raw: Any, field: str) -> int:
    try:
        identifier = int(str(raw).strip())
    except ValueError:
        identifier = 0
    if identifier <= 0:
        raise ValidationError.for_field(field, f"Identificador inválido: {raw}", code="INVALID_ID")
    return identifier
