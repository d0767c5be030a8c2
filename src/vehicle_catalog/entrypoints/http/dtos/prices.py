from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class PricesQueryDTO(BaseModel):
    """Query parameters for listing prices."""

    model_config = ConfigDict(protected_namespaces=())

    id: str | None = Field(default=None, description="Exact identifier")
    model_id: str | None = Field(default=None, description="Exact model identifier")
    subtype_id: str | None = Field(default=None, description="Exact subtype identifier")


class PriceResponseDTO(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    id: int
    model_id: int
    subtype_id: int
    price: int | float
    created_at: str
    updated_at: str


class PriceListingResponseDTO(PriceResponseDTO):
    """Price joined with model, brand, subtype and type names."""

    model_name: str
    year: int
    version: str
    brand_name: str | None
    subtype_name: str
    type_name: str | None


class PriceUpdateDTO(BaseModel):
    """Partial update; omitted fields keep their current value."""

    id: int | None = None
    model_id: int | None = None
    subtype_id: int | None = None
    price: Decimal | None = Field(default=None, examples=["185000.00"])

    model_config = ConfigDict(
        protected_namespaces=(),
        json_schema_extra={"example": {"id": 3, "price": 185000}},
    )
