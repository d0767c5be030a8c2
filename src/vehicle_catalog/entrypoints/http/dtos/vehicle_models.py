from pydantic import BaseModel, ConfigDict, Field


class ModelsQueryDTO(BaseModel):
    """Query parameters for listing vehicle models."""

    id: str | None = Field(default=None, description="Exact identifier", examples=["1"])
    brand_id: str | None = Field(default=None, description="Exact brand identifier", examples=["2"])
    q: str | None = Field(
        default=None,
        description="Case-insensitive substring of '<name> <version>'",
        examples=["corolla"],
    )
    active: str | None = Field(
        default=None,
        description="'true' or 'false'; any other value applies no filter",
        examples=["true"],
    )


class ModelResponseDTO(BaseModel):
    id: int
    name: str
    year: int
    version: str
    brand_id: int
    is_active: bool
    created_at: str
    updated_at: str


class ModelCreateDTO(BaseModel):
    name: str | None = Field(default=None, examples=["Corolla"])
    year: int | None = Field(default=None, examples=[2022])
    version: str | None = Field(default=None, examples=["XEi CVT"])
    brand_id: int | None = Field(default=None, examples=[1])

    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        json_schema_extra={
            "example": {"name": "Corolla", "year": 2022, "version": "XEi CVT", "brand_id": 1}
        },
    )


class ModelUpdateDTO(BaseModel):
    """Partial update; omitted fields keep their current value."""

    id: int | None = None
    name: str | None = None
    year: int | None = None
    version: str | None = None
    brand_id: int | None = None
    is_active: bool | None = None

    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        json_schema_extra={"example": {"id": 5, "name": "Corolla Cross"}},
    )
