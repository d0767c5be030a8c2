from pydantic import BaseModel, ConfigDict, Field


class NamedRecordsQueryDTO(BaseModel):
    """Query parameters for listing brands or vehicle types."""

    id: str | None = Field(
        default=None,
        description="Exact identifier",
        examples=["1"],
    )
    q: str | None = Field(
        default=None,
        description="Case-insensitive substring of the name",
        examples=["toy"],
    )
    active: str | None = Field(
        default=None,
        description="'true' or 'false'; any other value applies no filter",
        examples=["true"],
    )


class NamedRecordResponseDTO(BaseModel):
    id: int
    name: str
    is_active: bool
    created_at: str
    updated_at: str


class NamedRecordCreateDTO(BaseModel):
    """Request payload for creating a brand or vehicle type."""

    name: str | None = Field(default=None, examples=["Toyota"])

    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        json_schema_extra={"example": {"name": "Toyota"}},
    )


class NamedRecordUpdateDTO(BaseModel):
    """Partial update; omitted fields keep their current value."""

    id: int | None = Field(default=None, examples=[1])
    name: str | None = Field(default=None, examples=["Toyota"])
    is_active: bool | None = Field(default=None, examples=[False])

    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        json_schema_extra={"example": {"id": 1, "is_active": False}},
    )
