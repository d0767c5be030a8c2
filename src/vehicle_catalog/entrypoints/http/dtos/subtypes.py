from pydantic import BaseModel, ConfigDict, Field


class SubtypesQueryDTO(BaseModel):
    """Query parameters for listing subtypes."""

    id: str | None = Field(default=None, description="Exact identifier")
    type_id: str | None = Field(default=None, description="Exact type identifier")
    q: str | None = Field(default=None, description="Case-insensitive substring of '<name> <version>'")
    active: str | None = Field(
        default=None,
        description="'true' or 'false'; any other value applies no filter",
    )


class SubtypeResponseDTO(BaseModel):
    id: int
    name: str
    type_id: int
    year: int | None
    version: str
    is_active: bool
    created_at: str
    updated_at: str


class SubtypeListingResponseDTO(SubtypeResponseDTO):
    type_name: str | None


class SubtypeCreateDTO(BaseModel):
    name: str | None = Field(default=None, examples=["Sedán 4 puertas"])
    type_id: int | None = Field(default=None, examples=[1])
    year: int | None = Field(default=None, examples=[2023])
    version: str | None = Field(default=None, examples=["Full"])

    model_config = ConfigDict(coerce_numbers_to_str=True)


class SubtypeUpdateDTO(BaseModel):
    """Partial update; omitted fields keep their current value. year=0 clears the year."""

    id: int | None = None
    name: str | None = None
    type_id: int | None = None
    year: int | None = None
    version: str | None = None
    is_active: bool | None = None

    model_config = ConfigDict(coerce_numbers_to_str=True)
