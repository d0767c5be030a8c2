from pydantic import BaseModel, ConfigDict, Field


class ClientsQueryDTO(BaseModel):
    """Query parameters for listing clients."""

    model_config = ConfigDict(protected_namespaces=())

    id: str | None = Field(default=None, description="Exact identifier")
    brand_id: str | None = Field(default=None, description="Exact brand identifier")
    model_id: str | None = Field(default=None, description="Exact model identifier")
    q: str | None = Field(
        default=None,
        description="Case-insensitive substring of dni, placa, vin, email or celular",
    )
    active: str | None = Field(
        default=None,
        description="Filter on estado: 'true' or 'false'; any other value applies no filter",
    )


class ClientResponseDTO(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    id: int
    dni: str
    placa: str
    vin: str
    kms: int
    celular: str
    email: str
    estado: bool
    model_id: int
    brand_id: int
    created_at: str
    updated_at: str


class ClientCreateDTO(BaseModel):
    """Request payload for registering a client."""

    dni: str | None = None
    placa: str | None = None
    vin: str | None = None
    kms: int | None = None
    celular: str | None = None
    email: str | None = None
    estado: bool | None = None
    model_id: int | None = None
    brand_id: int | None = None

    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        protected_namespaces=(),
        json_schema_extra={
            "example": {
                "dni": "40123456",
                "placa": "abc-123",
                "vin": "9BWZZZ377VT004251",
                "kms": 42000,
                "celular": "987654321",
                "email": "Ana@Example.com",
                "estado": True,
                "model_id": 3,
                "brand_id": 1,
            }
        },
    )


class ClientUpdateDTO(BaseModel):
    """Partial update; omitted fields keep their current value."""

    id: int | None = None
    dni: str | None = None
    placa: str | None = None
    vin: str | None = None
    kms: int | None = None
    celular: str | None = None
    email: str | None = None
    estado: bool | None = None
    model_id: int | None = None
    brand_id: int | None = None

    model_config = ConfigDict(coerce_numbers_to_str=True, protected_namespaces=())
