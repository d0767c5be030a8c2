from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class EnvelopeDTO(BaseModel, Generic[T]):
    """Success envelope for single-record mutations."""

    ok: bool = True
    data: T


class OkDTO(BaseModel):
    ok: bool = True


class RecordIdDTO(BaseModel):
    """Body of DELETE requests."""

    id: int | None = Field(default=None, description="Identifier of the record to delete", examples=[1])
