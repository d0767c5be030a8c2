from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar, Iterable

from vehicle_catalog.domain.errors import ValidationError
from vehicle_catalog.domain.store import as_int, as_text, contains_text, from_iso, to_iso


# Messages for each independently unique field
UNIQUE_FIELD_MESSAGES = {
    "dni": "DNI ya registrado",
    "email": "Email ya registrado",
    "placa": "Placa ya registrada",
}


@dataclass(frozen=True, slots=True)
class Client:
    """
    Workshop client and the vehicle they own.

    dni, email and placa are each unique across the store.
    placa is stored upper-case and email lower-case.
    """

    COLLECTION: ClassVar[str] = "clients"
    RESOURCE: ClassVar[str] = "Cliente"
    NOT_FOUND_MESSAGE: ClassVar[str] = "Cliente no encontrado"

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
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "dni": self.dni,
            "placa": self.placa,
            "vin": self.vin,
            "kms": self.kms,
            "celular": self.celular,
            "email": self.email,
            "estado": self.estado,
            "model_id": self.model_id,
            "brand_id": self.brand_id,
            "created_at": to_iso(self.created_at),
            "updated_at": to_iso(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Client:
        return cls(
            id=as_int(data.get("id")),
            dni=as_text(data.get("dni")),
            placa=as_text(data.get("placa")),
            vin=as_text(data.get("vin")),
            kms=as_int(data.get("kms")),
            celular=as_text(data.get("celular")),
            email=as_text(data.get("email")),
            estado=bool(data.get("estado", False)),
            model_id=as_int(data.get("model_id")),
            brand_id=as_int(data.get("brand_id")),
            created_at=from_iso(data.get("created_at")),
            updated_at=from_iso(data.get("updated_at")),
        )


def normalize_dni(value: str) -> str:
    return value.strip()


def normalize_placa(value: str) -> str:
    return value.strip().upper()


def normalize_email(value: str) -> str:
    return value.strip().lower()


def ensure_unique(
    clients: Iterable[Client],
    candidate: dict[str, str],
    exclude_id: int | None = None,
) -> None:
    """
    Check dni/email/placa values against existing clients.

    Args:
        clients: Current store contents
        candidate: Normalized values keyed by field name; only the given fields are checked
        exclude_id: Client being updated, ignored in the comparison

    Raises:
        ValidationError: Listing every field whose value belongs to another client
    """
    others = [client for client in clients if client.id != exclude_id]
    errors = []
    for field, value in candidate.items():
        if not value:
            continue
        if any(getattr(client, field) == value for client in others):
            errors.append(
                {"field": field, "message": UNIQUE_FIELD_MESSAGES[field], "code": "DUPLICATE"}
            )

    if errors:
        raise ValidationError(errors=errors)


@dataclass(frozen=True, slots=True)
class ClientFilters:
    id: int | None = None
    brand_id: int | None = None
    model_id: int | None = None
    q: str | None = None  # matches dni, placa, vin, email or celular
    active: bool | None = None

    def matches(self, client: Client) -> bool:
        if self.id is not None and client.id != self.id:
            return False
        if self.brand_id is not None and client.brand_id != self.brand_id:
            return False
        if self.model_id is not None and client.model_id != self.model_id:
            return False
        if not contains_text(
            self.q, client.dni, client.placa, client.vin, client.email, client.celular
        ):
            return False
        if self.active is not None and client.estado != self.active:
            return False
        return True


@dataclass(frozen=True, slots=True)
class NewClient:
    dni: str | None = None
    placa: str | None = None
    vin: str | None = None
    kms: int | None = None
    celular: str | None = None
    email: str | None = None
    estado: bool = False
    model_id: int | None = None
    brand_id: int | None = None

    def normalized(self) -> NewClient:
        return NewClient(
            dni=normalize_dni(self.dni or ""),
            placa=normalize_placa(self.placa or ""),
            vin=(self.vin or "").strip(),
            kms=self.kms or 0,
            celular=(self.celular or "").strip(),
            email=normalize_email(self.email or ""),
            estado=self.estado,
            model_id=self.model_id or 0,
            brand_id=self.brand_id or 0,
        )

    def validate(self) -> None:
        """
        Expects a normalized instance.

        Raises:
            ValidationError: Naming every missing, blank or zero field
        """
        required = ("dni", "placa", "vin", "kms", "celular", "email", "model_id", "brand_id")
        missing = [field for field in required if not getattr(self, field)]
        if missing:
            raise ValidationError(
                f"Datos incompletos: {', '.join(missing)}",
                errors=[
                    {"field": field, "message": "Campo obligatorio", "code": "REQUIRED"}
                    for field in missing
                ],
            )


@dataclass(frozen=True, slots=True)
class ClientChanges:
    """Partial update; None means 'keep the current value'."""

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

    def normalized(self) -> ClientChanges:
        return ClientChanges(
            id=self.id,
            dni=None if self.dni is None else normalize_dni(self.dni),
            placa=None if self.placa is None else normalize_placa(self.placa),
            vin=None if self.vin is None else self.vin.strip(),
            kms=self.kms,
            celular=None if self.celular is None else self.celular.strip(),
            email=None if self.email is None else normalize_email(self.email),
            estado=self.estado,
            model_id=self.model_id,
            brand_id=self.brand_id,
        )

    def validate(self) -> None:
        """Provided fields must still satisfy the create-time requirements."""
        blank = [
            field
            for field in ("dni", "placa", "vin", "kms", "celular", "email", "model_id", "brand_id")
            if getattr(self, field) is not None and not getattr(self, field)
        ]
        if blank:
            raise ValidationError(
                f"Datos incompletos: {', '.join(blank)}",
                errors=[
                    {"field": field, "message": "Campo obligatorio", "code": "REQUIRED"}
                    for field in blank
                ],
            )

    def unique_fields(self) -> dict[str, str]:
        return {
            field: value
            for field, value in (("dni", self.dni), ("email", self.email), ("placa", self.placa))
            if value is not None
        }
