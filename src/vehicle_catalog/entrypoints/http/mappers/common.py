from __future__ import annotations

from vehicle_catalog.domain.errors import ValidationError


def parse_query_id(value: str | None, field: str) -> int | None:
    """
    Converts an optional identifier query parameter to int.

    Empty values apply no filter, like a missing parameter.

    Raises:
        ValidationError: If the value is present but not an integer
    """
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError:
        raise ValidationError.for_field(field, f"Identificador inválido: {value}", code="INVALID_ID")
