"""REST API error response models.

Documents the failure envelope shared by every route in the OpenAPI schema.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual field-level error.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "dni",
                "message": "DNI ya registrado",
                "code": "DUPLICATE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Failure envelope.

    Examples:
        Simple error:
            {
                "message": "Marca no encontrada",
                "code": "NOT_FOUND"
            }

        Validation error with fields:
            {
                "message": "DNI ya registrado; Email ya registrado",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "dni", "message": "DNI ya registrado", "code": "DUPLICATE"},
                    {"field": "email", "message": "Email ya registrado", "code": "DUPLICATE"}
                ]
            }

        Internal error:
            {
                "message": "Error interno del servidor",
                "code": "INTERNAL_ERROR",
                "detail": "[Errno 13] Permission denied: 'data/brands.json'"
            }
    """

    message: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None
    detail: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"message": "Marca no encontrada", "code": "NOT_FOUND"},
                {
                    "message": "Nombre requerido",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {"field": "name", "message": "Nombre requerido", "code": "REQUIRED"},
                    ],
                },
                {
                    "message": "Error interno del servidor",
                    "code": "INTERNAL_ERROR",
                    "detail": "Expecting value: line 1 column 1 (char 0)",
                },
            ]
        }
    )


# Shared `responses=` block for route decorators
ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ErrorResponse, "description": "Validation error"},
    404: {"model": ErrorResponse, "description": "Record not found"},
    500: {"model": ErrorResponse, "description": "Internal error"},
}
