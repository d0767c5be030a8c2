"""Domain error classes.

Protocol-agnostic errors that represent business failures.
These errors are translated to HTTP responses by the entrypoint layer.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Contains business error information that can be translated
    to any transport format.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Examples:
        - Required field missing or blank
        - Duplicate unique key (brand name, client DNI, ...)
        - Malformed identifier

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "name", "message": "Nombre requerido"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "; ".join(error["message"] for error in errors)
        else:
            self.errors = None
            msg = message or "Datos inválidos"

        super().__init__(msg, **context)

    @classmethod
    def for_field(cls, field: str, message: str, code: str = "INVALID_VALUE") -> "ValidationError":
        """Shortcut for the common single-field failure."""
        return cls(message, errors=[{"field": field, "message": message, "code": code}])

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Brand with ID not found on update
        - Client with ID not found on delete

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(
        self,
        resource: str,
        identifier: str | None = None,
        message: str | None = None,
        **context: Any,
    ) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Marca", "Cliente")
            identifier: Resource identifier
            message: Overrides the generated message (grammatical gender varies)
            **context: Additional context
        """
        if message is None:
            message = f"{resource} no encontrado"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class InternalError(DomainError):
    """Internal error (unexpected conditions, unreadable persisted state).

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"
