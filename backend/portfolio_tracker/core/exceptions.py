"""Domain exceptions raised by the service layer.

The API layer maps each class to an HTTP status code through
``status_code``; services never raise ``HTTPException`` themselves.
"""

from typing import Any, Dict, Optional

from fastapi import status


class DomainException(Exception):
    """Base exception class for all domain errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_error_code: str = "DOMAIN_ERROR"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(message)


class ValidationError(DomainException):
    """A required field is missing or a value breaks a domain rule."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_error_code = "VALIDATION_ERROR"


class ConflictError(DomainException):
    """The operation would violate a uniqueness invariant."""

    status_code = status.HTTP_409_CONFLICT
    default_error_code = "CONFLICT"


class NotFoundError(DomainException):
    """The operation targets a row that does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_error_code = "NOT_FOUND"

    def __init__(self, resource: str, identifier: Any):
        super().__init__(
            message=f"{resource} {identifier} not found",
            details={"resource": resource, "id": str(identifier)},
        )
        self.resource = resource
        self.identifier = identifier
