"""
Domain exceptions for the credit application service.

These represent business rule violations and integration failures. They are
raised by entities and services and translated to HTTP responses only in the
API layer.
"""

from typing import Any, Optional


class DomainError(Exception):
    """
    Base exception for all domain-related errors.

    Attributes:
        message: Human-readable error message
        code: Machine-readable error code (e.g., "AFFILIATE_NOT_FOUND")
        details: Additional context about the error
    """

    default_code = "DOMAIN_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainError):
    """Raised when an entity constructor or mutator receives invalid input."""

    default_code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, details=details)
        self.field = field


class StateError(DomainError):
    """Raised when a state transition is not allowed from the current state."""

    default_code = "INVALID_STATE_TRANSITION"

    def __init__(self, operation: str, current_state: str, message: Optional[str] = None):
        self.operation = operation
        self.current_state = current_state
        super().__init__(
            message or f"Cannot perform '{operation}' in state '{current_state}'",
            details={"operation": operation, "current_state": current_state},
        )


class AffiliateNotFoundError(DomainError):
    """
    Raised when an affiliate is unknown or not active.

    Both conditions share this error so callers cannot probe which
    affiliates exist.
    """

    default_code = "AFFILIATE_NOT_FOUND"

    def __init__(self, message: str = "Affiliate not found"):
        super().__init__(message)


class DuplicateAffiliateError(DomainError):
    """Raised when registering a document that already belongs to an affiliate."""

    default_code = "AFFILIATE_DUPLICATE"

    def __init__(self, document: str):
        self.document = document
        super().__init__("An affiliate with this document already exists")


class CreditApplicationNotFoundError(DomainError):
    """Raised when a credit application id does not exist."""

    default_code = "CREDIT_APPLICATION_NOT_FOUND"

    def __init__(self, application_id: int):
        self.application_id = application_id
        super().__init__(
            f"Credit application with ID {application_id} not found",
            details={"application_id": application_id},
        )


class ExternalServiceError(DomainError):
    """Raised when an external collaborator fails, times out or answers garbage."""

    default_code = "EXTERNAL_SERVICE_ERROR"

    def __init__(self, service: str, message: str):
        self.service = service
        super().__init__(message, details={"service": service})
