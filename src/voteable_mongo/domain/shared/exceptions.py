"""Base exception classes for domain-level errors."""

from __future__ import annotations


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when domain validation fails."""

    def __init__(self, message: str, field: str | None = None, code: str | None = None) -> None:
        super().__init__(message, code=code or "VALIDATION_ERROR")
        self.field = field


class InvalidArgumentError(ValidationError):
    """Raised when a vote call receives a missing or unparseable argument.

    Nothing has been sent to the store when this is raised.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, field=field, code="INVALID_ARGUMENT")


class UnsupportedOperationError(DomainError):
    """Raised when a call needs a capability that is not implemented."""

    def __init__(self, operation: str, message: str | None = None) -> None:
        msg = message or f"Operation '{operation}' is not supported"
        super().__init__(msg, code="UNSUPPORTED_OPERATION")
        self.operation = operation
