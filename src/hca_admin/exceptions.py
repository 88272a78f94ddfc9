"""Exceptions for hca-admin."""

from __future__ import annotations


class HcaAdminError(Exception):
    """Root exception for the hca-admin service."""


class ValidationError(HcaAdminError):
    """Raised when caller supplied input is invalid.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))


class FilterParseError(ValidationError):
    """Raised when a sort or filter descriptor cannot be decoded."""


class UnknownFieldError(ValidationError):
    """Raised when a descriptor names an attribute the model does not have."""

    def __init__(self, model: str, field: str) -> None:
        self.model = model
        self.field = field
        super().__init__({field: [f"{model} has no attribute {field!r}"]})


class InvalidPageRequestError(ValueError):
    """Raised for a page index below zero or a page size below one."""


class InfrastructureError(HcaAdminError):
    """Base class for all infrastructure-related errors."""


class PersistenceError(InfrastructureError):
    """Base class for all persistence-related errors."""


class SessionManagementError(PersistenceError):
    """Raised when session creation or management fails."""


class UnitOfWorkError(PersistenceError):
    """Raised when Unit of Work operations fail."""


__all__: list[str] = [
    "FilterParseError",
    "HcaAdminError",
    "InfrastructureError",
    "InvalidPageRequestError",
    "PersistenceError",
    "SessionManagementError",
    "UnitOfWorkError",
    "UnknownFieldError",
    "ValidationError",
]
