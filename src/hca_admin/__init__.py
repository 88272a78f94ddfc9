"""Tehsil administration service with server-side grid table queries."""

from __future__ import annotations

from .config import TableQuerySettings
from .domain import District, DistrictRef, IdName, Tehsil
from .exceptions import (
    FilterParseError,
    HcaAdminError,
    InvalidPageRequestError,
    UnknownFieldError,
    ValidationError,
)
from .filtering import PageRequest, Sort, TableQueryTranslator
from .services import PaginatedResponse, TehsilService

__all__ = [
    "District",
    "DistrictRef",
    "FilterParseError",
    "HcaAdminError",
    "IdName",
    "InvalidPageRequestError",
    "PageRequest",
    "PaginatedResponse",
    "Sort",
    "TableQuerySettings",
    "TableQueryTranslator",
    "Tehsil",
    "TehsilService",
    "UnknownFieldError",
    "ValidationError",
]
