"""Application services."""

from __future__ import annotations

from .responses import PaginatedResponse
from .tehsil import TehsilService

__all__ = ["PaginatedResponse", "TehsilService"]
