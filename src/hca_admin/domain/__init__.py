"""Domain entities."""

from __future__ import annotations

from .aggregate import AggregateRoot
from .mixins import AuditableMixin
from .regions import District, DistrictRef, IdName, Tehsil

__all__ = [
    "AggregateRoot",
    "AuditableMixin",
    "District",
    "DistrictRef",
    "IdName",
    "Tehsil",
]
