"""Abstract collaborators of the service layer."""

from __future__ import annotations

from .repository import ITehsilReferenceCounter, ITehsilRepository
from .unit_of_work import UnitOfWork

__all__ = [
    "ITehsilReferenceCounter",
    "ITehsilRepository",
    "UnitOfWork",
]
