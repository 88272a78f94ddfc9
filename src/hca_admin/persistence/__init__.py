"""SQLAlchemy persistence adapter."""

from __future__ import annotations

from .models import (
    AuditableModelMixin,
    Base,
    DistrictModel,
    HospitalModel,
    TehsilModel,
    UserAccountModel,
)
from .repository import (
    HospitalRepository,
    SQLAlchemyRepository,
    TehsilRepository,
    UserAccountRepository,
)
from .uow import SQLAlchemyUnitOfWork

__all__ = [
    "AuditableModelMixin",
    "Base",
    "DistrictModel",
    "HospitalModel",
    "HospitalRepository",
    "SQLAlchemyRepository",
    "SQLAlchemyUnitOfWork",
    "TehsilModel",
    "TehsilRepository",
    "UserAccountModel",
    "UserAccountRepository",
]
