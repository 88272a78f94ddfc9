"""Reusable domain mixins."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class AuditableMixin(BaseModel):
    """Mixin that adds created_on / updated_on timestamps."""

    created_on: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_on: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
