"""Administrative region entities: District and its Tehsils."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .aggregate import AggregateRoot
from .mixins import AuditableMixin


class IdName(BaseModel):
    """``{id, name}`` projection row used by dropdown lookups."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    name: str


class DistrictRef(IdName):
    """Read-only reference to a Tehsil's parent District."""


class District(AggregateRoot[int], AuditableMixin):
    name: str


class Tehsil(AggregateRoot[int], AuditableMixin):
    """
    Administrative sub-region, child of a District.

    ``district_id`` is the writable link; ``district`` is the joined
    id/name pair filled in when the Tehsil is loaded from storage.
    """

    name: str
    district_id: int | None = None
    district: DistrictRef | None = None
