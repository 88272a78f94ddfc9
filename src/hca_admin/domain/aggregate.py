"""Aggregate Root base class with Generic ID support."""

from __future__ import annotations

from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

ID = TypeVar("ID", str, int, UUID)


class AggregateRoot(BaseModel, Generic[ID]):
    """Base class for all Aggregate Roots.

    Generic over ``ID`` to support UUID, int, or str primary keys. The id
    is ``None`` until the persistence layer assigns one on first save.

    Field names are snake_case in Python and camelCase on the wire, so an
    API layer can ``model_dump(by_alias=True)`` straight into a response::

        class Tehsil(AggregateRoot[int]):
            name: str

        Tehsil(name="Central").model_dump(by_alias=True)
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: ID | None = None

    @property
    def is_transient(self) -> bool:
        """True until the entity has been persisted and given an id."""
        return self.id is None
