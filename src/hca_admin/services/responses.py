"""Response envelopes returned by the service layer."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    """
    One page of a grid table.

    ``total_count`` (``totalCount`` on the wire) is the number of rows in
    the whole table, not the number matching the current filters.
    """

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    items: list[T]
    total_count: int
