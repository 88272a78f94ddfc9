"""Paging primitives for table queries."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field as dataclass_field
from typing import Generic, TypeVar

from ..exceptions import InvalidPageRequestError

T = TypeVar("T")


class Direction(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Order:
    field: str
    direction: Direction = Direction.ASC

    @property
    def is_descending(self) -> bool:
        return self.direction is Direction.DESC


@dataclass(frozen=True)
class Sort:
    """Ordered sequence of :class:`Order`; empty means unsorted."""

    orders: tuple[Order, ...] = ()

    @classmethod
    def unsorted(cls) -> Sort:
        return cls()

    @classmethod
    def by(cls, direction: Direction, field: str) -> Sort:
        return cls((Order(field, direction),))

    @property
    def is_sorted(self) -> bool:
        return bool(self.orders)


@dataclass(frozen=True)
class PageRequest:
    """
    Zero-based page index, page size and sort order.

    ``offset`` is ``page * size``. Construction rejects a negative page
    index and a size below one.
    """

    page: int
    size: int
    sort: Sort = dataclass_field(default_factory=Sort.unsorted)

    def __post_init__(self) -> None:
        if self.page < 0:
            raise InvalidPageRequestError(
                f"Page index must not be less than zero, got {self.page}"
            )
        if self.size < 1:
            raise InvalidPageRequestError(
                f"Page size must not be less than one, got {self.size}"
            )

    @classmethod
    def of(cls, page: int, size: int, sort: Sort | None = None) -> PageRequest:
        return cls(page, size, sort or Sort.unsorted())

    @classmethod
    def from_offset(
        cls, start: int, size: int, sort: Sort | None = None
    ) -> PageRequest:
        """Map a grid's row offset onto the page containing it.

        ``from_offset(10, 5)`` is page 2; ``from_offset(7, 5)`` is page 1,
        so a start that is not a multiple of ``size`` is floored.
        """
        if size < 1:
            raise InvalidPageRequestError(
                f"Page size must not be less than one, got {size}"
            )
        return cls.of(start // size, size, sort)

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of query results together with the request that produced it."""

    content: list[T]
    request: PageRequest

    def __len__(self) -> int:
        return len(self.content)
