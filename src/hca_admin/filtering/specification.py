"""Specification — a predicate builder evaluated against a query's root."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from sqlalchemy import and_, false, or_

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy import ColumnElement

    from .paths import PathContext


class Specification(Protocol):
    """
    Callable that turns a query root into a WHERE predicate.

    Returning ``None`` means "no restriction". Joins needed by the
    predicate are registered on ``root`` while it is being built.
    """

    def __call__(self, root: PathContext) -> ColumnElement[bool] | None: ...


def conjunction(
    predicates: Sequence[ColumnElement[bool]],
) -> ColumnElement[bool] | None:
    """AND the predicates together; an empty sequence restricts nothing."""
    if not predicates:
        return None
    if len(predicates) == 1:
        return predicates[0]
    return and_(*predicates)


def disjunction(predicates: Sequence[ColumnElement[bool]]) -> ColumnElement[bool]:
    """OR the predicates together; an empty sequence matches nothing."""
    if not predicates:
        return false()
    if len(predicates) == 1:
        return predicates[0]
    return or_(*predicates)
