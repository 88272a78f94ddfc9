"""
Compile a specification and a page request into a SQLAlchemy ``Select``.

The specification is evaluated first so that its joins are registered on
the root context, then the sort order (which joins dotted paths with
outer joins), and only then are all joins applied to the statement.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, asc, desc, select

from .paths import PathContext, resolve_path

if TYPE_CHECKING:
    from .pagination import PageRequest, Sort
    from .specification import Specification


def build_page_select(
    model: type[Any],
    spec: Specification | None,
    page: PageRequest,
) -> Select[Any]:
    """Return ``SELECT model ... WHERE spec ORDER BY sort LIMIT size OFFSET``."""
    root = PathContext.root(model)
    predicate = spec(root) if spec is not None else None
    order_clauses = _order_clauses(root, page.sort)

    stmt = root.apply_joins(select(model))
    if predicate is not None:
        stmt = stmt.where(predicate)
    if order_clauses:
        stmt = stmt.order_by(*order_clauses)
    return stmt.limit(page.size).offset(page.offset)


def _order_clauses(root: PathContext, sort: Sort) -> list[Any]:
    clauses: list[Any] = []
    for order in sort.orders:
        column = resolve_path(root, order.field, outer=True)
        clauses.append(desc(column) if order.is_descending else asc(column))
    return clauses
