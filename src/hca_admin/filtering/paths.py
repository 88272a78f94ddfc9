"""
Attribute path resolution over a SQLAlchemy ``Select``.

A :class:`PathContext` is a point in a query's FROM clause. It offers two
capabilities:

- ``attribute(name)`` returns the column attribute of the current entity;
- ``join(name)`` follows a to-one relationship to a freshly aliased target
  and returns the context for that target.

:func:`resolve_path` walks a dotted path (``"district.name"``) by joining
every segment except the last and reading the last as an attribute.

Joins are collected on the root context and applied to the statement with
:meth:`PathContext.apply_joins` once all predicates and sort clauses have
been resolved. Every ``join`` call adds a new alias; repeated paths are not
deduplicated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic.alias_generators import to_snake
from sqlalchemy.orm import RelationshipProperty, aliased
from sqlalchemy.orm.attributes import QueryableAttribute

from ..exceptions import UnknownFieldError

if TYPE_CHECKING:
    from sqlalchemy.sql import Select


@dataclass(frozen=True)
class JoinClause:
    target: Any
    outer: bool = False


class PathContext:
    """Resolution capability for one entity (model class or alias) in a query."""

    def __init__(self, entity: Any, joins: list[JoinClause], label: str) -> None:
        self._entity = entity
        self._joins = joins
        self._label = label

    @classmethod
    def root(cls, model: type[Any]) -> PathContext:
        return cls(model, [], model.__name__)

    @property
    def entity(self) -> Any:
        return self._entity

    @property
    def joins(self) -> tuple[JoinClause, ...]:
        return tuple(self._joins)

    def attribute(self, name: str) -> QueryableAttribute[Any]:
        """Return the mapped attribute ``name`` of the current entity.

        Grid column ids are camelCase; when ``name`` is not an attribute its
        snake_case form is tried as well.
        """
        for candidate in (name, to_snake(name)):
            attr = getattr(self._entity, candidate, None)
            if isinstance(attr, QueryableAttribute):
                return attr
        raise UnknownFieldError(self._label, name)

    def join(self, name: str, *, outer: bool = False) -> PathContext:
        """Join the relationship ``name`` and return the context of its target."""
        relationship = self.attribute(name)
        prop = relationship.property
        if not isinstance(prop, RelationshipProperty):
            raise UnknownFieldError(self._label, name)
        target = aliased(prop.mapper.class_)
        self._joins.append(JoinClause(relationship.of_type(target), outer))
        return PathContext(target, self._joins, prop.mapper.class_.__name__)

    def apply_joins(self, stmt: Select[Any]) -> Select[Any]:
        for clause in self._joins:
            stmt = stmt.join(clause.target, isouter=clause.outer)
        return stmt


def resolve_path(
    context: PathContext, path: str, *, outer: bool = False
) -> QueryableAttribute[Any]:
    """Resolve a dotted attribute path, joining every segment but the last."""
    head, _, rest = path.partition(".")
    if not rest:
        return context.attribute(head)
    return resolve_path(context.join(head, outer=outer), rest, outer=outer)
