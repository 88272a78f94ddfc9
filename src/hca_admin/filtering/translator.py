"""
TableQueryTranslator — grid sort/filter descriptors to a specification.

A UI grid describes its state with two JSON strings and a search box:

- sorting: ``[{"id": "name", "desc": true}]``
- filters: ``[{"id": "name", "value": "central"}, {"id": "id", "value": "5"}]``
- global filter: ``"central"``

Each column filter is classified (numeric, then instant, then text) and
turned into one predicate; the predicates are ANDed. The global filter adds
a single OR-group over the string fields, the id field and the timestamp
fields, ANDed with the column predicates.

An instant matches rows whose timestamp falls on the same calendar day in
``settings.time_zone``.

Malformed descriptors are logged and degrade: sorting becomes unsorted and
filtering yields no specification at all, which callers must treat as an
unusable query. With ``TableQuerySettings(strict_descriptors=True)`` a
:class:`~hca_admin.exceptions.FilterParseError` is raised instead.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import and_, func

from ..config import TableQuerySettings
from ..exceptions import FilterParseError
from .classifiers import (
    DEFAULT_CLASSIFIERS,
    Classified,
    ValueKind,
    classify,
    local_day_bounds,
    parse_instant,
    parse_int,
    to_local_date,
)
from .pagination import Direction, Sort
from .paths import PathContext, resolve_path
from .specification import Specification, conjunction, disjunction
from .syntax import ColumnFilter, decode_filters, decode_sorting

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from sqlalchemy import ColumnElement

    from .classifiers import Classifier

logger = logging.getLogger("hca_admin.filtering")


class TableQueryTranslator:
    """Translate grid descriptors into a ``Sort`` and a ``Specification``."""

    def __init__(
        self,
        settings: TableQuerySettings | None = None,
        classifiers: Sequence[Classifier] = DEFAULT_CLASSIFIERS,
    ) -> None:
        self._settings = settings or TableQuerySettings()
        self._classifiers = tuple(classifiers)

    @property
    def settings(self) -> TableQuerySettings:
        return self._settings

    # -- sorting ------------------------------------------------------------

    def parse_sort(self, sorting: str | None) -> Sort:
        """Single-column sort from the first descriptor entry, else unsorted."""
        try:
            columns = decode_sorting(sorting)
        except FilterParseError:
            if self._settings.strict_descriptors:
                raise
            logger.warning(
                "Malformed sort descriptor %r, falling back to unsorted",
                sorting,
                exc_info=True,
            )
            return Sort.unsorted()
        if not columns:
            return Sort.unsorted()
        first = columns[0]
        direction = Direction.DESC if first.desc else Direction.ASC
        return Sort.by(direction, first.id)

    # -- filtering ----------------------------------------------------------

    def parse_filters(
        self, filters: str | None, global_filter: str | None = None
    ) -> Specification | None:
        """
        Build the specification for the column filters and the global filter.

        Returns ``None`` when the filter descriptor cannot be decoded.
        """
        try:
            columns = decode_filters(filters)
        except FilterParseError:
            if self._settings.strict_descriptors:
                raise
            logger.warning(
                "Malformed filter descriptor %r, no query built", filters, exc_info=True
            )
            return None

        classified = [
            (column, classify(column.value, self._classifiers)) for column in columns
        ]

        def specification(root: PathContext) -> ColumnElement[bool] | None:
            predicates: list[ColumnElement[bool]] = []
            for column, value in classified:
                predicate = self._column_predicate(root, column, value)
                if predicate is not None:
                    predicates.append(predicate)
            if global_filter:
                predicates.append(
                    disjunction(self._global_predicates(root, global_filter))
                )
            return conjunction(predicates)

        return specification

    def _column_predicate(
        self, root: PathContext, column: ColumnFilter, value: Classified
    ) -> ColumnElement[bool] | None:
        field = column.id
        if value.kind is ValueKind.NUMERIC:
            return root.attribute(field) == value.value
        if value.kind is ValueKind.INSTANT:
            return self._on_local_date(root, field, value.value)
        if self._settings.is_string_field(field):
            return self._contains_ignore_case(root, field, value.value)
        # Non allow-listed columns compare against the raw, case-preserved value.
        return root.attribute(field) == value.raw

    def _global_predicates(
        self, root: PathContext, raw: str
    ) -> list[ColumnElement[bool]]:
        upper = raw.upper()
        group = [
            self._contains_ignore_case(root, field, upper)
            for field in self._settings.string_fields
        ]
        number = parse_int(raw)
        if number is not None:
            group.append(root.attribute(self._settings.id_field) == number)
        instant = parse_instant(raw)
        if instant is not None:
            for field in self._settings.timestamp_fields:
                predicate = self._on_local_date(root, field, instant)
                if predicate is not None:
                    group.append(predicate)
        return group

    # -- predicate builders -------------------------------------------------

    def _contains_ignore_case(
        self, root: PathContext, field: str, upper_value: str
    ) -> ColumnElement[bool]:
        column = resolve_path(root, field)
        return func.upper(column).like(f"%{upper_value}%")

    def _on_local_date(
        self, root: PathContext, field: str, instant: datetime
    ) -> ColumnElement[bool] | None:
        try:
            zone = self._settings.time_zone
            start, end = local_day_bounds(to_local_date(instant, zone), zone)
        except (OverflowError, ValueError):
            logger.warning(
                "Cannot convert %s to a calendar date, dropping filter on %r",
                instant.isoformat(),
                field,
                exc_info=True,
            )
            return None
        column: Any = root.attribute(field)
        return and_(column >= start, column < end)
