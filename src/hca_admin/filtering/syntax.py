"""Decoding of the grid's JSON sort and filter descriptors."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import FilterParseError


class SortColumn(BaseModel):
    """One ``{"id": ..., "desc": ...}`` entry of the sort descriptor."""

    model_config = ConfigDict(frozen=True)

    id: str
    desc: bool = False


class ColumnFilter(BaseModel):
    """One ``{"id": ..., "value": ...}`` entry of the filter descriptor."""

    model_config = ConfigDict(frozen=True)

    id: str
    value: str


_SORTING = TypeAdapter(list[SortColumn])
_FILTERS = TypeAdapter(list[ColumnFilter])


def _decode(raw: str, adapter: TypeAdapter[Any], kind: str) -> Any:
    try:
        data = json.loads(raw)
    except (TypeError, json.JSONDecodeError) as e:
        raise FilterParseError({kind: [f"Malformed JSON: {e}"]}) from e
    try:
        return adapter.validate_python(data)
    except PydanticValidationError as e:
        raise FilterParseError(
            {kind: [err["msg"] for err in e.errors(include_url=False)]}
        ) from e


def decode_sorting(raw: str | None) -> list[SortColumn]:
    """
    Decode ``[{"id": "name", "desc": true}, ...]``.

    ``None`` decodes to an empty list. Anything that is not a JSON array of
    sort objects raises :class:`FilterParseError`.
    """
    if raw is None:
        return []
    result: list[SortColumn] = _decode(raw, _SORTING, "sorting")
    return result


def decode_filters(raw: str | None) -> list[ColumnFilter]:
    """
    Decode ``[{"id": "name", "value": "central"}, ...]``.

    ``None`` decodes to an empty list. Anything that is not a JSON array of
    filter objects with string values raises :class:`FilterParseError`.
    """
    if raw is None:
        return []
    result: list[ColumnFilter] = _decode(raw, _FILTERS, "filters")
    return result
