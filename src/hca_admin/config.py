"""Settings for grid table query translation."""

from __future__ import annotations

from datetime import tzinfo

from pydantic import BaseModel, ConfigDict


class TableQuerySettings(BaseModel):
    """
    Configuration for :class:`~hca_admin.filtering.TableQueryTranslator`.

    Attributes:
        string_fields: Column ids matched as case-insensitive substrings,
            in the order the global filter ORs them together.
            Any other column id with a non-numeric, non-instant value is
            compared with plain equality against the raw value.
        id_field: Attribute the global filter compares numeric input with.
        timestamp_fields: Attributes the global filter compares instant
            input with (date-truncated).
        time_zone: Zone used to turn an instant into a calendar date.
            ``None`` means the system local zone.
        strict_descriptors: Raise ``FilterParseError`` on malformed sort or
            filter JSON instead of logging and degrading.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    string_fields: tuple[str, ...] = ("name", "district.name")
    id_field: str = "id"
    timestamp_fields: tuple[str, ...] = ("created_on", "updated_on")
    time_zone: tzinfo | None = None
    strict_descriptors: bool = False

    def is_string_field(self, field: str) -> bool:
        return field in self.string_fields
