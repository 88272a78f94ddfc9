import pytest

from hca_admin.exceptions import FilterParseError, ValidationError
from hca_admin.filtering.syntax import (
    ColumnFilter,
    SortColumn,
    decode_filters,
    decode_sorting,
)


class TestDecodeSorting:
    def test_entries(self) -> None:
        result = decode_sorting('[{"id": "name", "desc": true}, {"id": "id"}]')
        assert result == [SortColumn(id="name", desc=True), SortColumn(id="id")]

    def test_none_and_empty(self) -> None:
        assert decode_sorting(None) == []
        assert decode_sorting("[]") == []

    @pytest.mark.parametrize(
        "raw", ["not json", '{"id": "name"}', '[{"desc": true}]', "", "[1, 2]"]
    )
    def test_malformed(self, raw: str) -> None:
        with pytest.raises(FilterParseError) as exc_info:
            decode_sorting(raw)
        assert "sorting" in exc_info.value.errors


class TestDecodeFilters:
    def test_entries(self) -> None:
        result = decode_filters(
            '[{"id": "name", "value": "central"}, {"id": "id", "value": "5"}]'
        )
        assert result == [
            ColumnFilter(id="name", value="central"),
            ColumnFilter(id="id", value="5"),
        ]

    def test_none(self) -> None:
        assert decode_filters(None) == []

    def test_non_string_value_is_rejected(self) -> None:
        with pytest.raises(FilterParseError):
            decode_filters('[{"id": "id", "value": 5}]')

    def test_malformed_json_is_a_validation_error(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            decode_filters("[{")
        assert exc_info.value.errors["filters"][0].startswith("Malformed JSON")
