import re

import pytest

from hca_admin.exceptions import UnknownFieldError
from hca_admin.filtering import (
    Direction,
    PageRequest,
    PathContext,
    Sort,
    TableQueryTranslator,
    build_page_select,
    resolve_path,
)
from hca_admin.persistence.models import TehsilModel


class TestResolvePath:
    def test_plain_attribute(self) -> None:
        root = PathContext.root(TehsilModel)
        assert resolve_path(root, "name") is TehsilModel.name
        assert root.joins == ()

    def test_camel_case_falls_back_to_snake_case(self) -> None:
        root = PathContext.root(TehsilModel)
        assert resolve_path(root, "districtId") is TehsilModel.district_id

    def test_dotted_path_joins_once_per_call(self) -> None:
        root = PathContext.root(TehsilModel)
        resolve_path(root, "district.name")
        resolve_path(root, "district.name", outer=True)
        assert [clause.outer for clause in root.joins] == [False, True]

    def test_unknown_attribute(self) -> None:
        with pytest.raises(UnknownFieldError):
            resolve_path(PathContext.root(TehsilModel), "district.population")

    def test_join_on_column_is_rejected(self) -> None:
        with pytest.raises(UnknownFieldError):
            resolve_path(PathContext.root(TehsilModel), "name.length")


class TestBuildPageSelect:
    def test_sort_limit_offset(self) -> None:
        page = PageRequest.of(2, 5, Sort.by(Direction.DESC, "name"))
        sql = str(build_page_select(TehsilModel, None, page).compile())
        assert "ORDER BY tehsil.name DESC" in sql
        assert "LIMIT" in sql
        assert "OFFSET" in sql
        assert "WHERE" not in sql

    def test_dotted_sort_uses_outer_join(self) -> None:
        page = PageRequest.of(0, 5, Sort.by(Direction.ASC, "district.name"))
        sql = str(build_page_select(TehsilModel, None, page).compile())
        assert "LEFT OUTER JOIN district AS" in sql
        assert re.search(r"ORDER BY district_\d+\.name ASC", sql)

    def test_specification_becomes_where(self) -> None:
        spec = TableQueryTranslator().parse_filters(
            '[{"id": "district.name", "value": "lah"}]'
        )
        sql = str(build_page_select(TehsilModel, spec, PageRequest.of(0, 5)).compile())
        assert re.search(r"FROM tehsil JOIN district AS district_\d+ ON", sql)
        assert re.search(r"WHERE upper\(district_\d+\.name\) LIKE", sql)
