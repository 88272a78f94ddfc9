"""End-to-end grid queries against the seeded SQLite database."""

import json
from datetime import timedelta, timezone, tzinfo

import pytest

from hca_admin.config import TableQuerySettings
from hca_admin.domain import Tehsil
from hca_admin.filtering import TableQueryTranslator
from hca_admin.persistence import (
    HospitalRepository,
    TehsilRepository,
    UserAccountRepository,
)
from hca_admin.services import TehsilService


def _service(uow_factory, zone: tzinfo) -> TehsilService:
    return TehsilService(
        TehsilRepository(),
        HospitalRepository(),
        UserAccountRepository(),
        uow_factory,
        TableQueryTranslator(TableQuerySettings(time_zone=zone)),
    )


@pytest.fixture
def service(seeded, uow_factory) -> TehsilService:
    return _service(uow_factory, timezone.utc)


def _filters(**columns: str) -> str:
    return json.dumps([{"id": k, "value": v} for k, v in columns.items()])


def _ids(items: list[Tehsil]) -> list[int]:
    return sorted(t.id for t in items)


@pytest.mark.asyncio()
async def test_sort_descending_by_name(service) -> None:
    response = await service.get_table(0, 10, '[{"id": "name", "desc": true}]')
    assert [t.name for t in response.items] == [
        "Raiwind",
        "North",
        "Model Town",
        "Central Tehsil",
    ]
    assert response.total_count == 4


@pytest.mark.asyncio()
async def test_sort_by_district_name(service) -> None:
    response = await service.get_table(0, 10, '[{"id": "district.name"}]')
    assert response.items[0].id == 3


@pytest.mark.asyncio()
async def test_numeric_column_filter(service) -> None:
    response = await service.get_table(0, 10, filters=_filters(id="7"))
    assert _ids(response.items) == [7]


@pytest.mark.asyncio()
async def test_text_column_filter_is_case_insensitive_substring(service) -> None:
    response = await service.get_table(0, 10, filters=_filters(name="central"))
    assert _ids(response.items) == [1]
    assert response.total_count == 4


@pytest.mark.asyncio()
async def test_instant_column_filter_matches_calendar_date(service) -> None:
    response = await service.get_table(
        0, 10, filters=_filters(createdOn="2023-05-01T00:00:00Z")
    )
    assert _ids(response.items) == [1]


@pytest.mark.asyncio()
@pytest.mark.parametrize(
    ("hours", "value", "expected"),
    [
        # 2023-05-01 04:00 at +05:00 for tehsil 3
        (5, "2023-05-01T00:00:00Z", [1, 3]),
        # the instant is 2023-04-30 21:00 at -05:00
        (-5, "2023-05-01T02:00:00Z", [3]),
    ],
)
async def test_instant_column_filter_uses_local_calendar_date(
    seeded, uow_factory, hours, value, expected
) -> None:
    service = _service(uow_factory, timezone(timedelta(hours=hours)))
    response = await service.get_table(0, 10, filters=_filters(createdOn=value))
    assert _ids(response.items) == expected


@pytest.mark.asyncio()
async def test_column_filters_are_anded(service) -> None:
    response = await service.get_table(
        0, 10, filters=_filters(name="o", districtId="1")
    )
    assert _ids(response.items) == [2, 7]


@pytest.mark.asyncio()
async def test_global_number_matches_id(service) -> None:
    response = await service.get_table(0, 10, global_filter="7")
    assert _ids(response.items) == [7]


@pytest.mark.asyncio()
async def test_global_text_searches_name_and_district(service) -> None:
    response = await service.get_table(0, 10, global_filter="central")
    assert _ids(response.items) == [1, 3]


@pytest.mark.asyncio()
async def test_global_instant_searches_both_timestamps(service) -> None:
    response = await service.get_table(0, 10, global_filter="2023-05-01T10:00:00Z")
    assert _ids(response.items) == [1, 3]


@pytest.mark.asyncio()
async def test_global_instant_uses_local_calendar_date(seeded, uow_factory) -> None:
    service = _service(uow_factory, timezone(timedelta(hours=-5)))
    response = await service.get_table(0, 10, global_filter="2023-05-02T01:00:00Z")
    assert _ids(response.items) == [1, 3]


@pytest.mark.asyncio()
async def test_global_filter_narrows_column_filters(service) -> None:
    response = await service.get_table(
        0, 10, filters=_filters(name="rai"), global_filter="central"
    )
    assert _ids(response.items) == [3]


@pytest.mark.asyncio()
async def test_offset_selects_page(service) -> None:
    response = await service.get_table(2, 2, '[{"id": "id"}]')
    assert [t.id for t in response.items] == [3, 7]


@pytest.mark.asyncio()
async def test_malformed_filter_gives_empty_items(service) -> None:
    response = await service.get_table(0, 10, filters="{oops")
    assert response.items == []
    assert response.total_count == 4


@pytest.mark.asyncio()
async def test_malformed_sort_is_ignored(service) -> None:
    response = await service.get_table(0, 10, sorting="{oops")
    assert _ids(response.items) == [1, 2, 3, 7]


@pytest.mark.asyncio()
async def test_loaded_rows_carry_district(service) -> None:
    response = await service.get_table(0, 10, filters=_filters(id="3"))
    district = response.items[0].district
    assert district is not None
    assert (district.id, district.name) == (2, "Central District")


@pytest.mark.asyncio()
async def test_is_associated(service) -> None:
    assert await service.is_associated(1)
    assert await service.is_associated(2)
    assert not await service.is_associated(3)


@pytest.mark.asyncio()
async def test_add_then_query(service) -> None:
    new_id = await service.add(Tehsil(name="Shalimar", district_id=2))
    response = await service.get_table(0, 10, global_filter="shali")
    assert _ids(response.items) == [new_id]
    assert response.total_count == 5
