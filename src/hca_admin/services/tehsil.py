"""Application service for Tehsil CRUD and the Tehsil grid."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..domain.regions import Tehsil
from ..filtering.pagination import PageRequest
from ..filtering.translator import TableQueryTranslator
from .responses import PaginatedResponse

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from ..domain.regions import IdName
    from ..ports.repository import ITehsilReferenceCounter, ITehsilRepository
    from ..ports.unit_of_work import UnitOfWork

logger = logging.getLogger("hca_admin.services.tehsil")


class TehsilService:
    """
    Application service for the Tehsil administration screens.

    Every operation opens one unit of work from ``uow_factory`` and hands
    it to the repositories. Storage errors propagate unchanged.

    ``hospitals`` and ``users`` are the two record kinds that reference a
    Tehsil; they are only consulted by :meth:`is_associated`.
    """

    def __init__(
        self,
        tehsils: ITehsilRepository,
        hospitals: ITehsilReferenceCounter,
        users: ITehsilReferenceCounter,
        uow_factory: Callable[[], UnitOfWork],
        translator: TableQueryTranslator | None = None,
    ) -> None:
        self._tehsils = tehsils
        self._hospitals = hospitals
        self._users = users
        self._uow_factory = uow_factory
        self._translator = translator or TableQueryTranslator()

    async def add(self, tehsil: Tehsil) -> int:
        async with self._uow_factory() as uow:
            return await self._tehsils.save(tehsil, uow=uow)

    async def update(self, tehsil: Tehsil) -> int:
        async with self._uow_factory() as uow:
            return await self._tehsils.save(tehsil, uow=uow)

    async def get_all(self) -> list[Tehsil]:
        async with self._uow_factory() as uow:
            return await self._tehsils.find_all(uow=uow)

    async def get_by_id(self, tehsil_id: int) -> Tehsil | None:
        async with self._uow_factory() as uow:
            return await self._tehsils.find_by_id(tehsil_id, uow=uow)

    async def get_id_and_name(self) -> list[IdName]:
        async with self._uow_factory() as uow:
            return await self._tehsils.find_id_and_name(uow=uow)

    async def get_id_and_name_by_district_ids(
        self, district_ids: Sequence[int]
    ) -> list[IdName]:
        async with self._uow_factory() as uow:
            return await self._tehsils.find_id_and_name_by_district_ids(
                district_ids, uow=uow
            )

    async def delete(self, tehsil_id: int) -> None:
        """Delete by id. Callers check :meth:`is_associated` first if they must."""
        async with self._uow_factory() as uow:
            await self._tehsils.delete_by_id(tehsil_id, uow=uow)

    async def is_associated(self, tehsil_id: int) -> bool:
        """True if any hospital or user account references the Tehsil."""
        async with self._uow_factory() as uow:
            hospital_count = await self._hospitals.count_by_tehsil_id(
                tehsil_id, uow=uow
            )
            user_count = await self._users.count_by_tehsil_id(tehsil_id, uow=uow)
        return hospital_count > 0 or user_count > 0

    async def get_table(
        self,
        start: int,
        size: int,
        sorting: str | None = None,
        filters: str | None = None,
        global_filter: str | None = None,
    ) -> PaginatedResponse[Tehsil]:
        """
        Serve one page of the Tehsil grid.

        ``start`` is the grid's row offset; the page index is
        ``start // size``. ``total_count`` is the unfiltered row count.
        When ``filters`` cannot be decoded no page query runs and the
        response has no items.
        """
        sort = self._translator.parse_sort(sorting)
        page = PageRequest.from_offset(start, size, sort)
        spec = self._translator.parse_filters(filters, global_filter)

        async with self._uow_factory() as uow:
            if spec is None:
                logger.info("Unusable filter descriptor, returning an empty page")
                items: list[Tehsil] = []
            else:
                result = await self._tehsils.find_all_matching(spec, page, uow=uow)
                items = result.content
            total_count = await self._tehsils.count(uow=uow)

        return PaginatedResponse[Tehsil](items=items, total_count=total_count)
