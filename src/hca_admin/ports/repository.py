"""Repository protocols consumed by the Tehsil service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..domain.regions import IdName, Tehsil
    from ..filtering.pagination import Page, PageRequest
    from ..filtering.specification import Specification
    from .unit_of_work import UnitOfWork


@runtime_checkable
class ITehsilRepository(Protocol):
    """
    Storage accessor for Tehsils.

    ``save`` is an upsert by identity: a transient entity is inserted and
    receives a generated id, a persisted one is merged.
    """

    async def save(self, entity: Tehsil, uow: UnitOfWork) -> int: ...

    async def find_all(self, uow: UnitOfWork) -> list[Tehsil]: ...

    async def find_by_id(
        self, entity_id: int, uow: UnitOfWork
    ) -> Tehsil | None: ...

    async def delete_by_id(
        self, entity_id: int, uow: UnitOfWork
    ) -> int: ...

    async def find_all_matching(
        self,
        spec: Specification,
        page: PageRequest,
        uow: UnitOfWork,
    ) -> Page[Tehsil]: ...

    async def count(self, uow: UnitOfWork) -> int: ...

    async def find_id_and_name(self, uow: UnitOfWork) -> list[IdName]: ...

    async def find_id_and_name_by_district_ids(
        self, district_ids: Sequence[int], uow: UnitOfWork
    ) -> list[IdName]: ...


@runtime_checkable
class ITehsilReferenceCounter(Protocol):
    """Storage accessor for a record kind that points at a Tehsil."""

    async def count_by_tehsil_id(
        self, tehsil_id: int, uow: UnitOfWork
    ) -> int: ...
