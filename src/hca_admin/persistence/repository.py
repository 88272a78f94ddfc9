from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from sqlalchemy import ColumnElement, delete, func, inspect, select

from ..domain.regions import DistrictRef, IdName, Tehsil
from ..filtering.compiler import build_page_select
from ..filtering.pagination import Page, PageRequest
from .models import HospitalModel, TehsilModel, UserAccountModel
from .uow import SQLAlchemyUnitOfWork

if TYPE_CHECKING:
    from ..filtering.specification import Specification
    from ..ports.unit_of_work import UnitOfWork

logger = logging.getLogger("hca_admin.persistence")

M = TypeVar("M")


def _as_utc(value: datetime) -> datetime:
    # Naive values are read back from storage and are already UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SQLAlchemyRepository(Generic[M]):
    """
    Base for the SQLAlchemy storage accessors.

    Every operation runs in the caller's unit of work::

        async with uow_factory() as uow:
            await repo.save(entity, uow=uow)
    """

    model_cls: ClassVar[type[Any]]

    @staticmethod
    def _require_uow(uow: UnitOfWork) -> SQLAlchemyUnitOfWork:
        if not isinstance(uow, SQLAlchemyUnitOfWork):
            raise TypeError(
                f"Expected a SQLAlchemyUnitOfWork, got {type(uow).__name__}"
            )
        return uow

    async def _count_where(
        self, *criteria: ColumnElement[bool], uow: UnitOfWork
    ) -> int:
        active_uow = self._require_uow(uow)
        stmt = select(func.count()).select_from(self.model_cls)
        if criteria:
            stmt = stmt.where(*criteria)
        result = await active_uow.session.execute(stmt)
        return int(result.scalar_one())


class TehsilRepository(SQLAlchemyRepository[TehsilModel]):
    """Storage accessor for Tehsils (see ``ITehsilRepository``)."""

    model_cls = TehsilModel

    # -- mapping ------------------------------------------------------------

    def to_model(self, entity: Tehsil) -> TehsilModel:
        return TehsilModel(
            id=entity.id,
            name=entity.name,
            district_id=entity.district_id,
            created_on=_as_utc(entity.created_on),
            updated_on=_as_utc(entity.updated_on),
        )

    def from_model(self, model: TehsilModel) -> Tehsil:
        district = None
        if "district" not in inspect(model).unloaded and model.district is not None:
            district = DistrictRef(id=model.district.id, name=model.district.name)
        return Tehsil(
            id=model.id,
            name=model.name,
            district_id=model.district_id,
            district=district,
            created_on=model.created_on,
            updated_on=model.updated_on,
        )

    # -- CRUD ---------------------------------------------------------------

    async def save(self, entity: Tehsil, uow: UnitOfWork) -> int:
        """Insert a transient Tehsil or merge a persisted one; return its id."""
        active_uow = self._require_uow(uow)
        model = self.to_model(entity)
        if entity.is_transient:
            active_uow.session.add(model)
            await active_uow.session.flush()
            object.__setattr__(entity, "id", model.id)
        else:
            model = await active_uow.session.merge(model)
            await active_uow.session.flush()
        return model.id

    async def find_all(self, uow: UnitOfWork) -> list[Tehsil]:
        active_uow = self._require_uow(uow)
        result = await active_uow.session.execute(
            select(TehsilModel).execution_options(populate_existing=True)
        )
        return [self.from_model(m) for m in result.scalars().all()]

    async def find_by_id(
        self, entity_id: int, uow: UnitOfWork
    ) -> Tehsil | None:
        active_uow = self._require_uow(uow)
        result = await active_uow.session.execute(
            select(TehsilModel)
            .where(TehsilModel.id == entity_id)
            .execution_options(populate_existing=True)
        )
        model = result.scalar_one_or_none()
        return self.from_model(model) if model is not None else None

    async def delete_by_id(self, entity_id: int, uow: UnitOfWork) -> int:
        active_uow = self._require_uow(uow)
        await active_uow.session.execute(
            delete(TehsilModel).where(TehsilModel.id == entity_id)
        )
        return entity_id

    async def count(self, uow: UnitOfWork) -> int:
        return await self._count_where(uow=uow)

    # -- queries ------------------------------------------------------------

    async def find_all_matching(
        self,
        spec: Specification,
        page: PageRequest,
        uow: UnitOfWork,
    ) -> Page[Tehsil]:
        """Fetch one page of Tehsils matching ``spec`` in ``page.sort`` order."""
        active_uow = self._require_uow(uow)
        stmt = build_page_select(TehsilModel, spec, page)
        logger.debug(
            "Tehsil page %d (size %d) sorted by %s",
            page.page,
            page.size,
            page.sort.orders or "nothing",
        )
        result = await active_uow.session.execute(
            stmt.execution_options(populate_existing=True)
        )
        return Page([self.from_model(m) for m in result.scalars().all()], page)

    async def find_id_and_name(self, uow: UnitOfWork) -> list[IdName]:
        active_uow = self._require_uow(uow)
        result = await active_uow.session.execute(
            select(TehsilModel.id, TehsilModel.name)
        )
        return [IdName(id=row.id, name=row.name) for row in result]

    async def find_id_and_name_by_district_ids(
        self, district_ids: Sequence[int], uow: UnitOfWork
    ) -> list[IdName]:
        active_uow = self._require_uow(uow)
        result = await active_uow.session.execute(
            select(TehsilModel.id, TehsilModel.name).where(
                TehsilModel.district_id.in_(list(district_ids))
            )
        )
        return [IdName(id=row.id, name=row.name) for row in result]


class HospitalRepository(SQLAlchemyRepository[HospitalModel]):
    model_cls = HospitalModel

    async def count_by_tehsil_id(
        self, tehsil_id: int, uow: UnitOfWork
    ) -> int:
        return await self._count_where(HospitalModel.tehsil_id == tehsil_id, uow=uow)


class UserAccountRepository(SQLAlchemyRepository[UserAccountModel]):
    model_cls = UserAccountModel

    async def count_by_tehsil_id(
        self, tehsil_id: int, uow: UnitOfWork
    ) -> int:
        return await self._count_where(
            UserAccountModel.tehsil_id == tehsil_id, uow=uow
        )
