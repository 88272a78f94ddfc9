"""Shared fixtures: an in-memory SQLite database seeded with Districts and Tehsils."""

from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from hca_admin.persistence import (
    Base,
    DistrictModel,
    HospitalModel,
    SQLAlchemyUnitOfWork,
    TehsilModel,
    UserAccountModel,
)


def _utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
def uow_factory(session_factory):
    return lambda: SQLAlchemyUnitOfWork(session_factory=session_factory)


@pytest.fixture
async def seeded(session_factory):
    """
    Two districts and four tehsils:

    ==  ==============  ================  ==========  ==========
    id  name            district          created     updated
    ==  ==============  ================  ==========  ==========
    1   Central Tehsil  Lahore            2023-05-01  2023-06-10
    2   North           Lahore            2023-05-02  2023-05-02
    3   Raiwind         Central District  2023-04-30  2023-05-01
    7   Model Town      Lahore            2022-01-01  2022-01-01
    ==  ==============  ================  ==========  ==========

    Tehsil 1 has a hospital, tehsil 2 has a user account.
    """
    async with session_factory() as session:
        session.add_all(
            [
                DistrictModel(id=1, name="Lahore"),
                DistrictModel(id=2, name="Central District"),
            ]
        )
        await session.flush()
        session.add_all(
            [
                TehsilModel(
                    id=1,
                    name="Central Tehsil",
                    district_id=1,
                    created_on=_utc(2023, 5, 1, 15, 30),
                    updated_on=_utc(2023, 6, 10, 12, 0),
                ),
                TehsilModel(
                    id=2,
                    name="North",
                    district_id=1,
                    created_on=_utc(2023, 5, 2, 9, 0),
                    updated_on=_utc(2023, 5, 2, 9, 0),
                ),
                TehsilModel(
                    id=3,
                    name="Raiwind",
                    district_id=2,
                    created_on=_utc(2023, 4, 30, 23, 0),
                    updated_on=_utc(2023, 5, 1, 8, 0),
                ),
                TehsilModel(
                    id=7,
                    name="Model Town",
                    district_id=1,
                    created_on=_utc(2022, 1, 1, 10, 0),
                    updated_on=_utc(2022, 1, 1, 10, 0),
                ),
            ]
        )
        await session.flush()
        session.add(HospitalModel(name="Services Hospital", tehsil_id=1))
        session.add(UserAccountModel(username="clerk", tehsil_id=2))
        await session.commit()
    return session_factory
