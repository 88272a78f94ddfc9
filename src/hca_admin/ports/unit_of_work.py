"""UnitOfWork — Abstract base class for the Unit of Work pattern."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class UnitOfWork(ABC):
    """
    Abstract base class for Unit of Work implementations.

    Every service operation runs inside one unit of work::

        async with uow_factory() as uow:
            await repository.save(tehsil, uow=uow)

    A clean exit commits; an exception rolls back and propagates.
    """

    @abstractmethod
    async def commit(self) -> None: ...

    @abstractmethod
    async def rollback(self) -> None: ...

    async def __aenter__(self) -> UnitOfWork:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        if exc_type is None:
            await self.commit()
        else:
            await self.rollback()
