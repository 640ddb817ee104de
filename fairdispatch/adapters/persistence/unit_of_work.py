"""SQLAlchemy unit of work — savepoints on the request session."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from fairdispatch.application.ports.unit_of_work import UnitOfWork


class SqlUnitOfWork(UnitOfWork):
    def __init__(self, session: AsyncSession):
        self._s = session

    def savepoint(self):
        # SAVEPOINT / RELEASE, or ROLLBACK TO SAVEPOINT when the block raises
        return self._s.begin_nested()
