"""SQLAlchemy repository implementations."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from fairdispatch.adapters.persistence.models import (
    AssignmentRecordModel,
    UnitModel,
    WorkerModel,
)
from fairdispatch.application.ports.assignment_history_repo import AssignmentHistoryRepository
from fairdispatch.application.ports.unit_repo import UnitRepository
from fairdispatch.application.ports.worker_repo import WorkerRepository
from fairdispatch.domain.entities.assignment_record import AssignmentRecord
from fairdispatch.domain.entities.unit import Unit
from fairdispatch.domain.entities.worker import Worker
from fairdispatch.domain.value_objects.enums import UnitStatus

# ─── Mappers ─────────────────────────────────────────────────────────


def _worker_to_domain(m: WorkerModel) -> Worker:
    return Worker(
        id=m.id,
        name=m.name,
        email=m.email,
        preferred_sector=m.preferred_sector,
        current_load=m.current_load,
        created_at=m.created_at,
    )


def _unit_to_domain(m: UnitModel) -> Unit:
    return Unit(
        id=m.id,
        name=m.name,
        address=m.address,
        sector=m.sector,
        rooms=m.rooms,
        area_m2=m.area_m2,
        distance_km=m.distance_km,
        difficulty=m.difficulty,
        latitude=m.latitude,
        longitude=m.longitude,
        worker_id=m.worker_id,
        status=UnitStatus(m.status),
        created_at=m.created_at,
        updated_at=m.updated_at,
    )


def _record_to_domain(m: AssignmentRecordModel) -> AssignmentRecord:
    return AssignmentRecord(
        id=m.id,
        unit_id=m.unit_id,
        worker_id=m.worker_id,
        started_at=m.started_at,
        ended_at=m.ended_at,
        balance_score=m.balance_score,
    )


# ─── Repositories ────────────────────────────────────────────────────


class SqlWorkerRepository(WorkerRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def save(self, worker: Worker) -> Worker:
        m = WorkerModel(
            name=worker.name,
            email=worker.email,
            preferred_sector=worker.preferred_sector,
            current_load=worker.current_load,
        )
        if worker.id:
            m.id = worker.id
        self._s.add(m)
        await self._s.flush()
        worker.id = m.id
        return worker

    async def get_by_id(self, worker_id: str) -> Worker | None:
        m = await self._s.get(WorkerModel, worker_id)
        return _worker_to_domain(m) if m else None

    async def get_all(self) -> list[Worker]:
        result = await self._s.execute(
            select(WorkerModel).order_by(WorkerModel.created_at, WorkerModel.id)
        )
        return [_worker_to_domain(m) for m in result.scalars()]


class SqlUnitRepository(UnitRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def save(self, unit: Unit) -> Unit:
        m = UnitModel(
            name=unit.name,
            address=unit.address,
            sector=unit.sector,
            rooms=unit.rooms,
            area_m2=unit.area_m2,
            distance_km=unit.distance_km,
            difficulty=unit.difficulty,
            latitude=unit.latitude,
            longitude=unit.longitude,
            worker_id=unit.worker_id,
            status=unit.status.value,
        )
        if unit.id:
            m.id = unit.id
        self._s.add(m)
        await self._s.flush()
        unit.id = m.id
        return unit

    async def get_by_id(self, unit_id: str) -> Unit | None:
        m = await self._s.get(UnitModel, unit_id)
        return _unit_to_domain(m) if m else None

    async def get_all(self, status: UnitStatus | None = None) -> list[Unit]:
        query = select(UnitModel).order_by(UnitModel.created_at, UnitModel.id)
        if status is not None:
            query = query.where(UnitModel.status == status.value)
        result = await self._s.execute(query)
        return [_unit_to_domain(m) for m in result.scalars()]

    async def get_by_worker(self, worker_id: str) -> list[Unit]:
        result = await self._s.execute(
            select(UnitModel)
            .where(UnitModel.worker_id == worker_id)
            .order_by(UnitModel.created_at, UnitModel.id)
        )
        return [_unit_to_domain(m) for m in result.scalars()]

    async def commit_assignment(
        self, unit_id: str, worker_id: str | None, at: datetime
    ) -> bool:
        status = UnitStatus.ASSIGNED if worker_id else UnitStatus.AVAILABLE
        result = await self._s.execute(
            update(UnitModel)
            .where(UnitModel.id == unit_id)
            .values(worker_id=worker_id, status=status.value, updated_at=at)
        )
        await self._s.flush()
        return result.rowcount == 1


class SqlAssignmentHistoryRepository(AssignmentHistoryRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def save(self, record: AssignmentRecord) -> AssignmentRecord:
        m = AssignmentRecordModel(
            unit_id=record.unit_id,
            worker_id=record.worker_id,
            started_at=record.started_at,
            ended_at=record.ended_at,
            balance_score=record.balance_score,
        )
        self._s.add(m)
        await self._s.flush()
        record.id = m.id
        return record

    async def get_by_id(self, record_id: str) -> AssignmentRecord | None:
        m = await self._s.get(AssignmentRecordModel, record_id)
        return _record_to_domain(m) if m else None

    async def close_open(self, unit_id: str, at: datetime) -> int:
        result = await self._s.execute(
            update(AssignmentRecordModel)
            .where(
                AssignmentRecordModel.unit_id == unit_id,
                AssignmentRecordModel.ended_at.is_(None),
            )
            .values(ended_at=at)
        )
        await self._s.flush()
        return result.rowcount

    async def close(self, record_id: str, at: datetime) -> AssignmentRecord | None:
        result = await self._s.execute(
            select(AssignmentRecordModel)
            .where(AssignmentRecordModel.id == record_id)
            .with_for_update()
        )
        m = result.scalar_one_or_none()
        if m is None:
            return None
        if m.ended_at is None:
            m.ended_at = at
            await self._s.flush()
        return _record_to_domain(m)

    async def get_by_unit(self, unit_id: str) -> list[AssignmentRecord]:
        result = await self._s.execute(
            select(AssignmentRecordModel)
            .where(AssignmentRecordModel.unit_id == unit_id)
            .order_by(AssignmentRecordModel.started_at)
        )
        return [_record_to_domain(m) for m in result.scalars()]

    async def get_all(self, active_only: bool = False) -> list[AssignmentRecord]:
        query = select(AssignmentRecordModel).order_by(
            AssignmentRecordModel.started_at.desc()
        )
        if active_only:
            query = query.where(AssignmentRecordModel.ended_at.is_(None))
        result = await self._s.execute(query)
        return [_record_to_domain(m) for m in result.scalars()]
