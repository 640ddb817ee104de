"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fairdispatch.adapters.persistence.database import get_session
from fairdispatch.adapters.persistence.repositories import (
    SqlAssignmentHistoryRepository,
    SqlUnitRepository,
    SqlWorkerRepository,
)
from fairdispatch.adapters.persistence.unit_of_work import SqlUnitOfWork
from fairdispatch.application.ports.assignment_history_repo import AssignmentHistoryRepository
from fairdispatch.application.ports.unit_of_work import UnitOfWork
from fairdispatch.application.ports.unit_repo import UnitRepository
from fairdispatch.application.ports.worker_repo import WorkerRepository
from fairdispatch.application.use_cases.assign_unit import AssignUnitUseCase
from fairdispatch.application.use_cases.auto_distribute import AutoDistributeUseCase
from fairdispatch.application.use_cases.balance_report import BalanceReportUseCase
from fairdispatch.application.use_cases.build_route import BuildRouteUseCase
from fairdispatch.application.use_cases.close_assignment_record import (
    CloseAssignmentRecordUseCase,
)
from fairdispatch.application.use_cases.recommend_worker import RecommendationsUseCase
from fairdispatch.config import settings

# Re-export session dependency
get_db_session = get_session


def get_unit_repo(session: AsyncSession = Depends(get_session)) -> UnitRepository:
    return SqlUnitRepository(session)


def get_worker_repo(session: AsyncSession = Depends(get_session)) -> WorkerRepository:
    return SqlWorkerRepository(session)


def get_history_repo(
    session: AsyncSession = Depends(get_session),
) -> AssignmentHistoryRepository:
    return SqlAssignmentHistoryRepository(session)


def get_unit_of_work(session: AsyncSession = Depends(get_session)) -> UnitOfWork:
    return SqlUnitOfWork(session)


def get_assign_unit_uc(
    units: UnitRepository = Depends(get_unit_repo),
    workers: WorkerRepository = Depends(get_worker_repo),
    history: AssignmentHistoryRepository = Depends(get_history_repo),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> AssignUnitUseCase:
    return AssignUnitUseCase(units, workers, history, uow, weights=settings.scoring_weights)


def get_auto_distribute_uc(
    units: UnitRepository = Depends(get_unit_repo),
    workers: WorkerRepository = Depends(get_worker_repo),
    assign_uc: AssignUnitUseCase = Depends(get_assign_unit_uc),
) -> AutoDistributeUseCase:
    return AutoDistributeUseCase(
        units,
        workers,
        assign_uc,
        weights=settings.scoring_weights,
        sector_bonus=settings.sector_affinity_bonus,
    )


def get_recommendations_uc(
    units: UnitRepository = Depends(get_unit_repo),
    workers: WorkerRepository = Depends(get_worker_repo),
) -> RecommendationsUseCase:
    return RecommendationsUseCase(
        units,
        workers,
        weights=settings.scoring_weights,
        sector_bonus=settings.sector_affinity_bonus,
    )


def get_balance_report_uc(
    units: UnitRepository = Depends(get_unit_repo),
    workers: WorkerRepository = Depends(get_worker_repo),
) -> BalanceReportUseCase:
    return BalanceReportUseCase(units, workers, weights=settings.scoring_weights)


def get_build_route_uc(
    units: UnitRepository = Depends(get_unit_repo),
    workers: WorkerRepository = Depends(get_worker_repo),
) -> BuildRouteUseCase:
    return BuildRouteUseCase(units, workers, default_base_point=settings.depot)


def get_close_record_uc(
    history: AssignmentHistoryRepository = Depends(get_history_repo),
    units: UnitRepository = Depends(get_unit_repo),
) -> CloseAssignmentRecordUseCase:
    return CloseAssignmentRecordUseCase(history, units)
