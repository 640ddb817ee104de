"""AssignUnitUseCase — commit one unit→worker pairing and keep the history in step."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from fairdispatch.application.ports.assignment_history_repo import AssignmentHistoryRepository
from fairdispatch.application.ports.unit_of_work import UnitOfWork
from fairdispatch.application.ports.unit_repo import UnitRepository
from fairdispatch.application.ports.worker_repo import WorkerRepository
from fairdispatch.domain.entities.assignment_record import AssignmentRecord
from fairdispatch.domain.entities.unit import Unit
from fairdispatch.domain.errors import MalformedUnitError
from fairdispatch.domain.policies.unit_validation import ensure_well_formed
from fairdispatch.domain.policies.workload_score import workload_score
from fairdispatch.domain.value_objects.enums import UnitStatus
from fairdispatch.domain.value_objects.scoring_weights import DEFAULT_WEIGHTS, ScoringWeights

logger = logging.getLogger(__name__)


@dataclass
class AssignmentOutcome:
    """Result of committing one pairing."""

    unit_id: str
    worker_id: str | None
    success: bool
    balance_score: float | None = None
    error: str | None = None


class AssignUnitUseCase:
    """Assign a unit to a worker, or release it when worker_id is None.

    On success the unit's open history record is closed and, for a real
    worker, a new record is opened carrying the unit's workload score.
    """

    def __init__(
        self,
        unit_repo: UnitRepository,
        worker_repo: WorkerRepository,
        history_repo: AssignmentHistoryRepository,
        unit_of_work: UnitOfWork,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ):
        self._units = unit_repo
        self._workers = worker_repo
        self._history = history_repo
        self._uow = unit_of_work
        self._weights = weights

    async def execute(
        self,
        unit_id: str,
        worker_id: str | None,
        at: datetime | None = None,
    ) -> AssignmentOutcome:
        unit = await self._units.get_by_id(unit_id)
        if unit is None:
            return AssignmentOutcome(unit_id, worker_id, False, error="Unit not found")
        return await self.commit(unit, worker_id, at)

    async def commit(
        self,
        unit: Unit,
        worker_id: str | None,
        at: datetime | None = None,
    ) -> AssignmentOutcome:
        """Commit a pairing for an already-loaded unit.

        The writes run inside one savepoint, so a failed pairing is rolled
        back on its own and later pairings on the same session still go through.
        """
        at = at or datetime.now(timezone.utc)
        if worker_id is not None:
            try:
                ensure_well_formed(unit)
            except MalformedUnitError as e:
                logger.warning("Refusing to assign malformed unit %s: %s", unit.id, e)
                return AssignmentOutcome(unit.id, worker_id, False, error=str(e))

        score = None
        try:
            async with self._uow.savepoint():
                if worker_id is not None and await self._workers.get_by_id(worker_id) is None:
                    return AssignmentOutcome(unit.id, worker_id, False, error="Worker not found")

                committed = await self._units.commit_assignment(unit.id, worker_id, at)
                if not committed:
                    logger.warning("Unit %s: commit rejected by storage", unit.id)
                    return AssignmentOutcome(
                        unit.id, worker_id, False, error="Unable to update unit"
                    )

                closed = await self._history.close_open(unit.id, at)
                if closed:
                    logger.debug("Unit %s: closed %d open history record(s)", unit.id, closed)

                if worker_id is not None:
                    score = workload_score(unit, self._weights)
                    await self._history.save(
                        AssignmentRecord(
                            id=None,
                            unit_id=unit.id,
                            worker_id=worker_id,
                            started_at=at,
                            balance_score=score,
                        )
                    )

        except Exception as e:
            logger.exception("Error assigning unit %s", unit.id)
            return AssignmentOutcome(unit.id, worker_id, False, error=str(e))

        unit.worker_id = worker_id
        unit.status = UnitStatus.ASSIGNED if worker_id else UnitStatus.AVAILABLE
        unit.updated_at = at
        logger.info("Unit %s → worker %s", unit.id, worker_id or "(released)")
        return AssignmentOutcome(unit.id, worker_id, True, balance_score=score)
