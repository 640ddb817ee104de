"""AutoDistributeUseCase — plan a batch distribution and commit each pairing."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from fairdispatch.application.ports.unit_repo import UnitRepository
from fairdispatch.application.ports.worker_repo import WorkerRepository
from fairdispatch.application.use_cases.assign_unit import AssignmentOutcome, AssignUnitUseCase
from fairdispatch.domain.entities.unit import Unit
from fairdispatch.domain.errors import EmptyWorkerRosterError
from fairdispatch.domain.policies.assignment_advisor import SECTOR_AFFINITY_BONUS
from fairdispatch.domain.policies.auto_distribution import distribute
from fairdispatch.domain.policies.balance_metric import global_balance
from fairdispatch.domain.policies.load_aggregation import aggregate_loads
from fairdispatch.domain.policies.unit_validation import split_malformed
from fairdispatch.domain.value_objects.enums import DistributionStatus
from fairdispatch.domain.value_objects.scoring_weights import DEFAULT_WEIGHTS, ScoringWeights

logger = logging.getLogger(__name__)

# One read → plan → commit sequence in flight per process
_batch_lock = asyncio.Lock()


@dataclass
class DistributionReport:
    """Summary of one batch distribution."""

    status: DistributionStatus
    outcomes: list[AssignmentOutcome] = field(default_factory=list)
    excluded_count: int = 0
    balance_before: float = 0.0
    balance_after: float = 0.0

    @property
    def successful(self) -> int:
        return sum(1 for o in self.outcomes if o.success)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if not o.success)


class AutoDistributeUseCase:
    """Assign every unassigned, active unit in one greedy pass.

    Pairings are independent: a failed commit is reported and the batch
    moves on to the next pairing.
    """

    def __init__(
        self,
        unit_repo: UnitRepository,
        worker_repo: WorkerRepository,
        assign_unit: AssignUnitUseCase,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
        sector_bonus: float = SECTOR_AFFINITY_BONUS,
    ):
        self._units = unit_repo
        self._workers = worker_repo
        self._assign = assign_unit
        self._weights = weights
        self._sector_bonus = sector_bonus

    async def execute(self, at: datetime | None = None) -> DistributionReport:
        async with _batch_lock:
            return await self._run(at or datetime.now(timezone.utc))

    async def _run(self, at: datetime) -> DistributionReport:
        workers = await self._workers.get_all()
        units = await self._units.get_all()
        logger.info("Auto-distribution: %d units, %d workers", len(units), len(workers))

        valid, _ = split_malformed(units)
        balance_before = global_balance(
            aggregate_loads(workers, valid, self._weights).values()
        )

        try:
            plan = distribute(units, workers, self._weights, self._sector_bonus)
        except EmptyWorkerRosterError:
            logger.warning("Auto-distribution aborted: no workers available")
            return DistributionReport(
                status=DistributionStatus.EMPTY_WORKER_ROSTER,
                balance_before=balance_before,
                balance_after=balance_before,
            )

        report = DistributionReport(
            status=plan.status,
            excluded_count=plan.excluded_count,
            balance_before=balance_before,
            balance_after=balance_before,
        )
        if plan.status != DistributionStatus.PLANNED:
            logger.info("Auto-distribution: %s", plan.status.value)
            return report

        for planned in plan.assignments:
            outcome = await self._assign.commit(planned.unit, planned.worker_id, at)
            report.outcomes.append(outcome)

        # Re-read so the reported balance reflects what was actually committed
        try:
            committed_units, _ = split_malformed(await self._units.get_all())
        except Exception:
            logger.exception("Auto-distribution: re-read failed, using batch outcomes")
            committed_units = _apply_outcomes(valid, report.outcomes)
        report.balance_after = global_balance(
            aggregate_loads(workers, committed_units, self._weights).values()
        )

        logger.info(
            "Auto-distribution complete: %d/%d committed, balance %.1f%% → %.1f%%",
            report.successful, len(report.outcomes),
            report.balance_before, report.balance_after,
        )
        return report


def _apply_outcomes(units: list[Unit], outcomes: list[AssignmentOutcome]) -> list[Unit]:
    """Copies of ``units`` with every successful pairing applied."""
    placed = {o.unit_id: o.worker_id for o in outcomes if o.success}
    return [
        replace(u, worker_id=placed[u.id]) if u.id in placed else u
        for u in units
    ]
