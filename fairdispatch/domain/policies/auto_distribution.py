"""AutoDistributionPolicy — greedy single-pass batch assignment."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from fairdispatch.domain.entities.load_summary import LoadSummary
from fairdispatch.domain.entities.unit import Unit
from fairdispatch.domain.entities.worker import Worker
from fairdispatch.domain.errors import EmptyWorkerRosterError
from fairdispatch.domain.policies.assignment_advisor import (
    SECTOR_AFFINITY_BONUS,
    recommend_worker,
)
from fairdispatch.domain.policies.load_aggregation import aggregate_loads
from fairdispatch.domain.policies.unit_validation import split_malformed
from fairdispatch.domain.policies.workload_score import workload_score
from fairdispatch.domain.value_objects.enums import DistributionStatus
from fairdispatch.domain.value_objects.scoring_weights import DEFAULT_WEIGHTS, ScoringWeights

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlannedAssignment:
    """One accepted (unit, worker) pairing of a batch."""

    unit: Unit
    worker_id: str
    unit_score: float


@dataclass
class DistributionPlan:
    """Result of one distribute() call. Nothing here has been committed."""

    status: DistributionStatus
    assignments: list[PlannedAssignment] = field(default_factory=list)
    skipped_unit_ids: list[str] = field(default_factory=list)
    excluded_count: int = 0
    simulated_loads: dict[str, LoadSummary] = field(default_factory=dict)


def distribute(
    units: Sequence[Unit],
    workers: Sequence[Worker],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    sector_bonus: float = SECTOR_AFFINITY_BONUS,
) -> DistributionPlan:
    """Plan assignments for every unassigned, active unit.

    1. Fail fast with EmptyWorkerRosterError if there are no workers.
    2. Drop malformed units (counted in ``excluded_count``).
    3. Candidates: no worker and status != inactive. None -> NOTHING_TO_ASSIGN.
    4. Build a private load simulation from the current assignments.
    5. Visit candidates by descending workload score (costliest first).
    6. Recommend against the simulation, then fold the unit into the chosen
       worker's totals and re-score them.

    The simulation lives only for the duration of this call and is returned
    on the plan for reporting.

    Raises:
        EmptyWorkerRosterError: if ``workers`` is empty.
    """
    if not workers:
        raise EmptyWorkerRosterError()

    valid, malformed = split_malformed(units)
    candidates = [u for u in valid if u.is_assignable()]

    simulated = aggregate_loads(workers, valid, weights)

    if not candidates:
        logger.info("Nothing to assign (%d malformed units excluded)", len(malformed))
        return DistributionPlan(
            status=DistributionStatus.NOTHING_TO_ASSIGN,
            excluded_count=len(malformed),
            simulated_loads=simulated,
        )

    scored = [(workload_score(u, weights), u) for u in candidates]
    # Stable sort: equal scores keep their input order
    scored.sort(key=lambda pair: pair[0], reverse=True)

    assignments: list[PlannedAssignment] = []
    skipped: list[str] = []

    for unit_score, unit in scored:
        worker_id = recommend_worker(unit, workers, simulated, weights, sector_bonus)
        if worker_id is None:
            skipped.append(unit.id)
            continue

        assignments.append(
            PlannedAssignment(unit=unit, worker_id=worker_id, unit_score=unit_score)
        )
        summary = simulated.get(worker_id)
        if summary is not None:
            summary.add_unit(unit)
            summary.rescore(weights)

    status = (
        DistributionStatus.PLANNED if assignments
        else DistributionStatus.NO_VIABLE_ASSIGNMENT
    )
    logger.info(
        "Distribution planned: %d/%d units placed across %d workers",
        len(assignments), len(candidates), len(workers),
    )
    return DistributionPlan(
        status=status,
        assignments=assignments,
        skipped_unit_ids=skipped,
        excluded_count=len(malformed),
        simulated_loads=simulated,
    )
