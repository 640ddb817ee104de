"""RecommendationsUseCase — next-best worker for unassigned units."""

from __future__ import annotations

from dataclasses import dataclass

from fairdispatch.application.ports.unit_repo import UnitRepository
from fairdispatch.application.ports.worker_repo import WorkerRepository
from fairdispatch.domain.policies.assignment_advisor import (
    SECTOR_AFFINITY_BONUS,
    recommend_worker,
)
from fairdispatch.domain.policies.load_aggregation import aggregate_loads
from fairdispatch.domain.policies.unit_validation import split_malformed
from fairdispatch.domain.policies.workload_score import workload_score
from fairdispatch.domain.value_objects.scoring_weights import DEFAULT_WEIGHTS, ScoringWeights


@dataclass
class Suggestion:
    unit_id: str
    unit_score: float
    worker_id: str | None


class RecommendationsUseCase:
    """Suggest a worker for each unit against the current (committed) loads.

    Every suggestion is computed independently from the same snapshot; unlike
    a batch distribution, accepting one does not shift the others.
    """

    def __init__(
        self,
        unit_repo: UnitRepository,
        worker_repo: WorkerRepository,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
        sector_bonus: float = SECTOR_AFFINITY_BONUS,
    ):
        self._units = unit_repo
        self._workers = worker_repo
        self._weights = weights
        self._sector_bonus = sector_bonus

    async def execute(self) -> list[Suggestion]:
        workers = await self._workers.get_all()
        valid, _ = split_malformed(await self._units.get_all())
        loads = aggregate_loads(workers, valid, self._weights)

        return [
            Suggestion(
                unit_id=unit.id,
                unit_score=workload_score(unit, self._weights),
                worker_id=recommend_worker(
                    unit, workers, loads, self._weights, self._sector_bonus
                ),
            )
            for unit in valid
            if unit.is_assignable()
        ]

    async def for_unit(self, unit_id: str) -> Suggestion | None:
        """Suggestion for a single unit, or None if the unit does not exist."""
        unit = await self._units.get_by_id(unit_id)
        if unit is None:
            return None

        workers = await self._workers.get_all()
        valid, _ = split_malformed(await self._units.get_all())
        loads = aggregate_loads(workers, valid, self._weights)
        return Suggestion(
            unit_id=unit.id,
            unit_score=workload_score(unit, self._weights),
            worker_id=recommend_worker(
                unit, workers, loads, self._weights, self._sector_bonus
            ),
        )
