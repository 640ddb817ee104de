"""BalanceReportUseCase — per-worker load summaries and global balance."""

from __future__ import annotations

from dataclasses import dataclass, field

from fairdispatch.application.ports.unit_repo import UnitRepository
from fairdispatch.application.ports.worker_repo import WorkerRepository
from fairdispatch.domain.entities.load_summary import LoadSummary
from fairdispatch.domain.entities.worker import Worker
from fairdispatch.domain.policies.balance_metric import global_balance
from fairdispatch.domain.policies.load_aggregation import aggregate_loads
from fairdispatch.domain.policies.unit_validation import split_malformed
from fairdispatch.domain.value_objects.scoring_weights import DEFAULT_WEIGHTS, ScoringWeights


@dataclass
class WorkerLoad:
    worker: Worker
    summary: LoadSummary


@dataclass
class BalanceReport:
    global_balance: float
    loads: list[WorkerLoad] = field(default_factory=list)
    excluded_count: int = 0

    @property
    def max_balance_score(self) -> float:
        return max((wl.summary.balance_score for wl in self.loads), default=0.0)


class BalanceReportUseCase:
    """Recompute the dashboard view from the current assignment state."""

    def __init__(
        self,
        unit_repo: UnitRepository,
        worker_repo: WorkerRepository,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ):
        self._units = unit_repo
        self._workers = worker_repo
        self._weights = weights

    async def execute(self) -> BalanceReport:
        workers = await self._workers.get_all()
        valid, malformed = split_malformed(await self._units.get_all())
        summaries = aggregate_loads(workers, valid, self._weights)

        return BalanceReport(
            global_balance=global_balance(summaries.values()),
            loads=[WorkerLoad(worker=w, summary=summaries[w.id]) for w in workers],
            excluded_count=len(malformed),
        )
