"""AssignmentAdvisorPolicy — recommend the worker whose load stays closest to average."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from fairdispatch.domain.entities.load_summary import LoadSummary
from fairdispatch.domain.entities.unit import Unit
from fairdispatch.domain.entities.worker import Worker
from fairdispatch.domain.policies.workload_score import workload_score
from fairdispatch.domain.value_objects.scoring_weights import DEFAULT_WEIGHTS, ScoringWeights

# Flat discount applied when a worker's preferred sector matches the unit's
SECTOR_AFFINITY_BONUS = 20.0


def fleet_average(
    workers: Sequence[Worker],
    summaries: Mapping[str, LoadSummary],
) -> float:
    """Mean balance score across the roster; workers without a summary count as 0.

    Summaries for ids outside the roster are ignored. When ``summaries`` comes
    from ``aggregate_loads`` over the same roster this equals the sum of all
    summaries divided by the roster size.
    """
    if not workers:
        return 0.0
    total = sum(_current_score(w, summaries) for w in workers)
    return total / len(workers)


def recommend_worker(
    unit: Unit,
    workers: Sequence[Worker],
    summaries: Mapping[str, LoadSummary],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    sector_bonus: float = SECTOR_AFFINITY_BONUS,
) -> str | None:
    """Greedy pick of the worker best suited to take ``unit`` next.

    For each worker the hypothetical post-assignment score is
    ``current + unit_score`` (minus ``sector_bonus`` on a sector match).
    The worker whose hypothetical score lands closest to the fleet average
    wins; ties go to the earliest worker in roster order.

    Args:
        unit: the unit to place.
        workers: roster, in the order used for tie-breaking.
        summaries: current per-worker load summaries keyed by worker id.

    Returns:
        The chosen worker id, or None if the roster is empty.
    """
    if not workers:
        return None

    unit_score = workload_score(unit, weights)
    average = fleet_average(workers, summaries)

    best_worker: str | None = None
    lowest_diff = float("inf")

    for worker in workers:
        candidate = _current_score(worker, summaries) + unit_score
        if worker.prefers(unit.sector):
            candidate -= sector_bonus

        diff = abs(candidate - average)
        if diff < lowest_diff:
            lowest_diff = diff
            best_worker = worker.id

    return best_worker


def _current_score(worker: Worker, summaries: Mapping[str, LoadSummary]) -> float:
    summary = summaries.get(worker.id)
    return summary.balance_score if summary else 0.0
