"""LoadAggregationPolicy — fold current assignments into per-worker summaries."""

from __future__ import annotations

from collections.abc import Iterable

from fairdispatch.domain.entities.load_summary import LoadSummary
from fairdispatch.domain.entities.unit import Unit
from fairdispatch.domain.entities.worker import Worker
from fairdispatch.domain.value_objects.scoring_weights import DEFAULT_WEIGHTS, ScoringWeights


def aggregate_loads(
    workers: Iterable[Worker],
    units: Iterable[Unit],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> dict[str, LoadSummary]:
    """Build one LoadSummary per worker from the units currently assigned.

    1. Every worker gets a zero-initialised summary.
    2. Units whose worker_id matches a known worker add their rooms, area,
       distance and difficulty to that worker's totals. Unknown worker
       references are ignored.
    3. Each balance score is then computed once from the worker's totals.

    Args:
        workers: the worker roster.
        units: any units; unassigned ones are skipped.
        weights: scoring weights applied to the totals.

    Returns:
        Mapping worker_id -> LoadSummary, one entry per worker.
    """
    summaries = {w.id: LoadSummary(worker_id=w.id) for w in workers}

    for unit in units:
        summary = summaries.get(unit.worker_id) if unit.worker_id else None
        if summary is not None:
            summary.add_unit(unit)

    for summary in summaries.values():
        summary.rescore(weights)

    return summaries
