"""BalanceMetricPolicy — fleet-wide equity percentage."""

from __future__ import annotations

import math
from collections.abc import Iterable

from fairdispatch.domain.entities.load_summary import LoadSummary


def global_balance(summaries: Iterable[LoadSummary]) -> float:
    """Reduce per-worker balance scores to a percentage in [0, 100].

    100 means every worker carries the same load; 0 means the load is
    maximally skewed. Computed as ``max(0, 100 - cv)`` where ``cv`` is the
    coefficient of variation of the balance scores, in percent, using the
    population standard deviation. A non-positive mean yields ``cv = 0``,
    so an idle fleet reports 100.
    """
    scores = [s.balance_score for s in summaries]
    if not scores:
        return 0.0

    mean = sum(scores) / len(scores)
    variance = sum((score - mean) ** 2 for score in scores) / len(scores)
    std_dev = math.sqrt(variance)

    cv = (std_dev / mean) * 100 if mean > 0 else 0.0
    return max(0.0, 100.0 - cv)
