"""WorkloadScorePolicy — scalar cost of servicing a single unit."""

from __future__ import annotations

from fairdispatch.domain.entities.unit import Unit
from fairdispatch.domain.value_objects.scoring_weights import DEFAULT_WEIGHTS, ScoringWeights


def workload_score(unit: Unit, weights: ScoringWeights = DEFAULT_WEIGHTS) -> float:
    """Pure function: weighted cost of one unit.

    Default weighting:
        rooms * 10 + area_m2 * 0.5 + distance_km * 2 + difficulty * 15

    Inputs are assumed validated (see unit_validation); no error conditions.
    """
    return weights.apply(unit.rooms, unit.area_m2, unit.distance_km, unit.difficulty)
