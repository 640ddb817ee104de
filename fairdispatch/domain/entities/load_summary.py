"""LoadSummary — per-worker workload totals, derived on demand and never stored."""

from dataclasses import dataclass

from fairdispatch.domain.entities.unit import Unit
from fairdispatch.domain.value_objects.scoring_weights import DEFAULT_WEIGHTS, ScoringWeights


@dataclass
class LoadSummary:
    worker_id: str
    total_rooms: int = 0
    total_area_m2: float = 0.0
    total_distance_km: float = 0.0
    total_difficulty: int = 0
    unit_count: int = 0
    balance_score: float = 0.0

    def add_unit(self, unit: Unit) -> None:
        """Fold a unit's attributes into the running totals.

        The balance score is left untouched; call rescore() once the totals
        are final.
        """
        self.total_rooms += unit.rooms
        self.total_area_m2 += unit.area_m2
        self.total_distance_km += unit.distance_km
        self.total_difficulty += unit.difficulty
        self.unit_count += 1

    def rescore(self, weights: ScoringWeights = DEFAULT_WEIGHTS) -> float:
        """Recompute the balance score from the totals (not a sum of unit scores)."""
        self.balance_score = weights.apply(
            self.total_rooms,
            self.total_area_m2,
            self.total_distance_km,
            self.total_difficulty,
        )
        return self.balance_score
