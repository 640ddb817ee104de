"""ScoringWeights value object — relative cost of each unit attribute."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringWeights:
    rooms: float = 10.0
    area_m2: float = 0.5
    distance_km: float = 2.0
    difficulty: float = 15.0

    def apply(
        self,
        rooms: float,
        area_m2: float,
        distance_km: float,
        difficulty: float,
    ) -> float:
        return (
            rooms * self.rooms
            + area_m2 * self.area_m2
            + distance_km * self.distance_km
            + difficulty * self.difficulty
        )


DEFAULT_WEIGHTS = ScoringWeights()
