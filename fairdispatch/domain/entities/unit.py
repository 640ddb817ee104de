"""Unit entity — a service location to be assigned to a worker."""

from dataclasses import dataclass
from datetime import datetime

from fairdispatch.domain.value_objects.enums import UnitStatus
from fairdispatch.domain.value_objects.geo_point import GeoPoint

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5


@dataclass
class Unit:
    id: str | None
    name: str
    address: str
    sector: str | None
    rooms: int
    area_m2: float
    distance_km: float
    difficulty: int = 3
    latitude: float | None = None
    longitude: float | None = None
    worker_id: str | None = None
    status: UnitStatus = UnitStatus.AVAILABLE
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def location(self) -> GeoPoint | None:
        return GeoPoint.from_pair(self.latitude, self.longitude)

    def is_assigned(self) -> bool:
        return self.worker_id is not None

    def is_inactive(self) -> bool:
        return self.status == UnitStatus.INACTIVE

    def is_assignable(self) -> bool:
        """Eligible for batch distribution: unassigned and not inactive."""
        return not self.is_assigned() and not self.is_inactive()

    def validation_errors(self) -> list[str]:
        """Return the list of violated attribute rules (empty when well-formed)."""
        problems: list[str] = []
        if self.rooms < 0:
            problems.append(f"negative room count ({self.rooms})")
        if self.area_m2 < 0:
            problems.append(f"negative area ({self.area_m2})")
        if self.distance_km < 0:
            problems.append(f"negative distance ({self.distance_km})")
        if not MIN_DIFFICULTY <= self.difficulty <= MAX_DIFFICULTY:
            problems.append(
                f"difficulty {self.difficulty} outside {MIN_DIFFICULTY}-{MAX_DIFFICULTY}"
            )
        if (self.latitude is None) != (self.longitude is None):
            problems.append("only one of latitude/longitude is set")
        return problems

    def is_well_formed(self) -> bool:
        return not self.validation_errors()
