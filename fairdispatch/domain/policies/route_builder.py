"""RouteBuilderPolicy — nearest-neighbour visiting order for a worker's units."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from fairdispatch.domain.entities.unit import Unit
from fairdispatch.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class RouteLeg:
    unit: Unit
    distance_km: float


@dataclass
class Route:
    """Ordered visiting sequence with per-leg and total distance."""

    worker_id: str
    legs: list[RouteLeg] = field(default_factory=list)
    total_distance_km: float = 0.0
    base_point: GeoPoint | None = None
    excluded_count: int = 0

    @property
    def unit_ids(self) -> list[str]:
        return [leg.unit.id for leg in self.legs]


def build_route(
    worker_id: str,
    units: Sequence[Unit],
    base_point: GeoPoint | None = None,
) -> Route:
    """Greedy nearest-neighbour tour over units that carry coordinates.

    Units without a full coordinate pair, and malformed units, are left
    out of the route and counted in ``excluded_count``.

    Starting rule:
      * with ``base_point``: the first leg is measured from the base point.
      * without: the unit with the smallest id is visited first with a leg
        distance of 0, and the tour continues from there.

    Ties between equally near units go to the earliest one in input order.
    """
    routable = [u for u in units if u.location is not None and u.is_well_formed()]
    route = Route(
        worker_id=worker_id,
        base_point=base_point,
        excluded_count=len(units) - len(routable),
    )
    if not routable:
        return route

    remaining = list(routable)

    if base_point is None:
        first = min(remaining, key=lambda u: str(u.id))
        remaining.remove(first)
        route.legs.append(RouteLeg(unit=first, distance_km=0.0))
        current = first.location
    else:
        current = base_point

    while remaining:
        nearest = min(remaining, key=lambda u: current.haversine_km(u.location))
        leg_km = current.haversine_km(nearest.location)
        remaining.remove(nearest)

        route.legs.append(RouteLeg(unit=nearest, distance_km=leg_km))
        route.total_distance_km += leg_km
        current = nearest.location

    return route
