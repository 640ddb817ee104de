"""BuildRouteUseCase — visiting order for one worker's assigned units."""

from __future__ import annotations

import logging

from fairdispatch.application.ports.unit_repo import UnitRepository
from fairdispatch.application.ports.worker_repo import WorkerRepository
from fairdispatch.domain.policies.route_builder import Route, build_route
from fairdispatch.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)


class BuildRouteUseCase:
    def __init__(
        self,
        unit_repo: UnitRepository,
        worker_repo: WorkerRepository,
        default_base_point: GeoPoint | None = None,
    ):
        self._units = unit_repo
        self._workers = worker_repo
        self._default_base = default_base_point

    async def execute(
        self,
        worker_id: str,
        base_point: GeoPoint | None = None,
    ) -> Route | None:
        """Return the worker's route, or None if the worker does not exist.

        ``base_point`` falls back to the configured depot when omitted.
        """
        worker = await self._workers.get_by_id(worker_id)
        if worker is None:
            return None

        units = await self._units.get_by_worker(worker_id)
        route = build_route(worker_id, units, base_point or self._default_base)

        if route.excluded_count:
            logger.info(
                "Route for worker %s: %d unit(s) without usable coordinates skipped",
                worker_id, route.excluded_count,
            )
        return route
