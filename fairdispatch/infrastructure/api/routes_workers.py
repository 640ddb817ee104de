"""Worker endpoints — roster listing and visiting route."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from fairdispatch.application.ports.worker_repo import WorkerRepository
from fairdispatch.application.use_cases.build_route import BuildRouteUseCase
from fairdispatch.domain.value_objects.geo_point import GeoPoint
from fairdispatch.infrastructure.api.dependencies import get_build_route_uc, get_worker_repo
from fairdispatch.infrastructure.api.serializers import serialize_route, serialize_worker

router = APIRouter(prefix="/workers", tags=["workers"])


@router.get("")
async def list_workers(workers: WorkerRepository = Depends(get_worker_repo)):
    roster = await workers.get_all()
    return {"total": len(roster), "workers": [serialize_worker(w) for w in roster]}


@router.get("/{worker_id}/route")
async def worker_route(
    worker_id: str,
    latitude: float | None = Query(default=None, ge=-90, le=90),
    longitude: float | None = Query(default=None, ge=-180, le=180),
    route_uc: BuildRouteUseCase = Depends(get_build_route_uc),
):
    """Nearest-neighbour visiting order over the worker's assigned units.

    Pass both latitude and longitude to start from a base point; otherwise
    the configured depot (if any) is used.
    """
    if (latitude is None) != (longitude is None):
        raise HTTPException(
            status_code=422, detail="latitude and longitude must be given together"
        )
    base = GeoPoint(latitude, longitude) if latitude is not None else None

    route = await route_uc.execute(worker_id, base)
    if route is None:
        raise HTTPException(status_code=404, detail="Worker not found")
    return serialize_route(route)
