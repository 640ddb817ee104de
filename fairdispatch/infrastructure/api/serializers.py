"""Domain object → JSON-ready dict conversion shared by the routers."""

from __future__ import annotations

from fairdispatch.application.use_cases.assign_unit import AssignmentOutcome
from fairdispatch.domain.entities.assignment_record import AssignmentRecord
from fairdispatch.domain.entities.load_summary import LoadSummary
from fairdispatch.domain.entities.unit import Unit
from fairdispatch.domain.entities.worker import Worker
from fairdispatch.domain.policies.route_builder import Route


def serialize_worker(w: Worker) -> dict:
    return {
        "id": w.id,
        "name": w.name,
        "email": w.email,
        "preferred_sector": w.preferred_sector,
        "current_load": w.current_load,
        "created_at": w.created_at.isoformat() if w.created_at else None,
    }


def serialize_unit(u: Unit) -> dict:
    return {
        "id": u.id,
        "name": u.name,
        "address": u.address,
        "sector": u.sector,
        "rooms": u.rooms,
        "area_m2": u.area_m2,
        "distance_km": u.distance_km,
        "difficulty": u.difficulty,
        "latitude": u.latitude,
        "longitude": u.longitude,
        "worker_id": u.worker_id,
        "status": u.status.value,
        "created_at": u.created_at.isoformat() if u.created_at else None,
        "updated_at": u.updated_at.isoformat() if u.updated_at else None,
    }


def serialize_summary(s: LoadSummary) -> dict:
    return {
        "worker_id": s.worker_id,
        "total_rooms": s.total_rooms,
        "total_area_m2": round(s.total_area_m2, 2),
        "total_distance_km": round(s.total_distance_km, 2),
        "total_difficulty": s.total_difficulty,
        "unit_count": s.unit_count,
        "balance_score": round(s.balance_score, 2),
    }


def serialize_outcome(o: AssignmentOutcome) -> dict:
    return {
        "unit_id": o.unit_id,
        "worker_id": o.worker_id,
        "success": o.success,
        "balance_score": o.balance_score,
        "error": o.error,
    }


def serialize_record(r: AssignmentRecord) -> dict:
    return {
        "id": r.id,
        "unit_id": r.unit_id,
        "worker_id": r.worker_id,
        "started_at": r.started_at.isoformat(),
        "ended_at": r.ended_at.isoformat() if r.ended_at else None,
        "balance_score": r.balance_score,
        "active": r.is_open(),
    }


def serialize_route(route: Route) -> dict:
    return {
        "worker_id": route.worker_id,
        "base_point": (
            {"latitude": route.base_point.latitude, "longitude": route.base_point.longitude}
            if route.base_point else None
        ),
        "stops": [
            {
                "order": i + 1,
                "unit_id": leg.unit.id,
                "name": leg.unit.name,
                "latitude": leg.unit.latitude,
                "longitude": leg.unit.longitude,
                "leg_distance_km": round(leg.distance_km, 3),
            }
            for i, leg in enumerate(route.legs)
        ],
        "total_distance_km": round(route.total_distance_km, 3),
        "excluded_count": route.excluded_count,
    }
