"""Unit endpoints — listing, suggestions and manual assignment."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from fairdispatch.adapters.persistence.database import get_session
from fairdispatch.application.ports.unit_repo import UnitRepository
from fairdispatch.application.use_cases.assign_unit import AssignUnitUseCase
from fairdispatch.application.use_cases.recommend_worker import (
    RecommendationsUseCase,
    Suggestion,
)
from fairdispatch.domain.value_objects.enums import UnitStatus
from fairdispatch.infrastructure.api.dependencies import (
    get_assign_unit_uc,
    get_recommendations_uc,
    get_unit_repo,
)
from fairdispatch.infrastructure.api.serializers import serialize_outcome, serialize_unit

router = APIRouter(prefix="/units", tags=["units"])


class AssignRequest(BaseModel):
    worker_id: str | None = None


@router.get("")
async def list_units(
    status: UnitStatus | None = None,
    units: UnitRepository = Depends(get_unit_repo),
):
    items = await units.get_all(status)
    return {"total": len(items), "units": [serialize_unit(u) for u in items]}


@router.get("/suggestions")
async def list_suggestions(
    recommendations: RecommendationsUseCase = Depends(get_recommendations_uc),
):
    """Suggested worker for every unassigned, active unit."""
    suggestions = await recommendations.execute()
    return {
        "total": len(suggestions),
        "suggestions": [_serialize_suggestion(s) for s in suggestions],
    }


@router.get("/{unit_id}/suggestion")
async def unit_suggestion(
    unit_id: str,
    recommendations: RecommendationsUseCase = Depends(get_recommendations_uc),
):
    suggestion = await recommendations.for_unit(unit_id)
    if suggestion is None:
        raise HTTPException(status_code=404, detail="Unit not found")
    return _serialize_suggestion(suggestion)


@router.post("/{unit_id}/assign")
async def assign_unit(
    unit_id: str,
    body: AssignRequest,
    assign_uc: AssignUnitUseCase = Depends(get_assign_unit_uc),
    session: AsyncSession = Depends(get_session),
):
    """Assign the unit to ``worker_id``, or release it when worker_id is null."""
    outcome = await assign_uc.execute(unit_id, body.worker_id)
    if not outcome.success:
        await session.rollback()
        status_code = 404 if outcome.error and "not found" in outcome.error else 400
        raise HTTPException(status_code=status_code, detail=outcome.error)

    await session.commit()
    return {"status": "ok", **serialize_outcome(outcome)}


def _serialize_suggestion(s: Suggestion) -> dict:
    return {
        "unit_id": s.unit_id,
        "unit_score": round(s.unit_score, 2),
        "worker_id": s.worker_id,
    }
