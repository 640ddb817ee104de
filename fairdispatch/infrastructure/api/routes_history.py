"""Assignment history endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from fairdispatch.adapters.persistence.database import get_session
from fairdispatch.application.ports.assignment_history_repo import AssignmentHistoryRepository
from fairdispatch.application.use_cases.close_assignment_record import (
    CloseAssignmentRecordUseCase,
)
from fairdispatch.infrastructure.api.dependencies import get_close_record_uc, get_history_repo
from fairdispatch.infrastructure.api.serializers import serialize_record

router = APIRouter(prefix="/history", tags=["history"])


@router.get("")
async def list_history(
    active_only: bool = False,
    history: AssignmentHistoryRepository = Depends(get_history_repo),
):
    records = await history.get_all(active_only=active_only)
    return {"total": len(records), "records": [serialize_record(r) for r in records]}


@router.post("/{record_id}/close")
async def close_record(
    record_id: str,
    close_uc: CloseAssignmentRecordUseCase = Depends(get_close_record_uc),
    session: AsyncSession = Depends(get_session),
):
    """End an open assignment record (no-op if already closed)."""
    record = await close_uc.execute(record_id)
    if record is None:
        raise HTTPException(status_code=404, detail="History record not found")
    await session.commit()
    return serialize_record(record)
