"""Distribution endpoints — batch auto-assignment and balance dashboard."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from fairdispatch.adapters.persistence.database import get_session
from fairdispatch.application.use_cases.auto_distribute import AutoDistributeUseCase
from fairdispatch.application.use_cases.balance_report import BalanceReportUseCase
from fairdispatch.domain.value_objects.enums import DistributionStatus
from fairdispatch.infrastructure.api.dependencies import (
    get_auto_distribute_uc,
    get_balance_report_uc,
)
from fairdispatch.infrastructure.api.serializers import (
    serialize_outcome,
    serialize_summary,
    serialize_worker,
)

router = APIRouter(prefix="/distribution", tags=["distribution"])


@router.post("/auto")
async def auto_distribute(
    distribute_uc: AutoDistributeUseCase = Depends(get_auto_distribute_uc),
    session: AsyncSession = Depends(get_session),
):
    """Assign every unassigned, active unit in one greedy pass."""
    report = await distribute_uc.execute()

    if report.status == DistributionStatus.EMPTY_WORKER_ROSTER:
        raise HTTPException(status_code=409, detail="Add workers before distributing")

    await session.commit()
    return {
        "status": report.status.value,
        "total": len(report.outcomes),
        "successful": report.successful,
        "failed": report.failed,
        "excluded_count": report.excluded_count,
        "balance_before": round(report.balance_before, 2),
        "balance_after": round(report.balance_after, 2),
        "results": [serialize_outcome(o) for o in report.outcomes],
    }


@router.get("/balance")
async def balance(report_uc: BalanceReportUseCase = Depends(get_balance_report_uc)):
    """Per-worker load summaries plus the fleet-wide balance percentage."""
    report = await report_uc.execute()
    max_score = report.max_balance_score
    return {
        "global_balance": round(report.global_balance, 2),
        "excluded_count": report.excluded_count,
        "workers": [
            {
                "worker": serialize_worker(wl.worker),
                **serialize_summary(wl.summary),
                "share_of_max": (
                    round(wl.summary.balance_score / max_score * 100, 1) if max_score > 0 else 0.0
                ),
            }
            for wl in report.loads
        ],
    }
