"""Health check endpoint — database reachability plus roster and unit counts."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fairdispatch.adapters.persistence.database import get_session
from fairdispatch.adapters.persistence.models import UnitModel, WorkerModel

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(session: AsyncSession = Depends(get_session)):
    """Report whether dispatching can run: DB reachable and workers on file."""
    try:
        workers = await session.scalar(select(func.count()).select_from(WorkerModel))
        units = await session.scalar(select(func.count()).select_from(UnitModel))
    except Exception as e:
        logger.warning("Health check: database unavailable: %s", e)
        return {"status": "degraded", "database": f"error: {e}", "workers": None, "units": None}

    return {
        "status": "ok" if workers else "no_workers",
        "database": "connected",
        "workers": workers,
        "units": units,
    }
