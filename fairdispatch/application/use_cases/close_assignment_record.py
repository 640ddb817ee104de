"""CloseAssignmentRecordUseCase — end an assignment and release its unit."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fairdispatch.application.ports.assignment_history_repo import AssignmentHistoryRepository
from fairdispatch.application.ports.unit_repo import UnitRepository
from fairdispatch.domain.entities.assignment_record import AssignmentRecord

logger = logging.getLogger(__name__)


class CloseAssignmentRecordUseCase:
    """End an open history record.

    Closing the record ends the assignment itself: if the unit is still held
    by the record's worker it goes back to available. Already-closed records
    are returned unchanged and leave the unit alone.
    """

    def __init__(self, history_repo: AssignmentHistoryRepository, unit_repo: UnitRepository):
        self._history = history_repo
        self._units = unit_repo

    async def execute(
        self, record_id: str, at: datetime | None = None
    ) -> AssignmentRecord | None:
        record = await self._history.get_by_id(record_id)
        if record is None:
            logger.warning("History record %s not found", record_id)
            return None
        if not record.is_open():
            return record

        at = at or datetime.now(timezone.utc)
        closed = await self._history.close(record_id, at)

        unit = await self._units.get_by_id(record.unit_id)
        if unit is not None and unit.worker_id == record.worker_id:
            await self._units.commit_assignment(unit.id, None, at)
            logger.info("Unit %s released from worker %s", unit.id, record.worker_id)
        return closed
