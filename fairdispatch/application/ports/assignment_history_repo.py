"""Port interface for the append-only assignment history."""

from abc import ABC, abstractmethod
from datetime import datetime

from fairdispatch.domain.entities.assignment_record import AssignmentRecord


class AssignmentHistoryRepository(ABC):
    @abstractmethod
    async def save(self, record: AssignmentRecord) -> AssignmentRecord:
        ...

    @abstractmethod
    async def get_by_id(self, record_id: str) -> AssignmentRecord | None:
        ...

    @abstractmethod
    async def close_open(self, unit_id: str, at: datetime) -> int:
        """Set ended_at on the unit's open record(s). Returns how many were closed."""
        ...

    @abstractmethod
    async def close(self, record_id: str, at: datetime) -> AssignmentRecord | None:
        ...

    @abstractmethod
    async def get_by_unit(self, unit_id: str) -> list[AssignmentRecord]:
        ...

    @abstractmethod
    async def get_all(self, active_only: bool = False) -> list[AssignmentRecord]:
        ...
