"""Port interface for unit persistence."""

from abc import ABC, abstractmethod
from datetime import datetime

from fairdispatch.domain.entities.unit import Unit
from fairdispatch.domain.value_objects.enums import UnitStatus


class UnitRepository(ABC):
    @abstractmethod
    async def save(self, unit: Unit) -> Unit:
        ...

    @abstractmethod
    async def get_by_id(self, unit_id: str) -> Unit | None:
        ...

    @abstractmethod
    async def get_all(self, status: UnitStatus | None = None) -> list[Unit]:
        """Return all units, optionally restricted to one status."""
        ...

    @abstractmethod
    async def get_by_worker(self, worker_id: str) -> list[Unit]:
        ...

    @abstractmethod
    async def commit_assignment(
        self, unit_id: str, worker_id: str | None, at: datetime
    ) -> bool:
        """Bind the unit to ``worker_id`` (or release it when None).

        Must keep status consistent: ASSIGNED with a worker, AVAILABLE
        without one. Returns False if the unit does not exist.
        """
        ...
