"""Port interface for worker persistence."""

from abc import ABC, abstractmethod

from fairdispatch.domain.entities.worker import Worker


class WorkerRepository(ABC):
    @abstractmethod
    async def save(self, worker: Worker) -> Worker:
        ...

    @abstractmethod
    async def get_by_id(self, worker_id: str) -> Worker | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Worker]:
        ...
