"""Port interface for scoping a group of repository writes."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class UnitOfWork(ABC):
    @abstractmethod
    def savepoint(self) -> AbstractAsyncContextManager:
        """Scope for one pairing's writes.

        Leaving the block normally keeps the writes; an exception inside it
        discards them and propagates, leaving the enclosing transaction usable.
        """
        ...
