"""Domain errors raised by the allocation policies."""

from __future__ import annotations


class EmptyWorkerRosterError(ValueError):
    """Raised when a batch distribution is requested with no workers."""

    def __init__(self) -> None:
        super().__init__("No workers available for assignment")


class MalformedUnitError(ValueError):
    """A unit violates one of its attribute invariants."""

    def __init__(self, unit_id: str | None, problems: list[str]):
        self.unit_id = unit_id
        self.problems = problems
        super().__init__(f"Unit {unit_id} is malformed: {'; '.join(problems)}")
