"""AssignmentRecord entity — one unit bound to one worker over a time interval."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class AssignmentRecord:
    id: str | None
    unit_id: str
    worker_id: str
    started_at: datetime
    ended_at: datetime | None = None
    balance_score: float | None = None

    def is_open(self) -> bool:
        return self.ended_at is None

    def close(self, at: datetime) -> None:
        if self.ended_at is None:
            self.ended_at = at
