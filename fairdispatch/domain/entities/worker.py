"""Worker entity — a service provider available for assignment."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Worker:
    id: str | None
    name: str
    email: str
    preferred_sector: str | None = None
    current_load: int = 0
    created_at: datetime | None = None

    def prefers(self, sector: str | None) -> bool:
        return self.preferred_sector is not None and self.preferred_sector == sector
