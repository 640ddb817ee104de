"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class UnitStatus(str, Enum):
    AVAILABLE = "available"
    ASSIGNED = "assigned"
    INACTIVE = "inactive"


class DistributionStatus(str, Enum):
    PLANNED = "planned"
    NOTHING_TO_ASSIGN = "nothing_to_assign"
    NO_VIABLE_ASSIGNMENT = "no_viable_assignment"
    EMPTY_WORKER_ROSTER = "empty_worker_roster"
