"""UnitValidationPolicy — reject malformed units at the engine boundary."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fairdispatch.domain.entities.unit import Unit
from fairdispatch.domain.errors import MalformedUnitError

logger = logging.getLogger(__name__)


def ensure_well_formed(unit: Unit) -> Unit:
    """Return the unit unchanged, or raise MalformedUnitError."""
    problems = unit.validation_errors()
    if problems:
        raise MalformedUnitError(unit.id, problems)
    return unit


def split_malformed(units: Iterable[Unit]) -> tuple[list[Unit], list[Unit]]:
    """Partition units into (well_formed, malformed), preserving input order."""
    valid: list[Unit] = []
    malformed: list[Unit] = []
    for unit in units:
        problems = unit.validation_errors()
        if problems:
            logger.warning("Excluding unit %s: %s", unit.id, "; ".join(problems))
            malformed.append(unit)
        else:
            valid.append(unit)
    return valid, malformed
