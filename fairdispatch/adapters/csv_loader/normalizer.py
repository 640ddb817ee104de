"""CSV value normalization — handles BOM, trailing spaces, decimal commas."""

from __future__ import annotations

import re

# French and English status labels, mapped onto UnitStatus values
STATUS_ALIASES: dict[str, str] = {
    "disponible": "available",
    "available": "available",
    "assigne": "assigned",
    "assigné": "assigned",
    "assigned": "assigned",
    "inactif": "inactive",
    "inactive": "inactive",
}


def normalize_column_name(name: str) -> str:
    """Normalize a CSV column name.

    - Removes BOM characters (\\ufeff)
    - Strips leading/trailing whitespace
    - Replaces runs of spaces / non-breaking spaces with a single underscore
    - Lowercases
    - Strips non-word characters (accented letters are kept)
    """
    name = name.replace("\ufeff", "")
    name = name.strip()
    name = re.sub(r"[\s\u00a0]+", "_", name)
    name = name.lower()
    name = re.sub(r"[^\w]", "", name, flags=re.UNICODE)
    return name


def clean_string(value: str | None) -> str | None:
    """Strip whitespace and return None for empty strings."""
    if value is None:
        return None
    value = value.strip()
    return value if value else None


def parse_float(value: str | None) -> float | None:
    """Parse "12.5" or "12,5"; None for blanks or garbage."""
    if not value:
        return None
    try:
        return float(value.replace(",", ".").strip())
    except (ValueError, AttributeError):
        return None


def parse_int(value: str | None, default: int = 0) -> int:
    """Parse "4" or "4.0"; ``default`` for blanks or garbage."""
    if not value:
        return default
    try:
        return int(float(str(value).replace(",", ".").strip()))
    except ValueError:
        return default


def parse_status(raw: str | None) -> str:
    """Map a French or English status label to a UnitStatus value."""
    if not raw:
        return "available"
    return STATUS_ALIASES.get(raw.strip().lower(), "available")
