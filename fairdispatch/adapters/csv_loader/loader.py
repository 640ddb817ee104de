"""CSV loader — reads and normalizes unit and worker data files."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from fairdispatch.adapters.csv_loader.normalizer import (
    clean_string,
    normalize_column_name,
    parse_float,
    parse_int,
    parse_status,
)

logger = logging.getLogger(__name__)


def _sniff_dialect(sample: str) -> type[csv.Dialect] | csv.Dialect:
    """Detect the delimiter (comma/semicolon/tab) to support Excel FR exports."""
    if not sample:
        return csv.get_dialect("excel")

    first_line = sample.splitlines()[0]
    delims = [";", ",", "\t"]
    counts = {d: first_line.count(d) for d in delims}
    best_delim = max(counts, key=counts.get)

    if counts[best_delim] > 0:
        class DynamicDialect(csv.excel):
            delimiter = best_delim
        return DynamicDialect

    return csv.get_dialect("excel")


def _read_csv(file_path: Path, encoding: str = "utf-8-sig") -> list[dict[str, str | None]]:
    """Read a CSV file with BOM handling and column normalization.

    Returns:
        List of dicts keyed by normalized column names.
    """
    with open(file_path, encoding=encoding, newline="") as f:
        sample = f.read(4096)
        f.seek(0)
        reader = csv.DictReader(f, dialect=_sniff_dialect(sample))
        if reader.fieldnames is None:
            raise ValueError(f"CSV file {file_path} has no header row")

        col_map = {col: normalize_column_name(col) for col in reader.fieldnames}
        rows = []
        for raw_row in reader:
            row = {col_map[k]: clean_string(v) for k, v in raw_row.items() if k is not None}
            rows.append(row)

    logger.info("Loaded %d rows from %s (columns: %s)", len(rows), file_path.name, list(col_map.values()))
    return rows


def _first(row: dict[str, str | None], *keys: str) -> str | None:
    for key in keys:
        value = row.get(key)
        if value:
            return value
    return None


def load_workers(file_path: Path) -> list[dict]:
    """Load and normalize the workers CSV.

    Expected columns (after normalization, French or English):
        nom/name, email, secteur_preference/preferred_sector,
        charge_actuelle/current_load
    """
    workers = []
    for row in _read_csv(file_path):
        workers.append({
            "name": _first(row, "nom", "name") or "",
            "email": _first(row, "email", "courriel") or "",
            "preferred_sector": _first(row, "secteur_preference", "secteur_préféré", "preferred_sector", "secteur"),
            "current_load": parse_int(_first(row, "charge_actuelle", "current_load")),
        })
    logger.info("Parsed %d workers", len(workers))
    return workers


def load_units(file_path: Path) -> list[dict]:
    """Load and normalize the units CSV.

    Expected columns (after normalization, French or English):
        nom/name, adresse/address, secteur/sector, nombre_chambres/rooms,
        surface/area_m2, distance_base/distance_km, difficulte/difficulty,
        latitude, longitude, statut/status

    Values are parsed but not validated; malformed rows are caught by the
    engine's unit validation.
    """
    units = []
    for row in _read_csv(file_path):
        units.append({
            "name": _first(row, "nom", "name") or "",
            "address": _first(row, "adresse", "address") or "",
            "sector": _first(row, "secteur", "sector"),
            "rooms": parse_int(_first(row, "nombre_chambres", "nombre_de_chambres", "chambres", "rooms")),
            "area_m2": parse_float(_first(row, "surface", "area_m2", "area")) or 0.0,
            "distance_km": parse_float(_first(row, "distance_base", "distance_km", "distance")) or 0.0,
            "difficulty": parse_int(_first(row, "difficulte", "difficulté", "difficulty"), default=3),
            "latitude": parse_float(_first(row, "latitude", "lat")),
            "longitude": parse_float(_first(row, "longitude", "lon", "lng")),
            "status": parse_status(_first(row, "statut", "status")),
        })
    logger.info("Parsed %d units", len(units))
    return units
