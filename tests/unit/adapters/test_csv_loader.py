"""Tests for CSV loader functions."""

import csv
import tempfile
from pathlib import Path

import pytest

from fairdispatch.adapters.csv_loader.loader import load_units, load_workers


def _write_csv(
    rows: list[dict], path: Path, encoding: str = "utf-8-sig", delimiter: str = ","
) -> None:
    """Helper to write a test CSV file."""
    if not rows:
        return
    with open(path, "w", encoding=encoding, newline="") as f:
        writer = csv.DictWriter(f, fieldnames=rows[0].keys(), delimiter=delimiter)
        writer.writeheader()
        writer.writerows(rows)


def test_load_workers_basic():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "agents.csv"
        _write_csv([
            {"Nom": "Claire Martin", "Email": "claire@example.com", "Secteur préféré": "Nord"},
            {"Nom": "Louis Petit", "Email": "louis@example.com", "Secteur préféré": ""},
        ], csv_path)

        workers = load_workers(csv_path)
        assert len(workers) == 2
        assert workers[0]["name"] == "Claire Martin"
        assert workers[0]["preferred_sector"] == "Nord"
        assert workers[1]["preferred_sector"] is None
        assert workers[1]["current_load"] == 0


def test_load_workers_english_headers():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "workers.csv"
        _write_csv([
            {"name": "Ana", "email": "ana@example.com", "preferred_sector": "Sud", "current_load": "2"},
        ], csv_path)

        [worker] = load_workers(csv_path)
        assert worker["preferred_sector"] == "Sud"
        assert worker["current_load"] == 2


def test_load_units_french_excel_export():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "appartements.csv"
        _write_csv([
            {
                "Nom": "Appt 12", "Adresse": "12 rue de la Paix", "Secteur": "Centre",
                "Nombre de chambres": "3", "Surface": "72,5", "Distance base": "4,2",
                "Difficulté": "4", "Latitude": "48,8698", "Longitude": "2,3311",
                "Statut": "Disponible",
            },
        ], csv_path, delimiter=";")

        [unit] = load_units(csv_path)
        assert unit["name"] == "Appt 12"
        assert unit["sector"] == "Centre"
        assert unit["rooms"] == 3
        assert unit["area_m2"] == 72.5
        assert unit["distance_km"] == pytest.approx(4.2)
        assert unit["difficulty"] == 4
        assert unit["latitude"] == pytest.approx(48.8698)
        assert unit["status"] == "available"


def test_load_units_defaults():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "units.csv"
        _write_csv([
            {"name": "Studio", "address": "1 quai", "rooms": "", "area_m2": "", "status": "inactif"},
        ], csv_path)

        [unit] = load_units(csv_path)
        assert unit["rooms"] == 0
        assert unit["area_m2"] == 0.0
        assert unit["distance_km"] == 0.0
        assert unit["difficulty"] == 3
        assert unit["latitude"] is None
        assert unit["sector"] is None
        assert unit["status"] == "inactive"


def test_load_units_keeps_out_of_range_values():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "units.csv"
        _write_csv([{"name": "X", "address": "Y", "rooms": "-1", "difficulty": "9"}], csv_path)

        [unit] = load_units(csv_path)
        assert unit["rooms"] == -1
        assert unit["difficulty"] == 9


def test_header_only_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "empty.csv"
        csv_path.write_text("name,address\n", encoding="utf-8")
        assert load_units(csv_path) == []
