"""Seed database from CSV files.

Usage:
    python -m fairdispatch.tools.seed_db
    python -m fairdispatch.tools.seed_db --data-dir data
    python -m fairdispatch.tools.seed_db --drop  # drop existing data first
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from fairdispatch.adapters.csv_loader.loader import load_units, load_workers
from fairdispatch.adapters.persistence.database import async_session_factory
from fairdispatch.adapters.persistence.models import (
    AssignmentRecordModel,
    UnitModel,
    WorkerModel,
)
from fairdispatch.config import settings

logger = logging.getLogger(__name__)


async def _drop_data(session: AsyncSession) -> None:
    """Delete all data in correct order (respecting FK constraints)."""
    for model in [AssignmentRecordModel, UnitModel, WorkerModel]:
        await session.execute(delete(model))
    await session.commit()
    logger.info("Dropped all existing data")


def _find_csv(data_dir: Path, keywords: list[str]) -> Path | None:
    """Return the first CSV in data_dir whose stem contains one of the keywords."""
    for path in sorted(data_dir.glob("*.csv")):
        stem = path.stem.lower()
        if any(k in stem for k in keywords):
            return path
    return None


async def seed(data_dir: Path, drop: bool = False) -> dict[str, int]:
    """Main seed function. Returns counts of seeded records."""
    counts = {"workers": 0, "units": 0}

    worker_csv = _find_csv(data_dir, ["workers", "agents"])
    unit_csv = _find_csv(data_dir, ["units", "appartements", "apartments"])

    if not worker_csv:
        raise FileNotFoundError(f"No workers CSV found in {data_dir}. Expected workers.csv or agents.csv")
    if not unit_csv:
        raise FileNotFoundError(f"No units CSV found in {data_dir}. Expected units.csv or appartements.csv")

    async with async_session_factory() as session:
        if drop:
            await _drop_data(session)

        for wd in load_workers(worker_csv):
            if not wd["email"]:
                logger.warning("Skipping worker '%s' without email", wd["name"])
                continue
            existing = await session.execute(
                select(WorkerModel).where(WorkerModel.email == wd["email"])
            )
            if existing.scalar_one_or_none():
                logger.debug("Worker '%s' already exists, skipping", wd["email"])
                continue
            session.add(WorkerModel(**wd))
            counts["workers"] += 1
        await session.flush()

        for ud in load_units(unit_csv):
            existing = await session.execute(
                select(UnitModel).where(
                    UnitModel.name == ud["name"], UnitModel.address == ud["address"]
                )
            )
            if existing.scalar_one_or_none():
                logger.debug("Unit '%s' already exists, skipping", ud["name"])
                continue
            # Units arrive unassigned; an "assigned" label without a worker is meaningless
            if ud["status"] == "assigned":
                ud["status"] = "available"
            session.add(UnitModel(**ud))
            counts["units"] += 1

        await session.commit()

    logger.info("Seeded %d workers, %d units", counts["workers"], counts["units"])
    return counts


async def _verify_data() -> None:
    """Print sanity checks after seeding."""
    async with async_session_factory() as session:
        workers = (await session.execute(select(WorkerModel))).scalars().all()
        units = (await session.execute(select(UnitModel))).scalars().all()

        print(f"\n{'='*50}")
        print("SEED VERIFICATION")
        print(f"{'='*50}")
        print(f"Workers: {len(workers)}")
        print(f"Units:   {len(units)}")

        with_coords = sum(1 for u in units if u.latitude is not None and u.longitude is not None)
        print(f"Units with coordinates: {with_coords}/{len(units)}")

        statuses: dict[str, int] = {}
        for u in units:
            statuses[u.status] = statuses.get(u.status, 0) + 1
        print(f"Status distribution: {statuses}")

        sectors = {u.sector for u in units if u.sector}
        covered = {w.preferred_sector for w in workers if w.preferred_sector} & sectors
        print(f"Sectors covered by a preference: {len(covered)}/{len(sectors)}")
        print(f"{'='*50}\n")


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the dispatch database from CSV files")
    parser.add_argument(
        "--data-dir", type=str, default=settings.csv_data_path,
        help="Directory containing CSV files (default: CSV_DATA_PATH)",
    )
    parser.add_argument(
        "--drop", action="store_true",
        help="Drop existing data before seeding",
    )
    parser.add_argument(
        "--verify-only", action="store_true",
        help="Only run verification, don't seed",
    )
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level, format="%(levelname)s | %(message)s")

    data_dir = Path(args.data_dir)
    if not args.verify_only and not data_dir.exists():
        logger.error("Data directory not found: %s", data_dir)
        sys.exit(1)

    if args.verify_only:
        asyncio.run(_verify_data())
    else:
        async def run_all():
            await seed(data_dir, drop=args.drop)
            await _verify_data()
        asyncio.run(run_all())


if __name__ == "__main__":
    main()
