"""Load fixture data into the database.

Usage:
    python -m scripts.load_fixtures [--dataset PATH] [--database-url URL]

Creates the tables if needed and inserts the employees, attendance,
advances and salary payments of a JSON dataset file. Useful for setting up
a development or test environment.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncSession

from wage_reports.config import get_settings
from wage_reports.database import get_engine
from wage_reports.dataset import dataset_rows, load_dataset
from wage_reports.models import Base


DEFAULT_DATASET = Path(__file__).parent.parent / "examples" / "sample_ledgers.json"


async def load_fixtures(dataset_file: Path, database_url: str) -> None:
    """Load a dataset file into the database."""
    if not dataset_file.exists():
        print(f"Error: Dataset file not found: {dataset_file}")
        sys.exit(1)

    print(f"Loading fixtures from: {dataset_file}")
    print(f"Target database: {database_url.split('@')[1] if '@' in database_url else database_url}")

    dataset = load_dataset(dataset_file)
    engine = get_engine(database_url)

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        async with AsyncSession(engine) as session:
            rows = dataset_rows(dataset)
            for row in rows:
                await session.merge(row)
            await session.commit()

        print("\nResults:")
        print(f"  Employees: {len(dataset.employees)}")
        print(f"  Attendance records: {len(dataset.attendance)}")
        print(f"  Advances: {len(dataset.advances)}")
        print(f"  Salary payments: {len(dataset.salary_payments or [])}")
        print("\nFixtures loaded successfully!")

    finally:
        await engine.dispose()


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Load fixture data into the database")
    parser.add_argument(
        "--dataset",
        type=Path,
        default=DEFAULT_DATASET,
        help=f"Path to dataset JSON file (default: {DEFAULT_DATASET})",
    )
    parser.add_argument(
        "--database-url",
        type=str,
        default=get_settings().database_url,
        help="Database URL (default: from settings)",
    )

    args = parser.parse_args()

    asyncio.run(load_fixtures(args.dataset, args.database_url))


if __name__ == "__main__":
    main()
