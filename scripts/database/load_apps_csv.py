#!/usr/bin/env python3
"""
Play Store CSV Loader

Load apps from a Play Store export (googleplaystore.csv layout) into the
apps table.

Usage:
    python3 scripts/database/load_apps_csv.py googleplaystore.csv [--create-tables]
"""

import argparse
import csv
import logging
import os
import sys
from typing import Iterator, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from db.database import create_tables
from db.models.models import App
from db.repositories.unit_of_work import get_unit_of_work

logger = logging.getLogger(__name__)

# CSV header -> App column
COLUMN_MAP = {
    "App": "name",
    "Category": "category",
    "Rating": "rating",
    "Reviews": "reviews",
    "Size": "size",
    "Installs": "installs",
    "Type": "type",
    "Price": "price",
    "Content Rating": "content_rating",
    "Genres": "genres",
    "Last Updated": "last_updated",
    "Current Ver": "current_ver",
    "Android Ver": "android_ver",
}


def _to_float(value: str) -> Optional[float]:
    try:
        rating = float(value)
    except (TypeError, ValueError):
        return None
    # NaN != NaN
    return rating if rating == rating else None


def _to_int(value: str) -> Optional[int]:
    value = (value or "").replace(",", "").strip()
    return int(value) if value.isdigit() else None


def parse_row(row: dict) -> Optional[dict]:
    """Map one CSV row onto App columns. Rows without a name are skipped."""
    fields = {column: (row.get(header) or "").strip() or None for header, column in COLUMN_MAP.items()}
    if not fields["name"]:
        return None

    fields["rating"] = _to_float(fields["rating"])
    fields["reviews"] = _to_int(fields["reviews"])
    return fields


def read_apps(csv_path: str) -> Iterator[dict]:
    with open(csv_path, newline="", encoding="utf-8") as f:
        for row in csv.DictReader(f):
            fields = parse_row(row)
            if fields:
                yield fields


def load_apps(csv_path: str, batch_size: int = 500) -> int:
    """Insert every app in the CSV, committing once per batch. Returns rows loaded."""
    loaded = 0
    batch = []

    for fields in read_apps(csv_path):
        batch.append(App(**fields))
        if len(batch) >= batch_size:
            loaded += _flush(batch)
            batch = []

    if batch:
        loaded += _flush(batch)

    return loaded


def _flush(batch) -> int:
    with get_unit_of_work() as uow:
        uow.session.add_all(batch)
    logger.info(f"📥 Loaded {len(batch)} apps")
    return len(batch)


def main(argv=None):
    """Load the CSV and return how many apps the table holds afterwards."""
    parser = argparse.ArgumentParser(description="Load a Play Store CSV into the apps table")
    parser.add_argument("csv_path", help="Path to googleplaystore.csv")
    parser.add_argument("--batch-size", type=int, default=500)
    parser.add_argument("--create-tables", action="store_true", help="Create the apps table first")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(message)s')

    if args.create_tables:
        create_tables()

    loaded = load_apps(args.csv_path, batch_size=args.batch_size)
    with get_unit_of_work() as uow:
        total = uow.apps.count()

    logger.info(f"✅ {loaded} apps loaded from {args.csv_path}")
    logger.info(f"📊 apps: {total} records")
    return total


if __name__ == "__main__":
    main()
