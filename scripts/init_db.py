#!/usr/bin/env python3
"""Database initialization script.

Creates the library tables and, when given a JSON catalogue, copies every
library from it into the database store.
"""
import argparse
import os
import sys

# Add the parent directory to Python path so we can import app modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import func, select

from app.core.config import settings
from app.core.logging import get_logger, setup_logging
from app.models.database_manager import DatabaseManager
from app.models.models import LibraryRow
from app.services.exceptions import StoreError
from app.stores.database_store import DatabaseRecordStore
from app.stores.json_store import JsonRecordStore

logger = get_logger("init_db")


def import_catalogue(store: DatabaseRecordStore, data_file: str) -> int:
    """Copy all libraries of a JSON catalogue into ``store``."""
    source = JsonRecordStore(data_file)
    count = 0
    for library in source.libraries():
        store.save_library(library)
        count += 1
    return count


def main(argv=None):
    """Initialize the database."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--database-url", default=settings.database_url)
    parser.add_argument("--import", dest="data_file", default=None,
                        help="JSON catalogue to import")
    args = parser.parse_args(argv)

    setup_logging()
    logger.info(f"Initializing database at: {args.database_url}")

    try:
        db_manager = DatabaseManager(args.database_url)
        store = DatabaseRecordStore(db_manager)
        if args.data_file:
            imported = import_catalogue(store, args.data_file)
            logger.info(f"Imported {imported} libraries from {args.data_file}")

        with db_manager.get_session() as session:
            total = session.execute(select(func.count()).select_from(LibraryRow)).scalar_one()
            logger.info(f"Current libraries in database: {total}")
        db_manager.close()
    except StoreError as e:
        logger.error(f"Failed to initialize database: {e.message} ({e.detail})")
        sys.exit(1)


if __name__ == "__main__":
    main()
