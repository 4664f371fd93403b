"""
Database initialization script.
Applies the Alembic migrations, or with --create-all creates the tables
straight from the SQLAlchemy models.
Run this as: python init_db.py
"""

import argparse
import logging
import sys

from prolink.core.config import settings
from prolink.db.init_db import create_all_tables, init_db

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger("db-init")

def main() -> int:
    parser = argparse.ArgumentParser(description="Initialize the Prolink database")
    parser.add_argument(
        "--create-all",
        action="store_true",
        help="Create tables from the models instead of running migrations"
    )
    args = parser.parse_args()

    logger.info(f"Initializing database at: {settings.DATABASE_URL}")
    if args.create_all:
        return 0 if create_all_tables() else 1

    try:
        init_db()
    except Exception:
        return 1
    return 0

if __name__ == "__main__":
    logger.info("Starting database initialization")
    status = main()
    if status == 0:
        logger.info("Database initialization completed successfully")
    else:
        logger.error("Database initialization failed")
    sys.exit(status)
