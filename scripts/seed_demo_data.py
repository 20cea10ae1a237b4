"""
Demo data seeding script.

Creates the tables (if needed) and inserts the synthetic Rugby Sevens
squad. The database must not already contain the demo athletes.

Usage:
    python scripts/seed_demo_data.py [--seed 42]
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.config import settings
from app.core.logging_config import setup_logging
from app.db.demo_data import seed_demo_data
from app.db.init_db import init_db
from app.db.session import engine

logger = logging.getLogger("scripts.seed_demo_data")


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the database with a demo squad.")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    setup_logging(settings.LOG_LEVEL)
    init_db()
    try:
        with Session(engine) as session:
            count = seed_demo_data(session, args.seed)
    except SQLAlchemyError as e:
        logger.error("Seeding failed: %s", e)
        return 1

    logger.info("Inserted %d athletes with seed %d", count, args.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
