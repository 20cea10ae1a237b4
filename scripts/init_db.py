"""
Database initialization script.

Run this script to create database tables.

Usage:
    python scripts/init_db.py
"""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.logging_config import setup_logging
from app.db.init_db import init_db

logger = logging.getLogger("scripts.init_db")

if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    logger.info("SAM Database Initialization")

    try:
        init_db()
    except SQLAlchemyError as e:
        logger.error("Database initialization failed: %s", e)
        sys.exit(1)

    logger.info("Database initialized")
    sys.exit(0)
