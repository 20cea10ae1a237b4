"""
Development server launcher.

Loads .env file and runs the SAM API with uvicorn in reload mode.

Usage:
    python scripts/run_dev.py [--host 127.0.0.1] [--port 8000] [--no-reload]
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

import uvicorn

from app.core.config import settings
from app.core.logging_config import setup_logging

logger = logging.getLogger("scripts.run_dev")


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the SAM API for local development.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--no-reload", action="store_true", help="Disable auto-reload")
    args = parser.parse_args()

    setup_logging(settings.LOG_LEVEL)
    logger.info("Starting %s on http://%s:%d (docs at /docs)", settings.PROJECT_NAME, args.host, args.port)
    if not settings.airvisual_keys:
        logger.warning("No AirVisual API key configured; /api/v1/weather lookups will return 503")

    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=not args.no_reload,
                log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
