# create_tables.py
"""
Create the users and tasks tables and seed the configured admin accounts
without starting the server
"""

import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from taskboard.bootstrap import seed_database
from taskboard.config import Settings
from taskboard.database import Database

logger = logging.getLogger(__name__)


def create_tables() -> bool:
    settings = Settings.from_env()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))
    database = Database(settings.database_url)
    try:
        seed_database(database, settings)
        logger.info("All tables created successfully!")
        return True
    except SQLAlchemyError:
        logger.exception("Error creating tables")
        return False
    finally:
        database.dispose()


if __name__ == "__main__":
    sys.exit(0 if create_tables() else 1)
