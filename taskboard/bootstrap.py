import logging

from sqlalchemy.exc import SQLAlchemyError

from taskboard.config.settings import Settings
from taskboard.database import Database
from taskboard.services.auth_service import AuthService
from taskboard.utils.errors import TaskboardError

logger = logging.getLogger(__name__)


def seed_database(database: Database, settings: Settings):
    """Create tables and seed the configured admin accounts"""
    database.create_tables()
    db = database.SessionLocal()
    try:
        created = AuthService(db, settings).seed_admins()
        logger.info(f"Admin seeding finished, {created} account(s) created")
    except (TaskboardError, SQLAlchemyError):
        logger.exception("Error seeding admin users")
    finally:
        db.close()
