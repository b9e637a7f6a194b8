"""
Setup script for initializing the RentX database tables.
Creates the users and listings tables if they are missing; existing rows are left alone.
"""

import logging
from rentx.core.config import settings
from rentx.db.session import create_db_engine
from rentx.db.store import Store

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def setup_database():
    """Initialize database tables for the RentX service."""
    logger.info(f"Creating RentX database tables at {settings.DATABASE_URL}...")
    store = Store(create_db_engine(settings.DATABASE_URL))
    try:
        store.initialize()
        logger.info("Database tables created successfully!")
    except Exception as e:
        logger.error(f"Error creating database tables: {e}")
        raise
    finally:
        store.engine.dispose()

if __name__ == "__main__":
    setup_database()
