"""
Database configuration and connection management
"""

import logging
import os

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

logger = logging.getLogger(__name__)

# Database URL - can be configured via environment variable
DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///flight_reservations.db')

# Create engine
engine = create_engine(
    DATABASE_URL,
    echo=False,  # Set to True for SQL query logging
    pool_pre_ping=True,  # Verify connections before using
    pool_recycle=3600,  # Recycle connections after 1 hour
    # SQLite connections are handed across FastAPI worker threads
    connect_args={'check_same_thread': False} if DATABASE_URL.startswith('sqlite') else {},
)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db():
    """
    Initialize database - create all tables
    """
    from .models.schema import Base
    Base.metadata.create_all(bind=engine)
    logger.info("Database initialized at %s", DATABASE_URL)


def drop_db():
    """
    Drop all tables - use with caution!
    """
    from .models.schema import Base
    Base.metadata.drop_all(bind=engine)
    logger.info("All tables dropped")


def reset_db():
    """
    Reset database - drop and recreate all tables
    """
    drop_db()
    init_db()
