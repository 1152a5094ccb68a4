"""Database session management."""
import logging
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from .models import Base

class SessionManager:
    """Manages database sessions.

    Used as a context manager, a session commits when the block exits
    cleanly and rolls back when it raises, so everything done inside one
    ``with`` block lands or fails as a unit.
    """

    def __init__(self, database_url: str):
        """Initialize session manager with database URL."""
        self.engine = create_engine(database_url, **self._engine_options(database_url))
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )
        self.logger = logging.getLogger(__name__)
        self.session = None

    @staticmethod
    def _engine_options(database_url: str) -> dict:
        """Share one connection for in-memory SQLite so every session sees the same data."""
        url = make_url(database_url)
        if url.get_backend_name() == 'sqlite' and url.database in (None, '', ':memory:'):
            return {
                'connect_args': {'check_same_thread': False},
                'poolclass': StaticPool
            }
        return {}

    def create_schema(self) -> None:
        """Create any missing tables."""
        self.logger.debug(f"Creating schema on {self.engine.url}")
        Base.metadata.create_all(self.engine)

    def get_session(self) -> Session:
        """Get a new database session."""
        session = self.SessionLocal()
        self.logger.debug(f"Created new session: {id(session)}")
        return session

    def __enter__(self) -> Session:
        """Context manager entry."""
        self.session = self.get_session()
        self.logger.debug(f"Entering context with session: {id(self.session)}")
        return self.session

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.logger.debug(f"Exiting context with session: {id(self.session)}")
        try:
            if exc_type is None:
                self.logger.debug("Committing session")
                self.session.commit()
            else:
                self.logger.debug("Rolling back session")
                self.session.rollback()
        finally:
            self.logger.debug("Closing session")
            self.session.close()
            self.session = None
