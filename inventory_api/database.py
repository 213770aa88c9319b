"""
Database configuration and session management for the Inventory API.

The engine is owned by a ``Database`` object created when the application
starts and disposed when it stops. Route handlers receive a session through
the ``get_db`` dependency, which reads the database from ``app.state``.
"""
import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi import Request

logger = logging.getLogger(__name__)

# Base class for declarative models
Base = declarative_base()


class Database:
    """
    Owns the SQLAlchemy engine and session factory for one process.

    Attributes:
        url (str): SQLAlchemy database URL
        engine: SQLAlchemy engine bound to ``url``
        SessionLocal: Session factory bound to ``engine``
    """

    def __init__(self, url: str):
        self.url = url
        engine_kwargs = {}
        if url.startswith("sqlite"):
            # SQLite connections are shared with the request threadpool;
            # an in-memory database must also keep a single connection alive.
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if url in ("sqlite://", "sqlite:///:memory:"):
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["pool_pre_ping"] = True
        self.engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self) -> None:
        """Create any missing tables."""
        # Register the ORM models on Base before creating tables
        from . import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info(f"Database schema ready on {self.engine.url.render_as_string(hide_password=True)}")

    def session(self):
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database engine disposed")


def get_db(request: Request):
    """
    Dependency function that provides a database session.

    Yields:
        Session: SQLAlchemy database session

    Usage:
        Use as a FastAPI dependency to inject database sessions into route handlers.
    """
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
