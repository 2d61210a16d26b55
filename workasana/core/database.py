import logging
from typing import Generator
from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()


class Database:
    """
    Engine and session factory for one application instance.

    Built once by the app factory and kept on ``app.state``. The engine's pool
    is created eagerly, so requests arriving before the first connection all
    share it instead of opening their own.
    """

    def __init__(self, url: str, echo: bool = False):
        self.engine = self._create_engine(url, echo)
        self.SessionLocal = sessionmaker(
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine
        )
        event.listen(self.engine, "connect", self._on_connect)

    @staticmethod
    def _create_engine(url: str, echo: bool) -> Engine:
        if url.startswith("sqlite"):
            # single shared connection keeps an in-memory database alive
            return create_engine(
                url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool
            )
        return create_engine(
            url,
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,
            pool_recycle=300,
            echo=echo
        )

    @staticmethod
    def _on_connect(dbapi_connection, connection_record):
        """Event listener for database connections"""
        logger.info("Database connection established")

    def session(self) -> Session:
        return self.SessionLocal()

    def init_db(self) -> bool:
        """
        Create all tables.

        Returns:
            bool: True if successful, False otherwise
        """
        try:
            # Import all models here to ensure they are registered
            from .. import models  # noqa: F401

            Base.metadata.create_all(bind=self.engine)
            logger.info("Database tables created successfully")
            return True
        except Exception as e:
            logger.error(f"Failed to initialize database: {e}")
            return False

    def check_connection(self) -> bool:
        """
        Check database connectivity

        Returns:
            bool: True if connected, False otherwise
        """
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Database connection check failed: {e}")
            return False

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database dependency for FastAPI

    Yields:
        Session: Database session bound to the application's engine
    """
    db = request.app.state.database.session()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
