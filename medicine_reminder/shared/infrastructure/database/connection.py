# 📄 File: medicine_reminder/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Opens the small database that lives on the phone, where the app remembers who is
# signed in and which medicines are scheduled.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy engine and session management for the on-device SQLite database:
# declarative Base shared by all ORM models, schema creation, transactional
# session scope with rollback, and a connectivity check.
#
# 🔗 Dependencies:
# - sqlalchemy (engine, ORM sessions)
# - medicine_reminder.shared.config.settings (database URL)
#
# 🔄 Connected Modules / Calls From:
# - medicine_reminder.main (bootstrap creates the schema)
# - Auth local repository and medicine repository (sessions)

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator

from sqlalchemy import create_engine, event, exc, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from medicine_reminder.shared.config.settings import Settings
from medicine_reminder.shared.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base shared by every ORM model of the local database."""


class LocalDatabase:
    """
    Owns the engine and session factory of the local database.

    Each repository call opens its own session through ``session_scope()``;
    there are no transactions spanning several repository calls.
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self._engine: Engine = create_engine(database_url, echo=echo, future=True)
        self._register_connection_events()
        self._session_factory = sessionmaker(
            bind=self._engine,
            class_=Session,
            expire_on_commit=False,  # Keep objects accessible after commit
            autoflush=True,
        )
        logger.info(f"Local database engine created for {self._engine.url.render_as_string(hide_password=True)}")

    @classmethod
    def from_settings(cls, settings: Settings) -> "LocalDatabase":
        return cls(settings.LOCAL_DATABASE_URL, echo=settings.LOCAL_DATABASE_ECHO)

    @property
    def engine(self) -> Engine:
        return self._engine

    def _register_connection_events(self) -> None:
        if self._engine.dialect.name != "sqlite":
            return

        @event.listens_for(self._engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            """Configure connection-specific settings."""
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

    def create_all(self) -> None:
        """Create every table registered on Base that does not exist yet."""
        # Model modules register their tables on import
        from medicine_reminder.modules.auth.infrastructure.database import models as _auth_models  # noqa: F401
        from medicine_reminder.modules.medicine.infrastructure.database import models as _medicine_models  # noqa: F401

        try:
            Base.metadata.create_all(self._engine)
            logger.info(f"Local database schema ready ({', '.join(sorted(Base.metadata.tables))})")
        except exc.SQLAlchemyError as e:
            logger.error(f"Failed to create local database schema: {e}")
            raise DatabaseError(f"Schema creation failed: {e}", operation="create_all") from e

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """
        Provide a session with automatic commit/rollback.

        Yields:
            Session: Database session

        Raises:
            DatabaseError: If any SQLAlchemy error occurs inside the scope
        """
        session: Session = self._session_factory()

        try:
            yield session
            session.commit()
            logger.debug("Local database transaction committed")

        except exc.SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Local database error, transaction rolled back: {e}")
            raise DatabaseError(f"Database operation failed: {e}") from e

        except Exception:
            session.rollback()
            raise

        finally:
            session.close()

    def health_check(self) -> Dict[str, Any]:
        """Run a trivial query against the database."""
        try:
            with self._engine.connect() as conn:
                value = conn.execute(text("SELECT 1")).scalar()
            return {"status": "healthy" if value == 1 else "unhealthy", "url": str(self._engine.url)}
        except exc.SQLAlchemyError as e:
            logger.warning(f"Local database health check failed: {e}")
            return {"status": "unhealthy", "url": str(self._engine.url), "error": str(e)}

    def dispose(self) -> None:
        """Close all pooled connections."""
        self._engine.dispose()
        logger.info("Local database engine disposed")


def create_local_database(settings: Settings, create_schema: bool = True) -> LocalDatabase:
    """
    Factory building the local database from settings.

    Args:
        settings: Application settings
        create_schema: Create missing tables immediately

    Returns:
        Configured LocalDatabase instance
    """
    database = LocalDatabase.from_settings(settings)
    if create_schema:
        database.create_all()
    return database


__all__ = [
    "Base",
    "LocalDatabase",
    "create_local_database",
]
