"""SQLAlchemy engine and sessions for the library tables."""

import os

from sqlalchemy import Engine, create_engine, event, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # Asset and tutorial rows rely on ON DELETE CASCADE
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """Owns the engine used by the database record store."""

    def __init__(self, database_url: str = settings.database_url):
        self.engine = self._build_engine(database_url)
        self.SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, bind=self.engine
        )
        self._create_library_tables()

    @classmethod
    def _build_engine(cls, database_url: str) -> Engine:
        url = make_url(database_url)
        if url.get_backend_name() != "sqlite":
            return create_engine(database_url, echo=False)

        # Request threads share the engine
        cls._ensure_sqlite_parent_dir(url.database)
        engine = create_engine(
            database_url, echo=False, connect_args={"check_same_thread": False}
        )
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    def _create_library_tables(self) -> None:
        # Registers LibraryRow, AssetRow and TutorialRow on Base
        from . import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.debug(f"Library tables ready on {self.engine.url.render_as_string()}")

    @staticmethod
    def _ensure_sqlite_parent_dir(db_path) -> None:
        if not db_path or db_path == ":memory:":
            return
        os.makedirs(os.path.dirname(os.path.abspath(db_path)), exist_ok=True)

    def get_session(self) -> Session:
        return self.SessionLocal()

    def health_check(self) -> bool:
        """Check if the library tables are reachable."""
        try:
            with self.get_session() as session:
                session.execute(text("SELECT 1")).fetchone()
                return True
        except Exception:
            return False

    def close(self) -> None:
        """Dispose of the engine; used by tests and the init script."""
        self.engine.dispose()
