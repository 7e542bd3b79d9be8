"""Database engine, session factory and the FastAPI session dependency."""

from contextlib import contextmanager
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from bookstore.config import Settings

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE clauses unless this is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the engine (and its bounded pool) for one application instance.

    Built once at startup and handed to whoever needs sessions; nothing
    looks it up globally.
    """

    def __init__(self, settings: Settings):
        self.url = settings.database_url
        self.bootstrapped = False
        self.engine: Engine = create_engine(self.url, **self._engine_options(settings))
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self.session_factory = sessionmaker(bind=self.engine, autoflush=False)

    def _engine_options(self, settings: Settings) -> dict:
        options = {"echo": settings.DB_ECHO, "pool_pre_ping": True}
        if self.url.startswith("sqlite"):
            options["connect_args"] = {"check_same_thread": False}
            return options
        options.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=0,
            pool_timeout=settings.DB_POOL_TIMEOUT,
        )
        return options

    def create_tables(self) -> None:
        # Import models so they are registered on Base.metadata
        from bookstore.domain.models import book, category, user  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Session that is always closed, whatever happens inside."""
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(request: Request) -> Generator[Session, None, None]:
    """FastAPI dependency — one session per request."""
    with get_database(request).session() as db:
        yield db
