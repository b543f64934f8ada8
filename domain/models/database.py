"""
Database configuration and session management.
"""

import logging
from datetime import datetime, timezone
from sqlalchemy import String, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy.types import TypeDecorator
from app.config import settings

logger = logging.getLogger("dailydiet.database")


def utcnow() -> datetime:
    """Timezone-aware current time used for server-assigned timestamps"""
    return datetime.now(timezone.utc)


class IsoDateTime(TypeDecorator):
    """Datetime stored as its ISO-8601 text, offset included.

    Round-trips the exact offset on every backend (SQLite DATETIME drops it).
    With ``timespec="microseconds"`` and UTC values, text order equals time
    order, so the column can be sorted on.
    """

    impl = String(40)
    cache_ok = True

    def __init__(self, timespec: str = "auto", *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.timespec = timespec

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return value.isoformat(timespec=self.timespec)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return datetime.fromisoformat(value)


# Create SQLAlchemy Base
Base = declarative_base()


def _engine_options(database_url: str) -> dict:
    """SQLite needs cross-thread connections; in-memory SQLite needs a single shared one."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return {}
    options = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        options["poolclass"] = StaticPool
    return options


# Create engine
engine = create_engine(
    settings.database_url,
    echo=settings.db_echo,
    future=True,
    **_engine_options(settings.database_url),
)

# Create session factory
SessionLocal = sessionmaker(bind=engine, future=True)


def init_database():
    """Initialize database schema"""
    with engine.begin() as conn:
        Base.metadata.create_all(bind=conn)
    logger.info(f"Database tables created successfully backend={engine.url.get_backend_name()}")


def get_db_session():
    """Get database session (for FastAPI dependency injection)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
