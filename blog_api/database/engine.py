from functools import lru_cache

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from blog_api.config import get_settings


def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """Enable foreign key enforcement in SQLite (comments cascade with posts)."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, **kwargs) -> Engine:
    """Create an engine for the given URL with per-dialect options."""
    # SQLite-specific settings
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            echo=False,
            **kwargs,
        )
        event.listen(engine, "connect", enable_sqlite_foreign_keys)
        return engine

    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
        echo=False,
        **kwargs,
    )


@lru_cache
def get_engine() -> Engine:
    """Create and cache the database engine on first use."""
    return build_engine(get_settings().database_url)
