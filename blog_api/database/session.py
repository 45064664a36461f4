"""Database session management."""

from collections.abc import Generator
from functools import lru_cache
from typing import Any

from sqlalchemy.orm import Session, sessionmaker

from blog_api.database.engine import get_engine


@lru_cache
def get_sessionmaker() -> sessionmaker[Session]:
    """Session factory bound to the application engine, built lazily."""
    return sessionmaker(
        bind=get_engine(),
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


def get_db() -> Generator[Session, Any, None]:
    """
    FastAPI dependency that yields a database session.

    The session is closed (and any open transaction rolled back) once the
    request finishes.

    Usage:
        @router.get("/items")
        def list_items(db: Session = Depends(get_db)):
            ...
    """
    db = get_sessionmaker()()
    try:
        yield db
    finally:
        db.close()
