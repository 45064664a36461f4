from .base import Base, JSONVariant, TimestampMixin
from .engine import build_engine, get_engine
from .session import get_db, get_sessionmaker

__all__ = [
    "Base",
    "JSONVariant",
    "TimestampMixin",
    "build_engine",
    "get_engine",
    "get_db",
    "get_sessionmaker",
]
