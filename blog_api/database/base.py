from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# JSONB on PostgreSQL, plain JSON on SQLite
JSONVariant = JSON().with_variant(JSONB(), "postgresql")


class Base(DeclarativeBase):
    """Declarative base for users, posts and comments."""

    # Comment.likes is stored as a JSON array of user ids
    type_annotation_map = {
        list[str]: JSONVariant,
    }


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    """``created_at``/``updated_at`` columns shared by every record."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        default=utc_now,
        nullable=False,
    )
    # Bumped on every ORM update; post listings sort on it
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )
