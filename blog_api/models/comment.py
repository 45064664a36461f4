from typing import TYPE_CHECKING
from uuid import uuid4

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.database.base import Base, TimestampMixin

if TYPE_CHECKING:
    from blog_api.models.post import Post


class Comment(TimestampMixin, Base):
    """
    Comment on a post.

    ``likes`` holds the ids of users who liked it; ``number_of_likes`` is
    kept in step with it. Deleted together with its post.
    """

    __tablename__ = "comments"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    post_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("posts.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    user_id: Mapped[str] = mapped_column(
        String(36),
        index=True,
        nullable=False,
    )
    likes: Mapped[list[str]] = mapped_column(default=list, nullable=False)
    number_of_likes: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Relationships
    post: Mapped["Post"] = relationship("Post", back_populates="comments")
