from typing import TYPE_CHECKING
from uuid import uuid4

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.database.base import Base, TimestampMixin

if TYPE_CHECKING:
    from blog_api.models.comment import Comment

DEFAULT_POST_IMAGE = (
    "https://www.hostinger.com/tutorials/wp-content/uploads/sites/2/2021/09/how-to-write-a-blog-post.png"
)


class Post(TimestampMixin, Base):
    """
    Blog post written by an admin.

    Access: public reads; writes restricted to the admin who owns it.
    """

    __tablename__ = "posts"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    user_id: Mapped[str] = mapped_column(
        String(36),
        index=True,
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    image: Mapped[str] = mapped_column(Text, default=DEFAULT_POST_IMAGE, nullable=False)
    category: Mapped[str] = mapped_column(
        String(100),
        default="uncategorized",
        nullable=False,
    )
    slug: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)


    # Relationships
    comments: Mapped[list["Comment"]] = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
