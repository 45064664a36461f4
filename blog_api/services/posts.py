"""Post CRUD."""

import logging
import re

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blog_api.auth.schemas import CurrentUser
from blog_api.errors import ConflictError, ForbiddenError, NotFoundError, ValidationError
from blog_api.models.post import Post
from blog_api.schemas.post import PostCreate, PostUpdate
from blog_api.utils.dates import one_month_ago

logger = logging.getLogger(__name__)

_SLUG_STRIP = re.compile(r"[^a-zA-Z0-9-]")


def slugify(title: str) -> str:
    """'Hello, World!' -> 'hello-world'"""
    return _SLUG_STRIP.sub("", "-".join(title.split(" ")).lower())


def _get_post(db: Session, post_id: str) -> Post:
    post = db.get(Post, post_id)
    if not post:
        raise NotFoundError("Post not found")
    return post


def _commit_unique(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("A post with this title already exists")


def create_post(db: Session, caller: CurrentUser, data: PostCreate) -> Post:
    if not caller.is_admin:
        raise ForbiddenError("You are not allowed to create a post")
    if not data.title or not data.content:
        raise ValidationError("Please provide all required fields")

    post = Post(
        user_id=caller.id,
        title=data.title,
        content=data.content,
        slug=slugify(data.title),
    )
    if data.category:
        post.category = data.category
    if data.image:
        post.image = data.image

    db.add(post)
    _commit_unique(db)
    db.refresh(post)
    logger.info("Post created: %s by %s", post.slug, caller.id)
    return post


def list_posts(
    db: Session,
    *,
    user_id: str | None = None,
    category: str | None = None,
    slug: str | None = None,
    post_id: str | None = None,
    search_term: str | None = None,
    start_index: int = 0,
    limit: int = 9,
    order: str = "desc",
) -> tuple[list[Post], int, int]:
    """
    Filtered page of posts, ordered by last update.

    Returns:
        (posts, total_posts, last_month_posts); the totals ignore the filters.
    """
    query = db.query(Post)
    if user_id:
        query = query.filter(Post.user_id == user_id)
    if category:
        query = query.filter(Post.category == category)
    if slug:
        query = query.filter(Post.slug == slug)
    if post_id:
        query = query.filter(Post.id == post_id)
    if search_term:
        pattern = f"%{search_term}%"
        query = query.filter(or_(Post.title.ilike(pattern), Post.content.ilike(pattern)))

    sort = Post.updated_at.asc() if order == "asc" else Post.updated_at.desc()
    posts = query.order_by(sort).offset(start_index).limit(limit).all()

    total_posts = db.query(Post).count()
    last_month_posts = db.query(Post).filter(Post.created_at >= one_month_ago()).count()
    return posts, total_posts, last_month_posts


def _check_owner_admin(caller: CurrentUser, user_id: str, action: str) -> None:
    # Admin rights alone are not enough: the path must name the caller.
    if not caller.is_admin or caller.id != user_id:
        raise ForbiddenError(f"You are not allowed to {action} this post")


def delete_post(db: Session, caller: CurrentUser, post_id: str, user_id: str) -> None:
    _check_owner_admin(caller, user_id, "delete")
    post = _get_post(db, post_id)
    db.delete(post)
    db.commit()
    logger.info("Post deleted: %s", post_id)


def update_post(
    db: Session,
    caller: CurrentUser,
    post_id: str,
    user_id: str,
    data: PostUpdate,
) -> Post:
    _check_owner_admin(caller, user_id, "update")
    post = _get_post(db, post_id)

    update_data = data.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(post, field, value)

    _commit_unique(db)
    db.refresh(post)
    return post
