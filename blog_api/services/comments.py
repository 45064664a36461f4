"""Comments on posts: create, list, like, edit, delete."""

import logging

from sqlalchemy.orm import Session

from blog_api.auth.schemas import CurrentUser
from blog_api.errors import ForbiddenError, NotFoundError, ValidationError
from blog_api.models.comment import Comment
from blog_api.models.post import Post
from blog_api.schemas.comment import CommentCreate, CommentUpdate
from blog_api.utils.dates import one_month_ago

logger = logging.getLogger(__name__)

MAX_COMMENT_LENGTH = 200


def _get_comment(db: Session, comment_id: str) -> Comment:
    comment = db.get(Comment, comment_id)
    if not comment:
        raise NotFoundError("Comment not found")
    return comment


def _check_content(content: str) -> None:
    if len(content) > MAX_COMMENT_LENGTH:
        raise ValidationError(f"Comment must be {MAX_COMMENT_LENGTH} characters or fewer")


def create_comment(db: Session, caller: CurrentUser, data: CommentCreate) -> Comment:
    if not data.content or not data.post_id or not data.user_id:
        raise ValidationError("All fields are required")
    if data.user_id != caller.id:
        raise ForbiddenError("You are not allowed to create this comment")
    _check_content(data.content)

    if db.get(Post, data.post_id) is None:
        raise NotFoundError("Post not found")

    comment = Comment(content=data.content, post_id=data.post_id, user_id=caller.id)
    db.add(comment)
    db.commit()
    db.refresh(comment)
    return comment


def list_post_comments(db: Session, post_id: str) -> list[Comment]:
    """All comments on a post, newest first."""
    return (
        db.query(Comment)
        .filter(Comment.post_id == post_id)
        .order_by(Comment.created_at.desc())
        .all()
    )


def toggle_like(db: Session, caller: CurrentUser, comment_id: str) -> Comment:
    """Like the comment, or remove the caller's like if already present."""
    comment = _get_comment(db, comment_id)

    likes = list(comment.likes or [])
    if caller.id in likes:
        likes.remove(caller.id)
    else:
        likes.append(caller.id)

    # Reassign so the JSON column is flagged dirty
    comment.likes = likes
    comment.number_of_likes = len(likes)
    db.commit()
    db.refresh(comment)
    return comment


def edit_comment(
    db: Session,
    caller: CurrentUser,
    comment_id: str,
    data: CommentUpdate,
) -> Comment:
    comment = _get_comment(db, comment_id)
    if comment.user_id != caller.id and not caller.is_admin:
        raise ForbiddenError("You are not allowed to edit this comment")
    if not data.content:
        raise ValidationError("Comment content is required")
    _check_content(data.content)

    comment.content = data.content
    db.commit()
    db.refresh(comment)
    return comment


def delete_comment(db: Session, caller: CurrentUser, comment_id: str) -> None:
    comment = _get_comment(db, comment_id)
    if comment.user_id != caller.id and not caller.is_admin:
        raise ForbiddenError("You are not allowed to delete this comment")

    db.delete(comment)
    db.commit()
    logger.info("Comment deleted: %s", comment_id)


def list_comments(
    db: Session,
    caller: CurrentUser,
    start_index: int,
    limit: int,
    sort: str,
) -> tuple[list[Comment], int, int]:
    """
    Admin-only page of all comments plus totals.

    Returns:
        (comments, total_comments, last_month_comments)
    """
    if not caller.is_admin:
        raise ForbiddenError("You are not allowed to get all comments")

    order = Comment.created_at.asc() if sort == "asc" else Comment.created_at.desc()
    comments = db.query(Comment).order_by(order).offset(start_index).limit(limit).all()

    total_comments = db.query(Comment).count()
    last_month_comments = (
        db.query(Comment).filter(Comment.created_at >= one_month_ago()).count()
    )
    return comments, total_comments, last_month_comments
