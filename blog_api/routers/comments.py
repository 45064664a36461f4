"""Comment endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from blog_api.auth.dependencies import get_current_user
from blog_api.auth.schemas import CurrentUser
from blog_api.database.session import get_db
from blog_api.models.comment import Comment
from blog_api.schemas.comment import (
    CommentCreate,
    CommentListResponse,
    CommentResponse,
    CommentUpdate,
)
from blog_api.schemas.common import MessageResponse
from blog_api.services import comments as comment_service

router = APIRouter(prefix="/api/comment", tags=["comments"])


@router.post("/create", response_model=CommentResponse)
def create_comment(
    data: CommentCreate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Comment:
    return comment_service.create_comment(db, user, data)


@router.get("/getPostComments/{post_id}", response_model=list[CommentResponse])
def get_post_comments(
    post_id: str,
    db: Session = Depends(get_db),
) -> list[Comment]:
    """Comments on a post, newest first."""
    return comment_service.list_post_comments(db, post_id)


@router.put("/likeComment/{comment_id}", response_model=CommentResponse)
def like_comment(
    comment_id: str,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Comment:
    """Toggle the current user's like on a comment."""
    return comment_service.toggle_like(db, user, comment_id)


@router.put("/editComment/{comment_id}", response_model=CommentResponse)
def edit_comment(
    comment_id: str,
    data: CommentUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Comment:
    return comment_service.edit_comment(db, user, comment_id, data)


@router.delete("/deleteComment/{comment_id}", response_model=MessageResponse)
def delete_comment(
    comment_id: str,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> MessageResponse:
    comment_service.delete_comment(db, user, comment_id)
    return MessageResponse(message="Comment has been deleted")


@router.get("/getcomments", response_model=CommentListResponse)
def get_comments(
    start_index: int = Query(0, alias="startIndex", ge=0),
    limit: int = Query(9, ge=1, le=100),
    sort: str = Query("desc"),
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> dict:
    """Admin listing of all comments with totals for the dashboard."""
    comments, total_comments, last_month_comments = comment_service.list_comments(
        db, user, start_index, limit, sort
    )
    return {
        "comments": comments,
        "total_comments": total_comments,
        "last_month_comments": last_month_comments,
    }
