"""Post CRUD endpoints."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from blog_api.auth.dependencies import get_current_user
from blog_api.auth.schemas import CurrentUser
from blog_api.database.session import get_db
from blog_api.models.post import Post
from blog_api.schemas.common import MessageResponse
from blog_api.schemas.post import PostCreate, PostListResponse, PostResponse, PostUpdate
from blog_api.services import posts as post_service

router = APIRouter(prefix="/api/post", tags=["posts"])


@router.post("/create", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    data: PostCreate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Post:
    """Create a post (admins only)."""
    return post_service.create_post(db, user, data)


@router.get("/getposts", response_model=PostListResponse)
def get_posts(
    user_id: str | None = Query(None, alias="userId"),
    category: str | None = None,
    slug: str | None = None,
    post_id: str | None = Query(None, alias="postId"),
    search_term: str | None = Query(None, alias="searchTerm"),
    start_index: int = Query(0, alias="startIndex", ge=0),
    limit: int = Query(9, ge=1, le=100),
    order: str = Query("desc"),
    db: Session = Depends(get_db),
) -> dict:
    """
    List posts with optional filters.

    Args:
        userId: Author filter
        category: Exact category
        slug: Exact slug (used by the post page)
        postId: Exact id (used by the editor)
        searchTerm: Case-insensitive match on title or content
        startIndex: Offset for "show more" paging
        limit: Page size (default 9)
        order: "asc" for oldest update first, anything else for newest first
    """
    posts, total_posts, last_month_posts = post_service.list_posts(
        db,
        user_id=user_id,
        category=category,
        slug=slug,
        post_id=post_id,
        search_term=search_term,
        start_index=start_index,
        limit=limit,
        order=order,
    )
    return {
        "posts": posts,
        "total_posts": total_posts,
        "last_month_posts": last_month_posts,
    }


@router.delete("/deletepost/{post_id}/{user_id}", response_model=MessageResponse)
def delete_post(
    post_id: str,
    user_id: str,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> MessageResponse:
    """Delete a post and its comments."""
    post_service.delete_post(db, user, post_id, user_id)
    return MessageResponse(message="The post has been deleted")


@router.put("/updatepost/{post_id}/{user_id}", response_model=PostResponse)
def update_post(
    post_id: str,
    user_id: str,
    data: PostUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Post:
    """Update a post's title, content, category or image."""
    return post_service.update_post(db, user, post_id, user_id, data)
