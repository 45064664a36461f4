"""User profile endpoints."""

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from blog_api.auth.dependencies import get_current_user
from blog_api.auth.schemas import CurrentUser
from blog_api.config import Settings, get_settings
from blog_api.database.session import get_db
from blog_api.routers.auth import signout as auth_signout
from blog_api.schemas.common import MessageResponse
from blog_api.schemas.user import UserListResponse, UserPublic, UserUpdate, to_public
from blog_api.services import users as user_service

router = APIRouter(prefix="/api/user", tags=["users"])


@router.get("/test", response_model=MessageResponse)
def test() -> MessageResponse:
    return MessageResponse(message="API is working!")


@router.put("/update/{user_id}", response_model=UserPublic)
def update_user(
    user_id: str,
    data: UserUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> UserPublic:
    """Update the current user's own profile."""
    return to_public(user_service.update_user(db, user, user_id, data))


@router.delete("/delete/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: str,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> MessageResponse:
    """Delete an account (the owner's own, or any account for admins)."""
    user_service.delete_user(db, user, user_id)
    return MessageResponse(message="User has been deleted")


@router.post("/signout", response_model=MessageResponse)
def signout(
    response: Response,
    settings: Settings = Depends(get_settings),
) -> MessageResponse:
    """Same as ``POST /api/auth/signout``."""
    return auth_signout(response, settings)


@router.get("/getusers", response_model=UserListResponse)
def get_users(
    start_index: int = Query(0, alias="startIndex", ge=0),
    limit: int = Query(9, ge=1, le=100),
    sort: str = Query("desc"),
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> dict:
    """Admin listing of users with totals for the dashboard."""
    users, total_users, last_month_users = user_service.list_users(
        db, user, start_index, limit, sort
    )
    return {
        "users": [to_public(u) for u in users],
        "total_users": total_users,
        "last_month_users": last_month_users,
    }


@router.get("/{user_id}", response_model=UserPublic)
def get_user(
    user_id: str,
    db: Session = Depends(get_db),
) -> UserPublic:
    """Public profile of any user."""
    return to_public(user_service.get_user(db, user_id))
