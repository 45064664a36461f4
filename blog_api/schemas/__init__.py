"""Pydantic schemas for API request/response validation."""

from blog_api.schemas.auth import (
    GoogleAuthRequest,
    SigninRequest,
    SignupRequest,
    SignupResponse,
)
from blog_api.schemas.comment import (
    CommentCreate,
    CommentListResponse,
    CommentResponse,
    CommentUpdate,
)
from blog_api.schemas.common import ErrorResponse, MessageResponse
from blog_api.schemas.post import PostCreate, PostListResponse, PostResponse, PostUpdate
from blog_api.schemas.user import (
    UserDocument,
    UserListResponse,
    UserPublic,
    UserUpdate,
    to_public,
)

__all__ = [
    # Common
    "ErrorResponse",
    "MessageResponse",
    # Auth
    "SignupRequest",
    "SigninRequest",
    "GoogleAuthRequest",
    "SignupResponse",
    # User
    "UserPublic",
    "UserDocument",
    "UserUpdate",
    "UserListResponse",
    "to_public",
    # Post
    "PostCreate",
    "PostUpdate",
    "PostResponse",
    "PostListResponse",
    # Comment
    "CommentCreate",
    "CommentUpdate",
    "CommentResponse",
    "CommentListResponse",
]
