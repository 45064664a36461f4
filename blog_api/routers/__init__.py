"""API routers."""

from blog_api.routers import auth, comments, health, posts, spa, users

__all__ = [
    "auth",
    "comments",
    "health",
    "posts",
    "spa",
    "users",
]
