"""Auth module: password hashing, session tokens and user dependencies."""

from blog_api.auth.cookies import COOKIE_NAME, clear_session_cookie, set_session_cookie
from blog_api.auth.dependencies import get_current_user
from blog_api.auth.jwt import create_access_token, validate_access_token
from blog_api.auth.passwords import hash_password, verify_password
from blog_api.auth.schemas import CurrentUser, TokenPayload

__all__ = [
    "COOKIE_NAME",
    "CurrentUser",
    "TokenPayload",
    "clear_session_cookie",
    "create_access_token",
    "get_current_user",
    "hash_password",
    "set_session_cookie",
    "validate_access_token",
    "verify_password",
]
