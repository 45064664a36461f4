"""FastAPI dependencies for authentication."""

from fastapi import Cookie, Depends
from sqlalchemy.orm import Session

from blog_api.auth.cookies import COOKIE_NAME
from blog_api.auth.jwt import validate_access_token
from blog_api.auth.schemas import CurrentUser
from blog_api.config import Settings, get_settings
from blog_api.database.session import get_db
from blog_api.errors import AuthenticationError
from blog_api.models.user import User


def get_current_user(
    access_token: str | None = Cookie(default=None, alias=COOKIE_NAME),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> CurrentUser:
    """
    Resolve the caller from the ``access_token`` cookie.

    Tokens issued by signup/signin name the user by id, tokens issued by
    Google login name them by email; both are looked up in the store so the
    admin flag always reflects the current record.

    Usage:
        @router.get("/items")
        def get_items(user: CurrentUser = Depends(get_current_user)):
            ...
    """
    if not access_token:
        raise AuthenticationError("Unauthorized")

    token_payload = validate_access_token(access_token, settings.jwt_token_key)

    if token_payload.id:
        user = db.get(User, token_payload.id)
    else:
        user = db.query(User).filter(User.email == token_payload.email).first()

    if user is None:
        raise AuthenticationError("Unauthorized")

    return CurrentUser(id=user.id, email=user.email, is_admin=user.is_admin)
