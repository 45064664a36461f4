"""The ``access_token`` session cookie.

Setting and clearing use the same attributes so browsers treat them as the
same cookie.
"""

from fastapi import Response

from blog_api.config import Settings

COOKIE_NAME = "access_token"
COOKIE_PATH = "/"
COOKIE_SAMESITE = "strict"


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        COOKIE_NAME,
        token,
        httponly=True,
        samesite=COOKIE_SAMESITE,
        path=COOKIE_PATH,
        secure=settings.is_production,
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        COOKIE_NAME,
        httponly=True,
        samesite=COOKIE_SAMESITE,
        path=COOKIE_PATH,
        secure=settings.is_production,
    )
