"""Session token signing and validation (HS256)."""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from blog_api.auth.schemas import TokenPayload
from blog_api.errors import AuthenticationError

ALGORITHM = "HS256"

# Local signup/signin tokens carry {"id"}; Google tokens carry {"email"}.
LOCAL_TOKEN_TTL = timedelta(days=5)
GOOGLE_TOKEN_TTL = timedelta(days=2)


def create_access_token(claims: dict[str, Any], secret: str, expires_in: timedelta) -> str:
    """Sign ``claims`` into a JWT that expires ``expires_in`` from now."""
    now = datetime.now(timezone.utc)
    payload = {**claims, "iat": now, "exp": now + expires_in}
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def validate_access_token(token: str, secret: str) -> TokenPayload:
    """
    Validate a session JWT and extract claims.

    Args:
        token: The raw cookie value
        secret: Signing secret from settings

    Returns:
        TokenPayload with whichever of id/email the token carries

    Raises:
        AuthenticationError on invalid/expired token or one naming no user
    """
    try:
        payload = jwt.decode(
            token, secret, algorithms=[ALGORITHM], options={"require": ["exp"]}
        )
    except jwt.exceptions.PyJWTError:
        raise AuthenticationError("Unauthorized")

    token_payload = TokenPayload(
        id=payload.get("id"),
        email=payload.get("email"),
        exp=payload["exp"],
    )
    if not token_payload.id and not token_payload.email:
        raise AuthenticationError("Unauthorized")
    return token_payload
