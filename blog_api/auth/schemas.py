"""Auth schemas for the authenticated caller and token data."""

from pydantic import BaseModel


class CurrentUser(BaseModel):
    """Authenticated caller, resolved from the session cookie."""

    id: str
    email: str
    is_admin: bool = False


class TokenPayload(BaseModel):
    """Session JWT claims. Local tokens set ``id``, Google tokens set ``email``."""

    id: str | None = None
    email: str | None = None
    exp: int
