"""Auth request/response schemas.

Request fields are optional at the schema level so that a missing field is
reported as a 400 by the auth service rather than a schema error.
"""

from pydantic import BaseModel

from blog_api.schemas.user import UserDocument


class SignupRequest(BaseModel):
    username: str | None = None
    email: str | None = None
    password: str | None = None


class SigninRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class GoogleAuthRequest(BaseModel):
    """Email asserted by the client after a Google sign-in popup."""

    email: str | None = None


class SignupResponse(BaseModel):
    user: UserDocument
