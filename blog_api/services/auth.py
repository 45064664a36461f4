"""Signup, signin and Google login.

Each function validates its input, reads or writes the user store through
the given session, and returns the user plus a freshly signed session token.
Setting the cookie is left to the router.
"""

import logging
import secrets
import string

from sqlalchemy.orm import Session

from blog_api.auth.jwt import GOOGLE_TOKEN_TTL, LOCAL_TOKEN_TTL, create_access_token
from blog_api.auth.passwords import hash_password, verify_password
from blog_api.config import Settings
from blog_api.errors import AuthenticationError, ConflictError, ValidationError
from blog_api.models.user import User
from blog_api.schemas.auth import GoogleAuthRequest, SigninRequest, SignupRequest

logger = logging.getLogger(__name__)

GOOGLE_PROFILE_PICTURE = "default_profile_picture_url"
GENERATED_PASSWORD_LENGTH = 12
GENERATED_PASSWORD_CHARS = (
    string.ascii_lowercase + string.ascii_uppercase + string.digits + "@#$%^&*()_+[]{}|;:,.<>?"
)


def generate_username(email: str) -> str:
    """Local part of the email plus a random 4-digit suffix."""
    prefix = email.split("@")[0]
    suffix = 1000 + secrets.randbelow(9000)
    return f"{prefix}{suffix}"


def generate_password() -> str:
    """Random password for accounts that only ever sign in through Google."""
    return "".join(
        secrets.choice(GENERATED_PASSWORD_CHARS) for _ in range(GENERATED_PASSWORD_LENGTH)
    )


def _find_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def signup(db: Session, settings: Settings, data: SignupRequest) -> tuple[User, str]:
    """Create a local account. Rejects a taken email before writing anything."""
    if not data.username or not data.email or not data.password:
        raise ValidationError("All fields are required")

    if _find_by_email(db, data.email):
        raise ConflictError("User already exists, please login")

    user = User(
        username=data.username,
        email=data.email,
        password=hash_password(data.password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    token = create_access_token({"id": user.id}, settings.jwt_token_key, LOCAL_TOKEN_TTL)
    logger.info("User signed up: %s", user.email)
    return user, token


def signin(db: Session, settings: Settings, data: SigninRequest) -> tuple[User, str]:
    """Check local credentials. Unknown email and wrong password fail identically."""
    if not data.email or not data.password:
        raise ValidationError("All fields are required")

    user = _find_by_email(db, data.email)
    if not user or not verify_password(data.password, user.password):
        raise AuthenticationError("Invalid email or password")

    token = create_access_token({"id": user.id}, settings.jwt_token_key, LOCAL_TOKEN_TTL)
    logger.info("User signed in: %s", user.email)
    return user, token


def google(db: Session, settings: Settings, data: GoogleAuthRequest) -> tuple[User, str]:
    """
    Sign in with an email asserted by Google, creating the account on first use.

    The token names the user by email rather than id; ``get_current_user``
    resolves both forms.
    """
    if not data.email:
        raise ValidationError("All fields are required")

    user = _find_by_email(db, data.email)
    if user is None:
        user = User(
            email=data.email,
            username=generate_username(data.email),
            password=hash_password(generate_password()),
            profile_picture=GOOGLE_PROFILE_PICTURE,
            is_admin=False,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("New user created through Google: %s", user.email)
    else:
        logger.info("Existing user signed in through Google: %s", user.email)

    token = create_access_token({"email": user.email}, settings.jwt_token_key, GOOGLE_TOKEN_TTL)
    return user, token
