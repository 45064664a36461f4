"""User profile management and admin listing."""

import logging
import re

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blog_api.auth.passwords import hash_password
from blog_api.auth.schemas import CurrentUser
from blog_api.errors import ConflictError, ForbiddenError, NotFoundError, ValidationError
from blog_api.models.user import User
from blog_api.schemas.user import UserUpdate
from blog_api.utils.dates import one_month_ago

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
USERNAME_LENGTH = (7, 20)
USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9]+$")


def validate_username(username: str) -> None:
    """Raise ValidationError if ``username`` breaks the profile rules."""
    low, high = USERNAME_LENGTH
    if len(username) < low or len(username) > high:
        raise ValidationError(f"Username must be between {low} and {high} characters")
    if " " in username:
        raise ValidationError("Username cannot contain spaces")
    if username != username.lower():
        raise ValidationError("Username must be lowercase")
    if not USERNAME_PATTERN.match(username):
        raise ValidationError("Username can only contain letters and numbers")


def get_user(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


def update_user(db: Session, caller: CurrentUser, user_id: str, data: UserUpdate) -> User:
    """Update the caller's own profile. Only fields present in the request change."""
    if caller.id != user_id:
        raise ForbiddenError("You are not allowed to update this user")

    update_data = data.model_dump(exclude_unset=True, exclude_none=True)

    if "password" in update_data:
        if len(update_data["password"]) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        update_data["password"] = hash_password(update_data["password"])

    if "username" in update_data:
        validate_username(update_data["username"])

    user = get_user(db, user_id)
    for field, value in update_data.items():
        setattr(user, field, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Username or email is already taken")

    db.refresh(user)
    logger.info("User updated: %s", user.id)
    return user


def delete_user(db: Session, caller: CurrentUser, user_id: str) -> None:
    """Delete an account. Allowed for the account owner and for admins."""
    if not caller.is_admin and caller.id != user_id:
        raise ForbiddenError("You are not allowed to delete this user")

    user = get_user(db, user_id)
    db.delete(user)
    db.commit()
    logger.info("User deleted: %s", user_id)


def list_users(
    db: Session,
    caller: CurrentUser,
    start_index: int,
    limit: int,
    sort: str,
) -> tuple[list[User], int, int]:
    """
    Admin-only page of users plus totals.

    Returns:
        (users, total_users, last_month_users)
    """
    if not caller.is_admin:
        raise ForbiddenError("You are not allowed to see all users")

    order = User.created_at.asc() if sort == "asc" else User.created_at.desc()
    users = db.query(User).order_by(order).offset(start_index).limit(limit).all()

    total_users = db.query(User).count()
    last_month_users = db.query(User).filter(User.created_at >= one_month_ago()).count()
    return users, total_users, last_month_users
