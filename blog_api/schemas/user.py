"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from blog_api.models.user import User


class UserPublic(BaseModel):
    """User as returned to clients. Never carries the password hash."""

    id: str
    username: str
    email: str
    profile_picture: str = Field(alias="profilePicture")
    is_admin: bool = Field(alias="isAdmin")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class UserDocument(UserPublic):
    """Full stored user record, hashed password included (signup response)."""

    password: str


def to_public(user: User) -> UserPublic:
    """Project a stored user onto its public view."""
    return UserPublic.model_validate(user)


class UserUpdate(BaseModel):
    """Schema for updating a user's own profile. Omitted fields are left as-is."""

    username: str | None = None
    email: str | None = None
    password: str | None = None
    profile_picture: str | None = Field(default=None, alias="profilePicture")

    model_config = ConfigDict(populate_by_name=True)


class UserListResponse(BaseModel):
    """Admin listing of users with totals."""

    users: list[UserPublic]
    total_users: int = Field(alias="totalUsers")
    last_month_users: int = Field(alias="lastMonthUsers")

    model_config = ConfigDict(populate_by_name=True)
