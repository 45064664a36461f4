"""Post schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Schema for creating a post. Title and content are checked by the service."""

    title: str | None = None
    content: str | None = None
    category: str | None = None
    image: str | None = None


class PostUpdate(BaseModel):
    """Schema for updating a post."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = Field(default=None, min_length=1)
    category: str | None = None
    image: str | None = None


class PostResponse(BaseModel):
    """Schema for post response."""

    id: str
    user_id: str = Field(alias="userId")
    title: str
    content: str
    image: str
    category: str
    slug: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class PostListResponse(BaseModel):
    """A page of posts plus totals across all posts."""

    posts: list[PostResponse]
    total_posts: int = Field(alias="totalPosts")
    last_month_posts: int = Field(alias="lastMonthPosts")

    model_config = ConfigDict(populate_by_name=True)
