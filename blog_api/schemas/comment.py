"""Comment schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    """Schema for creating a comment."""

    content: str | None = None
    post_id: str | None = Field(default=None, alias="postId")
    user_id: str | None = Field(default=None, alias="userId")

    model_config = ConfigDict(populate_by_name=True)


class CommentUpdate(BaseModel):
    """Schema for editing a comment."""

    content: str | None = None


class CommentResponse(BaseModel):
    """Schema for comment response."""

    id: str
    content: str
    post_id: str = Field(alias="postId")
    user_id: str = Field(alias="userId")
    likes: list[str] = Field(default_factory=list)
    number_of_likes: int = Field(alias="numberOfLikes")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class CommentListResponse(BaseModel):
    """Admin listing of comments with totals."""

    comments: list[CommentResponse]
    total_comments: int = Field(alias="totalComments")
    last_month_comments: int = Field(alias="lastMonthComments")

    model_config = ConfigDict(populate_by_name=True)
