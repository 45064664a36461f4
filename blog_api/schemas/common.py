"""Common schemas shared across modules."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class ErrorResponse(BaseModel):
    """Body written by the error handlers for every failed request."""

    message: str
    statusCode: int
