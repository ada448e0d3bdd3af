"""Pydantic models for post data."""

from pydantic import BaseModel, Field


class PostRead(BaseModel):
    """Schema for reading a post from the API.

    ``userId`` refers to the author but is never checked against the
    users collection.
    """

    id: int = Field(..., examples=[1])
    title: str = Field(..., examples=["First Post"])
    body: str = Field(..., examples=["This is my first post"])
    userId: int = Field(1, examples=[1])

    model_config = {
        "extra": "allow",
    }
