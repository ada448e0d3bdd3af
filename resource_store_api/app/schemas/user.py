"""
Pydantic models for user data.

The API accepts arbitrary JSON bodies and applies only presence checks,
so these models document responses rather than validate requests.
Extra keys are allowed because a partial update may add them.
"""

from pydantic import BaseModel, Field


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["John Doe"])
    email: str = Field(..., examples=["john@example.com"])

    model_config = {
        "extra": "allow",
    }
