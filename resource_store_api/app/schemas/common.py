"""
Schemas shared by all endpoints: the health payload and the error
envelope.
"""

from pydantic import BaseModel, Field


class HealthRead(BaseModel):
    status: str = Field("OK", examples=["OK"])
    message: str = Field("Server is running", examples=["Server is running"])
    timestamp: str = Field(..., examples=["2024-01-01T12:00:00.000Z"], description="Current UTC time, ISO‑8601")


class ErrorRead(BaseModel):
    """Body of every 4xx response."""

    error: str = Field(..., examples=["User not found"])
