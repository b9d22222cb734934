"""
Pydantic models for user data.

Users are a static, read‑only set loaded at startup.  Issues refer to
them by id only.
"""

from pydantic import BaseModel, Field


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["김개발"])

    model_config = {
        "from_attributes": True,
    }
