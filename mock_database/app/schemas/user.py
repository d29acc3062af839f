"""Pydantic model for user records."""

from pydantic import BaseModel, Field


class User(BaseModel):
    """A user record as stored in the seed data and returned by the API."""

    id: int = Field(..., ge=1, examples=[1])
    name: str = Field(..., examples=["John Doe"])
    email: str = Field(..., examples=["john@example.com"])

    model_config = {
        "frozen": True,
    }
