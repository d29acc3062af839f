"""
Pydantic model for product records.

Prices are plain floats so that they serialise as JSON numbers
(``29.99``) rather than strings.
"""

from pydantic import BaseModel, Field


class Product(BaseModel):
    """A product record as stored in the seed data and returned by the API."""

    id: int = Field(..., ge=1, examples=[1])
    name: str = Field(..., examples=["Widget A"])
    price: float = Field(..., ge=0, examples=[19.99])

    model_config = {
        "frozen": True,
    }
