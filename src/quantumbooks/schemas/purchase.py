"""Schemas for purchase input and output.

The CLI validates raw command-line values through PurchaseRequest before
they reach the store, and reports the outcome as a PurchaseResult.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PurchaseRequest(BaseModel):
    """Request to buy copies of a registered book."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "examples": [
                {
                    "isbn": "P001",
                    "quantity": 2,
                    "email": "reader@example.com",
                    "address": "Madinaty",
                }
            ]
        },
    )

    isbn: str = Field(min_length=1, description="ISBN of the book to buy")
    quantity: int = Field(default=1, ge=1, description="Number of copies")
    email: str = Field(default="", description="Delivery email for digital books")
    address: str = Field(default="", description="Shipping address for physical books")


class PurchaseResult(BaseModel):
    """Outcome of a completed purchase."""

    isbn: str
    quantity: int
    total: float = Field(ge=0, description="Amount paid")
    currency: str
    remaining_stock: int = Field(ge=0)
