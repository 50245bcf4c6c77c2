"""Cart models for order service"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class CartLine(BaseModel):
    """One (item, quantity) line in a cart.

    Bonus lines hold free units granted by a free_items promotion; a cart has
    at most one paid and one bonus line per item.
    """
    id: Optional[int] = None
    items_id: int
    quantity: int = Field(gt=0)
    is_bonus: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AddToCartRequest(BaseModel):
    """Request to add item to cart"""
    sku: str = Field(min_length=1)
    quantity: int = Field(default=1, gt=0)

    @field_validator("sku", mode="before")
    @classmethod
    def strip_sku(cls, value):
        return value.strip() if isinstance(value, str) else value


class AddToCartResponse(BaseModel):
    """AddCart API response"""
    cart_id: str
    line: CartLine
    message: Optional[str] = None


class CartResponse(BaseModel):
    """Cart API response"""
    cart_id: str
    lines: list[CartLine] = []
    message: Optional[str] = None
