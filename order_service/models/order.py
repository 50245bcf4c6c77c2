"""Order models for order service"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class OrderDetail(BaseModel):
    """Priced line belonging to an order"""
    id: Optional[int] = None
    order_id: Optional[int] = None
    sku: str
    name: str
    price: float = Field(ge=0)
    quantity: int = Field(gt=0)
    promo_type: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Order(BaseModel):
    """Confirmed order"""
    id: int
    total_price: float = Field(ge=0)
    details: list[OrderDetail] = []
    created_at: datetime
    updated_at: datetime


class ConfirmOrderResponse(BaseModel):
    """Response from order confirmation"""
    success: bool
    order: Optional[Order] = None
    message: Optional[str] = None
