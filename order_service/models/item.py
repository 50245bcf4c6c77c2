"""Catalog item models"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class Item(BaseModel):
    """Item in the catalog"""
    id: int
    sku: str
    name: str
    price: float = Field(ge=0)
    inventory_quantity: int = Field(ge=0)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ItemListResponse(BaseModel):
    """Response from item lookup"""
    items: list[Item]
    total: int
