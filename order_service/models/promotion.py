"""Promotion rules.

A promotion is one of a closed set of variants, discriminated by
``promo_type``. An item without a rule simply has no promotion.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class PromotionType(str, Enum):
    FREE_ITEMS = "free_items"
    BONUS_PRICE = "bonus_price"
    DISCOUNT_ITEMS = "discount_items"


class _PromotionBase(BaseModel):
    id: int
    items_id: int
    # Threshold quantity; validated by the evaluator before it divides by it
    quantity_requirement: int


class FreeItems(_PromotionBase):
    """One free unit for every ``quantity_requirement`` units bought"""
    promo_type: Literal["free_items"] = "free_items"


class BonusPrice(_PromotionBase):
    """Every full group of ``quantity_requirement`` units costs ``promo``"""
    promo_type: Literal["bonus_price"] = "bonus_price"
    promo: float


class DiscountItems(_PromotionBase):
    """Line price multiplied by ``promo`` once the threshold holds"""
    promo_type: Literal["discount_items"] = "discount_items"
    promo: float


Promotion = Annotated[
    Union[FreeItems, BonusPrice, DiscountItems],
    Field(discriminator="promo_type"),
]


class PromotionResponse(BaseModel):
    """Promotion lookup response"""
    sku: str
    promotion: Optional[Promotion] = None
