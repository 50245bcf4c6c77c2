"""
Promotion Evaluator

Prices one cart line under its item's promotion. Pure functions: no store
access, no logging.
"""

from dataclasses import dataclass
from typing import Optional

from ..core.config import DiscountThreshold
from ..core.exceptions import InvalidInputError
from ..models.item import Item
from ..models.order import OrderDetail
from ..models.promotion import (
    Promotion,
    PromotionType,
    FreeItems,
    BonusPrice,
    DiscountItems,
)


@dataclass
class LineEvaluation:
    """Priced detail line plus free_items units owed for it"""
    detail: OrderDetail
    bonus_quantity: int = 0


def _price(amount: float) -> float:
    return round(amount, 2)


def _validate(promotion: Promotion) -> None:
    if promotion.quantity_requirement <= 0:
        raise InvalidInputError(
            f"Promotion {promotion.id} has invalid quantity requirement "
            f"{promotion.quantity_requirement}"
        )
    if isinstance(promotion, BonusPrice) and promotion.promo < 0:
        raise InvalidInputError(f"Promotion {promotion.id} has negative bonus price {promotion.promo}")
    if isinstance(promotion, DiscountItems) and not 0 <= promotion.promo <= 1:
        raise InvalidInputError(
            f"Promotion {promotion.id} discount factor {promotion.promo} is outside [0, 1]"
        )


def discount_applies(
    requirement: int,
    quantity: int,
    threshold: DiscountThreshold = DiscountThreshold.AT_LEAST,
) -> bool:
    """Whether a discount_items promotion is active for ``quantity`` units"""
    if threshold == DiscountThreshold.AT_MOST:
        return requirement >= quantity
    return requirement <= quantity


def free_units(quantity: int, promotion: Optional[Promotion]) -> int:
    """Free units earned by ``quantity`` paid units, 0 unless free_items"""
    if not isinstance(promotion, FreeItems):
        return 0
    _validate(promotion)
    return quantity // promotion.quantity_requirement


def evaluate_line(
    item: Item,
    quantity: int,
    promotion: Optional[Promotion],
    threshold: DiscountThreshold = DiscountThreshold.AT_LEAST,
) -> LineEvaluation:
    """
    Price ``quantity`` units of ``item`` under ``promotion``.

    Args:
        item: Catalog item supplying SKU, name and unit price
        quantity: Paid units on the cart line
        promotion: The item's promotion, or None
        threshold: Direction of the discount_items threshold

    Returns:
        The detail line and, for free_items, the bonus units to add
    """
    base = item.price * quantity
    price = base
    promo_type = ""
    bonus = 0

    if promotion is not None:
        _validate(promotion)
        requirement = promotion.quantity_requirement

        if isinstance(promotion, FreeItems):
            # Paid units are charged in full; free units get their own line
            bonus = quantity // requirement
        elif isinstance(promotion, BonusPrice):
            groups, remainder = divmod(quantity, requirement)
            price = item.price * remainder + promotion.promo * groups
            if requirement <= quantity:
                promo_type = PromotionType.BONUS_PRICE.value
        elif isinstance(promotion, DiscountItems):
            if discount_applies(requirement, quantity, threshold):
                price = base * promotion.promo
                promo_type = PromotionType.DISCOUNT_ITEMS.value

    detail = OrderDetail(
        sku=item.sku,
        name=item.name,
        price=_price(price),
        quantity=quantity,
        promo_type=promo_type,
    )
    return LineEvaluation(detail=detail, bonus_quantity=bonus)


def free_items_line(item: Item, bonus_quantity: int) -> OrderDetail:
    """Zero-price detail line for accumulated free_items units"""
    return OrderDetail(
        sku=item.sku,
        name=item.name,
        price=0.0,
        quantity=bonus_quantity,
        promo_type=PromotionType.FREE_ITEMS.value,
    )
