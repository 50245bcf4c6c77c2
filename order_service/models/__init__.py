# Order Service Models

from .item import Item, ItemListResponse
from .promotion import (
    Promotion,
    PromotionType,
    FreeItems,
    BonusPrice,
    DiscountItems,
    PromotionResponse,
)
from .cart import CartLine, AddToCartRequest, AddToCartResponse, CartResponse
from .order import Order, OrderDetail, ConfirmOrderResponse

__all__ = [
    "Item",
    "ItemListResponse",
    "Promotion",
    "PromotionType",
    "FreeItems",
    "BonusPrice",
    "DiscountItems",
    "PromotionResponse",
    "CartLine",
    "AddToCartRequest",
    "AddToCartResponse",
    "CartResponse",
    "Order",
    "OrderDetail",
    "ConfirmOrderResponse",
]
