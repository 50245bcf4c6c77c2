"""
Order Confirmer

Implements ConfirmOrder: prices every paid cart line under its promotion,
adds one free line per item that earned free_items units, then writes the
order, its details, the stock decrements and the cart clear as one unit.
"""

import asyncio
import logging

from ..core.config import DiscountThreshold
from ..core.exceptions import EmptyCartError, NotFoundError, InsufficientInventoryError
from ..database.catalog import CatalogDatabase
from ..database.carts import CartDatabase
from ..database.orders import OrderDatabase
from ..database.transaction import transaction
from ..models.cart import CartLine
from ..models.item import Item
from ..models.order import Order, OrderDetail
from .promotions import evaluate_line, free_items_line

logger = logging.getLogger(__name__)


class OrderConfirmer:
    """Turns a cart into a priced order"""

    def __init__(
        self,
        catalog: CatalogDatabase,
        carts: CartDatabase,
        orders: OrderDatabase,
        discount_threshold: DiscountThreshold = DiscountThreshold.AT_LEAST,
    ):
        self.catalog = catalog
        self.carts = carts
        self.orders = orders
        self.discount_threshold = discount_threshold

    async def price_lines(self, lines: list[CartLine]) -> list[OrderDetail]:
        """
        Compute the detail lines for a cart without writing anything.

        Bonus cart lines are ignored; free units are recomputed from the paid
        lines and appended after them, one line per item.
        """
        paid = [line for line in lines if not line.is_bonus]
        items = await self._resolve_items(paid)
        promotions = await asyncio.gather(
            *(self.catalog.get_promotion(line.items_id) for line in paid)
        )

        details: list[OrderDetail] = []
        bonus: dict[int, int] = {}
        for line, promotion in zip(paid, promotions):
            evaluation = evaluate_line(
                items[line.items_id], line.quantity, promotion, self.discount_threshold
            )
            details.append(evaluation.detail)
            if evaluation.bonus_quantity:
                bonus[line.items_id] = bonus.get(line.items_id, 0) + evaluation.bonus_quantity

        for items_id, units in bonus.items():
            details.append(free_items_line(items[items_id], units))
        return details

    async def confirm_order(self, cart_id: str) -> Order:
        """Confirm the cart as a new order and empty it"""
        lines = await self.carts.get_lines(cart_id)
        if not any(not line.is_bonus for line in lines):
            raise EmptyCartError(f"Cart {cart_id} is empty")

        details = await self.price_lines(lines)
        total_price = round(sum(detail.price for detail in details), 2)

        async with transaction(self.orders, self.catalog, self.carts, name=f"confirm_order[{cart_id}]"):
            order = await self.orders.create_order(total_price)
            for detail in details:
                await self.orders.create_detail_line(
                    order.id,
                    detail.sku,
                    detail.name,
                    detail.price,
                    detail.quantity,
                    detail.promo_type,
                )

            for detail in details:
                if not await self.catalog.decrement_inventory(detail.sku, detail.quantity):
                    item = await self.catalog.get_item_by_sku(detail.sku)
                    available = item.inventory_quantity if item else 0
                    raise InsufficientInventoryError(detail.sku, detail.quantity, available)

            await self.carts.clear(cart_id)

        order = await self.orders.get_order(order.id)
        logger.info(
            f"Order {order.id} confirmed from cart {cart_id}: "
            f"{len(order.details)} line(s), total={order.total_price}"
        )
        return order

    async def _resolve_items(self, lines: list[CartLine]) -> dict[int, Item]:
        ids = list(dict.fromkeys(line.items_id for line in lines))
        items = {item.id: item for item in await self.catalog.get_items(ids)}
        missing = [items_id for items_id in ids if items_id not in items]
        if missing:
            raise NotFoundError(f"Items {missing} in cart not found")
        return items
