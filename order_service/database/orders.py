"""Order storage for order service"""

import copy
from datetime import datetime
from typing import Optional

from ..models.order import Order, OrderDetail


class OrderDatabase:
    """In-memory order storage"""

    def __init__(self):
        self.orders: dict[int, Order] = {}
        self._next_order_id = 1
        self._next_detail_id = 1

    async def create_order(self, total_price: float) -> Order:
        """Create an order and assign its id"""
        now = datetime.utcnow()
        order = Order(
            id=self._next_order_id,
            total_price=total_price,
            details=[],
            created_at=now,
            updated_at=now,
        )
        self._next_order_id += 1
        self.orders[order.id] = order
        return order.model_copy(deep=True)

    async def create_detail_line(
        self,
        order_id: int,
        sku: str,
        name: str,
        price: float,
        quantity: int,
        promo_type: str = "",
    ) -> OrderDetail:
        """Attach a priced detail line to an existing order"""
        order = self.orders.get(order_id)
        if not order:
            raise KeyError(f"Order {order_id} not found")

        now = datetime.utcnow()
        detail = OrderDetail(
            id=self._next_detail_id,
            order_id=order_id,
            sku=sku,
            name=name,
            price=price,
            quantity=quantity,
            promo_type=promo_type,
            created_at=now,
            updated_at=now,
        )
        self._next_detail_id += 1
        order.details.append(detail)
        return detail.model_copy()

    async def get_order(self, order_id: int) -> Optional[Order]:
        """Get a copy of an order by ID"""
        order = self.orders.get(order_id)
        return order.model_copy(deep=True) if order else None

    async def list_orders(self, limit: int = 50) -> list[Order]:
        """List recent orders"""
        orders = list(self.orders.values())
        orders.sort(key=lambda o: o.id, reverse=True)
        return [order.model_copy(deep=True) for order in orders[:limit]]

    def snapshot(self) -> dict:
        return {
            "orders": copy.deepcopy(self.orders),
            "next_order_id": self._next_order_id,
            "next_detail_id": self._next_detail_id,
        }

    def restore(self, state: dict) -> None:
        self.orders = state["orders"]
        self._next_order_id = state["next_order_id"]
        self._next_detail_id = state["next_detail_id"]
