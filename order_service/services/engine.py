"""
Cart Engine

Entry point used by the delivery layer. Serializes cart and order writes
behind one lock, bounds every call by the configured timeout and classifies
unexpected store failures.
"""

import asyncio
import logging
from functools import partial
from typing import Any, Awaitable, Callable, Optional

from ..core.config import DiscountThreshold, Settings
from ..core.exceptions import (
    NotFoundError,
    OperationTimeoutError,
    OrderServiceError,
    StorageFailureError,
)
from ..database.catalog import CatalogDatabase
from ..database.carts import CartDatabase
from ..database.orders import OrderDatabase
from ..database.transaction import transaction
from ..models.cart import CartLine
from ..models.item import Item
from ..models.order import Order
from ..models.promotion import Promotion
from .cart_consolidator import CartConsolidator
from .order_confirmer import OrderConfirmer

logger = logging.getLogger(__name__)


class CartEngine:
    """
    Cart consolidation and order confirmation over a set of stores.

    Usage:
        engine = CartEngine.from_settings(settings)
        line = await engine.add_cart("120P90", 3)
        order = await engine.confirm_order()
    """

    def __init__(
        self,
        catalog: CatalogDatabase,
        carts: CartDatabase,
        orders: OrderDatabase,
        context_timeout: float = 2.0,
        discount_threshold: DiscountThreshold = DiscountThreshold.AT_LEAST,
        default_cart_id: str = "default",
    ):
        self.catalog = catalog
        self.carts = carts
        self.orders = orders
        self.context_timeout = context_timeout
        self.default_cart_id = default_cart_id
        self.consolidator = CartConsolidator(catalog, carts)
        self.confirmer = OrderConfirmer(catalog, carts, orders, discount_threshold)
        self._lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "CartEngine":
        """Create an engine over fresh in-memory stores"""
        return cls(
            catalog=CatalogDatabase(seed=settings.seed_catalog),
            carts=CartDatabase(),
            orders=OrderDatabase(),
            context_timeout=settings.context_timeout,
            discount_threshold=settings.discount_threshold,
            default_cart_id=settings.default_cart_id,
        )

    def _cart_id(self, cart_id: Optional[str]) -> str:
        return cart_id or self.default_cart_id

    async def _run(self, name: str, operation: Callable[[], Awaitable[Any]]) -> Any:
        """Run a write operation under the lock and the timeout"""

        async def locked() -> Any:
            async with self._lock:
                return await operation()

        try:
            return await asyncio.wait_for(locked(), timeout=self.context_timeout)
        except OrderServiceError:
            raise
        except asyncio.TimeoutError as e:
            logger.error(f"{name} timed out after {self.context_timeout}s")
            raise OperationTimeoutError(f"{name} timed out after {self.context_timeout}s") from e
        except Exception as e:
            logger.error(f"{name} failed: {e!r}")
            raise StorageFailureError(f"{name} failed: {e}") from e

    async def add_cart(self, sku: str, quantity: int, cart_id: Optional[str] = None) -> CartLine:
        """Add ``quantity`` units of ``sku`` to the cart"""
        return await self._run(
            "add_cart",
            partial(self.consolidator.add_cart, self._cart_id(cart_id), sku, quantity),
        )

    async def confirm_order(self, cart_id: Optional[str] = None) -> Order:
        """Convert the cart into an order"""
        return await self._run(
            "confirm_order",
            partial(self.confirmer.confirm_order, self._cart_id(cart_id)),
        )

    async def clear_cart(self, cart_id: Optional[str] = None) -> None:
        """Remove every line from the cart"""
        cart_id = self._cart_id(cart_id)

        async def clear() -> None:
            async with transaction(self.carts, name=f"clear_cart[{cart_id}]"):
                await self.carts.clear(cart_id)

        await self._run("clear_cart", clear)
        logger.info(f"Cart {cart_id} cleared")

    async def get_cart(self, cart_id: Optional[str] = None) -> list[CartLine]:
        """Get all lines of the cart"""
        return await self.carts.get_lines(self._cart_id(cart_id))

    async def get_item(self, sku: str) -> Item:
        """Get an item by SKU"""
        item = await self.catalog.get_item_by_sku(sku)
        if not item:
            raise NotFoundError(f"Item {sku} not found")
        return item

    async def get_items(self, skus: Optional[list[str]] = None) -> list[Item]:
        """Get items for the given SKUs, or the whole catalog"""
        if not skus:
            return await self.catalog.get_all_items()
        return await self.catalog.get_items_by_sku(skus)

    async def get_promotion(self, sku: str) -> Optional[Promotion]:
        """Get the promotion for an item, if any"""
        item = await self.get_item(sku)
        return await self.catalog.get_promotion(item.id)

    async def get_order(self, order_id: int) -> Order:
        """Get an order by id"""
        order = await self.orders.get_order(order_id)
        if not order:
            raise NotFoundError(f"Order {order_id} not found")
        return order

    async def list_orders(self, limit: int = 50) -> list[Order]:
        """List recent orders"""
        return await self.orders.list_orders(limit=limit)
