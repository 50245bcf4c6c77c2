"""
Cart Consolidator

Implements AddCart: merges a (sku, quantity) request into the cart, folds
free_items bonus units back in as bonus lines, checks stock and persists
every line it touched.
"""

import asyncio
import logging

from ..core.exceptions import InvalidInputError, NotFoundError, InsufficientInventoryError
from ..database.catalog import CatalogDatabase
from ..database.carts import CartDatabase
from ..database.transaction import transaction
from ..models.cart import CartLine
from .cart_merge import find_line, merge_line
from .promotions import free_units

logger = logging.getLogger(__name__)


def validate_add_request(sku: str, quantity: int) -> None:
    """Reject empty SKUs and non-positive or non-integer quantities"""
    if not isinstance(sku, str) or not sku.strip():
        raise InvalidInputError("SKU must be a non-empty string")
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidInputError(f"Quantity must be a positive integer, got {quantity!r}")


class CartConsolidator:
    """Adds items to a cart and keeps its promotion bonus lines consistent"""

    def __init__(self, catalog: CatalogDatabase, carts: CartDatabase):
        self.catalog = catalog
        self.carts = carts

    async def add_cart(self, cart_id: str, sku: str, quantity: int) -> CartLine:
        """
        Add ``quantity`` units of ``sku`` to the cart.

        Returns:
            The paid line for the requested item after the merge
        """
        validate_add_request(sku, quantity)

        item = await self.catalog.get_item_by_sku(sku)
        if not item:
            raise NotFoundError(f"Item {sku} not found")

        lines = await self.carts.get_lines(cart_id)
        stored_quantities = {line.id: line.quantity for line in lines}

        target, created = merge_line(lines, item.id, quantity)
        bonus = await self._accumulate_bonus(lines)
        stale = self._fold_bonus(lines, bonus)

        await self._check_inventory(lines)

        async with transaction(self.carts, name=f"add_cart[{cart_id}]"):
            for line in lines:
                if line.id is None:
                    await self.carts.create_line(cart_id, line)
                elif line.quantity != stored_quantities.get(line.id):
                    await self.carts.update_line(cart_id, line)
            for line in stale:
                await self.carts.delete_line(cart_id, line.id)

        logger.info(
            f"Cart {cart_id}: {'added' if created else 'merged'} {quantity}x {sku} "
            f"(line quantity={target.quantity}, bonus items={sum(bonus.values())})"
        )
        return target

    async def _accumulate_bonus(self, lines: list[CartLine]) -> dict[int, int]:
        """Free units owed per item, summed over every paid line"""
        paid = [line for line in lines if not line.is_bonus]
        promotions = await asyncio.gather(
            *(self.catalog.get_promotion(line.items_id) for line in paid)
        )

        bonus: dict[int, int] = {}
        for line, promotion in zip(paid, promotions):
            units = free_units(line.quantity, promotion)
            if units:
                bonus[line.items_id] = bonus.get(line.items_id, 0) + units
        return bonus

    @staticmethod
    def _fold_bonus(lines: list[CartLine], bonus: dict[int, int]) -> list[CartLine]:
        """
        Bring the cart's bonus lines in line with ``bonus``.

        Bonus is derived from the paid lines, so an existing bonus line is set
        to the new total rather than incremented.

        Returns:
            Stored bonus lines that no longer earn anything and must be deleted
        """
        for items_id, units in bonus.items():
            existing = find_line(lines, items_id, is_bonus=True)
            if existing:
                existing.quantity = units
            else:
                merge_line(lines, items_id, units, is_bonus=True)

        stale = [line for line in lines if line.is_bonus and line.items_id not in bonus]
        lines[:] = [line for line in lines if not (line.is_bonus and line.items_id not in bonus)]
        return [line for line in stale if line.id is not None]

    async def _check_inventory(self, lines: list[CartLine]) -> None:
        """Paid plus bonus units of each item must fit in its stock"""
        totals: dict[int, int] = {}
        for line in lines:
            totals[line.items_id] = totals.get(line.items_id, 0) + line.quantity

        items = {item.id: item for item in await self.catalog.get_items(list(totals))}
        for items_id, requested in totals.items():
            item = items.get(items_id)
            if not item:
                raise NotFoundError(f"Item {items_id} in cart not found")
            if requested > item.inventory_quantity:
                logger.warning(
                    f"Rejected cart update for {item.sku}: "
                    f"requested={requested}, available={item.inventory_quantity}"
                )
                raise InsufficientInventoryError(item.sku, requested, item.inventory_quantity)
