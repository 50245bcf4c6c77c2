"""In-memory catalog of items and their promotions"""

import copy
import logging
from datetime import datetime
from typing import Optional

from ..models.item import Item
from ..models.promotion import Promotion, FreeItems, BonusPrice, DiscountItems

logger = logging.getLogger(__name__)

# Demo catalog
ITEMS: list[Item] = [
    Item(id=1, sku="120P90", name="Google Home", price=49.99, inventory_quantity=10),
    Item(id=2, sku="43N23P", name="MacBook Pro", price=5399.99, inventory_quantity=5),
    Item(id=3, sku="A304SD", name="Alexa Speaker", price=109.50, inventory_quantity=10),
    Item(id=4, sku="234234", name="Raspberry Pi B", price=30.00, inventory_quantity=12),
]

PROMOTIONS: list[Promotion] = [
    # Buy 3 Google Homes for the price of 2
    BonusPrice(id=1, items_id=1, quantity_requirement=3, promo=99.98),
    # Every third Raspberry Pi is free
    FreeItems(id=2, items_id=4, quantity_requirement=3),
    # 10% off Alexa Speakers from 3 units
    DiscountItems(id=3, items_id=3, quantity_requirement=3, promo=0.9),
]


class CatalogDatabase:
    """In-memory item and promotion storage"""

    def __init__(self, seed: bool = False):
        self.items: dict[int, Item] = {}
        self.promotions: dict[int, Promotion] = {}
        if seed:
            for item in ITEMS:
                self.add_item(item.model_copy())
            for promotion in PROMOTIONS:
                self.add_promotion(promotion.model_copy())

    def add_item(self, item: Item) -> Item:
        """Register an item, replacing any item with the same id"""
        now = datetime.utcnow()
        item.created_at = item.created_at or now
        item.updated_at = now
        self.items[item.id] = item
        return item

    def add_promotion(self, promotion: Promotion) -> Promotion:
        """Register the promotion for an item; one promotion per item"""
        self.promotions[promotion.items_id] = promotion
        return promotion

    async def get_item_by_sku(self, sku: str) -> Optional[Item]:
        """Get an item by SKU"""
        return next((item for item in self.items.values() if item.sku == sku), None)

    async def get_items(self, ids: list[int]) -> list[Item]:
        """Get items by id, skipping unknown ids"""
        return [self.items[item_id] for item_id in ids if item_id in self.items]

    async def get_items_by_sku(self, skus: list[str]) -> list[Item]:
        """Get items for a list of SKUs, skipping unknown SKUs"""
        wanted = set(skus)
        return [item for item in self.items.values() if item.sku in wanted]

    async def get_all_items(self) -> list[Item]:
        """Get all items"""
        return list(self.items.values())

    async def get_promotion(self, items_id: int) -> Optional[Promotion]:
        """Get the promotion for an item, if any"""
        return self.promotions.get(items_id)

    async def decrement_inventory(self, sku: str, amount: int) -> bool:
        """
        Remove stock for a SKU.

        Returns:
            False if the SKU is unknown or stock would go negative
        """
        item = await self.get_item_by_sku(sku)
        if not item:
            return False

        new_quantity = item.inventory_quantity - amount
        if new_quantity < 0:
            return False

        item.inventory_quantity = new_quantity
        item.updated_at = datetime.utcnow()
        logger.debug(f"Inventory for {sku} decremented by {amount} (now {new_quantity})")
        return True

    def snapshot(self) -> dict:
        return {"items": copy.deepcopy(self.items)}

    def restore(self, state: dict) -> None:
        self.items = state["items"]
