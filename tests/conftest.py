"""Pytest fixtures for the cart and order engine."""

import pytest

from order_service.core.config import DiscountThreshold
from order_service.database import CatalogDatabase, CartDatabase, OrderDatabase
from order_service.models import Item, FreeItems, BonusPrice, DiscountItems
from order_service.services import CartEngine


def build_catalog() -> CatalogDatabase:
    catalog = CatalogDatabase()

    catalog.add_item(Item(id=1, sku="SKU-1", name="Plain Widget", price=10.0, inventory_quantity=100))
    catalog.add_item(Item(id=2, sku="SKU-2", name="Three For Two", price=5.0, inventory_quantity=100))
    catalog.add_item(Item(id=3, sku="SKU-3", name="Bundle Price", price=20.0, inventory_quantity=100))
    catalog.add_item(Item(id=4, sku="SKU-4", name="Bulk Discount", price=10.0, inventory_quantity=100))
    catalog.add_item(Item(id=5, sku="SKU-5", name="Scarce Widget", price=15.0, inventory_quantity=5))
    catalog.add_item(Item(id=6, sku="SKU-6", name="Scarce Freebie", price=1.0, inventory_quantity=8))

    catalog.add_promotion(FreeItems(id=1, items_id=2, quantity_requirement=3))
    catalog.add_promotion(BonusPrice(id=2, items_id=3, quantity_requirement=5, promo=8.0))
    catalog.add_promotion(DiscountItems(id=3, items_id=4, quantity_requirement=3, promo=0.9))
    catalog.add_promotion(FreeItems(id=4, items_id=6, quantity_requirement=3))

    return catalog


@pytest.fixture
def catalog() -> CatalogDatabase:
    return build_catalog()


@pytest.fixture
def engine(catalog) -> CartEngine:
    return CartEngine(
        catalog=catalog,
        carts=CartDatabase(),
        orders=OrderDatabase(),
        context_timeout=1.0,
        discount_threshold=DiscountThreshold.AT_LEAST,
    )
