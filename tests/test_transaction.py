"""Tests for the transactional scope over in-memory stores."""

import asyncio

import pytest

from order_service.database import CartDatabase, OrderDatabase, transaction
from order_service.models import CartLine


@pytest.mark.asyncio
async def test_commit_keeps_writes():
    carts = CartDatabase()
    orders = OrderDatabase()

    async with transaction(carts, orders):
        await carts.create_line("c1", CartLine(items_id=1, quantity=2))
        await orders.create_order(20.0)

    assert len(await carts.get_lines("c1")) == 1
    assert len(await orders.list_orders()) == 1


@pytest.mark.asyncio
async def test_exception_restores_every_store():
    carts = CartDatabase()
    orders = OrderDatabase()
    await carts.create_line("c1", CartLine(items_id=1, quantity=2))

    with pytest.raises(RuntimeError):
        async with transaction(carts, orders):
            await carts.clear("c1")
            await orders.create_order(20.0)
            raise RuntimeError("boom")

    assert len(await carts.get_lines("c1")) == 1
    assert await orders.list_orders() == []


@pytest.mark.asyncio
async def test_restored_ids_are_reused():
    orders = OrderDatabase()

    with pytest.raises(ValueError):
        async with transaction(orders):
            await orders.create_order(1.0)
            raise ValueError("rollback")

    order = await orders.create_order(2.0)
    assert order.id == 1


@pytest.mark.asyncio
async def test_cancellation_restores_stores():
    carts = CartDatabase()

    async def write_then_hang():
        async with transaction(carts):
            await carts.create_line("c1", CartLine(items_id=1, quantity=1))
            await asyncio.sleep(10)

    with pytest.raises(asyncio.TimeoutError):
        await asyncio.wait_for(write_then_hang(), timeout=0.05)

    assert await carts.get_lines("c1") == []
