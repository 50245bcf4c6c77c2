"""Tests for AddCart consolidation."""

import asyncio

import pytest

from order_service.core.exceptions import (
    InsufficientInventoryError,
    InvalidInputError,
    NotFoundError,
    OperationTimeoutError,
    StorageFailureError,
)


def _paid(lines):
    return {line.items_id: line.quantity for line in lines if not line.is_bonus}


def _bonus(lines):
    return {line.items_id: line.quantity for line in lines if line.is_bonus}


@pytest.mark.asyncio
async def test_add_new_line(engine):
    line = await engine.add_cart("SKU-1", 3)

    assert line.id is not None
    assert line.items_id == 1
    assert line.quantity == 3
    assert line.is_bonus is False

    lines = await engine.get_cart()
    assert _paid(lines) == {1: 3}
    assert _bonus(lines) == {}


@pytest.mark.asyncio
async def test_add_existing_item_merges_into_one_line(engine):
    first = await engine.add_cart("SKU-1", 3)
    second = await engine.add_cart("SKU-1", 2)

    assert second.id == first.id
    assert second.quantity == 5

    lines = await engine.get_cart()
    assert len(lines) == 1
    assert lines[0].quantity == 5


@pytest.mark.asyncio
async def test_free_items_bonus_folded_in_as_bonus_line(engine):
    line = await engine.add_cart("SKU-2", 7)

    assert line.quantity == 7
    assert line.is_bonus is False

    lines = await engine.get_cart()
    assert _paid(lines) == {2: 7}
    assert _bonus(lines) == {2: 2}


@pytest.mark.asyncio
async def test_bonus_lines_survive_reload(engine):
    await engine.add_cart("SKU-2", 7)
    await engine.add_cart("SKU-1", 1)

    # Read straight from the store, not from anything the engine returned
    stored = await engine.carts.get_lines(engine.default_cart_id)
    assert _bonus(stored) == {2: 2}
    assert all(line.id is not None for line in stored)


@pytest.mark.asyncio
async def test_bonus_recomputed_not_accumulated(engine):
    await engine.add_cart("SKU-2", 7)
    await engine.add_cart("SKU-2", 2)

    lines = await engine.get_cart()
    assert _paid(lines) == {2: 9}
    assert _bonus(lines) == {2: 3}
    assert len(lines) == 2


@pytest.mark.asyncio
async def test_bonus_line_removed_when_promotion_no_longer_applies(engine):
    await engine.add_cart("SKU-2", 3)
    engine.catalog.promotions.pop(2)

    await engine.add_cart("SKU-2", 1)

    lines = await engine.get_cart()
    assert _paid(lines) == {2: 4}
    assert _bonus(lines) == {}


@pytest.mark.asyncio
@pytest.mark.parametrize("quantity", [0, -1, True, 1.5])
async def test_non_positive_quantity_rejected_without_mutation(engine, quantity):
    await engine.add_cart("SKU-1", 2)

    with pytest.raises(InvalidInputError):
        await engine.add_cart("SKU-1", quantity)

    lines = await engine.get_cart()
    assert _paid(lines) == {1: 2}


@pytest.mark.asyncio
@pytest.mark.parametrize("sku", ["", "   "])
async def test_empty_sku_rejected(engine, sku):
    with pytest.raises(InvalidInputError):
        await engine.add_cart(sku, 1)

    assert await engine.get_cart() == []


@pytest.mark.asyncio
async def test_unknown_sku_not_found(engine):
    with pytest.raises(NotFoundError):
        await engine.add_cart("NOPE", 1)

    assert await engine.get_cart() == []


@pytest.mark.asyncio
async def test_inventory_guard_leaves_cart_unchanged(engine):
    await engine.add_cart("SKU-5", 3)

    with pytest.raises(InsufficientInventoryError) as exc_info:
        await engine.add_cart("SKU-5", 3)

    assert exc_info.value.sku == "SKU-5"
    assert exc_info.value.requested == 6
    assert exc_info.value.available == 5

    lines = await engine.get_cart()
    assert _paid(lines) == {5: 3}


@pytest.mark.asyncio
async def test_inventory_guard_counts_bonus_units(engine):
    # 7 paid + 2 free = 9 units against a stock of 8
    with pytest.raises(InsufficientInventoryError):
        await engine.add_cart("SKU-6", 7)

    assert await engine.get_cart() == []


@pytest.mark.asyncio
async def test_carts_are_isolated_by_id(engine):
    await engine.add_cart("SKU-1", 3, cart_id="alice")
    await engine.add_cart("SKU-1", 1, cart_id="bob")

    assert _paid(await engine.get_cart("alice")) == {1: 3}
    assert _paid(await engine.get_cart("bob")) == {1: 1}
    assert await engine.get_cart() == []


@pytest.mark.asyncio
async def test_clear_cart(engine):
    await engine.add_cart("SKU-2", 7)

    await engine.clear_cart()

    assert await engine.get_cart() == []


@pytest.mark.asyncio
async def test_failed_write_leaves_stored_cart_unchanged(engine, monkeypatch):
    await engine.add_cart("SKU-2", 2)

    async def failing_create_line(cart_id, line):
        raise RuntimeError("disk full")

    monkeypatch.setattr(engine.carts, "create_line", failing_create_line)

    # The paid line is updated to 3 before creating the bonus line fails
    with pytest.raises(StorageFailureError):
        await engine.add_cart("SKU-2", 1)

    stored = await engine.carts.get_lines(engine.default_cart_id)
    assert [(line.items_id, line.quantity, line.is_bonus) for line in stored] == [(2, 2, False)]


@pytest.mark.asyncio
async def test_timeout_aborts_write(engine, monkeypatch):
    engine.context_timeout = 0.05

    async def slow_create_line(cart_id, line):
        await asyncio.sleep(1)
        return line

    monkeypatch.setattr(engine.carts, "create_line", slow_create_line)

    with pytest.raises(OperationTimeoutError):
        await engine.add_cart("SKU-1", 1)

    assert await engine.get_cart() == []
