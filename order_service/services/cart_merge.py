"""Shared cart-merge helper"""

from typing import Optional

from ..models.cart import CartLine


def find_line(lines: list[CartLine], items_id: int, is_bonus: bool = False) -> Optional[CartLine]:
    """Find the paid (or bonus) line for an item"""
    return next(
        (line for line in lines if line.items_id == items_id and line.is_bonus == is_bonus),
        None,
    )


def merge_line(
    lines: list[CartLine],
    items_id: int,
    quantity: int,
    is_bonus: bool = False,
) -> tuple[CartLine, bool]:
    """
    Add ``quantity`` to the item's line, appending a new line if none exists.

    Returns:
        Tuple of (merged line, True if the line was newly created)
    """
    existing = find_line(lines, items_id, is_bonus)
    if existing:
        existing.quantity += quantity
        return existing, False

    line = CartLine(items_id=items_id, quantity=quantity, is_bonus=is_bonus)
    lines.append(line)
    return line, True
