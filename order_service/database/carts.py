"""Cart storage for order service"""

import copy
from datetime import datetime

from ..models.cart import CartLine


class CartDatabase:
    """In-memory cart line storage, keyed by cart id"""

    def __init__(self):
        self.carts: dict[str, list[CartLine]] = {}
        self._next_id = 1

    async def get_lines(self, cart_id: str) -> list[CartLine]:
        """Get copies of all lines in a cart"""
        return [line.model_copy() for line in self.carts.get(cart_id, [])]

    async def create_line(self, cart_id: str, line: CartLine) -> CartLine:
        """Store a new line and assign its id"""
        now = datetime.utcnow()
        line.id = self._next_id
        line.created_at = now
        line.updated_at = now
        self._next_id += 1
        self.carts.setdefault(cart_id, []).append(line.model_copy())
        return line

    async def update_line(self, cart_id: str, line: CartLine) -> CartLine:
        """Replace a stored line by id"""
        lines = self.carts.get(cart_id, [])
        index = next((i for i, stored in enumerate(lines) if stored.id == line.id), None)
        if index is None:
            raise KeyError(f"Cart line {line.id} not found in cart {cart_id}")

        line.updated_at = datetime.utcnow()
        lines[index] = line.model_copy()
        return line

    async def delete_line(self, cart_id: str, line_id: int) -> bool:
        """Remove a line from the cart"""
        lines = self.carts.get(cart_id, [])
        remaining = [line for line in lines if line.id != line_id]
        if len(remaining) == len(lines):
            return False
        self.carts[cart_id] = remaining
        return True

    async def clear(self, cart_id: str) -> None:
        """Remove every line from the cart"""
        self.carts.pop(cart_id, None)

    def snapshot(self) -> dict:
        return {"carts": copy.deepcopy(self.carts), "next_id": self._next_id}

    def restore(self, state: dict) -> None:
        self.carts = state["carts"]
        self._next_id = state["next_id"]
