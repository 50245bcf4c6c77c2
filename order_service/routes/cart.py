"""Cart API routes for order service"""

from typing import Optional

from fastapi import APIRouter, Depends

from ..core.exceptions import OrderServiceError
from ..models.cart import AddToCartRequest, AddToCartResponse, CartResponse
from ..services.engine import CartEngine
from .dependencies import get_cart_id, get_engine, raise_http_error

router = APIRouter(prefix="/api/cart", tags=["Cart"])


@router.get("", response_model=CartResponse)
async def get_cart(
    cart_id: Optional[str] = Depends(get_cart_id),
    engine: CartEngine = Depends(get_engine),
):
    """Get all lines in the cart"""
    lines = await engine.get_cart(cart_id)
    return CartResponse(cart_id=cart_id or engine.default_cart_id, lines=lines)


@router.post("/items", response_model=AddToCartResponse)
async def add_to_cart(
    request: AddToCartRequest,
    cart_id: Optional[str] = Depends(get_cart_id),
    engine: CartEngine = Depends(get_engine),
):
    """Add an item to the cart, applying free_items promotions"""
    try:
        line = await engine.add_cart(request.sku, request.quantity, cart_id)
    except OrderServiceError as e:
        raise_http_error(e)

    return AddToCartResponse(
        cart_id=cart_id or engine.default_cart_id,
        line=line,
        message=f"Added {request.quantity}x {request.sku} to cart",
    )


@router.delete("", response_model=CartResponse)
async def clear_cart(
    cart_id: Optional[str] = Depends(get_cart_id),
    engine: CartEngine = Depends(get_engine),
):
    """Clear all items from cart"""
    try:
        await engine.clear_cart(cart_id)
    except OrderServiceError as e:
        raise_http_error(e)
    return CartResponse(cart_id=cart_id or engine.default_cart_id, message="Cart cleared")
