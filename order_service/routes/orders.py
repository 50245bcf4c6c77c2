"""Order API routes for order service"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..core.config import settings
from ..core.exceptions import OrderServiceError
from ..models.order import ConfirmOrderResponse, Order
from ..services.engine import CartEngine
from .dependencies import get_cart_id, get_engine, raise_http_error

router = APIRouter(prefix="/api/orders", tags=["Orders"])


@router.post("", response_model=ConfirmOrderResponse, status_code=201)
async def confirm_order(
    cart_id: Optional[str] = Depends(get_cart_id),
    engine: CartEngine = Depends(get_engine),
):
    """
    Confirm the cart as an order.

    Prices every line under its promotion, decrements stock and empties the
    cart. Nothing is written if any step fails.
    """
    try:
        order = await engine.confirm_order(cart_id)
    except OrderServiceError as e:
        raise_http_error(e)
    return ConfirmOrderResponse(success=True, order=order, message=f"Order {order.id} confirmed")


@router.get("", response_model=list[Order])
async def list_orders(
    limit: int = Query(settings.order_list_limit, ge=1, le=100),
    engine: CartEngine = Depends(get_engine),
):
    """List recent orders"""
    return await engine.list_orders(limit=limit)


@router.get("/{order_id}", response_model=Order)
async def get_order(order_id: int, engine: CartEngine = Depends(get_engine)):
    """Get order details"""
    try:
        return await engine.get_order(order_id)
    except OrderServiceError as e:
        raise_http_error(e)
