"""Item API routes for order service"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..core.exceptions import OrderServiceError
from ..models.item import Item, ItemListResponse
from ..models.promotion import PromotionResponse
from ..services.engine import CartEngine
from .dependencies import get_engine, raise_http_error

router = APIRouter(prefix="/api/items", tags=["Items"])


@router.get("", response_model=ItemListResponse)
async def get_items(
    sku: Optional[list[str]] = Query(None, description="SKUs to look up; all items when omitted"),
    engine: CartEngine = Depends(get_engine),
):
    """Get items by SKU"""
    items = await engine.get_items(sku)
    return ItemListResponse(items=items, total=len(items))


@router.get("/{sku}", response_model=Item)
async def get_item(sku: str, engine: CartEngine = Depends(get_engine)):
    """Get an item by SKU"""
    try:
        return await engine.get_item(sku)
    except OrderServiceError as e:
        raise_http_error(e)


@router.get("/{sku}/promotion", response_model=PromotionResponse)
async def get_promotion(sku: str, engine: CartEngine = Depends(get_engine)):
    """Get the promotion that applies to an item"""
    try:
        promotion = await engine.get_promotion(sku)
    except OrderServiceError as e:
        raise_http_error(e)
    return PromotionResponse(sku=sku, promotion=promotion)
