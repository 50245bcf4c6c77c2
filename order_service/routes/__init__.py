# API Routes

from .items import router as items_router
from .cart import router as cart_router
from .orders import router as orders_router

__all__ = ["items_router", "cart_router", "orders_router"]
