"""Shared route dependencies"""

import logging
from typing import NoReturn, Optional

from fastapi import Header, HTTPException

from ..core.config import settings
from ..core.exceptions import (
    OrderServiceError,
    InvalidInputError,
    NotFoundError,
    InsufficientInventoryError,
    EmptyCartError,
    OperationTimeoutError,
)
from ..services.engine import CartEngine

logger = logging.getLogger(__name__)

# Initialize engine (would be dependency injected in production)
cart_engine: Optional[CartEngine] = None


def get_engine() -> CartEngine:
    """Get or create the cart engine"""
    global cart_engine
    if cart_engine is None:
        cart_engine = CartEngine.from_settings(settings)
    return cart_engine


def get_cart_id(x_cart_id: Optional[str] = Header(None)) -> Optional[str]:
    """Extract cart ID from header"""
    return x_cart_id


def get_status_code(error: OrderServiceError) -> int:
    """HTTP status for an engine error"""
    if isinstance(error, (InvalidInputError, EmptyCartError)):
        return 400
    if isinstance(error, NotFoundError):
        return 404
    if isinstance(error, InsufficientInventoryError):
        return 409
    if isinstance(error, OperationTimeoutError):
        return 504
    return 500


def raise_http_error(error: OrderServiceError) -> NoReturn:
    """Translate an engine error into an HTTPException"""
    status_code = get_status_code(error)
    if status_code >= 500:
        logger.error(f"Request failed: {error}")
    else:
        logger.warning(f"Request rejected ({status_code}): {error}")
    raise HTTPException(status_code=status_code, detail=str(error)) from error
