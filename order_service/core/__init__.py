# Core modules

from .config import settings, get_settings, Settings, DiscountThreshold
from .exceptions import (
    OrderServiceError,
    InvalidInputError,
    NotFoundError,
    InsufficientInventoryError,
    EmptyCartError,
    StorageFailureError,
    OperationTimeoutError,
)

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "DiscountThreshold",
    "OrderServiceError",
    "InvalidInputError",
    "NotFoundError",
    "InsufficientInventoryError",
    "EmptyCartError",
    "StorageFailureError",
    "OperationTimeoutError",
]
