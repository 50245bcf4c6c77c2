"""Errors raised by the cart and order engine.

The engine only classifies failures; delivery layers decide how each kind is
presented to clients.
"""


class OrderServiceError(Exception):
    """Base exception for cart and order errors"""
    pass


class InvalidInputError(OrderServiceError):
    """Empty SKU, non-positive quantity or a malformed promotion rule"""
    pass


class NotFoundError(OrderServiceError):
    """Unknown SKU, item or order"""
    pass


class InsufficientInventoryError(OrderServiceError):
    """Requested quantity exceeds available stock"""

    def __init__(self, sku: str, requested: int, available: int):
        self.sku = sku
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient inventory for {sku}: requested={requested}, available={available}"
        )


class EmptyCartError(OrderServiceError):
    """Confirmation attempted on a cart with no lines"""
    pass


class StorageFailureError(OrderServiceError):
    """An underlying store call failed"""
    pass


class OperationTimeoutError(StorageFailureError):
    """An operation did not finish within the configured timeout"""
    pass
