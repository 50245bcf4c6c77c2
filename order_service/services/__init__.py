# Engine services

from .engine import CartEngine
from .cart_consolidator import CartConsolidator
from .order_confirmer import OrderConfirmer
from .promotions import LineEvaluation, evaluate_line, free_items_line, free_units

__all__ = [
    "CartEngine",
    "CartConsolidator",
    "OrderConfirmer",
    "LineEvaluation",
    "evaluate_line",
    "free_items_line",
    "free_units",
]
