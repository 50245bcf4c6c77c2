# Database modules

from .catalog import CatalogDatabase
from .carts import CartDatabase
from .orders import OrderDatabase
from .transaction import transaction

__all__ = [
    "CatalogDatabase",
    "CartDatabase",
    "OrderDatabase",
    "transaction",
]
