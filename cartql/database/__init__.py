# Storage modules

from .carts import CartDatabase
from .orders import OrderDatabase

__all__ = [
    "CartDatabase",
    "OrderDatabase",
]
