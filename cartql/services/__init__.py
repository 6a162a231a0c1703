# Services

from .cart_service import CartService
from .cartql_client import CartQLClient, CartQLClientError

__all__ = ["CartService", "CartQLClient", "CartQLClientError"]
