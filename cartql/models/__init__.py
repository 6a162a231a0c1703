# CartQL Models

from .money import Currency, CurrencyInput, Money, format_money
from .cart import (
    Cart,
    CartItem,
    CartItemType,
    CustomAttribute,
    CartItemInput,
    AddToCartRequest,
    SetCartItemsRequest,
    UpdateCartItemRequest,
    UpdateItemQuantityRequest,
    RemoveCartItemRequest,
    UpdateCartRequest,
    DeletePayload,
)
from .checkout import (
    Address,
    CheckoutRequest,
    Order,
    OrderItem,
    OrderStatus,
)

__all__ = [
    "Currency",
    "CurrencyInput",
    "Money",
    "format_money",
    "Cart",
    "CartItem",
    "CartItemType",
    "CustomAttribute",
    "CartItemInput",
    "AddToCartRequest",
    "SetCartItemsRequest",
    "UpdateCartItemRequest",
    "UpdateItemQuantityRequest",
    "RemoveCartItemRequest",
    "UpdateCartRequest",
    "DeletePayload",
    "Address",
    "CheckoutRequest",
    "Order",
    "OrderItem",
    "OrderStatus",
]
