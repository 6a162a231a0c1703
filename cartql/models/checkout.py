"""Checkout models"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .cart import CartItem, CustomAttribute
from .money import Currency, Money


class OrderStatus(str, Enum):
    UNPAID = "UNPAID"
    PAID = "PAID"


class Address(BaseModel):
    """Shipping or billing address"""
    model_config = ConfigDict(str_strip_whitespace=True)

    company: Optional[str] = None
    name: str = Field(min_length=1)
    line1: str = Field(min_length=1)
    line2: Optional[str] = None
    city: str = Field(min_length=1)
    state: Optional[str] = None
    postal_code: str = Field(min_length=1)
    country: str = Field(min_length=1)


class CheckoutRequest(BaseModel):
    """Request to convert a cart into an order"""
    cart_id: str
    email: str = Field(min_length=1, pattern=r"\S")
    notes: Optional[str] = None
    shipping: Address
    billing: Optional[Address] = None
    metadata: Optional[Any] = None


class OrderItem(CartItem):
    """Item copied from the cart at checkout"""


class Order(BaseModel):
    """Immutable snapshot of a checked out cart"""
    id: str
    cart_id: str
    email: str
    shipping: Address
    billing: Address
    items: list[OrderItem]
    currency: Currency
    sub_total: int
    shipping_total: int
    tax_total: int
    grand_total: int
    total_items: int
    total_unique_items: int
    notes: Optional[str] = None
    attributes: list[CustomAttribute] = []
    metadata: Optional[Any] = None
    status: OrderStatus = OrderStatus.UNPAID
    created_at: datetime
    updated_at: datetime

    def money(self, amount: int) -> Money:
        return Money(amount=amount, currency=self.currency)
