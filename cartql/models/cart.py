"""Cart models"""

from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from .money import Currency, CurrencyInput, Money


class CartItemType(str, Enum):
    """Groups cart items into the total buckets"""
    SKU = "SKU"
    TAX = "TAX"
    SHIPPING = "SHIPPING"


class CustomAttribute(BaseModel):
    """Key/value pair stored on carts, items and orders"""
    key: str
    value: Optional[str] = None


class CartItem(BaseModel):
    """Item in a shopping cart"""
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    type: CartItemType = CartItemType.SKU
    images: Optional[list[Optional[str]]] = None
    unit_total: int
    quantity: int = Field(default=1, ge=0)
    attributes: list[CustomAttribute] = []
    metadata: Optional[Any] = None
    created_at: datetime
    updated_at: datetime

    @property
    def line_total(self) -> int:
        return self.unit_total * self.quantity


class Cart(BaseModel):
    """Shopping cart keyed by a caller-supplied ID"""
    id: str
    currency: Currency = Field(default_factory=Currency)
    email: Optional[str] = None
    items: list[CartItem] = []
    attributes: list[CustomAttribute] = []
    metadata: Optional[Any] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    def find_item(self, item_id: str) -> Optional[CartItem]:
        return next((item for item in self.items if item.id == item_id), None)

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def total_unique_items(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def total_for(self, item_type: CartItemType) -> int:
        """Sum of line totals for one item type"""
        return sum(item.line_total for item in self.items if item.type == item_type)

    @property
    def sub_total(self) -> int:
        return self.total_for(CartItemType.SKU)

    @property
    def shipping_total(self) -> int:
        return self.total_for(CartItemType.SHIPPING)

    @property
    def tax_total(self) -> int:
        return self.total_for(CartItemType.TAX)

    @property
    def grand_total(self) -> int:
        return self.sub_total + self.shipping_total + self.tax_total

    def is_abandoned(self, now: datetime, after: timedelta = timedelta(hours=2)) -> bool:
        """True when the cart hasn't been updated within `after`"""
        return now - self.updated_at > after

    def money(self, amount: int) -> Money:
        return Money(amount=amount, currency=self.currency)


class CartItemInput(BaseModel):
    """Item details for addItem / setItems"""
    id: str = Field(min_length=1)
    name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[CartItemType] = CartItemType.SKU
    images: Optional[list[Optional[str]]] = None
    price: int = Field(ge=0)
    currency: Optional[CurrencyInput] = None
    quantity: Optional[int] = Field(default=1, ge=1)
    attributes: Optional[list[Optional[CustomAttribute]]] = None
    metadata: Optional[Any] = None


class AddToCartRequest(CartItemInput):
    """Request to add an item to a cart"""
    cart_id: str = Field(min_length=1)


class SetCartItemsRequest(BaseModel):
    """Request to replace every item in a cart"""
    cart_id: str = Field(min_length=1)
    items: list[CartItemInput]


class UpdateCartItemRequest(BaseModel):
    """Partial update of an existing cart item"""
    cart_id: str
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[CartItemType] = None
    images: Optional[list[Optional[str]]] = None
    price: Optional[int] = Field(default=None, ge=0)
    quantity: Optional[int] = Field(default=None, ge=0)
    metadata: Optional[Any] = None


class UpdateItemQuantityRequest(BaseModel):
    """Request to change an item quantity by a delta"""
    cart_id: str
    id: str
    by: int = Field(ge=1)


class RemoveCartItemRequest(BaseModel):
    """Request to remove an item from a cart"""
    cart_id: str
    id: str


class UpdateCartRequest(BaseModel):
    """Request to update cart level fields"""
    id: str
    currency: Optional[CurrencyInput] = None
    email: Optional[str] = None
    notes: Optional[str] = None
    attributes: Optional[list[Optional[CustomAttribute]]] = None
    metadata: Optional[Any] = None


class DeletePayload(BaseModel):
    """Result of deleting a cart"""
    success: bool
    message: Optional[str] = None
