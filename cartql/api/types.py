"""GraphQL object types"""

from typing import Optional

import strawberry

from .. import models
from .scalars import CartItemType, CurrencyCode, Date, Json, OrderStatus


@strawberry.interface
class Node:
    id: strawberry.ID


@strawberry.type(
    description="Cart and Cart Items use the currency object to format their unit/line totals."
)
class Currency:
    code: Optional[CurrencyCode] = strawberry.field(
        description="The currency code, e.g. USD, GBP, EUR"
    )
    symbol: Optional[str] = strawberry.field(description="The currency symbol, e.g. $, £, €")
    thousands_separator: Optional[str] = strawberry.field(
        description="The thousand separator, e.g. ',', '.'"
    )
    decimal_separator: Optional[str] = strawberry.field(description="The decimal separator, e.g. '.'")
    decimal_digits: Optional[int] = strawberry.field(
        description="The decimal places for the currency"
    )

    @classmethod
    def from_model(cls, currency: models.Currency) -> "Currency":
        return cls(
            code=currency.code,
            symbol=currency.symbol,
            thousands_separator=currency.thousands_separator,
            decimal_separator=currency.decimal_separator,
            decimal_digits=currency.decimal_digits,
        )


@strawberry.type(
    description="The Money type is used when describing the Cart and Cart Item unit/line totals."
)
class Money:
    amount: Optional[int] = strawberry.field(description="The raw amount in cents/pence")
    currency: Currency = strawberry.field(
        description="The current currency details of the money amount"
    )
    formatted: str = strawberry.field(description="The formatted amount with the cart currency.")

    @classmethod
    def from_model(cls, money: models.Money) -> "Money":
        return cls(
            amount=money.amount,
            currency=Currency.from_model(money.currency),
            formatted=money.formatted,
        )


@strawberry.type(
    description="Custom Cart Attributes are used for any type of custom data you want to store on a Cart. These are transferred to Orders when you checkout."
)
class CustomCartAttribute:
    key: str
    value: Optional[str]


@strawberry.type
class CustomAttribute:
    key: str
    value: Optional[str]


def _money(owner, amount: int) -> Money:
    return Money.from_model(owner.money(amount))


@strawberry.type(
    description="A Cart Item is used to store data on the items inside the Cart. There are no strict rules about what you use the named fields for."
)
class CartItem:
    id: strawberry.ID = strawberry.field(
        description="A custom unique identifer for the item provided by you."
    )
    name: Optional[str] = strawberry.field(description="Name for the item.")
    description: Optional[str] = strawberry.field(description="Description for the item.")
    type: CartItemType = strawberry.field(description="The type of cart item this is.")
    images: Optional[list[Optional[str]]] = strawberry.field(
        description="Array of image URLs for the item."
    )
    unit_total: Money = strawberry.field(description="Unit total for the individual item.")
    line_total: Money = strawberry.field(description="Line total (quantity * unit price).")
    quantity: int = strawberry.field(description="Quantity for the item.")
    attributes: list[CustomCartAttribute] = strawberry.field(
        description="Custom key/value attributes array for the item."
    )
    metadata: Optional[Json] = strawberry.field(description="Custom metadata for the item.")
    created_at: Date = strawberry.field(description="The date and time the item was created.")
    updated_at: Date = strawberry.field(description="The date and time the item was updated.")

    @classmethod
    def from_model(cls, item: models.CartItem, owner) -> "CartItem":
        """Build from a domain item; `owner` supplies the currency"""
        return cls(
            id=strawberry.ID(item.id),
            name=item.name,
            description=item.description,
            type=item.type,
            images=item.images,
            unit_total=_money(owner, item.unit_total),
            line_total=_money(owner, item.line_total),
            quantity=item.quantity,
            attributes=[CustomCartAttribute(key=a.key, value=a.value) for a in item.attributes],
            metadata=item.metadata,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )


@strawberry.type(
    description="Orders contain items that were converted from the Cart at 'checkout'.\n\nOrder items are identical to the CartItem type."
)
class OrderItem(CartItem):
    pass


@strawberry.type(
    description="Carts are the core concept of CartQL. Bring your own PIM and use CartQL to calculate your Cart and Checkout."
)
class Cart(Node):
    id: strawberry.ID = strawberry.field(
        description="A custom unique identifer for the cart provided by you."
    )
    currency: Currency = strawberry.field(description="The current currency details of the cart.")
    email: Optional[str] = strawberry.field(description="The customer for the cart")
    total_items: Optional[int] = strawberry.field(
        description="The number of total items in the cart"
    )
    total_unique_items: Optional[int] = strawberry.field(
        description="The number of total unique items in the cart."
    )
    items: list[CartItem] = strawberry.field(description="The items currently in the cart.")
    sub_total: Money = strawberry.field(
        description="Sum of all SKU items, excluding discounts, taxes, shipping, including the raw/formatted amounts and currency details"
    )
    shipping_total: Money = strawberry.field(
        description="The cart total for all items with type SHIPPING, including the raw/formatted amounts and currency details."
    )
    tax_total: Money = strawberry.field(
        description="The cart total for all items with type TAX, including the raw/formatted amounts and currency details."
    )
    grand_total: Money = strawberry.field(
        description="The grand total for all items, including shipping, including the raw/formatted amounts and currency details."
    )
    is_empty: Optional[bool] = strawberry.field(
        description="A simple helper method to check if the cart is empty."
    )
    abandoned: Optional[bool] = strawberry.field(
        description="A simple helper method to check if the cart hasn't been updated in the last 2 hours."
    )
    attributes: list[CustomCartAttribute] = strawberry.field(
        description="Custom key/value attributes array for the cart."
    )
    metadata: Optional[Json] = strawberry.field(description="Custom meta object for the cart")
    notes: Optional[str] = strawberry.field(description="Any notes related to the cart/checkout")
    created_at: Date = strawberry.field(description="The date and time the cart was created.")
    updated_at: Date = strawberry.field(description="The date and time the cart was updated.")

    @classmethod
    def from_model(cls, cart: models.Cart, abandoned: bool) -> "Cart":
        return cls(
            id=strawberry.ID(cart.id),
            currency=Currency.from_model(cart.currency),
            email=cart.email,
            total_items=cart.total_items,
            total_unique_items=cart.total_unique_items,
            items=[CartItem.from_model(item, cart) for item in cart.items],
            sub_total=_money(cart, cart.sub_total),
            shipping_total=_money(cart, cart.shipping_total),
            tax_total=_money(cart, cart.tax_total),
            grand_total=_money(cart, cart.grand_total),
            is_empty=cart.is_empty,
            abandoned=abandoned,
            attributes=[CustomCartAttribute(key=a.key, value=a.value) for a in cart.attributes],
            metadata=cart.metadata,
            notes=cart.notes,
            created_at=cart.created_at,
            updated_at=cart.updated_at,
        )


@strawberry.type(
    description="Addresses are associated with Orders. They can either be shipping or billing addresses."
)
class Address:
    company: Optional[str]
    name: str
    line1: str
    line2: Optional[str]
    city: str
    state: Optional[str]
    postal_code: str
    country: str

    @classmethod
    def from_model(cls, address: models.Address) -> "Address":
        return cls(**address.model_dump())


@strawberry.type(
    description="Orders are immutable. Once created, you can't change them. The status will automatically reflect the current payment status."
)
class Order:
    id: strawberry.ID
    cart_id: strawberry.ID = strawberry.field(
        description='The ID of the cart you want to "checkout".'
    )
    email: str = strawberry.field(
        description="The email of the recipient. Can be used later for cart recovery emails."
    )
    shipping: Address = strawberry.field(description="The orders shipping address.")
    billing: Address = strawberry.field(description="The orders billing address.")
    items: list[OrderItem] = strawberry.field(description="The order items that were in the cart.")
    sub_total: Money
    shipping_total: Money
    tax_total: Money
    grand_total: Money
    total_items: int = strawberry.field(description="The total item count.")
    total_unique_items: int = strawberry.field(description="The total unique item count.")
    notes: Optional[str] = strawberry.field(description="The notes set at checkout.")
    attributes: list[CustomAttribute] = strawberry.field(
        description="The custom attributes set at checkout"
    )
    metadata: Optional[Json] = strawberry.field(description="The metadata set at checkout")
    status: OrderStatus = strawberry.field(
        description="The current order status. This will reflect the current payment status. The first stage is 'unpaid'."
    )
    created_at: Date = strawberry.field(description="The date and time the order was created.")
    updated_at: Date = strawberry.field(
        description="The date and time the order status was updated."
    )

    @classmethod
    def from_model(cls, order: models.Order) -> "Order":
        return cls(
            id=strawberry.ID(order.id),
            cart_id=strawberry.ID(order.cart_id),
            email=order.email,
            shipping=Address.from_model(order.shipping),
            billing=Address.from_model(order.billing),
            items=[OrderItem.from_model(item, order) for item in order.items],
            sub_total=_money(order, order.sub_total),
            shipping_total=_money(order, order.shipping_total),
            tax_total=_money(order, order.tax_total),
            grand_total=_money(order, order.grand_total),
            total_items=order.total_items,
            total_unique_items=order.total_unique_items,
            notes=order.notes,
            attributes=[CustomAttribute(key=a.key, value=a.value) for a in order.attributes],
            metadata=order.metadata,
            status=order.status,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


@strawberry.type
class DeletePayload:
    success: bool
    message: Optional[str]

    @classmethod
    def from_model(cls, payload: models.DeletePayload) -> "DeletePayload":
        return cls(success=payload.success, message=payload.message)
