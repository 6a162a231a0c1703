"""GraphQL scalars and enums"""

from datetime import datetime
from typing import NewType

import strawberry

from ..data.currencies import CurrencyCode
from ..models.cart import CartItemType
from ..models.checkout import OrderStatus

Json = strawberry.scalar(
    NewType("Json", object),
    name="Json",
    description="Arbitrary JSON value",
    serialize=lambda value: value,
    parse_value=lambda value: value,
)

Date = strawberry.scalar(
    NewType("Date", datetime),
    name="Date",
    description="ISO-8601 date and time",
    serialize=lambda value: value.isoformat(),
    parse_value=lambda value: datetime.fromisoformat(value),
)

# Domain enums double as the GraphQL enums
CurrencyCodeEnum = strawberry.enum(CurrencyCode, name="CurrencyCode")
CartItemTypeEnum = strawberry.enum(
    CartItemType,
    name="CartItemType",
    description="Use these enums to group cart items. Cart totals will reflect these enums.",
)
OrderStatusEnum = strawberry.enum(OrderStatus, name="OrderStatus")
