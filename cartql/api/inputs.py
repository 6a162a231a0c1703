"""GraphQL input types"""

import dataclasses
from typing import Any, Optional, TypeVar

import strawberry
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from strawberry import UNSET

from .. import models
from ..core.errors import ValidationError
from .scalars import CartItemType, CurrencyCode, Json

RequestT = TypeVar("RequestT", bound=BaseModel)


def _provided(value: Any) -> Any:
    """Convert input objects to plain data, leaving out unset fields"""
    if isinstance(value, list):
        return [_provided(v) for v in value]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            field.name: _provided(getattr(value, field.name))
            for field in dataclasses.fields(value)
            if getattr(value, field.name) is not UNSET
        }
    return value


def to_request(model_cls: type[RequestT], value: Any) -> RequestT:
    """Validate a GraphQL input into a service request model"""
    try:
        return model_cls.model_validate(_provided(value))
    except PydanticValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ValidationError(f"Invalid input: {details}") from e


@strawberry.input
class CurrencyInput:
    code: Optional[CurrencyCode] = UNSET
    symbol: Optional[str] = UNSET
    thousands_separator: Optional[str] = UNSET
    decimal_separator: Optional[str] = UNSET
    decimal_digits: Optional[int] = UNSET

    def to_request(self) -> models.CurrencyInput:
        return to_request(models.CurrencyInput, self)


@strawberry.input
class CustomAttributeInput:
    key: str
    value: Optional[str] = UNSET


@strawberry.input
class AddToCartInput:
    cart_id: strawberry.ID
    id: strawberry.ID
    price: int
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    type: Optional[CartItemType] = UNSET
    images: Optional[list[Optional[str]]] = UNSET
    currency: Optional[CurrencyInput] = UNSET
    quantity: Optional[int] = 1
    attributes: Optional[list[Optional[CustomAttributeInput]]] = UNSET
    metadata: Optional[Json] = UNSET

    def to_request(self) -> models.AddToCartRequest:
        return to_request(models.AddToCartRequest, self)


@strawberry.input
class SetCartItemInput:
    id: strawberry.ID
    price: int
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    type: Optional[CartItemType] = UNSET
    images: Optional[list[Optional[str]]] = UNSET
    currency: Optional[CurrencyInput] = UNSET
    quantity: Optional[int] = 1
    attributes: Optional[list[Optional[CustomAttributeInput]]] = UNSET
    metadata: Optional[Json] = UNSET


@strawberry.input
class SetCartItemsInput:
    cart_id: strawberry.ID
    items: list[SetCartItemInput]

    def to_request(self) -> models.SetCartItemsRequest:
        return to_request(models.SetCartItemsRequest, self)


@strawberry.input
class UpdateCartItemInput:
    cart_id: strawberry.ID
    id: strawberry.ID
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    type: Optional[CartItemType] = UNSET
    images: Optional[list[Optional[str]]] = UNSET
    price: Optional[int] = UNSET
    quantity: Optional[int] = UNSET
    metadata: Optional[Json] = UNSET

    def to_request(self) -> models.UpdateCartItemRequest:
        return to_request(models.UpdateCartItemRequest, self)


@strawberry.input
class UpdateItemQuantityInput:
    cart_id: strawberry.ID = strawberry.field(
        description="The ID of the Cart in which the CartItem belongs to."
    )
    id: strawberry.ID = strawberry.field(description="The ID of the CartItem you wish to update.")
    by: int = strawberry.field(
        description="The amount (as Int) you wish to increment the Cart item quantity by."
    )

    def to_request(self) -> models.UpdateItemQuantityRequest:
        return to_request(models.UpdateItemQuantityRequest, self)


@strawberry.input
class RemoveCartItemInput:
    cart_id: strawberry.ID = strawberry.field(
        description="The ID of the Cart in which the CartItem belongs to."
    )
    id: strawberry.ID = strawberry.field(description="The ID of the CartItem you wish to remove.")

    def to_request(self) -> models.RemoveCartItemRequest:
        return to_request(models.RemoveCartItemRequest, self)


@strawberry.input
class EmptyCartInput:
    id: strawberry.ID = strawberry.field(description="The ID of the Cart you wish to empty.")


@strawberry.input
class UpdateCartInput:
    id: strawberry.ID
    currency: Optional[CurrencyInput] = UNSET
    email: Optional[str] = UNSET
    notes: Optional[str] = UNSET
    attributes: Optional[list[Optional[CustomAttributeInput]]] = UNSET
    metadata: Optional[Json] = UNSET

    def to_request(self) -> models.UpdateCartRequest:
        return to_request(models.UpdateCartRequest, self)


@strawberry.input
class DeleteCartInput:
    id: strawberry.ID = strawberry.field(description="The ID of the Cart you wish to delete.")


@strawberry.input
class AddressInput:
    name: str
    line1: str
    city: str
    postal_code: str
    country: str
    company: Optional[str] = UNSET
    line2: Optional[str] = UNSET
    state: Optional[str] = UNSET


@strawberry.input
class CheckoutInput:
    cart_id: strawberry.ID
    email: str
    shipping: AddressInput
    notes: Optional[str] = UNSET
    billing: Optional[AddressInput] = UNSET
    metadata: Optional[Json] = UNSET

    def to_request(self) -> models.CheckoutRequest:
        return to_request(models.CheckoutRequest, self)
