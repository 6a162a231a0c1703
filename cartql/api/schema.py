"""
CartQL GraphQL schema

Query and Mutation roots. Resolvers convert inputs into service requests
and wrap the returned domain objects in GraphQL types.
"""

import logging
from typing import Optional

import strawberry
from graphql import GraphQLError
from strawberry.types import Info

from ..core.errors import CartQLError
from ..models.cart import Cart as CartModel
from ..services.cart_service import CartService
from .inputs import (
    AddToCartInput,
    CheckoutInput,
    CurrencyInput,
    DeleteCartInput,
    EmptyCartInput,
    RemoveCartItemInput,
    SetCartItemsInput,
    UpdateCartInput,
    UpdateCartItemInput,
    UpdateItemQuantityInput,
)
from .types import Cart, DeletePayload, Node, Order

logger = logging.getLogger(__name__)


def get_service(info: Info) -> CartService:
    return info.context["cart_service"]


def _cart(service: CartService, cart: CartModel) -> Cart:
    return Cart.from_model(cart, abandoned=service.is_abandoned(cart))


def _lookup(info: Info, id: strawberry.ID, currency: Optional[CurrencyInput]) -> Cart:
    service = get_service(info)
    cart = service.get_or_create_cart(
        str(id),
        currency.to_request() if currency else None,
    )
    return _cart(service, cart)


@strawberry.type
class Query:
    @strawberry.field(
        description="Use this to get a cart by a custom ID. If a cart doesn't exist with this ID, it will be created for you."
    )
    def cart(
        self,
        info: Info,
        id: strawberry.ID,
        currency: Optional[CurrencyInput] = None,
    ) -> Optional[Cart]:
        return _lookup(info, id, currency)

    @strawberry.field
    def node(
        self,
        info: Info,
        id: strawberry.ID,
        currency: Optional[CurrencyInput] = None,
    ) -> Optional[Node]:
        return _lookup(info, id, currency)


@strawberry.type
class Mutation:
    @strawberry.mutation(
        description="Use this to add items to the cart. If the item already exists, the provided input will be merged and quantity will be increased."
    )
    def add_item(self, info: Info, input: AddToCartInput) -> Cart:
        service = get_service(info)
        return _cart(service, service.add_item(input.to_request()))

    @strawberry.mutation(
        description="Use this to set all the items at once in the cart. This will override any existing items."
    )
    def set_items(self, info: Info, input: SetCartItemsInput) -> Cart:
        service = get_service(info)
        return _cart(service, service.set_items(input.to_request()))

    @strawberry.mutation(
        description="Use this to update any existing items in the cart. If the item doesn't exist, it'll return an error."
    )
    def update_item(self, info: Info, input: UpdateCartItemInput) -> Cart:
        service = get_service(info)
        return _cart(service, service.update_item(input.to_request()))

    @strawberry.mutation(
        description="Use this to increase the item quantity of the provided item ID. If the item doesn't exist, it'll throw an error."
    )
    def increment_item_quantity(self, info: Info, input: UpdateItemQuantityInput) -> Cart:
        service = get_service(info)
        return _cart(service, service.increment_item_quantity(input.to_request()))

    @strawberry.mutation(
        description="Use this to decrease the item quantity of the provided item ID. If the item doesn't exist, it'll throw an error."
    )
    def decrement_item_quantity(self, info: Info, input: UpdateItemQuantityInput) -> Cart:
        service = get_service(info)
        return _cart(service, service.decrement_item_quantity(input.to_request()))

    @strawberry.mutation(
        description="Use this to remove any items from the cart. If it doesn't exist, it'll throw an error."
    )
    def remove_item(self, info: Info, input: RemoveCartItemInput) -> Cart:
        service = get_service(info)
        return _cart(service, service.remove_item(input.to_request()))

    @strawberry.mutation(
        description="Use this to empty the cart. If the cart doesn't exist, it'll throw an error."
    )
    def empty_cart(self, info: Info, input: EmptyCartInput) -> Cart:
        service = get_service(info)
        return _cart(service, service.empty_cart(str(input.id)))

    @strawberry.mutation(
        description="Use this to update the cart currency or metadata. If the cart doesn't exist, it'll throw an error."
    )
    def update_cart(self, info: Info, input: UpdateCartInput) -> Cart:
        service = get_service(info)
        return _cart(service, service.update_cart(input.to_request()))

    @strawberry.mutation(
        description="Use this to delete a cart. If the cart doesn't exist, it'll throw an error."
    )
    def delete_cart(self, info: Info, input: DeleteCartInput) -> DeletePayload:
        service = get_service(info)
        return DeletePayload.from_model(service.delete_cart(str(input.id)))

    @strawberry.mutation(description="Use this to convert a cart to an unpaid order.")
    def checkout(self, info: Info, input: CheckoutInput) -> Optional[Order]:
        service = get_service(info)
        return Order.from_model(service.checkout(input.to_request()))


class CartQLSchema(strawberry.Schema):
    """Schema that logs expected domain errors without a traceback"""

    def process_errors(self, errors: list[GraphQLError], execution_context=None) -> None:
        unexpected = []
        for error in errors:
            if isinstance(error.original_error, CartQLError):
                logger.warning(f"{error.original_error.code}: {error.message} (path={error.path})")
            else:
                unexpected.append(error)

        if unexpected:
            super().process_errors(unexpected, execution_context)


schema = CartQLSchema(query=Query, mutation=Mutation, types=[Cart])
