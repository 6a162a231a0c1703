"""
Cart Service

Cart pricing, item mutations and checkout on top of the cart and order
stores. Every cart mutation runs under the cart's write lock against a
private copy, which is only saved once the whole mutation succeeds.
"""

import copy
import logging
import uuid
from contextlib import contextmanager
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Iterator, Optional

from ..core.errors import ConflictError, NotFoundError, ValidationError
from ..data.currencies import CurrencyCode
from ..database.carts import CartDatabase
from ..database.orders import OrderDatabase
from ..models.cart import (
    AddToCartRequest,
    Cart,
    CartItem,
    CartItemInput,
    CartItemType,
    CustomAttribute,
    DeletePayload,
    RemoveCartItemRequest,
    SetCartItemsRequest,
    UpdateCartItemRequest,
    UpdateCartRequest,
    UpdateItemQuantityRequest,
)
from ..models.checkout import CheckoutRequest, Order, OrderItem, OrderStatus
from ..models.money import Currency, CurrencyInput

logger = logging.getLogger(__name__)

# Largest value a GraphQL Int can carry
MAX_AMOUNT = 2**31 - 1


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def merge_attributes(
    existing: list[CustomAttribute],
    updates: Optional[list[Optional[CustomAttribute]]],
) -> list[CustomAttribute]:
    """Merge attributes by key, keeping first-seen order; later values win"""
    merged = {attr.key: attr for attr in existing}
    for attr in updates or []:
        if attr is None:
            continue
        merged[attr.key] = CustomAttribute(key=attr.key, value=attr.value)
    return list(merged.values())


def merge_metadata(existing: Any, update: Any) -> Any:
    """Shallow-merge dict metadata, otherwise replace"""
    if isinstance(existing, dict) and isinstance(update, dict):
        return {**existing, **update}
    return copy.deepcopy(update)


class CartService:
    """
    Cart and checkout operations.

    Args:
        carts: Cart store
        orders: Order store
        default_currency: Currency code for carts created without one
        abandoned_after: Idle time after which a cart counts as abandoned
        clock: Returns the current time; swapped out in tests
    """

    def __init__(
        self,
        carts: CartDatabase,
        orders: OrderDatabase,
        default_currency: CurrencyCode = CurrencyCode.USD,
        abandoned_after: timedelta = timedelta(hours=2),
        clock: Callable[[], datetime] = utcnow,
    ):
        self.carts = carts
        self.orders = orders
        self.default_currency = default_currency
        self.abandoned_after = abandoned_after
        self.clock = clock

    # ==================== Queries ====================

    def get_or_create_cart(
        self,
        cart_id: str,
        currency: Optional[CurrencyInput] = None,
    ) -> Cart:
        """
        Get a cart, creating an empty one if it doesn't exist yet.

        `currency` is only used when the cart is created; use update_cart
        to change the currency of an existing cart.
        """
        cart = self.carts.get_cart(cart_id)
        if cart:
            return cart

        with self.carts.lock(cart_id):
            # Another writer may have created it while we waited
            cart = self.carts.get_cart(cart_id)
            if cart:
                return cart
            cart = self._new_cart(cart_id, currency)
            self.carts.save_cart(cart)

        logger.info(f"Cart {cart_id} created ({cart.currency.code.value})")
        return cart

    def get_cart(self, cart_id: str) -> Cart:
        """Get an existing cart"""
        cart = self.carts.get_cart(cart_id)
        if not cart:
            raise NotFoundError(f"Cart {cart_id} not found")
        return cart

    def is_abandoned(self, cart: Cart) -> bool:
        return cart.is_abandoned(self.clock(), self.abandoned_after)

    # ==================== Item mutations ====================

    def add_item(self, request: AddToCartRequest) -> Cart:
        """
        Add an item to a cart, creating the cart if needed.

        If the item already exists the supplied fields are merged into it
        and its quantity is increased.
        """
        with self._mutate(request.cart_id, create=True) as (cart, now):
            if request.currency is not None:
                cart.currency = cart.currency.apply(request.currency)
            self._upsert_item(cart, request, now)
            return cart

    def set_items(self, request: SetCartItemsRequest) -> Cart:
        """Replace all items in a cart, creating the cart if needed"""
        with self._mutate(request.cart_id, create=True) as (cart, now):
            cart.items = []
            for item_input in request.items:
                if item_input.currency is not None:
                    cart.currency = cart.currency.apply(item_input.currency)
                self._upsert_item(cart, item_input, now)
            return cart

    def update_item(self, request: UpdateCartItemRequest) -> Cart:
        """Update fields of an existing item. Quantity 0 removes it."""
        with self._mutate(request.cart_id) as (cart, now):
            item = self._require_item(cart, request.id)
            provided = request.model_fields_set

            if "quantity" in provided and request.quantity is not None:
                if request.quantity == 0:
                    self._drop_item(cart, item.id)
                    return cart
                item.quantity = request.quantity

            for field in ("name", "description", "images"):
                if field in provided:
                    setattr(item, field, getattr(request, field))
            if "type" in provided and request.type is not None:
                item.type = request.type
            if "price" in provided and request.price is not None:
                item.unit_total = request.price
            if "metadata" in provided:
                item.metadata = copy.deepcopy(request.metadata)

            item.updated_at = now
            return cart

    def increment_item_quantity(self, request: UpdateItemQuantityRequest) -> Cart:
        """Increase an item's quantity by `by`"""
        with self._mutate(request.cart_id) as (cart, now):
            item = self._require_item(cart, request.id)
            item.quantity += request.by
            item.updated_at = now
            return cart

    def decrement_item_quantity(self, request: UpdateItemQuantityRequest) -> Cart:
        """
        Decrease an item's quantity by `by`.

        Quantities never go below zero: an item that would reach zero or
        less is removed from the cart.
        """
        with self._mutate(request.cart_id) as (cart, now):
            item = self._require_item(cart, request.id)
            remaining = item.quantity - request.by
            if remaining <= 0:
                self._drop_item(cart, item.id)
            else:
                item.quantity = remaining
                item.updated_at = now
            return cart

    def remove_item(self, request: RemoveCartItemRequest) -> Cart:
        """Remove an item from a cart"""
        with self._mutate(request.cart_id) as (cart, _):
            self._require_item(cart, request.id)
            self._drop_item(cart, request.id)
            return cart

    # ==================== Cart mutations ====================

    def empty_cart(self, cart_id: str) -> Cart:
        """Remove all items from a cart"""
        with self._mutate(cart_id) as (cart, _):
            cart.items = []
            return cart

    def update_cart(self, request: UpdateCartRequest) -> Cart:
        """Update currency, email, notes, attributes or metadata"""
        with self._mutate(request.id) as (cart, _):
            provided = request.model_fields_set

            if request.currency is not None:
                cart.currency = cart.currency.apply(request.currency)
            if "email" in provided:
                cart.email = request.email
            if "notes" in provided:
                cart.notes = request.notes
            if request.attributes is not None:
                cart.attributes = merge_attributes(cart.attributes, request.attributes)
            if "metadata" in provided:
                cart.metadata = copy.deepcopy(request.metadata)
            return cart

    def delete_cart(self, cart_id: str) -> DeletePayload:
        """Delete a cart"""
        if self.carts.get_cart(cart_id) is None:
            raise NotFoundError(f"Cart {cart_id} not found")

        with self.carts.lock(cart_id):
            if not self.carts.delete_cart(cart_id):
                raise NotFoundError(f"Cart {cart_id} not found")

        logger.info(f"Cart {cart_id} deleted")
        return DeletePayload(success=True, message=f"Cart {cart_id} deleted")

    # ==================== Checkout & orders ====================

    def checkout(self, request: CheckoutRequest) -> Order:
        """
        Convert a cart into an unpaid order.

        The order holds copies of the cart's items and totals; the cart
        itself is left as it is.
        """
        cart = self.get_cart(request.cart_id)
        if cart.is_empty:
            raise ValidationError(f"Cart {cart.id} is empty")

        now = self.clock()
        metadata = request.metadata if request.metadata is not None else cart.metadata

        order = Order(
            id=f"ORD-{uuid.uuid4().hex[:12].upper()}",
            cart_id=cart.id,
            email=request.email,
            shipping=request.shipping,
            billing=request.billing or request.shipping,
            items=[
                OrderItem.model_validate(copy.deepcopy(item.model_dump()))
                for item in cart.items
            ],
            currency=cart.currency,
            sub_total=cart.sub_total,
            shipping_total=cart.shipping_total,
            tax_total=cart.tax_total,
            grand_total=cart.grand_total,
            total_items=cart.total_items,
            total_unique_items=cart.total_unique_items,
            notes=request.notes if request.notes is not None else cart.notes,
            attributes=[attr.model_copy() for attr in cart.attributes],
            metadata=copy.deepcopy(metadata),
            status=OrderStatus.UNPAID,
            created_at=now,
            updated_at=now,
        )
        self.orders.save_order(order)

        logger.info(
            f"Order {order.id} created from cart {cart.id}: "
            f"{order.money(order.grand_total).formatted} ({order.total_items} items)"
        )
        return order

    def get_order(self, order_id: str) -> Order:
        """Get an order by ID"""
        order = self.orders.get_order(order_id)
        if not order:
            raise NotFoundError(f"Order {order_id} not found")
        return order

    def list_orders(self, cart_id: Optional[str] = None, limit: int = 50) -> list[Order]:
        """List recent orders"""
        return self.orders.list_orders(cart_id=cart_id, limit=limit)

    def mark_order_paid(self, order_id: str) -> Order:
        """Move an order from UNPAID to PAID"""
        self.get_order(order_id)
        order = self.orders.update_status(
            order_id,
            OrderStatus.PAID,
            now=self.clock(),
            expected=OrderStatus.UNPAID,
        )
        if order is None:
            raise ConflictError(f"Order {order_id} is not {OrderStatus.UNPAID.value}")

        logger.info(f"Order {order_id} marked as paid")
        return order

    # ==================== Internals ====================

    def _new_cart(self, cart_id: str, currency: Optional[CurrencyInput] = None) -> Cart:
        now = self.clock()
        return Cart(
            id=cart_id,
            currency=Currency.for_code(self.default_currency).apply(currency),
            created_at=now,
            updated_at=now,
        )

    @contextmanager
    def _mutate(self, cart_id: str, create: bool = False) -> Iterator[tuple[Cart, datetime]]:
        """
        Hold the cart's write lock and yield a private copy of the cart.

        The copy replaces the stored cart only if the block completes
        without raising.
        """
        if not create and self.carts.get_cart(cart_id) is None:
            raise NotFoundError(f"Cart {cart_id} not found")

        with self.carts.lock(cart_id):
            stored = self.carts.get_cart(cart_id)
            if stored is None:
                if not create:
                    raise NotFoundError(f"Cart {cart_id} not found")
                cart = self._new_cart(cart_id)
            else:
                cart = stored.model_copy(deep=True)

            now = self.clock()
            yield cart, now

            self._check_amounts(cart)
            cart.updated_at = now
            self.carts.save_cart(cart)

        if stored is None:
            logger.info(f"Cart {cart_id} created ({cart.currency.code.value})")

    def _upsert_item(self, cart: Cart, item_input: CartItemInput, now: datetime) -> CartItem:
        quantity = item_input.quantity if item_input.quantity is not None else 1
        existing = cart.find_item(item_input.id)

        if existing is None:
            item = CartItem(
                id=item_input.id,
                name=item_input.name,
                description=item_input.description,
                type=item_input.type or CartItemType.SKU,
                images=item_input.images,
                unit_total=item_input.price,
                quantity=quantity,
                attributes=merge_attributes([], item_input.attributes),
                metadata=copy.deepcopy(item_input.metadata),
                created_at=now,
                updated_at=now,
            )
            cart.items.append(item)
            return item

        provided = item_input.model_fields_set
        for field in ("name", "description", "images"):
            if field in provided:
                setattr(existing, field, getattr(item_input, field))
        if "type" in provided and item_input.type is not None:
            existing.type = item_input.type
        if item_input.attributes is not None:
            existing.attributes = merge_attributes(existing.attributes, item_input.attributes)
        if "metadata" in provided:
            existing.metadata = merge_metadata(existing.metadata, item_input.metadata)

        existing.unit_total = item_input.price
        existing.quantity += quantity
        existing.updated_at = now
        return existing

    @staticmethod
    def _check_amounts(cart: Cart) -> None:
        """Totals and quantities must fit a GraphQL Int"""
        for item in cart.items:
            if item.line_total > MAX_AMOUNT:
                raise ValidationError(f"Line total for item {item.id} is too large")
        if cart.grand_total > MAX_AMOUNT or cart.total_items > MAX_AMOUNT:
            raise ValidationError(f"Cart {cart.id} totals are too large")

    def _require_item(self, cart: Cart, item_id: str) -> CartItem:
        item = cart.find_item(item_id)
        if not item:
            raise NotFoundError(f"Item {item_id} not found in cart {cart.id}")
        return item

    @staticmethod
    def _drop_item(cart: Cart, item_id: str) -> None:
        cart.items = [item for item in cart.items if item.id != item_id]
