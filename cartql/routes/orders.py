"""Order API routes"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from ..core.errors import CartQLError, ConflictError, NotFoundError, ValidationError
from ..models.checkout import Order
from ..services.cart_service import CartService

router = APIRouter(prefix="/api/orders", tags=["Orders"])

STATUS_CODES = {
    NotFoundError: 404,
    ValidationError: 400,
    ConflictError: 409,
}


def get_cart_service(request: Request) -> CartService:
    return request.app.state.cart_service


def to_http_error(error: CartQLError) -> HTTPException:
    """Translate a domain error into an HTTP error"""
    status_code = STATUS_CODES.get(type(error), 500)
    return HTTPException(status_code=status_code, detail=error.message)


@router.get("", response_model=list[Order])
async def list_orders(
    request: Request,
    cart_id: Optional[str] = Query(None, description="Only orders for this cart"),
    limit: Optional[int] = Query(None, ge=1, le=100, description="Max results"),
    service: CartService = Depends(get_cart_service),
):
    """List recent orders"""
    if limit is None:
        limit = request.app.state.settings.orders_list_limit
    return service.list_orders(cart_id=cart_id, limit=limit)


@router.get("/{order_id}", response_model=Order)
async def get_order(
    order_id: str,
    service: CartService = Depends(get_cart_service),
):
    """Get order details"""
    try:
        return service.get_order(order_id)
    except CartQLError as e:
        raise to_http_error(e) from e


@router.post("/{order_id}/paid", response_model=Order)
async def mark_order_paid(
    order_id: str,
    service: CartService = Depends(get_cart_service),
):
    """
    Record payment for an order.

    Called by the payment provider once the order has been paid. Orders
    can only move from UNPAID to PAID once.
    """
    try:
        return service.mark_order_paid(order_id)
    except CartQLError as e:
        raise to_http_error(e) from e
