"""Shared test fixtures."""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from cartql.core.config import Settings
from cartql.database import CartDatabase, OrderDatabase
from cartql.main import create_app
from cartql.models import AddToCartRequest, Address, CheckoutRequest
from cartql.services.cart_service import CartService


class FakeClock:
    """Controllable clock for CartService"""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def service(clock: FakeClock) -> CartService:
    return CartService(carts=CartDatabase(), orders=OrderDatabase(), clock=clock)


@pytest.fixture
def app(service: CartService):
    return create_app(settings=Settings(), cart_service=service)


@pytest.fixture
def test_client(app) -> TestClient:
    with TestClient(app) as client:
        yield client


@pytest.fixture
def graphql(test_client: TestClient):
    """Run a GraphQL document against the app and return the JSON body"""

    def execute(query: str, variables: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        response = test_client.post("/graphql", json={"query": query, "variables": variables or {}})
        assert response.status_code == 200, response.text
        return response.json()

    return execute


@pytest.fixture
def shipping_address() -> Address:
    return Address(
        name="Ada Lovelace",
        line1="12 St James's Square",
        city="London",
        postal_code="SW1Y 4JH",
        country="GB",
    )


def add(service: CartService, cart_id: str, item_id: str, price: int, quantity: int = 1, **fields: Any):
    return service.add_item(
        AddToCartRequest(cart_id=cart_id, id=item_id, price=price, quantity=quantity, **fields)
    )


def checkout_request(cart_id: str, address: Address, **fields: Any) -> CheckoutRequest:
    return CheckoutRequest(cart_id=cart_id, email="ada@example.com", shipping=address, **fields)
