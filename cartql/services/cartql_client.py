"""
CartQL API Client

Async HTTP client for the CartQL GraphQL API, for gateways and agents that
consume carts remotely.
"""

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


MONEY_FIELDS = "amount formatted currency { code symbol thousandsSeparator decimalSeparator decimalDigits }"

ITEM_FIELDS = f"""
    id name description type images quantity metadata createdAt updatedAt
    attributes {{ key value }}
    unitTotal {{ {MONEY_FIELDS} }}
    lineTotal {{ {MONEY_FIELDS} }}
"""

CART_FRAGMENT = f"""
fragment CartFields on Cart {{
  id email notes metadata totalItems totalUniqueItems isEmpty abandoned createdAt updatedAt
  currency {{ code symbol thousandsSeparator decimalSeparator decimalDigits }}
  attributes {{ key value }}
  items {{ {ITEM_FIELDS} }}
  subTotal {{ {MONEY_FIELDS} }}
  shippingTotal {{ {MONEY_FIELDS} }}
  taxTotal {{ {MONEY_FIELDS} }}
  grandTotal {{ {MONEY_FIELDS} }}
}}
"""

ADDRESS_FIELDS = "company name line1 line2 city state postalCode country"

ORDER_FRAGMENT = f"""
fragment OrderFields on Order {{
  id cartId email notes metadata status totalItems totalUniqueItems createdAt updatedAt
  shipping {{ {ADDRESS_FIELDS} }}
  billing {{ {ADDRESS_FIELDS} }}
  attributes {{ key value }}
  items {{ {ITEM_FIELDS} }}
  subTotal {{ {MONEY_FIELDS} }}
  shippingTotal {{ {MONEY_FIELDS} }}
  taxTotal {{ {MONEY_FIELDS} }}
  grandTotal {{ {MONEY_FIELDS} }}
}}
"""


class CartQLClientError(Exception):
    """GraphQL errors returned by the CartQL API"""

    def __init__(self, errors: list[dict[str, Any]]):
        self.errors = errors
        messages = "; ".join(e.get("message", "unknown error") for e in errors)
        super().__init__(messages)

    @property
    def codes(self) -> list[Optional[str]]:
        return [(e.get("extensions") or {}).get("code") for e in self.errors]


class CartQLClient:
    """
    Client for the CartQL GraphQL API.

    Usage:
        client = CartQLClient("http://localhost:8000")
        cart = await client.add_item("cart-1", "sku-1", price=1000, quantity=2)
        order = await client.checkout("cart-1", "me@example.com", shipping={...})
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        graphql_path: str = "/graphql",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize CartQL client.

        Args:
            base_url: Base URL of the CartQL service
            graphql_path: Path of the GraphQL endpoint
            timeout: Request timeout in seconds
            transport: Optional httpx transport (e.g. ASGITransport in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.graphql_url = f"{self.base_url}{graphql_path}"
        self._http_client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    async def __aenter__(self) -> "CartQLClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def execute(
        self,
        query: str,
        variables: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Run a GraphQL document and return its data"""
        response = await self._http_client.post(
            self.graphql_url,
            json={"query": query, "variables": variables or {}},
            headers={"Accept": "application/json"},
        )

        if response.status_code >= 400 and "application/json" not in response.headers.get("content-type", ""):
            logger.error(f"Request failed: {response.status_code} - {response.text}")
            response.raise_for_status()

        payload = response.json()
        if payload.get("errors"):
            logger.debug(f"GraphQL errors: {payload['errors']}")
            raise CartQLClientError(payload["errors"])

        return payload["data"]

    async def _mutate_cart(self, mutation: str, input_type: str, data: dict[str, Any]) -> dict:
        query = (
            f"mutation($input: {input_type}!) {{ {mutation}(input: $input) {{ ...CartFields }} }}"
            + CART_FRAGMENT
        )
        result = await self.execute(query, {"input": data})
        return result[mutation]

    # ==================== Queries ====================

    async def get_cart(self, cart_id: str, currency: Optional[dict] = None) -> dict:
        """Get a cart, creating it if it doesn't exist"""
        query = (
            "query($id: ID!, $currency: CurrencyInput) "
            "{ cart(id: $id, currency: $currency) { ...CartFields } }" + CART_FRAGMENT
        )
        result = await self.execute(query, {"id": cart_id, "currency": currency})
        return result["cart"]

    # ==================== Item mutations ====================

    async def add_item(
        self,
        cart_id: str,
        item_id: str,
        price: int,
        quantity: int = 1,
        **fields: Any,
    ) -> dict:
        """Add an item to a cart"""
        data = {"cartId": cart_id, "id": item_id, "price": price, "quantity": quantity, **fields}
        return await self._mutate_cart("addItem", "AddToCartInput", data)

    async def set_items(self, cart_id: str, items: list[dict[str, Any]]) -> dict:
        """Replace all items in a cart"""
        return await self._mutate_cart(
            "setItems", "SetCartItemsInput", {"cartId": cart_id, "items": items}
        )

    async def update_item(self, cart_id: str, item_id: str, **fields: Any) -> dict:
        """Update fields of an existing item"""
        return await self._mutate_cart(
            "updateItem", "UpdateCartItemInput", {"cartId": cart_id, "id": item_id, **fields}
        )

    async def increment_item_quantity(self, cart_id: str, item_id: str, by: int = 1) -> dict:
        return await self._mutate_cart(
            "incrementItemQuantity",
            "UpdateItemQuantityInput",
            {"cartId": cart_id, "id": item_id, "by": by},
        )

    async def decrement_item_quantity(self, cart_id: str, item_id: str, by: int = 1) -> dict:
        return await self._mutate_cart(
            "decrementItemQuantity",
            "UpdateItemQuantityInput",
            {"cartId": cart_id, "id": item_id, "by": by},
        )

    async def remove_item(self, cart_id: str, item_id: str) -> dict:
        """Remove an item from a cart"""
        return await self._mutate_cart(
            "removeItem", "RemoveCartItemInput", {"cartId": cart_id, "id": item_id}
        )

    # ==================== Cart mutations ====================

    async def empty_cart(self, cart_id: str) -> dict:
        return await self._mutate_cart("emptyCart", "EmptyCartInput", {"id": cart_id})

    async def update_cart(self, cart_id: str, **fields: Any) -> dict:
        """Update cart currency, email, notes, attributes or metadata"""
        return await self._mutate_cart("updateCart", "UpdateCartInput", {"id": cart_id, **fields})

    async def delete_cart(self, cart_id: str) -> dict:
        """Delete a cart"""
        query = (
            "mutation($input: DeleteCartInput!) "
            "{ deleteCart(input: $input) { success message } }"
        )
        result = await self.execute(query, {"input": {"id": cart_id}})
        return result["deleteCart"]

    # ==================== Checkout ====================

    async def checkout(
        self,
        cart_id: str,
        email: str,
        shipping: dict[str, Any],
        billing: Optional[dict[str, Any]] = None,
        notes: Optional[str] = None,
        metadata: Optional[Any] = None,
    ) -> dict:
        """Convert a cart into an unpaid order"""
        data: dict[str, Any] = {"cartId": cart_id, "email": email, "shipping": shipping}
        if billing is not None:
            data["billing"] = billing
        if notes is not None:
            data["notes"] = notes
        if metadata is not None:
            data["metadata"] = metadata

        query = (
            "mutation($input: CheckoutInput!) { checkout(input: $input) { ...OrderFields } }"
            + ORDER_FRAGMENT
        )
        result = await self.execute(query, {"input": data})
        return result["checkout"]
