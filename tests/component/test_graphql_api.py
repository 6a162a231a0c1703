"""
Component tests for the GraphQL API

Requests go through the FastAPI app and Strawberry schema into the cart
service and in-memory stores.
"""

import pytest

MONEY = "{ amount formatted currency { code symbol } }"

CART_FIELDS = f"""
    id email notes metadata totalItems totalUniqueItems isEmpty abandoned createdAt updatedAt
    currency {{ code symbol thousandsSeparator decimalSeparator decimalDigits }}
    attributes {{ key value }}
    items {{
        id name description type images quantity metadata createdAt updatedAt
        attributes {{ key value }}
        unitTotal {MONEY}
        lineTotal {MONEY}
    }}
    subTotal {MONEY}
    shippingTotal {MONEY}
    taxTotal {MONEY}
    grandTotal {MONEY}
"""

GET_CART = f"""
query GetCart($id: ID!, $currency: CurrencyInput) {{
  cart(id: $id, currency: $currency) {{ {CART_FIELDS} }}
}}
"""

ADD_ITEM = f"""
mutation AddItem($input: AddToCartInput!) {{
  addItem(input: $input) {{ {CART_FIELDS} }}
}}
"""


def cart_mutation(name: str, input_type: str) -> str:
    return f"""
    mutation($input: {input_type}!) {{
      {name}(input: $input) {{ {CART_FIELDS} }}
    }}
    """


CHECKOUT = """
mutation Checkout($input: CheckoutInput!) {
  checkout(input: $input) {
    id cartId email notes metadata status totalItems totalUniqueItems createdAt updatedAt
    shipping { name line1 line2 city state postalCode country company }
    billing { name line1 city postalCode country }
    attributes { key value }
    items { id name type quantity unitTotal { amount } lineTotal { amount formatted } }
    subTotal { amount formatted }
    shippingTotal { amount }
    taxTotal { amount }
    grandTotal { amount formatted }
  }
}
"""

SHIPPING = {
    "name": "Ada Lovelace",
    "line1": "12 St James's Square",
    "city": "London",
    "postalCode": "SW1Y 4JH",
    "country": "GB",
}


def add_item(graphql, cart_id: str, item_id: str, price: int, **fields) -> dict:
    result = graphql(ADD_ITEM, {"input": {"cartId": cart_id, "id": item_id, "price": price, **fields}})
    assert "errors" not in result, result
    return result["data"]["addItem"]


def error_codes(result: dict) -> list[str]:
    return [error["extensions"]["code"] for error in result["errors"]]


class TestCartQuery:
    def test_unknown_cart_is_created_on_read(self, graphql):
        result = graphql(GET_CART, {"id": "fresh"})

        assert "errors" not in result
        cart = result["data"]["cart"]
        assert cart["id"] == "fresh"
        assert cart["items"] == []
        assert cart["isEmpty"] is True
        assert cart["abandoned"] is False
        assert cart["totalItems"] == 0
        assert cart["currency"] == {
            "code": "USD",
            "symbol": "$",
            "thousandsSeparator": ",",
            "decimalSeparator": ".",
            "decimalDigits": 2,
        }
        assert cart["grandTotal"] == {
            "amount": 0,
            "formatted": "$0.00",
            "currency": {"code": "USD", "symbol": "$"},
        }

    def test_currency_is_used_for_new_cart_only(self, graphql):
        created = graphql(GET_CART, {"id": "c1", "currency": {"code": "GBP"}})
        again = graphql(GET_CART, {"id": "c1", "currency": {"code": "EUR"}})

        assert created["data"]["cart"]["currency"]["symbol"] == "£"
        assert again["data"]["cart"]["currency"]["code"] == "GBP"

    def test_node_returns_cart(self, graphql):
        add_item(graphql, "c1", "sku1", 100)

        result = graphql('{ node(id: "c1") { __typename id ... on Cart { totalItems } } }')

        assert result["data"]["node"] == {"__typename": "Cart", "id": "c1", "totalItems": 1}

    def test_abandoned_after_two_idle_hours(self, graphql, clock):
        add_item(graphql, "c1", "sku1", 100)
        clock.advance(hours=2, seconds=1)

        result = graphql(GET_CART, {"id": "c1"})

        assert result["data"]["cart"]["abandoned"] is True


class TestAddItem:
    def test_add_item_and_increment(self, graphql):
        cart = add_item(graphql, "c1", "sku1", 1000, quantity=2)
        assert cart["subTotal"]["amount"] == 2000

        result = graphql(
            cart_mutation("incrementItemQuantity", "UpdateItemQuantityInput"),
            {"input": {"cartId": "c1", "id": "sku1", "by": 3}},
        )
        cart = result["data"]["incrementItemQuantity"]

        assert cart["items"][0]["quantity"] == 5
        assert cart["subTotal"]["amount"] == 5000
        assert cart["subTotal"]["formatted"] == "$50.00"

    def test_defaults_applied(self, graphql):
        cart = add_item(graphql, "c1", "sku1", 250)
        item = cart["items"][0]

        assert item["type"] == "SKU"
        assert item["quantity"] == 1
        assert item["unitTotal"]["formatted"] == "$2.50"
        assert item["attributes"] == []

    def test_re_adding_merges_item(self, graphql):
        add_item(
            graphql, "c1", "sku1", 1000,
            name="Mug",
            attributes=[{"key": "colour", "value": "red"}],
            metadata={"sku": "MUG-1"},
        )
        cart = add_item(graphql, "c1", "sku1", 1000, quantity=2, metadata={"warehouse": "north"})

        assert cart["totalUniqueItems"] == 1
        assert cart["totalItems"] == 3
        item = cart["items"][0]
        assert item["name"] == "Mug"
        assert item["attributes"] == [{"key": "colour", "value": "red"}]
        assert item["metadata"] == {"sku": "MUG-1", "warehouse": "north"}
        assert item["lineTotal"]["amount"] == 3000

    def test_totals_by_item_type(self, graphql):
        add_item(graphql, "c1", "sku1", 123456)
        add_item(graphql, "c1", "ship", 999, type="SHIPPING")
        cart = add_item(graphql, "c1", "vat", 24691, type="TAX")

        assert cart["subTotal"]["formatted"] == "$1,234.56"
        assert cart["shippingTotal"]["amount"] == 999
        assert cart["taxTotal"]["amount"] == 24691
        assert cart["grandTotal"]["amount"] == 123456 + 999 + 24691
        assert cart["grandTotal"]["formatted"] == "$1,491.46"

    def test_re_adding_without_type_keeps_type(self, graphql):
        add_item(graphql, "c1", "vat", 100, type="TAX")

        cart = add_item(graphql, "c1", "vat", 100)

        assert cart["items"][0]["type"] == "TAX"
        assert cart["items"][0]["quantity"] == 2
        assert cart["taxTotal"]["amount"] == 200
        assert cart["subTotal"]["amount"] == 0

    def test_total_over_int_range_is_rejected(self, graphql):
        result = graphql(
            ADD_ITEM, {"input": {"cartId": "c1", "id": "sku1", "price": 2_000_000_000, "quantity": 2}}
        )

        assert error_codes(result) == ["BAD_USER_INPUT"]
        add_item(graphql, "c1", "sku1", 2_000_000_000)
        result = graphql(
            cart_mutation("incrementItemQuantity", "UpdateItemQuantityInput"),
            {"input": {"cartId": "c1", "id": "sku1", "by": 1}},
        )

        assert error_codes(result) == ["BAD_USER_INPUT"]
        cart = graphql(GET_CART, {"id": "c1"})["data"]["cart"]
        assert cart["items"][0]["quantity"] == 1
        assert cart["subTotal"]["amount"] == 2_000_000_000

    def test_item_currency_updates_cart(self, graphql):
        cart = add_item(graphql, "c1", "sku1", 1500, currency={"code": "JPY"})

        assert cart["currency"]["code"] == "JPY"
        assert cart["subTotal"]["formatted"] == "¥1,500"

    @pytest.mark.parametrize(
        "fields",
        [
            {"price": -1},
            {"price": 100, "quantity": 0},
            {"price": 100, "id": ""},
        ],
    )
    def test_invalid_input_is_rejected(self, graphql, fields):
        payload = {"cartId": "c1", "id": "sku1", **fields}

        result = graphql(ADD_ITEM, {"input": payload})

        assert result["data"] is None
        assert error_codes(result) == ["BAD_USER_INPUT"]
        # Nothing was created
        cart = graphql(GET_CART, {"id": "c1"})["data"]["cart"]
        assert cart["items"] == []


class TestItemMutations:
    def test_set_items_replaces_everything(self, graphql):
        add_item(graphql, "c1", "old", 100)

        result = graphql(
            cart_mutation("setItems", "SetCartItemsInput"),
            {
                "input": {
                    "cartId": "c1",
                    "items": [
                        {"id": "a", "price": 100, "quantity": 2},
                        {"id": "ship", "price": 500, "type": "SHIPPING"},
                    ],
                }
            },
        )
        cart = result["data"]["setItems"]

        assert [item["id"] for item in cart["items"]] == ["a", "ship"]
        assert cart["subTotal"]["amount"] == 200
        assert cart["shippingTotal"]["amount"] == 500

    def test_update_item(self, graphql):
        add_item(graphql, "c1", "sku1", 100, name="Mug", description="Ceramic")

        result = graphql(
            cart_mutation("updateItem", "UpdateCartItemInput"),
            {"input": {"cartId": "c1", "id": "sku1", "name": "Big mug", "price": 300}},
        )
        item = result["data"]["updateItem"]["items"][0]

        assert item["name"] == "Big mug"
        assert item["description"] == "Ceramic"
        assert item["unitTotal"]["amount"] == 300

    def test_update_missing_item_errors(self, graphql):
        add_item(graphql, "c1", "sku1", 100)

        result = graphql(
            cart_mutation("updateItem", "UpdateCartItemInput"),
            {"input": {"cartId": "c1", "id": "nope", "name": "x"}},
        )

        assert error_codes(result) == ["NOT_FOUND"]

    def test_decrement_to_zero_removes_item(self, graphql):
        add_item(graphql, "c1", "sku1", 100, quantity=2)
        add_item(graphql, "c1", "sku2", 100)

        result = graphql(
            cart_mutation("decrementItemQuantity", "UpdateItemQuantityInput"),
            {"input": {"cartId": "c1", "id": "sku1", "by": 5}},
        )
        cart = result["data"]["decrementItemQuantity"]

        assert [item["id"] for item in cart["items"]] == ["sku2"]

    def test_non_positive_delta_is_rejected(self, graphql):
        add_item(graphql, "c1", "sku1", 100)

        result = graphql(
            cart_mutation("incrementItemQuantity", "UpdateItemQuantityInput"),
            {"input": {"cartId": "c1", "id": "sku1", "by": 0}},
        )

        assert error_codes(result) == ["BAD_USER_INPUT"]

    def test_remove_missing_item_leaves_cart_unchanged(self, graphql):
        before = add_item(graphql, "c1", "sku1", 100)

        result = graphql(
            cart_mutation("removeItem", "RemoveCartItemInput"),
            {"input": {"cartId": "c1", "id": "nope"}},
        )

        assert result["data"] is None
        assert error_codes(result) == ["NOT_FOUND"]
        after = graphql(GET_CART, {"id": "c1"})["data"]["cart"]
        assert after["items"] == before["items"]
        assert after["updatedAt"] == before["updatedAt"]

    def test_remove_item(self, graphql):
        add_item(graphql, "c1", "sku1", 100)

        result = graphql(
            cart_mutation("removeItem", "RemoveCartItemInput"),
            {"input": {"cartId": "c1", "id": "sku1"}},
        )

        assert result["data"]["removeItem"]["isEmpty"] is True


class TestCartMutations:
    def test_empty_cart(self, graphql):
        add_item(graphql, "c1", "sku1", 100)

        result = graphql(cart_mutation("emptyCart", "EmptyCartInput"), {"input": {"id": "c1"}})

        cart = result["data"]["emptyCart"]
        assert cart["items"] == []
        assert cart["grandTotal"]["amount"] == 0

    def test_empty_missing_cart_errors(self, graphql):
        result = graphql(cart_mutation("emptyCart", "EmptyCartInput"), {"input": {"id": "nope"}})

        assert error_codes(result) == ["NOT_FOUND"]

    def test_update_cart(self, graphql):
        add_item(graphql, "c1", "sku1", 123456, quantity=1)

        result = graphql(
            cart_mutation("updateCart", "UpdateCartInput"),
            {
                "input": {
                    "id": "c1",
                    "email": "ada@example.com",
                    "notes": "gift wrap",
                    "currency": {"code": "EUR"},
                    "attributes": [{"key": "channel", "value": "web"}],
                    "metadata": {"campaign": "spring"},
                }
            },
        )
        cart = result["data"]["updateCart"]

        assert cart["email"] == "ada@example.com"
        assert cart["notes"] == "gift wrap"
        assert cart["attributes"] == [{"key": "channel", "value": "web"}]
        assert cart["metadata"] == {"campaign": "spring"}
        assert cart["totalItems"] == 1
        assert cart["subTotal"]["formatted"] == "€1.234,56"

    def test_delete_cart(self, graphql):
        graphql(GET_CART, {"id": "c1"})
        delete = "mutation($input: DeleteCartInput!) { deleteCart(input: $input) { success message } }"

        first = graphql(delete, {"input": {"id": "c1"}})
        second = graphql(delete, {"input": {"id": "c1"}})

        assert first["data"]["deleteCart"]["success"] is True
        assert "c1" in first["data"]["deleteCart"]["message"]
        assert error_codes(second) == ["NOT_FOUND"]


class TestCheckout:
    def test_checkout_creates_unpaid_order(self, graphql):
        add_item(graphql, "c1", "sku1", 1000, quantity=2, name="Mug")
        add_item(graphql, "c1", "ship", 500, type="SHIPPING")

        result = graphql(
            CHECKOUT,
            {"input": {"cartId": "c1", "email": "ada@example.com", "shipping": SHIPPING, "notes": "thanks"}},
        )

        assert "errors" not in result, result
        order = result["data"]["checkout"]
        assert order["status"] == "UNPAID"
        assert order["cartId"] == "c1"
        assert order["notes"] == "thanks"
        assert order["billing"]["postalCode"] == "SW1Y 4JH"
        assert order["shipping"]["line2"] is None
        assert order["subTotal"] == {"amount": 2000, "formatted": "$20.00"}
        assert order["shippingTotal"]["amount"] == 500
        assert order["grandTotal"] == {"amount": 2500, "formatted": "$25.00"}
        assert order["totalItems"] == 3
        assert order["totalUniqueItems"] == 2
        assert order["items"][0] == {
            "id": "sku1",
            "name": "Mug",
            "type": "SKU",
            "quantity": 2,
            "unitTotal": {"amount": 1000},
            "lineTotal": {"amount": 2000, "formatted": "$20.00"},
        }

    def test_checkout_keeps_cart_available(self, graphql):
        add_item(graphql, "c1", "sku1", 1000)

        graphql(CHECKOUT, {"input": {"cartId": "c1", "email": "ada@example.com", "shipping": SHIPPING}})
        cart = graphql(GET_CART, {"id": "c1"})["data"]["cart"]

        assert cart["totalItems"] == 1

    def test_checkout_empty_cart_fails(self, graphql):
        graphql(GET_CART, {"id": "c1"})

        result = graphql(
            CHECKOUT, {"input": {"cartId": "c1", "email": "ada@example.com", "shipping": SHIPPING}}
        )

        assert result["data"]["checkout"] is None
        assert error_codes(result) == ["BAD_USER_INPUT"]

    def test_checkout_blank_address_field_fails(self, graphql):
        add_item(graphql, "c1", "sku1", 1000)

        result = graphql(
            CHECKOUT,
            {"input": {"cartId": "c1", "email": "ada@example.com", "shipping": {**SHIPPING, "line1": ""}}},
        )

        assert error_codes(result) == ["BAD_USER_INPUT"]

    def test_checkout_whitespace_address_fields_fail(self, graphql, service):
        add_item(graphql, "c1", "sku1", 1000)
        blank = {**SHIPPING, "name": "   ", "line1": " "}

        result = graphql(
            CHECKOUT, {"input": {"cartId": "c1", "email": "ada@example.com", "shipping": blank}}
        )

        assert error_codes(result) == ["BAD_USER_INPUT"]
        assert service.list_orders() == []

    def test_checkout_whitespace_email_fails(self, graphql):
        add_item(graphql, "c1", "sku1", 1000)

        result = graphql(CHECKOUT, {"input": {"cartId": "c1", "email": "  ", "shipping": SHIPPING}})

        assert error_codes(result) == ["BAD_USER_INPUT"]

    def test_checkout_missing_cart_fails(self, graphql):
        result = graphql(
            CHECKOUT, {"input": {"cartId": "nope", "email": "ada@example.com", "shipping": SHIPPING}}
        )

        assert error_codes(result) == ["NOT_FOUND"]
