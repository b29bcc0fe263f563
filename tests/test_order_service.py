"""Tests for OrderService."""

import pytest

from shopverse.core.errors import EmptyCartError, ValidationError
from shopverse.repositories.cart_repo import CartRepository
from shopverse.repositories.order_repo import OrderRepository
from shopverse.repositories.product_repo import ProductRepository
from shopverse.repositories.record_store import CARTS, ORDERS, PRODUCTS
from shopverse.schemas.order import OrderCreate
from shopverse.services.cart_service import CartService
from shopverse.services.order_service import OrderService, compute_totals

SHIPPING = OrderCreate(name="Ada Lovelace", address="12 Analytical St", phone="555-0100")


@pytest.fixture
def carts():
    return CartService(CartRepository(), ProductRepository())


@pytest.fixture
def orders():
    return OrderService(OrderRepository(), CartRepository(), ProductRepository())


class TestComputeTotals:
    def test_fixed_rates(self):
        assert compute_totals(25.0) == {
            "subtotal": 25.0,
            "tax": 2.5,
            "shipping": 10.0,
            "total": 37.5,
        }

    def test_zero_subtotal_still_pays_shipping(self):
        assert compute_totals(0.0)["total"] == 10.0


class TestPlaceOrder:
    def test_reference_scenario(self, carts, orders, store):
        carts.add(store, "u1", "p1", 2)  # 2 x 10.00
        carts.add(store, "u1", "p2", 1)  # 1 x 5.00

        order = orders.place_order(store, "u1", SHIPPING)

        assert order.subtotal == 25.00
        assert order.tax == 2.50
        assert order.shipping == 10.00
        assert order.total == 37.50
        assert order.status == "pending"
        assert order.user_id == "u1"
        assert [(i.product_id, i.quantity, i.price, i.subtotal) for i in order.items] == [
            ("p1", 2, 10.0, 20.0),
            ("p2", 1, 5.0, 5.0),
        ]
        assert order.items[0].product_name == "Wireless Mouse"

    def test_total_formula_holds(self, carts, orders, store):
        carts.add(store, "u1", "p3", 3)  # 3 x 7.50
        carts.add(store, "u1", "p2", 7)

        order = orders.place_order(store, "u1", SHIPPING)

        assert order.total == pytest.approx(order.subtotal + order.subtotal * 0.10 + 10.00, abs=0.01)

    def test_order_is_persisted_and_cart_emptied(self, carts, orders, store):
        carts.add(store, "u1", "p1", 1)
        order = orders.place_order(store, "u1", SHIPPING)

        stored = store.load(ORDERS)
        assert [o["id"] for o in stored] == [order.id]
        assert carts.get_cart(store, "u1") == []
        assert store.load(CARTS) == {"u1": []}

    def test_shipping_info_is_copied(self, carts, orders, store):
        carts.add(store, "u1", "p1", 1)
        payload = OrderCreate(
            name="Ada", address="Street 1", phone="123", email="ada@example.com"
        )

        order = orders.place_order(store, "u1", payload)

        assert order.shipping_info.name == "Ada"
        assert order.shipping_info.email == "ada@example.com"

    @pytest.mark.parametrize("field", ["name", "address", "phone"])
    def test_blank_shipping_field_raises(self, carts, orders, store, field):
        carts.add(store, "u1", "p1", 1)
        payload = SHIPPING.model_copy(update={field: ""})

        with pytest.raises(ValidationError):
            orders.place_order(store, "u1", payload)

        # Nothing was consumed
        assert store.load(ORDERS) == []
        assert len(carts.get_cart(store, "u1")) == 1

    def test_no_cart_raises_empty_cart(self, orders, store):
        with pytest.raises(EmptyCartError):
            orders.place_order(store, "u1", SHIPPING)

    def test_emptied_cart_raises_empty_cart(self, carts, orders, store):
        carts.add(store, "u1", "p1", 1)
        orders.place_order(store, "u1", SHIPPING)

        with pytest.raises(EmptyCartError):
            orders.place_order(store, "u1", SHIPPING)

    def test_missing_product_becomes_unknown(self, carts, orders, store):
        carts.add(store, "u1", "p1", 2)
        carts.add(store, "u1", "p2", 1)
        store.save(PRODUCTS, [p for p in store.load(PRODUCTS) if p["id"] != "p1"])

        order = orders.place_order(store, "u1", SHIPPING)

        unknown = order.items[0]
        assert unknown.product_name == "Unknown"
        assert unknown.price == 0
        assert unknown.subtotal == 0
        assert order.subtotal == 5.0

    def test_order_snapshot_ignores_later_product_changes(self, carts, orders, store):
        carts.add(store, "u1", "p1", 1)
        orders.place_order(store, "u1", SHIPPING)

        products = store.load(PRODUCTS)
        products[0]["name"] = "Renamed Mouse"
        products[0]["price"] = 99.0
        store.save(PRODUCTS, products)

        item = orders.list_orders(store, "u1")[0].items[0]
        assert item.product_name == "Wireless Mouse"
        assert item.price == 10.0


class TestListOrders:
    def test_only_own_orders_in_insertion_order(self, carts, orders, store):
        carts.add(store, "u1", "p1", 1)
        first = orders.place_order(store, "u1", SHIPPING)
        carts.add(store, "u2", "p2", 1)
        orders.place_order(store, "u2", SHIPPING)
        carts.add(store, "u1", "p2", 2)
        second = orders.place_order(store, "u1", SHIPPING)

        assert [o.id for o in orders.list_orders(store, "u1")] == [first.id, second.id]

    def test_no_orders(self, orders, store):
        assert orders.list_orders(store, "u1") == []
