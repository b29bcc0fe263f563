"""Tests for the FastAPI API."""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from shopverse.core.errors import StoreError
from shopverse.core.security import create_access_token
from shopverse.database import get_store
from shopverse.main import app
from shopverse.repositories.record_store import ORDERS, MemoryStore


class FailingWriteStore(MemoryStore):
    """Reads work; every write fails the way a full disk would."""

    def save(self, name, value):
        raise StoreError(name)


class BrokenStore(MemoryStore):
    """Every read blows up with an unexpected error."""

    def load(self, name):
        raise RuntimeError("cannot open /srv/shopverse/data/products.json")


@pytest.fixture
def client_for():
    """Build a client backed by a given store; server errors become responses."""

    def build(store):
        app.dependency_overrides[get_store] = lambda: store
        return TestClient(app, raise_server_exceptions=False)

    yield build
    app.dependency_overrides.clear()


class TestHealthCheck:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestProducts:
    def test_list_all(self, client):
        response = client.get("/api/products")
        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == ["p1", "p2", "p3"]

    def test_filters(self, client):
        response = client.get("/api/products", params={"category": "electronics", "search": "cable"})
        assert [p["id"] for p in response.json()] == ["p3"]

    def test_search_without_match(self, client):
        response = client.get("/api/products", params={"search": "zzz"})
        assert response.status_code == 200
        assert response.json() == []

    def test_get_one(self, client):
        response = client.get("/api/products/p2")
        assert response.status_code == 200
        assert response.json()["name"] == "Coffee Mug"

    def test_get_missing(self, client):
        response = client.get("/api/products/nope")
        assert response.status_code == 404
        assert response.json() == {"error": "Product not found"}


class TestCart:
    def test_requires_user(self, client):
        response = client.get("/api/cart")
        assert response.status_code == 401
        assert response.json() == {"error": "Authentication required"}

    def test_rejects_admin_token(self, client, admin_headers):
        response = client.get("/api/cart", headers=admin_headers)
        assert response.status_code == 401

    def test_rejects_bad_token(self, client):
        response = client.get("/api/cart", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid or expired token"}

    def test_rejects_expired_token(self, client):
        token = create_access_token("user-1", "user", expires_delta=timedelta(minutes=-1))
        response = client.get("/api/cart", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_add_and_get(self, client, user_headers):
        response = client.post(
            "/api/cart/add", json={"product_id": "p1", "quantity": 2}, headers=user_headers
        )
        assert response.status_code == 200
        assert response.json() == {"message": "Item added to cart"}

        client.post("/api/cart/add", json={"product_id": "p1", "quantity": "1"}, headers=user_headers)

        cart = client.get("/api/cart", headers=user_headers).json()
        assert len(cart) == 1
        assert cart[0]["product_id"] == "p1"
        assert cart[0]["quantity"] == 3
        assert cart[0]["product"]["name"] == "Wireless Mouse"

    def test_add_unknown_product(self, client, user_headers):
        response = client.post(
            "/api/cart/add", json={"product_id": "nope", "quantity": 1}, headers=user_headers
        )
        assert response.status_code == 404
        assert response.json() == {"error": "Product not found"}

    def test_add_invalid_quantity(self, client, user_headers):
        response = client.post(
            "/api/cart/add", json={"product_id": "p1", "quantity": 0}, headers=user_headers
        )
        assert response.status_code == 400
        assert "quantity" in response.json()["error"]

    def test_add_missing_fields(self, client, user_headers):
        response = client.post("/api/cart/add", json={}, headers=user_headers)
        assert response.status_code == 400
        assert "error" in response.json()

    def test_update_quantity(self, client, user_headers):
        client.post("/api/cart/add", json={"product_id": "p1", "quantity": 2}, headers=user_headers)

        response = client.put(
            "/api/cart/update", json={"product_id": "p1", "quantity": 5}, headers=user_headers
        )
        assert response.status_code == 200
        assert client.get("/api/cart", headers=user_headers).json()[0]["quantity"] == 5

    def test_update_to_zero_removes(self, client, user_headers):
        client.post("/api/cart/add", json={"product_id": "p1", "quantity": 2}, headers=user_headers)

        response = client.put(
            "/api/cart/update", json={"product_id": "p1", "quantity": 0}, headers=user_headers
        )
        assert response.status_code == 200
        assert client.get("/api/cart", headers=user_headers).json() == []

    def test_update_without_cart(self, client, user_headers):
        response = client.put(
            "/api/cart/update", json={"product_id": "p1", "quantity": 2}, headers=user_headers
        )
        assert response.status_code == 404
        assert response.json() == {"error": "Cart not found"}

    def test_remove(self, client, user_headers):
        client.post("/api/cart/add", json={"product_id": "p1", "quantity": 2}, headers=user_headers)

        response = client.delete("/api/cart/remove/p1", headers=user_headers)
        assert response.status_code == 200
        assert client.get("/api/cart", headers=user_headers).json() == []

    def test_remove_without_cart_is_404(self, client, user_headers):
        response = client.delete("/api/cart/remove/p1", headers=user_headers)
        assert response.status_code == 404

    def test_remove_item_never_added_succeeds(self, client, user_headers):
        client.post("/api/cart/add", json={"product_id": "p1", "quantity": 1}, headers=user_headers)

        response = client.delete("/api/cart/remove/p2", headers=user_headers)
        assert response.status_code == 200
        assert len(client.get("/api/cart", headers=user_headers).json()) == 1


class TestOrders:
    SHIPPING = {"name": "Ada", "address": "Street 1", "phone": "555-0100"}

    def test_checkout(self, client, user_headers):
        client.post("/api/cart/add", json={"product_id": "p1", "quantity": 2}, headers=user_headers)
        client.post("/api/cart/add", json={"product_id": "p2", "quantity": 1}, headers=user_headers)

        response = client.post("/api/orders", json=self.SHIPPING, headers=user_headers)

        assert response.status_code == 200
        order = response.json()
        assert order["subtotal"] == 25.0
        assert order["tax"] == 2.5
        assert order["shipping"] == 10.0
        assert order["total"] == 37.5
        assert order["status"] == "pending"
        assert order["shipping_info"]["name"] == "Ada"
        assert client.get("/api/cart", headers=user_headers).json() == []

    def test_checkout_empty_cart(self, client, user_headers):
        response = client.post("/api/orders", json=self.SHIPPING, headers=user_headers)
        assert response.status_code == 400
        assert response.json() == {"error": "Cart is empty"}

    def test_checkout_missing_shipping_field(self, client, user_headers):
        client.post("/api/cart/add", json={"product_id": "p1", "quantity": 1}, headers=user_headers)

        response = client.post(
            "/api/orders", json={"name": "Ada", "address": "Street 1"}, headers=user_headers
        )
        assert response.status_code == 400
        assert response.json() == {"error": "All shipping fields are required"}

    def test_checkout_requires_user(self, client):
        response = client.post("/api/orders", json=self.SHIPPING)
        assert response.status_code == 401

    def test_list_own_orders_only(self, client, store, user_headers, other_user_headers):
        client.post("/api/cart/add", json={"product_id": "p1", "quantity": 1}, headers=user_headers)
        mine = client.post("/api/orders", json=self.SHIPPING, headers=user_headers).json()
        client.post("/api/cart/add", json={"product_id": "p2", "quantity": 1}, headers=other_user_headers)
        client.post("/api/orders", json=self.SHIPPING, headers=other_user_headers)

        response = client.get("/api/orders", headers=user_headers)

        assert response.status_code == 200
        assert [o["id"] for o in response.json()] == [mine["id"]]
        assert len(store.load(ORDERS)) == 2


class TestAdmin:
    PRODUCT = {
        "name": "Desk Lamp",
        "description": "LED lamp",
        "price": "19.90",
        "image": "https://example.com/lamp.png",
        "category": "home",
        "stock": "4",
    }

    def test_requires_admin(self, client, user_headers):
        assert client.get("/api/admin/stats").status_code == 401
        response = client.get("/api/admin/stats", headers=user_headers)
        assert response.status_code == 401
        assert response.json() == {"error": "Admin authentication required"}

    def test_stats(self, client, admin_headers):
        response = client.get("/api/admin/stats", headers=admin_headers)
        assert response.status_code == 200
        assert response.json() == {"users": 0, "products": 3, "orders": 0}

    def test_create_product(self, client, admin_headers):
        response = client.post("/api/admin/products", json=self.PRODUCT, headers=admin_headers)

        assert response.status_code == 201
        product = response.json()
        assert product["price"] == 19.9
        assert product["stock"] == 4
        assert client.get(f"/api/products/{product['id']}").status_code == 200

    def test_create_product_missing_field(self, client, admin_headers):
        body = dict(self.PRODUCT)
        del body["image"]

        response = client.post("/api/admin/products", json=body, headers=admin_headers)
        assert response.status_code == 400
        assert "image" in response.json()["error"]

    def test_update_product_partial(self, client, admin_headers):
        response = client.put("/api/admin/products/p1", json={"stock": 0}, headers=admin_headers)

        assert response.status_code == 200
        product = response.json()
        assert product["stock"] == 0
        assert product["name"] == "Wireless Mouse"

    def test_update_missing_product(self, client, admin_headers):
        response = client.put("/api/admin/products/nope", json={"stock": 1}, headers=admin_headers)
        assert response.status_code == 404

    def test_delete_product(self, client, admin_headers):
        response = client.delete("/api/admin/products/p2", headers=admin_headers)

        assert response.status_code == 200
        assert client.get("/api/products/p2").status_code == 404
        assert client.delete("/api/admin/products/p2", headers=admin_headers).status_code == 404

    def test_order_status_flow(self, client, admin_headers, user_headers):
        client.post("/api/cart/add", json={"product_id": "p1", "quantity": 1}, headers=user_headers)
        order = client.post(
            "/api/orders",
            json={"name": "Ada", "address": "Street 1", "phone": "1"},
            headers=user_headers,
        ).json()

        response = client.put(
            f"/api/admin/orders/{order['id']}/status", json={"status": "confirmed"}, headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json()["status"] == "confirmed"

        response = client.put(
            f"/api/admin/orders/{order['id']}/status", json={"status": "pending"}, headers=admin_headers
        )
        assert response.status_code == 400

        orders = client.get("/api/admin/orders", headers=admin_headers).json()
        assert [o["status"] for o in orders] == ["confirmed"]

    def test_unknown_status_rejected(self, client, admin_headers):
        response = client.put(
            "/api/admin/orders/whatever/status", json={"status": "teleported"}, headers=admin_headers
        )
        assert response.status_code == 400

    def test_status_missing_order(self, client, admin_headers):
        response = client.put(
            "/api/admin/orders/nope/status", json={"status": "confirmed"}, headers=admin_headers
        )
        assert response.status_code == 404
        assert response.json() == {"error": "Order not found"}

    def test_create_product_rejects_infinite_price(self, client, admin_headers):
        body = dict(self.PRODUCT, price="inf")

        response = client.post("/api/admin/products", json=body, headers=admin_headers)
        assert response.status_code == 400
        assert "price" in response.json()["error"]
        assert len(client.get("/api/products").json()) == 3

    def test_create_product_rejects_fractional_stock(self, client, admin_headers):
        body = dict(self.PRODUCT, stock="2.5")

        response = client.post("/api/admin/products", json=body, headers=admin_headers)
        assert response.status_code == 400
        assert "stock" in response.json()["error"]

    def test_update_product_rejects_nan_price(self, client, admin_headers):
        response = client.put("/api/admin/products/p1", json={"price": "nan"}, headers=admin_headers)

        assert response.status_code == 400
        assert client.get("/api/products/p1").json()["price"] == 10.0


class TestServerErrors:
    def test_store_write_failure(self, client_for):
        client = client_for(FailingWriteStore())

        response = client.post(
            "/api/register",
            json={"name": "Ada", "email": "ada@example.com", "password": "secret"},
        )
        assert response.status_code == 500
        assert response.json() == {"error": "Server error"}

    def test_unexpected_exception(self, client_for):
        client = client_for(BrokenStore())

        response = client.get("/api/products")
        assert response.status_code == 500
        assert response.json() == {"error": "Server error"}
        assert "/srv" not in response.text
