"""Pytest fixtures for shopverse tests."""

import pytest
from fastapi.testclient import TestClient

from shopverse.core.security import create_access_token
from shopverse.repositories.record_store import MemoryStore, PRODUCTS

SAMPLE_PRODUCTS = [
    {
        "id": "p1",
        "name": "Wireless Mouse",
        "description": "Ergonomic mouse with USB receiver",
        "price": 10.0,
        "image": "https://example.com/mouse.png",
        "category": "electronics",
        "stock": 50,
    },
    {
        "id": "p2",
        "name": "Coffee Mug",
        "description": "Ceramic mug, dishwasher safe",
        "price": 5.0,
        "image": "https://example.com/mug.png",
        "category": "kitchen",
        "stock": 20,
    },
    {
        "id": "p3",
        "name": "USB-C Cable",
        "description": "Braided charging cable for your phone",
        "price": 7.5,
        "image": "https://example.com/cable.png",
        "category": "electronics",
        "stock": 0,
    },
]


@pytest.fixture
def store():
    """In-memory store seeded with three products."""
    return MemoryStore({PRODUCTS: SAMPLE_PRODUCTS})


@pytest.fixture
def client(store):
    """API client whose record store is the `store` fixture."""
    from shopverse.database import get_store
    from shopverse.main import app

    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user_headers():
    token = create_access_token("user-1", "user")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_user_headers():
    token = create_access_token("user-2", "user")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers():
    token = create_access_token("admin1", "admin")
    return {"Authorization": f"Bearer {token}"}
