"""
Pytest fixtures and configuration for BeerBro Backend tests

This file provides shared fixtures that can be used across all test modules.
Tests never talk to a real Firestore project: the `fake_db` fixture installs
an in-memory client as the shared database client.

Author: BeerBro
Date: 2025-09-14
"""
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from app.core import database
from app.core.auth import TokenUser, require_admin
from app.main import app
from fakes import FakeFirestore


@pytest.fixture
def fake_db(monkeypatch):
    """
    Provides an empty in-memory Firestore installed as the shared client

    Scope: function (fresh store per test)
    """
    db = FakeFirestore()
    monkeypatch.setattr(database, "_client", db)
    return db


@pytest.fixture
def client(fake_db):
    """
    Provides a TestClient for the API backed by fake_db

    Admin routes still require a token; use `admin_client` to skip auth.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_user():
    return TokenUser(id="admin-uid", email="admin@beerbro.test", name="Admin", role="admin")


@pytest.fixture
def admin_client(client, admin_user):
    """
    TestClient with the admin role check overridden

    Automatically removes the override after the test
    """
    app.dependency_overrides[require_admin] = lambda: admin_user
    yield client
    app.dependency_overrides.pop(require_admin, None)


@pytest.fixture
def timestamp():
    return datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_product_data(timestamp):
    """
    Provides a storefront-style product document (image/stockQuantity fields)
    """
    return {
        "name": "Old Monk Rum",
        "description": "Dark vatted rum with vanilla notes",
        "price": 380,
        "originalPrice": 420,
        "category": "rum",
        "image": "https://img.test/old-monk.jpg",
        "stockQuantity": 60,
        "inStock": True,
        "rating": 4.7,
        "reviewCount": 2100,
        "isNew": False,
        "isOnSale": True,
        "alcoholContent": 42.8,
        "volume": 750,
        "brand": "Old Monk",
        "origin": "India",
        "tags": ["rum", "dark-rum"],
        "createdAt": timestamp,
        "updatedAt": timestamp,
    }


@pytest.fixture
def sample_admin_product_data(timestamp):
    """
    Provides an admin-console product document (imageUrl/stock/isActive fields)
    """
    return {
        "name": "Kingfisher Premium Lager",
        "description": "Crisp lager beer",
        "price": 180,
        "category": "beer",
        "imageUrl": "https://img.test/kingfisher.jpg",
        "stock": 12,
        "isActive": True,
        "createdAt": timestamp,
        "updatedAt": timestamp,
    }


@pytest.fixture
def sample_order_data(timestamp):
    """
    Provides an admin-style order document
    """
    return {
        "userId": "user-1",
        "userEmail": "customer@example.com",
        "userName": "John Doe",
        "items": [
            {"productId": "p1", "productName": "Craft IPA Beer", "quantity": 2, "price": 12.99},
            {"productId": "p2", "productName": "Premium Lager", "quantity": 1, "price": 10.99},
        ],
        "total": 36.97,
        "status": "pending",
        "paymentStatus": "pending",
        "shippingAddress": {
            "street": "123 Main St",
            "city": "New York",
            "state": "NY",
            "zipCode": "10001",
            "country": "USA",
        },
        "createdAt": timestamp,
        "updatedAt": timestamp,
    }
