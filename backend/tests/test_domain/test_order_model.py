"""
Unit tests for order models
"""
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from app.domain.order import (
    CheckoutRequest,
    Order,
    OrderCreate,
    OrderItem,
    OrderStatusUpdate,
)

NOW = datetime(2025, 3, 1, tzinfo=timezone.utc)


class TestOrderItem:
    """Stored items come in several shapes"""

    def test_product_name_fallbacks(self):
        assert OrderItem.from_document({"productName": "A"}).product_name == "A"
        assert OrderItem.from_document({"name": "B"}).product_name == "B"
        assert OrderItem.from_document({"title": "C"}).product_name == "C"
        assert OrderItem.from_document({"product": {"name": "D"}}).product_name == "D"
        assert OrderItem.from_document({}).product_name == ""

    def test_quantity_and_price_fallbacks(self):
        item = OrderItem.from_document({"qty": 3, "unitPrice": 2.5})

        assert item.quantity == 3
        assert item.price == 2.5
        assert item.line_total == 7.5

    def test_nested_cart_item(self):
        item = OrderItem.from_document({"product": {"id": "p9", "name": "Rum", "price": 380}, "quantity": 2})

        assert item.product_id == "p9"
        assert item.price == 380
        assert item.quantity == 2

    def test_zero_price_is_kept(self):
        assert OrderItem.from_document({"price": 0, "unitPrice": 9}).price == 0


class TestOrder:
    def test_to_dict_adds_line_items(self):
        order = Order(
            id="o1",
            items=[{"name": "Lager", "qty": 2, "unitPrice": 10}],
            total=20,
            created_at=NOW,
            updated_at=NOW,
        )

        data = order.to_dict()

        assert data["items"] == [{"name": "Lager", "qty": 2, "unitPrice": 10}]
        assert data["lineItems"] == [
            {"productId": "", "productName": "Lager", "quantity": 2, "price": 10}
        ]


class TestOrderCreate:
    def valid(self, **overrides):
        data = {
            "userId": "u1",
            "userEmail": "customer@example.com",
            "items": [{"productId": "p1", "productName": "Lager", "quantity": 1, "price": 10}],
            "total": 10,
            "shippingAddress": {
                "street": "1 Main", "city": "NYC", "state": "NY", "zipCode": "10001", "country": "USA",
            },
        }
        data.update(overrides)
        return data

    def test_defaults_to_pending(self):
        document = OrderCreate(**self.valid()).to_document()

        assert document["status"] == "pending"
        assert document["paymentStatus"] == "pending"
        assert document["shippingAddress"]["zipCode"] == "10001"
        assert document["items"][0]["productName"] == "Lager"

    @pytest.mark.parametrize("overrides", [
        {"userEmail": "not-an-email"},
        {"total": -1},
        {"status": "lost"},
        {"paymentStatus": "refunded"},
        {"items": [{"productId": "p1", "productName": "Lager", "quantity": 0, "price": 10}]},
        {"shippingAddress": {"street": "", "city": "NYC", "state": "NY", "zipCode": "1", "country": "US"}},
    ])
    def test_invalid_orders_rejected(self, overrides):
        with pytest.raises(ValidationError):
            OrderCreate(**self.valid(**overrides))


class TestCheckoutRequest:
    def test_extra_fields_are_kept(self):
        checkout = CheckoutRequest(**{
            "userId": "u1",
            "items": [{"productId": "p1", "quantity": 1}],
            "shippingAddress": {"city": "Pune"},
            "total": 10,
            "couponCode": "WELCOME",
        })

        assert checkout.to_document()["couponCode"] == "WELCOME"

    def test_empty_cart_rejected(self):
        with pytest.raises(ValidationError):
            CheckoutRequest(userId="u1", items=[], shippingAddress={}, total=0)


def test_status_update_drops_missing_tracking():
    assert OrderStatusUpdate(status="shipped").to_document() == {"status": "shipped"}
