"""
Unit tests for ProductRepository

These tests validate repository logic against an in-memory Firestore.

Author: BeerBro
Date: 2025-09-14
"""
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock

from app.domain.product import Product
from app.repositories.base import ASCENDING
from app.repositories.product_repository import ProductRepository


def stamp(day):
    return datetime(2025, 3, day, tzinfo=timezone.utc)


class TestProductRepository:
    """Test ProductRepository methods"""

    def test_find_by_id_returns_product(self, fake_db, sample_product_data):
        """Test find_by_id returns a normalized Product domain model"""
        # Arrange
        fake_db.put("products", "old-monk", sample_product_data)

        # Act
        repo = ProductRepository()
        product = repo.find_by_id("old-monk")

        # Assert
        assert isinstance(product, Product)
        assert product.id == "old-monk"
        assert product.name == "Old Monk Rum"
        assert product.image == "https://img.test/old-monk.jpg"
        assert product.stock_quantity == 60
        assert product.in_stock is True
        assert product.rating == 4.7

    def test_find_by_id_returns_none_when_not_found(self, fake_db):
        """Test find_by_id returns None when product doesn't exist"""
        repo = ProductRepository()

        assert repo.find_by_id("missing") is None

    def test_admin_fields_are_normalized(self, fake_db, sample_admin_product_data):
        """imageUrl/stock from the admin console map to image/stockQuantity"""
        fake_db.put("products", "kf", sample_admin_product_data)

        product = ProductRepository().find_by_id("kf")
        data = product.to_dict()

        assert data["image"] == "https://img.test/kingfisher.jpg"
        assert data["imageUrl"] == "https://img.test/kingfisher.jpg"
        assert data["stockQuantity"] == 12
        assert data["inStock"] is True
        assert data["rating"] == 4.0
        assert data["reviewCount"] == 0
        assert data["isActive"] is True

    def test_stock_takes_precedence_over_stock_quantity(self, fake_db, timestamp):
        fake_db.put("products", "p1", {"name": "A", "stock": 3, "stockQuantity": 9, "createdAt": timestamp})

        assert ProductRepository().find_by_id("p1").stock_quantity == 3

    def test_in_stock_rules(self, fake_db, timestamp):
        """inStock is true for status active, an inStock flag, or stock > 0"""
        fake_db.put("products", "active", {"name": "A", "status": "active", "createdAt": timestamp})
        fake_db.put("products", "flag", {"name": "B", "inStock": True, "createdAt": timestamp})
        fake_db.put("products", "stock", {"name": "C", "stock": 1, "createdAt": timestamp})
        fake_db.put("products", "none", {"name": "D", "stock": 0, "stockQuantity": 5, "createdAt": timestamp})

        repo = ProductRepository()

        assert repo.find_by_id("active").in_stock is True
        assert repo.find_by_id("flag").in_stock is True
        assert repo.find_by_id("stock").in_stock is True
        # stockQuantity alone does not mark a product in stock
        assert repo.find_by_id("none").in_stock is False
        assert repo.find_by_id("none").stock_quantity == 5

    def test_missing_fields_get_defaults(self, fake_db):
        fake_db.put("products", "bare", {"name": None, "tags": None})

        product = ProductRepository().find_by_id("bare")

        assert product.name == ""
        assert product.image == ""
        assert product.tags == []
        assert product.created_at is not None

    def test_string_tags_become_single_tag(self, fake_db):
        fake_db.put("products", "legacy", {"name": "Old Monk", "tags": "dark-rum"})
        repo = ProductRepository()

        product = repo.find_by_id("legacy")

        assert product.tags == ["dark-rum"]
        assert [p.id for p in repo.search("dark")] == ["legacy"]

    def test_find_all_filters_by_category(self, fake_db, sample_product_data, sample_admin_product_data):
        fake_db.put("products", "rum", sample_product_data)
        fake_db.put("products", "beer", sample_admin_product_data)

        products = ProductRepository().find_all(category="beer")

        assert [p.id for p in products] == ["beer"]

    def test_find_all_filters_in_stock_after_normalization(self, fake_db, timestamp):
        fake_db.put("products", "in", {"name": "In", "stock": 2, "createdAt": timestamp})
        fake_db.put("products", "out", {"name": "Out", "stock": 0, "createdAt": timestamp})

        repo = ProductRepository()

        assert [p.id for p in repo.find_all(in_stock=True)] == ["in"]
        assert [p.id for p in repo.find_all(in_stock=False)] == ["out"]

    def test_find_all_orders_and_limits(self, fake_db):
        for doc_id, price in (("a", 30), ("b", 10), ("c", 20)):
            fake_db.put("products", doc_id, {"name": doc_id, "price": price})

        repo = ProductRepository()

        assert [p.id for p in repo.find_all(order_by="price", direction=ASCENDING)] == ["b", "c", "a"]
        assert [p.id for p in repo.find_all(order_by="price", limit=2)] == ["a", "c"]

    def test_search_matches_tags_case_insensitive(self, fake_db, sample_product_data, sample_admin_product_data):
        fake_db.put("products", "rum", sample_product_data)
        fake_db.put("products", "beer", sample_admin_product_data)

        repo = ProductRepository()

        assert [p.id for p in repo.search("DARK-RUM")] == ["rum"]
        assert [p.id for p in repo.search("lager")] == ["beer"]
        assert repo.search("vodka") == []

    def test_search_returns_results_by_name(self, fake_db):
        fake_db.put("products", "z", {"name": "Zebra Lager"})
        fake_db.put("products", "a", {"name": "Amber Lager"})

        assert [p.id for p in ProductRepository().search("lager")] == ["a", "z"]

    def test_featured_is_top_rated_in_stock(self, fake_db):
        for doc_id, rating in (("r1", 4.1), ("r2", 4.9), ("r3", 4.5), ("r4", 3.0), ("r5", 4.7)):
            fake_db.put("products", doc_id, {"name": doc_id, "rating": rating, "inStock": True})

        featured = ProductRepository().find_featured()

        assert [p.id for p in featured] == ["r2", "r5", "r3", "r1"]

    def test_new_products(self, fake_db):
        fake_db.put("products", "old", {"name": "Old", "isNew": False, "inStock": True, "createdAt": stamp(1)})
        fake_db.put("products", "new1", {"name": "N1", "isNew": True, "inStock": True, "createdAt": stamp(2)})
        fake_db.put("products", "new2", {"name": "N2", "isNew": True, "inStock": True, "createdAt": stamp(3)})

        assert [p.id for p in ProductRepository().find_new()] == ["new2", "new1"]

    def test_on_sale_sorted_by_price(self, fake_db):
        fake_db.put("products", "p1", {"name": "A", "isOnSale": True, "price": 20, "stock": 1})
        fake_db.put("products", "p2", {"name": "B", "isOnSale": True, "price": 5, "stock": 1})
        fake_db.put("products", "p3", {"name": "C", "isOnSale": True, "price": 1, "stock": 0})
        fake_db.put("products", "p4", {"name": "D", "isOnSale": False, "price": 2, "stock": 1})

        assert [p.id for p in ProductRepository().find_on_sale()] == ["p2", "p1"]

    def test_create_stamps_timestamps(self, fake_db):
        repo = ProductRepository()

        product_id = repo.create({"name": "New", "price": 10})

        stored = fake_db.data("products", product_id)
        assert stored["name"] == "New"
        assert isinstance(stored["createdAt"], datetime)
        assert isinstance(stored["updatedAt"], datetime)

    def test_count(self, fake_db):
        fake_db.put("products", "a", {"name": "A"})
        fake_db.put("products", "b", {"name": "B"})

        assert ProductRepository().count() == 2

    def test_count_uses_server_aggregation(self):
        client = MagicMock()
        collection = client.collection.return_value
        collection.count.return_value.get.return_value = [[SimpleNamespace(alias="field_1", value=42)]]

        assert ProductRepository(client).count() == 42
        client.collection.assert_called_once_with("products")
        collection.stream.assert_not_called()
