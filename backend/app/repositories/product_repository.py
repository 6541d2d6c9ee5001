"""
Product Repository - Data Access Layer for Products

Handles all Firestore queries for the products collection and returns
normalized Product domain models.

Author: BeerBro
Date: 2025-09-14
"""
from typing import Any, Dict, List, Optional

from app.core.database import snapshot_to_dict
from app.domain.product import DEFAULT_RATING, Product
from app.repositories.base import ASCENDING, DESCENDING, DocumentRepository


class ProductRepository(DocumentRepository[Product]):
    """
    Repository for Product data access

    Storefront and admin reads share the same normalization, so every
    caller sees image/stockQuantity/inStock whatever tool wrote the document.
    """

    collection_name = "products"

    @staticmethod
    def _normalize(data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Resolve the legacy field aliases of a stored product

        - image: imageUrl, then image, then ""
        - stockQuantity: stock, then stockQuantity, then 0
        - inStock: status == "active", a truthy inStock, or stock > 0
        - rating: 4.0 when missing or zero; reviewCount: 0 when missing
        - tags: a single string becomes a one-item list
        """
        stock = data.get("stock")
        data["image"] = data.get("imageUrl") or data.get("image") or ""
        data["stockQuantity"] = stock or data.get("stockQuantity") or 0
        data["inStock"] = bool(
            data.get("status") == "active"
            or data.get("inStock")
            or (stock or 0) > 0
        )
        data["rating"] = data.get("rating") or DEFAULT_RATING
        data["reviewCount"] = data.get("reviewCount") or 0

        for field in ("name", "description", "category"):
            if data.get(field) is None:
                data[field] = ""
        tags = data.get("tags") or []
        if isinstance(tags, str):
            tags = [tags]
        data["tags"] = [str(tag) for tag in tags]
        return data

    def _map_document(self, snapshot) -> Product:
        return Product(**self._normalize(snapshot_to_dict(snapshot)))

    def find_all(
        self,
        category: Optional[str] = None,
        is_on_sale: Optional[bool] = None,
        is_new: Optional[bool] = None,
        in_stock: Optional[bool] = None,
        order_by: Optional[str] = None,
        direction: str = DESCENDING,
        limit: Optional[int] = None,
    ) -> List[Product]:
        """
        Find products with optional filters

        Args:
            category: Category slug (store-side equality)
            is_on_sale: isOnSale flag (store-side equality)
            is_new: isNew flag (store-side equality)
            in_stock: Applied after normalization, since inStock is derived
            order_by: Field to sort by
            direction: ASCENDING or DESCENDING
            limit: Max documents fetched from the store

        Returns:
            List of Product objects
        """
        filters = {}
        if category:
            filters["category"] = category
        if is_on_sale is not None:
            filters["isOnSale"] = is_on_sale
        if is_new is not None:
            filters["isNew"] = is_new

        products = self._fetch(self._query(filters, order_by=order_by, direction=direction, limit=limit))

        if in_stock is not None:
            products = [p for p in products if p.in_stock == in_stock]
        return products

    def search(self, term: str) -> List[Product]:
        """
        Case-insensitive substring search over the whole catalog

        Firestore has no text search, so all products are fetched ordered
        by name and filtered in memory.
        """
        products = self._fetch(self._query(order_by="name", direction=ASCENDING))
        return [p for p in products if p.matches(term)]

    def find_featured(self, limit: int = 4) -> List[Product]:
        return self.find_all(in_stock=True, order_by="rating", direction=DESCENDING, limit=limit)

    def find_new(self, limit: int = 4) -> List[Product]:
        return self.find_all(is_new=True, in_stock=True, order_by="createdAt", direction=DESCENDING, limit=limit)

    def find_on_sale(self) -> List[Product]:
        return self.find_all(is_on_sale=True, in_stock=True, order_by="price", direction=ASCENDING)
