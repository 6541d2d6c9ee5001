"""
Category Repository
"""
from typing import List

from app.core.database import snapshot_to_dict
from app.domain.category import Category
from app.repositories.base import ASCENDING, DocumentRepository


class CategoryRepository(DocumentRepository[Category]):
    collection_name = "categories"

    def _map_document(self, snapshot) -> Category:
        data = snapshot_to_dict(snapshot)
        data["name"] = data.get("name") or ""
        data["description"] = data.get("description") or ""
        data["image"] = data.get("image") or ""
        data["productCount"] = data.get("productCount") or 0
        return Category(**data)

    def find_all(self) -> List[Category]:
        """All categories ordered by name"""
        return self._fetch(self._query(order_by="name", direction=ASCENDING))
