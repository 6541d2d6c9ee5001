"""
Order Repository - Data Access Layer for Orders

Handles all Firestore queries for the orders collection and returns
Order domain models.

Author: BeerBro
Date: 2025-09-14
"""
from typing import List, Optional

from app.core.database import snapshot_to_dict
from app.domain.order import Order
from app.repositories.base import DESCENDING, DocumentRepository


class OrderRepository(DocumentRepository[Order]):
    """
    Repository for Order data access

    Listings are newest first; stats read unordered.
    """

    collection_name = "orders"

    def _map_document(self, snapshot) -> Order:
        data = snapshot_to_dict(snapshot, optional_timestamp_fields=("estimatedDelivery",))
        data["items"] = [item for item in (data.get("items") or []) if isinstance(item, dict)]
        data["total"] = data.get("total") or 0
        data["status"] = data.get("status") or "pending"
        return Order(**data)

    def find_all(
        self,
        user_id: Optional[str] = None,
        status: Optional[str] = None,
        limit: Optional[int] = None,
        newest_first: bool = True,
    ) -> List[Order]:
        """
        Find orders with optional filters

        Args:
            user_id: Only orders placed by this user
            status: Only orders in this status
            limit: Max number of orders
            newest_first: Order by createdAt desc; documents without
                createdAt are then skipped

        Returns:
            List of Order objects
        """
        filters = {}
        if user_id:
            filters["userId"] = user_id
        if status:
            filters["status"] = status
        order_by = "createdAt" if newest_first else None
        return self._fetch(self._query(filters, order_by=order_by, direction=DESCENDING, limit=limit))
