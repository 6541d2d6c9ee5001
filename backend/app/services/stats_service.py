"""
Dashboard statistics service
"""
from typing import Optional

from app.domain.stats import AdminStats, OrderStats
from app.repositories.order_repository import OrderRepository
from app.repositories.product_repository import ProductRepository
from app.repositories.user_repository import UserRepository


class StatsService:
    """Aggregates collection counts and order totals"""

    def __init__(self, client=None):
        self.products = ProductRepository(client)
        self.orders = OrderRepository(client)
        self.users = UserRepository(client)

    def admin_stats(self) -> AdminStats:
        """
        Admin dashboard cards

        Revenue is the sum of all order totals; pending counts orders whose
        status is exactly "pending".
        """
        return AdminStats.compute(
            total_products=self.products.count(),
            total_users=self.users.count(),
            orders=self.orders.find_all(newest_first=False),
        )

    def order_stats(self, user_id: Optional[str] = None) -> OrderStats:
        """Order summary for one user, or for the whole store"""
        return OrderStats.compute(self.orders.find_all(user_id=user_id, newest_first=False))
