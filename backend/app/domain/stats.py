"""
Dashboard statistics models
"""
from typing import Iterable

from pydantic import Field

from app.domain.base import DocumentModel
from app.domain.order import OPEN_ORDER_STATUSES, Order


class AdminStats(DocumentModel):
    """Admin dashboard cards"""
    total_products: int = 0
    total_orders: int = 0
    total_users: int = 0
    total_revenue: float = 0
    pending_orders: int = 0

    @classmethod
    def compute(cls, total_products: int, total_users: int, orders: Iterable[Order]) -> "AdminStats":
        orders = list(orders)
        return cls(
            total_products=total_products,
            total_orders=len(orders),
            total_users=total_users,
            total_revenue=round(sum(order.total for order in orders), 2),
            pending_orders=sum(1 for order in orders if order.status == "pending"),
        )


class OrderStats(DocumentModel):
    """Order summary for a customer (or the whole store)"""
    total_orders: int = 0
    total_spent: float = 0
    average_order_value: float = Field(0, description="0 when there are no orders")
    pending_orders: int = 0
    completed_orders: int = 0

    @classmethod
    def compute(cls, orders: Iterable[Order]) -> "OrderStats":
        orders = list(orders)
        total_orders = len(orders)
        total_spent = sum(order.total for order in orders)
        return cls(
            total_orders=total_orders,
            total_spent=round(total_spent, 2),
            average_order_value=round(total_spent / total_orders, 2) if total_orders else 0,
            pending_orders=sum(1 for order in orders if order.status in OPEN_ORDER_STATUSES),
            completed_orders=sum(1 for order in orders if order.status == "delivered"),
        )
