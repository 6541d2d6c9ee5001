"""
Admin API - Orders
Order management and fulfilment status for the admin console

Author: BeerBro
Date: 2025-09-14
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from google.api_core.exceptions import NotFound

from app.core.auth import require_admin
from app.domain.order import OrderCreate, OrderStatusUpdate, OrderUpdate, PaymentStatusUpdate
from app.repositories.order_repository import OrderRepository

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("")
async def list_orders(status: Optional[str] = Query(None, description="Filter by order status")):
    """All orders, newest first"""
    try:
        repo = OrderRepository()
        return [order.to_dict() for order in repo.find_all(status=status)]

    except Exception:
        logger.exception("Error fetching admin orders")
        raise HTTPException(status_code=500, detail="Failed to fetch orders")


@router.post("", status_code=201)
async def create_order(order: OrderCreate):
    try:
        repo = OrderRepository()
        order_id = repo.create(order.to_document())
        logger.info(f"Order {order_id} created by admin for user {order.user_id}")
        return {"id": order_id}

    except Exception:
        logger.exception("Error creating order")
        raise HTTPException(status_code=500, detail="Failed to create order")


@router.get("/{order_id}")
async def get_order(order_id: str):
    try:
        repo = OrderRepository()
        order = repo.find_by_id(order_id)

        if not order:
            raise HTTPException(status_code=404, detail="Order not found")

        return order.to_dict()

    except HTTPException:
        raise
    except Exception:
        logger.exception(f"Error fetching order {order_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch order")


def _apply_update(order_id: str, data: dict, failure: str):
    try:
        OrderRepository().update(order_id, data)
        return {"success": True}

    except NotFound:
        raise HTTPException(status_code=404, detail="Order not found")
    except Exception:
        logger.exception(f"Error updating order {order_id}")
        raise HTTPException(status_code=500, detail=failure)


@router.patch("/{order_id}")
async def update_order(order_id: str, update: OrderUpdate):
    return _apply_update(order_id, update.to_document(partial=True), "Failed to update order")


@router.patch("/{order_id}/status")
async def update_order_status(order_id: str, update: OrderStatusUpdate):
    """Change the order status; tracking number and delivery estimate are optional"""
    logger.info(f"Order {order_id} -> {update.status}")
    return _apply_update(order_id, update.to_document(), "Failed to update order status")


@router.patch("/{order_id}/payment-status")
async def update_payment_status(order_id: str, update: PaymentStatusUpdate):
    return _apply_update(order_id, update.to_document(), "Failed to update payment status")


@router.delete("/{order_id}")
async def delete_order(order_id: str):
    try:
        repo = OrderRepository()
        if not repo.find_by_id(order_id):
            raise HTTPException(status_code=404, detail="Order not found")

        repo.delete(order_id)
        logger.info(f"Order {order_id} deleted")
        return {"success": True}

    except HTTPException:
        raise
    except Exception:
        logger.exception(f"Error deleting order {order_id}")
        raise HTTPException(status_code=500, detail="Failed to delete order")
