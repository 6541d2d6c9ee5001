"""
Orders API Endpoints
Storefront checkout and order history

Author: BeerBro
Date: 2025-09-14
"""
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from google.api_core.exceptions import NotFound

from app.domain.order import CheckoutRequest, StorefrontOrderUpdate
from app.repositories.order_repository import OrderRepository
from app.services.stats_service import StatsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def get_orders(
    user_id: Optional[str] = Query(None, alias="userId", description="Filter by owner uid"),
    status: Optional[str] = Query(None, description="Filter by order status"),
    limit: Optional[int] = Query(None, ge=1, le=1000),
):
    """Get orders, newest first"""
    try:
        repo = OrderRepository()
        orders = repo.find_all(user_id=user_id, status=status, limit=limit)
        return [order.to_dict() for order in orders]

    except Exception:
        logger.exception("Error fetching orders")
        raise HTTPException(status_code=500, detail="Failed to fetch orders")


@router.post("", status_code=201)
async def create_order(checkout: CheckoutRequest):
    """
    Place an order from the storefront checkout

    The stored status is always "pending" whatever the client sends.
    """
    try:
        repo = OrderRepository()
        order_id = repo.create({**checkout.to_document(), "status": "pending"})
        logger.info(f"Order {order_id} created for user {checkout.user_id}")
        return {"id": order_id}

    except Exception:
        logger.exception("Error creating order")
        raise HTTPException(status_code=500, detail="Failed to create order")


@router.get("/stats")
async def get_order_stats(user_id: Optional[str] = Query(None, alias="userId")):
    """Order summary for one user, or for the whole store when userId is omitted"""
    try:
        return StatsService().order_stats(user_id=user_id).to_dict()

    except Exception:
        logger.exception("Error computing order stats")
        raise HTTPException(status_code=500, detail="Failed to fetch order stats")


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


def _update_order(order_id: str, data: dict, action: str):
    try:
        OrderRepository().update(order_id, data)
        return {"success": True}

    except NotFound:
        raise HTTPException(status_code=404, detail="Order not found")
    except Exception:
        logger.exception(f"Error trying to {action} order {order_id}")
        raise HTTPException(status_code=500, detail=f"Failed to {action} order")


@router.patch("/{order_id}")
async def update_order(order_id: str, update: StorefrontOrderUpdate):
    """Partial update; only the fields sent are written"""
    return _update_order(order_id, update.to_document(partial=True), "update")


@router.post("/{order_id}/cancel")
async def cancel_order(order_id: str):
    return _update_order(order_id, {"status": "cancelled"}, "cancel")
