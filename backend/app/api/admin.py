"""
Admin API - Dashboard
All /api/admin routes require a bearer token with the admin role.

Author: BeerBro
Date: 2025-09-14
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from app.core.auth import TokenUser, require_admin
from app.services.stats_service import StatsService

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/stats")
async def get_admin_stats():
    """
    Dashboard cards

    Returns:
        totalProducts, totalOrders, totalUsers: Collection sizes
        totalRevenue: Sum of all order totals
        pendingOrders: Orders with status "pending"
    """
    try:
        return StatsService().admin_stats().to_dict()

    except Exception:
        logger.exception("Error computing admin stats")
        raise HTTPException(status_code=500, detail="Failed to fetch dashboard stats")


@router.get("/me")
async def get_admin_identity(user: TokenUser = Depends(require_admin)):
    """Identity behind the admin token (used by the console header)"""
    return user.model_dump()
