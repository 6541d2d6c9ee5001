"""
Products API Endpoints
Storefront catalog browsing and search

Author: BeerBro
Date: 2025-09-14
"""
import logging
from typing import Literal, Optional

from fastapi import APIRouter, HTTPException, Query

from app.repositories.base import direction_for
from app.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def get_products(
    category: Optional[str] = Query(None, description="Filter by category slug"),
    in_stock: Optional[bool] = Query(None, alias="inStock", description="Filter by derived stock flag"),
    is_on_sale: Optional[bool] = Query(None, alias="isOnSale"),
    is_new: Optional[bool] = Query(None, alias="isNew"),
    order_by: Optional[str] = Query(None, alias="orderBy", description="Field to sort by"),
    order_direction: Literal["asc", "desc"] = Query("desc", alias="orderDirection"),
    limit: Optional[int] = Query(None, ge=1, le=1000),
):
    """
    Get products with optional filters

    category, isOnSale and isNew are applied by the store; inStock is
    applied after normalization since it is derived from several fields.
    """
    try:
        repo = ProductRepository()
        products = repo.find_all(
            category=category,
            is_on_sale=is_on_sale,
            is_new=is_new,
            in_stock=in_stock,
            order_by=order_by,
            direction=direction_for(order_direction),
            limit=limit,
        )
        return [product.to_dict() for product in products]

    except Exception:
        logger.exception("Error fetching products")
        raise HTTPException(status_code=500, detail="Failed to fetch products")


@router.get("/search")
async def search_products(q: Optional[str] = Query(None, description="Search term")):
    """
    Search products by name, description, category, brand, origin or tag

    Returns 400 when q is missing or blank.
    """
    if not q or not q.strip():
        raise HTTPException(status_code=400, detail="Search query is required")

    try:
        repo = ProductRepository()
        return [product.to_dict() for product in repo.search(q.strip())]

    except Exception:
        logger.exception(f"Error searching products for '{q}'")
        raise HTTPException(status_code=500, detail="Failed to search products")


@router.get("/featured")
async def get_featured_products():
    """Top rated products in stock"""
    try:
        repo = ProductRepository()
        return [product.to_dict() for product in repo.find_featured()]

    except Exception:
        logger.exception("Error fetching featured products")
        raise HTTPException(status_code=500, detail="Failed to fetch featured products")


@router.get("/new")
async def get_new_products():
    try:
        repo = ProductRepository()
        return [product.to_dict() for product in repo.find_new()]

    except Exception:
        logger.exception("Error fetching new products")
        raise HTTPException(status_code=500, detail="Failed to fetch new products")


@router.get("/on-sale")
async def get_on_sale_products():
    try:
        repo = ProductRepository()
        return [product.to_dict() for product in repo.find_on_sale()]

    except Exception:
        logger.exception("Error fetching on-sale products")
        raise HTTPException(status_code=500, detail="Failed to fetch on-sale products")


@router.get("/{product_id}")
async def get_product(product_id: str):
    """Get a single normalized product"""
    try:
        repo = ProductRepository()
        product = repo.find_by_id(product_id)

        if not product:
            raise HTTPException(status_code=404, detail="Product not found")

        return product.to_dict()

    except HTTPException:
        raise
    except Exception:
        logger.exception(f"Error fetching product {product_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch product")
