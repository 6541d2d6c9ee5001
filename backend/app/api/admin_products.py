"""
Admin API - Products
Catalog management for the admin console

Author: BeerBro
Date: 2025-09-14
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from google.api_core.exceptions import NotFound

from app.core.auth import require_admin
from app.domain.product import ProductCreate, ProductUpdate
from app.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("")
async def list_products():
    """All products, newest first (normalized like the storefront)"""
    try:
        repo = ProductRepository()
        return [product.to_dict() for product in repo.list_recent()]

    except Exception:
        logger.exception("Error fetching admin products")
        raise HTTPException(status_code=500, detail="Failed to fetch products")


@router.post("", status_code=201)
async def create_product(product: ProductCreate):
    try:
        repo = ProductRepository()
        product_id = repo.create(product.to_document())
        logger.info(f"Product {product_id} created: {product.name}")
        return {"id": product_id}

    except Exception:
        logger.exception("Error creating product")
        raise HTTPException(status_code=500, detail="Failed to create product")


@router.get("/{product_id}")
async def get_product(product_id: str):
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


@router.patch("/{product_id}")
async def update_product(product_id: str, update: ProductUpdate):
    try:
        repo = ProductRepository()
        repo.update(product_id, update.to_document(partial=True))
        return {"success": True}

    except NotFound:
        raise HTTPException(status_code=404, detail="Product not found")
    except Exception:
        logger.exception(f"Error updating product {product_id}")
        raise HTTPException(status_code=500, detail="Failed to update product")


@router.delete("/{product_id}")
async def delete_product(product_id: str):
    try:
        repo = ProductRepository()
        if not repo.find_by_id(product_id):
            raise HTTPException(status_code=404, detail="Product not found")

        repo.delete(product_id)
        logger.info(f"Product {product_id} deleted")
        return {"success": True}

    except HTTPException:
        raise
    except Exception:
        logger.exception(f"Error deleting product {product_id}")
        raise HTTPException(status_code=500, detail="Failed to delete product")
