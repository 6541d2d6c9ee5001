"""
Categories API Endpoints
"""
import logging

from fastapi import APIRouter, HTTPException

from app.repositories.category_repository import CategoryRepository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def get_categories():
    """All categories ordered by name"""
    try:
        repo = CategoryRepository()
        return [category.to_dict() for category in repo.find_all()]

    except Exception:
        logger.exception("Error fetching categories")
        raise HTTPException(status_code=500, detail="Failed to fetch categories")


@router.get("/{category_id}")
async def get_category(category_id: str):
    try:
        repo = CategoryRepository()
        category = repo.find_by_id(category_id)

        if not category:
            raise HTTPException(status_code=404, detail="Category not found")

        return category.to_dict()

    except HTTPException:
        raise
    except Exception:
        logger.exception(f"Error fetching category {category_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch category")
