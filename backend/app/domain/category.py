"""
Category Domain Model
"""
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from app.domain.base import DocumentModel


class Category(DocumentModel):
    """Storefront category (seeded with slug ids: beer, whisky, ...)"""

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Category slug / document id")
    name: str = Field("", description="Display name")
    description: str = ""
    image: str = ""
    product_count: int = Field(0, description="Number of products in the category")
    is_popular: Optional[bool] = None
    created_at: datetime
    updated_at: datetime
