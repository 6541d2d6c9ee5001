"""
Product Domain Model

Represents a product document in the BeerBro catalog.
Older documents were written by different tools, so the same concept may be
stored under different field names (imageUrl/image, stock/stockQuantity).
The read model exposes the normalized names and keeps every stored field.

Author: BeerBro
Date: 2025-09-14
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import ConfigDict, Field

from app.domain.base import DocumentModel


ProductCategory = Literal["beer", "wine", "whisky", "rum", "gin", "vodka"]

DEFAULT_RATING = 4.0


class Product(DocumentModel):
    """
    Product read model (storefront and admin)

    Fields:
        id: Document id
        name, description, category, price: Catalog basics
        image: Normalized image URL (from imageUrl or image)
        stock_quantity: Normalized stock (from stock or stockQuantity)
        in_stock: True when status is "active", inStock is set, or stock > 0
        rating: Defaults to 4.0 when missing
        review_count: Defaults to 0

    Any other stored field (alcoholContent, volume, custom flags) is kept
    as-is and returned to the client.
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Document id")
    name: str = Field("", description="Product name")
    description: str = Field("", description="Product description")
    price: float = Field(0, description="Unit price")
    original_price: Optional[float] = Field(None, description="Price before discount")
    category: str = Field("", description="Category slug")

    image: str = Field("", description="Normalized image URL")
    image_url: Optional[str] = Field(None, description="Stored image URL (admin-created products)")

    stock_quantity: int = Field(0, description="Normalized stock level")
    stock: Optional[int] = Field(None, description="Stored stock (admin-created products)")
    in_stock: bool = Field(False, description="Whether the product can be ordered")
    status: Optional[str] = Field(None, description="Legacy status flag ('active')")
    is_active: Optional[bool] = Field(None, description="Admin visibility flag")

    rating: float = Field(DEFAULT_RATING, description="Average rating")
    review_count: int = Field(0, description="Number of reviews")
    is_new: Optional[bool] = None
    is_on_sale: Optional[bool] = None

    tags: List[str] = Field(default_factory=list)
    brand: Optional[str] = None
    origin: Optional[str] = None
    alcohol_content: Optional[float] = Field(None, description="ABV percentage")
    volume: Optional[float] = Field(None, description="Volume in ml")

    created_at: datetime
    updated_at: datetime

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match over the searchable fields"""
        term = term.lower()
        fields = [self.name, self.description, self.category, self.brand, self.origin]
        if any(value and term in value.lower() for value in fields):
            return True
        return any(term in tag.lower() for tag in self.tags)


class ProductCreate(DocumentModel):
    """Schema for creating a product from the admin console"""
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=500)
    price: float = Field(..., ge=0)
    category: ProductCategory
    stock: int = Field(..., ge=0)
    is_active: bool
    image_url: Optional[str] = None


class ProductUpdate(DocumentModel):
    """Schema for updating an existing product"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1, max_length=500)
    price: Optional[float] = Field(None, ge=0)
    category: Optional[ProductCategory] = None
    stock: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None
    image_url: Optional[str] = None
