"""
Order Domain Models

Orders are written by two clients:
- the storefront checkout (cart items, payment method, price breakdown)
- the admin console (flat items, shipping address, payment status)

The read model is permissive and keeps every stored field; the write
schemas validate what each client is allowed to send.

Author: BeerBro
Date: 2025-09-14
"""
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import ConfigDict, EmailStr, Field

from app.domain.base import DocumentModel


OrderStatus = Literal[
    "pending",
    "confirmed",
    "processing",
    "shipped",
    "delivered",
    "cancelled",
    "accepted",
    "rejected",
    "failed",
]

PaymentStatus = Literal["pending", "processing", "completed", "failed", "expired"]

# Statuses counted as "open" in order statistics
OPEN_ORDER_STATUSES = ("pending", "confirmed", "processing")


class ShippingAddress(DocumentModel):
    """Postal address attached to an admin-created order"""
    street: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)


class OrderItem(DocumentModel):
    """
    Order line item

    Stored items are not uniform: the product name may be under
    productName, name or title; quantity under quantity or qty; price
    under price or unitPrice. from_document() resolves those.
    """
    product_id: str = ""
    product_name: str = ""
    quantity: int = Field(1, ge=1)
    price: float = Field(0, ge=0)

    @classmethod
    def from_document(cls, item: Dict[str, Any]) -> "OrderItem":
        product = item.get("product") if isinstance(item.get("product"), dict) else {}
        name = (
            item.get("productName")
            or item.get("name")
            or item.get("title")
            or product.get("name")
            or ""
        )
        price = item.get("price")
        if price is None:
            price = item.get("unitPrice")
        if price is None:
            price = product.get("price", 0)
        return cls(
            product_id=str(item.get("productId") or product.get("id") or ""),
            product_name=name,
            quantity=item.get("quantity") or item.get("qty") or 1,
            price=price or 0,
        )

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


class Order(DocumentModel):
    """
    Order read model

    Fields:
        id: Document id
        user_id: Owner uid
        items: Items as stored (shape depends on the writer)
        total: Final order total
        status: Order status
        payment_status: Payment status (admin orders)
        tracking_number, estimated_delivery: Set when the order ships
    """

    model_config = ConfigDict(extra="allow")

    id: str
    user_id: Optional[str] = None
    user_email: Optional[str] = None
    user_name: Optional[str] = None
    items: List[Dict[str, Any]] = Field(default_factory=list)
    total: float = 0
    status: str = "pending"
    payment_status: Optional[str] = None
    shipping_address: Optional[Dict[str, Any]] = None
    tracking_number: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    estimated_delivery: Optional[datetime] = None

    @property
    def line_items(self) -> List[OrderItem]:
        return [OrderItem.from_document(item) for item in self.items if isinstance(item, dict)]

    def to_dict(self) -> dict:
        """Serialize with camelCase keys plus normalized line items"""
        data = super().to_dict()
        data["lineItems"] = [item.to_dict() for item in self.line_items]
        return data


class OrderCreate(DocumentModel):
    """Schema for orders created from the admin console"""
    user_id: str
    user_email: Optional[EmailStr] = None
    user_name: Optional[str] = None
    items: List[OrderItem]
    total: float = Field(..., ge=0)
    status: OrderStatus = "pending"
    payment_status: PaymentStatus = "pending"
    shipping_address: ShippingAddress


class OrderUpdate(DocumentModel):
    """Schema for partial admin order updates"""
    user_email: Optional[EmailStr] = None
    user_name: Optional[str] = None
    items: Optional[List[OrderItem]] = None
    total: Optional[float] = Field(None, ge=0)
    status: Optional[OrderStatus] = None
    payment_status: Optional[PaymentStatus] = None
    shipping_address: Optional[ShippingAddress] = None


class CheckoutRequest(DocumentModel):
    """
    Storefront checkout body

    Items, address and payment method come straight from the client cart;
    unknown keys are stored as sent. The status is always set by the server.
    """

    model_config = ConfigDict(extra="allow")

    user_id: str = Field(..., min_length=1)
    items: List[Dict[str, Any]] = Field(..., min_length=1)
    shipping_address: Dict[str, Any]
    payment_method: Dict[str, Any] = Field(default_factory=dict)
    subtotal: float = Field(0, ge=0)
    tax: float = Field(0, ge=0)
    shipping: float = Field(0, ge=0)
    total: float = Field(..., ge=0)


class StorefrontOrderUpdate(DocumentModel):
    """PATCH body for /api/orders/{id}; any stored field may be updated"""

    model_config = ConfigDict(extra="allow")

    status: Optional[OrderStatus] = None
    tracking_number: Optional[str] = None
    estimated_delivery: Optional[datetime] = None


class OrderStatusUpdate(DocumentModel):
    """Status change with optional shipping details"""
    status: OrderStatus
    tracking_number: Optional[str] = None
    estimated_delivery: Optional[datetime] = None


class PaymentStatusUpdate(DocumentModel):
    payment_status: PaymentStatus
