"""
Cart Domain Model

The cart itself lives on the client; the server prices it against the
current catalog so checkout totals come from one place.

Pricing rules:
    subtotal = sum(price * quantity)
    tax      = subtotal * tax_rate
    shipping = 0 when subtotal >= free_shipping_threshold, else shipping_cost
    total    = subtotal + tax + shipping
"""
from typing import List, Optional

from pydantic import Field

from app.domain.base import DocumentModel


class CartLine(DocumentModel):
    """Client cart line: which product and how many"""
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(1, ge=1)


class CartQuoteRequest(DocumentModel):
    items: List[CartLine] = Field(default_factory=list)


class CartItem(DocumentModel):
    """Priced cart line"""
    product_id: str
    product_name: str
    price: float
    quantity: int
    image: str = ""

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


class CartTotals(DocumentModel):
    total_items: int = 0
    subtotal: float = 0
    tax: float = 0
    shipping: float = 0
    total: float = 0
    qualifies_for_free_shipping: bool = False
    remaining_for_free_shipping: float = 0


class Cart(DocumentModel):
    items: List[CartItem] = Field(default_factory=list)

    def find(self, product_id: str) -> Optional[CartItem]:
        return next((item for item in self.items if item.product_id == product_id), None)

    def add_item(self, product_id: str, product_name: str, price: float, quantity: int = 1, image: str = "") -> None:
        """Add a product; an existing line for the same product is merged"""
        existing = self.find(product_id)
        if existing:
            existing.quantity += quantity
            return
        self.items.append(CartItem(
            product_id=product_id,
            product_name=product_name,
            price=price,
            quantity=quantity,
            image=image,
        ))

    def update_quantity(self, product_id: str, quantity: int) -> None:
        """Set a line quantity; zero or less removes the line"""
        if quantity <= 0:
            self.remove_item(product_id)
            return
        item = self.find(product_id)
        if item:
            item.quantity = quantity

    def remove_item(self, product_id: str) -> None:
        self.items = [item for item in self.items if item.product_id != product_id]

    def clear(self) -> None:
        self.items = []

    def totals(self, tax_rate: float, free_shipping_threshold: float, shipping_cost: float) -> CartTotals:
        subtotal = sum(item.line_total for item in self.items)
        tax = subtotal * tax_rate
        shipping = 0 if subtotal >= free_shipping_threshold else shipping_cost
        return CartTotals(
            total_items=sum(item.quantity for item in self.items),
            subtotal=round(subtotal, 2),
            tax=round(tax, 2),
            shipping=shipping,
            total=round(subtotal + tax + shipping, 2),
            qualifies_for_free_shipping=subtotal >= free_shipping_threshold,
            remaining_for_free_shipping=round(max(0, free_shipping_threshold - subtotal), 2),
        )
