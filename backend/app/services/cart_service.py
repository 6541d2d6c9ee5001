"""
Cart pricing service

Prices a client cart against the current catalog and applies the store's
tax and shipping rules from settings.
"""
import logging
from typing import Iterable, Optional, Tuple

from app.core.config import settings
from app.domain.cart import Cart, CartLine, CartTotals
from app.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductNotFoundError(LookupError):
    """Cart references a product that is not in the catalog"""

    def __init__(self, product_id: str):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class CartService:
    """Business logic for cart quotes"""

    def __init__(self, product_repository: Optional[ProductRepository] = None):
        self.products = product_repository or ProductRepository()

    def build_cart(self, lines: Iterable[CartLine]) -> Cart:
        """
        Resolve cart lines to priced items

        Raises:
            ProductNotFoundError: if a product id is unknown
        """
        cart = Cart()
        for line in lines:
            product = self.products.find_by_id(line.product_id)
            if product is None:
                raise ProductNotFoundError(line.product_id)
            cart.add_item(
                product_id=product.id,
                product_name=product.name,
                price=product.price,
                quantity=line.quantity,
                image=product.image,
            )
        return cart

    def quote(self, lines: Iterable[CartLine]) -> Tuple[Cart, CartTotals]:
        cart = self.build_cart(lines)
        totals = cart.totals(
            tax_rate=settings.TAX_RATE,
            free_shipping_threshold=settings.FREE_SHIPPING_THRESHOLD,
            shipping_cost=settings.SHIPPING_COST,
        )
        logger.info(f"Quoted cart: {totals.total_items} items, total {totals.total}")
        return cart, totals
