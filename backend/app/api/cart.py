"""
Cart API Endpoints
"""
import logging

from fastapi import APIRouter, HTTPException

from app.domain.cart import CartQuoteRequest
from app.services.cart_service import CartService, ProductNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/quote")
async def quote_cart(request: CartQuoteRequest):
    """
    Price a cart against the current catalog

    Returns the priced items and the totals (subtotal, tax, shipping,
    total, free-shipping progress).
    """
    try:
        cart, totals = CartService().quote(request.items)
        return {
            "items": [
                {**item.to_dict(), "lineTotal": round(item.line_total, 2)}
                for item in cart.items
            ],
            **totals.to_dict(),
        }

    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception("Error quoting cart")
        raise HTTPException(status_code=500, detail="Failed to price cart")
