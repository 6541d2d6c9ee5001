"""
Payments API Endpoints
Payment records attached to orders

Author: BeerBro
Date: 2025-09-14
"""
import logging

from fastapi import APIRouter, HTTPException
from google.api_core.exceptions import NotFound

from app.domain.payment import PaymentCreate, PaymentStatusChange
from app.repositories.payment_repository import PaymentRepository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=201)
async def create_payment(payment: PaymentCreate):
    try:
        repo = PaymentRepository()
        payment_id = repo.create(payment.to_document())
        logger.info(f"Payment {payment_id} recorded for order {payment.order_id}")
        return {"id": payment_id}

    except Exception:
        logger.exception(f"Error creating payment for order {payment.order_id}")
        raise HTTPException(status_code=500, detail="Failed to create payment")


@router.get("/{payment_id}")
async def get_payment(payment_id: str):
    try:
        repo = PaymentRepository()
        payment = repo.find_by_id(payment_id)

        if not payment:
            raise HTTPException(status_code=404, detail="Payment not found")

        return payment.to_dict()

    except HTTPException:
        raise
    except Exception:
        logger.exception(f"Error fetching payment {payment_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch payment")


@router.patch("/{payment_id}/status")
async def update_payment_status(payment_id: str, change: PaymentStatusChange):
    try:
        repo = PaymentRepository()
        repo.update_status(payment_id, change.status, change.message)
        return {"success": True}

    except NotFound:
        raise HTTPException(status_code=404, detail="Payment not found")
    except Exception:
        logger.exception(f"Error updating payment {payment_id}")
        raise HTTPException(status_code=500, detail="Failed to update payment status")
