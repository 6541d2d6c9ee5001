"""
Payment Domain Models

Payment records track the QR/UPI payment attached to an order.
"""
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from app.domain.base import DocumentModel
from app.domain.order import PaymentStatus


class Payment(DocumentModel):
    model_config = ConfigDict(extra="allow")

    id: str
    order_id: str = ""
    payment_id: str = ""
    status: str = "pending"
    amount: float = 0
    currency: str = ""
    user_id: str = ""
    message: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class PaymentCreate(DocumentModel):
    order_id: str = Field(..., min_length=1)
    payment_id: str = Field(..., min_length=1)
    status: PaymentStatus = "pending"
    amount: float = Field(..., ge=0)
    currency: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    message: Optional[str] = None


class PaymentStatusChange(DocumentModel):
    status: PaymentStatus
    message: Optional[str] = None
