"""
Payment Repository
"""
from typing import Optional

from app.core.database import snapshot_to_dict
from app.domain.payment import Payment
from app.repositories.base import DocumentRepository


class PaymentRepository(DocumentRepository[Payment]):
    collection_name = "payments"

    def _map_document(self, snapshot) -> Payment:
        return Payment(**snapshot_to_dict(snapshot))

    def update_status(self, payment_id: str, status: str, message: Optional[str] = None) -> None:
        """
        Set the payment status (and message, when given)

        Raises:
            google.api_core.exceptions.NotFound if the payment does not exist
        """
        data = {"status": status}
        if message is not None:
            data["message"] = message
        self.update(payment_id, data)
