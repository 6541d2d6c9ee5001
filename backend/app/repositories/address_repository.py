"""
Address Repository

Saved delivery addresses, one document per address with a userId field.
A user has at most one address with isDefault = true.
"""
from typing import Any, Dict, List, Optional

from google.cloud.firestore_v1 import SERVER_TIMESTAMP

from app.core.database import snapshot_to_dict
from app.domain.address import Address
from app.repositories.base import DocumentRepository


class AddressRepository(DocumentRepository[Address]):
    collection_name = "addresses"

    def _map_document(self, snapshot) -> Address:
        return Address(**snapshot_to_dict(snapshot))

    def find_by_user(self, user_id: str) -> List[Address]:
        """Addresses of a user, default first"""
        addresses = self._fetch(self._query({"userId": user_id}))
        return sorted(addresses, key=lambda a: not a.is_default)

    def find_default(self, user_id: str) -> Optional[Address]:
        addresses = self._fetch(self._query({"userId": user_id, "isDefault": True}, limit=1))
        return addresses[0] if addresses else None

    def find_for_user(self, user_id: str, address_id: str) -> Optional[Address]:
        """Address by id, only if it belongs to user_id"""
        address = self.find_by_id(address_id)
        if address is None or address.user_id != user_id:
            return None
        return address

    def clear_default(self, user_id: str, keep_id: Optional[str] = None) -> None:
        """Unset isDefault on every default address of user_id except keep_id"""
        for snapshot in self._query({"userId": user_id, "isDefault": True}).stream():
            if snapshot.id == keep_id:
                continue
            snapshot.reference.update({"isDefault": False, "updatedAt": SERVER_TIMESTAMP})

    def add(self, user_id: str, data: Dict[str, Any]) -> str:
        """
        Save a new address for user_id

        Returns:
            The new address id
        """
        if data.get("isDefault"):
            self.clear_default(user_id)
        return self.create({**data, "userId": user_id})

    def change(self, user_id: str, address_id: str, data: Dict[str, Any]) -> None:
        if data.get("isDefault"):
            self.clear_default(user_id, keep_id=address_id)
        self.update(address_id, data)

    def set_default(self, user_id: str, address_id: str) -> None:
        self.clear_default(user_id, keep_id=address_id)
        self.update(address_id, {"isDefault": True})
