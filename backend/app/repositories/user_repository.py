"""
User Repository

User documents are keyed by the Firebase Auth uid.
"""
from typing import Optional

from app.core.database import snapshot_to_dict
from app.domain.user import User
from app.repositories.base import DocumentRepository


class UserRepository(DocumentRepository[User]):
    collection_name = "users"

    def _map_document(self, snapshot) -> User:
        data = snapshot_to_dict(snapshot, optional_timestamp_fields=("lastLoginAt",))
        data["email"] = data.get("email") or ""
        data["role"] = data.get("role") or "user"
        data["preferences"] = data.get("preferences") or {}
        if data.get("isActive") is None:
            data["isActive"] = True
        data["isAdmin"] = bool(data.get("isAdmin")) or data["role"] == "admin"
        return User(**data)

    def find_by_email(self, email: str) -> Optional[User]:
        """
        Find a user by exact email

        Returns:
            User or None if not found
        """
        users = self._fetch(self._query({"email": email}, limit=1))
        return users[0] if users else None
