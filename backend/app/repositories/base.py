"""
Base repository for Firestore collections

Each repository owns one collection and returns domain models.
Writes stamp createdAt/updatedAt with the server timestamp.

Author: BeerBro
Date: 2025-09-14
"""
from typing import Any, Dict, Generic, List, Optional, TypeVar

from google.cloud.firestore_v1 import SERVER_TIMESTAMP, Query
from google.cloud.firestore_v1.base_query import FieldFilter

from app.core.database import get_firestore

ModelT = TypeVar("ModelT")

ASCENDING = Query.ASCENDING
DESCENDING = Query.DESCENDING


def direction_for(value: Optional[str]) -> str:
    """Map 'asc'/'desc' query strings to Firestore directions (default desc)"""
    return ASCENDING if (value or "").lower() == "asc" else DESCENDING


class DocumentRepository(Generic[ModelT]):
    """
    Shared collection access

    Subclasses set collection_name and implement _map_document().
    """

    collection_name: str = ""

    def __init__(self, client=None):
        self._client = client

    @property
    def client(self):
        return self._client if self._client is not None else get_firestore()

    def _collection(self):
        return self.client.collection(self.collection_name)

    def _map_document(self, snapshot) -> ModelT:
        raise NotImplementedError

    def _query(
        self,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        direction: str = DESCENDING,
        limit: Optional[int] = None,
    ):
        """Build an equality-filtered, optionally ordered and limited query"""
        query = self._collection()
        for field, value in (filters or {}).items():
            query = query.where(filter=FieldFilter(field, "==", value))
        if order_by:
            query = query.order_by(order_by, direction=direction)
        if limit:
            query = query.limit(limit)
        return query

    def _fetch(self, query) -> List[ModelT]:
        return [self._map_document(snapshot) for snapshot in query.stream()]

    def find_by_id(self, doc_id: str) -> Optional[ModelT]:
        """
        Find a document by id

        Returns:
            Domain model or None if not found
        """
        snapshot = self._collection().document(doc_id).get()
        if not snapshot.exists:
            return None
        return self._map_document(snapshot)

    def list_recent(self, limit: Optional[int] = None) -> List[ModelT]:
        """All documents, newest first"""
        return self._fetch(self._query(order_by="createdAt", direction=DESCENDING, limit=limit))

    def count(self) -> int:
        """Server-side count aggregation over the whole collection"""
        results = self._collection().count().get()
        return int(results[0][0].value)

    def create(self, data: Dict[str, Any]) -> str:
        """
        Add a document with an auto-generated id

        Returns:
            The new document id
        """
        _, doc_ref = self._collection().add({
            **data,
            "createdAt": SERVER_TIMESTAMP,
            "updatedAt": SERVER_TIMESTAMP,
        })
        return doc_ref.id

    def set(self, doc_id: str, data: Dict[str, Any], stamp: bool = True) -> None:
        """
        Create or overwrite a document with a known id

        Args:
            stamp: Set createdAt/updatedAt to the server timestamp; False keeps
                the timestamps in data (seeding)
        """
        if stamp:
            data = {**data, "createdAt": SERVER_TIMESTAMP, "updatedAt": SERVER_TIMESTAMP}
        self._collection().document(doc_id).set(data)

    def update(self, doc_id: str, data: Dict[str, Any]) -> None:
        """
        Partially update a document

        Raises:
            google.api_core.exceptions.NotFound if the document does not exist
        """
        self._collection().document(doc_id).update({
            **data,
            "updatedAt": SERVER_TIMESTAMP,
        })

    def delete(self, doc_id: str) -> None:
        self._collection().document(doc_id).delete()
