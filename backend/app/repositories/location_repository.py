"""
Service Location Repository
"""
from app.core.database import snapshot_to_dict
from app.domain.location import ServiceLocation
from app.repositories.base import DocumentRepository


class LocationRepository(DocumentRepository[ServiceLocation]):
    collection_name = "locations"

    def _map_document(self, snapshot) -> ServiceLocation:
        return ServiceLocation(**snapshot_to_dict(snapshot))
