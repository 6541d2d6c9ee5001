"""
Admin API - Service Locations
Delivery hubs and their coverage radius
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from google.api_core.exceptions import NotFound

from app.core.auth import require_admin
from app.domain.location import LocationCreate, LocationUpdate
from app.repositories.location_repository import LocationRepository

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("")
async def list_locations():
    try:
        repo = LocationRepository()
        return [location.to_dict() for location in repo.list_recent()]

    except Exception:
        logger.exception("Error fetching locations")
        raise HTTPException(status_code=500, detail="Failed to fetch locations")


@router.post("", status_code=201)
async def create_location(location: LocationCreate):
    try:
        repo = LocationRepository()
        location_id = repo.create(location.to_document())
        logger.info(f"Location {location_id} created: {location.name}")
        return {"id": location_id}

    except Exception:
        logger.exception("Error creating location")
        raise HTTPException(status_code=500, detail="Failed to create location")


@router.get("/{location_id}")
async def get_location(location_id: str):
    try:
        repo = LocationRepository()
        location = repo.find_by_id(location_id)

        if not location:
            raise HTTPException(status_code=404, detail="Location not found")

        return location.to_dict()

    except HTTPException:
        raise
    except Exception:
        logger.exception(f"Error fetching location {location_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch location")


@router.patch("/{location_id}")
async def update_location(location_id: str, update: LocationUpdate):
    try:
        repo = LocationRepository()
        repo.update(location_id, update.to_document(partial=True))
        return {"success": True}

    except NotFound:
        raise HTTPException(status_code=404, detail="Location not found")
    except Exception:
        logger.exception(f"Error updating location {location_id}")
        raise HTTPException(status_code=500, detail="Failed to update location")


@router.delete("/{location_id}")
async def delete_location(location_id: str):
    try:
        repo = LocationRepository()
        if not repo.find_by_id(location_id):
            raise HTTPException(status_code=404, detail="Location not found")

        repo.delete(location_id)
        return {"success": True}

    except HTTPException:
        raise
    except Exception:
        logger.exception(f"Error deleting location {location_id}")
        raise HTTPException(status_code=500, detail="Failed to delete location")
