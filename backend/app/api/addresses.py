"""
Saved Addresses API Endpoints
Delivery addresses under /api/users/{user_id}/addresses

Author: BeerBro
Date: 2025-09-14
"""
import logging

from fastapi import APIRouter, HTTPException
from google.api_core.exceptions import NotFound

from app.domain.address import AddressCreate, AddressUpdate
from app.repositories.address_repository import AddressRepository

logger = logging.getLogger(__name__)

router = APIRouter()


def _require_owned(repo: AddressRepository, user_id: str, address_id: str) -> None:
    if repo.find_for_user(user_id, address_id) is None:
        raise HTTPException(status_code=404, detail="Address not found")


@router.get("/{user_id}/addresses")
async def get_addresses(user_id: str):
    """Saved addresses of a user, default first"""
    try:
        repo = AddressRepository()
        return [address.to_dict() for address in repo.find_by_user(user_id)]

    except Exception:
        logger.exception(f"Error fetching addresses for user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch addresses")


@router.post("/{user_id}/addresses", status_code=201)
async def create_address(user_id: str, address: AddressCreate):
    """
    Save a new address

    When isDefault is true the user's previous default is unset first.
    """
    try:
        repo = AddressRepository()
        address_id = repo.add(user_id, address.to_document())
        return {"id": address_id}

    except Exception:
        logger.exception(f"Error creating address for user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to create address")


@router.get("/{user_id}/addresses/default")
async def get_default_address(user_id: str):
    try:
        repo = AddressRepository()
        address = repo.find_default(user_id)

        if not address:
            raise HTTPException(status_code=404, detail="No default address")

        return address.to_dict()

    except HTTPException:
        raise
    except Exception:
        logger.exception(f"Error fetching default address for user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch default address")


@router.patch("/{user_id}/addresses/{address_id}")
async def update_address(user_id: str, address_id: str, update: AddressUpdate):
    try:
        repo = AddressRepository()
        _require_owned(repo, user_id, address_id)
        repo.change(user_id, address_id, update.to_document(partial=True))
        return {"success": True}

    except HTTPException:
        raise
    except NotFound:
        raise HTTPException(status_code=404, detail="Address not found")
    except Exception:
        logger.exception(f"Error updating address {address_id}")
        raise HTTPException(status_code=500, detail="Failed to update address")


@router.delete("/{user_id}/addresses/{address_id}")
async def delete_address(user_id: str, address_id: str):
    try:
        repo = AddressRepository()
        _require_owned(repo, user_id, address_id)
        repo.delete(address_id)
        return {"success": True}

    except HTTPException:
        raise
    except Exception:
        logger.exception(f"Error deleting address {address_id}")
        raise HTTPException(status_code=500, detail="Failed to delete address")


@router.post("/{user_id}/addresses/{address_id}/default")
async def set_default_address(user_id: str, address_id: str):
    """Make this address the user's only default"""
    try:
        repo = AddressRepository()
        _require_owned(repo, user_id, address_id)
        repo.set_default(user_id, address_id)
        return {"success": True}

    except HTTPException:
        raise
    except NotFound:
        raise HTTPException(status_code=404, detail="Address not found")
    except Exception:
        logger.exception(f"Error setting default address {address_id}")
        raise HTTPException(status_code=500, detail="Failed to set default address")
