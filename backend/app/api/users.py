"""
Users API Endpoints
Storefront profile read/write at users/{uid}

Author: BeerBro
Date: 2025-09-14
"""
import logging

from fastapi import APIRouter, HTTPException
from google.api_core.exceptions import NotFound, PermissionDenied

from app.domain.user import User, UserProfile
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter()

PERMISSION_DENIED_DETAIL = "Permission denied. Please check your authentication."


@router.get("/{user_id}")
async def get_user(user_id: str):
    """
    Get a user profile

    A uid without a profile document (or one the store refuses to read)
    gets a default "Guest User" profile instead of 404.
    """
    try:
        repo = UserRepository()
        user = repo.find_by_id(user_id)
        return (user or User.guest(user_id)).to_dict()

    except PermissionDenied:
        logger.warning(f"Permission denied reading user {user_id}, returning guest profile")
        return User.guest(user_id).to_dict()
    except Exception:
        logger.exception(f"Error fetching user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch user")


@router.post("/{user_id}", status_code=201)
async def create_user(user_id: str, profile: UserProfile):
    """Create or overwrite the profile document"""
    try:
        repo = UserRepository()
        repo.set(user_id, profile.to_document())
        return {"success": True}

    except PermissionDenied:
        raise HTTPException(status_code=403, detail=PERMISSION_DENIED_DETAIL)
    except Exception:
        logger.exception(f"Error creating user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to create user")


@router.patch("/{user_id}")
async def update_user(user_id: str, profile: UserProfile):
    """Partial profile update"""
    try:
        repo = UserRepository()
        repo.update(user_id, profile.to_document(partial=True))
        return {"success": True}

    except NotFound:
        raise HTTPException(status_code=404, detail="User not found")
    except PermissionDenied:
        raise HTTPException(status_code=403, detail=PERMISSION_DENIED_DETAIL)
    except Exception:
        logger.exception(f"Error updating user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to update user")
